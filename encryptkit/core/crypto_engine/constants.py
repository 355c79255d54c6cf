"""
Identifiers shared with the primitive provider.

Numeric values follow CommonCrypto (CommonCryptor.h / CommonHMAC.h) so
that algorithm ids, option bits and status codes line up with data and
logs produced by CommonCrypto-based clients.
"""

from enum import Enum, IntEnum, IntFlag


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Digests
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class DigestKind(Enum):
    MD5    = "MD5"
    SHA1   = "SHA1"
    SHA224 = "SHA224"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def hmac_algorithm(self) -> int:
        """CommonCrypto ``kCCHmacAlg*`` identifier."""
        return _HMAC_ALGORITHMS[self]


_DIGEST_SIZES = {
    DigestKind.MD5:    16,
    DigestKind.SHA1:   20,
    DigestKind.SHA224: 28,
    DigestKind.SHA256: 32,
    DigestKind.SHA384: 48,
    DigestKind.SHA512: 64,
}

_HMAC_ALGORITHMS = {
    DigestKind.SHA1:   0,
    DigestKind.MD5:    1,
    DigestKind.SHA256: 2,
    DigestKind.SHA384: 3,
    DigestKind.SHA512: 4,
    DigestKind.SHA224: 5,
}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Ciphers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Operation(IntEnum):
    ENCRYPT = 0
    DECRYPT = 1


class Algorithm(IntEnum):
    AES        = 0
    DES        = 1
    TRIPLE_DES = 2
    CAST       = 3
    RC4        = 4
    RC2        = 5
    BLOWFISH   = 6


class CipherOption(IntFlag):
    NONE          = 0x0000
    PKCS7_PADDING = 0x0001
    ECB_MODE      = 0x0002


class Status(IntEnum):
    SUCCESS          = 0
    PARAM_ERROR      = -4300
    BUFFER_TOO_SMALL = -4301
    MEMORY_FAILURE   = -4302
    ALIGNMENT_ERROR  = -4303
    DECODE_ERROR     = -4304
    UNIMPLEMENTED    = -4305
    OVERFLOW         = -4306
    RNG_FAILURE      = -4307
    UNSPECIFIED      = -4308
    CALL_SEQUENCE    = -4309
    KEY_SIZE_ERROR   = -4310
    INVALID_KEY      = -4311


# ── block sizes (bytes) ─────────────────────────────────────────
BLOCK_SIZE_AES      = 16
BLOCK_SIZE_DES      = 8
BLOCK_SIZE_3DES     = 8
BLOCK_SIZE_CAST     = 8
BLOCK_SIZE_RC2      = 8
BLOCK_SIZE_BLOWFISH = 8

# ── key sizes (bytes) ───────────────────────────────────────────
KEY_SIZE_AES128       = 16
KEY_SIZE_AES192       = 24
KEY_SIZE_AES256       = 32
KEY_SIZE_DES          = 8
KEY_SIZE_3DES         = 24
KEY_SIZE_MIN_CAST     = 5
KEY_SIZE_MAX_CAST     = 16
KEY_SIZE_MIN_RC4      = 1
KEY_SIZE_MAX_RC4      = 512
KEY_SIZE_MIN_RC2      = 1
KEY_SIZE_MAX_RC2      = 128
KEY_SIZE_MIN_BLOWFISH = 8
KEY_SIZE_MAX_BLOWFISH = 56
