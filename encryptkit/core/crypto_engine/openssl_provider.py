"""
Default primitive provider backed by the ``cryptography`` package.

Digests and HMAC come from ``cryptography.hazmat.primitives``; AES from
the primitive cipher algorithms and the legacy ciphers (DES, 3DES,
CAST5, RC4, Blowfish) from ``cryptography.hazmat.decrepit``. RC2 runs
on pycryptodome, which accepts every key length from 5 to 128 bytes in
both ECB and CBC mode.

Failures are reported as CommonCrypto status codes instead of being
raised, so the cipher engine sees exactly the same contract it would
see from CCCrypt().
"""

import logging

import cryptography
from Crypto.Cipher import ARC2
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac
from cryptography.hazmat.primitives import padding as sym_padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.decrepit.ciphers import algorithms as legacy

from .constants import Algorithm, CipherOption, DigestKind, Operation, Status
from .provider_base import HashContext, PrimitiveProvider

logger = logging.getLogger("EncryptKit.Provider")


_DIGESTS = {
    DigestKind.MD5:    hashes.MD5,
    DigestKind.SHA1:   hashes.SHA1,
    DigestKind.SHA224: hashes.SHA224,
    DigestKind.SHA256: hashes.SHA256,
    DigestKind.SHA384: hashes.SHA384,
    DigestKind.SHA512: hashes.SHA512,
}


def _single_des(key: bytes):
    # DES is 3DES with K1 == K2 == K3
    return legacy.TripleDES(key * 3)


# Each entry: (algorithm factory, block size in bytes or None for stream)
_CIPHERS: dict = {
    Algorithm.AES:        (algorithms.AES,  16),
    Algorithm.DES:        (_single_des,      8),
    Algorithm.TRIPLE_DES: (legacy.TripleDES, 8),
    Algorithm.CAST:       (legacy.CAST5,     8),
    Algorithm.RC4:        (legacy.ARC4,   None),
    Algorithm.RC2:        (None,             8),
    Algorithm.BLOWFISH:   (legacy.Blowfish,  8),
}

# Key lengths used when checking whether OpenSSL can run an algorithm.
_CHECK_KEY_SIZES = {
    Algorithm.AES:        16,
    Algorithm.DES:        8,
    Algorithm.TRIPLE_DES: 24,
    Algorithm.CAST:       16,
    Algorithm.RC4:        16,
    Algorithm.RC2:        16,
    Algorithm.BLOWFISH:   16,
}


class _CryptographyHashContext(HashContext):
    """Adapts ``hashes.Hash`` / ``hmac.HMAC`` to the provider contract."""

    def __init__(self, ctx, digest_size: int):
        self._ctx         = ctx
        self._digest_size = digest_size

    def update(self, data: bytes) -> None:
        self._ctx.update(data)

    def finalize(self) -> bytes:
        return self._ctx.finalize()

    @property
    def digest_size(self) -> int:
        return self._digest_size


class _OpenSSLCipher:
    """One ``cryptography`` cipher in a fixed mode."""

    def __init__(self, algo, mode):
        self._algo = algo
        self._mode = mode

    def encrypt(self, data: bytes) -> bytes:
        enc = Cipher(self._algo, self._mode).encryptor()
        return enc.update(data) + enc.finalize()

    def decrypt(self, data: bytes) -> bytes:
        dec = Cipher(self._algo, self._mode).decryptor()
        return dec.update(data) + dec.finalize()


class _Rc2Cipher:
    """
    RC2 on pycryptodome.

    The effective key length follows the key: 8 bits per key byte,
    within pycryptodome's 40..1024 range. Raises ``ValueError`` for
    keys shorter than 5 bytes.
    """

    def __init__(self, key: bytes, iv: bytes | None):
        self._key       = key
        self._iv        = iv
        self._effective = min(max(len(key) * 8, 40), 1024)
        self._new()  # rejects a bad key length now

    def _new(self):
        if self._iv is None:
            return ARC2.new(self._key, ARC2.MODE_ECB,
                            effective_keylen=self._effective)
        return ARC2.new(self._key, ARC2.MODE_CBC, iv=self._iv,
                        effective_keylen=self._effective)

    def encrypt(self, data: bytes) -> bytes:
        return self._new().encrypt(data)

    def decrypt(self, data: bytes) -> bytes:
        return self._new().decrypt(data)


def _build_cipher(algorithm: Algorithm, key: bytes, iv: bytes | None):
    """*iv* None selects ECB for block ciphers; stream ciphers ignore it."""
    factory, block_size = _CIPHERS[algorithm]
    if algorithm == Algorithm.RC2:
        return _Rc2Cipher(key, iv)
    if block_size is None:
        mode = None
    elif iv is None:
        mode = modes.ECB()
    else:
        mode = modes.CBC(iv)
    return _OpenSSLCipher(factory(key), mode)


class CryptographyProvider(PrimitiveProvider):
    """Primitive provider using pyca/cryptography (OpenSSL) and pycryptodome."""

    def __init__(self):
        self._available: frozenset | None = None

    # ── hashing ──────────────────────────────────────────────────
    def digest_context(self, kind: DigestKind) -> HashContext:
        algo = _DIGESTS[kind]()
        return _CryptographyHashContext(hashes.Hash(algo), algo.digest_size)

    def hmac_context(self, kind: DigestKind, key: bytes) -> HashContext:
        algo = _DIGESTS[kind]()
        return _CryptographyHashContext(
            crypto_hmac.HMAC(key, algo), algo.digest_size
        )

    # ── one-shot cipher ──────────────────────────────────────────
    def crypt(self, operation: Operation, algorithm: Algorithm,
              options: CipherOption, key: bytes, iv: bytes,
              data_in: bytes, data_out: bytearray) -> tuple[int, int]:
        entry = _CIPHERS.get(algorithm)
        if entry is None:
            logger.warning("Algorithm %s is not implemented", algorithm.name)
            return Status.UNIMPLEMENTED, 0
        _, block_size = entry

        if block_size is None:
            # stream cipher: mode and padding do not apply
            cipher_iv = None
            padding   = False
        else:
            if iv and len(iv) != block_size:
                return Status.PARAM_ERROR, 0
            if options & CipherOption.ECB_MODE:
                cipher_iv = None
            else:
                # CCCrypt uses an all-zero IV when none is supplied
                cipher_iv = iv or bytes(block_size)
            padding = bool(options & CipherOption.PKCS7_PADDING)

        try:
            cipher = _build_cipher(algorithm, key, cipher_iv)
        except ValueError:
            return Status.KEY_SIZE_ERROR, 0

        if block_size is not None and \
                (not padding or operation == Operation.DECRYPT) and \
                len(data_in) % block_size:
            return Status.ALIGNMENT_ERROR, 0

        try:
            if operation == Operation.ENCRYPT:
                out = self._encrypt(cipher, block_size, padding, data_in)
            else:
                out = self._decrypt(cipher, block_size, padding, data_in)
        except UnsupportedAlgorithm as exc:
            logger.warning("%s unsupported by backend: %s",
                           algorithm.name, exc)
            return Status.UNIMPLEMENTED, 0
        except ValueError:
            # only the PKCS7 unpadder raises here
            return Status.DECODE_ERROR, 0

        if len(out) > len(data_out):
            return Status.BUFFER_TOO_SMALL, len(out)

        data_out[:len(out)] = out
        return Status.SUCCESS, len(out)

    @staticmethod
    def _encrypt(cipher, block_size, padding, data: bytes) -> bytes:
        if padding:
            padder = sym_padding.PKCS7(block_size * 8).padder()
            data   = padder.update(data) + padder.finalize()
        return cipher.encrypt(data)

    @staticmethod
    def _decrypt(cipher, block_size, padding, data: bytes) -> bytes:
        padded = cipher.decrypt(data)
        if not padding:
            return padded
        unpad = sym_padding.PKCS7(block_size * 8).unpadder()
        return unpad.update(padded) + unpad.finalize()

    # ── discovery ────────────────────────────────────────────────
    def available_algorithms(self) -> frozenset:
        """Algorithms the installed backends can actually run."""
        if self._available is None:
            self._available = frozenset(
                a for a in Algorithm if self._can_run(a)
            )
            logger.debug(
                "Available cipher algorithms: %s",
                ", ".join(a.name for a in sorted(self._available)),
            )
        return self._available

    def is_available(self, algorithm: Algorithm) -> bool:
        return algorithm in self.available_algorithms()

    def _can_run(self, algorithm: Algorithm) -> bool:
        entry = _CIPHERS.get(algorithm)
        if entry is None:
            return False
        _, block_size = entry
        if block_size is None:
            candidates = [None]
        else:
            candidates = [None, bytes(block_size)]
        key = bytes(_CHECK_KEY_SIZES[algorithm])
        for iv in candidates:
            try:
                _build_cipher(algorithm, key, iv).encrypt(
                    bytes(block_size or 1)
                )
            except UnsupportedAlgorithm:
                continue
            return True
        return False

    @property
    def name(self) -> str:
        return f"cryptography {cryptography.__version__}"

    def info(self) -> dict:
        base = super().info()
        base["ciphers"] = [a.name for a in sorted(self.available_algorithms())]
        return base


_default_provider: CryptographyProvider | None = None


def default_provider() -> CryptographyProvider:
    """Shared stateless provider instance."""
    global _default_provider
    if _default_provider is None:
        _default_provider = CryptographyProvider()
    return _default_provider
