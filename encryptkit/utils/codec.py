"""
String-oriented helpers over the hash and cipher engines.

Keys and encrypted payloads travel as base64; plaintext strings are
UTF-8. Note the deliberate asymmetry: ``encrypt_string`` returns base64
text while ``decrypt_string`` returns the raw decrypted bytes.
"""

import base64
import binascii

from ..config.settings import Settings
from ..core.crypto_engine.cipher_factory import CipherKind
from ..core.crypto_engine.constants import DigestKind
from ..core.crypto_engine.errors import InvalidInputError
from ..core.crypto_engine.hash_crypto import HashEngine, HashRequest
from ..core.crypto_engine.symmetric_engine import SymmetricCipherEngine


def _b64decode(value: str, what: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidInputError(f"{what} is not valid base64") from exc


def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _utf8(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidInputError("content is not valid UTF-8") from exc


class ConvenienceCodec:
    """Base64 / UTF-8 facade for callers that work with strings."""

    def __init__(self, kind: CipherKind | None = None,
                 no_padding: bool = False,
                 cipher_engine: SymmetricCipherEngine | None = None,
                 hash_engine: HashEngine | None = None):
        self.cipher = cipher_engine or SymmetricCipherEngine(kind, no_padding)
        self.hasher = hash_engine or HashEngine()

    # ── symmetric ────────────────────────────────────────────────
    def encrypt_string(self, content: str, key: str,
                       iv: bytes | None = None) -> str:
        """UTF-8 *content*, base64 *key* → base64 ciphertext."""
        key_data = _b64decode(key, "key")
        return _b64encode(self.cipher.encrypt(_utf8(content), key_data, iv))

    def decrypt_string(self, content: str, key: str,
                       iv: bytes | None = None) -> bytes:
        """Base64 *content*, base64 *key* → raw plaintext bytes."""
        data     = _b64decode(content, "content")
        key_data = _b64decode(key, "key")
        return self.cipher.decrypt(data, key_data, iv)

    def encrypt_bytes(self, data: bytes, key: str,
                      iv: bytes | None = None) -> str:
        return _b64encode(self.cipher.encrypt(data, _b64decode(key, "key"), iv))

    def decrypt_bytes(self, data: bytes, key: str,
                      iv: bytes | None = None) -> bytes:
        return self.cipher.decrypt(data, _b64decode(key, "key"), iv)

    # ── hashing ──────────────────────────────────────────────────
    def hex_digest(self, value: str | bytes,
                   kind: DigestKind | None = None,
                   hmac_key: bytes | None = None) -> str:
        kind = kind or DigestKind[Settings.DEFAULT_DIGEST]
        return self.hasher.hex_digest(
            HashRequest.for_data(_utf8(value), kind, hmac_key)
        )


_default_codec: ConvenienceCodec | None = None


def _codec() -> ConvenienceCodec:
    global _default_codec
    if _default_codec is None:
        _default_codec = ConvenienceCodec(CipherKind.AES)
    return _default_codec


# ── AES shortcuts (ECB + PKCS7) ─────────────────────────────────
def aes_encrypt(content: str | bytes, key: str) -> str:
    """AES-encrypt a UTF-8 string or raw bytes with a base64 key."""
    if isinstance(content, bytes):
        return _codec().encrypt_bytes(content, key)
    return _codec().encrypt_string(content, key)


def aes_decrypt(content: str | bytes, key: str) -> bytes:
    """
    AES-decrypt with a base64 key.

    ``str`` content is taken as base64 ciphertext, ``bytes`` as raw
    ciphertext.
    """
    if isinstance(content, bytes):
        return _codec().decrypt_bytes(content, key)
    return _codec().decrypt_string(content, key)


# ── hex digest shortcuts ─────────────────────────────────────────
def md5(value: str | bytes) -> str:
    return _codec().hex_digest(value, DigestKind.MD5)


def sha1(value: str | bytes) -> str:
    return _codec().hex_digest(value, DigestKind.SHA1)


def sha224(value: str | bytes) -> str:
    return _codec().hex_digest(value, DigestKind.SHA224)


def sha256(value: str | bytes) -> str:
    return _codec().hex_digest(value, DigestKind.SHA256)


def sha384(value: str | bytes) -> str:
    return _codec().hex_digest(value, DigestKind.SHA384)


def sha512(value: str | bytes) -> str:
    return _codec().hex_digest(value, DigestKind.SHA512)
