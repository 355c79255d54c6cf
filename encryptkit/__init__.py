"""
EncryptKit — hashing, HMAC and symmetric encryption helpers.
"""

from .config.settings import Settings
from .core.crypto_engine import (
    CipherKind, CipherOperationFailedError, CipherParameterResolver,
    CipherRequest, CipherResult, DigestKind, Direction, EncryptKitError,
    FileOpenFailedError, FileReadError, HashEngine, HashRequest,
    InvalidInputError, SymmetricCipherEngine, UnknownHashSourceError,
)
from .utils.codec import (ConvenienceCodec, aes_decrypt, aes_encrypt, md5,
                          sha1, sha224, sha256, sha384, sha512)
from .utils.log_setup import configure_logging
from .utils.random_gen import KeyKind, SecureRandom

__version__ = Settings.APP_VERSION

__all__ = [
    "Settings",
    "HashEngine", "HashRequest", "DigestKind",
    "SymmetricCipherEngine", "CipherRequest", "CipherResult",
    "CipherKind", "CipherParameterResolver", "Direction",
    "ConvenienceCodec", "aes_encrypt", "aes_decrypt",
    "md5", "sha1", "sha224", "sha256", "sha384", "sha512",
    "KeyKind", "SecureRandom", "configure_logging",
    "EncryptKitError", "InvalidInputError", "UnknownHashSourceError",
    "FileOpenFailedError", "FileReadError", "CipherOperationFailedError",
]
