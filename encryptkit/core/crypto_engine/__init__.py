"""
EncryptKit Crypto Engine — hashing, HMAC and symmetric ciphers over a
pluggable primitive provider.
"""

from .constants        import (Algorithm, CipherOption, DigestKind,
                               Operation, Status)
from .errors           import (CipherOperationFailedError, EncryptKitError,
                               FileOpenFailedError, FileReadError,
                               InvalidInputError, UnknownHashSourceError)
from .provider_base    import HashContext, PrimitiveProvider
from .openssl_provider import CryptographyProvider, default_provider
from .hash_crypto      import FileChunkReader, HashEngine, HashRequest
from .cipher_factory   import (CipherKind, CipherParameterResolver,
                               CipherParameters)
from .symmetric_engine import (CipherRequest, CipherResult, Direction,
                               SymmetricCipherEngine)

__all__ = [
    # Identifiers
    "Algorithm", "CipherOption", "DigestKind", "Operation", "Status",
    # Errors
    "EncryptKitError", "InvalidInputError", "UnknownHashSourceError",
    "FileOpenFailedError", "FileReadError", "CipherOperationFailedError",
    # Provider
    "HashContext", "PrimitiveProvider", "CryptographyProvider",
    "default_provider",
    # Hashing
    "HashEngine", "HashRequest", "FileChunkReader",
    # Symmetric
    "CipherKind", "CipherParameters", "CipherParameterResolver",
    "CipherRequest", "CipherResult", "Direction", "SymmetricCipherEngine",
]
