"""
One-shot symmetric encryption/decryption over whole buffers.

The engine picks cipher parameters, builds the option bits (PKCS7
padding, ECB when no IV is given), allocates an output buffer of
``len(data) + block_size`` and hands everything to the primitive
provider. Only the bytes the provider reports as produced are returned.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from ...config.settings import Settings
from .cipher_factory import CipherKind, CipherParameterResolver, CipherParameters
from .constants import CipherOption, Operation, Status
from .errors import CipherOperationFailedError, InvalidInputError
from .openssl_provider import default_provider
from .provider_base import PrimitiveProvider

logger = logging.getLogger("EncryptKit.Cipher")


class Direction(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @property
    def operation(self) -> Operation:
        if self is Direction.ENCRYPT:
            return Operation.ENCRYPT
        return Operation.DECRYPT


@dataclass(frozen=True)
class CipherRequest:
    """
    A single encrypt or decrypt call.

    ``iv is None`` selects ECB; any IV selects CBC and must be exactly
    one block long.
    """
    data:       bytes
    key:        bytes
    direction:  Direction = Direction.ENCRYPT
    kind:       CipherKind = CipherKind.AES
    iv:         bytes | None = None
    no_padding: bool = False


@dataclass(frozen=True)
class CipherResult:
    data: bytes

    @property
    def length(self) -> int:
        return len(self.data)


def _normalize_key(key: bytes, size: int) -> bytes:
    """Read exactly *size* key bytes, zero-extending a short key."""
    if len(key) >= size:
        return bytes(key[:size])
    return bytes(key) + bytes(size - len(key))


class SymmetricCipherEngine:
    """
    Symmetric cipher front-end.

    Usage:
        engine = SymmetricCipherEngine(CipherKind.AES)
        ct = engine.encrypt(b"hello", key)           # ECB + PKCS7
        pt = engine.decrypt(ct, key)
        ct = engine.encrypt(b"hello", key, iv=iv16)  # CBC + PKCS7
    """

    def __init__(self, kind: CipherKind | None = None,
                 no_padding: bool = False,
                 provider: PrimitiveProvider | None = None):
        self.kind       = kind or CipherKind[Settings.DEFAULT_CIPHER]
        self.no_padding = no_padding
        self.provider   = provider or default_provider()

    # ── public API ───────────────────────────────────────────────
    def encrypt(self, data: bytes, key: bytes,
                iv: bytes | None = None) -> bytes:
        return self.transform(CipherRequest(
            data=data, key=key, direction=Direction.ENCRYPT,
            kind=self.kind, iv=iv, no_padding=self.no_padding,
        )).data

    def decrypt(self, data: bytes, key: bytes,
                iv: bytes | None = None) -> bytes:
        return self.transform(CipherRequest(
            data=data, key=key, direction=Direction.DECRYPT,
            kind=self.kind, iv=iv, no_padding=self.no_padding,
        )).data

    def transform(self, request: CipherRequest) -> CipherResult:
        if not request.data or not request.key:
            raise InvalidInputError(
                "The content to transform and the key must not be empty"
            )

        params  = CipherParameterResolver.resolve(request.kind,
                                                  len(request.key))
        options = self._options(request)
        iv      = self._check_iv(request.iv, params)

        capacity = len(request.data) + params.block_size
        buffer   = bytearray(capacity)

        status, moved = self.provider.crypt(
            request.direction.operation,
            params.algorithm,
            options,
            _normalize_key(request.key, params.normalized_key_size),
            iv,
            bytes(request.data),
            buffer,
        )

        if status != Status.SUCCESS:
            logger.warning(
                "%s %s failed: status=%s (data=%d bytes, key=%d bytes)",
                params.kind.value, request.direction.value,
                _status_name(status), len(request.data), len(request.key),
            )
            raise CipherOperationFailedError(status, _status_name(status))

        logger.debug(
            "%s %s: %d → %d bytes (mode=%s, padding=%s)",
            params.kind.value, request.direction.value,
            len(request.data), moved,
            "ECB" if options & CipherOption.ECB_MODE else "CBC",
            bool(options & CipherOption.PKCS7_PADDING),
        )
        return CipherResult(bytes(buffer[:moved]))

    # ── internal ─────────────────────────────────────────────────
    @staticmethod
    def _options(request: CipherRequest) -> CipherOption:
        options = CipherOption.NONE
        if not request.no_padding:
            options |= CipherOption.PKCS7_PADDING
        if request.iv is None:
            options |= CipherOption.ECB_MODE
        return options

    @staticmethod
    def _check_iv(iv: bytes | None, params: CipherParameters) -> bytes:
        if iv is None:
            return b""
        if params.is_stream:
            # stream ciphers take no IV; CCCrypt ignores it
            return b""
        if len(iv) != params.block_size:
            raise InvalidInputError(
                f"{params.kind.value} IV must be {params.block_size} "
                f"bytes, got {len(iv)}"
            )
        return bytes(iv)


def _status_name(status: int) -> str:
    try:
        return Status(status).name
    except ValueError:
        return str(status)
