"""
Hashing and HMAC over in-memory buffers and files.

Files are never loaded whole: they are read in fixed-size chunks and
fed through a digest (or HMAC) context's update/finalize sequence.
"""

import logging
import os
from dataclasses import dataclass
from os import PathLike

from ...config.settings import Settings
from .constants import DigestKind
from .errors import (
    FileOpenFailedError,
    FileReadError,
    InvalidInputError,
    UnknownHashSourceError,
)
from .openssl_provider import default_provider
from .provider_base import HashContext, PrimitiveProvider

logger = logging.getLogger("EncryptKit.HashEngine")


@dataclass(frozen=True)
class HashRequest:
    """
    What to hash and how.

    Exactly one of ``data`` / ``file_path`` must be set. ``hmac_key``
    selects HMAC whenever it is not ``None`` (an empty key is still a key).
    """
    data:      bytes | None = None
    file_path: str | PathLike | None = None
    kind:      DigestKind = DigestKind.MD5
    hmac_key:  bytes | None = None

    def __post_init__(self):
        if self.data is None and self.file_path is None:
            raise UnknownHashSourceError(
                "Hash request needs either data or a file path"
            )
        if self.data is not None and self.file_path is not None:
            raise InvalidInputError(
                "Hash request takes data or a file path, not both"
            )

    @classmethod
    def for_data(cls, data: bytes, kind: DigestKind = DigestKind.MD5,
                 hmac_key: bytes | None = None) -> "HashRequest":
        return cls(data=data, kind=kind, hmac_key=hmac_key)

    @classmethod
    def for_file(cls, file_path: str | PathLike,
                 kind: DigestKind = DigestKind.MD5,
                 hmac_key: bytes | None = None) -> "HashRequest":
        return cls(file_path=file_path, kind=kind, hmac_key=hmac_key)


class FileChunkReader:
    """
    Sequential fixed-size reader over a file.

    Use as a context manager; iterating yields non-empty chunks until
    end of file. A failed read raises ``FileReadError`` instead of
    looking like end of file.
    """

    def __init__(self, path: str | PathLike, chunk_size: int):
        if chunk_size <= 0:
            raise InvalidInputError(
                f"chunk_size must be positive, got {chunk_size}"
            )
        self.path       = path
        self.chunk_size = chunk_size
        self._fh        = None

    def __enter__(self) -> "FileChunkReader":
        try:
            self._fh = open(self.path, "rb")
        except OSError as exc:
            raise FileOpenFailedError(self.path, exc.strerror or str(exc)) \
                from exc
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __iter__(self):
        if self._fh is None:
            raise FileReadError(self.path, "reader is not open")
        while True:
            try:
                chunk = self._fh.read(self.chunk_size)
            except OSError as exc:
                raise FileReadError(self.path, exc.strerror or str(exc)) \
                    from exc
            if not chunk:
                return
            yield chunk


class HashEngine:
    """Digest / HMAC calculator for buffers and files."""

    def __init__(self, provider: PrimitiveProvider | None = None,
                 chunk_size: int | None = None):
        if chunk_size is None:
            chunk_size = Settings.CHUNK_SIZE
        if chunk_size <= 0:
            raise InvalidInputError(
                f"chunk_size must be positive, got {chunk_size}"
            )
        self.provider   = provider or default_provider()
        self.chunk_size = chunk_size

    # ── public API ───────────────────────────────────────────────
    def digest(self, request: HashRequest) -> bytes:
        kind = request.kind
        if request.data is not None:
            if request.hmac_key is not None:
                logger.debug("HMAC-%s over %d bytes",
                             kind.value, len(request.data))
                return self.provider.hmac(kind, request.hmac_key,
                                          request.data)
            logger.debug("%s over %d bytes", kind.value, len(request.data))
            return self.provider.digest(kind, request.data)

        if request.file_path is not None:
            if request.hmac_key is not None:
                ctx = self.provider.hmac_context(kind, request.hmac_key)
            else:
                ctx = self.provider.digest_context(kind)
            return self._digest_file(request.file_path, ctx)

        raise UnknownHashSourceError(
            "Hash request needs either data or a file path"
        )

    def hex_digest(self, request: HashRequest) -> str:
        return self.digest(request).hex()

    def digest_bytes(self, data: bytes, kind: DigestKind = DigestKind.MD5,
                     hmac_key: bytes | None = None) -> bytes:
        return self.digest(HashRequest.for_data(data, kind, hmac_key))

    def digest_file(self, file_path: str | PathLike,
                    kind: DigestKind = DigestKind.MD5,
                    hmac_key: bytes | None = None) -> bytes:
        return self.digest(HashRequest.for_file(file_path, kind, hmac_key))

    # ── internal ─────────────────────────────────────────────────
    def _digest_file(self, path: str | PathLike, ctx: HashContext) -> bytes:
        total = 0
        with FileChunkReader(path, self.chunk_size) as reader:
            for chunk in reader:
                ctx.update(chunk)
                total += len(chunk)
        logger.debug("Hashed %s (%d bytes, chunk=%d)",
                     os.fspath(path), total, self.chunk_size)
        return ctx.finalize()
