"""
Abstract primitive provider for EncryptKit.

The engines never touch cipher or hash math directly. They talk to a
provider through this interface, which mirrors the CommonCrypto calling
convention:

    digest context  → update() … finalize()
    HMAC context    → update() … finalize()
    crypt()         → one-shot block/stream cipher transform that
                      writes into a caller-owned buffer and reports
                      (status, bytes moved)
"""

from abc import ABC, abstractmethod

from .constants import Algorithm, CipherOption, DigestKind, Operation


class HashContext(ABC):
    """Streaming digest or HMAC state, owned by a single hashing call."""

    @abstractmethod
    def update(self, data: bytes) -> None:
        """Feed the next chunk."""

    @abstractmethod
    def finalize(self) -> bytes:
        """Return the digest; the context is unusable afterwards."""

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Digest length in bytes."""


class PrimitiveProvider(ABC):
    """Unified interface for the trusted crypto primitives."""

    @abstractmethod
    def digest_context(self, kind: DigestKind) -> HashContext:
        """Start an unkeyed digest."""

    @abstractmethod
    def hmac_context(self, kind: DigestKind, key: bytes) -> HashContext:
        """Start an HMAC keyed with *key*."""

    @abstractmethod
    def crypt(self, operation: Operation, algorithm: Algorithm,
              options: CipherOption, key: bytes, iv: bytes,
              data_in: bytes, data_out: bytearray) -> tuple[int, int]:
        """
        Run a one-shot cipher transform.

        Parameters
        ----------
        key : bytes
            Exactly the normalized key size for *algorithm*.
        iv : bytes
            ``b""`` means no IV.
        data_out : bytearray
            Caller-allocated output; its length is the capacity.

        Returns
        -------
        (status, moved)
            ``status`` is a ``Status`` value (0 on success); ``moved``
            is the number of bytes written to *data_out*.
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name."""

    def digest(self, kind: DigestKind, data: bytes) -> bytes:
        ctx = self.digest_context(kind)
        ctx.update(data)
        return ctx.finalize()

    def hmac(self, kind: DigestKind, key: bytes, data: bytes) -> bytes:
        ctx = self.hmac_context(kind, key)
        ctx.update(data)
        return ctx.finalize()

    def info(self) -> dict:
        """Return provider metadata."""
        return {
            "name":    self.name,
            "digests": [k.value for k in DigestKind],
        }
