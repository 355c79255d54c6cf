"""
Exception hierarchy for EncryptKit.

Every failure is raised to the caller; nothing returns an empty or
zero-filled digest/ciphertext in its place.
"""

from os import PathLike


class EncryptKitError(Exception):
    """Base class for all EncryptKit errors."""


class InvalidInputError(EncryptKitError, ValueError):
    """Empty data/key, malformed base64, bad IV length, etc."""


class UnknownHashSourceError(EncryptKitError, ValueError):
    """A hash request carries neither a buffer nor a file path."""


class FileOpenFailedError(EncryptKitError):

    def __init__(self, path: str | PathLike, reason: str = ""):
        self.path = path
        msg = f"Cannot open file: {path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class FileReadError(EncryptKitError):
    """A read failed part-way through a file; not the same as EOF."""

    def __init__(self, path: str | PathLike, reason: str = ""):
        self.path = path
        msg = f"Read failed while hashing: {path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class CipherOperationFailedError(EncryptKitError):
    """The primitive provider returned a non-success status."""

    def __init__(self, status: int, detail: str = ""):
        self.status = int(status)
        msg = f"Cipher operation failed with status {self.status}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
