"""
Cryptographically-secure random data and key generators.
"""

import base64
import os
from enum import Enum

from ..core.crypto_engine.cipher_factory import CipherKind, CipherParameterResolver
from ..core.crypto_engine.errors import InvalidInputError


class KeyKind(Enum):
    AES128     = 16
    AES192     = 24
    AES256     = 32
    DES        = 8
    TRIPLE_DES = 24

    @property
    def length(self) -> int:
        return self.value


class SecureRandom:

    @staticmethod
    def random_data(length: int) -> bytes:
        if length < 0:
            raise InvalidInputError(f"length must be >= 0, got {length}")
        return os.urandom(length)

    @staticmethod
    def random_key(length: int) -> str:
        """Random key of *length* bytes, base64-encoded."""
        return base64.b64encode(SecureRandom.random_data(length)).decode()

    @staticmethod
    def generate_key(key_kind: KeyKind) -> str:
        return SecureRandom.random_key(key_kind.length)

    @staticmethod
    def generate_iv(kind: CipherKind = CipherKind.AES) -> bytes:
        return os.urandom(CipherParameterResolver.block_size(kind))
