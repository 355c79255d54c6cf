"""
CipherParameterResolver — maps a cipher kind and a supplied key length
to the algorithm id, block size and key size the provider will use.

Usage:
    params = CipherParameterResolver.resolve(CipherKind.AES, len(key))
    params.normalized_key_size   # 16, 24 or 32

    for kind in CipherParameterResolver.list_kinds():
        print(CipherParameterResolver.get_info(kind))
"""

import logging
from dataclasses import dataclass
from enum import Enum

from . import constants as cc
from .constants import Algorithm
from .errors import InvalidInputError

logger = logging.getLogger("EncryptKit.CipherFactory")


class CipherKind(Enum):
    AES        = "AES"
    DES        = "DES"
    TRIPLE_DES = "3DES"
    CAST       = "CAST"
    RC4        = "RC4"
    RC2        = "RC2"
    BLOWFISH   = "BLOWFISH"


@dataclass(frozen=True)
class CipherParameters:
    kind:                CipherKind
    algorithm:           Algorithm
    block_size:          int
    normalized_key_size: int
    is_stream:           bool = False


def _aes_key_size(length: int) -> int:
    if length <= cc.KEY_SIZE_AES128:
        return cc.KEY_SIZE_AES128
    if length <= cc.KEY_SIZE_AES192:
        return cc.KEY_SIZE_AES192
    return cc.KEY_SIZE_AES256


class CipherParameterResolver:
    """
    Resolve per-algorithm cipher parameters.

    Key sizes are normalized exactly as CommonCrypto callers expect:
    AES rounds up to 16/24/32, DES and 3DES are fixed, the variable
    key-length ciphers clamp into their [min, max] range.
    """

    # ── Registry ─────────────────────────────────────────────────
    # Each entry: algorithm id, block size, key range, stream flag
    _REGISTRY: dict[CipherKind, dict] = {
        CipherKind.AES: {
            "algorithm":  Algorithm.AES,
            "block_size": cc.BLOCK_SIZE_AES,
            "min_key":    cc.KEY_SIZE_AES128,
            "max_key":    cc.KEY_SIZE_AES256,
            "stream":     False,
        },
        CipherKind.DES: {
            "algorithm":  Algorithm.DES,
            "block_size": cc.BLOCK_SIZE_DES,
            "min_key":    cc.KEY_SIZE_DES,
            "max_key":    cc.KEY_SIZE_DES,
            "stream":     False,
        },
        CipherKind.TRIPLE_DES: {
            "algorithm":  Algorithm.TRIPLE_DES,
            "block_size": cc.BLOCK_SIZE_3DES,
            "min_key":    cc.KEY_SIZE_3DES,
            "max_key":    cc.KEY_SIZE_3DES,
            "stream":     False,
        },
        CipherKind.CAST: {
            "algorithm":  Algorithm.CAST,
            "block_size": cc.BLOCK_SIZE_CAST,
            "min_key":    cc.KEY_SIZE_MIN_CAST,
            "max_key":    cc.KEY_SIZE_MAX_CAST,
            "stream":     False,
        },
        # RC4 has no block; the RC2 block size only sizes the buffer
        CipherKind.RC4: {
            "algorithm":  Algorithm.RC4,
            "block_size": cc.BLOCK_SIZE_RC2,
            "min_key":    cc.KEY_SIZE_MIN_RC4,
            "max_key":    cc.KEY_SIZE_MAX_RC4,
            "stream":     True,
        },
        CipherKind.RC2: {
            "algorithm":  Algorithm.RC2,
            "block_size": cc.BLOCK_SIZE_RC2,
            "min_key":    cc.KEY_SIZE_MIN_RC2,
            "max_key":    cc.KEY_SIZE_MAX_RC2,
            "stream":     False,
        },
        CipherKind.BLOWFISH: {
            "algorithm":  Algorithm.BLOWFISH,
            "block_size": cc.BLOCK_SIZE_BLOWFISH,
            "min_key":    cc.KEY_SIZE_MIN_BLOWFISH,
            "max_key":    cc.KEY_SIZE_MAX_BLOWFISH,
            "stream":     False,
        },
    }

    # ── Resolution ───────────────────────────────────────────────

    @classmethod
    def resolve(cls, kind: CipherKind,
                supplied_key_length: int) -> CipherParameters:
        """
        Parameters
        ----------
        kind : CipherKind
        supplied_key_length : int
            Length of the caller's raw key in bytes.

        Returns
        -------
        CipherParameters
            ``normalized_key_size`` may be larger than the supplied
            length; the engine zero-extends the key in that case.
        """
        info = cls._lookup(kind)

        if kind is CipherKind.AES:
            key_size = _aes_key_size(supplied_key_length)
        else:
            key_size = min(max(supplied_key_length, info["min_key"]),
                           info["max_key"])

        params = CipherParameters(
            kind=kind,
            algorithm=info["algorithm"],
            block_size=info["block_size"],
            normalized_key_size=key_size,
            is_stream=info["stream"],
        )
        logger.debug(
            "Resolved %s: supplied key=%d → %d bytes, block=%d",
            kind.value, supplied_key_length, key_size, params.block_size,
        )
        return params

    # ── Discovery ────────────────────────────────────────────────

    @classmethod
    def list_kinds(cls) -> list[CipherKind]:
        return list(cls._REGISTRY)

    @classmethod
    def get_info(cls, kind: CipherKind) -> dict:
        """Return metadata for a cipher kind."""
        info = cls._lookup(kind)
        return {
            "name":        kind.value,
            "algorithm":   int(info["algorithm"]),
            "block_bytes": info["block_size"],
            "min_key":     info["min_key"],
            "max_key":     info["max_key"],
            "stream":      info["stream"],
        }

    @classmethod
    def block_size(cls, kind: CipherKind) -> int:
        return cls._lookup(kind)["block_size"]

    @classmethod
    def _lookup(cls, kind: CipherKind) -> dict:
        if kind not in cls._REGISTRY:
            raise InvalidInputError(f"Unknown cipher: {kind}")
        return cls._REGISTRY[kind]
