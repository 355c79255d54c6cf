import logging
import os

logger = logging.getLogger("EncryptKit.Settings")


def _env_int(name: str, default: int) -> int:
    """Positive integer from the environment, *default* when unset or bad."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning("Ignoring %s=%r, using %d", name, raw, default)
        return default
    return value


class Settings:
    """Centralised library configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "EncryptKit"
    APP_VERSION = "1.0.0"

    # ── hashing ──────────────────────────────────────────────────
    CHUNK_SIZE     = _env_int("ENCRYPTKIT_CHUNK_SIZE", 4096)
    DEFAULT_DIGEST = "MD5"

    # ── symmetric ciphers ────────────────────────────────────────
    DEFAULT_CIPHER = "AES"

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL   = os.environ.get("ENCRYPTKIT_LOG_LEVEL", "WARNING")
    LOG_FORMAT  = "[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s"
    LOG_DATEFMT = "%H:%M:%S"
