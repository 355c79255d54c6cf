"""
Console logging for applications embedding EncryptKit.
"""

import logging

from ..config.settings import Settings

_HANDLER_NAME = "encryptkit-console"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a console handler to the ``EncryptKit`` logger.

    Calling it again only updates the level.
    """
    root_logger = logging.getLogger(Settings.APP_NAME)
    root_logger.setLevel(level if level is not None else Settings.LOG_LEVEL)

    if not any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(
            Settings.LOG_FORMAT,
            datefmt=Settings.LOG_DATEFMT,
        ))
        root_logger.addHandler(console_handler)

    return root_logger
