"""Logging for DroneComply.

All loggers live under the ``dronecomply`` namespace. Handlers are attached
once, to the namespace root, from ``Settings``; component loggers such as
``dronecomply.rbac`` only propagate to it.
"""

import logging
import logging.handlers
import os
from typing import Optional

from dronecomply.core.config import Settings, get_settings

ROOT_LOGGER = "dronecomply"


def setup_logger(settings: Optional[Settings] = None) -> logging.Logger:
    """Configure the ``dronecomply`` logger from application settings.

    Calling it again only re-applies the level; handlers are never duplicated.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.log_level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(settings.log_format, datefmt="%Y-%m-%dT%H:%M:%S")
    handlers: list = [logging.StreamHandler()]

    if settings.log_to_file:
        os.makedirs(settings.log_dir, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            os.path.join(settings.log_dir, f"{ROOT_LOGGER}.log"),
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(component: str) -> logging.Logger:
    """Get a component logger, e.g. "rbac" -> "dronecomply.rbac"."""
    if component == ROOT_LOGGER or component.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(component)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")
