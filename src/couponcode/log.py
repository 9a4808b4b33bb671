"""Logging helpers shared by the couponcode modules."""

import logging
import os

ROOT_LOGGER_NAME = "couponcode"


def setup_logging(level=None):
    """Attach a stream handler to the package logger (once) and set its level."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()

        # Structured formatting
        formatter = logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if level is None:
            level = os.getenv("COUPONCODE_LOG_LEVEL", "WARNING")

    if level is not None:
        logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root, e.g. ``couponcode.generator``."""
    setup_logging()
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
