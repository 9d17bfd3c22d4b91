# city_guide/core/logging_config.py

import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("city_guide")
logger.setLevel(logging.INFO)

console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

if not logger.handlers:
    logger.addHandler(console_handler)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Apply the configured level. Set LOG_LEVEL=DEBUG to see raw provider
    payloads.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        logger.warning(f"Unknown LOG_LEVEL {level!r}, keeping INFO")
        numeric = logging.INFO

    logger.setLevel(numeric)
    return logger
