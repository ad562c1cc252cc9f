import logging
import os

LOG_LEVEL_ENV = "RELCHECK_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _level_from_env() -> int:
    # Checkers run inside other projects' test suites, so stay quiet unless asked.
    # RELCHECK_LOG_LEVEL=DEBUG shows every violation and interleaving seed.
    level = getattr(logging, os.getenv(LOG_LEVEL_ENV, "WARNING").upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """Return a relcheck logger with a stream handler attached once."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_level_from_env())
    return logger
