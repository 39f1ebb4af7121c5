import logging
import os
import sys


def resolve_level(name, default=logging.INFO):
    """Map a level name such as ``"debug"`` to its number, or *default* if unknown."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


LOG_LEVEL_NAME = os.getenv("KANASEARCH_LOG_LEVEL", "INFO")

logger = logging.getLogger()
logger.setLevel(resolve_level(LOG_LEVEL_NAME))

stdout_handler = logging.StreamHandler(sys.stdout)
stderr_handler = logging.StreamHandler(sys.stderr)

# stdout carries command output too, so DEBUG records reach no handler
stdout_handler.setLevel(logging.INFO)
stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)  # INFO only
stderr_handler.setLevel(logging.WARNING)  # WARNING and above

formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
stdout_handler.setFormatter(formatter)
stderr_handler.setFormatter(formatter)

logger.addHandler(stdout_handler)
logger.addHandler(stderr_handler)

if resolve_level(LOG_LEVEL_NAME, default=None) is None:
    logger.warning(f"Unknown KANASEARCH_LOG_LEVEL {LOG_LEVEL_NAME!r}, using INFO")
