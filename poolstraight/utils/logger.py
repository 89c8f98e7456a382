import sys
import logging

# --------------------------------------------------------
# Create a unified logger for all PoolStraight modules
# --------------------------------------------------------
LOGGER_NAME = "poolstraight"
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.DEBUG)     # Allow all levels

# If no handlers exist, add one (avoid duplicate logs)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stderr)  # stdout carries replay output
    handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

logger.propagate = False  # Host application owns the root logger


def set_level(level):
    """
    Adjust console verbosity (e.g. logging.DEBUG for per-frame traces).
    """
    for h in logger.handlers:
        h.setLevel(level)


# --------------------------------------------------------
# Explicit level helpers
# --------------------------------------------------------
def debug(msg):
    logger.debug(msg)

def info(msg):
    logger.info(msg)

def warn(msg):
    logger.warning(msg)

def error(msg):
    logger.error(msg)
