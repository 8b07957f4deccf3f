"""Package-wide logger."""
import logging
import sys

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger: logging.Logger = logging.getLogger("arithmetic_web_server")

if not logger.handlers:
    # Avoid duplicate handlers when the module is re-imported (e.g. by the Flask reloader)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.INFO)
