import logging
import sys
import contextvars
from typing import Optional

from colorlog import ColoredFormatter

from src.utils.config import load_settings

# -------------------------------------------------
# Correlation ID (ECID) for one composition request
# -------------------------------------------------
ecid_var = contextvars.ContextVar("ecid", default="-")


class ECIDFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.ecid = ecid_var.get()
        return True


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Configure colored terminal logging with ECID support.
    Safe to call multiple times (UI reruns).
    Level defaults to EMAIL_COMPOSER_LOG_LEVEL.
    """
    if level is None:
        level = load_settings().log_level

    root = logging.getLogger()
    root.setLevel(level)

    if not any(isinstance(h.formatter, ColoredFormatter) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)

        handler.addFilter(ECIDFilter())

        handler.setFormatter(
            ColoredFormatter(
                "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s "
                "%(light_black)secid=%(ecid)s%(reset)s %(name)s:%(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                log_colors={
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "bold_red",
                },
            )
        )

        root.addHandler(handler)

    logger = logging.getLogger("EmailComposer")
    logger.setLevel(level)
    logger.propagate = True

    return logger
