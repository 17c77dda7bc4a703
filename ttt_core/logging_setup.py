import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def default_log_level() -> str:
    return (os.getenv("LOG_LEVEL", "WARNING") or "WARNING").upper()


def setup_logging(level: str | None = None) -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel((level or default_log_level()).upper())

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(stream_handler)
