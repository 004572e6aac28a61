import contextvars
import json
import logging
from contextlib import contextmanager

_session_id_ctx = contextvars.ContextVar("session_id", default=None)

# `extra=` keys the loader and session attach to their log calls.
EXTRA_FIELDS = ("columns", "execution_time_ms")


class SessionContextFilter(logging.Filter):
    """Stamps each record with the id of the browser session that emitted it."""

    def filter(self, record):
        record.session_id = _session_id_ctx.get()
        return True


@contextmanager
def session_context(session_id: str):
    """Binds ``session_id`` to every log line emitted inside the block.

    Worker threads see the id only if they run in a copy of this context.
    """
    token = _session_id_ctx.set(session_id)
    try:
        yield
    finally:
        _session_id_ctx.reset(token)


class JsonFormatter(logging.Formatter):
    """One JSON object per line: level, logger, message, session and load details."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if getattr(record, "session_id", None):
            entry["session_id"] = record.session_id
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                entry[key] = getattr(record, key)
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: str = "INFO", json_format: bool = False):
    """Replaces the root handler with one stream handler for the browser.

    Args:
        level (str): Logging level name, case-insensitive.
        json_format (bool): Emit JSON lines instead of plain text.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.addFilter(SessionContextFilter())
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - [%(session_id)s] - %(name)s - %(levelname)s - %(message)s"
        ))
    root_logger.addHandler(handler)

    # SQLAlchemy echoes every statement at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
