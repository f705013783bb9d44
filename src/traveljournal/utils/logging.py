"""Structured JSON logging for traveljournal.

Events are written as JSON lines, one object per event, either to a log file
(``~/.cache/traveljournal/logs/traveljournal.log`` unless another path is
given) or to any text stream the caller hands in, e.g. ``sys.stderr`` or an
``io.StringIO`` in tests.

Event names are snake_case and carry their context as keywords:

    {"block_count": 4, "event": "draft_loaded", "level": "info",
     "timestamp": "2026-02-08T10:15:00.000000Z", "trip_id": "6f1c..."}

The level comes from TRAVELJOURNAL_LOG_LEVEL (DEBUG, INFO, WARNING or ERROR;
anything else means INFO):
- DEBUG: API request payloads and skipped block updates
- INFO: API requests, theme cache fills, config loading
- WARNING: theme fallbacks, blocks dropped by a partial reorder
- ERROR: API failures, config validation errors

Example:
    TRAVELJOURNAL_LOG_LEVEL=DEBUG traveljournal draft 6f1c...
    tail -f ~/.cache/traveljournal/logs/traveljournal.log | jq .
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

import structlog


DEFAULT_LOG_FILE = Path.home() / ".cache" / "traveljournal" / "logs" / "traveljournal.log"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# One append handle per log file, reused by every configure_logging call
_open_log_files: Dict[Path, TextIO] = {}


def _log_level() -> str:
    level = os.environ.get("TRAVELJOURNAL_LOG_LEVEL", "INFO").upper()
    return level if level in LOG_LEVELS else "INFO"


def _log_file_stream(log_file: Path) -> TextIO:
    path = log_file.expanduser().resolve()
    stream = _open_log_files.get(path)
    if stream is None or stream.closed:
        path.parent.mkdir(parents=True, exist_ok=True)
        stream = path.open("a", encoding="utf-8")
        _open_log_files[path] = stream
    return stream


def configure_logging(
    log_file: Optional[Path] = None, stream: Optional[TextIO] = None
) -> None:
    """
    Route traveljournal events to a JSON-lines log.

    Safe to call repeatedly: a log file already opened by an earlier call is
    reused, not reopened.

    Args:
        log_file: File to append to (default DEFAULT_LOG_FILE); ignored when
            ``stream`` is given
        stream: Text stream to write to instead of a file
    """
    if stream is None:
        stream = _log_file_stream(log_file or DEFAULT_LOG_FILE)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_log_level()),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=stream),
        # Module-level loggers must follow a later reconfiguration
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger for ``name`` (usually ``__name__``)."""
    return structlog.get_logger(name)
