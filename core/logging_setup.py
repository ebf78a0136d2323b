from __future__ import annotations

import logging
import sys

# Loggers owned by this project; everything else is third-party.
_PROJECT_PREFIXES = ("core.", "patterns.", "todo.")


class _ThirdPartyNoiseFilter(logging.Filter):
    """
    Keep our own logs at the handler level, but only let third-party
    loggers (sqlalchemy, asyncpg, aiosqlite, ...) through at WARNING+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(_PROJECT_PREFIXES):
            return True

        # Python warnings captured into logging.
        if record.name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.WARNING


def setup_logging(*, level: int = logging.INFO, stream=None) -> logging.Handler:
    """
    Configure root logging with one stderr handler.

    Call this ONCE, early, from whatever process hosts the service.
    Returns the installed handler.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.addFilter(_ThirdPartyNoiseFilter())
    root.addHandler(handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    return handler
