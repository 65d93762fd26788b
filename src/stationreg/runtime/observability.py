"""Logging setup for the command-line entry point.

The library never installs handlers itself. The registry writes to its own
module logger, or to whichever logger the caller injects.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes passed through ``extra=`` that are worth keeping in JSON output.
EXTRA_FIELDS = ("station_id", "line_number")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({k: record.__dict__[k] for k in EXTRA_FIELDS if record.__dict__.get(k) is not None})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Attach one stderr handler to the root logger and return it.

    ``fmt`` is ``"json"`` for one object per line, anything else for plain
    text. Unknown level names fall back to WARNING. The caller owns the
    returned handler and removes it when the run is over.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    return handler
