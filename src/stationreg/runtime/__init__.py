from __future__ import annotations

from .observability import JSONFormatter, setup_logging
from .script import ScriptResult, format_status, run_script

__all__ = ["JSONFormatter", "setup_logging", "ScriptResult", "format_status", "run_script"]
