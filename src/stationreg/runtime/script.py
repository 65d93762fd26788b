"""Line-oriented command scripts driving a station registry.

One command per line; blank lines and ``#`` comments are skipped::

    add 1 10
    start 1
    total

Mutating commands (``add``, ``remove``, ``start``, ``stop``) print nothing.
Queries print one line each.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from ..core.errors import ScriptError, StationRegistryError
from ..core.registry import InMemoryStationRegistry

logger = logging.getLogger(__name__)


@dataclass
class ScriptResult:
    output: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _parse_int(token: str, *, line_number: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise ScriptError(f"expected an integer, got {token!r}", line_number) from None


def format_status(reg: InMemoryStationRegistry) -> str:
    snap = reg.snapshot()
    return (
        f"stations={snap.capacity} active={snap.num_active} "
        f"inactive={snap.num_inactive} total={snap.total_processing_time}"
    )


def _commands(reg: InMemoryStationRegistry) -> dict[str, tuple[int, bool, Callable[..., object]]]:
    # name -> (arity, prints result, handler)
    return {
        "add": (2, False, reg.add_station),
        "remove": (1, False, reg.remove_station),
        "start": (1, False, reg.start_assembly),
        "stop": (1, False, reg.stop_assembly),
        "time": (1, True, reg.get_processing_time),
        "active": (1, True, lambda sid: "true" if reg.is_station_active(sid) else "false"),
        "total": (0, True, reg.get_total_processing_time),
        "count": (0, True, lambda: f"{reg.get_num_active_stations()}/{reg.get_num_stations()}"),
        "status": (0, True, lambda: format_status(reg)),
    }


def parse_line(line: str) -> tuple[str, list[str]] | None:
    text = line.split("#", 1)[0].strip()
    if not text:
        return None
    name, *tokens = text.split()
    return name.lower(), tokens


def run_script(reg: InMemoryStationRegistry, lines: Iterable[str]) -> ScriptResult:
    """Apply every line to ``reg``.

    Registry errors are recorded and the script continues with the next line.
    Malformed lines raise ``ScriptError`` immediately.
    """
    commands = _commands(reg)
    result = ScriptResult()
    for line_number, line in enumerate(lines, start=1):
        parsed = parse_line(line)
        if parsed is None:
            continue
        name, tokens = parsed
        if name not in commands:
            raise ScriptError(f"unknown command {name!r}", line_number)
        arity, prints, handler = commands[name]
        if len(tokens) != arity:
            raise ScriptError(f"{name} takes {arity} argument(s), got {len(tokens)}", line_number)
        args = [_parse_int(t, line_number=line_number) for t in tokens]

        try:
            value = handler(*args)
        except StationRegistryError as ex:
            logger.info("Command failed: %s", ex, extra={"line_number": line_number})
            result.errors.append(f"line {line_number}: {ex}")
            continue
        if prints:
            result.output.append(str(value))
    return result
