from __future__ import annotations

import argparse
import logging
import sys

from .core.errors import StationRegistryError
from .core.policy import CapacityPolicy
from .core.settings import RegistrySettings, create_registry
from .runtime.observability import setup_logging
from .runtime.script import format_status, run_script


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="stationreg", description="stationreg: run a station command script")
    p.add_argument("script", nargs="?", default="-", help="command file, or '-' for stdin")
    p.add_argument("--capacity", type=int, default=None, help="slot count (default: $STATIONREG_CAPACITY, else 0, which rejects every add under the reject policy)")
    p.add_argument("--policy", default=None, help="reject | slots (default: $STATIONREG_CAPACITY_POLICY)")
    p.add_argument("--log-level", default="WARNING")
    p.add_argument("--log-format", choices=("text", "json"), default="text")
    p.add_argument("--status", action="store_true", help="print a status line after the script")
    args = p.parse_args(argv)

    handler = setup_logging(args.log_level, args.log_format)
    try:
        return _run(args)
    finally:
        logging.root.removeHandler(handler)


def _run(args: argparse.Namespace) -> int:
    try:
        env = RegistrySettings.from_env()
        settings = RegistrySettings(
            capacity=env.capacity if args.capacity is None else args.capacity,
            policy=env.policy if args.policy is None else CapacityPolicy.from_any(args.policy),
        )
        reg = create_registry(settings)

        if args.script == "-":
            result = run_script(reg, sys.stdin)
        else:
            with open(args.script, encoding="utf-8") as f:
                result = run_script(reg, f)
    except (StationRegistryError, OSError) as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 2

    for line in result.output:
        print(line)
    if args.status:
        print(format_status(reg))
    for err in result.errors:
        print(f"error: {err}", file=sys.stderr)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
