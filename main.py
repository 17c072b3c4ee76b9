"""
Runs the finnish-pic HTTP service (api.main:app) under uvicorn.

Usage:
    python main.py
    python main.py --host 0.0.0.0 --port 8080 --log-level debug
"""

from __future__ import annotations

import argparse
import os

import uvicorn

_LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]
_LOG_LEVEL_ALIASES = {"warn": "warning", "fatal": "critical"}


def _log_level(value: str) -> str:
    level = value.strip().lower()
    level = _LOG_LEVEL_ALIASES.get(level, level)
    if level not in _LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"invalid log level {value!r} (choose from {', '.join(_LOG_LEVELS)})"
        )
    return level


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the finnish-pic API")
    parser.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument(
        "--workers", type=int, default=1, help="Worker processes, ignored with --reload"
    )
    # string defaults go through ``type`` too, so LOG_LEVEL is checked like the flag
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "info"),
        type=_log_level,
        help=f"Log level for uvicorn and the finnish_pic.api logger ({', '.join(_LOG_LEVELS)})",
    )
    return parser.parse_args(argv)


def main() -> None:
    args = parse_args()

    # api.main reads LOG_LEVEL at import, which happens inside the workers
    os.environ["LOG_LEVEL"] = args.log_level

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=1 if args.reload else args.workers,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
