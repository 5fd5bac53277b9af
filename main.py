#!/usr/bin/env python3
"""
StaffDesk -- token-authenticated employee directory API.

Usage:
  python main.py
  python main.py --port 8080
  python main.py --host 0.0.0.0 --reload

Environment variables:
  SECRET_KEY    Required unless DEBUG=true. At least 32 characters; signs
                session tokens.
  DEBUG         true to auto-generate a SECRET_KEY for local development.
  HOST / PORT   Default bind address (127.0.0.1:3000).
"""

import argparse

import uvicorn

from core.config import get_settings


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Run the StaffDesk API server.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Restart the server when source files change")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    uvicorn.run("api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
