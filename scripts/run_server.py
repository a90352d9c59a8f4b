#!/usr/bin/env python3
"""
Sobe a API com uvicorn usando as configuracoes do ambiente.

Uso:
  python scripts/run_server.py [--host 0.0.0.0] [--port 10000] [--reload]
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import uvicorn

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core.config import get_settings  # noqa: E402


def apply_port(port: int | None) -> None:
    """Make image references follow the listening port unless the base URL is pinned."""
    if port and not os.getenv("PUBLIC_BASE_URL"):
        os.environ["PORT"] = str(port)
        get_settings.cache_clear()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the portfolio API.")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="TCP port (default: $PORT or 10000)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (dev only)")
    args = parser.parse_args(argv)

    if args.port is not None and (args.port <= 0 or args.port > 65535):
        parser.error("Informe uma porta entre 1 e 65535.")

    apply_port(args.port)
    settings = get_settings()
    print(f"Server is running at {settings.public_base_url}")
    uvicorn.run(
        "api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port or settings.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
