# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Command line entrypoint: schema setup and the development server."""

from __future__ import annotations

import argparse
import atexit
from collections.abc import Sequence

from auth_backend.app import create_app
from auth_backend.infrastructure.container import Container
from auth_backend.infrastructure.db import init_db
from auth_backend.shared.logging import sanitize_message, setup_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="auth-backend", description="JWT authentication backend"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="Create the database schema")

    serve = commands.add_parser("serve", help="Run the development server")
    serve.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    serve.add_argument("--port", type=int, default=5000, help="Port to listen on")
    serve.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    container = Container()
    atexit.register(container.shutdown)

    if args.command == "init-db":
        setup_logging(container.config.log_level)
        init_db(container.engine)
        print(f"Schema ready at {sanitize_message(container.config.database.url)}")
        return 0

    app = create_app(container)
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
