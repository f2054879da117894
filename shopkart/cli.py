"""
CLI entry point for the ShopKart service.

Usage:
    # Serve the API
    python -m shopkart.cli serve

    # Serve on another port with auto-reload
    python -m shopkart.cli serve --port 9000 --reload
"""

import argparse
import logging
import sys

from shopkart.core.config import settings
from shopkart.shared.logging import configure_logging

logger = logging.getLogger(__name__)

APP_IMPORT_PATH = "shopkart.main:app"


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    logger.info("Starting ShopKart API at http://%s:%d", args.host, args.port)
    uvicorn.run(APP_IMPORT_PATH, host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ShopKart service CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument(
        "--reload", action="store_true",
        help="Restart the server when source files change",
    )
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging(
        level=settings.log_level, error_log_level=settings.error_log_level
    )
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main(sys.argv[1:])
