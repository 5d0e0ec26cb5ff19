"""
CLI entry point for the todo service.

Usage:
    # Serve on WEB_BIND_ADDR (default 127.0.0.1:8080)
    python -m todo_service serve

    # Serve on an explicit address with debug logging
    python -m todo_service serve --bind 0.0.0.0:9000 --log-level DEBUG
"""

import argparse
import logging

from todo_service.core.config import WEB_BIND_ADDR_KEY, Settings
from todo_service.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the HTTP server with uvicorn."""
    import uvicorn

    from todo_service.main import create_app

    overrides = {}
    if args.bind:
        overrides["web_bind_addr"] = args.bind
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = Settings(**overrides)

    configure_logging(level=settings.log_level)
    logger.info(
        "Binding to [%s], change by setting the %s env var.",
        settings.web_bind_addr,
        WEB_BIND_ADDR_KEY,
    )
    uvicorn.run(
        create_app(settings),
        host=settings.bind_host,
        port=settings.bind_port,
        log_config=None,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Todo Service CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument(
        "--bind", default=None,
        help=f"host:port to listen on (overrides {WEB_BIND_ADDR_KEY})",
    )
    serve_parser.add_argument(
        "--log-level", default=None, dest="log_level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
