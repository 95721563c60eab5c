"""
CLI entry point for the scheme redirect application.

Usage:
    # Serve the application with uvicorn
    python -m scheme_redirect.cli serve --host 0.0.0.0 --port 8080

    # Show the redirect policy built from the environment
    python -m scheme_redirect.cli policy
"""

import argparse
import logging
import sys

from scheme_redirect.core.config import settings
from scheme_redirect.domain.redirect.errors import RedirectConfigError
from scheme_redirect.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the FastAPI application with uvicorn."""
    import uvicorn

    logger.info("Starting application at http://%s:%d", args.host, args.port)
    uvicorn.run(
        "scheme_redirect.main:app",
        host=args.host,
        port=args.port,
        proxy_headers=args.proxy_headers,
        reload=False,
    )


def cmd_policy(args: argparse.Namespace) -> None:
    """Log the redirect policy configured in the environment."""
    config = settings.to_redirect_config()
    logger.info("protocols:   %s", config.protocols.value)
    logger.info("port:        %s", config.port if config.port is not None else "default")
    logger.info("status code: %d", config.status_code)
    logger.info("hsts:        %s", config.hsts_header_value or "disabled")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SchemeRedirect CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Serve the application")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument(
        "--proxy-headers", action="store_true",
        help="Let uvicorn trust X-Forwarded-* headers for the client address",
    )
    serve_parser.set_defaults(func=cmd_serve)

    policy_parser = subparsers.add_parser("policy", help="Show the redirect policy")
    policy_parser.set_defaults(func=cmd_policy)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except RedirectConfigError as exc:
        logger.error("Invalid configuration: %s", exc.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
