"""
=============================================================================
DEVELOPMENT SERVER CLI
=============================================================================

Serves the demo Posts resource through the standard library WSGI server:

    python -m resourceful                    # localhost:8080
    python -m resourceful --port 3000
    python -m resourceful --host 0.0.0.0     # containers
    python -m resourceful --jsonp            # enable ?callback= padding

Settings start from the RESOURCEFUL_* environment variables (see
AppConfig.from_env) and command-line flags override them.

=============================================================================
"""

import argparse
import logging
import sys
from typing import List, Optional
from wsgiref.simple_server import make_server, WSGIRequestHandler

from . import __version__
from .app import create_app
from .config import AppConfig, LOG_LEVELS, LOG_FORMATS, configure_logging
from .demo import demo_registry


logger = logging.getLogger("resourceful.server")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resourceful",
        description="Serve the demo Posts resource with the resourceful dispatcher",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m resourceful                      # Run with defaults
  python -m resourceful --port 3000          # Custom port
  python -m resourceful --host 0.0.0.0       # Listen on all interfaces
  python -m resourceful --log-format json    # JSON access logs
        """
    )

    parser.add_argument(
        "--host", "-H",
        default=None,
        help="Host to bind to (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help="Port to listen on (default: 8080)"
    )
    parser.add_argument(
        "--log-level", "-l",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: INFO)"
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Access log format (default: text)"
    )
    parser.add_argument(
        "--jsonp",
        action="store_true",
        help="Pad responses as callback(body) when ?callback= is given"
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"resourceful {__version__}"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> AppConfig:
    """Environment defaults overridden by whatever flags were given."""
    config = AppConfig.from_env()
    if args.host is not None:
        config.host = args.host
    if args.port is not None:
        config.port = args.port
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    if args.jsonp:
        config.jsonp = True
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
        config.validate()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    configure_logging(config)
    app = create_app(config, registry=demo_registry())

    class RequestHandler(WSGIRequestHandler):
        server_version = config.server_name

        def log_message(self, format, *args):
            # Access lines come from LoggingMiddleware
            pass

    with make_server(config.host, config.port, app, handler_class=RequestHandler) as httpd:
        logger.info(f"Serving {', '.join(app.registry.names())} on http://{config.host}:{config.port}")
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            logger.info("Received keyboard interrupt, shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
