"""
Command line entry point.

Usage:
    python -m static_server [--port 8080] [--dir wwwroot] [--no-gen]
Open:
    http://localhost:8080
"""

import argparse
import asyncio
import logging
import sys

from .config import load_config
from .errors import ConfigError, FatalError
from .server import HttpServer

logger = logging.getLogger("static_server")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve static HTML pages from a local directory.")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default 8080)")
    parser.add_argument("--host", default=None, help="Bind address (default localhost)")
    parser.add_argument("--dir", default=None, help="Static files directory, relative to the content root (default wwwroot)")
    parser.add_argument(
        "--no-gen",
        action="store_true",
        help="Do not generate placeholder pages when the directory is missing",
    )
    parser.add_argument("--content-root", default=None, help="Directory the static files directory is resolved against")
    parser.add_argument("--config", default=None, help="JSON settings file (default appsettings.json if present)")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error", "critical"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(
            args.config,
            content_root=args.content_root,
            overrides={
                "listen_port": args.port,
                "listen_host": args.host,
                "static_root": args.dir,
                "bootstrap_if_missing": False if args.no_gen else None,
            },
        )
    except ConfigError as e:
        logger.critical("Invalid configuration: %s", e)
        return 1

    server = HttpServer(config, content_root=args.content_root, log_level=args.log_level)
    try:
        asyncio.run(server.start())
    except FatalError:
        return 1
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
