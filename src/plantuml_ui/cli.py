#!/usr/bin/env python3
"""
PlantUML UI Server

Serves a web UI and HTTP API that render PlantUML diagrams on a remote
PlantUML server.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

import uvicorn

from .api.main import create_app
from .api.models.config import APIConfig
from .core import InvalidRendererAddressError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(filename)s:%(lineno)d: %(message)s"


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="plantuml-ui",
        description="PlantUML client application.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  plantuml-ui --api-addr 127.0.0.1:8080 --plantuml-server-addr http://localhost:8000/plantuml
  PLANTUML_SERVER_ADDR=http://localhost:8000/plantuml plantuml-ui
        """
    )

    parser.add_argument(
        '--plantuml-server-addr',
        help='PlantUML server address (default: $PLANTUML_SERVER_ADDR)'
    )

    parser.add_argument(
        '--api-addr',
        help='PlantUML UI API address as HOST:PORT (default: $API_HOST:$API_PORT)'
    )

    parser.add_argument(
        '--static-dir',
        help='Serve the UI from this directory instead of the bundled one'
    )

    parser.add_argument(
        '--log-level',
        choices=['critical', 'error', 'warning', 'info', 'debug'],
        help='Log level (default: $LOG_LEVEL or info)'
    )

    return parser.parse_args(argv)


def parse_api_addr(api_addr: str) -> Tuple[str, int]:
    """Split HOST:PORT into its parts."""
    host, sep, port = api_addr.rpartition(":")
    if not sep or not port.isdigit() or not 0 < int(port) < 65536:
        raise ValueError(f"invalid API address {api_addr!r}, expected HOST:PORT")
    return host.strip("[]") or "0.0.0.0", int(port)


def build_config(args: argparse.Namespace) -> APIConfig:
    """Merge command line arguments over the environment configuration."""
    config = APIConfig.from_env()
    updates = {}

    if args.plantuml_server_addr is not None:
        updates["plantuml_server_addr"] = args.plantuml_server_addr
    if args.api_addr is not None:
        updates["host"], updates["port"] = parse_api_addr(args.api_addr)
    elif not (os.getenv("API_HOST") or os.getenv("API_PORT")):
        raise ValueError("an API address is required: pass --api-addr or set API_HOST/API_PORT")
    if args.static_dir is not None:
        updates["static_dir"] = args.static_dir
    if args.log_level is not None:
        updates["log_level"] = args.log_level

    return config.model_copy(update=updates)


def main(argv: Optional[List[str]] = None) -> None:
    """Validate the configuration and run the server."""
    args = parse_arguments(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(level=config.log_level.upper(), format=LOG_FORMAT)

    try:
        app = create_app(config)
    except InvalidRendererAddressError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Listening on %s", config.api_addr)
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level
    )


if __name__ == "__main__":
    main()
