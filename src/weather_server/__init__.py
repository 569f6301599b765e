"""weather-server: Minimal MCP server exposing a mock get_weather tool."""

import logging
import sys

import anyio

from weather_server.config import default_config
from weather_server.server import create_server, serve

log = logging.getLogger("weather-server")


def configure_logging() -> None:
    """Send diagnostics to stderr; only this package's logger speaks at INFO.

    The SDK logs every request at INFO, so the root stays at WARNING.
    """
    # stdout carries the protocol; diagnostics go to stderr only.
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(logging.WARNING)
    log.setLevel(logging.INFO)


def main() -> None:
    """CLI entry point: starts the MCP server over stdio."""
    configure_logging()
    try:
        anyio.run(serve, create_server(default_config()))
    except KeyboardInterrupt:
        sys.exit(0)
    except Exception:
        log.exception("MCP server exiting with error")
        sys.exit(1)
