"""CLI entry point for the SolrDash server.

``solrdash`` starts the API under uvicorn.  Workers are built by
``create_app()`` in their own processes, so command-line options reach
them through the ``SOLRDASH_OVERRIDES`` environment variable (see
``load_settings``) rather than as a ``Settings`` object.

``solrdash --check`` only runs the zero-row connection test against the
configured core and exits with 0 (reachable) or 1 (not reachable).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import socket
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from solrdash import __version__
from solrdash.config.settings import CONFIG_FILE_ENV, OVERRIDES_ENV, Settings, load_settings

logger = logging.getLogger(__name__)

# argparse dest -> (settings section, key)
_OVERRIDES = {
    "solr_url": ("solr", "url"),
    "core": ("solr", "core"),
    "host": ("server", "host"),
    "port": ("server", "port"),
    "workers": ("server", "workers"),
    "log_level": ("observability", "log_level"),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solrdash",
        description="SolrDash: administrative API for a Solr core",
    )
    parser.add_argument("--config", "-c", type=str, default=None, help="Path to YAML configuration file")

    solr = parser.add_argument_group("solr")
    solr.add_argument("--solr-url", type=str, default=None, help="Solr base URL (overrides SOLR_URL)")
    solr.add_argument("--core", type=str, default=None, help="Solr core name (overrides SOLR_CORE)")
    solr.add_argument(
        "--check",
        action="store_true",
        help="Test the connection to the configured core and exit",
    )

    server = parser.add_argument_group("server")
    server.add_argument("--host", type=str, default=None, help="Server bind address (overrides config)")
    server.add_argument("--port", "-p", type=int, default=None, help="Server port (overrides config)")
    server.add_argument("--workers", "-w", type=int, default=None, help="Number of worker processes")
    server.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    server.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )

    parser.add_argument("--version", action="version", version=f"SolrDash {__version__}")
    return parser


def cli_overrides(args: argparse.Namespace) -> dict[str, dict[str, Any]]:
    """Nested settings mapping for the options given on the command line."""
    overrides: dict[str, dict[str, Any]] = {}
    for dest, (section, key) in _OVERRIDES.items():
        value = getattr(args, dest)
        if value is not None:
            overrides.setdefault(section, {})[key] = value
    return overrides


async def check_connection(settings: Settings, **httpx_kwargs: Any) -> bool:
    """Run the connection test against ``settings.solr`` and report the outcome."""
    from solrdash.adapters.solr.adapter import SolrAdapter

    adapter = SolrAdapter(settings.solr, **httpx_kwargs)
    await adapter.initialize()
    try:
        connected = await adapter.test_connection()
    finally:
        await adapter.shutdown()

    if connected:
        logger.info("Solr core '%s' at %s is reachable", settings.solr.core, settings.solr.url)
    else:
        logger.error("Solr core '%s' at %s is not reachable", settings.solr.core, settings.solr.url)
    return connected


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point for the SolrDash server."""
    args = build_parser().parse_args(argv)

    if args.config and not Path(args.config).exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    if args.config:
        os.environ[CONFIG_FILE_ENV] = str(Path(args.config).resolve())
    os.environ[OVERRIDES_ENV] = json.dumps(cli_overrides(args))
    settings = load_settings()

    from solrdash.observability.logging import setup_logging

    setup_logging(settings.observability)

    if args.check:
        sys.exit(0 if asyncio.run(check_connection(settings)) else 1)

    _check_port(settings.server.host, settings.server.port)

    import uvicorn

    uvicorn.run(
        "solrdash.api.app:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        workers=1 if args.reload else settings.server.workers,
        reload=args.reload,
        log_level=settings.observability.log_level.lower(),
    )


def _check_port(host: str, port: int) -> None:
    """Exit with a readable message if ``port`` is already taken."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((host if host != "0.0.0.0" else "127.0.0.1", port))
    except OSError:
        print(f"Error: port {port} is already in use (try 'lsof -i :{port}')", file=sys.stderr)
        sys.exit(1)
    finally:
        sock.close()


if __name__ == "__main__":
    main()
