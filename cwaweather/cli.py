"""CLI entry point for the CWA weather proxy."""

import argparse
import asyncio
import json
import logging
import sys

import uvicorn

from cwaweather.api.app import create_app
from cwaweather.config.loader import load_config, redacted
from cwaweather.errors import ForecastError
from cwaweather.ingest.forecast_fetcher import ForecastFetcher

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cwaweather",
        description="CWA 36-hour forecast proxy",
    )
    parser.add_argument(
        "--config", default=None, help="Optional config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP server")
    serve_p.add_argument("--host", default=None, help="Listen address")
    serve_p.add_argument("--port", type=int, default=None, help="Listen port")

    # fetch
    sub.add_parser("fetch", help="Fetch and print all-city forecasts once")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config (key redacted)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "fetch":
        return _cmd_fetch(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    updates = {}
    if args.host is not None:
        updates["host"] = args.host
    if args.port is not None:
        updates["port"] = args.port
    if updates:
        config = config.model_copy(update=updates)

    if not config.has_api_key:
        logger.warning("CWA_API_KEY is not set; forecast requests will fail")
    logger.info("Server listening on %s:%d", config.host, config.port)
    logger.info("Environment: %s", config.environment)
    uvicorn.run(create_app(config), host=config.host, port=config.port)
    return 0


def _cmd_fetch(config) -> int:
    fetcher = ForecastFetcher(config)
    try:
        body = asyncio.run(fetcher.fetch_all())
    except ForecastError as e:
        print(f"Error: {e.error}: {e.message}", file=sys.stderr)
        return 1
    print(json.dumps(body, ensure_ascii=False, indent=2))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(json.dumps(redacted(config), ensure_ascii=False, indent=2))
        return 0
    print("Use: config show")
    return 1
