"""Command-line entrypoint serving the API over TLS."""

import argparse
import logging
import ssl
from collections.abc import Sequence

import uvicorn
from fastapi import FastAPI

from grocery_tracker.api.app import create_app
from grocery_tracker.config import Settings
from grocery_tracker.containers import build_container

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line overrides for the TLS key pair and bind address."""
    parser = argparse.ArgumentParser(description="Grocery Tracker API server")
    parser.add_argument("--certfile", help="certificate PEM file")
    parser.add_argument("--keyfile", help="key PEM file")
    parser.add_argument("--host", help="interface to bind")
    parser.add_argument("--port", type=int, help="port to bind")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Apply command-line overrides on top of environment settings."""
    overrides = {
        key: value
        for key, value in vars(args).items()
        if value is not None and key in Settings.model_fields
    }
    return Settings(**overrides)


def build_server_config(app: FastAPI, settings: Settings) -> uvicorn.Config:
    """Build a loaded uvicorn config whose TLS context refuses old protocols."""
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        ssl_certfile=settings.certfile,
        ssl_keyfile=settings.keyfile,
        log_level=settings.log_level.lower(),
    )
    config.load()
    config.ssl.minimum_version = ssl.TLSVersion[settings.min_tls_version]
    return config


def main(argv: Sequence[str] | None = None) -> None:
    """Start the HTTPS server."""
    settings = resolve_settings(parse_args(argv))
    app = create_app(build_container(settings))
    config = build_server_config(app, settings)
    logger.info(
        "Starting server on %s:%s (minimum %s)",
        settings.host,
        settings.port,
        settings.min_tls_version,
    )
    uvicorn.Server(config).run()


if __name__ == "__main__":
    main()
