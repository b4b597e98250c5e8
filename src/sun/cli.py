#!/usr/bin/env python3
"""
Main CLI entry point for the Sun backend server.
"""

import asyncio
import sys

import click
import uvicorn

from sun import __version__
from sun.config import settings
from sun.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="sun")
def cli() -> None:
    """Sun CLI - run the server and manage datasources."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Sun API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)
    logger.info("Starting Sun API server", host=host, port=port, reload=reload, log_level=log_level)

    try:
        uvicorn.run(
            "sun.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
def init_db() -> None:
    """Create each vertical's tables in its own datasource."""
    from sun.database import Datasources

    configure_logging(debug=settings.debug, level=settings.log_level)

    async def do_init():
        datasources = Datasources.from_settings(settings)
        try:
            await datasources.create_schemas()
        finally:
            await datasources.dispose()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to create schemas", error=str(e))
        click.echo(f"✗ Error creating schemas: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Schemas created for apollo, briareus and cerberus")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
