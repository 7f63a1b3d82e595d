#!/usr/bin/env python3
"""
Main CLI entry point for the Errands API server.
"""

import os
import sys

import click
import uvicorn

from errands import __version__
from errands.config import settings
from errands.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="errands")
def cli() -> None:
    """Errands CLI - run the in-memory tasks and grocery GraphQL server."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to (ERRANDS_API_PORT or PORT)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes; each one holds its own store (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option(
    "--id-strategy",
    default=None,
    type=click.Choice(["counter", "length"]),
    help="How new ids are minted (default: ERRANDS_ID_STRATEGY or counter)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
    id_strategy: str | None,
) -> None:
    """Start the Errands API server."""

    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    if workers > 1:
        logger.warning(
            "Running multiple workers; tasks and grocery items are not shared between them",
            workers=workers,
        )

    logger.info(
        "Starting Errands API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Reloader and worker processes import the app fresh and read these from the environment
    if log_level == "debug":
        os.environ["ERRANDS_DEBUG"] = "true"
    else:
        os.environ.setdefault("ERRANDS_DEBUG", "false")
    os.environ["ERRANDS_LOG_LEVEL"] = log_level
    if id_strategy:
        os.environ["ERRANDS_ID_STRATEGY"] = id_strategy

    try:
        if reload or workers > 1:
            uvicorn.run(
                "errands.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from errands.api.app import create_app
            from errands.store import create_store

            # Importing the app module configures logging from settings; restore the CLI choice
            configure_logging(debug=(log_level == "debug"), log_level=log_level)
            app = create_app(store=create_store(id_strategy))

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
