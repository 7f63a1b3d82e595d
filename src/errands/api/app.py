"""
Main FastAPI application for the Errands API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import Store, create_store

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    store: Store = app.state.store
    logger.info(
        "Starting Errands API...",
        environment=settings.environment,
        id_strategy=store.id_strategy,
    )

    yield

    logger.info(
        "Shutting down Errands API...",
        tasks=len(store.tasks),
        grocery_items=len(store.grocery_items),
    )


def create_app(store: Store | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Store to serve; a fresh one using the configured id strategy
            is created when omitted.
    """
    if store is None:
        store = create_store()

    app = FastAPI(
        title="Errands API",
        description="In-memory GraphQL API for tasks and grocery items",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(store, graphiql=settings.graphiql), prefix="")
    logger.info("GraphQL endpoint initialized", endpoint="/graphql")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "errands.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
