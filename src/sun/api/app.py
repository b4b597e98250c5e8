"""
Main FastAPI application for the Sun backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..container import Container, build_container
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


def create_app(app_settings: Settings | None = None, container: Container | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``container`` may be supplied pre-built (tests); otherwise it is built from
    ``app_settings``.
    """
    app_settings = app_settings or settings
    configure_logging(debug=app_settings.debug, level=app_settings.log_level)
    container = container or build_container(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Sun API...")

        if app_settings.schema_auto_create:
            await container.datasources.create_schemas()

        for name, error in (await container.datasources.ping_all()).items():
            if error:
                logger.error("Datasource unavailable", datasource=name, error=error)
            else:
                logger.info("Datasource ready", datasource=name)

        yield

        logger.info("Shutting down Sun API...")
        await container.datasources.dispose()

    app = FastAPI(
        title="Sun API",
        description="Stem player, blog and gallery content over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.container = container

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint, including each datasource."""
        results = await container.datasources.ping_all()
        return {
            "status": "healthy" if not any(results.values()) else "degraded",
            "version": __version__,
            "datasources": {
                name: ("ok" if error is None else error) for name, error in results.items()
            },
        }

    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()
    app.include_router(create_graphql_router(container, graphiql=app_settings.graphiql))
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app
