from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contact_manager.api.routers import api_routers
from contact_manager.infrastructure.config.config import APP_CONFIG
from contact_manager.infrastructure.database.adapters.pg_connection import DatabaseConnection
from contact_manager.infrastructure.errors.handlers import register_exception_handlers
from contact_manager.infrastructure.logging.logger import configure_logging, get_logger
from contact_manager.infrastructure.middleware import LoggingMiddleware


configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "application_startup",
        app_name=APP_CONFIG.APP_NAME,
        environment=APP_CONFIG.ENVIRONMENT,
        debug=APP_CONFIG.DEBUG,
    )

    db_connection = DatabaseConnection()
    await db_connection.init_db()
    app.state.db_connection = db_connection

    logger.info("database_connected")

    yield

    await db_connection.close()
    logger.info("application_shutdown")


def create_app() -> FastAPI:
    app = FastAPI(
        title=APP_CONFIG.APP_NAME,
        debug=APP_CONFIG.DEBUG,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=APP_CONFIG.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)
    app.include_router(api_routers)
    return app


app = create_app()
