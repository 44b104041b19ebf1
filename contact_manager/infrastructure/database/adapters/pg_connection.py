from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from contact_manager.infrastructure.config.config import DB_CONFIG
from contact_manager.infrastructure.database.models import Base
from contact_manager.infrastructure.logging import get_logger


logger = get_logger(__name__)


class DatabaseConnection:
    def __init__(self, url: str | None = None, engine: AsyncEngine | None = None):
        self._engine = engine or create_async_engine(
            url=url or DB_CONFIG.get_url(is_async=True),
            pool_pre_ping=True,
        )
        self._session_maker = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def get_session(self) -> AsyncSession:
        return self._session_maker()

    async def init_db(self) -> None:
        """Проверка соединения и создание схемы. Ошибка прерывает запуск приложения"""
        try:
            async with self._engine.begin() as connection:
                await connection.execute(text("SELECT 1"))
                await connection.run_sync(Base.metadata.create_all)
        except Exception as exc:
            logger.error("database_connection_failed", error=str(exc))
            raise
        logger.info("database_schema_ready", tables=sorted(Base.metadata.tables))

    async def close(self) -> None:
        await self._engine.dispose()
