import logging
from pathlib import Path

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import AsyncAdaptedQueuePool

from mdow.core.config import Settings

logger = logging.getLogger(__name__)

# Базовый класс для моделей
Base = declarative_base()


def create_engine(settings: Settings) -> AsyncEngine:
    """Создание асинхронного движка с ограниченным пулом соединений"""
    engine = create_async_engine(
        settings.database_url,
        future=True,
        echo=settings.database_echo,
        poolclass=AsyncAdaptedQueuePool,
        pool_size=settings.database_pool_size,
        max_overflow=0,
        # При конкурентной записи соединение ждет не дольше timeout, затем ошибка
        connect_args={"timeout": settings.database_busy_timeout},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def create_session_factory(engine: AsyncEngine) -> sessionmaker:
    """Фабрика сессий, привязанная к движку"""
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """Создание файла базы и схемы. Безопасно вызывать при каждом старте."""
    from mdow.db.models import MarkdownDocument  # noqa: F401

    database = engine.url.database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info(f"Database initialized at {engine.url.render_as_string(hide_password=True)}")


# Функция для dependency injection в FastAPI
async def get_db(request: Request):
    async with request.app.state.session_factory() as session:
        yield session
