import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from mdow.api.http import health_router, editor_router, documents_router, debug_router
from mdow.core.config import Settings, settings as default_settings
from mdow.core.db import create_engine, create_session_factory, init_db
from mdow.core.templates import render_not_found

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Пул соединений живет столько же, сколько процесс
    engine = create_engine(app.state.settings)
    await init_db(engine)

    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("mdow started")
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("mdow stopped, database connections closed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="mdow",
        description="A meadow for your markdown on web",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    @app.exception_handler(StarletteHTTPException)
    async def not_found_page(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return render_not_found(request)
        return await http_exception_handler(request, exc)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(editor_router)
    app.include_router(documents_router)
    if settings.debug_routes:
        app.include_router(debug_router)

    return app


app = create_app()


def serve() -> None:
    """Запуск сервера uvicorn с адресом из настроек"""
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    serve()
