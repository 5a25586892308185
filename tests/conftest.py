import pytest
from fastapi.testclient import TestClient

from mdow.core.config import Settings
from mdow.core.db import create_engine, create_session_factory, init_db
from mdow.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'data' / 'test.db'}",
        database_busy_timeout=5,
        public_base_url="https://mdow.test",
        debug_routes=True,
    )


@pytest.fixture
async def engine(settings):
    engine = create_engine(settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client
