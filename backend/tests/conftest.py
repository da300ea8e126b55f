import asyncio
import os

# The app's own engine is built at import time; keep it off Postgres in tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./zen-test.db")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from zen.database import get_db
from zen.main import app
from zen.models import Base


async def _create_tables(engine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'zen.db'}", poolclass=NullPool)
    asyncio.run(_create_tables(engine))

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    asyncio.run(engine.dispose())


@pytest.fixture
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides = {}


@pytest.fixture
def make_tag(client):
    def _make(name):
        resp = client.post("/api/tags", json={"name": name})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
