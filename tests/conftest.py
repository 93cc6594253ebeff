import os

# Point the application at a throwaway database before it is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from filmes_api.api.deps import get_db  # noqa: E402
from filmes_api.core.db import init_db, make_engine  # noqa: E402
from filmes_api.main import app  # noqa: E402

from .fixtures.factories import *  # noqa: E402, F403


@pytest.fixture(scope="function")
def test_engine() -> Generator[Engine, None, None]:
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)

    yield engine

    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def db_session(test_engine: Engine) -> Generator[Session, None, None]:
    session = Session(test_engine)

    # The requests share the test's session so factory rows are visible to them
    def override_get_db() -> Generator[Session, None, None]:
        yield session

    app.dependency_overrides[get_db] = override_get_db

    yield session

    session.close()
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
