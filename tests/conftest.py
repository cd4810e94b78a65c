import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from sportsteams.core.database import create_db_engine, init_db, get_db
from sportsteams.core.seed import seed_database
from sportsteams.main import app


@pytest.fixture
def engine():
    """Fresh in-memory database per test, schema and view included."""
    engine = create_db_engine("sqlite://")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_db(db):
    seed_database(db)
    return db


@pytest.fixture
def client(seeded_db):
    """Test client sharing the seeded session."""
    def override_get_db():
        yield seeded_db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
