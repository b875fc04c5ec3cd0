from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from famtrack.api.deps import get_db
from famtrack.db.base import Base, init_db
from famtrack.db.session import enable_sqlite_foreign_keys
from famtrack.main import app
from famtrack.services.activity_service import create_activity
from famtrack.services.family_service import add_participant, create_family


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def family(db):
    return create_family(db, name="Garcia", contact_email="garcia@example.com")


@pytest.fixture
def participant(db, family):
    return add_participant(
        db,
        family_id=family.id,
        first_name="Ana",
        last_name="Garcia",
        birth_date=date(2014, 5, 2),
    )


@pytest.fixture
def activity(db):
    return create_activity(db, name="Beach cleanup", description=None, points=10)
