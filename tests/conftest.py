import os

# Keep the import-time engine of backend.database away from the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from collections.abc import Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from backend.database import Base, get_db  # noqa: E402
from backend.main import create_app  # noqa: E402
from backend.models import Workout  # noqa: E402

INITIAL_WORKOUTS = [
    {"title": "test workout 1", "reps": 11, "load": 101},
    {"title": "test workout 2", "reps": 12, "load": 102},
]

TEST_EMAIL = "mattiv@matti.fi"
TEST_PASSWORD = "R3g5T7#gh"


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


def _make_client(session_factory, auth_enabled: bool) -> TestClient:
    app = create_app(auth_enabled=auth_enabled)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture()
def client_v1(session_factory):
    with _make_client(session_factory, auth_enabled=False) as client:
        yield client


@pytest.fixture()
def client_v2(session_factory):
    with _make_client(session_factory, auth_enabled=True) as client:
        yield client


@pytest.fixture()
def seeded_v1(db) -> list[Workout]:
    workouts = [Workout(**w) for w in INITIAL_WORKOUTS]
    db.add_all(workouts)
    db.commit()
    return workouts


@pytest.fixture()
def signup(client_v2) -> Callable[..., str]:
    def _signup(email: str = TEST_EMAIL, password: str = TEST_PASSWORD) -> str:
        response = client_v2.post("/api/user/signup", json={"email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()["token"]

    return _signup


@pytest.fixture()
def auth_headers(signup) -> dict[str, str]:
    return {"Authorization": f"bearer {signup()}"}


@pytest.fixture()
def new_workout() -> dict[str, Any]:
    return {"title": "testworkout", "reps": 10, "load": 100}
