import os

os.environ.setdefault("INSTITUTION_EMAIL_DOMAIN", "inst.edu")
os.environ.setdefault("ADMIN_PASSWORD", "letmein")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

from lostfound.db.db import create_db_and_tables, get_session  # noqa: E402
from lostfound.main import app  # noqa: E402


@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)

    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def found_item(client):
    response = client.post(
        "/items",
        json={
            "name": "Blue Backpack",
            "description": "Navy blue backpack with a laptop sleeve",
            "building": "Library",
            "room": "204",
            "dateFound": "2026-10-01T14:30:00Z",
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def admin(client):
    response = client.post("/users/admin-login", json={"password": "letmein"})
    assert response.status_code == 200
    return response.json()


@pytest.fixture(name="make_claim")
def make_claim_fixture(client):
    def make_claim(item_id, **overrides):
        body = {
            "itemId": item_id,
            "claimerName": "Alice Example",
            "claimerEmail": "alice@inst.edu",
            "lastSeenBuilding": "Library",
            "lastSeenRoom": "204",
            "ownershipDetails": "has my initials on the tag",
            "claimDate": "2026-09-30T09:00:00Z",
        }
        body.update(overrides)
        return client.post("/claims", json=body)

    return make_claim
