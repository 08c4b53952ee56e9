import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RUN_MIGRATIONS", "false")

from netpanel.database import Base, get_db
from netpanel.main import app
from netpanel.models.radius import RadiusProfile
from netpanel.routers.devices import get_device_probe

TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


def _make_db_override(db_session):
    def _override():
        yield db_session
    return _override


class FakeProbe:
    """Stands in for the RouterOS login probe; returns ``reachable`` or raises ``error``."""

    def __init__(self, reachable=True, error=None):
        self.reachable = reachable
        self.error = error
        self.calls = []

    def __call__(self, device):
        self.calls.append((device.ip_address, device.port))
        if self.error is not None:
            raise self.error
        return self.reachable


@pytest.fixture
def probe():
    return FakeProbe()


@pytest.fixture
def make_probe():
    return FakeProbe


@pytest.fixture(scope="function")
def client(db, probe):
    app.dependency_overrides[get_db] = _make_db_override(db)
    app.dependency_overrides[get_device_probe] = lambda: probe
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def profile(db):
    profile = RadiusProfile(name="Basic", upload_speed=1024, download_speed=2048, price="29.99")
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile
