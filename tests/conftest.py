"""
Shared test configuration.
Each test gets an in-memory database, a temporary upload directory and a
fake Telegram notifier, wired into the app through dependency overrides.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Iterator

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
BACKEND_DIR = ROOT_DIR / "backend"
for path in (ROOT_DIR, BACKEND_DIR):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# The app module builds its engine and upload mount at import time.
_SESSION_DIR = Path(tempfile.mkdtemp(prefix="barbershop-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_SESSION_DIR / 'app.db'}")
os.environ.setdefault("UPLOAD_DIR", str(_SESSION_DIR / "uploads"))
os.environ.setdefault("ADMIN_PASSWORD", "bootstrap-password")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from barbershop.config import Settings, get_settings  # noqa: E402
from barbershop.database import get_db, init_db  # noqa: E402
from barbershop.main import app  # noqa: E402
from barbershop.services.bootstrap import bootstrap  # noqa: E402
from barbershop.services.notifications import get_notifier  # noqa: E402
from barbershop.storage import FileStorage  # noqa: E402
from tests.support import ADMIN_PASSWORD, ADMIN_USERNAME, FakeNotifier  # noqa: E402


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret-key",
        ADMIN_USERNAME=ADMIN_USERNAME,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        BCRYPT_ROUNDS=4,
        UPLOAD_DIR=tmp_path / "uploads",
        MAX_UPLOAD_SIZE_MB=1,
        DEBUG=False,
        ENVIRONMENT="test",
    )


@pytest.fixture
def db_session(settings: Settings) -> Iterator[Session]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    bootstrap(session, settings)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def storage(settings: Settings) -> FileStorage:
    storage = FileStorage(settings.UPLOAD_DIR, settings.max_upload_bytes)
    storage.ensure_dirs()
    return storage


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def client(settings: Settings, db_session: Session, notifier: FakeNotifier) -> Iterator[TestClient]:
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_notifier] = lambda: notifier
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    response = client.post(
        "/api/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
