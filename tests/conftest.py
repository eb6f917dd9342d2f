"""Pytest configuration and fixtures."""

import os

# Settings are cached on first use, so the test environment is set before importing the app
os.environ.setdefault("EXPOSE_OTP_IN_RESPONSE", "true")
os.environ.setdefault("STORAGE_BUCKET", "test-bucket")
os.environ.setdefault("STORAGE_REGION", "us-east-1")
os.environ.setdefault("ADMIN_EMAIL", "owner@example.com")

from unittest.mock import MagicMock, patch  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from portfolio.api.dependencies import get_storage  # noqa: E402
from portfolio.config import get_settings  # noqa: E402
from portfolio.database import Base, get_db  # noqa: E402
from portfolio.main import app  # noqa: E402
from portfolio.services.auth import create_access_token, create_user  # noqa: E402
from portfolio.services.storage import StorageService  # noqa: E402
from portfolio.tasks.email import send_email_job  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores user_id."""

    def __init__(self, *args, user_id: int | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id


class QueuedJobs:
    """View over the email jobs handed to Celery during a test."""

    def __init__(self, mock: MagicMock):
        self.mock = mock

    @property
    def all(self) -> list[tuple[str, dict]]:
        return [(c.kwargs["args"][0], c.kwargs["args"][1]) for c in self.mock.call_args_list]

    def of_type(self, job_type: str) -> list[dict]:
        return [payload for kind, payload in self.all if kind == job_type]


class FakeS3Client:
    """Records uploads and deletions instead of talking to S3."""

    def __init__(self):
        self.objects: dict[str, bytes] = {}
        self.deleted: list[str] = []

    def upload_fileobj(self, fileobj, bucket, key, ExtraArgs=None):  # noqa: N803
        self.objects[key] = fileobj.read()

    def delete_object(self, Bucket, Key):  # noqa: N803
        self.deleted.append(Key)
        self.objects.pop(Key, None)


# Use test database - PostgreSQL when DATABASE_URL is set, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/portfolio_db", "/portfolio_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from portfolio import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(autouse=True)
def email_jobs():
    """Capture email jobs instead of sending them to the broker."""
    with patch.object(send_email_job, "apply_async") as apply_async:
        apply_async.return_value = MagicMock(id="job-id")
        yield QueuedJobs(apply_async)


@pytest.fixture
def s3_client():
    return FakeS3Client()


@pytest.fixture
def storage(s3_client):
    return StorageService(get_settings(), client=s3_client)


@pytest.fixture(scope="function")
def client(db, storage):
    """Create a test client with database and storage overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db):
    """An existing user with a known password."""
    return create_user(db, "a@example.com", "secret123", "Admin")


@pytest.fixture
def auth_headers(admin_user):
    """Bearer headers for the admin user."""
    token = create_access_token(admin_user.id, admin_user.email)
    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=admin_user.id)
