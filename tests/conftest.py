import os
import tempfile

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_jobly.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["SECRET_KEY"] = "test-secret-key-min-32-characters-long-for-testing"
os.environ["ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["FIRST_ADMIN_USERNAME"] = "admin"
os.environ["FIRST_ADMIN_PASSWORD"] = "AdminTest123!"
os.environ["VALIDATION_ERROR_STATUS"] = "400"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from jobly.main import app
from jobly.core.security import create_access_token, get_password_hash
from jobly.db.models.company import Company as CompanyModel
from jobly.db.models.role import Role as RoleModel
from jobly.db.models.user import User as UserModel


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the database schema and seed data
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()

        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from jobly.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def admin_user(db: Session) -> dict:
    """The admin seeded by migration 002."""
    from jobly.repositories.user import get_user_by_username
    from jobly.core.config import settings

    user = get_user_by_username(db, settings.first_admin_username)
    if not user:
        raise RuntimeError("Admin user not found. Check migration 002.")

    return {
        "id": user.id,
        "username": user.username,
        "password": settings.first_admin_password,
        "role_id": user.role_id,
    }


@pytest.fixture(scope="function")
def admin_token(admin_user: dict) -> str:
    return create_access_token(data={"sub": admin_user["id"]})


@pytest.fixture(scope="function")
def regular_user(db: Session) -> dict:
    """Create a user with the plain "user" role."""
    username = "reader"
    password = "ReaderPass123!"

    user_role = db.query(RoleModel).filter(RoleModel.name == "user").first()
    if not user_role:
        raise RuntimeError("User role not found")

    user = UserModel(
        username=username,
        password_hash=get_password_hash(password),
        role_id=user_role.id,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    return {
        "id": user.id,
        "username": user.username,
        "password": password,
        "role_id": user.role_id,
    }


@pytest.fixture(scope="function")
def user_token(regular_user: dict) -> str:
    return create_access_token(data={"sub": regular_user["id"]})


@pytest.fixture(scope="function")
def companies(db: Session) -> list[CompanyModel]:
    """Three companies inserted straight into the database."""
    rows = [
        CompanyModel(
            handle="apple",
            name="Apple Inc",
            num_employees=1000,
            description="Computers and phones",
            logo_url="https://example.com/apple.png",
        ),
        CompanyModel(handle="pineapple", name="Pineapple Studios", num_employees=12),
        CompanyModel(handle="bolt", name="Bolt Logistics", num_employees=300),
    ]
    db.add_all(rows)
    db.commit()
    return rows
