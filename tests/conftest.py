"""
Test configuration for the OrganLink API.
"""
import os

# Settings are read at import time, so the test environment goes first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ.pop("BOOTSTRAP_ADMIN_ID", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from organlink.database import Base, get_db
from organlink.main import app
from organlink.auth.models import User, UserRole
from organlink.auth.security import create_access_token

# In-memory test database shared across threads
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

# Create test session factory
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def bearer_headers(user_id):
    """
    Authorization header carrying a token for the given account id.
    """
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture(scope="function")
def db():
    """
    Create a fresh database for each test.
    """
    Base.metadata.create_all(bind=engine)
    
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """
    Create a test client with a test database session.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass
    
    app.dependency_overrides[get_db] = override_get_db
    
    with TestClient(app) as client:
        yield client
    
    app.dependency_overrides = {}


@pytest.fixture
def make_user(db):
    """
    Factory storing an account with the given role.
    """
    def _make_user(role=None, user_id=None, is_active=True, **fields):
        user = User(role=role, is_active=is_active, **fields)
        if user_id is not None:
            user.id = user_id
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def patient(make_user):
    return make_user(UserRole.PATIENT, first_name="Pat", last_name="Ient", email="patient@example.com")


@pytest.fixture
def donor(make_user):
    return make_user(UserRole.DONOR, first_name="Don", last_name="Or", email="donor@example.com")


@pytest.fixture
def doctor(make_user):
    return make_user(UserRole.DOCTOR, first_name="Doc", last_name="Tor", email="doctor@example.com")


@pytest.fixture
def admin(make_user):
    return make_user(UserRole.ADMIN, first_name="Ad", last_name="Min", email="admin@example.com")


@pytest.fixture
def auth_headers():
    """
    Build the Authorization header for an account id.
    """
    return bearer_headers
