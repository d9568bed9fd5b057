"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown with seeded companies, jobs and users
- FastAPI test client
- Auth tokens for a regular user and an admin
"""

import os

# Must be set before the app modules read settings
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token, get_password_hash
from app.models import Application, Company, Job, User
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def seed(db):
    """Three companies, four jobs, a regular user (u1) and an admin."""
    db.add_all([
        Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
        Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
        Company(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url="http://c3.img"),
    ])
    db.flush()

    db.add_all([
        Job(title="Software Engineer", salary=100000, equity=0.05, company_handle="c1"),
        Job(title="Data Engineer", salary=80000, equity=0, company_handle="c1"),
        Job(title="Accountant", salary=60000, equity=None, company_handle="c2"),
        Job(title="Senior Software Engineer", salary=150000, equity=0.1, company_handle="c3"),
    ])
    db.add_all([
        User(
            username="u1",
            password=get_password_hash("password1"),
            first_name="U1F",
            last_name="U1L",
            email="u1@email.com",
            is_admin=False,
        ),
        User(
            username="admin",
            password=get_password_hash("adminpass"),
            first_name="AdF",
            last_name="AdL",
            email="admin@email.com",
            is_admin=True,
        ),
    ])
    db.commit()


@pytest.fixture
def db_session():
    """
    Create a fresh, seeded database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    seed(db)
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def job_ids(db_session):
    """Seeded job IDs keyed by title"""
    return {job.title: job.id for job in db_session.query(Job).all()}


@pytest.fixture
def applications(db_session, job_ids):
    """u1 has applied to the Software Engineer job"""
    db_session.add(Application(username="u1", job_id=job_ids["Software Engineer"]))
    db_session.commit()


@pytest.fixture
def u1_headers():
    token = create_access_token("u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    token = create_access_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}
