"""Shared test fixtures: in-memory database, sample records, services, API client."""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.constants import AssignmentStatus
from app.database import Base, get_db
from app.main import app
from app.models import Asset, Category, Employee
from app.rate_limiter import limiter
from app.services import (
    AssetLifecycleService,
    AssetRepository,
    CategoryRepository,
    CategoryService,
    EmployeeRepository,
    EmployeeService,
)


@pytest.fixture
def engine():
    """Create in-memory SQLite engine with foreign keys enforced."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_maker(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


@pytest.fixture
def db(session_maker):
    """Create database session for testing."""
    session = session_maker()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def asset_service(db):
    return AssetLifecycleService(
        assets=AssetRepository(db),
        categories=CategoryRepository(db),
        employees=EmployeeRepository(db),
    )


@pytest.fixture
def category_service(db):
    return CategoryService(categories=CategoryRepository(db), assets=AssetRepository(db))


@pytest.fixture
def employee_service(db):
    return EmployeeService(employees=EmployeeRepository(db))


@pytest.fixture
def test_category(db):
    """Create the Electronics category."""
    category = Category(name="Electronics", description="IT hardware")
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@pytest.fixture
def test_employee(db):
    """Create an employee with a caller-chosen id."""
    employee = Employee(id=1001, full_name="Asha Verma", designation="Engineer")
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee


@pytest.fixture
def test_asset(db, test_category):
    """Create an AVAILABLE laptop in Electronics."""
    asset = Asset(
        name="Laptop",
        purchase_date=date(2024, 1, 10),
        condition_notes="New",
        category=test_category,
        assignment_status=AssignmentStatus.AVAILABLE,
    )
    db.add(asset)
    db.commit()
    db.refresh(asset)
    return asset


@pytest.fixture
def client(session_maker):
    """Create test client with database override.

    Each request gets its own session, as in production.
    """
    limiter.reset()

    def override_get_db():
        db = session_maker()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
