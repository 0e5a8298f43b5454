"""Pytest configuration and fixtures for testing."""
import os
import tempfile
from datetime import datetime, timedelta
from typing import Generator
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

# Test database URL
TEST_DATABASE_URL = "sqlite:///./test.db"  # File-based DB for inspection

# Set test environment before importing app modules
os.environ['DATABASE_URL'] = TEST_DATABASE_URL
os.environ['UPLOADS_ROOT'] = tempfile.mkdtemp(prefix="tyre-service-uploads-")
os.environ['LOG_LEVEL'] = 'WARNING'

from config.database import enable_sqlite_foreign_keys, get_db
from models.base_model import base as Base
from main import create_fastapi_app

from models.client import ClientModel
from models.car import CarModel
from models.tire import TireModel
from models.order import OrderModel
from models.service import ServiceModel
from models.master import MasterModel
from models.completed_work import CompletedWorkModel
from services.photo_storage_service import PhotoStorageError, PhotoStorageService


@pytest.fixture(scope="session")
def engine():
    """SQLite engine shared by the whole test session, with foreign keys enforced."""
    test_engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},  # SQLite specific
        echo=False
    )
    event.listen(test_engine, "connect", enable_sqlite_foreign_keys)
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def db_session_factory(engine) -> Generator:
    """
    Fresh schema per test. Every session handed out is closed before the
    tables are dropped.
    """
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    sessions = []

    def factory():
        session = SessionLocal()
        sessions.append(session)
        return session

    try:
        yield factory
    finally:
        for session in sessions:
            session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def photo_storage(tmp_path) -> PhotoStorageService:
    """Photo storage rooted in a per-test temporary directory."""
    return PhotoStorageService(root=tmp_path)


@pytest.fixture(scope="function")
def failing_storage() -> MagicMock:
    """Storage mock whose writes always fail."""
    m = MagicMock(spec=PhotoStorageService)
    m.store.side_effect = PhotoStorageError("disk full")
    return m


@pytest.fixture(scope="function")
def api_client(db_session_factory) -> Generator[TestClient, None, None]:
    """Create a test client for API testing."""
    app = create_fastapi_app()

    def override_get_db():
        session = db_session_factory()
        try:
            yield session
            session.commit()  # Commit changes made by the request
        except Exception:
            session.rollback()  # Rollback on exception
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_storage() -> PhotoStorageService:
    """The storage the application itself writes to and serves from."""
    return PhotoStorageService()


# Model fixtures
@pytest.fixture
def sample_client_data():
    """Sample client data."""
    return {
        "full_name": "Ivan Petrenko",
        "phone": "+380501234567",
        "email": "ivan.petrenko@example.com"
    }


@pytest.fixture
def sample_car_data():
    """Sample car form data (client_id is filled in by the test)."""
    return {
        "brand": "Toyota",
        "model": "Corolla",
        "manufacture_year": 2018,
        "license_plate": "AA1234BB",
        "vin": "JTDBR32E720123456"
    }


@pytest.fixture
def sample_tire_data():
    """Sample tire data (car_id is filled in by the test)."""
    return {
        "tire_type": "Radial",
        "seasonality": "Winter",
        "manufacturer": "Michelin",
        "tire_model": "X-Ice North 4",
        "size": "205/55 R16",
        "load_index": 91,
        "wear_percentage": 15,
        "pressure": 2.3
    }


@pytest.fixture
def sample_service_data():
    """Sample service data."""
    return {
        "service_code": 501,
        "service_name": "Wheel balancing",
        "service_cost": 250.0
    }


# Database seeding fixtures
@pytest.fixture(scope="function")
def seeded_db(db_session_factory) -> dict:
    """
    One client with one car, two tires, a master, a service and two orders.
    Order #1 is assigned to the master, unpaid and has one completed work.
    Order #2 is paid, unassigned and still active.
    """
    session = db_session_factory()
    try:
        client = ClientModel(full_name="Ivan Petrenko", phone="+380501234567", email="ivan@example.com")
        session.add(client)
        session.flush()

        car = CarModel(
            client_id=client.id_key,
            brand="Toyota",
            model="Corolla",
            manufacture_year=2018,
            license_plate="AA1234BB",
        )
        session.add(car)
        session.flush()

        for season in ("Winter", "Summer"):
            session.add(TireModel(
                car_id=car.id_key,
                tire_type="Radial",
                seasonality=season,
                manufacturer="Michelin",
                tire_model="Primacy 4",
                size="205/55 R16",
                load_index=91,
                wear_percentage=10,
                pressure=2.2,
            ))

        master = MasterModel(full_name="Oleh Bondar", phone="+380671112233", specialization="Balancing")
        session.add(master)
        service = ServiceModel(service_code=101, service_name="Tyre fitting", service_cost=400.0)
        session.add(service)
        session.flush()

        now = datetime.now()
        order = OrderModel(order_number=1, car_id=car.id_key, master_id=master.id_key, order_date=now)
        paid_order = OrderModel(
            order_number=2,
            car_id=car.id_key,
            order_date=now - timedelta(days=3),
            payment_date=now - timedelta(days=2),
        )
        session.add_all([order, paid_order])
        session.flush()

        work = CompletedWorkModel(order_number=1, service_code=101, master_id=master.id_key)
        session.add(work)
        session.commit()

        return {
            "client_id": client.id_key,
            "car_id": car.id_key,
            "master_id": master.id_key,
            "service_id": service.id_key,
            "service_code": service.service_code,
            "order_id": order.id_key,
            "paid_order_id": paid_order.id_key,
            "completed_work_id": work.id_key,
        }
    finally:
        session.close()
