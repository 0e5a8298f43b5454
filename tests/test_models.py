"""Unit tests for SQLAlchemy models."""
import pytest
from sqlalchemy.exc import IntegrityError

from models.client import ClientModel as Client
from models.car import CarModel as Car
from models.tire import TireModel as Tire
from models.order import OrderModel as Order
from models.service import ServiceModel as Service
from models.master import MasterModel as Master
from models.completed_work import CompletedWorkModel as CompletedWork


class TestClientModel:
    """Tests for Client model."""

    def test_create_client(self, db_session_factory):
        """Test creating a client."""
        session = db_session_factory()
        client = Client(full_name="Ivan Petrenko", phone="+380501234567")
        session.add(client)
        session.commit()

        assert client.id_key is not None
        assert client.email is None

    def test_client_name_required(self, db_session_factory):
        """Test that client full name is required."""
        session = db_session_factory()
        session.add(Client(phone="+380501234567"))
        with pytest.raises(IntegrityError):
            session.commit()

    def test_client_cars_relationship(self, db_session_factory, seeded_db):
        """Test client to cars relationship."""
        session = db_session_factory()
        client = session.get(Client, seeded_db["client_id"])

        assert len(client.cars) == 1
        assert client.cars[0].brand == "Toyota"


class TestCarModel:
    """Tests for Car model."""

    def test_version_starts_at_one(self, db_session_factory, seeded_db):
        """The ORM assigns the first version on insert."""
        session = db_session_factory()
        car = session.get(Car, seeded_db["car_id"])

        assert car.version_id == 1

    def test_version_increments_on_update(self, db_session_factory, seeded_db):
        """Test that every committed change bumps the version."""
        session = db_session_factory()
        car = session.get(Car, seeded_db["car_id"])
        car.license_plate = "BB0000CC"
        session.commit()

        assert car.version_id == 2

    def test_car_requires_existing_client(self, db_session_factory):
        """Test the foreign key to clients is enforced."""
        session = db_session_factory()
        session.add(Car(client_id=999, brand="VW", model="Golf", manufacture_year=2010, license_plate="X1"))
        with pytest.raises(IntegrityError):
            session.commit()

    def test_delete_car_cascades_to_orders_and_tires(self, db_session_factory, seeded_db):
        """Deleting a car removes its tires, orders and their completed works."""
        session = db_session_factory()
        session.delete(session.get(Car, seeded_db["car_id"]))
        session.commit()

        assert session.query(Tire).count() == 0
        assert session.query(Order).count() == 0
        assert session.query(CompletedWork).count() == 0
        assert session.query(Client).count() == 1


class TestTireModel:
    """Tests for Tire model."""

    def test_wear_percentage_constraint(self, db_session_factory, seeded_db):
        """Wear above 100 % is rejected by the database."""
        session = db_session_factory()
        session.add(Tire(
            car_id=seeded_db["car_id"],
            tire_type="Radial",
            seasonality="Summer",
            manufacturer="Nokian",
            tire_model="Hakka Blue",
            size="195/65 R15",
            wear_percentage=120,
        ))
        with pytest.raises(IntegrityError):
            session.commit()


class TestOrderModel:
    """Tests for Order model."""

    def test_order_number_unique(self, db_session_factory, seeded_db):
        """Test that order numbers cannot repeat."""
        session = db_session_factory()
        session.add(Order(order_number=1, car_id=seeded_db["car_id"]))
        with pytest.raises(IntegrityError):
            session.commit()

    def test_order_completed_works_by_number(self, db_session_factory, seeded_db):
        """Completed works are joined on order number."""
        session = db_session_factory()
        order = session.get(Order, seeded_db["order_id"])

        assert [w.service_code for w in order.completed_works] == [101]
        assert order.car.client.full_name == "Ivan Petrenko"


class TestMasterModel:
    """Tests for Master model."""

    def test_delete_master_unassigns_orders(self, db_session_factory):
        """Orders keep existing without a master once the master is gone."""
        session = db_session_factory()
        client = Client(full_name="Anna", phone="1")
        car = Car(client=client, brand="Skoda", model="Octavia", manufacture_year=2015, license_plate="K1")
        master = Master(full_name="Petro")
        order = Order(order_number=7, car=car, master=master)
        session.add_all([client, car, master, order])
        session.commit()

        session.delete(master)
        session.commit()
        session.refresh(order)

        assert order.master_id is None


class TestServiceModel:
    """Tests for Service model."""

    def test_service_referenced_by_completed_work_cannot_be_deleted(self, db_session_factory, seeded_db):
        """The foreign key from completed works restricts deletion."""
        session = db_session_factory()
        session.delete(session.get(Service, seeded_db["service_id"]))
        with pytest.raises(IntegrityError):
            session.commit()
