"""Unit tests for repository layer."""
import pytest
from datetime import datetime, timedelta

from repositories.base_repository_impl import InstanceNotFoundError, StaleWriteError
from repositories.client_repository import ClientRepository
from repositories.car_repository import CarRepository
from repositories.order_repository import OrderRepository
from repositories.service_repository import ServiceRepository
from repositories.completed_work_repository import CompletedWorkRepository

from models.client import ClientModel
from models.car import CarModel
from models.order import OrderModel

from schemas.client_schema import ClientSchema


def add_client_with_orders(session, name, order_numbers):
    """Create a client owning one car with the given orders."""
    client = ClientModel(full_name=name, phone="000")
    car = CarModel(client=client, brand="Ford", model="Focus", manufacture_year=2012, license_plate=name[:8])
    session.add_all([client, car])
    session.flush()
    for number in order_numbers:
        session.add(OrderModel(order_number=number, car_id=car.id_key, order_date=datetime.now()))
    session.commit()
    return client


class TestBaseRepository:
    """Tests for the generic repository behaviour, using clients."""

    def test_save_and_find(self, db_session_factory):
        db_session = db_session_factory()
        repo = ClientRepository(db_session)
        saved = repo.save(ClientModel(full_name="Anna Koval", phone="+380631234567"))

        found = repo.find(saved.id_key)

        assert isinstance(found, ClientSchema)
        assert found.full_name == "Anna Koval"

    def test_find_not_found(self, db_session_factory):
        repo = ClientRepository(db_session_factory())

        with pytest.raises(InstanceNotFoundError):
            repo.find(999)

    def test_find_all_paginated_by_id(self, db_session_factory):
        db_session = db_session_factory()
        repo = ClientRepository(db_session)
        for i in range(5):
            repo.save(ClientModel(full_name=f"Client {i}", phone=str(i)))

        page = repo.find_all(skip=1, limit=2)

        assert [c.full_name for c in page] == ["Client 1", "Client 2"]
        assert repo.count() == 5

    def test_update_ignores_unknown_fields(self, db_session_factory, seeded_db):
        repo = ClientRepository(db_session_factory())

        updated = repo.update(seeded_db["client_id"], {"phone": "111", "nickname": "x", "id_key": 42})

        assert updated.phone == "111"
        assert updated.id_key == seeded_db["client_id"]

    def test_remove(self, db_session_factory, seeded_db):
        repo = ClientRepository(db_session_factory())
        repo.remove(seeded_db["client_id"])

        assert not repo.exists(seeded_db["client_id"])

    def test_stale_write_is_translated(self, db_session_factory, seeded_db):
        """A commit based on an outdated car version raises StaleWriteError."""
        session_a = db_session_factory()
        session_b = db_session_factory()
        repo_a = CarRepository(session_a)
        car_a = repo_a.find_model(seeded_db["car_id"])

        car_b = session_b.get(CarModel, seeded_db["car_id"])
        car_b.brand = "Honda"
        session_b.commit()

        car_a.brand = "Mazda"
        with pytest.raises(StaleWriteError):
            repo_a.commit()


class TestClientRepository:
    """Tests for ClientRepository.top_by_order_count."""

    def test_ranking_with_tie_broken_by_id(self, db_session_factory):
        """X has 5 orders, Y and Z 3 each, W 1: the top three are X, Y, Z."""
        session = db_session_factory()
        x = add_client_with_orders(session, "Client X", range(1, 6))
        y = add_client_with_orders(session, "Client Y", range(6, 9))
        z = add_client_with_orders(session, "Client Z", range(9, 12))
        add_client_with_orders(session, "Client W", [12])

        top = ClientRepository(session).top_by_order_count(3)

        assert [(c.id_key, count) for c, count in top] == [(x.id_key, 5), (y.id_key, 3), (z.id_key, 3)]

    def test_clients_without_orders_rank_last(self, db_session_factory):
        session = db_session_factory()
        session.add(ClientModel(full_name="No Orders", phone="0"))
        session.commit()
        busy = add_client_with_orders(session, "Busy", [1])

        top = ClientRepository(session).top_by_order_count(5)

        assert [(c.full_name, count) for c, count in top] == [("Busy", 1), ("No Orders", 0)]
        assert top[0][0].id_key == busy.id_key


class TestOrderRepository:
    """Tests for OrderRepository."""

    def test_next_order_number(self, db_session_factory, seeded_db):
        repo = OrderRepository(db_session_factory())

        assert repo.next_order_number() == 3

    def test_next_order_number_empty(self, db_session_factory):
        assert OrderRepository(db_session_factory()).next_order_number() == 1

    def test_find_by_number(self, db_session_factory, seeded_db):
        repo = OrderRepository(db_session_factory())

        assert repo.find_by_number(2).id_key == seeded_db["paid_order_id"]
        assert repo.find_by_number(99) is None

    def test_counts(self, db_session_factory, seeded_db):
        repo = OrderRepository(db_session_factory())
        start = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)

        assert repo.count_unpaid() == 1
        assert repo.count_assigned() == 1
        assert repo.count_between(start, start + timedelta(days=1)) == 1

    def test_find_recent_with_relations(self, db_session_factory, seeded_db):
        orders = OrderRepository(db_session_factory()).find_recent_with_relations(5)

        assert [o.order_number for o in orders] == [1, 2]
        assert orders[0].car.client.full_name == "Ivan Petrenko"
        assert orders[0].master.full_name == "Oleh Bondar"
        assert orders[1].master is None


class TestServiceRepository:
    """Tests for ServiceRepository."""

    def test_find_by_code(self, db_session_factory, seeded_db):
        repo = ServiceRepository(db_session_factory())

        assert repo.find_by_code(101).service_name == "Tyre fitting"
        assert repo.find_by_code(999) is None


class TestCompletedWorkRepository:
    """Tests for CompletedWorkRepository."""

    def test_reference_counts(self, db_session_factory, seeded_db):
        repo = CompletedWorkRepository(db_session_factory())

        assert repo.distinct_order_numbers() == {1}
        assert repo.count_for_order(1) == 1
        assert repo.count_for_order(2) == 0
        assert repo.count_for_service(101) == 1
        assert repo.count_for_master(seeded_db["master_id"]) == 1
