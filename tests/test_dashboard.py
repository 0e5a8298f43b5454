"""Tests for the dashboard aggregation."""
from datetime import datetime, timedelta

from models.car import CarModel
from models.client import ClientModel
from models.completed_work import CompletedWorkModel
from models.master import MasterModel
from models.order import OrderModel
from models.service import ServiceModel
from services.dashboard_service import DashboardService


def add_orders(session, client_name, count, start_number, order_date=None):
    client = ClientModel(full_name=client_name, phone="0")
    car = CarModel(client=client, brand="Kia", model="Ceed", manufacture_year=2019, license_plate="P1")
    session.add_all([client, car])
    session.flush()
    for offset in range(count):
        session.add(OrderModel(
            order_number=start_number + offset,
            car_id=car.id_key,
            order_date=order_date or datetime.now(),
        ))
    session.commit()
    return client


class TestDashboardService:
    """Tests for DashboardService."""

    def test_empty_database(self, db_session_factory):
        stats = DashboardService(db_session_factory()).get_dashboard_stats()

        assert stats.orders_count == 0
        assert stats.active_orders_count == 0
        assert stats.completed_orders_count == 0
        assert stats.today_orders_count == 0
        assert stats.top_clients == []
        assert stats.recent_orders == []

    def test_seeded_counts(self, db_session_factory, seeded_db):
        stats = DashboardService(db_session_factory()).get_dashboard_stats()

        assert stats.clients_count == 1
        assert stats.cars_count == 1
        assert stats.tires_count == 2
        assert stats.services_count == 1
        assert stats.masters_count == 1
        assert stats.completed_works_count == 1
        assert stats.orders_count == 2
        assert stats.completed_orders_count == 1
        assert stats.active_orders_count == 1
        assert stats.today_orders_count == 1
        assert stats.unpaid_orders_count == 1
        assert stats.orders_with_masters_count == 1

    def test_active_plus_completed_equals_total(self, db_session_factory, seeded_db):
        """Several works on one order still count it once."""
        session = db_session_factory()
        session.add(ServiceModel(service_code=102, service_name="Valve replacement", service_cost=50.0))
        session.flush()
        session.add(CompletedWorkModel(order_number=1, service_code=102, master_id=seeded_db["master_id"]))
        session.commit()

        service = DashboardService(session)
        completed = service.completed_order_numbers()

        assert service.completed_count(completed) == 1
        assert service.completed_count(completed) + service.active_count(completed) == service.orders.count()

    def test_today_count_uses_calendar_day(self, db_session_factory):
        session = db_session_factory()
        now = datetime(2026, 3, 10, 15, 0)
        add_orders(session, "Today", 2, 1, order_date=datetime(2026, 3, 10, 0, 0))
        add_orders(session, "Yesterday", 1, 10, order_date=datetime(2026, 3, 9, 23, 59, 59))
        add_orders(session, "Tomorrow", 1, 20, order_date=datetime(2026, 3, 11, 0, 0))

        assert DashboardService(session).today_count(now) == 2

    def test_top_clients_tie_broken_by_id(self, db_session_factory):
        session = db_session_factory()
        x = add_orders(session, "X", 5, 1)
        y = add_orders(session, "Y", 3, 10)
        z = add_orders(session, "Z", 3, 20)
        add_orders(session, "W", 1, 30)

        service = DashboardService(session)
        top = service.top_clients(3)

        assert [(t.client.id_key, t.order_count) for t in top] == [(x.id_key, 5), (y.id_key, 3), (z.id_key, 3)]
        for _ in range(3):
            assert service.top_clients(3) == top
        assert DashboardService(db_session_factory()).top_clients(3) == top

    def test_recent_orders_newest_first(self, db_session_factory, seeded_db):
        session = db_session_factory()
        add_orders(session, "Late", 1, 40, order_date=datetime.now() + timedelta(minutes=1))

        recent = DashboardService(session).recent_orders(2)

        assert [r.order.order_number for r in recent] == [40, 1]
        assert recent[0].client.full_name == "Late"
        assert recent[0].master is None
        assert recent[0].is_completed is False
        assert recent[1].master.full_name == "Oleh Bondar"
        assert recent[1].is_completed is True

    def test_limits_from_settings(self, db_session_factory):
        session = db_session_factory()
        for i in range(7):
            add_orders(session, f"Client {i}", 1, i + 1)

        stats = DashboardService(session).get_dashboard_stats()

        assert len(stats.top_clients) == 3
        assert len(stats.recent_orders) == 5

    def test_unassigned_master_after_delete(self, db_session_factory, seeded_db):
        session = db_session_factory()
        master = MasterModel(full_name="Temp")
        session.add(master)
        session.flush()
        order = session.get(OrderModel, seeded_db["paid_order_id"])
        order.master_id = master.id_key
        session.commit()
        assert DashboardService(session).assigned_count() == 2

        session.delete(master)
        session.commit()

        assert DashboardService(session).assigned_count() == 1
