from datetime import datetime, timedelta
from decimal import Decimal

from pharmacare.schemas.order import OrderCreate, OrderItemCreate
from pharmacare.services import dashboard_service, order_service

from conftest import SEED_TIME


def test_seeded_dashboard(seeded_store):
    stats = dashboard_service.get_dashboard_stats(seeded_store, now=SEED_TIME)

    assert stats.total_medications == 5
    assert stats.todays_orders == 4
    assert stats.low_stock_items == 4
    # 59.95 + 47.25 + 72.95 + 13.98
    assert stats.revenue == Decimal("194.13")


def test_placeholder_figures_are_constant(seeded_store, store):
    seeded = dashboard_service.get_dashboard_stats(seeded_store, now=SEED_TIME)
    empty = dashboard_service.get_dashboard_stats(store, now=SEED_TIME)
    for stats in (seeded, empty):
        assert stats.medications_growth == 3.2
        assert stats.orders_growth == 12
        assert stats.low_stock_change == 2
        assert stats.revenue_growth == 8.1
        assert stats.sales_data.total_sales == 42389
        assert stats.sales_data.avg_order_value == 64.25


def test_yesterday_excluded_even_within_24_hours(store, medication_factory, customer_factory):
    customer = customer_factory()
    med = medication_factory(current_stock=100)
    line = [OrderItemCreate(medication_id=med.id, quantity=1, unit_price=Decimal("10.00"))]
    just_after_midnight = datetime(2024, 3, 14, 0, 5)

    order_service.create_order(
        store, OrderCreate(customer_id=customer.id), line,
        now=just_after_midnight - timedelta(minutes=10),
    )
    order_service.create_order(store, OrderCreate(customer_id=customer.id), line, now=just_after_midnight)

    stats = dashboard_service.get_dashboard_stats(store, now=just_after_midnight)

    assert stats.todays_orders == 1
    assert stats.revenue == Decimal("10.00")


def test_empty_store(store):
    stats = dashboard_service.get_dashboard_stats(store)
    assert stats.total_medications == 0
    assert stats.todays_orders == 0
    assert stats.low_stock_items == 0
    assert stats.revenue == Decimal("0")
