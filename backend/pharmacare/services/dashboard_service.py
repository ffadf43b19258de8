"""
Dashboard statistics for the back-office home page.

Counts come from the live store. Growth and sales-summary figures are fixed
placeholders: there is no order history to compare against.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pharmacare.db.store import EntityStore
from pharmacare.schemas.dashboard import DashboardStats, SalesData
from pharmacare.services.medication_service import get_low_stock_medications

MEDICATIONS_GROWTH = 3.2
ORDERS_GROWTH = 12
LOW_STOCK_CHANGE = 2
REVENUE_GROWTH = 8.1
SALES_DATA = SalesData(total_sales=42389, customers=1852, orders=3426, avg_order_value=64.25)


def get_dashboard_stats(store: EntityStore, now: Optional[datetime] = None) -> DashboardStats:
    """
    Aggregate the dashboard cards.

    "Today" is the calendar day of `now` (default: local wall clock), not a
    rolling 24 hours: an order from 23:59 yesterday does not count at 00:01.
    """
    today = (now or datetime.now()).date()
    todays_orders = store.orders.filter(lambda o: o.date.date() == today)
    revenue = sum((o.total_amount for o in todays_orders), Decimal("0.00"))

    return DashboardStats(
        total_medications=len(store.medications),
        medications_growth=MEDICATIONS_GROWTH,
        todays_orders=len(todays_orders),
        orders_growth=ORDERS_GROWTH,
        low_stock_items=len(get_low_stock_medications(store)),
        low_stock_change=LOW_STOCK_CHANGE,
        revenue=revenue,
        revenue_growth=REVENUE_GROWTH,
        sales_data=SALES_DATA,
    )
