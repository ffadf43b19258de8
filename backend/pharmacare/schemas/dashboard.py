from pydantic import BaseModel

from pharmacare.schemas.common import Money


class SalesData(BaseModel):
    total_sales: float
    customers: int
    orders: int
    avg_order_value: float


class DashboardStats(BaseModel):
    total_medications: int
    medications_growth: float
    todays_orders: int
    orders_growth: float
    low_stock_items: int
    low_stock_change: float
    revenue: Money
    revenue_growth: float
    sales_data: SalesData
