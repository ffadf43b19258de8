from pharmacare.schemas.user import User
from pharmacare.schemas.supplier import Supplier
from pharmacare.schemas.customer import Customer
from pharmacare.schemas.medication import Medication, LowStockMedication
from pharmacare.schemas.order import Order, OrderItem
from pharmacare.schemas.supply_order import SupplyOrder, SupplyOrderItem
from pharmacare.schemas.dashboard import DashboardStats

__all__ = [
    "User", "Supplier", "Customer", "Medication", "LowStockMedication",
    "Order", "OrderItem", "SupplyOrder", "SupplyOrderItem", "DashboardStats",
]
