from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from pharmacare.schemas.common import Money
from pharmacare.schemas.medication import Medication
from pharmacare.schemas.supplier import Supplier

SupplyOrderStatus = Literal["pending", "ordered", "received", "cancelled"]


class SupplyOrderItemCreate(BaseModel):
    medication_id: int
    quantity: int = Field(..., gt=0, le=100_000)
    unit_price: Money = Field(..., ge=0, max_digits=12, decimal_places=2)


class SupplyOrderItem(SupplyOrderItemCreate):
    id: int
    supply_order_id: int
    total: Money


class SupplyOrderItemDetail(SupplyOrderItem):
    medication: Optional[Medication] = None


class SupplyOrderCreate(BaseModel):
    order_number: Optional[str] = None
    supplier_id: int
    status: SupplyOrderStatus = "pending"
    notes: Optional[str] = None


class NewSupplyOrder(BaseModel):
    order: SupplyOrderCreate
    items: List[SupplyOrderItemCreate] = Field(..., min_length=1)


class SupplyOrderStatusUpdate(BaseModel):
    status: SupplyOrderStatus


class SupplyOrder(BaseModel):
    id: int
    order_number: str
    supplier_id: int
    status: SupplyOrderStatus
    order_date: datetime
    received_date: Optional[datetime] = None
    total_amount: Money
    notes: Optional[str] = None


class SupplyOrderWithItems(BaseModel):
    order: SupplyOrder
    items: List[SupplyOrderItemDetail]
    supplier: Optional[Supplier] = None
