from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from pharmacare.schemas.common import Money
from pharmacare.schemas.customer import Customer
from pharmacare.schemas.medication import Medication

OrderStatus = Literal["pending", "processing", "completed", "cancelled"]


class OrderItemCreate(BaseModel):
    medication_id: int
    quantity: int = Field(..., gt=0, le=100_000)
    unit_price: Money = Field(..., ge=0, max_digits=12, decimal_places=2)


class OrderItem(OrderItemCreate):
    id: int
    order_id: int
    total: Money


class OrderItemDetail(OrderItem):
    medication: Optional[Medication] = None


class OrderCreate(BaseModel):
    # Generated from the id when omitted
    order_number: Optional[str] = None
    customer_id: int
    status: OrderStatus = "pending"
    notes: Optional[str] = None


class NewOrder(BaseModel):
    """POST /orders body: the order header plus its lines."""
    order: OrderCreate
    items: List[OrderItemCreate] = Field(..., min_length=1)


class OrderUpdate(BaseModel):
    order_number: Optional[str] = Field(None, min_length=1)
    customer_id: Optional[int] = None
    status: Optional[OrderStatus] = None
    notes: Optional[str] = None


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class Order(BaseModel):
    id: int
    order_number: str
    customer_id: int
    status: OrderStatus
    total_amount: Money
    date: datetime
    notes: Optional[str] = None


class OrderWithItems(BaseModel):
    order: Order
    items: List[OrderItemDetail]
    customer: Optional[Customer] = None
