"""Customer orders and their line items.

STOCK POLICY:
- Creating an order never touches medication stock
- Stock only moves when a supply order is received (see supply_order_service)
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Sequence

from pharmacare.db.store import EntityStore, Table
from pharmacare.schemas.common import to_cents
from pharmacare.schemas.order import (
    Order,
    OrderCreate,
    OrderItem,
    OrderItemCreate,
    OrderItemDetail,
    OrderStatus,
    OrderUpdate,
    OrderWithItems,
)
from pharmacare.services.crud import update_record

logger = logging.getLogger(__name__)


def line_total(quantity: int, unit_price: Decimal) -> Decimal:
    return to_cents(Decimal(quantity) * unit_price)


def list_orders(store: EntityStore) -> List[Order]:
    return store.orders.all()


def get_order(store: EntityStore, order_id: int) -> Optional[Order]:
    return store.orders.get(order_id)


def get_order_items(store: EntityStore, order_id: int) -> List[OrderItem]:
    return store.order_items.filter(lambda item: item.order_id == order_id)


def get_order_with_items(store: EntityStore, order_id: int) -> Optional[OrderWithItems]:
    """Join an order with its lines, each line's medication, and the customer.

    Medications or customers deleted since the order was placed come back as None.
    """
    order = store.orders.get(order_id)
    if order is None:
        return None
    items = [
        OrderItemDetail(**item.model_dump(), medication=store.medications.get(item.medication_id))
        for item in get_order_items(store, order_id)
    ]
    return OrderWithItems(order=order, items=items, customer=store.customers.get(order.customer_id))


def check_references(store: EntityStore, owner: Table, owner_id: int, label: str, items: Sequence) -> None:
    """Raise ValueError unless `owner_id` is in `owner` and every line's medication exists."""
    if owner_id not in owner:
        raise ValueError(f"{label} {owner_id} does not exist")
    for item in items:
        if item.medication_id not in store.medications:
            raise ValueError(f"Medication {item.medication_id} does not exist")


def create_order(
    store: EntityStore,
    data: OrderCreate,
    items: Sequence[OrderItemCreate],
    now: Optional[datetime] = None,
) -> Order:
    """Create an order with its lines.

    Every reference is checked before anything is written, so a bad line
    leaves the store untouched. Line totals and the order total are computed
    here; the caller never supplies them.

    Raises:
        ValueError: If the customer or any line's medication does not exist
    """
    check_references(store, store.customers, data.customer_id, "Customer", items)

    order_id = store.orders.next_id()
    lines = [
        OrderItem(
            id=store.order_items.next_id(),
            order_id=order_id,
            medication_id=item.medication_id,
            quantity=item.quantity,
            unit_price=item.unit_price,
            total=line_total(item.quantity, item.unit_price),
        )
        for item in items
    ]
    order = Order(
        id=order_id,
        order_number=data.order_number or f"ORD-{order_id:04d}",
        customer_id=data.customer_id,
        status=data.status,
        total_amount=sum((line.total for line in lines), Decimal("0.00")),
        date=now or datetime.now(),
        notes=data.notes,
    )
    store.orders.put(order)
    for line in lines:
        store.order_items.put(line)

    logger.info(f"Created order {order.order_number} with {len(lines)} items, total {order.total_amount}")
    return order


def update_order(store: EntityStore, order_id: int, updates: OrderUpdate) -> Optional[Order]:
    """Returns None for an unknown order, before the customer is looked at.

    Raises:
        ValueError: If the update points the order at an unknown customer
    """
    if order_id not in store.orders:
        return None
    if updates.customer_id is not None and updates.customer_id not in store.customers:
        raise ValueError(f"Customer {updates.customer_id} does not exist")
    return update_record(store.orders, order_id, updates)


def update_order_status(store: EntityStore, order_id: int, status: OrderStatus) -> Optional[Order]:
    order = store.orders.get(order_id)
    if order is None:
        return None
    return store.orders.put(order.model_copy(update={"status": status}))


def delete_order(store: EntityStore, order_id: int) -> bool:
    """Delete an order and all of its lines."""
    for item in get_order_items(store, order_id):
        store.order_items.delete(item.id)
    return store.orders.delete(order_id)


def get_recent_orders(store: EntityStore, limit: int = 5) -> List[Order]:
    """Newest orders first, at most `limit` of them."""
    if limit <= 0:
        return []
    orders = sorted(store.orders.all(), key=lambda o: (o.date, o.id), reverse=True)
    return orders[:limit]


def get_orders_by_customer(store: EntityStore, customer_id: int) -> List[Order]:
    return store.orders.filter(lambda o: o.customer_id == customer_id)
