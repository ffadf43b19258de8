"""Supply (replenishment) orders placed with suppliers.

Receiving a supply order is the only operation that adds medication stock.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Sequence

from pharmacare.db.store import EntityStore
from pharmacare.schemas.supply_order import (
    SupplyOrder,
    SupplyOrderCreate,
    SupplyOrderItem,
    SupplyOrderItemCreate,
    SupplyOrderItemDetail,
    SupplyOrderStatus,
    SupplyOrderWithItems,
)
from pharmacare.services.medication_service import adjust_stock
from pharmacare.services.order_service import check_references, line_total

logger = logging.getLogger(__name__)


def list_supply_orders(store: EntityStore) -> List[SupplyOrder]:
    return store.supply_orders.all()


def get_supply_order(store: EntityStore, supply_order_id: int) -> Optional[SupplyOrder]:
    return store.supply_orders.get(supply_order_id)


def get_supply_order_items(store: EntityStore, supply_order_id: int) -> List[SupplyOrderItem]:
    return store.supply_order_items.filter(lambda item: item.supply_order_id == supply_order_id)


def get_supply_order_with_items(store: EntityStore, supply_order_id: int) -> Optional[SupplyOrderWithItems]:
    order = store.supply_orders.get(supply_order_id)
    if order is None:
        return None
    items = [
        SupplyOrderItemDetail(**item.model_dump(), medication=store.medications.get(item.medication_id))
        for item in get_supply_order_items(store, supply_order_id)
    ]
    return SupplyOrderWithItems(order=order, items=items, supplier=store.suppliers.get(order.supplier_id))


def create_supply_order(
    store: EntityStore,
    data: SupplyOrderCreate,
    items: Sequence[SupplyOrderItemCreate],
    now: Optional[datetime] = None,
) -> SupplyOrder:
    """Create a supply order with its lines. Nothing is written if a reference is bad.

    Raises:
        ValueError: If the supplier or any line's medication does not exist
    """
    check_references(store, store.suppliers, data.supplier_id, "Supplier", items)

    order_id = store.supply_orders.next_id()
    lines = [
        SupplyOrderItem(
            id=store.supply_order_items.next_id(),
            supply_order_id=order_id,
            medication_id=item.medication_id,
            quantity=item.quantity,
            unit_price=item.unit_price,
            total=line_total(item.quantity, item.unit_price),
        )
        for item in items
    ]
    order = SupplyOrder(
        id=order_id,
        order_number=data.order_number or f"SUP-{order_id:04d}",
        supplier_id=data.supplier_id,
        status=data.status,
        order_date=now or datetime.now(),
        received_date=None,
        total_amount=sum((line.total for line in lines), Decimal("0.00")),
        notes=data.notes,
    )
    store.supply_orders.put(order)
    for line in lines:
        store.supply_order_items.put(line)

    logger.info(f"Created supply order {order.order_number} with {len(lines)} items")
    return order


def update_supply_order_status(
    store: EntityStore,
    supply_order_id: int,
    status: SupplyOrderStatus,
    now: Optional[datetime] = None,
) -> Optional[SupplyOrder]:
    """Change status. Moving to "received" stamps the received date and restocks.

    Each line's quantity is added to its medication's current stock once per
    supply order. Other statuses keep the received date, so an order that was
    received, moved back to pending and received again adds nothing the
    second time. Lines whose medication was deleted are skipped.
    """
    order = store.supply_orders.get(supply_order_id)
    if order is None:
        return None

    if status != "received":
        return store.supply_orders.put(order.model_copy(update={"status": status}))

    already_received = order.received_date is not None
    updated = store.supply_orders.put(
        order.model_copy(update={"status": status, "received_date": now or datetime.now()})
    )
    if already_received:
        logger.info(f"Supply order {order.order_number} was already received, stock unchanged")
        return updated

    for item in get_supply_order_items(store, supply_order_id):
        if adjust_stock(store, item.medication_id, item.quantity) is None:
            logger.warning(
                f"Supply order {order.order_number}: medication {item.medication_id} no longer exists"
            )
    logger.info(f"Received supply order {order.order_number}")
    return updated


def delete_supply_order(store: EntityStore, supply_order_id: int) -> bool:
    """Delete a supply order and all of its lines."""
    for item in get_supply_order_items(store, supply_order_id):
        store.supply_order_items.delete(item.id)
    return store.supply_orders.delete(supply_order_id)
