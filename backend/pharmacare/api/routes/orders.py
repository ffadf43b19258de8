"""Customer orders: create with lines, status changes, recent list."""
from typing import List

from fastapi import APIRouter, Depends, Query, Request, Response, status

from pharmacare.api.deps import client_ip, get_store
from pharmacare.core.audit import AuditLog
from pharmacare.core.exceptions import BusinessError
from pharmacare.db.store import EntityStore
from pharmacare.schemas.order import (
    NewOrder,
    Order,
    OrderStatusUpdate,
    OrderUpdate,
    OrderWithItems,
)
from pharmacare.services import order_service

router = APIRouter()


@router.get("", response_model=List[Order])
def list_orders(store: EntityStore = Depends(get_store)):
    return order_service.list_orders(store)


@router.get("/recent", response_model=List[Order])
def get_recent_orders(
    limit: int = Query(5, ge=0, description="Number of orders to return, newest first"),
    store: EntityStore = Depends(get_store),
):
    return order_service.get_recent_orders(store, limit)


@router.get("/{order_id}", response_model=OrderWithItems)
def get_order(order_id: int, store: EntityStore = Depends(get_store)):
    """Order with its lines, each line's medication and the customer."""
    order = order_service.get_order_with_items(store, order_id)
    if not order:
        raise BusinessError.not_found("Order")
    return order


@router.post("", response_model=Order, status_code=status.HTTP_201_CREATED)
def create_order(data: NewOrder, request: Request, store: EntityStore = Depends(get_store)):
    """
    Create an order with its lines in one call.

    Body: {"order": {...}, "items": [{"medication_id", "quantity", "unit_price"}, ...]}
    Totals are computed server-side. Stock is not reduced here.
    """
    try:
        order = order_service.create_order(store, data.order, data.items)
    except ValueError as e:
        raise BusinessError.bad_request(str(e))
    AuditLog.log_action(
        "create", "order", order.id,
        {"order_number": order.order_number, "items": len(data.items), "total_amount": order.total_amount},
        client_ip(request),
    )
    return order


@router.put("/{order_id}", response_model=Order)
def update_order(
    order_id: int,
    updates: OrderUpdate,
    request: Request,
    store: EntityStore = Depends(get_store),
):
    try:
        order = order_service.update_order(store, order_id, updates)
    except ValueError as e:
        raise BusinessError.bad_request(str(e))
    if not order:
        raise BusinessError.not_found("Order")
    AuditLog.log_action("update", "order", order_id, updates.model_dump(exclude_unset=True), client_ip(request))
    return order


@router.patch("/{order_id}/status", response_model=Order)
def update_order_status(
    order_id: int,
    data: OrderStatusUpdate,
    request: Request,
    store: EntityStore = Depends(get_store),
):
    order = order_service.update_order_status(store, order_id, data.status)
    if not order:
        raise BusinessError.not_found("Order")
    AuditLog.log_action("status", "order", order_id, {"status": data.status}, client_ip(request))
    return order


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(order_id: int, request: Request, store: EntityStore = Depends(get_store)):
    if not order_service.delete_order(store, order_id):
        raise BusinessError.not_found("Order")
    AuditLog.log_action("delete", "order", order_id, ip_address=client_ip(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
