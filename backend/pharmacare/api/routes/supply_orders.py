"""Supply orders: replenishment from suppliers. Receiving one restocks its medications."""
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from pharmacare.api.deps import client_ip, get_store
from pharmacare.core.audit import AuditLog
from pharmacare.core.exceptions import BusinessError
from pharmacare.db.store import EntityStore
from pharmacare.schemas.supply_order import (
    NewSupplyOrder,
    SupplyOrder,
    SupplyOrderStatusUpdate,
    SupplyOrderWithItems,
)
from pharmacare.services import supply_order_service

router = APIRouter()


@router.get("", response_model=List[SupplyOrder])
def list_supply_orders(store: EntityStore = Depends(get_store)):
    return supply_order_service.list_supply_orders(store)


@router.get("/{supply_order_id}", response_model=SupplyOrderWithItems)
def get_supply_order(supply_order_id: int, store: EntityStore = Depends(get_store)):
    order = supply_order_service.get_supply_order_with_items(store, supply_order_id)
    if not order:
        raise BusinessError.not_found("Supply order")
    return order


@router.post("", response_model=SupplyOrder, status_code=status.HTTP_201_CREATED)
def create_supply_order(data: NewSupplyOrder, request: Request, store: EntityStore = Depends(get_store)):
    try:
        order = supply_order_service.create_supply_order(store, data.order, data.items)
    except ValueError as e:
        raise BusinessError.bad_request(str(e))
    AuditLog.log_action(
        "create", "supply_order", order.id,
        {"order_number": order.order_number, "items": len(data.items), "total_amount": order.total_amount},
        client_ip(request),
    )
    return order


@router.patch("/{supply_order_id}/status", response_model=SupplyOrder)
def update_supply_order_status(
    supply_order_id: int,
    data: SupplyOrderStatusUpdate,
    request: Request,
    store: EntityStore = Depends(get_store),
):
    """Change status. "received" stamps the received date and adds every line to stock."""
    order = supply_order_service.update_supply_order_status(store, supply_order_id, data.status)
    if not order:
        raise BusinessError.not_found("Supply order")
    AuditLog.log_action("status", "supply_order", supply_order_id, {"status": data.status}, client_ip(request))
    return order


@router.delete("/{supply_order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_supply_order(supply_order_id: int, request: Request, store: EntityStore = Depends(get_store)):
    if not supply_order_service.delete_supply_order(store, supply_order_id):
        raise BusinessError.not_found("Supply order")
    AuditLog.log_action("delete", "supply_order", supply_order_id, ip_address=client_ip(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
