"""Customers CRUD and per-customer order history."""
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from pharmacare.api.deps import client_ip, get_store
from pharmacare.core.audit import AuditLog
from pharmacare.core.exceptions import BusinessError
from pharmacare.db.store import EntityStore
from pharmacare.schemas.customer import Customer, CustomerCreate, CustomerUpdate
from pharmacare.schemas.order import Order
from pharmacare.services import customer_service, order_service

router = APIRouter()


@router.get("", response_model=List[Customer])
def list_customers(store: EntityStore = Depends(get_store)):
    return customer_service.list_customers(store)


@router.get("/{customer_id}", response_model=Customer)
def get_customer(customer_id: int, store: EntityStore = Depends(get_store)):
    customer = customer_service.get_customer(store, customer_id)
    if not customer:
        raise BusinessError.not_found("Customer")
    return customer


@router.get("/{customer_id}/orders", response_model=List[Order])
def list_customer_orders(customer_id: int, store: EntityStore = Depends(get_store)):
    if not customer_service.get_customer(store, customer_id):
        raise BusinessError.not_found("Customer")
    return order_service.get_orders_by_customer(store, customer_id)


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
def create_customer(data: CustomerCreate, request: Request, store: EntityStore = Depends(get_store)):
    customer = customer_service.create_customer(store, data)
    AuditLog.log_action("create", "customer", customer.id, {"name": customer.name}, client_ip(request))
    return customer


@router.put("/{customer_id}", response_model=Customer)
def update_customer(
    customer_id: int,
    updates: CustomerUpdate,
    request: Request,
    store: EntityStore = Depends(get_store),
):
    customer = customer_service.update_customer(store, customer_id, updates)
    if not customer:
        raise BusinessError.not_found("Customer")
    AuditLog.log_action(
        "update", "customer", customer_id, updates.model_dump(exclude_unset=True), client_ip(request)
    )
    return customer


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: int, request: Request, store: EntityStore = Depends(get_store)):
    if not customer_service.delete_customer(store, customer_id):
        raise BusinessError.not_found("Customer")
    AuditLog.log_action("delete", "customer", customer_id, ip_address=client_ip(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
