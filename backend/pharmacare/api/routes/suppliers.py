"""Suppliers CRUD."""
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from pharmacare.api.deps import client_ip, get_store
from pharmacare.core.audit import AuditLog
from pharmacare.core.exceptions import BusinessError
from pharmacare.db.store import EntityStore
from pharmacare.schemas.supplier import Supplier, SupplierCreate, SupplierUpdate
from pharmacare.services import supplier_service

router = APIRouter()


@router.get("", response_model=List[Supplier])
def list_suppliers(store: EntityStore = Depends(get_store)):
    return supplier_service.list_suppliers(store)


@router.get("/{supplier_id}", response_model=Supplier)
def get_supplier(supplier_id: int, store: EntityStore = Depends(get_store)):
    supplier = supplier_service.get_supplier(store, supplier_id)
    if not supplier:
        raise BusinessError.not_found("Supplier")
    return supplier


@router.post("", response_model=Supplier, status_code=status.HTTP_201_CREATED)
def create_supplier(data: SupplierCreate, request: Request, store: EntityStore = Depends(get_store)):
    supplier = supplier_service.create_supplier(store, data)
    AuditLog.log_action("create", "supplier", supplier.id, {"name": supplier.name}, client_ip(request))
    return supplier


@router.put("/{supplier_id}", response_model=Supplier)
def update_supplier(
    supplier_id: int,
    updates: SupplierUpdate,
    request: Request,
    store: EntityStore = Depends(get_store),
):
    supplier = supplier_service.update_supplier(store, supplier_id, updates)
    if not supplier:
        raise BusinessError.not_found("Supplier")
    AuditLog.log_action(
        "update", "supplier", supplier_id, updates.model_dump(exclude_unset=True), client_ip(request)
    )
    return supplier


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_supplier(supplier_id: int, request: Request, store: EntityStore = Depends(get_store)):
    if not supplier_service.delete_supplier(store, supplier_id):
        raise BusinessError.not_found("Supplier")
    AuditLog.log_action("delete", "supplier", supplier_id, ip_address=client_ip(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
