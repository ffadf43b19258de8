"""Medications: inventory CRUD, low-stock alert list and search."""
from typing import List

from fastapi import APIRouter, Depends, Query, Request, Response, status

from pharmacare.api.deps import client_ip, get_store
from pharmacare.core.audit import AuditLog
from pharmacare.core.exceptions import BusinessError
from pharmacare.db.store import EntityStore
from pharmacare.schemas.medication import (
    LowStockMedication,
    Medication,
    MedicationCreate,
    MedicationUpdate,
)
from pharmacare.services import medication_service

router = APIRouter()


@router.get("", response_model=List[Medication])
def list_medications(store: EntityStore = Depends(get_store)):
    return medication_service.list_medications(store)


@router.get("/low-stock", response_model=List[LowStockMedication])
def get_low_stock_medications(store: EntityStore = Depends(get_store)):
    """Medications below their minimum stock, with supplier details for reordering."""
    return medication_service.get_low_stock_medications(store)


@router.get("/search", response_model=List[Medication])
def search_medications(
    q: str = Query("", description="Free text matched against name, description, category and dosage"),
    store: EntityStore = Depends(get_store),
):
    return medication_service.search_medications(store, q)


@router.get("/{medication_id}", response_model=Medication)
def get_medication(medication_id: int, store: EntityStore = Depends(get_store)):
    medication = medication_service.get_medication(store, medication_id)
    if not medication:
        raise BusinessError.not_found("Medication")
    return medication


@router.post("", response_model=Medication, status_code=status.HTTP_201_CREATED)
def create_medication(data: MedicationCreate, request: Request, store: EntityStore = Depends(get_store)):
    medication = medication_service.create_medication(store, data)
    AuditLog.log_action("create", "medication", medication.id, {"name": medication.name}, client_ip(request))
    return medication


@router.put("/{medication_id}", response_model=Medication)
def update_medication(
    medication_id: int,
    updates: MedicationUpdate,
    request: Request,
    store: EntityStore = Depends(get_store),
):
    """Partial update: only fields present in the body change."""
    medication = medication_service.update_medication(store, medication_id, updates)
    if not medication:
        raise BusinessError.not_found("Medication")
    AuditLog.log_action(
        "update", "medication", medication_id, updates.model_dump(exclude_unset=True), client_ip(request)
    )
    return medication


@router.delete("/{medication_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_medication(medication_id: int, request: Request, store: EntityStore = Depends(get_store)):
    if not medication_service.delete_medication(store, medication_id):
        raise BusinessError.not_found("Medication")
    AuditLog.log_action("delete", "medication", medication_id, ip_address=client_ip(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
