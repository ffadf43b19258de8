"""Medication CRUD plus the stock and search queries used by the inventory pages."""
import logging
from typing import List, Optional

from pharmacare.db.store import EntityStore
from pharmacare.schemas.medication import (
    LowStockMedication,
    Medication,
    MedicationCreate,
    MedicationUpdate,
)
from pharmacare.schemas.supplier import Supplier
from pharmacare.services.crud import create_record, delete_record, update_record

logger = logging.getLogger(__name__)

# Stands in for a supplier that no longer exists
UNKNOWN_SUPPLIER = Supplier(id=0, name="Unknown", phone="-")


def list_medications(store: EntityStore) -> List[Medication]:
    return store.medications.all()


def get_medication(store: EntityStore, medication_id: int) -> Optional[Medication]:
    return store.medications.get(medication_id)


def create_medication(store: EntityStore, data: MedicationCreate) -> Medication:
    if data.supplier_id not in store.suppliers:
        logger.warning(f"Medication '{data.name}' references unknown supplier {data.supplier_id}")
    return create_record(store.medications, Medication, data)


def update_medication(store: EntityStore, medication_id: int, updates: MedicationUpdate) -> Optional[Medication]:
    return update_record(store.medications, medication_id, updates)


def delete_medication(store: EntityStore, medication_id: int) -> bool:
    """Order lines keep their medication_id; detail views show no medication for them."""
    return delete_record(store.medications, medication_id)


def adjust_stock(store: EntityStore, medication_id: int, delta: int) -> Optional[Medication]:
    """Add `delta` units to current stock. Stock never goes below zero."""
    medication = store.medications.get(medication_id)
    if medication is None:
        return None
    new_stock = max(0, medication.current_stock + delta)
    return store.medications.put(medication.model_copy(update={"current_stock": new_stock}))


def get_low_stock_medications(store: EntityStore) -> List[LowStockMedication]:
    """Medications with current stock strictly below their minimum, with supplier attached."""
    rows = []
    for medication in store.medications.filter(lambda m: m.is_low_stock):
        supplier = store.suppliers.get(medication.supplier_id)
        if supplier is None:
            logger.warning(
                f"Low-stock medication {medication.id} has unknown supplier {medication.supplier_id}"
            )
            supplier = UNKNOWN_SUPPLIER
        rows.append(LowStockMedication(**medication.model_dump(), supplier=supplier))
    return rows


def search_medications(store: EntityStore, query: str) -> List[Medication]:
    """
    Case-insensitive substring search over name, description, category and dosage.

    Examples:
        "amox" -> Amoxicillin
        "CARDIO" -> every cardiovascular medication
        "" -> everything
    """
    needle = (query or "").strip().lower()

    def matches(medication: Medication) -> bool:
        haystacks = (
            medication.name,
            medication.description or "",
            medication.category,
            medication.dosage,
        )
        return any(needle in text.lower() for text in haystacks)

    return store.medications.filter(matches)
