"""Supplier CRUD."""
from typing import List, Optional

from pharmacare.db.store import EntityStore
from pharmacare.schemas.supplier import Supplier, SupplierCreate, SupplierUpdate
from pharmacare.services.crud import create_record, delete_record, update_record


def list_suppliers(store: EntityStore) -> List[Supplier]:
    return store.suppliers.all()


def get_supplier(store: EntityStore, supplier_id: int) -> Optional[Supplier]:
    return store.suppliers.get(supplier_id)


def create_supplier(store: EntityStore, data: SupplierCreate) -> Supplier:
    return create_record(store.suppliers, Supplier, data)


def update_supplier(store: EntityStore, supplier_id: int, updates: SupplierUpdate) -> Optional[Supplier]:
    return update_record(store.suppliers, supplier_id, updates)


def delete_supplier(store: EntityStore, supplier_id: int) -> bool:
    """Medications keep pointing at a deleted supplier; joins fall back to "Unknown"."""
    return delete_record(store.suppliers, supplier_id)
