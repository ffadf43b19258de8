"""Customer CRUD."""
from typing import List, Optional

from pharmacare.db.store import EntityStore
from pharmacare.schemas.customer import Customer, CustomerCreate, CustomerUpdate
from pharmacare.services.crud import create_record, delete_record, update_record


def list_customers(store: EntityStore) -> List[Customer]:
    return store.customers.all()


def get_customer(store: EntityStore, customer_id: int) -> Optional[Customer]:
    return store.customers.get(customer_id)


def create_customer(store: EntityStore, data: CustomerCreate) -> Customer:
    return create_record(store.customers, Customer, data)


def update_customer(store: EntityStore, customer_id: int, updates: CustomerUpdate) -> Optional[Customer]:
    return update_record(store.customers, customer_id, updates)


def delete_customer(store: EntityStore, customer_id: int) -> bool:
    return delete_record(store.customers, customer_id)
