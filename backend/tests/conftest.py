from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from pharmacare.db.init_db import init_store
from pharmacare.db.store import EntityStore
from pharmacare.main import create_app
from pharmacare.schemas.customer import CustomerCreate
from pharmacare.schemas.medication import MedicationCreate
from pharmacare.schemas.supplier import SupplierCreate
from pharmacare.services import customer_service, medication_service, supplier_service

# Midday, so seeded orders minutes apart all fall on the same calendar day
SEED_TIME = datetime(2024, 3, 14, 12, 0, 0)


@pytest.fixture
def store():
    return EntityStore()


@pytest.fixture
def seeded_store():
    return init_store(seed=True, now=SEED_TIME)


@pytest.fixture
def client(seeded_store):
    return TestClient(create_app(store=seeded_store))


@pytest.fixture
def supplier_factory(store):
    def create_supplier(**kwargs):
        defaults = {"name": "Supplier", "phone": "555-000-0000"}
        defaults.update(kwargs)
        return supplier_service.create_supplier(store, SupplierCreate(**defaults))

    return create_supplier


@pytest.fixture
def medication_factory(store, supplier_factory):
    def create_medication(**kwargs):
        defaults = {
            "name": "Medication",
            "category": "other",
            "dosage": "10mg",
            "price": Decimal("1.00"),
            "current_stock": 50,
            "minimum_stock": 20,
            "unit": "box",
        }
        defaults.update(kwargs)
        if "supplier_id" not in defaults:
            defaults["supplier_id"] = supplier_factory().id
        return medication_service.create_medication(store, MedicationCreate(**defaults))

    return create_medication


@pytest.fixture
def customer_factory(store):
    def create_customer(**kwargs):
        defaults = {"name": "Customer", "phone": "555-999-0000"}
        defaults.update(kwargs)
        return customer_service.create_customer(store, CustomerCreate(**defaults))

    return create_customer
