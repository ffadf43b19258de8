"""Build the store and load the fixed sample data. Run on app startup.

Data lives only in memory, so every start begins from this same seed.
"""
import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from pharmacare.core.config import settings
from pharmacare.db.store import EntityStore
from pharmacare.schemas.customer import CustomerCreate
from pharmacare.schemas.medication import MedicationCreate
from pharmacare.schemas.order import OrderCreate, OrderItemCreate
from pharmacare.schemas.supplier import SupplierCreate
from pharmacare.schemas.supply_order import SupplyOrderCreate, SupplyOrderItemCreate
from pharmacare.schemas.user import UserCreate
from pharmacare.services import (
    customer_service,
    medication_service,
    order_service,
    supplier_service,
    supply_order_service,
    user_service,
)

logger = logging.getLogger(__name__)

SUPPLIERS = [
    {
        "name": "MedSupply Inc.",
        "contact_name": "John Williams",
        "email": "contact@medsupply.com",
        "phone": "555-111-2222",
        "address": "123 Medical Way, Pharma City, PC 12345",
        "notes": "Primary supplier for antibiotics",
    },
    {
        "name": "PharmaDirect",
        "contact_name": "Emily Davis",
        "email": "sales@pharmadirect.com",
        "phone": "555-333-4444",
        "address": "456 Health Street, Medicine Town, MT 67890",
        "notes": "Reliable supplier for cardiovascular medications",
    },
    {
        "name": "GlobalMed",
        "contact_name": "Robert Chen",
        "email": "info@globalmed.com",
        "phone": "555-555-6666",
        "address": "789 Pharma Road, Drug City, DC 54321",
        "notes": "International supplier with competitive prices",
    },
]

# supplier is an index into SUPPLIERS
MEDICATIONS = [
    ("Amoxicillin", "antibiotic", "Common antibiotic used to treat bacterial infections",
     "500mg", "12.50", 10, 20, "box", 0),
    ("Lisinopril", "cardiovascular", "Used to treat high blood pressure and heart failure",
     "10mg", "15.75", 8, 15, "bottle", 1),
    ("Atorvastatin", "cardiovascular", "Used to treat high cholesterol and prevent cardiovascular disease",
     "20mg", "22.99", 12, 25, "box", 0),
    ("Metformin", "hormone", "Used to treat type 2 diabetes",
     "850mg", "8.99", 15, 30, "bottle", 2),
    ("Ibuprofen", "analgesic", "NSAID used to treat pain, fever, and inflammation",
     "200mg", "6.99", 45, 20, "box", 0),
]

CUSTOMERS = [
    {
        "name": "John Smith",
        "email": "john.smith@email.com",
        "phone": "555-123-7890",
        "address": "123 Patient St, Healthy Town, HT 12345",
        "notes": "Regular customer, has insurance",
    },
    {
        "name": "Maria Garcia",
        "email": "maria.garcia@email.com",
        "phone": "555-234-5678",
        "address": "456 Wellness Ave, Care City, CC 67890",
        "notes": "Has allergies to penicillin",
    },
    {
        "name": "Robert Johnson",
        "email": "robert.johnson@email.com",
        "phone": "555-345-6789",
        "address": "789 Health Blvd, Wellbeing Village, WV 54321",
        "notes": "Senior citizen, needs large print labels",
    },
    {
        "name": "Emily Wilson",
        "email": "emily.wilson@email.com",
        "phone": "555-456-7890",
        "address": "101 Recovery Rd, Healing Springs, HS 43210",
        "notes": "Prefers text message reminders",
    },
]

# (order number, customer index, status, notes, [(medication index, quantity)])
ORDERS = [
    ("ORD-5392", 0, "completed", "Regular prescription refill", [(0, 2), (4, 5)]),
    ("ORD-5391", 1, "processing", "New prescription", [(1, 3)]),
    ("ORD-5390", 2, "completed", "Monthly medication supply", [(2, 2), (3, 3)]),
    ("ORD-5389", 3, "pending", "One-time prescription", [(4, 2)]),
]


def seed_sample_data(store: EntityStore, now: Optional[datetime] = None) -> None:
    """Load the demo pharmacy: one admin, three suppliers, five medications,
    four customers, four orders and one pending supply order.

    Orders are a few minutes apart so "recent orders" has a stable order,
    newest first being ORD-5392.
    """
    now = now or datetime.now()

    user_service.create_user(store, UserCreate(
        username="admin",
        password=settings.DEFAULT_ADMIN_PASSWORD,
        name="Dr. Sarah Johnson",
        role="admin",
        email="admin@pharmacare.com",
        phone="555-123-4567",
        avatar="",
    ))

    suppliers = [supplier_service.create_supplier(store, SupplierCreate(**s)) for s in SUPPLIERS]

    medications = []
    for name, category, description, dosage, price, stock, minimum, unit, supplier in MEDICATIONS:
        medications.append(medication_service.create_medication(store, MedicationCreate(
            name=name,
            category=category,
            description=description,
            dosage=dosage,
            price=Decimal(price),
            current_stock=stock,
            minimum_stock=minimum,
            unit=unit,
            supplier_id=suppliers[supplier].id,
        )))

    customers = [customer_service.create_customer(store, CustomerCreate(**c)) for c in CUSTOMERS]

    for offset, (number, customer, status, notes, lines) in enumerate(ORDERS):
        order_service.create_order(
            store,
            OrderCreate(order_number=number, customer_id=customers[customer].id, status=status, notes=notes),
            [
                OrderItemCreate(
                    medication_id=medications[med].id,
                    quantity=quantity,
                    unit_price=medications[med].price,
                )
                for med, quantity in lines
            ],
            now=now - timedelta(minutes=5 * offset),
        )

    supply_order_service.create_supply_order(
        store,
        SupplyOrderCreate(order_number="SUP-1001", supplier_id=suppliers[0].id, notes="Antibiotics restock"),
        [
            SupplyOrderItemCreate(medication_id=medications[0].id, quantity=50, unit_price=Decimal("9.75")),
            SupplyOrderItemCreate(medication_id=medications[2].id, quantity=30, unit_price=Decimal("18.40")),
        ],
        now=now,
    )


def init_store(seed: bool = True, now: Optional[datetime] = None) -> EntityStore:
    store = EntityStore()
    if seed:
        seed_sample_data(store, now=now)
        logger.info(
            f"Seeded sample data: {len(store.medications)} medications, "
            f"{len(store.suppliers)} suppliers, {len(store.customers)} customers, "
            f"{len(store.orders)} orders"
        )
        if settings.DEFAULT_ADMIN_PASSWORD == "password":
            logger.warning("Default admin user 'admin' uses the demo password. Set DEFAULT_ADMIN_PASSWORD.")
    return store
