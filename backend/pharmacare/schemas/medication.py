from typing import Literal, Optional

from pydantic import BaseModel, Field

from pharmacare.schemas.common import Money
from pharmacare.schemas.supplier import Supplier

MedicationCategory = Literal[
    "antibiotic", "analgesic", "antiviral", "antihistamine",
    "cardiovascular", "dermatological", "gastrointestinal",
    "hormone", "respiratory", "vitamin", "other",
]


class MedicationCreate(BaseModel):
    name: str = Field(..., min_length=1)
    category: MedicationCategory
    description: Optional[str] = None
    dosage: str = Field(..., min_length=1)
    price: Money = Field(..., ge=0, max_digits=12, decimal_places=2)
    current_stock: int = Field(..., ge=0)
    minimum_stock: int = Field(20, ge=0)
    unit: str = Field(..., min_length=1)  # e.g. "box", "bottle", "tablet"
    supplier_id: int


class MedicationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    category: Optional[MedicationCategory] = None
    description: Optional[str] = None
    dosage: Optional[str] = Field(None, min_length=1)
    price: Optional[Money] = Field(None, ge=0, max_digits=12, decimal_places=2)
    current_stock: Optional[int] = Field(None, ge=0)
    minimum_stock: Optional[int] = Field(None, ge=0)
    unit: Optional[str] = Field(None, min_length=1)
    supplier_id: Optional[int] = None


class Medication(MedicationCreate):
    id: int

    @property
    def is_low_stock(self) -> bool:
        return self.current_stock < self.minimum_stock


class LowStockMedication(Medication):
    """Low-stock row for the dashboard, joined with its supplier."""
    supplier: Supplier
