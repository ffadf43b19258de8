"""In-memory entity store. Process-lifetime only, rebuilt (and reseeded) on start."""
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from pharmacare.schemas.customer import Customer
from pharmacare.schemas.medication import Medication
from pharmacare.schemas.order import Order, OrderItem
from pharmacare.schemas.supplier import Supplier
from pharmacare.schemas.supply_order import SupplyOrder, SupplyOrderItem
from pharmacare.schemas.user import User

T = TypeVar("T")


class Table(Generic[T]):
    """Records of one entity kind keyed by integer id.

    Ids come from a counter that only moves forward, so an id is never
    handed out twice even after its record is deleted. Listing follows
    insertion order; replacing a record keeps its position.
    """

    def __init__(self, name: str):
        self.name = name
        self._rows: Dict[int, T] = {}
        self._next_id = 1

    def next_id(self) -> int:
        id_ = self._next_id
        self._next_id += 1
        return id_

    def get(self, id_: int) -> Optional[T]:
        return self._rows.get(id_)

    def all(self) -> List[T]:
        return list(self._rows.values())

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [row for row in self._rows.values() if predicate(row)]

    def put(self, row: T) -> T:
        self._rows[row.id] = row
        return row

    def delete(self, id_: int) -> bool:
        return self._rows.pop(id_, None) is not None

    def __contains__(self, id_: int) -> bool:
        return id_ in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[T]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"<Table {self.name} rows={len(self._rows)} next_id={self._next_id}>"


class EntityStore:
    """All back-office data. One instance per application."""

    def __init__(self):
        self.users: Table[User] = Table("users")
        self.medications: Table[Medication] = Table("medications")
        self.suppliers: Table[Supplier] = Table("suppliers")
        self.customers: Table[Customer] = Table("customers")
        self.orders: Table[Order] = Table("orders")
        self.order_items: Table[OrderItem] = Table("order_items")
        self.supply_orders: Table[SupplyOrder] = Table("supply_orders")
        self.supply_order_items: Table[SupplyOrderItem] = Table("supply_order_items")
