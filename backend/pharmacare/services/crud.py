"""Generic create/update/delete over a store table. Used by the per-entity services."""
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel

from pharmacare.db.store import Table

M = TypeVar("M", bound=BaseModel)


def create_record(table: Table, model: Type[M], data: BaseModel, **defaults: Any) -> M:
    """Store `data` as a new `model` record with the next id of `table`.

    `defaults` fill in generated fields (timestamps, computed totals) and win
    over anything supplied in `data`.
    """
    fields = data.model_dump()
    fields.update(defaults)
    record = model(**fields, id=table.next_id())
    return table.put(record)


def update_record(table: Table, id_: int, updates: BaseModel) -> Optional[M]:
    """Merge the fields explicitly set on `updates` into the stored record.

    Returns None (store untouched) if the id is unknown. An explicit null
    clears a field that defaults to None and is ignored for any other.
    """
    record = table.get(id_)
    if record is None:
        return None
    fields = type(record).model_fields
    changes = {
        key: value
        for key, value in updates.model_dump(exclude_unset=True).items()
        if key in fields and (value is not None or fields[key].default is None)
    }
    if not changes:
        return record
    return table.put(record.model_copy(update=changes))


def delete_record(table: Table, id_: int) -> bool:
    return table.delete(id_)
