from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Money is exact internally and a plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

CENTS = Decimal("0.01")


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS)
