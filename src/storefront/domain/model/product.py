"""Product aggregate.

Products live independently of orders. Orders copy item names and prices
at submission time, so nothing here affects existing orders.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


def validate_stock(stock: object) -> int:
    """Coerce a raw stock value to a non-negative int."""
    if isinstance(stock, bool):
        raise ValidationError(f"Invalid stock value: {stock!r}")
    try:
        value = int(str(stock).strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid stock value: {stock!r}") from exc
    if value < 0:
        raise ValidationError("Stock cannot be negative")
    return value


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is None until the repository assigns one on first save.
    """

    id: int | None
    name: str
    price: Money
    stock: int = 0
    image: str = ""
    description: str = ""

    def update_stock(self, stock: object) -> None:
        """Overwrite the stock level."""
        self.stock = validate_stock(stock)
