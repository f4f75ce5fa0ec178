"""In-memory shopping cart."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class CartLine:
    """A product in the cart with its unit price and quantity."""

    product_id: int
    unit_price: Decimal
    quantity: int = 1
    name: str | None = None

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class Cart:
    """Ordered collection of cart lines keyed by product id.

    Adding a product already in the cart increases its quantity; a
    quantity that would drop to zero or below removes the line.
    """

    def __init__(self) -> None:
        self._lines: dict[int, CartLine] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines

    @property
    def lines(self) -> list[CartLine]:
        """Lines in the order products were first added."""
        return list(self._lines.values())

    def add(
        self,
        product_id: int,
        unit_price: Decimal | int | str,
        quantity: int = 1,
        name: str | None = None,
    ) -> CartLine:
        """Add a product or increase its quantity.

        Returns:
            CartLine: The resulting line.

        Raises:
            ValueError: If quantity is below 1.
        """
        if quantity < 1:
            raise ValueError("quantity must be at least 1")

        line = self._lines.get(product_id)
        if line is None:
            line = CartLine(
                product_id=product_id,
                unit_price=Decimal(str(unit_price)),
                quantity=quantity,
                name=name,
            )
            self._lines[product_id] = line
        else:
            line.quantity += quantity
        return line

    def remove(self, product_id: int) -> None:
        """Remove a product. Unknown ids are ignored."""
        self._lines.pop(product_id, None)

    def set_quantity(self, product_id: int, quantity: int) -> None:
        """Set the quantity of a product already in the cart.

        A quantity of zero or less removes the line.

        Raises:
            KeyError: If the product is not in the cart.
        """
        if product_id not in self._lines:
            raise KeyError(product_id)
        if quantity <= 0:
            self.remove(product_id)
            return
        self._lines[product_id].quantity = quantity

    def clear(self) -> None:
        self._lines.clear()

    def subtotal(self) -> Decimal:
        """Sum of unit price times quantity over all lines."""
        return sum((line.line_total for line in self._lines.values()), Decimal("0"))
