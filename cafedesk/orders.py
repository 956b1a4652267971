"""A customer's order: drinks picked from the menu with their quantities."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from cafedesk.menu import Menu, MenuError, MenuItem

__all__ = [
    "MAX_LINES",
    "MIN_QUANTITY",
    "MAX_QUANTITY",
    "OrderError",
    "OrderLine",
    "OrderStats",
    "Order",
]

MAX_LINES = 5
MIN_QUANTITY = 1
MAX_QUANTITY = 20


class OrderError(Exception):
    """Raised when a drink cannot be added to or removed from an order."""


@dataclass(frozen=True)
class OrderLine:
    """One drink in an order. The price is kept as the menu's text."""

    name: str
    price: str
    quantity: int

    @property
    def unit_price(self) -> float:
        """The price of a single drink as a number."""
        return MenuItem(self.name, self.price).amount

    @property
    def total(self) -> float:
        """The price of the line: quantity times unit price."""
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class OrderStats:
    """What is remembered of a finished order for the daily summary."""

    timestamp: str
    total_items: int
    total_price: float


class Order:
    """An order being put together from a menu.

    At most ``MAX_LINES`` different drinks may be ordered; adding a drink
    already in the order raises its quantity instead of adding a line.
    """

    def __init__(self, menu: Menu) -> None:
        self._menu = menu
        self._lines: list[OrderLine] = []

    def __iter__(self) -> Iterator[OrderLine]:
        return iter(list(self._lines))

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> OrderLine:
        return self._lines[index]

    def __repr__(self) -> str:
        return f"Order({self._lines!r})"

    @property
    def menu(self) -> Menu:
        """The menu drinks are taken from."""
        return self._menu

    def _menu_item(self, name: str) -> MenuItem:
        for item in self._menu:
            if item.name == name:
                return item
        raise OrderError(f"No drink named {name!r} on the menu.")

    def add(self, name: str | None, quantity: int = MIN_QUANTITY) -> OrderLine:
        """Add drinks to the order and return the line that now holds them."""
        if not name:
            raise OrderError("Please select a drink.")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise OrderError("Quantity must be a whole number.")
        if not MIN_QUANTITY <= quantity <= MAX_QUANTITY:
            raise OrderError(
                f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}."
            )
        item = self._menu_item(name)
        try:
            item.amount
        except MenuError as exc:
            raise OrderError(f"Drink {name!r} has no valid price.") from exc

        for pos, line in enumerate(self._lines):
            if line.name == name:
                merged = replace(line, quantity=line.quantity + quantity)
                self._lines[pos] = merged
                return merged

        if len(self._lines) >= MAX_LINES:
            raise OrderError(f"You can only order up to {MAX_LINES} drinks.")
        line = OrderLine(name, item.price, quantity)
        self._lines.append(line)
        return line

    def remove(self, index: int) -> OrderLine:
        """Remove the line at the given position and return it."""
        if not 0 <= index < len(self._lines):
            raise IndexError(f"no order line at position {index}")
        return self._lines.pop(index)

    def clear(self) -> None:
        """Empty the order."""
        self._lines.clear()

    def total(self) -> float:
        """The price of the whole order before any discount."""
        return sum((line.total for line in self._lines), 0.0)