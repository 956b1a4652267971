"""Drink menu: the list of drinks with their prices, and its text file."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

__all__ = ["MenuError", "MenuItem", "Menu", "load_menu", "save_menu"]


class MenuError(Exception):
    """Raised when a menu entry is invalid or the menu file cannot be used."""


@dataclass(frozen=True)
class MenuItem:
    """One drink on the menu. The price is kept as the text it was given in."""

    name: str
    price: str

    @property
    def amount(self) -> float:
        """The price as a number."""
        return _parse_price(self.price)


def _parse_price(text: str) -> float:
    cleaned = text.strip()
    if not cleaned or "_" in cleaned:
        raise MenuError("Drink price must be a number.")
    try:
        value = float(cleaned)
    except ValueError as exc:
        raise MenuError("Drink price must be a number.") from exc
    if math.isnan(value):
        raise MenuError("Drink price must be a number.")
    return value


ItemLike = Union[MenuItem, "tuple[str, str]"]


class Menu:
    """An ordered list of drinks."""

    def __init__(self, items: Iterable[ItemLike] = ()) -> None:
        self._items: list[MenuItem] = [
            item if isinstance(item, MenuItem) else MenuItem(*item) for item in items
        ]

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> MenuItem:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Menu({self._items!r})"

    def add(self, name: str, price: str) -> MenuItem:
        """Append a drink after checking that both fields are filled and the price is numeric."""
        if not name or not price or not name.strip() or not price.strip():
            raise MenuError("Please enter drink name and price.")
        _parse_price(price)
        item = MenuItem(name, price)
        self._items.append(item)
        return item

    def remove(self, indices: Iterable[int]) -> list[MenuItem]:
        """Remove the drinks at the given positions; return them in menu order."""
        wanted = set(indices)
        for index in wanted:
            if not 0 <= index < len(self._items):
                raise IndexError(f"no menu entry at position {index}")
        removed = [item for pos, item in enumerate(self._items) if pos in wanted]
        self._items = [item for pos, item in enumerate(self._items) if pos not in wanted]
        return removed

    def search(self, text: str) -> list[MenuItem]:
        """Return the drinks whose name contains the text, ignoring case.

        Blank text matches every drink.
        """
        needle = (text or "").lower()
        if not needle.strip():
            return list(self._items)
        return [item for item in self._items if needle in item.name.lower()]

    def price_of(self, name: str) -> float:
        """Return the price of the first drink with exactly this name."""
        for item in self._items:
            if item.name == name:
                return item.amount
        raise MenuError(f"No drink named {name!r} on the menu.")


def load_menu(path: str | os.PathLike[str]) -> Menu:
    """Read a menu file of ``name,price`` lines; lines of another shape are skipped."""
    items: list[MenuItem] = []
    try:
        with open(path, encoding="utf-8-sig", newline=None) as handle:
            for line in handle:
                parts = line.rstrip("\n").split(",")
                if len(parts) == 2:
                    items.append(MenuItem(parts[0], parts[1]))
    except FileNotFoundError as exc:
        raise MenuError(f"Cannot find {os.fspath(path)}.") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise MenuError(f"Error while reading file(s):\n{exc}") from exc
    return Menu(items)


def save_menu(menu: Iterable[MenuItem], path: str | os.PathLike[str]) -> None:
    """Write the menu as ``name,price`` lines in UTF-8 with a byte-order mark."""
    try:
        with open(path, "w", encoding="utf-8-sig", newline="\n") as handle:
            for item in menu:
                handle.write(f"{item.name},{item.price}\n")
    except OSError as exc:
        raise MenuError(f"Cannot write {os.fspath(path)}\n{exc}") from exc