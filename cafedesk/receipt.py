"""Checking out an order: the printed receipt and the day's order log."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from cafedesk.orders import Order, OrderError, OrderLine, OrderStats

__all__ = [
    "TIMESTAMP_FORMAT",
    "Receipt",
    "DailyLog",
    "discount_rate",
    "format_amount",
    "checkout",
    "write_receipt",
]

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_RULE = "-" * 47
_DOUBLE_RULE = "=" * 47

# (threshold, rate): an order total strictly above the threshold earns the rate.
_DISCOUNTS = ((1_000_000, 0.2), (500_000, 0.15), (200_000, 0.1))


def discount_rate(total: float) -> float:
    """Return the discount rate that applies to an order total."""
    for threshold, rate in _DISCOUNTS:
        if total > threshold:
            return rate
    return 0.0


def format_amount(value: float) -> str:
    """Format a sum with thousands separators and no decimals, halves rounded away from zero."""
    rounded = Decimal(repr(float(value))).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = Decimal(0)
    return f"{int(rounded):,}"


@dataclass(frozen=True)
class Receipt:
    """A finished order with its totals and discount."""

    timestamp: str
    lines: tuple[OrderLine, ...]
    subtotal: float
    rate: float
    discount: float
    total: float

    @property
    def total_items(self) -> int:
        """Number of drinks on the receipt."""
        return sum(line.quantity for line in self.lines)

    @property
    def stats(self) -> OrderStats:
        """The entry this receipt adds to the daily log."""
        return OrderStats(self.timestamp, self.total_items, self.total)

    @property
    def text(self) -> str:
        """The receipt as printed."""
        parts = [
            "===== RECEIPT =====\n",
            f"{self.timestamp}\n\n",
            f"{'Drink':<20}{'Price':>10}{'Q.ty':>10}{'Total':>15}\n",
            f"{_RULE}\n",
        ]
        parts.extend(
            f"{line.name:<20}{format_amount(line.unit_price):>10}"
            f"{line.quantity:>10}{format_amount(line.total):>15}\n"
            for line in self.lines
        )
        parts.append(f"{_RULE}\n")
        parts.append(f"Total (before discounting): {format_amount(self.subtotal)} VND\n")
        if self.discount > 0:
            parts.append(f"Discount: {self.rate:.2%}\n")
            parts.append(f"Discount amount: {format_amount(self.discount)} VND\n")
        parts.append(f"Total (after discounting): {format_amount(self.total)} VND\n")
        parts.append(f"{_DOUBLE_RULE}\n")
        parts.append("Thank you for your order!\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.text


def checkout(order: Order, now: datetime | None = None) -> Receipt:
    """Close the order: build its receipt and empty the order."""
    if len(order) == 0:
        raise OrderError("No drinks in the order.")
    moment = now if now is not None else datetime.now()
    lines = tuple(order)
    subtotal = sum((line.total for line in lines), 0.0)
    rate = discount_rate(subtotal)
    discount = subtotal * rate
    receipt = Receipt(
        timestamp=moment.strftime(TIMESTAMP_FORMAT),
        lines=lines,
        subtotal=subtotal,
        rate=rate,
        discount=discount,
        total=subtotal - discount,
    )
    order.clear()
    return receipt


def write_receipt(receipt: Receipt, path: str | os.PathLike[str]) -> None:
    """Write the receipt text to a UTF-8 file with a byte-order mark."""
    with open(path, "w", encoding="utf-8-sig", newline="\n") as handle:
        handle.write(receipt.text)


class DailyLog:
    """The orders taken during the day."""

    def __init__(self) -> None:
        self._orders: list[OrderStats] = []

    def __iter__(self) -> Iterator[OrderStats]:
        return iter(list(self._orders))

    def __len__(self) -> int:
        return len(self._orders)

    def record(self, stats: OrderStats) -> None:
        """Add a finished order to the log."""
        self._orders.append(stats)

    def revenue(self) -> float:
        """The sum of all recorded order totals."""
        return sum((order.total_price for order in self._orders), 0.0)

    def summary(self) -> str:
        """The day's summary as written to file."""
        parts = [
            "Daily summary of orders in the day:\n",
            "Time\t\t\tTotal drinks\tTotal price (VND)\n",
        ]
        parts.extend(
            f"{order.timestamp}\t{order.total_items}\t\t{format_amount(order.total_price)}\n"
            for order in self._orders
        )
        parts.append(f"Total revenue of the day: {format_amount(self.revenue())} VND\n")
        return "".join(parts)

    def write(self, path: str | os.PathLike[str]) -> None:
        """Write the summary to a UTF-8 file with a byte-order mark."""
        with open(path, "w", encoding="utf-8-sig", newline="\n") as handle:
            handle.write(self.summary())