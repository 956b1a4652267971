import pytest

from cafedesk.menu import Menu
from cafedesk.orders import (
    MAX_LINES,
    MAX_QUANTITY,
    Order,
    OrderError,
    OrderLine,
    OrderStats,
)


@pytest.fixture
def menu():
    return Menu(
        [
            ("Espresso", "25000"),
            ("Latte", "35000"),
            ("Mocha", "40000"),
            ("Tea", "15000"),
            ("Juice", "30000"),
            ("Smoothie", "45000"),
            ("Broken", "abc"),
        ]
    )


def test_add_new_line(menu):
    order = Order(menu)
    line = order.add("Latte", 2)
    assert line == OrderLine("Latte", "35000", 2)
    assert line.total == 2 * 35000.0
    assert len(order) == 1


def test_add_same_drink_merges_quantity(menu):
    order = Order(menu)
    order.add("Espresso", 3)
    line = order.add("Espresso", 4)
    assert len(order) == 1
    assert line.quantity == 7
    assert order[0].total == 7 * 25000.0


def test_total_sums_lines(menu):
    order = Order(menu)
    order.add("Espresso", 1)
    order.add("Tea", 2)
    assert order.total() == 25000.0 + 2 * 15000.0
    assert order.total() == sum(line.total for line in order)


def test_empty_order_total_is_zero(menu):
    assert Order(menu).total() == 0.0


def test_default_quantity_is_one(menu):
    order = Order(menu)
    assert order.add("Mocha").quantity == 1


def test_iteration_keeps_order(menu):
    order = Order(menu)
    for name in ("Tea", "Latte", "Mocha"):
        order.add(name)
    assert [line.name for line in order] == ["Tea", "Latte", "Mocha"]


def test_at_most_five_distinct_drinks(menu):
    order = Order(menu)
    for name in ("Espresso", "Latte", "Mocha", "Tea", "Juice"):
        order.add(name)
    assert len(order) == MAX_LINES
    with pytest.raises(OrderError, match="up to 5 drinks"):
        order.add("Smoothie")
    assert len(order) == MAX_LINES


def test_full_order_still_merges_existing(menu):
    order = Order(menu)
    for name in ("Espresso", "Latte", "Mocha", "Tea", "Juice"):
        order.add(name)
    assert order.add("Tea", 2).quantity == 3


def test_no_drink_selected(menu):
    order = Order(menu)
    with pytest.raises(OrderError, match="Please select a drink."):
        order.add(None)
    with pytest.raises(OrderError):
        order.add("")


def test_unknown_drink(menu):
    with pytest.raises(OrderError):
        Order(menu).add("Water")


def test_invalid_price_rejected(menu):
    order = Order(menu)
    with pytest.raises(OrderError):
        order.add("Broken")
    assert len(order) == 0


@pytest.mark.parametrize("quantity", [0, -1, MAX_QUANTITY + 1])
def test_quantity_out_of_range(menu, quantity):
    with pytest.raises(OrderError):
        Order(menu).add("Latte", quantity)


def test_quantity_limit_accepted(menu):
    assert Order(menu).add("Latte", MAX_QUANTITY).quantity == MAX_QUANTITY


def test_remove_returns_line_and_updates_total(menu):
    order = Order(menu)
    order.add("Espresso", 2)
    order.add("Latte", 1)
    removed = order.remove(0)
    assert removed.name == "Espresso"
    assert [line.name for line in order] == ["Latte"]
    assert order.total() == 35000.0


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_remove_out_of_range(menu, index):
    order = Order(menu)
    order.add("Tea")
    with pytest.raises(IndexError):
        order.remove(index)
    assert len(order) == 1


def test_clear(menu):
    order = Order(menu)
    order.add("Tea", 3)
    order.add("Mocha")
    order.clear()
    assert len(order) == 0
    assert order.total() == 0.0


def test_order_line_unit_price(menu):
    line = OrderLine("Juice", "30000", 4)
    assert line.unit_price == 30000.0
    assert line.total == 4 * line.unit_price


def test_order_stats_fields():
    stats = OrderStats("2024-01-02 10:11:12", 3, 75000.0)
    assert stats.timestamp == "2024-01-02 10:11:12"
    assert stats.total_items == 3
    assert stats.total_price == 75000.0