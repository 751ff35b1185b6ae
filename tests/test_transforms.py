import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from decimal import Decimal

from retail.domain import Book, Clothing, Electronics
from retail.ftypes import Either
from retail.order import Order
from retail.transforms import (
    total_cost,
    total_discount,
    net_total,
    validate_product,
    validate_order,
)

products = (
    Book("Book1", "20.0", 200),
    Electronics("Electronics1", "500.0", 256),
    Clothing("Clothing1", "50.0", "Medium"),
)


def test_totals_reduce():
    assert total_cost(products) == Decimal("570.0")
    assert total_discount(products) == Decimal("34.5")
    assert net_total(products) == Decimal("535.5")


def test_totals_of_empty_sequence():
    assert total_cost(()) == Decimal("0")
    assert total_discount([]) == Decimal("0")


def test_validate_product():
    assert validate_product(products[0]).is_right
    assert validate_product(None).is_left

    negative = validate_product(Book("Cheap", "-1", 10))
    assert negative.is_left
    assert "Cheap" in negative.error()


def test_validate_order_rejects_processed():
    order = Order(1)
    order.add_product(products[0])
    assert validate_order(order).is_right

    order.process_order()
    result = validate_order(order)
    assert result.is_left
    assert "уже обработан" in result.error()


def test_validate_order_reports_first_error():
    order = Order(2)
    order.add_product(Book("A", "-1", 1))
    order.add_product(Clothing("B", "-2", "S"))
    assert "A" in validate_order(order).error()


def test_either_map_bind_get_or_else():
    right = Either.right(10)
    left = Either.left({"error": "nope"})

    assert right.map(lambda x: x * 2).get_or_else(0) == 20
    assert right.bind(lambda x: Either.right(x + 5)).get_or_else(0) == 15
    assert left.map(lambda x: x * 2) is left
    assert left.get_or_else(0) == 0
    assert left.error() == "nope"
    assert right.error() is None
