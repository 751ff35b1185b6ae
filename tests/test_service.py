import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from decimal import Decimal

from retail.domain import Book, Clothing, Electronics
from retail.order import Order
from retail.service import OrderProcessor, NotificationService


def make_order():
    order = Order(1)
    order.add_product(Book("Book1", "20.0", 200))
    order.add_product(Electronics("Electronics1", "500.0", 256))
    order.add_product(Clothing("Clothing1", "50.0", "Medium"))
    return order


def test_processor_delegates_to_order():
    order = make_order()
    OrderProcessor().process(order)
    assert order.total_cost == Decimal("535.5")
    assert order.is_processed


def test_processor_process_twice_keeps_double_discount():
    order = make_order()
    processor = OrderProcessor()
    processor.process(order)
    processor.process(order)
    assert order.total_cost == Decimal("501.0")


def test_try_process_success():
    order = make_order()
    result = OrderProcessor().try_process(order)
    assert result.is_right
    assert result.get_or_else(None) is order
    assert order.total_cost == Decimal("535.5")


def test_try_process_rejects_second_processing():
    order = make_order()
    processor = OrderProcessor()
    processor.try_process(order)

    result = processor.try_process(order)
    assert result.is_left
    assert order.total_cost == Decimal("535.5")
    assert len(order.history) == 1


def test_try_process_rejects_negative_price():
    order = Order(9)
    order.add_product(Book("Broken", "-5", 1))
    received = []
    order.subscribe(received.append)

    result = OrderProcessor().try_process(order)
    assert result.is_left
    assert order.total_cost == Decimal("-5")
    assert not order.is_processed
    assert received == []


def test_notification_service_prints(capsys):
    NotificationService().notify("Order 1: Processed")
    assert capsys.readouterr().out == "Notification: Order 1: Processed\n"


def test_send_notification_alias(capsys):
    NotificationService().send_notification("hi")
    assert capsys.readouterr().out == "Notification: hi\n"
