"""
Консольная точка входа: один заказ с тремя товарами, одна обработка,
одна строка уведомления в stdout, затем ожидание Enter.
"""

import sys
import os
from typing import Optional

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from retail.config import Settings
from retail.domain import Book, Clothing, Electronics
from retail.logging_config import configure_logging
from retail.order import Order
from retail.service import NotificationService, OrderProcessor


def build_demo_order(order_number: int = 1) -> Order:
    """Заказ с фиксированным набором товаров"""
    order = Order(order_number)
    order.add_product(Book("Book1", "20.0", 200))
    order.add_product(Electronics("Electronics1", "500.0", 256))
    order.add_product(Clothing("Clothing1", "50.0", "Medium"))
    return order


def run(order: Order, processor: OrderProcessor, notifier: NotificationService) -> Order:
    """Подписывает уведомления на заказ и запускает обработку"""
    order.subscribe(notifier.notify)
    processor.process(order)
    return order


def wait_for_enter() -> None:
    try:
        input()
    except EOFError:
        pass


def main(settings: Optional[Settings] = None) -> int:
    settings = settings or Settings()
    configure_logging(settings.log_level, settings.log_dir)

    run(build_demo_order(), OrderProcessor(), NotificationService())

    if settings.wait_for_input:
        wait_for_enter()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
