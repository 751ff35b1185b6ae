import logging
from decimal import Decimal
from typing import List, Tuple
from .domain import Event, Product
from .frp import (
    EventBus,
    ORDER_STATUS_CHANGED,
    StatusHandler,
    create_event,
    status_message,
)
from .transforms import total_discount

logger = logging.getLogger(__name__)

BUILDING = "building"
PROCESSED = "processed"


class Order:
    """
    Заказ: номер, список товаров (ссылки, заказ ими не владеет)
    и накопленная сумма.

    До обработки total_cost = сумма стоимостей, после process_order()
    из неё вычитается сумма скидок. Повторный вызов process_order()
    вычитает скидку ещё раз - поведение сохранено намеренно,
    охраняемый вариант см. OrderProcessor.try_process
    """

    def __init__(self, order_number: int):
        self.order_number = order_number
        self.products: List[Product] = []
        self.total_cost = Decimal("0")
        self.status = BUILDING
        self.history: Tuple[Event, ...] = ()
        self.status_changed = EventBus()

    @property
    def is_processed(self) -> bool:
        return self.status == PROCESSED

    def subscribe(self, handler: StatusHandler) -> None:
        self.status_changed = self.status_changed.subscribe(ORDER_STATUS_CHANGED, handler)

    def unsubscribe(self, handler: StatusHandler) -> None:
        self.status_changed = self.status_changed.unsubscribe(
            ORDER_STATUS_CHANGED, handler
        )

    def add_product(self, product: Product) -> None:
        # стоимость считаем до append: при None заказ не меняется
        cost = product.compute_cost()
        self.products.append(product)
        self.total_cost += cost
        logger.debug(
            "product added",
            extra={
                "extra": {
                    "order_number": self.order_number,
                    "product": product.name,
                    "cost": str(cost),
                }
            },
        )

    def total_discount(self) -> Decimal:
        return total_discount(self.products)

    def process_order(self) -> None:
        if self.is_processed:
            logger.warning(
                "order %s processed again, discount applied twice", self.order_number
            )

        discount = self.total_discount()
        self.total_cost -= discount
        self.status = PROCESSED

        logger.info(
            "order processed",
            extra={
                "extra": {
                    "order_number": self.order_number,
                    "discount": str(discount),
                    "total_cost": str(self.total_cost),
                }
            },
        )
        self._on_status_changed("Processed")

    def _on_status_changed(self, status: str) -> None:
        message = status_message(self.order_number, status)
        self.history = self.history + (
            create_event(
                ORDER_STATUS_CHANGED,
                {"order_number": self.order_number, "status": status, "message": message},
            ),
        )
        self.status_changed.publish(ORDER_STATUS_CHANGED, message)

    def __repr__(self) -> str:
        return (
            f"Order(order_number={self.order_number}, products={len(self.products)}, "
            f"total_cost={self.total_cost}, status={self.status!r})"
        )
