import logging
from .ftypes import Either
from .order import Order
from .transforms import validate_order

logger = logging.getLogger(__name__)


class OrderProcessor:
    """Обработчик заказов - отдельный участник для будущих расширений (оплата и т.п.)"""

    def process(self, order: Order) -> None:
        order.process_order()

    def try_process(self, order: Order) -> Either[dict, Order]:
        """
        Охраняемая обработка: валидирует заказ и только затем обрабатывает.
        При ошибке заказ не изменяется
        """
        checked = validate_order(order)
        if checked.is_left:
            logger.warning(
                "order %s rejected: %s", order.order_number, checked.error()
            )
            return checked

        self.process(order)
        return Either.right(order)


class NotificationService:
    """Сервис уведомлений: печатает сообщение в stdout"""

    def notify(self, message: str) -> None:
        print(f"Notification: {message}")

    # имя из исходной программы
    send_notification = notify
