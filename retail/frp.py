from dataclasses import dataclass
from typing import Callable, Tuple
from .domain import Event
import uuid
from datetime import datetime

ORDER_STATUS_CHANGED = "ORDER_STATUS_CHANGED"

StatusHandler = Callable[[str], None]


@dataclass(frozen=True)
class EventBus:
    """
    Иммутабельная шина событий.
    Подписчики - функции (message: str) -> None, вызываются синхронно
    в порядке подписки
    """

    subscribers: Tuple[Tuple[str, StatusHandler], ...] = ()

    def subscribe(self, event_name: str, handler: StatusHandler) -> "EventBus":
        """Возвращает новую шину с добавленным подписчиком"""
        return EventBus(subscribers=self.subscribers + ((event_name, handler),))

    def unsubscribe(self, event_name: str, handler: StatusHandler) -> "EventBus":
        """
        Возвращает новую шину без последней подписки handler на event_name.
        Если подписки нет - возвращает ту же шину
        """
        for index in range(len(self.subscribers) - 1, -1, -1):
            name, h = self.subscribers[index]
            if name == event_name and h == handler:
                return EventBus(
                    subscribers=self.subscribers[:index] + self.subscribers[index + 1 :]
                )
        return self

    def handlers_for(self, event_name: str) -> Tuple[StatusHandler, ...]:
        return tuple(h for name, h in self.subscribers if name == event_name)

    def publish(self, event_name: str, message: str) -> int:
        """
        Рассылает сообщение всем подписчикам event_name.
        Исключения обработчиков не перехватываются.
        Возвращает количество вызванных обработчиков
        """
        handlers = self.handlers_for(event_name)
        for handler in handlers:
            handler(message)
        return len(handlers)


# ============ Конструкторы событий ============


def create_event(name: str, payload: dict) -> Event:
    """Создаёт событие с автоматической меткой времени"""
    return Event(
        id=str(uuid.uuid4()),
        ts=datetime.now().isoformat(),
        name=name,
        payload=payload,
    )


def status_message(order_number: int, status: str) -> str:
    """Текст уведомления: 'Order {номер}: {статус}'"""
    return f"Order {order_number}: {status}"
