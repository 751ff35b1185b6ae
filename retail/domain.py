from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict


# Ставки скидок по категориям
DISCOUNT_RATES: Dict[str, Decimal] = {
    "book": Decimal("0.10"),
    "electronics": Decimal("0.05"),
    "clothing": Decimal("0.15"),
}


@dataclass(frozen=True)
class Product(ABC):
    """
    Абстрактный товар: имя + цена.
    Цена приводится к Decimal, отрицательные значения не проверяются
    (см. transforms.validate_product)
    """

    name: str
    price: Decimal

    def __post_init__(self):
        object.__setattr__(self, "price", Decimal(str(self.price)))

    @property
    @abstractmethod
    def category(self) -> str: ...

    def compute_cost(self) -> Decimal:
        """Стоимость товара до скидки (совпадает с ценой)"""
        return self.price

    @abstractmethod
    def compute_discount(self) -> Decimal: ...


@dataclass(frozen=True)
class Book(Product):
    page_count: int = 0

    @property
    def category(self) -> str:
        return "book"

    def compute_discount(self) -> Decimal:
        return self.price * DISCOUNT_RATES["book"]


@dataclass(frozen=True)
class Electronics(Product):
    memory_size: int = 0  # ГБ

    @property
    def category(self) -> str:
        return "electronics"

    def compute_discount(self) -> Decimal:
        return self.price * DISCOUNT_RATES["electronics"]


@dataclass(frozen=True)
class Clothing(Product):
    size: str = ""

    @property
    def category(self) -> str:
        return "clothing"

    def compute_discount(self) -> Decimal:
        return self.price * DISCOUNT_RATES["clothing"]


@dataclass(frozen=True)
class Event:
    id: str
    ts: str
    name: str
    payload: Dict
