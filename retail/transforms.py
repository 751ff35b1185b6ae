from decimal import Decimal
from functools import reduce
from typing import Iterable, Optional, TYPE_CHECKING
from .ftypes import Either
from .domain import Product

if TYPE_CHECKING:
    from .order import Order


# ============ Агрегаты (чистые функции) ============


def total_cost(products: Iterable[Product]) -> Decimal:
    """Сумма стоимостей товаров до скидок"""
    return reduce(lambda acc, p: acc + p.compute_cost(), products, Decimal("0"))


def total_discount(products: Iterable[Product]) -> Decimal:
    """Сумма скидок по всем товарам"""
    return reduce(lambda acc, p: acc + p.compute_discount(), products, Decimal("0"))


def net_total(products: Iterable[Product]) -> Decimal:
    products = tuple(products)
    return total_cost(products) - total_discount(products)


# ============ Валидация (Either) ============


def validate_product(product: Optional[Product]) -> Either[dict, Product]:
    """
    Проверяет товар перед добавлением/обработкой:
    - товар не None
    - цена неотрицательна
    """
    if product is None:
        return Either.left({"error": "Товар не задан"})
    if product.price < 0:
        return Either.left(
            {"error": f"Отрицательная цена у товара {product.name}: {product.price}"}
        )
    return Either.right(product)


def validate_order(order: "Order") -> Either[dict, "Order"]:
    """
    Проверяет заказ перед охраняемой обработкой:
    - заказ ещё не обработан (иначе скидка вычтется повторно)
    - все товары проходят validate_product
    Возвращает первую найденную ошибку
    """
    if order.is_processed:
        return Either.left({"error": f"Заказ {order.order_number} уже обработан"})

    errors = [r.value for r in map(validate_product, order.products) if r.is_left]
    if errors:
        return Either.left(errors[0])

    return Either.right(order)
