from typing import Dict, List
from .order import Order
from .transforms import total_cost, total_discount


# ============ Сводка по заказу ============


def product_line(product) -> Dict:
    """Строка отчёта по одному товару"""
    return {
        "name": product.name,
        "category": product.category,
        "cost": product.compute_cost(),
        "discount": product.compute_discount(),
        "net": product.compute_cost() - product.compute_discount(),
    }


def order_summary(order: Order) -> Dict:
    """
    Сводка по заказу: строки товаров, суммы до/после скидок
    и текущий total_cost заказа (после повторной обработки он
    расходится с net_total)
    """
    lines: List[Dict] = [product_line(p) for p in order.products]
    gross = total_cost(order.products)
    discount = total_discount(order.products)

    return {
        "order_number": order.order_number,
        "status": order.status,
        "items": lines,
        "items_count": len(lines),
        "gross_total": gross,
        "total_discount": discount,
        "net_total": gross - discount,
        "total_cost": order.total_cost,
        "notifications": [e.payload["message"] for e in order.history],
    }


def discounts_by_category(order: Order) -> Dict[str, object]:
    """Скидки, сгруппированные по категориям товаров"""
    result: Dict[str, object] = {}
    for line in map(product_line, order.products):
        result[line["category"]] = result.get(line["category"], 0) + line["discount"]
    return result
