# retail/ftypes.py
# Either для охраняемых операций над заказом: Left({"error": ...}) или Right(value)

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")


@dataclass(frozen=True)
class Either(Generic[L, R]):
    """
    Левая ветвь - ошибка валидации, правая - успешный результат.
    Фабрики: Either.left(val), Either.right(val)
    """

    is_left: bool
    value: Union[L, R]

    @staticmethod
    def left(value: L) -> "Either[L, R]":
        return Either(True, value)

    @staticmethod
    def right(value: R) -> "Either[L, R]":
        return Either(False, value)

    @property
    def is_right(self) -> bool:
        return not self.is_left

    def map(self, fn: Callable[[R], U]) -> "Either[L, U]":
        return Either.right(fn(self.value)) if self.is_right else self  # type: ignore[return-value]

    def bind(self, fn: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        return fn(self.value) if self.is_right else self  # type: ignore[return-value]

    def get_or_else(self, default: U) -> R | U:
        return self.value if self.is_right else default  # type: ignore[return-value]

    def error(self) -> str | None:
        """Текст ошибки для Left({"error": ...}), иначе None"""
        if self.is_right:
            return None
        return self.value.get("error") if isinstance(self.value, dict) else str(self.value)

    def __repr__(self) -> str:
        return f"Left({self.value})" if self.is_left else f"Right({self.value})"
