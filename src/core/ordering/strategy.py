"""
OrderingStrategy — контракт сравнения

Стратегия — любой callable (a, b) -> int со знаковым three-way контрактом:
    < 0  → a раньше b (LESS)
    == 0 → a и b эквивалентны (EQUAL)
    > 0  → a позже b (GREATER)

Обычные функции и lambda являются валидными стратегиями.
Comparator — иммутабельное значение-стратегия фреймворка: оборачивает callable,
несёт имя для сообщений об ошибках и нормализует результат в Ordering.

КОНТРАКТ (обязанность вызывающего кода, не проверяется в runtime):
1. Рефлексивность: compare(a, a) == EQUAL
2. Антисимметричность: sign(compare(a, b)) == -sign(compare(b, a))
3. Транзитивность: a < b и b < c ⇒ a < c
4. Детерминизм: повторные вызовы на неизменных входах дают один результат

Нарушение контракта даёт неопределённый порядок, но не падение.
Для проверки на выборке см. src.core.ordering.verification.
"""

import math
from decimal import Decimal
from enum import IntEnum
from numbers import Real
from typing import Any, Callable

from src.core.ordering.errors import ComparisonError, IncomparableValues, InvalidArgument

# Сигнатура стратегии: plain callable (a, b) -> int
Strategy = Callable[[Any, Any], int]


# =============================================================================
# ORDERING
# =============================================================================


class Ordering(IntEnum):
    """Результат three-way сравнения."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(
        cls,
        result: Any,
        left: Any = None,
        right: Any = None,
        strategy: str | None = None,
    ) -> "Ordering":
        """
        Нормализация результата стратегии по знаку.

        Args:
            result: Значение, возвращённое стратегией
            left, right: Сравниваемые элементы (для сообщения об ошибке)
            strategy: Имя стратегии (для сообщения об ошибке)

        Returns:
            Ordering с тем же знаком

        Raises:
            IncomparableValues: bool, NaN или не-число вместо three-way результата
        """
        if isinstance(result, cls):
            return result

        # bool: boolean-компаратор вместо three-way.
        # Decimal не зарегистрирован как Real, но Decimal.compare() возвращает Decimal
        if isinstance(result, bool) or not isinstance(result, (Real, Decimal)):
            raise IncomparableValues(
                f"strategy returned {type(result).__name__} {result!r}, "
                f"expected a signed three-way number",
                left,
                right,
                strategy,
            )

        if is_nan(result):
            raise IncomparableValues("strategy returned NaN", left, right, strategy)

        if result < 0:
            return cls.LESS
        if result > 0:
            return cls.GREATER
        return cls.EQUAL

    def inverted(self) -> "Ordering":
        """LESS ↔ GREATER, EQUAL без изменений."""
        return Ordering(-self.value)


# =============================================================================
# THREE-WAY COMPARISON
# =============================================================================


def is_nan(value: Any) -> bool:
    """NaN (float или Decimal) — не участвует в упорядочивании."""
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def three_way(a: Any, b: Any, strategy: str | None = None) -> Ordering:
    """
    Явное three-way сравнение через rich comparison.

    Вычитание (a - b) НЕ используется: для ограниченных целых типов оно
    переполняется, а для нечисловых значений не определено.

    Args:
        a: Левое значение
        b: Правое значение
        strategy: Имя стратегии (для сообщения об ошибке)

    Returns:
        Ordering.LESS, если a < b; GREATER, если b < a; иначе EQUAL

    Raises:
        IncomparableValues: NaN или взаимно несравнимые типы
    """
    if is_nan(a) or is_nan(b):
        raise IncomparableValues("NaN is not orderable", a, b, strategy)

    try:
        if a < b:
            return Ordering.LESS
        if b < a:
            return Ordering.GREATER
    except TypeError as exc:
        raise IncomparableValues(
            f"{type(a).__name__} and {type(b).__name__} are not mutually orderable",
            a,
            b,
            strategy,
        ) from exc

    return Ordering.EQUAL


# =============================================================================
# COMPARATOR
# =============================================================================


class Comparator:
    """
    Иммутабельная именованная стратегия сравнения.

    Stateless: безопасно переиспользуется между вызовами sort и потоками.
    Комбинаторы (then_by, reversed) всегда возвращают новый Comparator.
    """

    __slots__ = ("_fn", "_name")

    def __init__(self, fn: Strategy, name: str | None = None):
        if not callable(fn):
            raise InvalidArgument(f"strategy must be callable, got {type(fn).__name__}")
        object.__setattr__(self, "_fn", fn)
        object.__setattr__(self, "_name", name or getattr(fn, "__name__", repr(fn)))

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    def compare(self, a: Any, b: Any) -> Ordering:
        """
        Сравнение двух элементов.

        Ошибки сравнения, возникшие на производных значениях (например, полях),
        переадресуются на исходную пару a, b.

        Raises:
            InvalidArgument: Если a или b — None
            IncomparableValues: Если стратегия не может упорядочить пару
        """
        if a is None or b is None:
            raise InvalidArgument("cannot compare absent element", a, b, self._name)
        try:
            result = self._fn(a, b)
        except ComparisonError as exc:
            if exc.left is a and exc.right is b:
                raise
            raise exc.with_pair(a, b, self._name) from exc
        return Ordering.of(result, a, b, self._name)

    def __call__(self, a: Any, b: Any) -> Ordering:
        return self.compare(a, b)

    def then_by(self, *secondaries: Strategy) -> "Comparator":
        """Fluent-форма combinators.then_by(self, *secondaries)."""
        from src.core.ordering.combinators import then_by

        return then_by(self, *secondaries)

    def reversed(self) -> "Comparator":
        """Fluent-форма combinators.reversed_order(self)."""
        from src.core.ordering.combinators import reversed_order

        return reversed_order(self)

    def __repr__(self) -> str:
        return f"Comparator({self._name})"


def as_comparator(strategy: Strategy, name: str | None = None) -> Comparator:
    """
    Приведение произвольного callable к Comparator.

    Идемпотентно: существующий Comparator возвращается как есть
    (если не запрошено новое имя).
    """
    if isinstance(strategy, Comparator):
        if name is None or name == strategy.name:
            return strategy
        return Comparator(strategy.compare, name)
    return Comparator(strategy, name)
