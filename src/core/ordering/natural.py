"""
NaturalOrdering — собственный порядок типа

Тип имеет natural ordering, если выполняется одно из условий:
1. Определён метод compare(self, other) -> int (capability-проверка через
   runtime_checkable Protocol, наследование не требуется)
2. Определён собственный __lt__ (int, str, tuple, date, dataclass(order=True),
   functools.total_ordering)

Типы, унаследовавшие object.__lt__ без изменений, natural ordering не имеют:
неявного порядка по адресу, порядку вставки или полям нет.
"""

from typing import Any, Iterable, Protocol, runtime_checkable

from src.core.ordering.errors import IncomparableValues, NoOrderingAvailable
from src.core.ordering.strategy import Comparator, Ordering, is_nan, three_way

NATURAL_ORDER_NAME = "natural"


@runtime_checkable
class NaturalOrdering(Protocol):
    """Capability: тип сам определяет порядок своих экземпляров."""

    def compare(self, other: Any) -> int: ...


def has_natural_ordering(value: Any) -> bool:
    """
    Проверка наличия natural ordering у значения.

    Args:
        value: Проверяемый элемент

    Returns:
        True если тип реализует compare() или собственный __lt__
    """
    if isinstance(value, NaturalOrdering):
        return True

    less_than = getattr(type(value), "__lt__", None)
    if less_than is None or less_than is object.__lt__:
        return False
    # dict и подобные определяют __lt__ на уровне C, но возвращают NotImplemented
    try:
        return less_than(value, value) is not NotImplemented
    except TypeError:
        return False


def _natural_compare(a: Any, b: Any) -> Ordering:
    # Decimal тоже реализует compare(); NaN (включая sNaN) отсекается до вызова
    if is_nan(a) or is_nan(b):
        raise IncomparableValues("NaN is not orderable", a, b, NATURAL_ORDER_NAME)
    if isinstance(a, NaturalOrdering):
        return Ordering.of(a.compare(b), a, b, NATURAL_ORDER_NAME)
    return three_way(a, b, NATURAL_ORDER_NAME)


_NATURAL = Comparator(_natural_compare, NATURAL_ORDER_NAME)


def natural_order() -> Comparator:
    """Стратегия natural ordering (разделяемое stateless значение)."""
    return _NATURAL


def natural_ordering_for(values: Iterable[Any]) -> Comparator:
    """
    Разрешение natural ordering для коллекции.

    Проверяет каждый элемент; None пропускается (его отклонит сам sort).

    Raises:
        NoOrderingAvailable: Первый тип элемента без natural ordering
    """
    for value in values:
        if value is not None and not has_natural_ordering(value):
            raise NoOrderingAvailable(type(value))
    return _NATURAL
