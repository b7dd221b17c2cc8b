"""
SortOperation — стабильная сортировка и бинарный поиск по стратегии

Перемещение элементов делегируется платформенной стабильной сортировке
(list.sort, Timsort) через functools.cmp_to_key; алгоритм сортировки здесь
не реализуется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Стабильность: элементы, равные по стратегии, сохраняют исходный порядок
2. In-place: identity коллекции и элементов сохраняется, меняются только позиции
3. Для каждой соседней пары результата: compare(left, right) ∈ {LESS, EQUAL}
4. При ошибке стратегии элементы не теряются и не дублируются
5. Ошибки стратегии пробрасываются вызывающему коду без восстановления

Конкурентная сортировка одной и той же коллекции из нескольких потоков
не поддерживается: вызывающий код обязан сериализовать доступ.
"""

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, MutableSequence, Sequence
from functools import cmp_to_key
from typing import Any, Final

import structlog

from src.core.ordering.errors import InvalidArgument, OrderingError
from src.core.ordering.natural import natural_ordering_for
from src.core.ordering.strategy import Comparator, Ordering, Strategy, as_comparator

logger = structlog.get_logger(__name__)

SIDE_LEFT: Final[str] = "left"
SIDE_RIGHT: Final[str] = "right"


# =============================================================================
# STRATEGY RESOLUTION
# =============================================================================


def _reject_absent(sequence: Sequence[Any]) -> None:
    for index, element in enumerate(sequence):
        if element is None:
            raise InvalidArgument(f"sequence contains an absent element at index {index}")


def resolve_strategy(values: Iterable[Any], strategy: Strategy | None) -> Comparator:
    """
    Явная стратегия либо natural ordering элементов.

    Raises:
        NoOrderingAvailable: Стратегия не задана и тип без natural ordering
    """
    if strategy is not None:
        return as_comparator(strategy)
    return natural_ordering_for(values)


# =============================================================================
# SORT
# =============================================================================


def sort_in_place(sequence: MutableSequence[Any], strategy: Strategy | None = None) -> None:
    """
    Стабильная сортировка коллекции на месте.

    list сортируется напрямую через list.sort. Остальные MutableSequence
    сортируются через рабочую копию и записываются обратно по индексам
    только после успешной сортировки: при ошибке коллекция не изменена.

    Args:
        sequence: Изменяемая коллекция (владеет вызывающий код)
        strategy: Стратегия сравнения; None → natural ordering элементов

    Raises:
        InvalidArgument: Коллекция содержит None
        NoOrderingAvailable: Нет ни стратегии, ни natural ordering
        IncomparableValues: Стратегия не смогла упорядочить пару
    """
    _reject_absent(sequence)
    comparator = resolve_strategy(sequence, strategy)

    logger.debug("sort_started", size=len(sequence), strategy=comparator.name)

    key = cmp_to_key(comparator.compare)
    try:
        if isinstance(sequence, list):
            sequence.sort(key=key)
        else:
            items = list(sequence)
            items.sort(key=key)
            for index, element in enumerate(items):
                sequence[index] = element
    except OrderingError as exc:
        logger.warning(
            "sort_comparison_failed",
            strategy=comparator.name,
            left=repr(getattr(exc, "left", None)),
            right=repr(getattr(exc, "right", None)),
            error=str(exc),
        )
        raise


def sorted_copy(values: Iterable[Any], strategy: Strategy | None = None) -> list[Any]:
    """
    Неизменяющий вариант sort_in_place: возвращает новый отсортированный list.
    """
    items = list(values)
    sort_in_place(items, strategy)
    return items


def is_sorted(sequence: Sequence[Any], strategy: Strategy | None = None) -> bool:
    """
    Проверка упорядоченности: для каждой соседней пары compare ∈ {LESS, EQUAL}.
    """
    _reject_absent(sequence)
    comparator = resolve_strategy(sequence, strategy)
    return all(
        comparator.compare(sequence[i], sequence[i + 1]) is not Ordering.GREATER
        for i in range(len(sequence) - 1)
    )


# =============================================================================
# SEARCH
# =============================================================================


def _bisect(sequence: Sequence[Any], target: Any, comparator: Comparator, side: str) -> int:
    key = cmp_to_key(comparator.compare)
    bisect = bisect_left if side == SIDE_LEFT else bisect_right
    return bisect(sequence, key(target), key=key)


def insertion_point(
    sequence: Sequence[Any],
    target: Any,
    strategy: Strategy | None = None,
    *,
    side: str = SIDE_LEFT,
) -> int:
    """
    Позиция вставки target с сохранением порядка (бинарный поиск).

    ПРЕДУСЛОВИЕ: sequence уже упорядочена согласованно со strategy.
    Не проверяется в runtime; нарушение даёт неопределённый результат.

    Args:
        sequence: Упорядоченная коллекция
        target: Искомый элемент
        strategy: Стратегия сравнения; None → natural ordering
        side: left — перед равными элементами, right — после них

    Returns:
        Индекс в диапазоне [0, len(sequence)]
    """
    if target is None:
        raise InvalidArgument("target must not be absent")
    if side not in (SIDE_LEFT, SIDE_RIGHT):
        raise InvalidArgument(f"side must be 'left' or 'right', got {side!r}")

    return _bisect(sequence, target, resolve_strategy([target], strategy), side)


def find_position(
    sequence: Sequence[Any],
    target: Any,
    strategy: Strategy | None = None,
) -> int | None:
    """
    Бинарный поиск элемента, равного target по стратегии.

    ПРЕДУСЛОВИЕ: sequence уже упорядочена согласованно со strategy.

    Returns:
        Индекс самого левого равного элемента или None, если такого нет
    """
    if target is None:
        raise InvalidArgument("target must not be absent")

    comparator = resolve_strategy([target], strategy)
    index = _bisect(sequence, target, comparator, SIDE_LEFT)
    if index < len(sequence) and comparator.compare(sequence[index], target) is Ordering.EQUAL:
        return index
    return None
