"""
OrderingCombinator — построение стратегий из существующих

ГАРАНТИИ:
1. Комбинаторы не мутируют входные стратегии и элементы
2. Каждый вызов возвращает новый независимый Comparator
3. Составные стратегии stateless (компоненты разделяются, а не копируются)

Комбинаторы:
- then_by:        приоритетная цепочка, последующие стратегии только разрешают ничьи
- reversed_order: инверсия знака, EQUAL без изменений
- by_key:         сравнение проекций элемента (например, одного поля)
- by_field:       by_key по атрибуту / ключу mapping
"""

from collections.abc import Mapping
from typing import Any, Callable, Final

from src.core.ordering.errors import IncomparableValues, InvalidArgument
from src.core.ordering.natural import natural_order
from src.core.ordering.strategy import Comparator, Ordering, Strategy, as_comparator

# =============================================================================
# MISSING-KEY POLICIES
# =============================================================================

# error: отсутствующий ключ → IncomparableValues (по умолчанию)
# first: элементы без ключа раньше всех остальных
# last:  элементы без ключа позже всех остальных
MISSING_ERROR: Final[str] = "error"
MISSING_FIRST: Final[str] = "first"
MISSING_LAST: Final[str] = "last"
MISSING_POLICIES: Final[tuple[str, ...]] = (MISSING_ERROR, MISSING_FIRST, MISSING_LAST)

# Исключения extractor, означающие "ключ отсутствует"; прочие ошибки
# extractor пробрасываются как есть
_EXTRACTION_ERRORS: Final[tuple[type[Exception], ...]] = (AttributeError, KeyError)

_MISSING = object()


# =============================================================================
# THEN BY
# =============================================================================


def then_by(primary: Strategy, *secondaries: Strategy) -> Comparator:
    """
    Композиция стратегий по приоритету.

    then_by(a, b, c) ≡ then_by(then_by(a, b), c): сначала a; при EQUAL — b;
    при EQUAL — c. Результат первой не-EQUAL стратегии возвращается как есть.

    Args:
        primary: Стратегия с наивысшим приоритетом
        *secondaries: Tie-breakers в порядке убывания приоритета

    Returns:
        Новый Comparator

    Raises:
        InvalidArgument: Если не передано ни одного tie-breaker
    """
    if not secondaries:
        raise InvalidArgument("then_by requires at least one secondary strategy")

    chain = tuple(as_comparator(s) for s in (primary, *secondaries))

    def compose(a: Any, b: Any) -> Ordering:
        for strategy in chain:
            result = strategy.compare(a, b)
            if result is not Ordering.EQUAL:
                return result
        return Ordering.EQUAL

    return Comparator(compose, " then ".join(s.name for s in chain))


# =============================================================================
# REVERSED
# =============================================================================


def reversed_order(strategy: Strategy) -> Comparator:
    """
    Инверсия стратегии: LESS ↔ GREATER, EQUAL без изменений.

    Стабильность sort сохраняется: равные элементы остаются в исходном
    порядке и под обратной стратегией.
    """
    inner = as_comparator(strategy)

    def invert(a: Any, b: Any) -> Ordering:
        return inner.compare(a, b).inverted()

    return Comparator(invert, f"reversed({inner.name})")


# =============================================================================
# BY KEY
# =============================================================================


def _extract(extractor: Callable[[Any], Any], element: Any) -> Any:
    try:
        key = extractor(element)
    except _EXTRACTION_ERRORS:
        return _MISSING
    return _MISSING if key is None else key


def by_key(
    extractor: Callable[[Any], Any],
    key_ordering: Strategy | None = None,
    *,
    missing: str = MISSING_ERROR,
    name: str | None = None,
) -> Comparator:
    """
    Сравнение проекций элементов.

    extractor должен быть чистой тотальной функцией над валидными элементами.
    Ключ считается отсутствующим, если extractor вернул None или выбросил
    AttributeError/KeyError. Любое другое исключение extractor пробрасывается
    без изменений при любой политике missing.

    Args:
        extractor: Проекция элемента (T -> K)
        key_ordering: Стратегия сравнения ключей (default: natural ordering)
        missing: Политика отсутствующего ключа: error/first/last
        name: Имя стратегии (default: by_<имя extractor>)

    Returns:
        Новый Comparator над элементами

    Raises:
        InvalidArgument: Некорректный extractor или missing
        IncomparableValues: (при сравнении) ключ отсутствует при missing="error"
            или ключи несравнимы
    """
    if not callable(extractor):
        raise InvalidArgument(f"extractor must be callable, got {type(extractor).__name__}")
    if missing not in MISSING_POLICIES:
        raise InvalidArgument(f"missing must be one of {MISSING_POLICIES}, got {missing!r}")

    keys = as_comparator(key_ordering) if key_ordering is not None else natural_order()
    strategy_name = name or f"by_{getattr(extractor, '__name__', 'key')}"

    def compare_keys(a: Any, b: Any) -> Ordering:
        key_a = _extract(extractor, a)
        key_b = _extract(extractor, b)

        if key_a is _MISSING or key_b is _MISSING:
            if missing == MISSING_ERROR:
                absent = "left" if key_a is _MISSING else "right"
                raise IncomparableValues(
                    f"cannot extract key from {absent} element", a, b, strategy_name
                )
            if key_a is _MISSING and key_b is _MISSING:
                return Ordering.EQUAL
            absent_first = Ordering.LESS if key_a is _MISSING else Ordering.GREATER
            return absent_first if missing == MISSING_FIRST else absent_first.inverted()

        try:
            return keys.compare(key_a, key_b)
        except IncomparableValues as exc:
            # Ошибка ключей переадресуется на исходные элементы
            raise IncomparableValues(
                f"keys {key_a!r} and {key_b!r} are incomparable", a, b, strategy_name
            ) from exc

    return Comparator(compare_keys, strategy_name)


def field_getter(field: str) -> Callable[[Any], Any]:
    """
    Extractor поля: атрибут объекта, для Mapping — ключ.

    Отсутствие поля → AttributeError/KeyError (обрабатывается by_key).
    """

    def get(element: Any) -> Any:
        if isinstance(element, Mapping):
            return element[field]
        return getattr(element, field)

    get.__name__ = field
    return get


def by_field(
    field: str,
    key_ordering: Strategy | None = None,
    *,
    missing: str = MISSING_ERROR,
) -> Comparator:
    """
    by_key по именованному полю (атрибут или ключ dict-записи).

    Имя стратегии: by_<field>.
    """
    if not field:
        raise InvalidArgument("field name must be non-empty")
    return by_key(field_getter(field), key_ordering, missing=missing, name=f"by_{field}")
