"""
Ordering — подключаемый фреймворк сравнения

Сортировка и поиск в коллекциях элементов произвольного типа T по:
- natural ordering самого типа (compare(self, other) или __lt__)
- любому числу внешних стратегий, выбираемых в точке вызова

Тип T при этом не модифицируется.
"""

# Contract
from src.core.ordering.strategy import (
    Comparator,
    Ordering,
    Strategy,
    as_comparator,
    three_way,
)

# Errors
from src.core.ordering.errors import (
    ComparisonError,
    ContractViolationError,
    DuplicateOrdering,
    IncomparableValues,
    InvalidArgument,
    NoOrderingAvailable,
    OrderingError,
    UnknownOrdering,
)

# Natural ordering
from src.core.ordering.natural import (
    NaturalOrdering,
    has_natural_ordering,
    natural_order,
    natural_ordering_for,
)

# Combinators
from src.core.ordering.combinators import (
    MISSING_ERROR,
    MISSING_FIRST,
    MISSING_LAST,
    MISSING_POLICIES,
    by_field,
    by_key,
    field_getter,
    reversed_order,
    then_by,
)

# Sort & search
from src.core.ordering.sorting import (
    find_position,
    insertion_point,
    is_sorted,
    sort_in_place,
    sorted_copy,
)

# Registry
from src.core.ordering.registry import ComparatorRegistry

# Contract verification
from src.core.ordering.verification import (
    CONTRACT_CHECK_MAX_SAMPLES,
    ContractReport,
    ContractViolation,
    assert_contract,
    check_contract,
)

# Declarative orderings
from src.core.ordering.declarative import build_ordering, load_ordering_spec

__all__ = [
    # Contract
    "Comparator",
    "Ordering",
    "Strategy",
    "as_comparator",
    "three_way",
    # Errors
    "ComparisonError",
    "ContractViolationError",
    "DuplicateOrdering",
    "IncomparableValues",
    "InvalidArgument",
    "NoOrderingAvailable",
    "OrderingError",
    "UnknownOrdering",
    # Natural ordering
    "NaturalOrdering",
    "has_natural_ordering",
    "natural_order",
    "natural_ordering_for",
    # Combinators
    "MISSING_ERROR",
    "MISSING_FIRST",
    "MISSING_LAST",
    "MISSING_POLICIES",
    "by_field",
    "by_key",
    "field_getter",
    "reversed_order",
    "then_by",
    # Sort & search
    "find_position",
    "insertion_point",
    "is_sorted",
    "sort_in_place",
    "sorted_copy",
    # Registry
    "ComparatorRegistry",
    # Contract verification
    "CONTRACT_CHECK_MAX_SAMPLES",
    "ContractReport",
    "ContractViolation",
    "assert_contract",
    "check_contract",
    # Declarative orderings
    "build_ordering",
    "load_ordering_spec",
]
