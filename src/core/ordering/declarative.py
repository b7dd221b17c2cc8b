"""
Declarative Orderings — сборка Comparator из описания OrderingSpec

Поток данных:
    dict (JSON) → validate_ordering_spec (jsonschema) → OrderingSpec (pydantic)
    → build_ordering → Comparator (then_by по критериям)
"""

import dataclasses
from typing import Any, Dict

from pydantic import BaseModel

from src.core.contracts import validate_ordering_spec
from src.core.domain.ordering_spec import OrderingCriterion, OrderingSpec, SortDirection
from src.core.ordering.combinators import by_field, reversed_order, then_by
from src.core.ordering.errors import InvalidArgument
from src.core.ordering.natural import natural_order
from src.core.ordering.registry import ComparatorRegistry
from src.core.ordering.strategy import Comparator, as_comparator


def load_ordering_spec(data: Dict[str, Any]) -> OrderingSpec:
    """
    Валидация контракта и построение модели.

    Raises:
        jsonschema.ValidationError: Нарушение JSON Schema контракта
        pydantic.ValidationError: Нарушение инвариантов модели
    """
    validate_ordering_spec(data)
    return OrderingSpec.model_validate(data)


def _declared_fields(element_type: type | None) -> frozenset[str] | None:
    if element_type is None:
        return None
    if isinstance(element_type, type) and issubclass(element_type, BaseModel):
        return frozenset(element_type.model_fields)
    if dataclasses.is_dataclass(element_type):
        return frozenset(f.name for f in dataclasses.fields(element_type))
    return None


def _criterion_strategy(
    criterion: OrderingCriterion,
    registry: ComparatorRegistry | None,
) -> Comparator:
    descending = criterion.direction is SortDirection.DESC

    if criterion.field is not None:
        # Направление инвертирует только сравнение ключей: missing first/last
        # не зависит от direction
        key_ordering = reversed_order(natural_order()) if descending else None
        return by_field(criterion.field, key_ordering, missing=criterion.missing.value)

    if registry is None:
        raise InvalidArgument(
            f"criterion {criterion.ordering!r} references a registered ordering "
            f"but no registry was given"
        )
    strategy = registry.get(criterion.ordering)
    if descending:
        return reversed_order(strategy)
    return strategy


def build_ordering(
    spec: OrderingSpec | Dict[str, Any],
    registry: ComparatorRegistry | None = None,
) -> Comparator:
    """
    Сборка составной стратегии из декларативного описания.

    Args:
        spec: OrderingSpec или dict по контракту ordering_spec
        registry: Реестр для критериев вида {"ordering": "<name>"};
            если задан registry.element_type (pydantic модель или dataclass),
            имена полей проверяются при сборке

    Returns:
        Comparator: критерии по приоритету через then_by

    Raises:
        InvalidArgument: Неизвестное поле для element_type или нет реестра
        UnknownOrdering: Имя стратегии не зарегистрировано
    """
    if not isinstance(spec, OrderingSpec):
        spec = load_ordering_spec(spec)

    known = _declared_fields(registry.element_type if registry is not None else None)
    if known is not None:
        unknown = [name for name in spec.field_names() if name not in known]
        if unknown:
            raise InvalidArgument(
                f"unknown field(s) for {registry.element_type.__qualname__}: {', '.join(unknown)}"
            )

    strategies = [_criterion_strategy(c, registry) for c in spec.criteria]
    if len(strategies) == 1:
        composite = strategies[0]
    else:
        composite = then_by(*strategies)

    if spec.name is not None:
        return as_comparator(composite, spec.name)
    return composite
