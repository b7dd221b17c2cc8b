"""
Тесты для NaturalOrdering capability

Проверяет:
1. Обнаружение natural ordering (compare() или собственный __lt__)
2. Отсутствие неявного порядка у типов без capability
3. Диспетчеризацию natural_order на compare() типа
4. NoOrderingAvailable с именем типа
"""

from dataclasses import dataclass
from decimal import Decimal

import pytest
from pydantic import BaseModel

from src.core.ordering import (
    IncomparableValues,
    NaturalOrdering,
    NoOrderingAvailable,
    Ordering,
    by_field,
    has_natural_ordering,
    natural_order,
    natural_ordering_for,
    sort_in_place,
)


@dataclass(frozen=True, order=True)
class Version:
    major: int
    minor: int


@dataclass(frozen=True)
class Point:
    x: int
    y: int


class Student(BaseModel):
    num: int
    name: str

    model_config = {"frozen": True}


class Money:
    """Natural ordering через compare(), без наследования и __lt__."""

    def __init__(self, cents: int):
        self.cents = cents

    def compare(self, other: "Money") -> int:
        return (self.cents > other.cents) - (self.cents < other.cents)


# =============================================================================
# CAPABILITY DETECTION
# =============================================================================


class TestHasNaturalOrdering:
    """Тесты для has_natural_ordering"""

    @pytest.mark.parametrize("value", [1, 2.5, "text", (1, 2), Version(1, 0)])
    def test_rich_comparison_types(self, value) -> None:
        assert has_natural_ordering(value)

    def test_compare_capability(self) -> None:
        assert has_natural_ordering(Money(100))
        assert isinstance(Money(100), NaturalOrdering)

    @pytest.mark.parametrize(
        "value",
        [object(), Point(1, 2), Student(num=1, name="John"), {"num": 1}],
    )
    def test_no_implicit_ordering(self, value) -> None:
        """Нет порядка по адресу, порядку вставки или полям"""
        assert not has_natural_ordering(value)


# =============================================================================
# NATURAL ORDER STRATEGY
# =============================================================================


class TestNaturalOrder:
    """Тесты для natural_order"""

    def test_shared_stateless_value(self) -> None:
        assert natural_order() is natural_order()
        assert natural_order().name == "natural"

    def test_rich_comparison(self) -> None:
        assert natural_order().compare(Version(1, 2), Version(1, 10)) is Ordering.LESS
        assert natural_order().compare("b", "a") is Ordering.GREATER

    def test_dispatches_to_compare_capability(self) -> None:
        assert natural_order().compare(Money(5), Money(10)) is Ordering.LESS
        assert natural_order().compare(Money(10), Money(5)) is Ordering.GREATER
        assert natural_order().compare(Money(7), Money(7)) is Ordering.EQUAL

    def test_decimal_compare_result(self) -> None:
        """Decimal.compare возвращает Decimal, а не int"""
        assert natural_order().compare(Decimal("1.5"), Decimal("2")) is Ordering.LESS
        assert natural_order().compare(Decimal("2"), Decimal("2.00")) is Ordering.EQUAL
        assert natural_order().compare(Decimal("3"), 2) is Ordering.GREATER

    def test_sort_decimals(self) -> None:
        values = [Decimal("2"), Decimal("-0.5"), Decimal("1")]
        sort_in_place(values)
        assert values == [Decimal("-0.5"), Decimal("1"), Decimal("2")]

    def test_sort_by_decimal_field(self) -> None:
        rows = [{"p": Decimal("9.99")}, {"p": Decimal("0.10")}, {"p": Decimal("5")}]
        sort_in_place(rows, by_field("p"))
        assert [row["p"] for row in rows] == [Decimal("0.10"), Decimal("5"), Decimal("9.99")]

    @pytest.mark.parametrize("nan", [Decimal("NaN"), Decimal("sNaN")])
    def test_decimal_nan_incomparable(self, nan) -> None:
        with pytest.raises(IncomparableValues, match="NaN"):
            natural_order().compare(nan, Decimal("1"))


# =============================================================================
# RESOLUTION
# =============================================================================


class TestNaturalOrderingFor:
    """Тесты для natural_ordering_for"""

    def test_resolves_for_orderable_values(self) -> None:
        assert natural_ordering_for([3, 1, 2]) is natural_order()

    def test_empty_collection_resolves(self) -> None:
        assert natural_ordering_for([]) is natural_order()

    def test_missing_capability_names_type(self) -> None:
        with pytest.raises(NoOrderingAvailable, match="Student") as exc_info:
            natural_ordering_for([Student(num=1, name="John")])

        assert exc_info.value.element_type is Student

    def test_first_offending_element_reported(self) -> None:
        with pytest.raises(NoOrderingAvailable, match="Point"):
            natural_ordering_for([1, 2, Point(0, 0)])

    def test_is_type_error(self) -> None:
        """NoOrderingAvailable совместим с TypeError"""
        with pytest.raises(TypeError):
            natural_ordering_for([object()])
