"""
Тесты для проверки контракта стратегии

Проверяет:
1. Валидные стратегии проходят без нарушений
2. Детекцию нарушений рефлексивности, антисимметричности,
   транзитивности и детерминизма
3. Ошибки стратегии как нарушения, а не исключения
4. assert_contract и ограничение размера выборки
"""

from itertools import count

import pytest

from src.core.ordering import (
    CONTRACT_CHECK_MAX_SAMPLES,
    ContractViolationError,
    InvalidArgument,
    assert_contract,
    by_field,
    check_contract,
    natural_order,
    reversed_order,
    then_by,
)

BEATS = {"rock": "scissors", "scissors": "paper", "paper": "rock"}


def rock_paper_scissors(a: str, b: str) -> int:
    """Антисимметрична, но не транзитивна."""
    if a == b:
        return 0
    return 1 if BEATS[a] == b else -1


def always_less(a, b) -> int:
    return -1


class TestValidStrategies:
    """Валидные стратегии"""

    @pytest.mark.parametrize(
        "strategy",
        [natural_order(), reversed_order(natural_order())],
    )
    def test_natural_integers(self, strategy) -> None:
        report = check_contract(strategy, [5, 3, 3, -1, 10, 0])
        assert report.is_valid
        assert report.violations == ()
        assert report.sample_size == 6

    def test_composite_on_records(self) -> None:
        samples = [
            {"year": 1, "name": "John"},
            {"year": 3, "name": "Moon"},
            {"year": 3, "name": "Alex"},
            {"year": 4, "name": "Park"},
        ]
        report = assert_contract(then_by(by_field("year"), by_field("name")), samples)
        assert report.strategy == "by_year then by_name"


class TestViolations:
    """Детекция нарушений"""

    def test_reflexivity_and_antisymmetry(self) -> None:
        report = check_contract(always_less, [1, 2])
        laws = {v.law for v in report.violations}

        assert not report.is_valid
        assert "reflexivity" in laws
        assert "antisymmetry" in laws

    def test_transitivity(self) -> None:
        report = check_contract(rock_paper_scissors, ["rock", "paper", "scissors"])
        laws = {v.law for v in report.violations}

        assert laws == {"transitivity"}

    def test_determinism(self) -> None:
        ticks = count()
        report = check_contract(lambda a, b: next(ticks) % 3 - 1, [1])

        assert "determinism" in {v.law for v in report.violations}

    def test_errors_recorded(self) -> None:
        report = check_contract(by_field("year"), [{"year": 1}, {"name": "Moon"}])

        errors = [v for v in report.violations if v.law == "error"]
        assert errors
        assert "cannot extract key" in errors[0].details


class TestAssertContract:
    """Тесты для assert_contract"""

    def test_raises_with_violations(self) -> None:
        with pytest.raises(ContractViolationError, match="transitivity") as exc_info:
            assert_contract(rock_paper_scissors, ["rock", "paper", "scissors"])

        assert exc_info.value.violations

    def test_sample_limit(self) -> None:
        with pytest.raises(InvalidArgument, match="exceeds"):
            check_contract(natural_order(), list(range(CONTRACT_CHECK_MAX_SAMPLES + 1)))
