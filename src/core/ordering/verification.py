"""
Contract Verification — проверка контракта стратегии на выборке

Контракт стратегии (рефлексивность, антисимметричность, транзитивность,
детерминизм) не проверяется при сортировке. Этот модуль позволяет проверить
его явно на конечной выборке элементов, например в тестах доменного кода.

Сложность: O(n^3) по размеру выборки (транзитивность), поэтому выборка
ограничена CONTRACT_CHECK_MAX_SAMPLES.
"""

from dataclasses import dataclass
from itertools import combinations, permutations
from typing import Any, Final, Sequence

from src.core.ordering.errors import ContractViolationError, InvalidArgument, OrderingError
from src.core.ordering.strategy import Ordering, Strategy, as_comparator

# Максимальный размер выборки для exhaustive-проверки
CONTRACT_CHECK_MAX_SAMPLES: Final[int] = 64

LAW_REFLEXIVITY: Final[str] = "reflexivity"
LAW_ANTISYMMETRY: Final[str] = "antisymmetry"
LAW_TRANSITIVITY: Final[str] = "transitivity"
LAW_DETERMINISM: Final[str] = "determinism"
LAW_ERROR: Final[str] = "error"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ContractViolation:
    """Одно нарушение контракта."""

    law: str
    elements: tuple[Any, ...]
    details: str


@dataclass(frozen=True)
class ContractReport:
    """Результат проверки контракта стратегии."""

    strategy: str
    sample_size: int
    violations: tuple[ContractViolation, ...]

    @property
    def is_valid(self) -> bool:
        return not self.violations


# =============================================================================
# CHECK
# =============================================================================


def check_contract(strategy: Strategy, samples: Sequence[Any]) -> ContractReport:
    """
    Exhaustive-проверка законов контракта на выборке.

    Ошибки стратегии (IncomparableValues и т.п.) фиксируются как нарушения
    закона "error" и не пробрасываются.

    Args:
        strategy: Проверяемая стратегия
        samples: Выборка элементов (без None)

    Returns:
        ContractReport со списком нарушений

    Raises:
        InvalidArgument: Выборка больше CONTRACT_CHECK_MAX_SAMPLES
    """
    if len(samples) > CONTRACT_CHECK_MAX_SAMPLES:
        raise InvalidArgument(
            f"sample size {len(samples)} exceeds {CONTRACT_CHECK_MAX_SAMPLES}"
        )

    comparator = as_comparator(strategy)
    violations: list[ContractViolation] = []
    table: dict[tuple[int, int], Ordering] = {}

    # Таблица попарных результатов; ошибки и недетерминизм отмечаются сразу
    for i, a in enumerate(samples):
        for j, b in enumerate(samples):
            try:
                first = comparator.compare(a, b)
                second = comparator.compare(a, b)
            except OrderingError as exc:
                violations.append(ContractViolation(LAW_ERROR, (a, b), str(exc)))
                continue
            if first is not second:
                violations.append(
                    ContractViolation(
                        LAW_DETERMINISM, (a, b), f"{first.name} then {second.name}"
                    )
                )
            table[i, j] = first

    for i, a in enumerate(samples):
        result = table.get((i, i))
        if result is not None and result is not Ordering.EQUAL:
            violations.append(
                ContractViolation(LAW_REFLEXIVITY, (a,), f"compare(a, a) = {result.name}")
            )

    for i, j in combinations(range(len(samples)), 2):
        if (i, j) not in table or (j, i) not in table:
            continue
        if table[i, j] is not table[j, i].inverted():
            violations.append(
                ContractViolation(
                    LAW_ANTISYMMETRY,
                    (samples[i], samples[j]),
                    f"compare(a, b) = {table[i, j].name}, compare(b, a) = {table[j, i].name}",
                )
            )

    for i, j, k in permutations(range(len(samples)), 3):
        ab, bc, ac = table.get((i, j)), table.get((j, k)), table.get((i, k))
        if ab is None or bc is None or ac is None:
            continue
        if ab is Ordering.LESS and bc is Ordering.LESS and ac is not Ordering.LESS:
            violations.append(
                ContractViolation(
                    LAW_TRANSITIVITY,
                    (samples[i], samples[j], samples[k]),
                    f"a < b and b < c but compare(a, c) = {ac.name}",
                )
            )

    return ContractReport(
        strategy=comparator.name,
        sample_size=len(samples),
        violations=tuple(violations),
    )


def assert_contract(strategy: Strategy, samples: Sequence[Any]) -> ContractReport:
    """
    check_contract с исключением при нарушении.

    Raises:
        ContractViolationError: Найдено хотя бы одно нарушение
    """
    report = check_contract(strategy, samples)
    if not report.is_valid:
        first = report.violations[0]
        raise ContractViolationError(
            f"[{report.strategy}] {len(report.violations)} contract violation(s); "
            f"first: {first.law}: {first.details}",
            report.violations,
        )
    return report
