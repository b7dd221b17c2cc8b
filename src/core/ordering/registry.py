"""
ComparatorRegistry — именованные переиспользуемые стратегии

Замена "статического поля-компаратора на доменном классе": стратегия
создаётся один раз, публикуется под именем и передаётся явно туда, где нужна.
Доменный тип не связан с конкретными критериями сортировки.

Хранимые стратегии иммутабельны и свободно разделяются между композициями.
"""

from typing import Any, Iterator

import structlog

from src.core.ordering.combinators import then_by
from src.core.ordering.errors import DuplicateOrdering, InvalidArgument, UnknownOrdering
from src.core.ordering.strategy import Comparator, Strategy, as_comparator

logger = structlog.get_logger(__name__)


class ComparatorRegistry:
    """
    Реестр именованных стратегий для одного типа элементов.

    Attributes:
        element_type: Тип элементов (опционально; используется для проверки
            имён полей при сборке декларативных порядков)
    """

    def __init__(self, element_type: type | None = None):
        self.element_type = element_type
        self._strategies: dict[str, Comparator] = {}

    def register(self, name: str, strategy: Strategy, *, replace: bool = False) -> Comparator:
        """
        Публикация стратегии под именем.

        Args:
            name: Уникальное имя (например, 'by_number')
            strategy: Стратегия или plain callable
            replace: Разрешить замену существующей стратегии

        Returns:
            Сохранённый Comparator (с именем name)

        Raises:
            InvalidArgument: Пустое имя
            DuplicateOrdering: Имя занято и replace=False
        """
        if not name:
            raise InvalidArgument("ordering name must be non-empty")
        if name in self._strategies and not replace:
            raise DuplicateOrdering(f"ordering {name!r} is already registered")

        comparator = as_comparator(strategy, name)
        replaced = name in self._strategies
        self._strategies[name] = comparator
        logger.info(
            "ordering_registered",
            name=name,
            replaced=replaced,
            element_type=getattr(self.element_type, "__qualname__", None),
        )
        return comparator

    def get(self, name: str) -> Comparator:
        """
        Raises:
            UnknownOrdering: Имя не зарегистрировано
        """
        try:
            return self._strategies[name]
        except KeyError:
            raise UnknownOrdering(name, self.names()) from None

    def compose(self, *names: str) -> Comparator:
        """
        then_by над зарегистрированными стратегиями в указанном порядке.

        Одно имя — возвращается сама стратегия.
        """
        if not names:
            raise InvalidArgument("compose requires at least one ordering name")
        strategies = [self.get(name) for name in names]
        if len(strategies) == 1:
            return strategies[0]
        return then_by(*strategies)

    def names(self) -> tuple[str, ...]:
        """Имена в порядке регистрации."""
        return tuple(self._strategies)

    def __contains__(self, name: Any) -> bool:
        return name in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        type_name = getattr(self.element_type, "__qualname__", "Any")
        return f"ComparatorRegistry[{type_name}]({', '.join(self._strategies)})"
