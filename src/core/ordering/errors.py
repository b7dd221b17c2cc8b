"""
Ordering Errors — иерархия исключений фреймворка сравнения

Все ошибки пробрасываются вызывающему коду без восстановления и повторов:
корректность порядка нельзя "угадать".

Каждое исключение наследует OrderingError и одновременно стандартный
builtin-класс (TypeError/ValueError/KeyError), чтобы существующий код,
который ловит builtin-исключения, продолжал работать.
"""

from typing import Any


class OrderingError(Exception):
    """Базовое исключение фреймворка сравнения."""


class NoOrderingAvailable(OrderingError, TypeError):
    """
    Не задана стратегия и тип элементов не имеет natural ordering.

    Неявного порядка (по адресу в памяти, порядку вставки, угадыванию полей)
    не существует.
    """

    def __init__(self, element_type: type):
        self.element_type = element_type
        super().__init__(
            f"No ordering available for {element_type.__qualname__}: "
            f"pass an explicit strategy or implement compare(self, other)"
        )


class ComparisonError(OrderingError):
    """
    Ошибка, привязанная к конкретной паре сравнения.

    Attributes:
        reason: Сообщение без префикса стратегии и пары
        left: Левый элемент сравнения (или None)
        right: Правый элемент сравнения (или None)
        strategy: Имя стратегии, на которой произошёл сбой (или None)
    """

    def __init__(
        self,
        message: str,
        left: Any = None,
        right: Any = None,
        strategy: str | None = None,
    ):
        self.reason = message
        self.left = left
        self.right = right
        self.strategy = strategy
        prefix = f"[{strategy}] " if strategy else ""
        pair = ""
        if left is not None or right is not None:
            pair = f" (left={left!r}, right={right!r})"
        super().__init__(f"{prefix}{message}{pair}")

    def with_pair(self, left: Any, right: Any, strategy: str | None) -> "ComparisonError":
        """Та же ошибка, переадресованная на пару исходных элементов."""
        return type(self)(self.reason, left, right, strategy)


class IncomparableValues(ComparisonError, ValueError):
    """
    Стратегия не может вернуть валидный three-way результат для пары.

    Например, у элемента отсутствует поле, от которого зависит стратегия,
    или значения принципиально несравнимы (NaN, str против int).
    """


class InvalidArgument(ComparisonError, ValueError):
    """
    Отсутствующий (None) элемент или некорректный аргумент API.

    Для ошибок сравнения несёт пару left/right и имя стратегии.
    """


class UnknownOrdering(OrderingError, KeyError):
    """Стратегия с таким именем не зарегистрирована."""

    def __init__(self, name: str, known: tuple[str, ...]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown ordering {name!r}; registered: {', '.join(known) or '-'}")

    def __str__(self) -> str:
        # KeyError.__str__ оборачивает сообщение в кавычки
        return str(self.args[0])


class DuplicateOrdering(OrderingError, ValueError):
    """Повторная регистрация имени без replace=True."""


class ContractViolationError(OrderingError, AssertionError):
    """Стратегия нарушает контракт сравнения (см. verification)."""

    def __init__(self, message: str, violations: tuple = ()):
        self.violations = violations
        super().__init__(message)
