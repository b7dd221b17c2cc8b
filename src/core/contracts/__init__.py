"""
Contract Validation Module

Модуль для валидации JSON контрактов декларативных порядков.
"""

from .validators import (
    ContractValidator,
    OrderingSpecValidator,
    SchemaLoader,
    validate_ordering_spec,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OrderingSpecValidator",
    # Functions
    "validate_ordering_spec",
]
