"""
Domain models and value objects.

Contains declarative ordering descriptions (OrderingSpec, OrderingCriterion).
"""

from src.core.domain.ordering_spec import (
    ORDERING_SPEC_SCHEMA_VERSION,
    MissingPolicy,
    OrderingCriterion,
    OrderingSpec,
    SortDirection,
)

__all__ = [
    "ORDERING_SPEC_SCHEMA_VERSION",
    "MissingPolicy",
    "OrderingCriterion",
    "OrderingSpec",
    "SortDirection",
]
