from venn_dsl.validation.validator import (
    ValidationError,
    count_by_severity,
    validate,
    validate_or_raise,
    validate_source,
)

__all__ = [
    "validate",
    "validate_source",
    "validate_or_raise",
    "count_by_severity",
    "ValidationError",
]
