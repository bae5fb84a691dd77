"""Record traversal and failure aggregation."""

from fieldrules.engine.collector import FailureCollector
from fieldrules.engine.fields import FieldInfo, is_record, iter_fields, rule
from fieldrules.engine.walker import (
    Validator,
    check,
    ensure_valid,
    get_validator,
    reset_validator,
    validate,
)

__all__ = [
    "FailureCollector",
    "FieldInfo",
    "Validator",
    "check",
    "ensure_valid",
    "get_validator",
    "is_record",
    "iter_fields",
    "reset_validator",
    "rule",
    "validate",
]
