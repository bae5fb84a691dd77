"""fieldrules: declarative field validation for dataclasses and pydantic models."""

from fieldrules.engine import Validator, check, ensure_valid, rule, validate
from fieldrules.models import (
    AnnotationSyntaxError,
    FailureCode,
    ValidationErrors,
    ValidationFailure,
    ValidationReport,
)
from fieldrules.settings import Settings

__all__ = [
    "AnnotationSyntaxError",
    "FailureCode",
    "Settings",
    "ValidationErrors",
    "ValidationFailure",
    "ValidationReport",
    "Validator",
    "check",
    "ensure_valid",
    "rule",
    "validate",
]
