"""Pydantic models for failures, reports and parsed rules."""

from fieldrules.models.errors import (
    AnnotationSyntaxError,
    FailureCode,
    ValidationErrors,
    ValidationFailure,
    ValidationReport,
)
from fieldrules.models.rules import (
    LengthRule,
    MaximumRule,
    MembershipRule,
    MinimumRule,
    Rule,
    UnknownRule,
)

__all__ = [
    "AnnotationSyntaxError",
    "FailureCode",
    "LengthRule",
    "MaximumRule",
    "MembershipRule",
    "MinimumRule",
    "Rule",
    "UnknownRule",
    "ValidationErrors",
    "ValidationFailure",
    "ValidationReport",
]
