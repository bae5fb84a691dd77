"""Abstract rule checker and runtime value classification."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any

from fieldrules.models.errors import ValidationFailure
from fieldrules.models.rules import Rule


class ValueKind(StrEnum):
    TEXT = "text"
    INTEGER = "integer"
    TEXT_SEQUENCE = "text_sequence"
    INTEGER_SEQUENCE = "integer_sequence"
    EMPTY_SEQUENCE = "empty_sequence"
    OTHER = "other"


def is_integer(value: Any) -> bool:
    # bool subclasses int but is not a number for validation purposes
    return isinstance(value, int) and not isinstance(value, bool)


def classify(value: Any) -> ValueKind:
    """Return the kind a rule checker dispatches on for *value*."""
    if isinstance(value, str):
        return ValueKind.TEXT
    if is_integer(value):
        return ValueKind.INTEGER
    if isinstance(value, (list, tuple)):
        if not value:
            return ValueKind.EMPTY_SEQUENCE
        if all(isinstance(item, str) for item in value):
            return ValueKind.TEXT_SEQUENCE
        if all(is_integer(item) for item in value):
            return ValueKind.INTEGER_SEQUENCE
    return ValueKind.OTHER


class RuleChecker(ABC):
    """Base for the per-rule semantic checks.

    Checkers are pure: they read the value and return a failure or None.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def check(self, field_name: str, value: Any, rule: Rule) -> ValidationFailure | None:
        """Evaluate *rule* against *value* of the field called *field_name*."""
