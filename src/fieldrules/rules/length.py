"""``len`` rule: exact character count."""

from __future__ import annotations

from typing import Any

from fieldrules.models.errors import FailureCode, ValidationFailure
from fieldrules.models.rules import LengthRule
from fieldrules.rules.base import RuleChecker, ValueKind, classify
from fieldrules.rules.registry import RuleRegistry


@RuleRegistry.register
class LengthChecker(RuleChecker):
    @property
    def name(self) -> str:
        return "len"

    def check(self, field_name: str, value: Any, rule: LengthRule) -> ValidationFailure | None:
        kind = classify(value)
        if kind == ValueKind.TEXT:
            items = [value]
        elif kind in (ValueKind.TEXT_SEQUENCE, ValueKind.EMPTY_SEQUENCE):
            items = value
        else:
            return ValidationFailure.of(FailureCode.UNSUPPORTED_TYPE, field_name)

        # One failure per field, however many elements are off.
        for item in items:
            if len(item) != rule.length:
                return ValidationFailure.of(FailureCode.LENGTH_FAILED, field_name)
        return None
