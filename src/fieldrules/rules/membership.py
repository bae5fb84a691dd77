"""``in`` rule: the value's string form must be one of a listed set."""

from __future__ import annotations

from typing import Any

from fieldrules.models.errors import FailureCode, ValidationFailure
from fieldrules.models.rules import MembershipRule
from fieldrules.rules.base import RuleChecker, ValueKind, classify
from fieldrules.rules.registry import RuleRegistry


@RuleRegistry.register
class MembershipChecker(RuleChecker):
    @property
    def name(self) -> str:
        return "in"

    def check(self, field_name: str, value: Any, rule: MembershipRule) -> ValidationFailure | None:
        kind = classify(value)
        if kind == ValueKind.INTEGER:
            # int() first so IntEnum members render as digits, not names
            candidate = str(int(value))
        elif kind == ValueKind.TEXT:
            candidate = value
        else:
            return ValidationFailure.of(FailureCode.UNSUPPORTED_TYPE, field_name)

        if candidate in frozenset(rule.allowed):
            return None
        return ValidationFailure.of(FailureCode.MEMBERSHIP_FAILED, field_name)
