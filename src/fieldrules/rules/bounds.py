"""``min`` and ``max`` rules.

Integers are compared by value, text by character count. Sequences of either
are compared element by element and stop at the first violation.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from fieldrules.models.errors import FailureCode, ValidationFailure
from fieldrules.models.rules import MaximumRule, MinimumRule
from fieldrules.rules.base import RuleChecker, ValueKind, classify
from fieldrules.rules.registry import RuleRegistry


class BoundChecker(RuleChecker):
    """Shared measuring logic for the two bound rules."""

    failure_code: FailureCode

    @abstractmethod
    def violates(self, measure: int, bound: int) -> bool: ...

    def check(
        self, field_name: str, value: Any, rule: MinimumRule | MaximumRule
    ) -> ValidationFailure | None:
        kind = classify(value)
        if kind == ValueKind.INTEGER:
            measures = [value]
        elif kind == ValueKind.TEXT:
            measures = [len(value)]
        elif kind == ValueKind.INTEGER_SEQUENCE:
            measures = value
        elif kind == ValueKind.TEXT_SEQUENCE:
            measures = (len(item) for item in value)
        elif kind == ValueKind.EMPTY_SEQUENCE:
            return None
        else:
            return ValidationFailure.of(FailureCode.UNSUPPORTED_TYPE, field_name)

        for measure in measures:
            if self.violates(measure, rule.bound):
                return ValidationFailure.of(self.failure_code, field_name)
        return None


@RuleRegistry.register
class MinimumChecker(BoundChecker):
    failure_code = FailureCode.MINIMUM_FAILED

    @property
    def name(self) -> str:
        return "min"

    def violates(self, measure: int, bound: int) -> bool:
        return measure < bound


@RuleRegistry.register
class MaximumChecker(BoundChecker):
    failure_code = FailureCode.MAXIMUM_FAILED

    @property
    def name(self) -> str:
        return "max"

    def violates(self, measure: int, bound: int) -> bool:
        return measure > bound
