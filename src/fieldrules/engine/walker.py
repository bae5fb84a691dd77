"""Depth-first record traversal: the validation entry point.

Walks a record's fields in declaration order, recursing into nested records,
and applies each field's annotation. Every failure is collected; traversal
never stops early except for a non-record top-level value.
"""

from __future__ import annotations

import logging
from typing import Any

from fieldrules.engine.collector import FailureCollector
from fieldrules.engine.fields import FieldInfo, is_record, iter_fields
from fieldrules.models.errors import (
    AnnotationSyntaxError,
    FailureCode,
    ValidationErrors,
    ValidationFailure,
    ValidationReport,
)
from fieldrules.models.rules import UnknownRule
from fieldrules.parser.annotation import AnnotationParser
from fieldrules.rules.registry import RuleRegistry
from fieldrules.settings import Settings

logger = logging.getLogger("fieldrules.walker")


class Validator:
    """Validates annotated records against the registered rule checkers."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self._parser = AnnotationParser()

    def check(self, record: Any) -> ValidationReport:
        """Validate *record* and return the full report."""
        collector = FailureCollector()
        if not is_record(record):
            collector.add(ValidationFailure.of(FailureCode.NOT_A_STRUCT))
            return collector.to_report()

        self._walk(record, collector, active=set(), depth=0)
        return collector.to_report()

    def validate(self, record: Any) -> ValidationErrors | None:
        """Validate *record*; return the combined error, or None if valid."""
        return self.check(record).error()

    def ensure_valid(self, record: Any) -> None:
        """Validate *record* and raise :class:`ValidationErrors` on any failure."""
        self.check(record).raise_for_errors()

    def _walk(
        self, record: Any, collector: FailureCollector, active: set[int], depth: int
    ) -> None:
        # active holds the ids of records on the current descent path only
        active.add(id(record))
        logger.debug("Validating %s at depth %d", type(record).__name__, depth)
        for field in iter_fields(record, self.settings.tag_key):
            if is_record(field.value):
                self._descend(field, collector, active, depth + 1)
                continue
            if field.tag is None:
                continue
            if not field.exported:
                collector.add(ValidationFailure.of(FailureCode.UNEXPORTED_FIELD, field.name))
                continue
            collector.add(self._apply(field.name, field.tag, field.value))
        active.discard(id(record))

    def _descend(
        self, field: FieldInfo, collector: FailureCollector, active: set[int], depth: int
    ) -> None:
        if id(field.value) in active:
            logger.warning("Cyclic record reference at field '%s'", field.name)
            collector.add(ValidationFailure.of(FailureCode.CYCLIC_RECORD, field.name))
            return
        if depth > self.settings.max_depth:
            logger.warning(
                "Field '%s' nests deeper than max_depth=%d", field.name, self.settings.max_depth
            )
            collector.add(ValidationFailure.of(FailureCode.DEPTH_EXCEEDED, field.name))
            return
        self._walk(field.value, collector, active, depth)

    def _apply(self, name: str, tag: str, value: Any) -> ValidationFailure | None:
        try:
            rule = self._parser.parse(name, tag)
        except AnnotationSyntaxError as exc:
            logger.debug("%s", exc)
            return exc.to_failure()

        checker = None if isinstance(rule, UnknownRule) else RuleRegistry.find(rule.name)
        if checker is None:
            if self.settings.strict_rules:
                return ValidationFailure.of(FailureCode.INVALID_SYNTAX, name)
            logger.debug("Ignoring unknown rule '%s' on field '%s'", rule.name, name)
            return None

        logger.debug("Applying rule '%s' to field '%s'", rule.name, name)
        return checker.check(name, value, rule)


_default_validator: Validator | None = None


def get_validator() -> Validator:
    """Return the process-wide validator, built from environment settings on first use."""
    global _default_validator  # noqa: PLW0603
    if _default_validator is None:
        _default_validator = Validator()
    return _default_validator


def reset_validator() -> None:
    """Drop the process-wide validator so settings are re-read (for tests)."""
    global _default_validator  # noqa: PLW0603
    _default_validator = None


def validate(record: Any) -> ValidationErrors | None:
    """Validate *record*; None means no violations were found."""
    return get_validator().validate(record)


def check(record: Any) -> ValidationReport:
    """Validate *record* and return the full :class:`ValidationReport`."""
    return get_validator().check(record)


def ensure_valid(record: Any) -> None:
    """Validate *record*, raising :class:`ValidationErrors` if it has violations."""
    get_validator().ensure_valid(record)
