"""Structured failure models and the combined validation error."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class FailureCode(StrEnum):
    NOT_A_STRUCT = "not_a_struct"
    INVALID_SYNTAX = "invalid_syntax"
    UNEXPORTED_FIELD = "unexported_field"
    LENGTH_FAILED = "length_failed"
    MEMBERSHIP_FAILED = "membership_failed"
    MINIMUM_FAILED = "minimum_failed"
    MAXIMUM_FAILED = "maximum_failed"
    UNSUPPORTED_TYPE = "unsupported_type"
    CYCLIC_RECORD = "cyclic_record"
    DEPTH_EXCEEDED = "depth_exceeded"


REASONS: dict[FailureCode, str] = {
    FailureCode.NOT_A_STRUCT: "wrong argument given, should be a struct",
    FailureCode.INVALID_SYNTAX: "invalid validator syntax",
    FailureCode.UNEXPORTED_FIELD: "validation for unexported field is not allowed",
    FailureCode.LENGTH_FAILED: "len validation failed",
    FailureCode.MEMBERSHIP_FAILED: "in validation failed",
    FailureCode.MINIMUM_FAILED: "min validation failed",
    FailureCode.MAXIMUM_FAILED: "max validation failed",
    FailureCode.UNSUPPORTED_TYPE: "not supported type",
    FailureCode.CYCLIC_RECORD: "cyclic reference to a record already being validated",
    FailureCode.DEPTH_EXCEEDED: "maximum nesting depth exceeded",
}


class ValidationFailure(BaseModel):
    """One violation, attributed to the field it was found on."""

    model_config = ConfigDict(frozen=True)

    field: str
    code: FailureCode
    message: str

    @classmethod
    def of(cls, code: FailureCode, field: str = "") -> ValidationFailure:
        """Build a failure carrying the standard reason text for *code*."""
        return cls(field=field, code=code, message=REASONS[code])

    def __str__(self) -> str:
        if not self.field:
            return self.message
        return f"{self.field}: {self.message}"


class ValidationErrors(Exception):
    """Combined error holding every failure from one validation call.

    Rendering lists each failure as ``field: reason`` on its own line, in
    traversal order.
    """

    def __init__(self, failures: Iterable[ValidationFailure]) -> None:
        self.failures: tuple[ValidationFailure, ...] = tuple(failures)
        super().__init__("\n".join(str(f) for f in self.failures))

    def contains(self, code: FailureCode) -> bool:
        """Return True if any contained failure has the given code."""
        return any(f.code == code for f in self.failures)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, FailureCode) and self.contains(code)

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self.failures)

    def __len__(self) -> int:
        return len(self.failures)


class ValidationReport(BaseModel):
    """Result of validating one record. An empty report means valid."""

    model_config = ConfigDict(frozen=True)

    failures: tuple[ValidationFailure, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.failures

    def codes(self) -> list[FailureCode]:
        return [f.code for f in self.failures]

    def contains(self, code: FailureCode) -> bool:
        return code in self.codes()

    def for_field(self, name: str) -> list[ValidationFailure]:
        """All failures attributed to the field called *name*."""
        return [f for f in self.failures if f.field == name]

    def error(self) -> ValidationErrors | None:
        """Return the combined error, or None when the record is valid."""
        if self.valid:
            return None
        return ValidationErrors(self.failures)

    def raise_for_errors(self) -> None:
        err = self.error()
        if err is not None:
            raise err


class AnnotationSyntaxError(Exception):
    """Raised when an annotation does not match its rule's grammar."""

    def __init__(self, field: str, tag: str, detail: str) -> None:
        self.field = field
        self.tag = tag
        self.detail = detail
        super().__init__(f"Invalid annotation '{tag}' on field '{field}': {detail}")

    def to_failure(self) -> ValidationFailure:
        return ValidationFailure.of(FailureCode.INVALID_SYNTAX, self.field)
