"""Order-preserving accumulation of failures for one validation call."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from fieldrules.models.errors import ValidationErrors, ValidationFailure, ValidationReport


class FailureCollector:
    """Collects failures from anywhere in a traversal, in the order found."""

    def __init__(self) -> None:
        self._failures: list[ValidationFailure] = []

    def add(self, failure: ValidationFailure | None) -> None:
        if failure is not None:
            self._failures.append(failure)

    def extend(self, failures: Iterable[ValidationFailure]) -> None:
        self._failures.extend(failures)

    def __len__(self) -> int:
        return len(self._failures)

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self._failures)

    def to_report(self) -> ValidationReport:
        return ValidationReport(failures=tuple(self._failures))

    def to_error(self) -> ValidationErrors | None:
        """The combined error, or None if nothing was collected."""
        if not self._failures:
            return None
        return ValidationErrors(self._failures)
