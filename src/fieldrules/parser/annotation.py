"""Annotation parsing: ``ruleName:argument`` strings to typed rules."""

from __future__ import annotations

import re

from fieldrules.models.errors import AnnotationSyntaxError
from fieldrules.models.rules import (
    LengthRule,
    MaximumRule,
    MembershipRule,
    MinimumRule,
    Rule,
    UnknownRule,
)

_SEPARATOR = ":"
_LIST_SEPARATOR = ","

# Optional sign, ASCII digits only. int() alone would accept whitespace and "1_000".
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(field_name: str, tag: str, argument: str) -> int:
    if not _INTEGER_RE.fullmatch(argument):
        raise AnnotationSyntaxError(field_name, tag, f"'{argument}' is not an integer")
    return int(argument)


class AnnotationParser:
    """Splits an annotation on its first ``:`` and checks the argument grammar.

    Rule names without a known grammar come back as :class:`UnknownRule`;
    whether that is an error is the caller's decision.
    """

    def parse(self, field_name: str, tag: str) -> Rule:
        name, sep, argument = tag.partition(_SEPARATOR)
        if not sep:
            raise AnnotationSyntaxError(field_name, tag, "missing ':' separator")

        if name == "len":
            length = _parse_int(field_name, tag, argument)
            if length < 0:
                raise AnnotationSyntaxError(field_name, tag, "length must not be negative")
            return LengthRule(length=length)
        if name == "min":
            return MinimumRule(bound=_parse_int(field_name, tag, argument))
        if name == "max":
            return MaximumRule(bound=_parse_int(field_name, tag, argument))
        if name == "in":
            allowed = tuple(argument.split(_LIST_SEPARATOR))
            if not any(token.strip() for token in allowed):
                raise AnnotationSyntaxError(field_name, tag, "membership set is empty")
            return MembershipRule(allowed=allowed)
        return UnknownRule(name=name, argument=argument)


def parse_annotation(field_name: str, tag: str) -> Rule:
    """Parse *tag* for the field called *field_name*."""
    return AnnotationParser().parse(field_name, tag)
