"""Annotation parsing for fieldrules."""

from fieldrules.parser.annotation import AnnotationParser, parse_annotation

__all__ = [
    "AnnotationParser",
    "parse_annotation",
]
