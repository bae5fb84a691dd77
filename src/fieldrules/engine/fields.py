"""Field discovery over dataclass instances and pydantic models."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel


@dataclass(frozen=True)
class FieldInfo:
    """One declared field of a record, read at validation time."""

    name: str
    value: Any
    tag: str | None

    @property
    def exported(self) -> bool:
        return not self.name.startswith("_")


def is_record(value: Any) -> bool:
    """True for dataclass instances and pydantic model instances (not classes)."""
    if isinstance(value, BaseModel):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _pydantic_tag(field: Any, tag_key: str) -> str | None:
    extra = field.json_schema_extra
    if isinstance(extra, dict):
        tag = extra.get(tag_key)
        return tag if isinstance(tag, str) else None
    return None


def iter_fields(record: Any, tag_key: str = "validate") -> Iterator[FieldInfo]:
    """Yield the fields of *record* in declaration order."""
    if isinstance(record, BaseModel):
        for name, field in type(record).model_fields.items():
            yield FieldInfo(
                name=name,
                value=getattr(record, name, None),
                tag=_pydantic_tag(field, tag_key),
            )
        return

    for field in dataclasses.fields(record):
        tag = field.metadata.get(tag_key)
        yield FieldInfo(
            name=field.name,
            value=getattr(record, field.name, None),
            tag=tag if isinstance(tag, str) else None,
        )


def rule(tag: str, *, tag_key: str = "validate", **kwargs: Any) -> Any:
    """Declare a dataclass field carrying the annotation *tag*.

    ``code: str = rule("len:3", default="abc")`` is shorthand for
    ``field(default="abc", metadata={"validate": "len:3"})``.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[tag_key] = tag
    return dataclasses.field(metadata=metadata, **kwargs)
