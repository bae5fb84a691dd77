"""Parsed annotation types with typed arguments."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LengthRule(BaseModel):
    """Exact character count for text, or for every text element of a sequence."""

    model_config = ConfigDict(frozen=True)

    name: Literal["len"] = "len"
    length: int = Field(ge=0)


class MembershipRule(BaseModel):
    """The string form of a scalar must be one of ``allowed``."""

    model_config = ConfigDict(frozen=True)

    name: Literal["in"] = "in"
    allowed: tuple[str, ...]


class MinimumRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Literal["min"] = "min"
    bound: int


class MaximumRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Literal["max"] = "max"
    bound: int


class UnknownRule(BaseModel):
    """A rule name no checker is registered for; kept verbatim."""

    model_config = ConfigDict(frozen=True)

    name: str
    argument: str


Rule = LengthRule | MembershipRule | MinimumRule | MaximumRule | UnknownRule
