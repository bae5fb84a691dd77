"""Shared test fixtures and sample records for fieldrules."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel, Field

from fieldrules.engine.walker import Validator, reset_validator
from fieldrules.parser.annotation import AnnotationParser
from fieldrules.settings import Settings


@dataclass
class Person:
    Name: str = field(default="Anna", metadata={"validate": "len:4"})
    Age: int = field(default=17, metadata={"validate": "min:18"})


@dataclass
class Secret:
    _code: str = field(default="abc", metadata={"validate": "len:3"})


@dataclass
class Address:
    Street: str = field(default="Main", metadata={"validate": "len:4"})
    Zip: int = field(default=12345, metadata={"validate": "in:12345,54321"})


@dataclass
class Customer:
    """A record with a nested record between two annotated fields."""

    Id: str = field(default="c-01", metadata={"validate": "len:4"})
    Home: Address = field(default_factory=Address)
    Tier: str = field(default="gold", metadata={"validate": "in:gold,silver"})


@dataclass
class Node:
    """Self-referential record type."""

    Label: str = field(default="ok", metadata={"validate": "len:2"})
    Child: Node | None = None


class Order(BaseModel):
    sku: str = Field(json_schema_extra={"validate": "len:6"})
    quantity: int = Field(json_schema_extra={"validate": "max:10"})
    status: str = Field(default="open", json_schema_extra={"validate": "in:open,closed"})
    note: str = ""


class Shipment(BaseModel):
    order: Order
    carrier: str = Field(json_schema_extra={"validate": "min:2"})


@pytest.fixture
def parser() -> AnnotationParser:
    return AnnotationParser()


@pytest.fixture
def validator() -> Validator:
    return Validator(Settings())


@pytest.fixture(autouse=True)
def _fresh_default_validator() -> None:
    """Each test sees a default validator built from its own environment."""
    reset_validator()
