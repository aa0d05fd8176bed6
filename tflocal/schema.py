"""Schema descriptions and diagnostics shared by the provider's objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class AttributeKind(Enum):
    """The value type of an attribute."""

    STRING = "string"
    INT64 = "int64"
    BOOL = "bool"


@dataclass(frozen=True)
class Attribute:
    """One attribute of a schema and how it may be set."""

    kind: AttributeKind
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    default: Any = None

    def __post_init__(self) -> None:
        if not (self.required or self.optional or self.computed):
            raise ValueError("attribute must be required, optional or computed")
        if self.required and (self.optional or self.computed):
            raise ValueError("a required attribute cannot be optional or computed")
        if self.default is not None and not self.computed:
            raise ValueError("an attribute with a default must be computed")


@dataclass(frozen=True)
class Schema:
    """A described set of named attributes."""

    description: str
    attributes: Mapping[str, Attribute] = field(default_factory=dict)

    def attribute(self, name: str) -> Attribute:
        """Return the attribute called ``name``."""
        try:
            return self.attributes[name]
        except KeyError:
            raise KeyError(f"unknown attribute {name!r}") from None


class DiagnosticError(Exception):
    """An operation failed; carries a short summary and a detail message."""

    def __init__(self, summary: str, detail: str = "") -> None:
        super().__init__(summary, detail)
        self.summary = summary
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.summary}: {self.detail}" if self.detail else self.summary


PROVIDER_SCHEMA = Schema(
    description="Provider for managing local files and executing local commands",
)