from dataclasses import dataclass, field
from typing import Any


@dataclass
class ColumnMeta:
    """Metadata for a column in a table or form response."""

    key: str
    label: str
    type: str  # "string", "number", "email", "status"


@dataclass
class SingleRowResponse:
    """Response containing a single row with column metadata."""

    columns: list[ColumnMeta]
    data: dict[str, Any] | None


@dataclass
class MultiRowResponse:
    """Response containing multiple rows with column metadata."""

    columns: list[ColumnMeta]
    data: list[dict[str, Any]]


@dataclass
class FormResponse:
    """An input form: its fields, current values and per-field errors."""

    columns: list[ColumnMeta]
    data: dict[str, Any]
    errors: dict[str, list[str]] = field(default_factory=dict)
