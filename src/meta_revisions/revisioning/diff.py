"""Raw inputs for revision diff views; rendering belongs to the caller."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class DiffField(BaseModel):
    """One versioned key whose value sequences differ between two states."""

    key: str
    label: str
    from_values: list[Any] = Field(default_factory=list)
    to_values: list[Any] = Field(default_factory=list)
