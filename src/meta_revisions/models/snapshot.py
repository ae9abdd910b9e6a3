"""Immutable point-in-time capture of versioned metadata."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Snapshot(BaseModel):
    """Versioned key → ordered values, deep copied in and out."""

    model_config = ConfigDict(frozen=True)

    values: dict[str, tuple[Any, ...]] = Field(default_factory=dict)

    @classmethod
    def capture(
        cls,
        metadata: Mapping[str, Sequence[Any]],
        keys: Iterable[str],
    ) -> Snapshot:
        """Copy the given keys out of ``metadata``; missing keys are skipped."""
        values = {
            key: tuple(copy.deepcopy(list(metadata[key])))
            for key in keys
            if metadata.get(key)
        }
        return cls(values=values)

    def get(self, key: str) -> list[Any]:
        return copy.deepcopy(list(self.values.get(key, ())))

    def restrict(self, keys: Iterable[str]) -> dict[str, list[Any]]:
        """Return a plain mapping of the given keys that hold values."""
        return {key: self.get(key) for key in keys if self.values.get(key)}

    def __contains__(self, key: object) -> bool:
        return key in self.values
