"""Per entity type configuration of versioned metadata keys."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from meta_revisions.config import RevisionConfig

logger = logging.getLogger(__name__)

DEFAULT_ENTITY_TYPE = "post"


class MetadataKeySet(BaseModel):
    """Entity type → versioned key → display label.

    Lookups for an unconfigured type return nothing rather than failing.
    """

    model_config = ConfigDict(frozen=True)

    types: dict[str, dict[str, str]] = Field(default_factory=dict)

    @field_validator("types")
    @classmethod
    def _validate_keys(cls, value: dict[str, dict[str, str]]) -> dict[str, dict[str, str]]:
        for entity_type, keys in value.items():
            for key, label in keys.items():
                if not key.strip():
                    msg = f"empty metadata key configured for type {entity_type!r}"
                    raise ValueError(msg)
                if not label.strip():
                    msg = f"empty label for metadata key {key!r} of type {entity_type!r}"
                    raise ValueError(msg)
        return value

    @classmethod
    def from_keys(cls, mapping: dict[str, list[str] | dict[str, str]]) -> MetadataKeySet:
        """Build from ``{type: [key, ...]}``; a bare list uses each key as its own label."""
        types = {
            entity_type: dict(keys) if isinstance(keys, dict) else {key: key for key in keys}
            for entity_type, keys in mapping.items()
        }
        return cls(types=types)

    def _for(self, entity_type: str | None) -> dict[str, str]:
        return self.types.get(entity_type or DEFAULT_ENTITY_TYPE, {})

    def keys_for(self, entity_type: str | None) -> tuple[str, ...]:
        return tuple(self._for(entity_type))

    def label_for(self, entity_type: str | None, key: str) -> str:
        return self._for(entity_type).get(key, key)

    def is_versioned(self, entity_type: str | None, key: str) -> bool:
        return key in self._for(entity_type)


def load_key_set(config: RevisionConfig) -> MetadataKeySet:
    """Load the key set from inline JSON or a JSON file named in config.

    Inline JSON wins when both are set. An unconfigured key set versions
    nothing.
    """
    if config.keys_json:
        raw = json.loads(config.keys_json)
    elif config.keys_file:
        raw = json.loads(Path(config.keys_file).read_text(encoding="utf-8"))
    else:
        logger.warning("No versioned metadata keys configured — nothing will be revisioned")
        return MetadataKeySet()

    key_set = MetadataKeySet.from_keys(raw)
    logger.info("Versioned metadata keys loaded — types=%s", ", ".join(sorted(key_set.types)))
    return key_set
