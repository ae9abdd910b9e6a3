"""Data models for stored document types."""

from meta_revisions.models.draft import Draft
from meta_revisions.models.entity import Entity
from meta_revisions.models.keys import MetadataKeySet
from meta_revisions.models.revision import Revision, RevisionSource
from meta_revisions.models.snapshot import Snapshot

__all__ = [
    "Draft",
    "Entity",
    "MetadataKeySet",
    "Revision",
    "RevisionSource",
    "Snapshot",
]
