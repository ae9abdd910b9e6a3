"""Revisioning components: engine, change detection, restore and drafts."""

from meta_revisions.revisioning.changes import ChangeDetector
from meta_revisions.revisioning.diff import DiffField
from meta_revisions.revisioning.drafts import DraftOverlay
from meta_revisions.revisioning.engine import RevisionEngine
from meta_revisions.revisioning.keys import KeyResolver
from meta_revisions.revisioning.locks import EntityLocks
from meta_revisions.revisioning.restore import RestoreCoordinator, RestoreResult

__all__ = [
    "ChangeDetector",
    "DiffField",
    "DraftOverlay",
    "EntityLocks",
    "KeyResolver",
    "RestoreCoordinator",
    "RestoreResult",
    "RevisionEngine",
]
