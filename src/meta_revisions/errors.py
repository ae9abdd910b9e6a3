"""Error types raised to callers of the revisioning core."""

from __future__ import annotations


class MetaRevisionsError(Exception):
    """Base class for errors raised by meta_revisions."""


class StoreFailure(MetaRevisionsError):  # noqa: N818
    """The backing persistence layer failed.

    Missing entities, revisions and unversioned keys never raise; they degrade
    to empty results. Only backend failures surface to the caller, and the core
    never retries them.
    """

    def __init__(self, message: str, *, keys: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.keys = keys
