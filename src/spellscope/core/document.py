"""Identity of an open document."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentIdentity:
    """Opaque cache key for a document plus the extension used for exclusion tests.

    ``extension`` is ``""`` for a file without an extension and ``None`` when
    it is not known at all.
    """

    path: str
    extension: str | None = None

    @classmethod
    def from_path(cls, path: str | os.PathLike) -> "DocumentIdentity":
        path = os.path.abspath(os.fspath(path))
        return cls(path=path, extension=os.path.splitext(path)[1])
