"""
Traversal-scoped cycle tracking.

A ``TraversalContext`` lives for exactly one top-level ``create`` call. It
remembers every composite source reference it has entered together with the
path at which it was first reached. Entries are never removed, so any reuse
of a reference anywhere in the graph is reported, not only back-edges on the
active path. Detection is by identity; equal but distinct values are never
treated as cycles.
"""

from dataclasses import dataclass
from typing import Any, Optional

Path = tuple


@dataclass(frozen=True)
class CycleDetected:
    """Diagnostic event for a reference reached a second time."""
    current_path: Path       # Where the reference was reached again
    original_path: Path      # Where it was first visited


class TraversalContext:
    """Identity map from visited source references to their first path."""

    # Immutable containers that can only re-enter the graph through a
    # registered mutable member. CPython also shares empty tuples.
    UNTRACKED_TYPES = (tuple, range)

    def __init__(self) -> None:
        # id -> (source, path); holding the source pins its id for the traversal
        self._visited: dict[int, tuple[Any, Path]] = {}

    def __len__(self) -> int:
        return len(self._visited)

    def visit(self, value: Any, path: Path) -> Optional[Path]:
        """
        Register ``value`` at ``path`` unless it was already visited.

        Returns:
            The original path if ``value`` was seen before, otherwise None.
            The root path is ``()``, so callers must compare against None.
        """
        if isinstance(value, self.UNTRACKED_TYPES):
            return None

        key = id(value)
        seen = self._visited.get(key)
        if seen is not None:
            return seen[1]

        self._visited[key] = (value, path)
        return None

    def original_path(self, value: Any) -> Optional[Path]:
        """Path at which ``value`` was first visited, if it was."""
        seen = self._visited.get(id(value))
        return seen[1] if seen is not None else None
