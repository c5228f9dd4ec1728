"""Data model for paths locating entities in the module hierarchy."""

from collections.abc import Iterable
from dataclasses import dataclass

SEPARATOR = "::"


@dataclass(frozen=True, order=True)
class ModPath:
    """Ordered identifier segments, e.g. ``mycrate::io::read``."""

    segments: tuple[str, ...] = ()

    @classmethod
    def from_str(cls, text: str) -> "ModPath":
        """Parse a ``::``-separated path, ignoring empty segments."""
        return cls(tuple(s for s in text.strip().split(SEPARATOR) if s))

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> "ModPath":
        """Build a path from any iterable of segment strings."""
        return cls(tuple(str(s) for s in segments))

    @property
    def name(self) -> str:
        """Last segment, or an empty string for the empty path."""
        return self.segments[-1] if self.segments else ""

    def parent(self) -> "ModPath | None":
        """Return the enclosing path; a crate root has none."""
        if len(self.segments) < 2:
            return None
        return ModPath(self.segments[:-1])

    def ancestors(self) -> list["ModPath"]:
        """Return every enclosing path, nearest first."""
        result = []
        current = self.parent()
        while current is not None:
            result.append(current)
            current = current.parent()
        return result

    def child(self, segment: str) -> "ModPath":
        return ModPath((*self.segments, segment))

    def to_json(self) -> list[str]:
        return list(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)
