"""Box records and the two collections that hold them."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterator

MAX_BOXES = 10


@dataclass
class Box:
    """A single box and its parameters."""

    length: float
    width: float
    depth: float
    material: str
    suitable_for_food: str
    name: str
    box_id: int | None = None


_EDITABLE_FIELDS = frozenset(f.name for f in fields(Box)) - {"box_id"}


class BoxLimitError(Exception):
    """Raised when a collection already holds its maximum number of boxes."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"maximum of {limit} boxes reached")
        self.limit = limit


class BoxNotFoundError(LookupError):
    """Raised when no box matches the given number or id."""

    def __init__(self, key: int) -> None:
        super().__init__(f"box {key} not found")
        self.key = key


def _apply_changes(box: Box, changes: dict[str, Any]) -> None:
    unknown = set(changes) - _EDITABLE_FIELDS
    if unknown:
        raise TypeError(f"unknown box field(s): {', '.join(sorted(unknown))}")
    for field_name, value in changes.items():
        setattr(box, field_name, value)


class BoxList:
    """Boxes addressed by their 1-based position in the list."""

    def __init__(self, limit: int = MAX_BOXES) -> None:
        self.limit = limit
        self._boxes: list[Box] = []

    def __len__(self) -> int:
        return len(self._boxes)

    def __iter__(self) -> Iterator[Box]:
        return iter(self._boxes)

    def _index(self, number: int) -> int:
        if not 1 <= number <= len(self._boxes):
            raise BoxNotFoundError(number)
        return number - 1

    def add(self, box: Box) -> int:
        """Append a box and return its number."""
        if len(self._boxes) >= self.limit:
            raise BoxLimitError(self.limit)
        self._boxes.append(box)
        return len(self._boxes)

    def get(self, number: int) -> Box:
        return self._boxes[self._index(number)]

    def remove(self, number: int) -> Box:
        """Remove the box with this number; later boxes move up by one."""
        return self._boxes.pop(self._index(number))

    def update(self, number: int, **kwargs: Any) -> Box:
        box = self.get(number)
        _apply_changes(box, kwargs)
        return box

    def numbered(self) -> Iterator[tuple[int, Box]]:
        """Yield (number, box) pairs, numbering from 1."""
        return enumerate(self._boxes, start=1)


class BoxStore:
    """Boxes addressed by a stable id handed out on insertion."""

    def __init__(self, limit: int = MAX_BOXES) -> None:
        self.limit = limit
        self._boxes: dict[int, Box] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._boxes)

    def __contains__(self, box_id: object) -> bool:
        return box_id in self._boxes

    def add(self, box: Box) -> int:
        """Store a box under a fresh id, set it on the box and return it."""
        if len(self._boxes) >= self.limit:
            raise BoxLimitError(self.limit)
        box.box_id = self._next_id
        self._next_id += 1
        self._boxes[box.box_id] = box
        return box.box_id

    def get(self, box_id: int) -> Box:
        try:
            return self._boxes[box_id]
        except KeyError:
            raise BoxNotFoundError(box_id) from None

    def remove(self, box_id: int) -> Box:
        try:
            return self._boxes.pop(box_id)
        except KeyError:
            raise BoxNotFoundError(box_id) from None

    def update(self, box_id: int, **kwargs: Any) -> Box:
        box = self.get(box_id)
        _apply_changes(box, kwargs)
        return box

    def items(self) -> list[tuple[int, Box]]:
        """Return (id, box) pairs in insertion order."""
        return list(self._boxes.items())


def format_number(value: float) -> str:
    """Format a number the way a default C-style stream prints a double."""
    return format(value, "g")