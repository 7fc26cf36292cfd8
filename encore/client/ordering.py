"""
Client-side ordering value.

An Ordering is the sequence of item ids a collection should have. It is
immutable: every drag-and-drop produces a new Ordering from the current
one, and the whole thing is sent to the server in a single request.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple


@dataclass(frozen=True)
class Ordering:
    """Immutable sequence of item ids, first to last."""

    item_ids: Tuple[int, ...] = ()

    @classmethod
    def of(cls, item_ids: Iterable[int]) -> "Ordering":
        return cls(tuple(item_ids))

    def __len__(self) -> int:
        return len(self.item_ids)

    def move(self, source_index: int, destination_index: int) -> "Ordering":
        """
        Move one element, shifting the ones in between.

        Same semantics as removing the element at source_index and
        inserting it again at destination_index:

            Ordering.of([1, 2, 3]).move(2, 0)  →  (3, 1, 2)
            Ordering.of([1, 2, 3]).move(0, 2)  →  (2, 3, 1)

        Raises:
            ValueError: If either index is outside the ordering
        """
        size = len(self.item_ids)
        for name, index in (("source_index", source_index), ("destination_index", destination_index)):
            if not 0 <= index < size:
                raise ValueError(f"{name} {index} out of range for ordering of {size} items")

        ids = list(self.item_ids)
        moved = ids.pop(source_index)
        ids.insert(destination_index, moved)
        return Ordering(tuple(ids))

    def to_payload(self) -> Dict[str, Any]:
        """Request body for PUT /collections/{id}/members/reorder."""
        return {
            "members": [
                {"itemId": item_id, "position": position}
                for position, item_id in enumerate(self.item_ids)
            ]
        }
