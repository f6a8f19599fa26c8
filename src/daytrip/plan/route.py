"""
Route: ordered selection of places with derived totals.

Totals are recomputed on every call so they always match the contents.
Route never checks the time budget; selectors do that before appending.
"""

from typing import List, Dict, Any, Tuple

from ..catalog import Place

ENTRY_SEPARATOR = ", \n"


def format_number(value: float) -> str:
    """Shortest round-trip form of a number: 29.0 -> "29", 31.5 -> "31.5"."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class Route:
    """Places picked by one selector pass, in the order they were picked."""

    def __init__(self):
        self._places: List[Place] = []

    def add_place(self, place: Place) -> None:
        self._places.append(place)

    @property
    def places(self) -> Tuple[Place, ...]:
        return tuple(self._places)

    def total_time(self) -> float:
        return sum((p.duration for p in self._places), 0.0)

    def total_importance(self) -> int:
        return sum(p.importance for p in self._places)

    def count(self) -> int:
        return len(self._places)

    def render(self) -> str:
        """
        Render the route as text.

        Summary line first, then one " - name (duration h, importance)"
        entry per place. Entries are separated by a comma and a newline;
        the last entry is left unterminated.
        """
        summary = (
            f"Total time: {format_number(self.total_time())}; "
            f"Total value: {self.total_importance()}; "
            f"Places visited: {self.count()}\n"
        )
        entries = [
            f" - {p.name} ({format_number(p.duration)}h, {p.importance})"
            for p in self._places
        ]
        return summary + ENTRY_SEPARATOR.join(entries)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "total_time": self.total_time(),
            "total_importance": self.total_importance(),
            "count": self.count(),
            "places": [
                {"name": p.name, "duration": p.duration, "importance": p.importance}
                for p in self._places
            ],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self._places == other._places

    def __repr__(self) -> str:
        return (
            f"Route(count={self.count()}, total_time={format_number(self.total_time())}, "
            f"total_importance={self.total_importance()})"
        )
