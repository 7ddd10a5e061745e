"""Ordered coordinate sequence built up while a log is parsed.

Coordinates are always ``(lon, lat)`` regardless of the column order in the
source. Order of insertion is the flight order and is never changed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

Coordinate = tuple[float, float]


class CoordinateSequence:
    """Append-only list of ``(lon, lat)`` coordinates."""

    __slots__ = ("_coords",)

    def __init__(self) -> None:
        self._coords: list[Coordinate] = []

    def append(self, lon: float, lat: float) -> None:
        self._coords.append((lon, lat))

    def extend(self, coords: list[Coordinate]) -> None:
        for lon, lat in coords:
            self.append(lon, lat)

    def to_flat(self) -> list[float]:
        """Return ``[lon0, lat0, lon1, lat1, ...]`` for geometry assembly."""
        return [value for coord in self._coords for value in coord]

    def to_list(self) -> list[Coordinate]:
        return list(self._coords)

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._coords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordinateSequence):
            return NotImplemented
        return self._coords == other._coords

    def __repr__(self) -> str:
        return f"CoordinateSequence({self._coords!r})"
