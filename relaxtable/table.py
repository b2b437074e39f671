"""Distance table rows and the sentinel arithmetic used by the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Union

from .exceptions import UnknownVertexError
from .graph import VertexKey

INF = math.inf
Distance = Union[int, float]


def is_unknown(d: Distance) -> bool:
    """Return ``True`` if ``d`` is the "no finite distance yet" sentinel."""
    return d == INF


def add_distance(a: Distance, b: Distance) -> Distance:
    """Add two distances, letting the sentinel absorb the sum."""
    if is_unknown(a) or is_unknown(b):
        return INF
    return a + b


@dataclass
class DistanceTableRow:
    """Running estimate for one vertex.

    ``previous`` is the neighbour currently believed to lead toward the source
    on the best known path, and ``distance_from_previous`` is the weight of the
    hop last used to set ``distance_from_start``.
    """

    key: VertexKey
    previous: Optional[VertexKey] = None
    distance_from_start: Distance = INF
    distance_from_previous: Distance = INF

    def update(
        self,
        previous: VertexKey,
        distance_from_start: Distance,
        distance_from_previous: Distance,
    ) -> None:
        self.previous = previous
        self.distance_from_start = distance_from_start
        self.distance_from_previous = distance_from_previous


class DistanceTable:
    """Insertion-ordered mapping from vertex key to :class:`DistanceTableRow`."""

    def __init__(self) -> None:
        self._rows: Dict[VertexKey, DistanceTableRow] = {}

    def set_row(self, row: DistanceTableRow) -> bool:
        """Insert ``row`` unless its key is already present.

        Returns:
            ``True`` if the row was inserted, ``False`` if the key existed.
        """
        if row.key in self._rows:
            return False
        self._rows[row.key] = row
        return True

    def ensure(self, key: VertexKey) -> DistanceTableRow:
        """Return the row for ``key``, inserting a sentinel row if missing."""
        self.set_row(DistanceTableRow(key))
        return self._rows[key]

    def row(self, key: VertexKey) -> DistanceTableRow:
        """Return the row for ``key``.

        Raises:
            UnknownVertexError: If ``key`` was never registered.
        """
        try:
            return self._rows[key]
        except KeyError:
            raise UnknownVertexError(f"no distance-table row for vertex {key!r}") from None

    def keys(self) -> List[VertexKey]:
        return list(self._rows)

    def rows(self) -> List[DistanceTableRow]:
        return list(self._rows.values())

    def __contains__(self, key: object) -> bool:
        return key in self._rows

    def __iter__(self) -> Iterator[DistanceTableRow]:
        return iter(self._rows.values())

    def __len__(self) -> int:
        return len(self._rows)
