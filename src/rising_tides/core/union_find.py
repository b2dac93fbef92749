"""
Union-Find Module

Weighted quick-union with path compression over the cells of a
rows x cols grid.
"""

from __future__ import annotations

import numpy as np

from .grid import GridLocation


class WeightedQuickUnionUF:
    """
    Disjoint-set forest over grid cells.

    Cells are stored at flat index ``row * cols + col``. Union attaches the
    smaller tree under the larger one; find halves the path as it walks.

    Locations outside the grid raise IndexError.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self._parent = np.arange(rows * cols, dtype=np.intp)
        self._size = np.ones(rows * cols, dtype=np.intp)
        self._count = rows * cols

    @property
    def count(self) -> int:
        """Number of disjoint sets, singletons included."""
        return self._count

    def _index(self, location: GridLocation) -> int:
        if not location.in_bounds(self.rows, self.cols):
            raise IndexError(
                f"Location (row={location.row}, col={location.col}) is outside "
                f"the {self.rows}x{self.cols} grid"
            )
        return location.row * self.cols + location.col

    def _location(self, index: int) -> GridLocation:
        return GridLocation(index // self.cols, index % self.cols)

    def _root(self, index: int) -> int:
        parent = self._parent
        while index != parent[index]:
            parent[index] = parent[parent[index]]
            index = int(parent[index])
        return index

    def find(self, location: GridLocation) -> GridLocation:
        """Root location of the set containing ``location``."""
        return self._location(self._root(self._index(location)))

    def connected(self, a: GridLocation, b: GridLocation) -> bool:
        return self._root(self._index(a)) == self._root(self._index(b))

    def component_size(self, location: GridLocation) -> int:
        return int(self._size[self._root(self._index(location))])

    def union(self, a: GridLocation, b: GridLocation) -> None:
        """Merge the sets containing ``a`` and ``b``."""
        root_a = self._root(self._index(a))
        root_b = self._root(self._index(b))
        if root_a == root_b:
            return

        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self._count -= 1
