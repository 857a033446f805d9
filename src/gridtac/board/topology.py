"""
Grid topology - the winning lines and center cells of an N x N grid.

Everything here is a pure function of (dimension, base), so topologies are
built once and shared between a board and all of its snapshots.

Keys are laid out row-major:

    base + 0        base + 1        ...  base + n - 1
    base + n        base + n + 1    ...
    ...
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

import numpy as np

from gridtac.core.errors import InvalidDimensionError

Line = Tuple[int, ...]


def _as_lines(arrays) -> Tuple[Line, ...]:
    return tuple(tuple(int(k) for k in a) for a in arrays)


class GridTopology:
    """Rows, columns, diagonals and center of a square grid."""

    __slots__ = (
        "dimension", "base", "keys", "rows", "columns", "diagonals",
        "lines", "center", "line_indices",
    )

    def __init__(self, dimension: int, base: int = 0):
        if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)) or dimension < 1:
            raise InvalidDimensionError(dimension)

        n = int(dimension)
        self.dimension = n
        self.base = int(base)

        grid = np.arange(n * n, dtype=np.int64).reshape(n, n) + self.base

        self.keys: Tuple[int, ...] = tuple(int(k) for k in grid.ravel())
        self.rows = _as_lines(grid)
        self.columns = _as_lines(grid.T)
        self.diagonals = _as_lines([grid.diagonal(), np.fliplr(grid).diagonal()])
        self.lines = self.rows + self.columns + self.diagonals
        self.center = self._center_keys()

        # Same lines as cell offsets, shape (2n + 2, n), for vectorized scans
        self.line_indices = np.array(self.lines, dtype=np.int64) - self.base
        self.line_indices.setflags(write=False)

    @property
    def size(self) -> int:
        """Number of cells."""
        return self.dimension * self.dimension

    def _center_keys(self) -> Tuple[int, ...]:
        n, cells = self.dimension, self.size
        if n % 2 == 1:
            return (cells // 2 + self.base,)

        # Two pairs straddling the middle row boundary and middle column
        upper = (cells - n) // 2 + self.base - 1
        lower = (cells + n) // 2 + self.base - 1
        return (upper, upper + 1, lower, lower + 1)

    def contains(self, key) -> bool:
        if isinstance(key, (bool, np.bool_)):
            return False
        return isinstance(key, (int, np.integer)) and self.base <= key < self.base + self.size

    def __repr__(self) -> str:
        return f"GridTopology(dimension={self.dimension}, base={self.base})"


@lru_cache(maxsize=None)
def topology_for(dimension: int, base: int = 0) -> GridTopology:
    """Shared, cached topology for a dimension."""
    return GridTopology(dimension, base)
