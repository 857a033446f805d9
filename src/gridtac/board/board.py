"""
Board - marker state of an N x N grid.

Cells are stored in a flat numpy object array indexed by (key - base); each
cell holds exactly one marker, EMPTY when nobody has claimed it. The
topology is immutable and shared, so snapshot() only copies the cell array.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from gridtac.board.topology import GridTopology, Line, topology_for
from gridtac.core.errors import CellOccupiedError, InvalidCellError
from gridtac.core.types import EMPTY, Marker


def _as_scalar(marker: Marker) -> np.ndarray:
    """Wrap a marker in a 0-d object array so tuples compare as one value."""
    scalar = np.empty((), dtype=object)
    scalar[()] = marker
    return scalar


class Board:
    """Generalized tic-tac-toe board."""

    __slots__ = ("topology", "_cells")

    def __init__(self, dimension: int = 3, base: int = 0):
        self.topology: GridTopology = topology_for(dimension, base)
        self._cells = np.empty(self.topology.size, dtype=object)
        self.reset()

    @classmethod
    def _with_cells(cls, topology: GridTopology, cells: np.ndarray) -> "Board":
        board = cls.__new__(cls)
        board.topology = topology
        board._cells = cells
        return board

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def dimension(self) -> int:
        return self.topology.dimension

    @property
    def base(self) -> int:
        return self.topology.base

    @property
    def keys(self) -> Tuple[int, ...]:
        return self.topology.keys

    @property
    def lines(self) -> Tuple[Line, ...]:
        return self.topology.lines

    @property
    def center(self) -> Tuple[int, ...]:
        return self.topology.center

    def __len__(self) -> int:
        return self.topology.size

    def _index(self, key) -> int:
        if not self.topology.contains(key):
            raise InvalidCellError(key, self.base, self.base + self.topology.size - 1)
        return int(key) - self.base

    # ------------------------------------------------------------------
    # Cell state
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Put EMPTY in every cell."""
        self._cells[:] = EMPTY

    def mark(self, key: int, marker: Marker) -> None:
        """
        Write a marker into a cell.

        Overwrites whatever the cell holds; checking that the cell is free
        is the caller's job (see place()).
        """
        self._cells[self._index(key)] = marker

    def place(self, key: int, marker: Marker) -> None:
        """Like mark(), but refuses to overwrite a marked cell."""
        current = self._cells[self._index(key)]
        if current != EMPTY:
            raise CellOccupiedError(key, current)
        self.mark(key, marker)

    def __getitem__(self, key: int) -> Marker:
        return self._cells[self._index(key)]

    def markers(self) -> Dict[int, Marker]:
        """Key -> marker for every cell."""
        return dict(zip(self.keys, self._cells.tolist()))

    def cells_key(self) -> Tuple[Marker, ...]:
        """Hashable view of the cell state."""
        return tuple(self._cells.tolist())

    def unmarked_keys(self, subset: Optional[Iterable[int]] = None) -> List[int]:
        """
        Keys of cells holding EMPTY.

        Args:
            subset: Restrict the scan to these keys (e.g. one line). Order
                    of the subset is preserved.

        Returns:
            List of unmarked keys.
        """
        if subset is None:
            return (np.flatnonzero(self._cells == EMPTY) + self.base).tolist()
        return [k for k in subset if self._cells[self._index(k)] == EMPTY]

    def unmarked_center_keys(self) -> List[int]:
        return [k for k in self.center if self._cells[k - self.base] == EMPTY]

    def is_full(self) -> bool:
        return not bool(np.any(self._cells == EMPTY))

    # ------------------------------------------------------------------
    # Line scans
    # ------------------------------------------------------------------

    def _line_cells(self) -> np.ndarray:
        """Markers arranged as (lines, dimension)."""
        return self._cells[self.topology.line_indices]

    def winning_marker(self) -> Optional[Marker]:
        """Marker filling a whole line, or None. First line in order wins."""
        grid = self._line_cells()
        first = grid[:, 0]
        complete = np.all(grid == first[:, None], axis=1) & (first != EMPTY)
        hits = np.flatnonzero(complete)
        if hits.size == 0:
            return None
        return first[hits[0]]

    def has_winner(self) -> bool:
        return self.winning_marker() is not None

    def almost_winning(self, marker: Marker) -> List[int]:
        """
        Cells that would complete a line for `marker`.

        A line qualifies when exactly dimension - 1 of its cells hold
        `marker` and at least one is unmarked; its first unmarked cell is
        reported. Keys come back in line order without duplicates.
        """
        grid = self._line_cells()
        open_cells = grid == EMPTY
        owned = np.count_nonzero(grid == _as_scalar(marker), axis=1)
        threats = (owned == self.dimension - 1) & np.any(open_cells, axis=1)

        keys: List[int] = []
        for li in np.flatnonzero(threats):
            key = self.lines[li][int(np.argmax(open_cells[li]))]
            if key not in keys:
                keys.append(key)
        return keys

    # ------------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------------

    def snapshot(self) -> "Board":
        """Independent copy of the cells; the topology is shared."""
        return Board._with_cells(self.topology, self._cells.copy())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.topology is other.topology and self.cells_key() == other.cells_key()

    __hash__ = None

    def __repr__(self) -> str:
        marked = len(self) - len(self.unmarked_keys())
        return f"Board(dimension={self.dimension}, marked={marked})"
