"""Board: occupancy grid, collision queries, row clearing"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from tetro_piece import Piece, Point

log = logging.getLogger(__name__)

Row = List[Optional[str]]


class Collision(Enum):
    NONE = 0
    WALL = 1
    FLOOR = 2
    LOCKED = 3


@dataclass
class Board:
    """height x width grid, row 0 on top; a cell holds the shape tag that filled it or None."""
    height: int
    width: int
    grid: List[Row] = field(default_factory=list)
    last_cleared: List[int] = field(default_factory=list)

    def __post_init__(self):
        if self.height <= 0 or self.width <= 0:
            raise ValueError(f"board must be at least 1x1, got {self.height}x{self.width}")
        if not self.grid:
            self.reset()

    def reset(self):
        self.grid = [self._empty_row() for _ in range(self.height)]
        self.last_cleared = []

    def _empty_row(self) -> Row:
        return [None] * self.width

    def occupied(self, row: int, col: int) -> bool:
        return self.grid[row][col] is not None

    def filled_count(self) -> int:
        return sum(v is not None for r in self.grid for v in r)

    def classify(self, p: Point) -> Collision:
        if p.row < 0:
            raise ValueError(f"cell above the board: {p}")
        # bounds first, so the grid lookup never goes out of range
        if p.col < 0 or p.col >= self.width:
            return Collision.WALL
        if p.row >= self.height:
            return Collision.FLOOR
        if self.grid[p.row][p.col] is not None:
            return Collision.LOCKED
        return Collision.NONE

    def classify_piece(self, piece: Piece) -> Collision:
        for cell in piece.cells:
            c = self.classify(cell)
            if c is not Collision.NONE:
                return c
        return Collision.NONE

    def lock(self, piece: Piece):
        for cell in piece.cells:
            self.grid[cell.row][cell.col] = piece.shape

    def row_is_full(self, row: int) -> bool:
        return all(v is not None for v in self.grid[row])

    def clear_and_compact(self, bottom_row: int, top_row: int) -> int:
        """Remove full rows between bottom_row and top_row (inclusive), dropping the rows above.

        Only the rows a freshly locked piece spans can have become full, so the
        caller passes that piece's row range. After a removal the same index is
        checked again since the row above has moved into it. The pre-clear
        indices of the removed rows are kept in ``last_cleared`` for animation.
        """
        self.last_cleared = []
        row = bottom_row
        for _ in range(bottom_row - top_row + 1):
            if self.row_is_full(row):
                # rows already removed sit below, so this one started higher up
                self.last_cleared.append(row - len(self.last_cleared))
                del self.grid[row]
                self.grid.insert(0, self._empty_row())
            else:
                row -= 1
        if self.last_cleared:
            log.debug("cleared rows %s", self.last_cleared)
        return len(self.last_cleared)
