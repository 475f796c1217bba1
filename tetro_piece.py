"""Piece model: shape templates, translation and pivot rotation"""
from dataclasses import dataclass, replace
from typing import List, NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from tetro_board import Board, Collision


class Point(NamedTuple):
    row: int
    col: int


# (cells relative to a pivot at the origin, number of rotation states)
SHAPES = {
    "I": ([(-1,0),(0,0),(1,0),(2,0)], 2),
    "J": ([(-1,0),(0,0),(1,0),(1,1)], 4),
    "L": ([(-1,0),(0,0),(1,0),(1,-1)], 4),
    "S": ([(1,-1),(1,0),(0,0),(0,1)], 2),
    "Z": ([(0,-1),(0,0),(1,0),(1,1)], 2),
    "O": ([(-1,-1),(-1,0),(0,-1),(0,0)], 1),
    "T": ([(0,-1),(0,0),(0,1),(-1,0)], 4),
}
SHAPE_ORDER = ("I", "J", "L", "S", "Z", "O", "T")


def rotate_point(p: Point, center: Point, sign: int) -> Point:
    """Quarter turn of p about center; sign +1 is clockwise, -1 counter-clockwise."""
    return Point(center.row + sign * (p.col - center.col),
                 center.col - sign * (p.row - center.row))


@dataclass
class Piece:
    shape: str
    cells: List[Point]
    center: Point
    num_states: int
    rotation_state: int = 0
    min_row: int = 0
    max_row: int = 0
    min_col: int = 0
    max_col: int = 0

    @staticmethod
    def spawn(shape: str, spawn_row: int, spawn_col: int) -> "Piece":
        offsets, states = SHAPES[shape]
        p = Piece(shape, [Point(r, c) for r, c in offsets], Point(0, 0), states)
        p.reposition(spawn_row, spawn_col)
        return p

    def recompute_bounding_box(self):
        rows = [c.row for c in self.cells]
        cols = [c.col for c in self.cells]
        self.min_row, self.max_row = min(rows), max(rows)
        self.min_col, self.max_col = min(cols), max(cols)

    def reposition(self, new_row: int, new_col: int):
        """Snap the pivot to (new_row, new_col) without any legality check."""
        dr, dc = new_row - self.center.row, new_col - self.center.col
        self.cells = [Point(c.row + dr, c.col + dc) for c in self.cells]
        self.center = Point(new_row, new_col)
        self.recompute_bounding_box()

    def classify(self, board: "Board") -> "Collision":
        return board.classify_piece(self)

    def translate(self, board: "Board", d_row: int, d_col: int) -> bool:
        cand = replace(self,
                       cells=[Point(c.row + d_row, c.col + d_col) for c in self.cells],
                       center=Point(self.center.row + d_row, self.center.col + d_col))
        return self._commit_if_free(board, cand)

    def rotate(self, board: "Board") -> bool:
        if self.num_states == 1:
            return True
        # two-state shapes turn back the way they came
        sign = -1 if self.num_states == 2 and self.rotation_state == 1 else 1
        cand = replace(self,
                       cells=[rotate_point(c, self.center, sign) for c in self.cells],
                       rotation_state=(self.rotation_state + 1) % self.num_states)
        return self._commit_if_free(board, cand)

    def _commit_if_free(self, board: "Board", cand: "Piece") -> bool:
        from tetro_board import Collision
        cand.recompute_bounding_box()
        if board.classify_piece(cand) is not Collision.NONE:
            return False
        self.cells = cand.cells
        self.center = cand.center
        self.rotation_state = cand.rotation_state
        self.recompute_bounding_box()
        return True
