"""Game session: gravity ticks, locking, scoring and spawning, independent of any display"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from tetro_board import Board, Collision
from tetro_config import CONFIG, preview_point, spawn_point
from tetro_input import Command
from tetro_piece import Piece
from tetro_rng import ShapeRandom
from tetro_scoring import TickClock, score_from_lines, speed_from_score

log = logging.getLogger(__name__)


@dataclass
class LockResult:
    piece: Piece
    cleared_rows: List[int] = field(default_factory=list)
    points: int = 0

    @property
    def lines(self) -> int:
        return len(self.cleared_rows)


class Game:
    def __init__(self, rng: ShapeRandom, now: float):
        self.rng = rng
        self.board = Board(CONFIG["BOARD_HEIGHT"], CONFIG["BOARD_WIDTH"])
        self.score = 0
        self.lines = 0
        self.over = False
        self.current = Piece.spawn(rng.next_shape(), *spawn_point())
        self.preview = self._new_preview()
        self.clock = TickClock(self.speed, now)

    @property
    def speed(self) -> float:
        return speed_from_score(self.score)

    def _new_preview(self) -> Piece:
        return Piece.spawn(self.rng.next_shape(), *preview_point())

    def update(self, now: float) -> Optional[LockResult]:
        """Run at most one gravity step; returns the lock details when the piece landed."""
        if self.over or not self.clock.due(now):
            return None
        if self.current.translate(self.board, 1, 0):
            return None
        return self._lock_current()

    def _lock_current(self) -> LockResult:
        piece = self.current
        self.board.lock(piece)
        n = self.board.clear_and_compact(piece.max_row, piece.min_row)
        result = LockResult(piece, list(self.board.last_cleared), score_from_lines(n))
        self.score += result.points
        self.lines += n
        self.clock.speed = self.speed
        log.debug("locked %s rows %d-%d, %d lines, score %d",
                  piece.shape, piece.min_row, piece.max_row, n, self.score)

        self.current = self.preview
        self.current.reposition(*spawn_point())
        self.preview = self._new_preview()
        # a piece that collides where it spawns ends the game
        if self.current.classify(self.board) is not Collision.NONE:
            self.over = True
            log.debug("game over at score %d", self.score)
        return result

    def handle(self, cmd: Command) -> bool:
        """Apply one player command; returns whether the piece moved."""
        if self.over:
            return False
        if cmd is Command.QUIT:
            self.over = True
            return False
        if cmd is Command.ROTATE:
            return self.current.rotate(self.board)
        if cmd is Command.LEFT:
            return self.current.translate(self.board, 0, -1)
        if cmd is Command.RIGHT:
            return self.current.translate(self.board, 0, 1)
        if cmd is Command.DOWN:
            return self.current.translate(self.board, 1, 0)
        return False
