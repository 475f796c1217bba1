"""Seedable shape randomizer"""
import time
from typing import Optional

from tetro_piece import SHAPE_ORDER


class ShapeRandom:
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns()
        self.state = seed & 0xFFFFFFFF

    def _lcg_next(self):
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self):
        return (self._lcg_next() >> 16) & 0x7FFF

    def next_shape(self) -> str:
        return SHAPE_ORDER[self._rand() % len(SHAPE_ORDER)]
