"""Score and speed progression, drop timer, top-10 rankings"""
from dataclasses import dataclass
from typing import List, Tuple

from tetro_config import CONFIG

MAX_RANKINGS = 10
LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def score_from_lines(n: int) -> int:
    # doubling per extra line, plus a bonus for a four-line clear
    return 100 * (2 ** n // 2 + (4 if n == 4 else 0))


def speed_from_score(score: int) -> float:
    return CONFIG["INITIAL_SPEED"] + (score // CONFIG["SCORE_MODULUS"]) * CONFIG["SPEED_INCREMENT"]


class TickClock:
    """Gravity timer. The threshold accumulates 1/speed per tick so lateness never drifts."""
    def __init__(self, speed: float, now: float):
        self.speed = speed
        self.threshold = now + 1.0 / speed

    def due(self, now: float) -> bool:
        if now < self.threshold:
            return False
        self.threshold += 1.0 / self.speed
        return True


@dataclass
class Ranking:
    name: str
    score: int


class Rankings:
    def __init__(self):
        self.entries: List[Ranking] = [Ranking("AAA", 0) for _ in range(MAX_RANKINGS)]

    def is_top_score(self, score: int) -> bool:
        return score > self.entries[-1].score

    def record(self, name: str, score: int):
        self.entries.append(Ranking(name, score))
        self.entries.sort(key=lambda r: r.score, reverse=True)
        del self.entries[MAX_RANKINGS:]

    def pairs(self) -> List[Tuple[str, int]]:
        return [(r.name, r.score) for r in self.entries]


def next_char(ch: str) -> str:
    return LETTERS[(LETTERS.index(ch) + 1) % len(LETTERS)]


def prev_char(ch: str) -> str:
    return LETTERS[(LETTERS.index(ch) - 1) % len(LETTERS)]
