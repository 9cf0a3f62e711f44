from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, TypeVar

from .difficulty import DifficultyTier

T = TypeVar("T")


class GameMode(StrEnum):
    SEQUENCE = "sequence"
    SPATIAL = "spatial"
    WORD = "word"


class Challenge(Protocol):
    """Anything a game deals for one round (pure data)."""

    @property
    def mode(self) -> GameMode: ...

    @property
    def tier(self) -> DifficultyTier: ...


class MemoryGame(Protocol):
    """Deterministic challenge generator paired with its validator."""

    @property
    def mode(self) -> GameMode: ...

    def generate(self, *, tier: DifficultyTier) -> Challenge:
        ...

    def validate(self, *, challenge: Challenge, response: object) -> "ValidationResult":
        ...


@dataclass(frozen=True, slots=True)
class ValidationResult:
    correct: int
    false_positives: int
    false_negatives: int
    total: int
    accuracy: float  # recall: share of the target that was reproduced
    precision: float  # share of the response that was right
    is_perfect: bool
    position_results: tuple[bool, ...] = ()  # ordered modes only


def validate_selection(*, target: Iterable[T], selected: Iterable[T]) -> ValidationResult:
    """Set comparison shared by the spatial and word games.

    Duplicated selections count once. An empty target or empty selection
    gives 0.0 for the affected ratio instead of failing.
    """

    target_set = frozenset(target)
    selected_set = frozenset(selected)

    hits = len(target_set & selected_set)
    false_positives = len(selected_set - target_set)
    false_negatives = len(target_set - selected_set)
    total = len(target_set)

    return ValidationResult(
        correct=hits,
        false_positives=false_positives,
        false_negatives=false_negatives,
        total=total,
        accuracy=ratio(hits, total),
        precision=ratio(hits, len(selected_set)),
        is_perfect=hits == total and false_positives == 0,
    )


class SeededRng:
    """Simple seeded RNG wrapper to keep deterministic streams explicit."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(int(seed))

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        return self._rng.sample(population, k)

    def shuffled(self, items: Iterable[T]) -> list[T]:
        out = list(items)
        self._rng.shuffle(out)
        return out


def ratio(part: int, whole: int) -> float:
    return 0.0 if whole <= 0 else part / whole


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x <= lo else hi if x >= hi else float(x)


def clamp01(x: float) -> float:
    return clamp(x, 0.0, 1.0)


def round_half_up(x: float) -> int:
    # 62.5 -> 63, 0.5 -> 1; scores are never negative.
    return int(math.floor(x + 0.5))
