from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .difficulty import DifficultyTier
from .memory_core import (
    GameMode,
    SeededRng,
    ValidationResult,
    clamp01,
    round_half_up,
    validate_selection,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class TilePosition:
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class SpatialTierSettings:
    grid_size: int  # tiles per side
    pattern_fraction: float  # share of tiles that light up


SPATIAL_SETTINGS: dict[DifficultyTier, SpatialTierSettings] = {
    DifficultyTier.BEGINNER: SpatialTierSettings(grid_size=3, pattern_fraction=0.33),
    DifficultyTier.INTERMEDIATE: SpatialTierSettings(grid_size=4, pattern_fraction=0.35),
    DifficultyTier.ADVANCED: SpatialTierSettings(grid_size=5, pattern_fraction=0.36),
    DifficultyTier.EXPERT: SpatialTierSettings(grid_size=6, pattern_fraction=0.38),
}

# Penalty per wrongly selected tile in the display-only pattern score.
FALSE_POSITIVE_PENALTY = 0.1


def grid_size_for(tier: DifficultyTier) -> int:
    return SPATIAL_SETTINGS[tier].grid_size


def pattern_size_for(tier: DifficultyTier) -> int:
    s = SPATIAL_SETTINGS[tier]
    return round_half_up(s.grid_size * s.grid_size * s.pattern_fraction)


@dataclass(frozen=True, slots=True)
class SpatialDifficultyStats:
    grid_size: int
    pattern_size: int
    total_tiles: int


def difficulty_stats(tier: DifficultyTier) -> SpatialDifficultyStats:
    size = grid_size_for(tier)
    return SpatialDifficultyStats(grid_size=size, pattern_size=pattern_size_for(tier), total_tiles=size * size)


@dataclass(frozen=True, slots=True)
class SpatialChallenge:
    tier: DifficultyTier
    grid_size: int
    reveal_order: tuple[TilePosition, ...]  # lit tiles in the order they are flashed

    @property
    def mode(self) -> GameMode:
        return GameMode.SPATIAL

    @property
    def pattern(self) -> frozenset[TilePosition]:
        return frozenset(self.reveal_order)

    @property
    def cells(self) -> tuple[TilePosition, ...]:
        """Every tile of the grid in row-major order (the choice set)."""

        n = self.grid_size
        return tuple(TilePosition(r, c) for r in range(n) for c in range(n))


class SpatialMemoryGame:
    """Grid-pattern recall: select every tile that lit up."""

    def __init__(self, rng: SeededRng) -> None:
        self._rng = rng

    @property
    def mode(self) -> GameMode:
        return GameMode.SPATIAL

    def generate(self, *, tier: DifficultyTier) -> SpatialChallenge:
        size = grid_size_for(tier)
        all_tiles = [TilePosition(r, c) for r in range(size) for c in range(size)]
        # Uniform subset; clustering is allowed.
        picked = self._rng.shuffled(all_tiles)[: pattern_size_for(tier)]
        logger.debug("spatial challenge tier=%s grid=%d tiles=%d", tier.value, size, len(picked))
        return SpatialChallenge(tier=tier, grid_size=size, reveal_order=tuple(picked))

    def validate(self, *, challenge: object, response: object) -> ValidationResult:
        if not isinstance(challenge, SpatialChallenge):
            raise TypeError(f"expected SpatialChallenge, got {type(challenge).__name__}")
        return validate_pattern(pattern=challenge.pattern, selected=response)  # type: ignore[arg-type]


def validate_pattern(*, pattern: Iterable[TilePosition], selected: Iterable[TilePosition]) -> ValidationResult:
    return validate_selection(target=pattern, selected=selected)


def pattern_score(result: ValidationResult) -> float:
    """Stricter display score: recall minus 0.1 per wrong tile, clamped to [0, 1].

    Scoring and levelling use ``result.accuracy``; this is for the results panel.
    """

    if result.total == 0:
        return 0.0
    return clamp01(result.correct / result.total - FALSE_POSITIVE_PENALTY * result.false_positives)


def is_adjacent_to(tile: TilePosition, tiles: Iterable[TilePosition]) -> bool:
    """True when any other tile touches ``tile`` (diagonals included)."""

    for other in tiles:
        dr = abs(tile.row - other.row)
        dc = abs(tile.col - other.col)
        if dr <= 1 and dc <= 1 and (dr + dc) > 0:
            return True
    return False


def build_spatial_game(*, seed: int) -> SpatialMemoryGame:
    return SpatialMemoryGame(SeededRng(seed))
