from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DifficultyTier(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


TIER_ORDER: tuple[DifficultyTier, ...] = tuple(DifficultyTier)


@dataclass(frozen=True, slots=True)
class DifficultyConfig:
    tier: DifficultyTier
    element_count: int  # items to remember
    time_limit_s: int  # answer window used by the time bonus
    multiplier: float
    display_name: str


_CONFIGS: dict[DifficultyTier, DifficultyConfig] = {
    DifficultyTier.BEGINNER: DifficultyConfig(
        tier=DifficultyTier.BEGINNER,
        element_count=4,
        time_limit_s=30,
        multiplier=1.0,
        display_name="Beginner",
    ),
    DifficultyTier.INTERMEDIATE: DifficultyConfig(
        tier=DifficultyTier.INTERMEDIATE,
        element_count=6,
        time_limit_s=25,
        multiplier=1.5,
        display_name="Intermediate",
    ),
    DifficultyTier.ADVANCED: DifficultyConfig(
        tier=DifficultyTier.ADVANCED,
        element_count=8,
        time_limit_s=20,
        multiplier=2.0,
        display_name="Advanced",
    ),
    DifficultyTier.EXPERT: DifficultyConfig(
        tier=DifficultyTier.EXPERT,
        element_count=10,
        time_limit_s=15,
        multiplier=2.5,
        display_name="Expert",
    ),
}


def config_for(tier: DifficultyTier) -> DifficultyConfig:
    return _CONFIGS[tier]


def tier_index(tier: DifficultyTier) -> int:
    return TIER_ORDER.index(tier)


def next_tier(tier: DifficultyTier) -> DifficultyTier:
    """One tier harder; Expert stays Expert."""

    idx = tier_index(tier)
    return TIER_ORDER[min(idx + 1, len(TIER_ORDER) - 1)]


def previous_tier(tier: DifficultyTier) -> DifficultyTier:
    """One tier easier; Beginner stays Beginner."""

    idx = tier_index(tier)
    return TIER_ORDER[max(idx - 1, 0)]
