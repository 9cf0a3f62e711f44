from __future__ import annotations

from mind_forge.difficulty import (
    TIER_ORDER,
    DifficultyTier,
    config_for,
    next_tier,
    previous_tier,
)


def test_every_tier_has_exactly_one_config() -> None:
    for tier in DifficultyTier:
        cfg = config_for(tier)
        assert cfg.tier is tier
        assert config_for(tier) is cfg


def test_table_values_match_published_difficulty_table() -> None:
    rows = [
        (c.element_count, c.time_limit_s, c.multiplier, c.display_name)
        for c in (config_for(t) for t in TIER_ORDER)
    ]
    assert rows == [
        (4, 30, 1.0, "Beginner"),
        (6, 25, 1.5, "Intermediate"),
        (8, 20, 2.0, "Advanced"),
        (10, 15, 2.5, "Expert"),
    ]


def test_multipliers_strictly_increase_and_time_limits_never_increase() -> None:
    cfgs = [config_for(t) for t in TIER_ORDER]
    for easier, harder in zip(cfgs, cfgs[1:]):
        assert harder.multiplier > easier.multiplier
        assert harder.time_limit_s <= easier.time_limit_s


def test_tier_steps_saturate_at_both_ends() -> None:
    assert next_tier(DifficultyTier.BEGINNER) is DifficultyTier.INTERMEDIATE
    assert next_tier(DifficultyTier.EXPERT) is DifficultyTier.EXPERT
    assert previous_tier(DifficultyTier.ADVANCED) is DifficultyTier.INTERMEDIATE
    assert previous_tier(DifficultyTier.BEGINNER) is DifficultyTier.BEGINNER
