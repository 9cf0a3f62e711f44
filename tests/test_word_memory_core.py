from __future__ import annotations

import pytest

from mind_forge.difficulty import DifficultyTier
from mind_forge.memory_core import SeededRng
from mind_forge.sequence_memory import build_sequence_game
from mind_forge.word_memory import (
    WordMemoryGame,
    build_word_game,
    difficulty_stats,
    display_time_for,
    distractor_count_for,
    validate_words,
    word_count_for,
)
from mind_forge.word_pool import WORD_POOL, word_pool_size


def test_pool_is_several_hundred_distinct_lowercase_words() -> None:
    assert word_pool_size() == len(WORD_POOL) >= 300
    assert len(set(WORD_POOL)) == len(WORD_POOL)
    assert all(w.isalpha() and w == w.lower() for w in WORD_POOL)


def test_counts_and_display_times_per_tier() -> None:
    tiers = list(DifficultyTier)
    assert [word_count_for(t) for t in tiers] == [5, 8, 12, 15]
    assert [distractor_count_for(t) for t in tiers] == [5, 12, 24, 30]
    assert [display_time_for(t) for t in tiers] == [15, 16, 24, 15]

    stats = difficulty_stats(DifficultyTier.INTERMEDIATE)
    assert stats.time_per_word_s == 2
    assert stats.total_choices == 20


def test_generator_determinism_same_seed_same_challenges() -> None:
    g1 = build_word_game(seed=777)
    g2 = build_word_game(seed=777)
    assert [g1.generate(tier=t) for t in DifficultyTier] == [g2.generate(tier=t) for t in DifficultyTier]


@pytest.mark.parametrize("tier", list(DifficultyTier))
def test_targets_and_distractors_are_disjoint_and_form_the_pool(tier: DifficultyTier) -> None:
    game = build_word_game(seed=31)
    for _ in range(50):
        c = game.generate(tier=tier)
        assert len(c.targets) == len(set(c.targets)) == word_count_for(tier)
        assert len(c.distractors) == len(set(c.distractors)) == distractor_count_for(tier)
        assert not set(c.targets) & set(c.distractors)
        assert len(c.choices) == len(set(c.choices))
        assert set(c.choices) == set(c.targets) | set(c.distractors)
        assert c.display_time_s == display_time_for(tier)


def test_pool_size_reports_distinct_words() -> None:
    assert build_word_game(seed=1).pool_size == len(WORD_POOL)

    pool = [f"word{i:02d}" for i in range(45)]
    game = WordMemoryGame(SeededRng(3), pool=pool + pool[:10])
    assert game.pool_size == 45


def test_hard_tiers_prefer_similar_length_distractors() -> None:
    game = build_word_game(seed=17)
    for tier in (DifficultyTier.ADVANCED, DifficultyTier.EXPERT):
        for _ in range(30):
            c = game.generate(tier=tier)
            lengths = {len(w) for w in c.targets}
            assert all(any(abs(len(d) - n) <= 2 for n in lengths) for d in c.distractors)


def test_falls_back_to_full_pool_when_similar_lengths_run_out() -> None:
    short = [f"{a}{b}{a}{b}" for a, b in zip("abcdefghijklmnopqrst", "tsrqponmlkjihgfedcba")]
    long = [f"{ch * 12}" for ch in "abcdefghijklmnopqrstuvwxy"]
    game = WordMemoryGame(SeededRng(1), pool=short + long)

    targets = short[:15]
    distractors = game.select_distractors(targets=targets, tier=DifficultyTier.EXPERT)

    assert len(distractors) == 30
    assert not set(distractors) & set(targets)
    assert any(len(d) == 12 for d in distractors)


def test_pool_too_small_is_rejected() -> None:
    with pytest.raises(ValueError):
        WordMemoryGame(SeededRng(1), pool=["alpha", "beta", "gamma"])


def test_validation_reports_recall_and_precision() -> None:
    r = validate_words(targets=["book", "tree", "fish", "door"], selected=["book", "tree", "apple"])
    assert r.correct == 2
    assert r.false_positives == 1
    assert r.false_negatives == 2
    assert r.accuracy == pytest.approx(0.5)
    assert r.precision == pytest.approx(2 / 3)


def test_exact_selection_is_perfect_and_duplicates_count_once() -> None:
    game = build_word_game(seed=9)
    c = game.generate(tier=DifficultyTier.EXPERT)
    r = game.validate(challenge=c, response=list(c.targets) + [c.targets[0]])
    assert r.is_perfect
    assert r.false_positives == r.false_negatives == 0
    assert r.precision == 1.0


def test_validate_rejects_a_challenge_from_another_game() -> None:
    game = build_word_game(seed=4)
    other = build_sequence_game(seed=4).generate(tier=DifficultyTier.BEGINNER)
    with pytest.raises(TypeError):
        game.validate(challenge=other, response=["book"])
