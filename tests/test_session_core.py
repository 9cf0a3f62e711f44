from __future__ import annotations

import dataclasses

import pytest

from mind_forge.difficulty import DifficultyTier
from mind_forge.session import RECENT_SCORES_LIMIT, SessionState, new_session


def test_new_session_starts_at_beginner_with_zero_counters() -> None:
    s = new_session()
    assert s.tier is DifficultyTier.BEGINNER
    assert (s.cumulative_score, s.consecutive_successes, s.consecutive_failures) == (0, 0, 0)
    assert s.recent_scores == ()
    assert s.average_score == 0.0


def test_record_result_returns_new_value_and_leaves_old_untouched() -> None:
    s0 = new_session()
    s1 = s0.record_result(score=120, success=True)

    assert s0 == SessionState()
    assert s1 is not s0
    assert s1.cumulative_score == 120
    with pytest.raises(dataclasses.FrozenInstanceError):
        s1.cumulative_score = 5  # type: ignore[misc]


def test_three_successes_promote_beginner_to_intermediate_on_the_third() -> None:
    s = new_session()
    s = s.record_result(score=100, success=True)
    s = s.record_result(score=100, success=True)
    assert s.tier is DifficultyTier.BEGINNER
    s = s.record_result(score=100, success=True)
    assert s.tier is DifficultyTier.INTERMEDIATE


def test_two_failures_demote_intermediate_to_beginner_on_the_second() -> None:
    s = SessionState(tier=DifficultyTier.INTERMEDIATE)
    s = s.record_result(score=10, success=False)
    assert s.tier is DifficultyTier.INTERMEDIATE
    s = s.record_result(score=10, success=False)
    assert s.tier is DifficultyTier.BEGINNER


def test_streak_resets_on_promotion_so_next_promotion_needs_three_more() -> None:
    s = new_session()
    for _ in range(3):
        s = s.record_result(score=100, success=True)
    assert s.tier is DifficultyTier.INTERMEDIATE
    assert s.consecutive_successes == 0

    s = s.record_result(score=100, success=True)
    assert s.tier is DifficultyTier.INTERMEDIATE
    s = s.record_result(score=100, success=True)
    assert s.tier is DifficultyTier.INTERMEDIATE
    s = s.record_result(score=100, success=True)
    assert s.tier is DifficultyTier.ADVANCED


def test_failure_streak_resets_on_demotion() -> None:
    s = SessionState(tier=DifficultyTier.EXPERT)
    s = s.record_result(score=0, success=False)
    s = s.record_result(score=0, success=False)
    assert s.tier is DifficultyTier.ADVANCED
    assert s.consecutive_failures == 0
    s = s.record_result(score=0, success=False)
    assert s.tier is DifficultyTier.ADVANCED


def test_success_resets_failures_and_failure_resets_successes() -> None:
    s = SessionState(tier=DifficultyTier.INTERMEDIATE)
    s = s.record_result(score=0, success=False)
    s = s.record_result(score=90, success=True)
    assert (s.consecutive_successes, s.consecutive_failures) == (1, 0)
    s = s.record_result(score=0, success=False)
    assert (s.consecutive_successes, s.consecutive_failures) == (0, 1)
    assert s.tier is DifficultyTier.INTERMEDIATE


def test_tiers_saturate_at_expert_and_beginner() -> None:
    top = SessionState(tier=DifficultyTier.EXPERT)
    for _ in range(5):
        top = top.record_result(score=250, success=True)
    assert top.tier is DifficultyTier.EXPERT
    assert top.consecutive_successes == 5

    bottom = new_session()
    for _ in range(4):
        bottom = bottom.record_result(score=0, success=False)
    assert bottom.tier is DifficultyTier.BEGINNER
    assert bottom.consecutive_failures == 4


def test_recent_scores_keep_the_last_ten_in_order() -> None:
    s = new_session()
    for i in range(1, 13):
        s = s.record_result(score=i, success=i % 2 == 0)
        assert len(s.recent_scores) <= RECENT_SCORES_LIMIT

    assert s.recent_scores == tuple(range(3, 13))
    assert s.cumulative_score == sum(range(1, 13))
    assert s.average_score == pytest.approx(sum(range(3, 13)) / 10)


def test_cumulative_score_adds_even_on_failure() -> None:
    s = new_session().record_result(score=37, success=False)
    assert s.cumulative_score == 37
    assert s.recent_scores == (37,)
