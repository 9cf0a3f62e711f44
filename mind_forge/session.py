from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from .difficulty import DifficultyTier, next_tier, previous_tier

logger = logging.getLogger(__name__)

RECENT_SCORES_LIMIT = 10
PROMOTE_AFTER_SUCCESSES = 3
DEMOTE_AFTER_FAILURES = 2


@dataclass(frozen=True, slots=True)
class SessionState:
    """Cumulative progress for one play session.

    Immutable: ``record_result`` is the only transition and returns a new
    state. Both streak counters restart from zero whenever the tier changes,
    so a promotion needs three fresh successes at the new tier.
    """

    tier: DifficultyTier = DifficultyTier.BEGINNER
    cumulative_score: int = 0
    consecutive_successes: int = 0
    consecutive_failures: int = 0
    recent_scores: tuple[int, ...] = ()

    @property
    def average_score(self) -> float:
        if not self.recent_scores:
            return 0.0
        return sum(self.recent_scores) / len(self.recent_scores)

    def next_tier_after(self, success: bool) -> DifficultyTier:
        if success:
            if self.consecutive_successes + 1 >= PROMOTE_AFTER_SUCCESSES:
                return next_tier(self.tier)
        elif self.consecutive_failures + 1 >= DEMOTE_AFTER_FAILURES:
            return previous_tier(self.tier)
        return self.tier

    def record_result(self, *, score: int, success: bool) -> "SessionState":
        scores = (self.recent_scores + (int(score),))[-RECENT_SCORES_LIMIT:]
        successes = self.consecutive_successes + 1 if success else 0
        failures = 0 if success else self.consecutive_failures + 1

        tier = self.next_tier_after(success)
        if tier is not self.tier:
            logger.info(
                "tier %s -> %s after %d %s",
                self.tier.value,
                tier.value,
                successes if success else failures,
                "successes" if success else "failures",
            )
            successes = 0
            failures = 0

        return replace(
            self,
            tier=tier,
            cumulative_score=self.cumulative_score + int(score),
            consecutive_successes=successes,
            consecutive_failures=failures,
            recent_scores=scores,
        )


def new_session() -> SessionState:
    return SessionState()
