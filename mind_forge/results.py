from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from .difficulty import DifficultyTier
from .memory_core import GameMode, ValidationResult
from .scoring import feedback_for, grade_for, is_success, score_validation

LEVEL_DOWN_ACCURACY = 0.5


@dataclass(frozen=True, slots=True)
class RoundResult:
    """Outcome of one completed round, ready for the results panel."""

    mode: GameMode
    tier: DifficultyTier
    score: int
    accuracy: float
    time_taken_s: float
    correct: int
    total: int
    success: bool
    grade: str
    feedback: str
    validation: ValidationResult
    completed_at: datetime

    @property
    def accuracy_percentage(self) -> str:
        return f"{self.accuracy * 100.0:.1f}%"

    @property
    def should_level_up(self) -> bool:
        return self.success

    @property
    def should_level_down(self) -> bool:
        return self.accuracy < LEVEL_DOWN_ACCURACY


def round_result_from_validation(
    *,
    mode: GameMode,
    tier: DifficultyTier,
    validation: ValidationResult,
    time_taken_s: float,
    completed_at: datetime | None = None,
) -> RoundResult:
    """Score a validated response and bundle everything the UI shows."""

    acc = float(validation.accuracy)
    return RoundResult(
        mode=mode,
        tier=tier,
        score=score_validation(tier=tier, result=validation, time_taken_s=time_taken_s),
        accuracy=acc,
        time_taken_s=float(time_taken_s),
        correct=int(validation.correct),
        total=int(validation.total),
        success=is_success(acc),
        grade=grade_for(acc),
        feedback=feedback_for(acc),
        validation=validation,
        completed_at=completed_at or datetime.now(timezone.utc),
    )
