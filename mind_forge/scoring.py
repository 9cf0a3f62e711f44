from __future__ import annotations

import math

from .difficulty import DifficultyTier, config_for
from .memory_core import ValidationResult, clamp, clamp01, ratio, round_half_up

BASE_POINTS = 100

MIN_TIME_BONUS = 0.5
MAX_TIME_BONUS = 2.0

# Round accuracy at or above this counts as a success for tier progression.
SUCCESS_ACCURACY = 0.8

# (min accuracy, grade, feedback), highest first. Anything below the last row is an F.
GRADE_TABLE: tuple[tuple[float, str, str], ...] = (
    (0.95, "S", "Outstanding! Perfect memory!"),
    (0.90, "A", "Excellent work!"),
    (0.80, "B", "Great job!"),
    (0.70, "C", "Good effort!"),
    (0.60, "D", "Keep practicing!"),
)
FAIL_GRADE = "F"
FAIL_FEEDBACK = "Don't give up, try again!"


def time_bonus(time_taken_s: float, time_limit_s: float) -> float:
    """Speed multiplier in [0.5, 2.0].

    Finishing instantly approaches 2x; finishing at the limit gives 1x.
    A timeout, a zero or negative time, or NaN all get the 0.5x floor.
    """

    if time_limit_s > 0 and 0 < time_taken_s <= time_limit_s:
        return clamp(2.0 - time_taken_s / time_limit_s, MIN_TIME_BONUS, MAX_TIME_BONUS)
    return MIN_TIME_BONUS


def calculate_score(
    *,
    tier: DifficultyTier,
    accuracy: float,
    time_taken_s: float,
    time_limit_s: float | None = None,
) -> int:
    """score = round_half_up(100 * multiplier * accuracy * time_bonus)."""

    cfg = config_for(tier)
    limit = float(cfg.time_limit_s if time_limit_s is None else time_limit_s)
    acc = clamp01(accuracy) if math.isfinite(accuracy) else 0.0
    raw = BASE_POINTS * cfg.multiplier * acc * time_bonus(time_taken_s, limit)
    return round_half_up(raw)


def score_validation(*, tier: DifficultyTier, result: ValidationResult, time_taken_s: float) -> int:
    return calculate_score(tier=tier, accuracy=result.accuracy, time_taken_s=time_taken_s)


def accuracy_from_counts(correct: int, total: int) -> float:
    return ratio(correct, total)


def is_success(accuracy: float) -> bool:
    return accuracy >= SUCCESS_ACCURACY


def grade_for(accuracy: float) -> str:
    for threshold, grade, _ in GRADE_TABLE:
        if accuracy >= threshold:
            return grade
    return FAIL_GRADE


def feedback_for(accuracy: float) -> str:
    for threshold, _, feedback in GRADE_TABLE:
        if accuracy >= threshold:
            return feedback
    return FAIL_FEEDBACK
