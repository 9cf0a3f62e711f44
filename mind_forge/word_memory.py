from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .difficulty import DifficultyTier
from .memory_core import GameMode, SeededRng, ValidationResult, round_half_up, validate_selection
from .word_pool import WORD_POOL

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WordTierSettings:
    word_count: int
    distractor_ratio: float
    seconds_per_word: int
    similar_length_distractors: bool = False


WORD_SETTINGS: dict[DifficultyTier, WordTierSettings] = {
    DifficultyTier.BEGINNER: WordTierSettings(word_count=5, distractor_ratio=1.0, seconds_per_word=3),
    DifficultyTier.INTERMEDIATE: WordTierSettings(word_count=8, distractor_ratio=1.5, seconds_per_word=2),
    DifficultyTier.ADVANCED: WordTierSettings(
        word_count=12, distractor_ratio=2.0, seconds_per_word=2, similar_length_distractors=True
    ),
    DifficultyTier.EXPERT: WordTierSettings(
        word_count=15, distractor_ratio=2.0, seconds_per_word=1, similar_length_distractors=True
    ),
}

# Max length difference for a distractor to count as "similar" to a target.
SIMILAR_LENGTH_DELTA = 2


def word_count_for(tier: DifficultyTier) -> int:
    return WORD_SETTINGS[tier].word_count


def distractor_count_for(tier: DifficultyTier) -> int:
    s = WORD_SETTINGS[tier]
    return round_half_up(s.word_count * s.distractor_ratio)


def display_time_for(tier: DifficultyTier) -> int:
    s = WORD_SETTINGS[tier]
    return s.word_count * s.seconds_per_word


@dataclass(frozen=True, slots=True)
class WordDifficultyStats:
    word_count: int
    display_time_s: int
    time_per_word_s: int
    distractor_count: int
    total_choices: int


def difficulty_stats(tier: DifficultyTier) -> WordDifficultyStats:
    words = word_count_for(tier)
    distractors = distractor_count_for(tier)
    return WordDifficultyStats(
        word_count=words,
        display_time_s=display_time_for(tier),
        time_per_word_s=WORD_SETTINGS[tier].seconds_per_word,
        distractor_count=distractors,
        total_choices=words + distractors,
    )


@dataclass(frozen=True, slots=True)
class WordChallenge:
    tier: DifficultyTier
    targets: tuple[str, ...]
    distractors: tuple[str, ...]
    choices: tuple[str, ...]  # shuffled once per round
    display_time_s: int

    @property
    def mode(self) -> GameMode:
        return GameMode.WORD


class WordMemoryGame:
    """Word recall: memorise a list, then pick those words out of a larger pool."""

    def __init__(self, rng: SeededRng, *, pool: Sequence[str] = WORD_POOL) -> None:
        words = tuple(dict.fromkeys(pool))
        biggest = max(word_count_for(t) + distractor_count_for(t) for t in DifficultyTier)
        if len(words) < biggest:
            raise ValueError(f"word pool must hold at least {biggest} distinct words")
        self._rng = rng
        self._pool = words

    @property
    def mode(self) -> GameMode:
        return GameMode.WORD

    @property
    def pool_size(self) -> int:
        return len(self._pool)

    def generate(self, *, tier: DifficultyTier) -> WordChallenge:
        targets = self.select_targets(tier=tier)
        distractors = self.select_distractors(targets=targets, tier=tier)
        choices = tuple(self._rng.shuffled(targets + distractors))
        logger.debug("word challenge tier=%s targets=%s", tier.value, list(targets))
        return WordChallenge(
            tier=tier,
            targets=targets,
            distractors=distractors,
            choices=choices,
            display_time_s=display_time_for(tier),
        )

    def select_targets(self, *, tier: DifficultyTier) -> tuple[str, ...]:
        return tuple(self._rng.sample(self._pool, word_count_for(tier)))

    def select_distractors(self, *, targets: Sequence[str], tier: DifficultyTier) -> tuple[str, ...]:
        count = distractor_count_for(tier)
        target_set = set(targets)
        candidates = [w for w in self._pool if w not in target_set]

        if WORD_SETTINGS[tier].similar_length_distractors:
            lengths = {len(w) for w in targets}
            similar = [
                w for w in candidates if any(abs(len(w) - n) <= SIMILAR_LENGTH_DELTA for n in lengths)
            ]
            if len(similar) >= count:
                return tuple(self._rng.sample(similar, count))
            logger.debug("only %d similar-length distractors for %d slots; using full pool", len(similar), count)

        return tuple(self._rng.sample(candidates, count))

    def validate(self, *, challenge: object, response: object) -> ValidationResult:
        if not isinstance(challenge, WordChallenge):
            raise TypeError(f"expected WordChallenge, got {type(challenge).__name__}")
        return validate_words(targets=challenge.targets, selected=response)  # type: ignore[arg-type]


def validate_words(*, targets: Iterable[str], selected: Iterable[str]) -> ValidationResult:
    return validate_selection(target=targets, selected=selected)


def build_word_game(*, seed: int, pool: Sequence[str] = WORD_POOL) -> WordMemoryGame:
    return WordMemoryGame(SeededRng(seed), pool=pool)
