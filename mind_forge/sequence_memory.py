from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from .difficulty import DifficultyTier, config_for
from .memory_core import GameMode, SeededRng, ValidationResult, ratio

logger = logging.getLogger(__name__)


class ColorToken(StrEnum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"
    ORANGE = "orange"
    PINK = "pink"
    TEAL = "teal"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def rgb(self) -> tuple[int, int, int]:
        return COLOR_RGB[self]


COLOR_ALPHABET: tuple[ColorToken, ...] = tuple(ColorToken)

# Material palette primaries, used by the UI only.
COLOR_RGB: dict[ColorToken, tuple[int, int, int]] = {
    ColorToken.RED: (244, 67, 54),
    ColorToken.BLUE: (33, 150, 243),
    ColorToken.GREEN: (76, 175, 80),
    ColorToken.YELLOW: (255, 235, 59),
    ColorToken.PURPLE: (156, 39, 176),
    ColorToken.ORANGE: (255, 152, 0),
    ColorToken.PINK: (233, 30, 99),
    ColorToken.TEAL: (0, 150, 136),
}


@dataclass(frozen=True, slots=True)
class SequenceConfig:
    min_choices: int = 6
    max_run: int = 2  # a token may repeat at most this many times in a row


@dataclass(frozen=True, slots=True)
class SequenceChallenge:
    tier: DifficultyTier
    tokens: tuple[ColorToken, ...]
    choices: tuple[ColorToken, ...]

    @property
    def mode(self) -> GameMode:
        return GameMode.SEQUENCE

    def __len__(self) -> int:
        return len(self.tokens)


class SequenceMemoryGame:
    """Color-sequence recall: reproduce the tokens in the order shown."""

    def __init__(self, rng: SeededRng, *, config: SequenceConfig | None = None) -> None:
        cfg = config or SequenceConfig()
        if not (1 <= cfg.min_choices <= len(COLOR_ALPHABET)):
            raise ValueError(f"min_choices must be in [1, {len(COLOR_ALPHABET)}]")
        if cfg.max_run < 1:
            raise ValueError("max_run must be >= 1")
        self._rng = rng
        self._cfg = cfg

    @property
    def mode(self) -> GameMode:
        return GameMode.SEQUENCE

    def generate(self, *, tier: DifficultyTier) -> SequenceChallenge:
        tokens = self.generate_sequence(length=config_for(tier).element_count)
        choices = self.choices_for(tokens)
        logger.debug("sequence challenge tier=%s tokens=%s", tier.value, [t.value for t in tokens])
        return SequenceChallenge(tier=tier, tokens=tokens, choices=choices)

    def generate_sequence(self, *, length: int) -> tuple[ColorToken, ...]:
        run = self._cfg.max_run
        out: list[ColorToken] = []
        for i in range(length):
            token = self._rng.choice(COLOR_ALPHABET)
            if i >= run and len(set(out[i - run :])) == 1:
                # The last `run` tokens are identical; a third copy is not allowed.
                while token == out[i - 1]:
                    token = self._rng.choice(COLOR_ALPHABET)
            out.append(token)
        return tuple(out)

    def choices_for(self, tokens: Sequence[ColorToken]) -> tuple[ColorToken, ...]:
        """Every token of the sequence plus distractors, shuffled."""

        present = list(dict.fromkeys(tokens))
        missing = self._cfg.min_choices - len(present)
        if missing > 0:
            spare = [c for c in COLOR_ALPHABET if c not in present]
            present.extend(self._rng.sample(spare, missing))
        return tuple(self._rng.shuffled(present))

    def validate(self, *, challenge: object, response: object) -> ValidationResult:
        if not isinstance(challenge, SequenceChallenge):
            raise TypeError(f"expected SequenceChallenge, got {type(challenge).__name__}")
        return validate_sequence(target=challenge.tokens, response=tuple(response))  # type: ignore[arg-type]


def validate_sequence(*, target: Sequence[ColorToken], response: Sequence[ColorToken]) -> ValidationResult:
    """Positional comparison.

    Target positions not covered by a shorter response count as misses.
    Response entries past the end of the target count as false positives.
    """

    total = len(target)
    positions = [i < len(response) and response[i] == target[i] for i in range(total)]
    correct = sum(1 for ok in positions if ok)

    return ValidationResult(
        correct=correct,
        false_positives=len(response) - correct,
        false_negatives=total - correct,
        total=total,
        accuracy=ratio(correct, total),
        precision=ratio(correct, len(response)),
        is_perfect=correct == total and len(response) == total,
        position_results=tuple(positions),
    )


def build_sequence_game(*, seed: int, config: SequenceConfig | None = None) -> SequenceMemoryGame:
    return SequenceMemoryGame(SeededRng(seed), config=config)
