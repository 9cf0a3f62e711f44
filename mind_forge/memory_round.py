from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from .clock import Clock
from .difficulty import DifficultyTier, config_for
from .memory_core import Challenge, GameMode, MemoryGame
from .results import RoundResult, round_result_from_validation
from .sequence_memory import SequenceChallenge, build_sequence_game
from .session import SessionState
from .spatial_memory import SpatialChallenge, build_spatial_game, pattern_score
from .word_memory import WordChallenge, build_word_game

logger = logging.getLogger(__name__)


class RoundPhase(StrEnum):
    READY = "ready"
    SHOWING = "showing"
    INPUT = "input"
    RESULT = "result"


@dataclass(frozen=True, slots=True)
class RoundPacing:
    reveal_step_s: float  # one element per step; 0.0 shows everything at once
    settle_s: float  # blank pause between the reveal and the input phase


DEFAULT_PACING: dict[GameMode, RoundPacing] = {
    GameMode.SEQUENCE: RoundPacing(reveal_step_s=0.8, settle_s=0.5),
    GameMode.SPATIAL: RoundPacing(reveal_step_s=0.6, settle_s=0.8),
    GameMode.WORD: RoundPacing(reveal_step_s=0.0, settle_s=0.5),
}

TITLES: dict[GameMode, str] = {
    GameMode.SEQUENCE: "Sequence Memory",
    GameMode.SPATIAL: "Spatial Memory",
    GameMode.WORD: "Word Memory",
}


@dataclass(frozen=True, slots=True)
class RoundSnapshot:
    """View model for the UI (pure data)."""

    title: str
    mode: GameMode
    phase: RoundPhase
    tier: DifficultyTier
    tier_name: str
    prompt: str
    challenge: Challenge | None
    revealed: tuple[object, ...]
    choices: tuple[object, ...]
    response: tuple[object, ...]
    elapsed_s: float | None
    time_limit_s: int
    cumulative_score: int
    round_index: int
    result: RoundResult | None = None


class MemoryRound:
    """Round harness: ready -> showing -> input -> result, then deal again.

    - Deterministic: challenges come from the game's seeded RNG.
    - Time is entirely via injected Clock.
    - The session value is replaced (never mutated) after every round.
    """

    def __init__(
        self,
        *,
        game: MemoryGame,
        clock: Clock,
        session: SessionState | None = None,
        pacing: RoundPacing | None = None,
    ) -> None:
        pace = pacing or DEFAULT_PACING[game.mode]
        if pace.reveal_step_s < 0.0:
            raise ValueError("reveal_step_s must be >= 0")
        if pace.settle_s < 0.0:
            raise ValueError("settle_s must be >= 0")

        self._game = game
        self._clock = clock
        self._pacing = pace
        self._session = session or SessionState()

        self._phase = RoundPhase.READY
        self._challenge: Challenge = game.generate(tier=self._session.tier)
        self._response: list[object] = []
        self._showing_started_at_s: float | None = None
        self._input_started_at_s: float | None = None
        self._result: RoundResult | None = None
        self._results: list[RoundResult] = []

    @property
    def mode(self) -> GameMode:
        return self._game.mode

    @property
    def title(self) -> str:
        return TITLES[self._game.mode]

    @property
    def phase(self) -> RoundPhase:
        return self._phase

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def challenge(self) -> Challenge:
        return self._challenge

    @property
    def last_result(self) -> RoundResult | None:
        return self._result

    def results(self) -> list[RoundResult]:
        return list(self._results)

    def start(self) -> bool:
        if self._phase is not RoundPhase.READY:
            return False
        self._phase = RoundPhase.SHOWING
        self._showing_started_at_s = self._clock.now()
        return True

    def reveal_duration_s(self) -> float:
        c = self._challenge
        if isinstance(c, WordChallenge):
            return float(c.display_time_s)
        return self._pacing.reveal_step_s * len(self._targets())

    def update(self) -> None:
        if self._phase is not RoundPhase.SHOWING:
            return
        assert self._showing_started_at_s is not None
        elapsed = self._clock.now() - self._showing_started_at_s
        if elapsed >= self.reveal_duration_s() + self._pacing.settle_s:
            self._phase = RoundPhase.INPUT
            self._input_started_at_s = self._clock.now()

    def elapsed_s(self) -> float | None:
        """Answer time so far (frozen once the round is scored)."""

        if self._phase is RoundPhase.RESULT and self._result is not None:
            return self._result.time_taken_s
        if self._phase is not RoundPhase.INPUT:
            return None
        assert self._input_started_at_s is not None
        return max(0.0, self._clock.now() - self._input_started_at_s)

    def choices(self) -> tuple[object, ...]:
        c = self._challenge
        if isinstance(c, SequenceChallenge):
            return tuple(c.choices)
        if isinstance(c, SpatialChallenge):
            return tuple(c.cells)
        assert isinstance(c, WordChallenge)
        return tuple(c.choices)

    def response(self) -> tuple[object, ...]:
        return tuple(self._response)

    def select(self, choice: object) -> bool:
        """Pick a token (appends) or a tile/word (toggles). Returns True if accepted."""

        if self._phase is not RoundPhase.INPUT:
            return False
        if choice not in self.choices():
            return False

        if self.mode is GameMode.SEQUENCE:
            self._response.append(choice)
            if len(self._response) >= len(self._targets()):
                self.submit()
            return True

        if choice in self._response:
            self._response.remove(choice)
        else:
            self._response.append(choice)
        return True

    def undo(self) -> bool:
        if self._phase is not RoundPhase.INPUT or not self._response:
            return False
        self._response.pop()
        return True

    def submit(self) -> bool:
        """Validate and score the response. Returns True if accepted."""

        if self._phase is not RoundPhase.INPUT:
            return False
        if not self._response:
            return False

        time_taken = self.elapsed_s()
        assert time_taken is not None

        validation = self._game.validate(challenge=self._challenge, response=tuple(self._response))
        result = round_result_from_validation(
            mode=self.mode,
            tier=self._challenge.tier,
            validation=validation,
            time_taken_s=time_taken,
        )
        self._session = self._session.record_result(score=result.score, success=result.success)
        self._result = result
        self._results.append(result)
        self._phase = RoundPhase.RESULT

        logger.debug(
            "%s round scored: correct=%d/%d score=%d grade=%s t=%.2fs",
            self.mode.value,
            result.correct,
            result.total,
            result.score,
            result.grade,
            time_taken,
        )
        return True

    def next_round(self) -> bool:
        if self._phase is not RoundPhase.RESULT:
            return False
        self._challenge = self._game.generate(tier=self._session.tier)
        self._response = []
        self._showing_started_at_s = None
        self._input_started_at_s = None
        self._result = None
        self._phase = RoundPhase.READY
        return True

    def snapshot(self) -> RoundSnapshot:
        cfg = config_for(self._challenge.tier)
        return RoundSnapshot(
            title=self.title,
            mode=self.mode,
            phase=self._phase,
            tier=self._challenge.tier,
            tier_name=cfg.display_name,
            prompt=self._prompt_text(),
            challenge=self._challenge,
            revealed=self._revealed(),
            choices=self.choices() if self._phase is RoundPhase.INPUT else (),
            response=self.response(),
            elapsed_s=self.elapsed_s(),
            time_limit_s=cfg.time_limit_s,
            cumulative_score=self._session.cumulative_score,
            round_index=len(self._results),
            result=self._result,
        )

    def _targets(self) -> tuple[object, ...]:
        c = self._challenge
        if isinstance(c, SequenceChallenge):
            return tuple(c.tokens)
        if isinstance(c, SpatialChallenge):
            return tuple(c.reveal_order)
        assert isinstance(c, WordChallenge)
        return tuple(c.targets)

    def _revealed(self) -> tuple[object, ...]:
        if self._phase is not RoundPhase.SHOWING:
            return ()
        assert self._showing_started_at_s is not None
        targets = self._targets()
        elapsed = self._clock.now() - self._showing_started_at_s
        if elapsed >= self.reveal_duration_s():
            return ()
        step = self._pacing.reveal_step_s
        if step <= 0.0:
            return targets
        shown = int(elapsed // step) + 1
        # Cumulative so repeated neighbours stay distinct.
        return targets[:shown]

    def _prompt_text(self) -> str:
        cfg = config_for(self._challenge.tier)
        if self._phase is RoundPhase.READY:
            return "\n".join(
                [
                    self.title,
                    "",
                    f"Level: {cfg.display_name}",
                    f"Score: {self._session.cumulative_score}",
                    "",
                    "Press Enter to start.",
                ]
            )
        if self._phase is RoundPhase.SHOWING:
            if self.mode is GameMode.SEQUENCE:
                return "MEMORIZE THE SEQUENCE"
            if self.mode is GameMode.SPATIAL:
                return "MEMORIZE THE PATTERN"
            return "MEMORIZE THESE WORDS"
        if self._phase is RoundPhase.INPUT:
            if self.mode is GameMode.SEQUENCE:
                return f"Repeat the sequence ({len(self._response)}/{len(self._targets())})"
            if self.mode is GameMode.SPATIAL:
                return "Select every tile that lit up, then press Enter."
            return "Select the words you saw, then press Enter."

        r = self._result
        assert r is not None
        lines = [
            "Results",
            "",
            f"Grade:     {r.grade}",
            f"Score:     {r.score}",
            f"Correct:   {r.correct}/{r.total}",
            f"Accuracy:  {r.accuracy_percentage}",
            f"Time:      {r.time_taken_s:.1f}s",
        ]
        if self.mode is GameMode.SPATIAL:
            lines.append(f"Pattern:   {pattern_score(r.validation) * 100.0:.0f}%")
        if self.mode is GameMode.WORD:
            lines.append(f"Precision: {r.validation.precision * 100.0:.1f}%")
        lines.extend(["", r.feedback, "", "Press Enter for the next round."])
        return "\n".join(lines)


def build_game(mode: GameMode, *, seed: int) -> MemoryGame:
    if mode is GameMode.SEQUENCE:
        return build_sequence_game(seed=seed)
    if mode is GameMode.SPATIAL:
        return build_spatial_game(seed=seed)
    return build_word_game(seed=seed)


def build_memory_round(
    *,
    mode: GameMode,
    clock: Clock,
    seed: int,
    session: SessionState | None = None,
    pacing: RoundPacing | None = None,
) -> MemoryRound:
    return MemoryRound(game=build_game(mode, seed=seed), clock=clock, session=session, pacing=pacing)
