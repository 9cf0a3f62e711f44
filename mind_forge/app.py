"""Pygame UI shell for Mind Forge.

Home menu with three memory games:
- Sequence Memory (repeat a flashed colour sequence)
- Spatial Memory (recall which grid tiles lit up)
- Word Memory (pick the shown words out of a larger list)

Deterministic generation/scoring/levelling lives in mind_forge/* (core modules).
"""

from __future__ import annotations

import logging
import os
import random
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

import pygame

from .clock import RealClock
from .memory_core import GameMode
from .memory_round import MemoryRound, RoundPhase, RoundSnapshot, build_memory_round
from .sequence_memory import ColorToken, SequenceChallenge
from .spatial_memory import SpatialChallenge
from .word_memory import WordChallenge

logger = logging.getLogger(__name__)

SEED_ENV = "MIND_FORGE_SEED"

WINDOW_SIZE = (960, 600)
TARGET_FPS = 60

BG = (14, 16, 32)
PANEL = (26, 30, 58)
BORDER = (96, 110, 170)
TEXT = (236, 240, 252)
MUTED = (160, 168, 196)
ACCENT = (255, 202, 40)


class Screen(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def render(self, surface: pygame.Surface) -> None: ...


@dataclass(frozen=True, slots=True)
class MenuItem:
    label: str
    action: Callable[[], None]


class App:
    def __init__(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        self._surface = surface
        self._font = font
        self._screens: list[Screen] = []
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    @property
    def font(self) -> pygame.font.Font:
        return self._font

    def push(self, screen: Screen) -> None:
        self._screens.append(screen)

    def pop(self) -> None:
        # Never pop the root screen; it handles its own quit.
        if len(self._screens) > 1:
            self._screens.pop()

    def quit(self) -> None:
        self._running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
            return
        if not self._screens:
            return
        self._screens[-1].handle_event(event)

    def render(self) -> None:
        if not self._screens:
            return
        self._screens[-1].render(self._surface)


class MenuScreen:
    def __init__(self, app: App, title: str, items: list[MenuItem], *, subtitle: str = "") -> None:
        self._app = app
        self._title = title
        self._subtitle = subtitle
        self._items = items
        self._selected = 0
        self._title_font = pygame.font.Font(None, 56)
        self._item_font = pygame.font.Font(None, 34)
        self._hint_font = pygame.font.Font(None, 22)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key in (pygame.K_UP, pygame.K_w):
            self._move(-1)
        elif event.key in (pygame.K_DOWN, pygame.K_s):
            self._move(1)
        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
            if self._items:
                self._items[self._selected].action()
        elif event.key == pygame.K_ESCAPE:
            self._app.quit()

    def _move(self, delta: int) -> None:
        if not self._items:
            return
        self._selected = (self._selected + delta) % len(self._items)

    def render(self, surface: pygame.Surface) -> None:
        w, h = surface.get_size()
        surface.fill(BG)

        title = self._title_font.render(self._title, True, TEXT)
        surface.blit(title, title.get_rect(center=(w // 2, h // 6)))
        if self._subtitle:
            sub = self._hint_font.render(self._subtitle, True, MUTED)
            surface.blit(sub, sub.get_rect(center=(w // 2, h // 6 + 44)))

        row_w = min(420, w - 80)
        row_h = 48
        y = h // 3
        for idx, item in enumerate(self._items):
            row = pygame.Rect((w - row_w) // 2, y, row_w, row_h)
            selected = idx == self._selected
            pygame.draw.rect(surface, TEXT if selected else PANEL, row, border_radius=8)
            pygame.draw.rect(surface, BORDER, row, 1, border_radius=8)
            label = self._item_font.render(item.label, True, BG if selected else TEXT)
            surface.blit(label, label.get_rect(center=row.center))
            y += row_h + 12

        foot = self._hint_font.render("Up/Down: Move  |  Enter: Select  |  Esc: Quit", True, MUTED)
        surface.blit(foot, foot.get_rect(midbottom=(w // 2, h - 16)))


class MemoryGameScreen:
    """Drives one MemoryRound; the session lives as long as this screen."""

    def __init__(self, app: App, *, round_factory: Callable[[], MemoryRound]) -> None:
        self._app = app
        self._round = round_factory()
        self._cursor = 0
        self._hitboxes: list[tuple[pygame.Rect, object]] = []

        self._small_font = pygame.font.Font(None, 26)
        self._mid_font = pygame.font.Font(None, 36)

    def handle_event(self, event: pygame.event.Event) -> None:
        rnd = self._round
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for rect, choice in self._hitboxes:
                if rect.collidepoint(event.pos):
                    rnd.select(choice)
                    return
            return

        if event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_ESCAPE:
            self._leave()
            return

        phase = rnd.phase
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if phase is RoundPhase.READY:
                rnd.start()
            elif phase is RoundPhase.INPUT:
                rnd.submit()
            elif phase is RoundPhase.RESULT:
                rnd.next_round()
                self._cursor = 0
            return

        if phase is not RoundPhase.INPUT:
            return

        choices = rnd.choices()
        if event.key == pygame.K_BACKSPACE:
            rnd.undo()
        elif event.key == pygame.K_SPACE and choices:
            rnd.select(choices[self._cursor % len(choices)])
        elif event.key in (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN) and choices:
            self._move_cursor(event.key, len(choices))
        else:
            idx = self._index_from_key(event.key)
            if idx is not None and idx < len(choices):
                rnd.select(choices[idx])

    def _leave(self) -> None:
        s = self._round.session
        logger.info(
            "leaving %s: tier=%s score=%d rounds=%d",
            self._round.mode.value,
            s.tier.value,
            s.cumulative_score,
            len(self._round.results()),
        )
        self._app.pop()

    def _columns(self, count: int) -> int:
        c = self._round.challenge
        if isinstance(c, SpatialChallenge):
            return c.grid_size
        if isinstance(c, WordChallenge):
            return 5
        return max(1, count)

    def _move_cursor(self, key: int, count: int) -> None:
        cols = self._columns(count)
        delta = {pygame.K_LEFT: -1, pygame.K_RIGHT: 1, pygame.K_UP: -cols, pygame.K_DOWN: cols}[key]
        self._cursor = (self._cursor + delta) % count

    @staticmethod
    def _index_from_key(key: int) -> int | None:
        digits = (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5, pygame.K_6, pygame.K_7, pygame.K_8, pygame.K_9)
        if key in digits:
            return digits.index(key)
        return None

    def render(self, surface: pygame.Surface) -> None:
        self._round.update()
        snap = self._round.snapshot()
        self._hitboxes = []

        surface.fill(BG)
        self._render_header(surface, snap)

        if snap.phase is RoundPhase.READY or snap.phase is RoundPhase.RESULT:
            self._render_text_block(surface, snap.prompt)
        elif snap.mode is GameMode.SEQUENCE:
            self._render_sequence(surface, snap)
        elif snap.mode is GameMode.SPATIAL:
            self._render_spatial(surface, snap)
        else:
            self._render_words(surface, snap)

        hint = {
            RoundPhase.READY: "Enter: Start  |  Esc: Back",
            RoundPhase.SHOWING: "Watch carefully...",
            RoundPhase.INPUT: "1-9 / Arrows+Space / Click: Pick  |  Backspace: Undo  |  Enter: Submit",
            RoundPhase.RESULT: "Enter: Next round  |  Esc: Back",
        }[snap.phase]
        foot = self._small_font.render(hint, True, MUTED)
        surface.blit(foot, foot.get_rect(midbottom=(surface.get_width() // 2, surface.get_height() - 12)))

    def _render_header(self, surface: pygame.Surface, snap: RoundSnapshot) -> None:
        w = surface.get_width()
        bar = pygame.Rect(0, 0, w, 48)
        pygame.draw.rect(surface, PANEL, bar)
        pygame.draw.line(surface, BORDER, (0, bar.bottom), (w, bar.bottom), 1)

        title = self._mid_font.render(snap.title, True, TEXT)
        surface.blit(title, (20, 12))

        stats = f"Level: {snap.tier_name}   Score: {snap.cumulative_score}"
        if snap.elapsed_s is not None:
            stats += f"   Time: {int(snap.elapsed_s)}s / {snap.time_limit_s}s"
        txt = self._small_font.render(stats, True, ACCENT)
        surface.blit(txt, txt.get_rect(midright=(w - 20, bar.centery)))

    def _render_text_block(self, surface: pygame.Surface, text: str) -> None:
        y = 90
        for line in text.split("\n"):
            txt = self._app.font.render(line, True, TEXT)
            surface.blit(txt, (60, y))
            y += 34

    def _render_prompt(self, surface: pygame.Surface, prompt: str) -> None:
        txt = self._mid_font.render(prompt, True, TEXT)
        surface.blit(txt, txt.get_rect(center=(surface.get_width() // 2, 90)))

    def _render_sequence(self, surface: pygame.Surface, snap: RoundSnapshot) -> None:
        w, h = surface.get_size()
        self._render_prompt(surface, snap.prompt)

        if snap.phase is RoundPhase.SHOWING:
            challenge = snap.challenge
            if not snap.revealed or not isinstance(challenge, SequenceChallenge):
                return
            slots = len(challenge.tokens)
            gap = 12
            size = min(120, (w - 80 - (slots - 1) * gap) // slots)
            x = (w - (slots * size + (slots - 1) * gap)) // 2
            y = h // 2 - size // 2
            newest = len(snap.revealed) - 1
            for idx in range(slots):
                rect = pygame.Rect(x + idx * (size + gap), y, size, size)
                if idx < len(snap.revealed):
                    token = ColorToken(str(snap.revealed[idx]))
                    pygame.draw.rect(surface, token.rgb, rect, border_radius=12)
                    if idx == newest:
                        pygame.draw.rect(surface, TEXT, rect.inflate(8, 8), 3, border_radius=14)
                else:
                    pygame.draw.rect(surface, BORDER, rect, 2, border_radius=12)
            name = ColorToken(str(snap.revealed[newest])).display_name
            label = self._mid_font.render(name, True, TEXT)
            surface.blit(label, label.get_rect(midtop=(w // 2, y + size + 16)))
            return

        size = 80
        gap = 16
        total_w = len(snap.choices) * size + (len(snap.choices) - 1) * gap
        x = (w - total_w) // 2
        y = h // 2 - size
        for idx, choice in enumerate(snap.choices):
            token = ColorToken(str(choice))
            rect = pygame.Rect(x, y, size, size)
            pygame.draw.rect(surface, token.rgb, rect, border_radius=10)
            if idx == self._cursor:
                pygame.draw.rect(surface, TEXT, rect.inflate(8, 8), 3, border_radius=12)
            label = self._small_font.render(str(idx + 1), True, TEXT)
            surface.blit(label, label.get_rect(midtop=(rect.centerx, rect.bottom + 6)))
            self._hitboxes.append((rect, choice))
            x += size + gap

        dot = 28
        x = (w - len(snap.response) * (dot + 8)) // 2
        for choice in snap.response:
            rect = pygame.Rect(x, h // 2 + 80, dot, dot)
            pygame.draw.rect(surface, ColorToken(str(choice)).rgb, rect, border_radius=6)
            x += dot + 8

    def _render_spatial(self, surface: pygame.Surface, snap: RoundSnapshot) -> None:
        c = snap.challenge
        assert isinstance(c, SpatialChallenge)
        w, h = surface.get_size()
        self._render_prompt(surface, snap.prompt)

        n = c.grid_size
        area = min(w - 120, h - 200)
        tile = (area - (n - 1) * 8) // n
        left = (w - area) // 2
        top = 130

        lit = set(snap.revealed)
        picked = set(snap.response)
        for idx, pos in enumerate(c.cells):
            rect = pygame.Rect(left + pos.col * (tile + 8), top + pos.row * (tile + 8), tile, tile)
            color = PANEL
            if pos in lit or pos in picked:
                color = ACCENT
            pygame.draw.rect(surface, color, rect, border_radius=8)
            pygame.draw.rect(surface, BORDER, rect, 1, border_radius=8)
            if snap.phase is RoundPhase.INPUT:
                if idx == self._cursor:
                    pygame.draw.rect(surface, TEXT, rect, 3, border_radius=8)
                self._hitboxes.append((rect, pos))

    def _render_words(self, surface: pygame.Surface, snap: RoundSnapshot) -> None:
        w, _ = surface.get_size()
        self._render_prompt(surface, snap.prompt)

        words = snap.revealed if snap.phase is RoundPhase.SHOWING else snap.choices
        cols = 5
        cell_w = (w - 80) // cols
        cell_h = 40
        picked = set(snap.response)
        for idx, word in enumerate(words):
            row, col = divmod(idx, cols)
            rect = pygame.Rect(40 + col * cell_w, 130 + row * (cell_h + 6), cell_w - 8, cell_h)
            selected = word in picked
            pygame.draw.rect(surface, ACCENT if selected else PANEL, rect, border_radius=6)
            if snap.phase is RoundPhase.INPUT and idx == self._cursor:
                pygame.draw.rect(surface, TEXT, rect, 2, border_radius=6)
            txt = self._small_font.render(str(word), True, BG if selected else TEXT)
            surface.blit(txt, txt.get_rect(center=rect.center))
            if snap.phase is RoundPhase.INPUT:
                self._hitboxes.append((rect, word))


def _new_seed() -> int:
    raw = os.environ.get(SEED_ENV, "").strip()
    if raw:
        try:
            return int(raw)
        except ValueError:
            logger.warning("ignoring non-integer %s=%r", SEED_ENV, raw)
    return random.SystemRandom().randint(1, 2**31 - 1)


def run(*, max_frames: int | None = None, event_injector: Callable[[int], None] | None = None) -> int:
    pygame.init()

    pygame.display.set_caption("Mind Forge")
    surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)

    font = pygame.font.Font(None, 36)
    clock = pygame.time.Clock()

    app = App(surface=surface, font=font)
    real_clock = RealClock()

    def open_game(mode: GameMode) -> None:
        seed = _new_seed()
        logger.debug("opening %s with seed=%d", mode.value, seed)
        app.push(
            MemoryGameScreen(
                app,
                round_factory=lambda: build_memory_round(mode=mode, clock=real_clock, seed=seed),
            )
        )

    main_items = [
        MenuItem("Sequence Memory", lambda: open_game(GameMode.SEQUENCE)),
        MenuItem("Spatial Memory", lambda: open_game(GameMode.SPATIAL)),
        MenuItem("Word Memory", lambda: open_game(GameMode.WORD)),
        MenuItem("Quit", app.quit),
    ]
    app.push(MenuScreen(app, "Memory Training", main_items, subtitle="Train Your Brain"))

    frame = 0
    try:
        while app.running:
            if event_injector is not None:
                event_injector(frame)

            for event in pygame.event.get():
                app.handle_event(event)

            app.render()

            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()

    return 0
