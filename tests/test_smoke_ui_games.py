from __future__ import annotations

import os

import pytest


def _key(key: int) -> None:
    import pygame

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, {"key": key, "unicode": "", "mod": 0}))


@pytest.mark.parametrize("downs", [0, 1, 2])
def test_ui_smoke_open_each_game_start_and_pick(downs: int, monkeypatch: pytest.MonkeyPatch) -> None:
    # Headless SDL for CI.
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setenv("MIND_FORGE_SEED", "1234")

    import pygame

    from mind_forge.app import run

    script: dict[int, int] = {}
    frame = 1
    for _ in range(downs):
        script[frame] = pygame.K_DOWN
        frame += 1
    script[frame] = pygame.K_RETURN  # open the game
    script[frame + 1] = pygame.K_RETURN  # start the round
    script[frame + 2] = pygame.K_1  # ignored while showing
    script[frame + 3] = pygame.K_ESCAPE  # back to menu

    def inject(n: int) -> None:
        if n in script:
            _key(script[n])

    assert run(max_frames=frame + 8, event_injector=inject) == 0


def test_ui_smoke_escape_on_menu_quits() -> None:
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

    import pygame

    from mind_forge.app import run

    def inject(n: int) -> None:
        if n == 1:
            _key(pygame.K_ESCAPE)

    assert run(max_frames=50, event_injector=inject) == 0
