# Copyright (C) 2025 Richard Owen
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""Tests for the optional pygame scoreboard window."""

import pytest

from hockeyboard.engine.config import WindowConfig
from hockeyboard.engine.match import Match
from hockeyboard.models.team import CardType

pygame = pytest.importorskip("pygame")


@pytest.fixture
def window(monkeypatch: pytest.MonkeyPatch):
    """Open a window on SDL's headless video driver."""
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    from hockeyboard.visualizer.visualizer import ScoreboardWindow

    win = ScoreboardWindow(WindowConfig(screen_size=(320, 240), fps=0))
    yield win
    win.close()


def test_draws_frames_while_open(window) -> None:
    """Each draw renders a frame and reports the window as open."""
    match = Match("Hawks", "Eagles")
    match.goal_for_home()
    match.card_for_away(CardType.GREEN)
    assert window.draw(match) is True
    for _ in range(4):
        match.advance_quarter()
    assert window.draw(match) is True


def test_quit_event_closes_window(window) -> None:
    """A window close request makes draw report False from then on."""
    match = Match("Hawks", "Eagles")
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert window.draw(match) is False
    assert window.draw(match) is False
