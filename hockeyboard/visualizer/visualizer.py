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
"""Optional pygame window mirroring the console scoreboard."""
from typing import Optional, Tuple

try:
    import pygame
except Exception:
    pygame = None

from hockeyboard.engine.config import ENGINE_CONFIG, WindowConfig
from hockeyboard.engine.match import Match


class ScoreboardWindow:
    """Scoreboard drawn in a pygame window, refreshed once per console redraw.

    The window never runs its own loop: :meth:`draw` renders a single frame and
    drains pending window events, so the console stays the only driver of the
    match.

    Parameters
    ----------
    config : WindowConfig | None, optional
        Window size, frame rate and colours. Defaults to ``ENGINE_CONFIG.window``.

    Raises
    ------
    RuntimeError
        If pygame is not installed.
    """

    def __init__(self, config: Optional[WindowConfig] = None) -> None:
        if pygame is None:
            raise RuntimeError("pygame is not installed")
        self.config = config or ENGINE_CONFIG.window
        pygame.init()
        self.screen_size: Tuple[int, int] = self.config.screen_size
        self.screen = pygame.display.set_mode(self.screen_size, pygame.RESIZABLE)
        pygame.display.set_caption("Field Hockey Scoreboard")
        self.clock = pygame.time.Clock()
        self.title_font = pygame.font.SysFont(None, 44)
        self.font = pygame.font.SysFont(None, 24)
        self.is_open = True

    def draw(self, match: Match) -> bool:
        """Render one frame of the scoreboard.

        Parameters
        ----------
        match : Match
            Match whose read-only views are displayed.

        Returns
        -------
        bool
            ``False`` once the user has closed the window.
        """
        if not self.is_open:
            return False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_open = False
                return False
            if event.type == pygame.VIDEORESIZE:
                self.screen_size = (event.w, event.h)
                self.screen = pygame.display.set_mode(self.screen_size, pygame.RESIZABLE)

        cfg = self.config
        width = self.screen_size[0]
        self.screen.fill(cfg.background)

        home, away = match.home, match.away
        home_txt = self.title_font.render(home.name, True, cfg.home)
        away_txt = self.title_font.render(away.name, True, cfg.away)
        score_txt = self.title_font.render(f"{home.goals} - {away.goals}", True, cfg.text)
        self.screen.blit(home_txt, (20, 20))
        self.screen.blit(away_txt, (width - away_txt.get_width() - 20, 20))
        self.screen.blit(score_txt, ((width - score_txt.get_width()) // 2, 20))

        status = "Full time" if match.is_finished else f"Quarter: {match.quarter}/{match.config.quarters}"
        status_txt = self.font.render(status, True, cfg.text)
        self.screen.blit(status_txt, ((width - status_txt.get_width()) // 2, 70))

        home_stats = self.font.render(home.stats_line(), True, cfg.text)
        away_stats = self.font.render(away.stats_line(), True, cfg.text)
        self.screen.blit(home_stats, (20, 100))
        self.screen.blit(away_stats, (width - away_stats.get_width() - 20, 100))

        # Latest events, oldest of the selection first
        line_height = self.font.get_linesize()
        y = 150
        for entry in match.events[-cfg.recent_events:]:
            self.screen.blit(self.font.render(str(entry), True, cfg.text), (20, y))
            y += line_height

        pygame.display.flip()
        self.clock.tick(cfg.fps)
        return True

    def close(self) -> None:
        """Shut down pygame and release the window."""
        if pygame is not None:
            pygame.quit()
        self.is_open = False
