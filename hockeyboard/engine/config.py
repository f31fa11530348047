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
"""Central configuration for match rules and presentation parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(slots=True)
class MatchConfig:
    """Rules governing the structure of a single match.

    Parameters
    ----------
    quarters : int, default=4
        Number of playing periods before the final whistle.
    default_home_name : str, default="Home"
        Label used when no home team name is supplied.
    default_away_name : str, default="Away"
        Label used when no away team name is supplied.
    log_opening_marker : bool, default=True
        Whether a ``Start of Q1`` event is logged when the match is created.
    """

    quarters: int = 4
    default_home_name: str = "Home"
    default_away_name: str = "Away"
    log_opening_marker: bool = True


@dataclass(slots=True)
class ConsoleConfig:
    """Layout and pacing of the interactive console.

    Parameters
    ----------
    name_width : int, default=20
        Column width used to pad team names on the scoreboard.
    clear_sequence : str, default="\\x1b[2J\\x1b[H"
        ANSI escape sequence that clears the terminal and homes the cursor.
    action_pause : float, default=0.8
        Delay in seconds after a card or penalty corner prompt.
    error_pause : float, default=1.0
        Delay in seconds after an invalid menu choice.
    quit_pause : float, default=1.0
        Delay in seconds after the user ends the match early.
    ask_scorer : bool, default=False
        Whether goal actions prompt for an optional scorer name.
    """

    name_width: int = 20
    clear_sequence: str = "\x1b[2J\x1b[H"
    action_pause: float = 0.8
    error_pause: float = 1.0
    quit_pause: float = 1.0
    ask_scorer: bool = False


@dataclass(slots=True)
class WindowConfig:
    """Settings for the optional pygame scoreboard window.

    Parameters
    ----------
    screen_size : Tuple[int, int], default=(640, 420)
        Initial window size in pixels.
    fps : int, default=30
        Frame rate cap applied after each redraw.
    recent_events : int, default=8
        Number of latest log entries listed under the score.
    background : Tuple[int, int, int], default=(20, 70, 40)
        Fill colour behind the scoreboard.
    text : Tuple[int, int, int], default=(245, 245, 245)
        Colour of regular text.
    home : Tuple[int, int, int], default=(200, 30, 30)
        Accent colour of the home side.
    away : Tuple[int, int, int], default=(30, 90, 200)
        Accent colour of the away side.
    """

    screen_size: Tuple[int, int] = (640, 420)
    fps: int = 30
    recent_events: int = 8
    background: Tuple[int, int, int] = (20, 70, 40)
    text: Tuple[int, int, int] = (245, 245, 245)
    home: Tuple[int, int, int] = (200, 30, 30)
    away: Tuple[int, int, int] = (30, 90, 200)


@dataclass(slots=True)
class DebugConfig:
    """Defaults for the session trace written by ``MatchDebugger``.

    Parameters
    ----------
    output_dir : str, default="debug_logs"
        Directory that receives trace files.
    """

    output_dir: str = "debug_logs"


@dataclass(slots=True)
class EngineConfig:
    """Top-level container for all configuration structures.

    Parameters
    ----------
    match : MatchConfig, default=MatchConfig()
        Match structure rules.
    console : ConsoleConfig, default=ConsoleConfig()
        Console layout and pacing.
    window : WindowConfig, default=WindowConfig()
        pygame window settings.
    debug : DebugConfig, default=DebugConfig()
        Trace file defaults.
    """

    match: MatchConfig = field(default_factory=MatchConfig)
    console: ConsoleConfig = field(default_factory=ConsoleConfig)
    window: WindowConfig = field(default_factory=WindowConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)


ENGINE_CONFIG = EngineConfig()
"""Singleton-style access to the engine configuration."""
