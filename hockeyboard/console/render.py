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
"""Text rendering of the scoreboard, event log and action menu."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, TextIO

from hockeyboard.engine.config import ENGINE_CONFIG, ConsoleConfig
from hockeyboard.engine.events import MatchEvent

if TYPE_CHECKING:
    from hockeyboard.engine.match import Match

BANNER = "\U0001f3d1 Welcome to Field Hockey Scoreboard Simulator \U0001f3d1"


def format_scoreboard(match: "Match", config: Optional[ConsoleConfig] = None) -> str:
    """Render the score, quarter and per-team discipline summary.

    Parameters
    ----------
    match : Match
        Match whose read-only views are displayed.
    config : ConsoleConfig | None, optional
        Layout settings. Defaults to ``ENGINE_CONFIG.console``.

    Returns
    -------
    str
        Multi-line scoreboard ending with a blank line.
    """
    width = (config or ENGINE_CONFIG.console).name_width
    home, away = match.home, match.away
    lines = [
        "",
        "=== FIELD HOCKEY SCOREBOARD ===",
        f"{home.name:<{width}} {home.goals} - {away.goals} {away.name:<{width}}",
        f"Quarter: {match.quarter}/{match.config.quarters}",
        "",
        "Cards & PCs:",
        f"{home.name:<{width}} {home.stats_line()}",
        f"{away.name:<{width}} {away.stats_line()}",
        "================================",
        "",
    ]
    return "\n".join(lines) + "\n"


def format_event_log(events: Iterable[MatchEvent]) -> str:
    """Render the event log one line per event, oldest first.

    Parameters
    ----------
    events : Iterable[MatchEvent]
        Events in chronological order.

    Returns
    -------
    str
        Framed log, or a placeholder line when there are no events.
    """
    body = [str(event) for event in events] or ["No events yet."]
    return "\n".join(["", "--- Event Log ---", *body, "-----------------", ""]) + "\n"


def format_menu(match: "Match") -> str:
    """Render the numbered list of actions.

    Parameters
    ----------
    match : Match
        Match supplying the team names for the goal options.

    Returns
    -------
    str
        Menu text, one option per line.
    """
    return (
        "Actions:\n"
        f"1. Goal {match.home.name}\n"
        f"2. Goal {match.away.name}\n"
        "3. Green card\n"
        "4. Yellow card\n"
        "5. Red card\n"
        "6. Penalty corner\n"
        "7. Next quarter\n"
        "8. Show event log\n"
        "9. Quit match early\n"
    )


def clear_screen(stream: TextIO, config: Optional[ConsoleConfig] = None) -> None:
    """Clear the terminal by writing the configured escape sequence.

    Parameters
    ----------
    stream : TextIO
        Output stream attached to the terminal.
    config : ConsoleConfig | None, optional
        Supplies the escape sequence. Defaults to ``ENGINE_CONFIG.console``.
    """
    stream.write((config or ENGINE_CONFIG.console).clear_sequence)
    stream.flush()
