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
"""Interactive menu loop that drives a match from the keyboard."""

from __future__ import annotations

import sys
import time
from typing import TYPE_CHECKING, Callable, Dict, Optional, TextIO, Tuple

from hockeyboard.console.render import BANNER, clear_screen, format_event_log, format_menu, format_scoreboard
from hockeyboard.engine.config import ENGINE_CONFIG, EngineConfig
from hockeyboard.engine.match import Match, Side
from hockeyboard.models.team import CardType

if TYPE_CHECKING:
    from hockeyboard.utils.debug import MatchDebugger
    from hockeyboard.visualizer.visualizer import ScoreboardWindow

CARD_CHOICES = {3: CardType.GREEN, 4: CardType.YELLOW, 5: CardType.RED}
SIDE_KEYS: Dict[str, Side] = {"h": "home", "a": "away"}


class ScoreboardSession:
    """Console front end that reads commands and forwards them to a ``Match``.

    Input problems (non-numeric choices, unknown side letters) are handled
    here and never reach the match.

    Parameters
    ----------
    input_func : Callable[[], str] | None, optional
        Reads one line of user input. Defaults to :func:`input`.
    output : TextIO | None, optional
        Stream receiving all console output. Defaults to ``sys.stdout``.
    sleep : Callable[[float], None] | None, optional
        Pause function used between redraws. Defaults to :func:`time.sleep`.
    config : EngineConfig | None, optional
        Configuration tree. Defaults to ``ENGINE_CONFIG``.
    debugger : MatchDebugger | None, optional
        Trace writer attached to the match and fed with input errors.
    window : ScoreboardWindow | None, optional
        pygame window redrawn after every console redraw.
    clear : bool, default=True
        Whether to clear the terminal before each redraw.
    """

    def __init__(
        self,
        input_func: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
        config: Optional[EngineConfig] = None,
        debugger: Optional["MatchDebugger"] = None,
        window: Optional["ScoreboardWindow"] = None,
        clear: bool = True,
    ) -> None:
        self.input_func = input_func or input
        self.output = output or sys.stdout
        self.sleep = sleep or time.sleep
        self.config = config or ENGINE_CONFIG
        self.debugger = debugger
        self.window = window
        self.clear = clear

    # --------------------- Setup ---------------------

    def read_team_names(self) -> Tuple[str, str]:
        """Prompt for both team names, substituting defaults for blank input.

        Returns
        -------
        Tuple[str, str]
            Home and away names.
        """
        home = self._ask_optional("Enter home team: ") or self.config.match.default_home_name
        away = self._ask_optional("Enter away team: ") or self.config.match.default_away_name
        return home, away

    def create_match(self, home: Optional[str] = None, away: Optional[str] = None) -> Match:
        """Build the match, prompting for any team name not supplied.

        Parameters
        ----------
        home : str | None, optional
            Home team name; prompted for when ``None``, defaulted when blank.
        away : str | None, optional
            Away team name; prompted for when ``None``, defaulted when blank.

        Returns
        -------
        Match
            Fresh match in quarter 1.
        """
        if home is None or away is None:
            asked_home, asked_away = self.read_team_names()
            home = home if home is not None else asked_home
            away = away if away is not None else asked_away
        home = home.strip() or self.config.match.default_home_name
        away = away.strip() or self.config.match.default_away_name
        return Match(home, away, config=self.config.match, debugger=self.debugger)

    # --------------------- Main loop ---------------------

    def run(self, home: Optional[str] = None, away: Optional[str] = None) -> Match:
        """Play a whole match interactively and print the final result.

        End of input or Ctrl-C ends the match early, like menu option 9.

        Parameters
        ----------
        home : str | None, optional
            Home team name; prompted for when ``None``.
        away : str | None, optional
            Away team name; prompted for when ``None``.

        Returns
        -------
        Match
            The match in its final state.
        """
        self._write(f"{BANNER}\n\n")
        match: Optional[Match] = None

        try:
            match = self.create_match(home, away)
            while not match.is_finished:
                self.redraw(match)
                self._write(format_menu(match))
                if not self.play_turn(match):
                    break
        except (EOFError, KeyboardInterrupt):
            self._write("\nEnding match early...\n")

        if match is None:
            # Interrupted while naming the teams
            match = self.create_match(home or "", away or "")

        self._clear()
        self._write("\n=== FINAL RESULT ===\n")
        self._write(format_scoreboard(match, self.config.console))
        self._write(format_event_log(match.events))
        self._write("Match ended. Thank you for using the Field Hockey Scoreboard Simulator!\n\n")
        self._draw_window(match)
        return match

    def redraw(self, match: Match) -> None:
        """Clear the screen and show the current scoreboard.

        Parameters
        ----------
        match : Match
            Match to display.
        """
        self._clear()
        self._write(format_scoreboard(match, self.config.console))
        self._draw_window(match)

    def play_turn(self, match: Match) -> bool:
        """Read one menu choice and carry it out.

        Parameters
        ----------
        match : Match
            Match receiving the action.

        Returns
        -------
        bool
            ``False`` when the session should stop (match over or quit early).
        """
        raw = self._ask("Choice: ")
        try:
            choice = int(raw.strip())
        except ValueError:
            self._reject("invalid_input", f"Non-numeric menu choice {raw!r}", "Invalid input. Please enter a number.")
            self.sleep(self.config.console.error_pause)
            return True

        if choice in (1, 2):
            side: Side = "home" if choice == 1 else "away"
            match.goal_for(side, self._ask_scorer())
        elif choice in CARD_CHOICES:
            prompt = f"For which team? (h = {match.home.name}, a = {match.away.name}): "
            card_side = self._ask_side(prompt)
            if card_side is not None:
                match.card_for(card_side, CARD_CHOICES[choice])
            self.sleep(self.config.console.action_pause)
        elif choice == 6:
            corner_side = self._ask_side("For which team? (h/a): ")
            if corner_side is not None:
                match.penalty_corner_for(corner_side)
            self.sleep(self.config.console.action_pause)
        elif choice == 7:
            return match.advance_quarter()
        elif choice == 8:
            self._clear()
            self._write(format_event_log(match.events))
            self._ask("Press Enter to return to scoreboard...")
        elif choice == 9:
            self._write("Ending match early...\n")
            self.sleep(self.config.console.quit_pause)
            return False
        else:
            self._reject("invalid_choice", f"Menu choice {choice} out of range", "Invalid choice. Please try again.")
            self.sleep(self.config.console.error_pause)
        return True

    # --------------------- Input helpers ---------------------

    def _ask(self, prompt: str) -> str:
        """Show a prompt and read one line.

        Parameters
        ----------
        prompt : str
            Text written before reading.

        Returns
        -------
        str
            The raw line entered by the user.
        """
        self._write(prompt)
        return self.input_func()

    def _ask_optional(self, prompt: str) -> str:
        """Read a line where end of input simply means "nothing entered".

        Parameters
        ----------
        prompt : str
            Text written before reading.

        Returns
        -------
        str
            Stripped input, empty when the user entered nothing.
        """
        try:
            return self._ask(prompt).strip()
        except EOFError:
            self._write("\n")
            return ""

    def _ask_scorer(self) -> Optional[str]:
        """Ask for the goal scorer when the console is configured to.

        Returns
        -------
        str | None
            Scorer name, or ``None`` when not asked or left blank.
        """
        if not self.config.console.ask_scorer:
            return None
        return self._ask_optional("Scorer (optional): ") or None

    def _ask_side(self, prompt: str) -> Optional[Side]:
        """Ask which team an action applies to.

        Parameters
        ----------
        prompt : str
            Question shown to the user.

        Returns
        -------
        Side | None
            ``"home"`` or ``"away"``, or ``None`` when the answer was invalid.
        """
        raw = self._ask(prompt).strip()
        side = SIDE_KEYS.get(raw[:1].lower())
        if side is None:
            self._reject("invalid_side", f"Unknown team choice {raw!r}", "Invalid team choice.")
        return side

    def _reject(self, error_type: str, detail: str, message: str) -> None:
        """Report a user input error on screen and in the trace.

        Parameters
        ----------
        error_type : str
            Classification passed to the debugger.
        detail : str
            Trace description of the bad input.
        message : str
            Text shown to the user.
        """
        self._write(f"{message}\n")
        if self.debugger:
            self.debugger.log_error(error_type, detail)

    # --------------------- Output helpers ---------------------

    def _write(self, text: str) -> None:
        """Write text to the output stream and flush it.

        Parameters
        ----------
        text : str
            Text to display.
        """
        self.output.write(text)
        self.output.flush()

    def _clear(self) -> None:
        """Clear the terminal unless clearing is disabled."""
        if self.clear:
            clear_screen(self.output, self.config.console)

    def _draw_window(self, match: Match) -> None:
        """Redraw the pygame window, dropping it once the user closes it.

        Parameters
        ----------
        match : Match
            Match to display.
        """
        if self.window is not None and not self.window.draw(match):
            self.window.close()
            self.window = None
