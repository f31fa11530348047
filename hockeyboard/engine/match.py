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
"""Match state machine: quarter progression, team statistics and the event log."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Literal, Optional, Tuple

from hockeyboard.engine.config import ENGINE_CONFIG, MatchConfig
from hockeyboard.engine.events import MatchEvent
from hockeyboard.models.team import CardType, Team

if TYPE_CHECKING:
    from hockeyboard.utils.debug import MatchDebugger

Side = Literal["home", "away"]


class MatchOverError(RuntimeError):
    """Raised when a game action is attempted after the final whistle."""


class Match:
    """Owner and sole mutator of both teams and the match event log.

    The match starts in quarter 1 and moves forward one quarter per call to
    :meth:`advance_quarter`. Ending the last quarter puts the match into a
    terminal finished state; afterwards game actions raise
    :class:`MatchOverError` and further advances are no-ops.

    Parameters
    ----------
    home_name : str
        Display name of the home side.
    away_name : str
        Display name of the away side.
    config : MatchConfig | None, optional
        Match rules. Defaults to ``ENGINE_CONFIG.match``.
    debugger : MatchDebugger | None, optional
        Optional trace writer that receives every logged event.
    """

    def __init__(
        self,
        home_name: str,
        away_name: str,
        config: Optional[MatchConfig] = None,
        debugger: Optional["MatchDebugger"] = None,
    ) -> None:
        self.config = config or ENGINE_CONFIG.match
        self.debugger = debugger
        self._home = Team(home_name)
        self._away = Team(away_name)
        self._quarter = 1
        self._finished = False
        self._events: List[MatchEvent] = []

        if self.config.log_opening_marker:
            self._log("quarter_start", "Start of Q1")

    # --------------------- Read-only views ---------------------

    @property
    def home(self) -> Team:
        """Return the home side."""
        return self._home

    @property
    def away(self) -> Team:
        """Return the away side."""
        return self._away

    @property
    def quarter(self) -> int:
        """Quarter currently in progress (stays on the last quarter once finished).

        Returns
        -------
        int
            Value between 1 and ``config.quarters``.
        """
        return self._quarter

    @property
    def is_finished(self) -> bool:
        """Return ``True`` once the last quarter has ended."""
        return self._finished

    @property
    def events(self) -> Tuple[MatchEvent, ...]:
        """Snapshot of the event log in chronological order.

        Returns
        -------
        Tuple[MatchEvent, ...]
            Every event logged so far, oldest first.
        """
        return tuple(self._events)

    @property
    def score(self) -> Tuple[int, int]:
        """Current score as ``(home_goals, away_goals)``.

        Returns
        -------
        Tuple[int, int]
            Goals for the home and away sides.
        """
        return self._home.goals, self._away.goals

    # --------------------- Game actions ---------------------

    def goal_for(self, side: Side, scorer: Optional[str] = None) -> MatchEvent:
        """Credit a goal to one side.

        Parameters
        ----------
        side : {"home", "away"}
            Side that scored.
        scorer : str | None, optional
            Player name appended to the log entry when given.

        Returns
        -------
        MatchEvent
            The goal event appended to the log.
        """
        team = self._playing_team(side)
        team.score_goal()
        description = f"{team.name} goal!"
        if scorer:
            description += f" ({scorer})"
        return self._log("goal", description, team)

    def card_for(self, side: Side, card: CardType) -> MatchEvent:
        """Show a disciplinary card to one side.

        Parameters
        ----------
        side : {"home", "away"}
            Side receiving the card.
        card : CardType
            Colour of the card.

        Returns
        -------
        MatchEvent
            The card event appended to the log.
        """
        team = self._playing_team(side)
        team.receive_card(card)
        return self._log("card", f"{card.label} card - {team.name}", team)

    def penalty_corner_for(self, side: Side) -> MatchEvent:
        """Award a penalty corner to one side.

        Parameters
        ----------
        side : {"home", "away"}
            Side awarded the set piece.

        Returns
        -------
        MatchEvent
            The penalty corner event appended to the log.
        """
        team = self._playing_team(side)
        team.award_penalty_corner()
        return self._log("penalty_corner", f"Penalty corner - {team.name}", team)

    def goal_for_home(self, scorer: Optional[str] = None) -> MatchEvent:
        """Credit a goal to the home side.

        Parameters
        ----------
        scorer : str | None, optional
            Player name appended to the log entry when given.

        Returns
        -------
        MatchEvent
            The goal event appended to the log.
        """
        return self.goal_for("home", scorer)

    def goal_for_away(self, scorer: Optional[str] = None) -> MatchEvent:
        """Credit a goal to the away side.

        Parameters
        ----------
        scorer : str | None, optional
            Player name appended to the log entry when given.

        Returns
        -------
        MatchEvent
            The goal event appended to the log.
        """
        return self.goal_for("away", scorer)

    def card_for_home(self, card: CardType) -> MatchEvent:
        """Show a card to the home side.

        Parameters
        ----------
        card : CardType
            Colour of the card.

        Returns
        -------
        MatchEvent
            The card event appended to the log.
        """
        return self.card_for("home", card)

    def card_for_away(self, card: CardType) -> MatchEvent:
        """Show a card to the away side.

        Parameters
        ----------
        card : CardType
            Colour of the card.

        Returns
        -------
        MatchEvent
            The card event appended to the log.
        """
        return self.card_for("away", card)

    def penalty_corner_for_home(self) -> MatchEvent:
        """Award a penalty corner to the home side.

        Returns
        -------
        MatchEvent
            The penalty corner event appended to the log.
        """
        return self.penalty_corner_for("home")

    def penalty_corner_for_away(self) -> MatchEvent:
        """Award a penalty corner to the away side.

        Returns
        -------
        MatchEvent
            The penalty corner event appended to the log.
        """
        return self.penalty_corner_for("away")

    def advance_quarter(self) -> bool:
        """Blow the whistle for the end of the current quarter.

        Logs ``End of Q<n>`` and, unless that was the last quarter, moves on
        and logs ``Start of Q<n+1>``. Ending the last quarter finishes the
        match. Once finished, the call does nothing.

        Returns
        -------
        bool
            ``True`` if play continues into a new quarter, ``False`` if the
            match is (now or already) over.
        """
        if self._finished:
            return False

        self._log("quarter_end", f"End of Q{self._quarter}")
        if self._quarter < self.config.quarters:
            self._quarter += 1
            self._log("quarter_start", f"Start of Q{self._quarter}")
            return True

        self._finished = True
        return False

    # --------------------- Internals ---------------------

    def _team_for_side(self, side: str) -> Team:
        """Resolve a side label to the owned team.

        Parameters
        ----------
        side : str
            ``"home"`` or ``"away"``.

        Returns
        -------
        Team
            The matching team.

        Raises
        ------
        ValueError
            If ``side`` is not a known side.
        """
        if side == "home":
            return self._home
        if side == "away":
            return self._away
        raise ValueError(f"Unknown side '{side}'. Known sides: away, home")

    def _playing_team(self, side: str) -> Team:
        """Resolve a side for a game action, refusing once the match is over.

        Parameters
        ----------
        side : str
            ``"home"`` or ``"away"``.

        Returns
        -------
        Team
            The matching team.

        Raises
        ------
        MatchOverError
            If the last quarter has already ended.
        """
        if self._finished:
            raise MatchOverError("Match is over; no further actions are allowed")
        return self._team_for_side(side)

    def _log(self, event_type: str, description: str, team: Optional[Team] = None) -> MatchEvent:
        """Append an event tagged with the current quarter.

        Parameters
        ----------
        event_type : str
            Category label of the event.
        description : str
            Human-readable summary.
        team : Team | None, optional
            Team involved in the event.

        Returns
        -------
        MatchEvent
            The appended event.
        """
        event = MatchEvent(self._quarter, event_type, description, team.name if team else None)
        self._events.append(event)
        if self.debugger:
            self.debugger.log_match_event(event.quarter, event.event_type, event.description)
        return event
