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
"""Tests for the match state machine and its event log."""

import pytest

from hockeyboard.engine.config import MatchConfig
from hockeyboard.engine.events import MatchEvent
from hockeyboard.engine.match import Match, MatchOverError
from hockeyboard.models.team import CardType


def _descriptions(match: Match) -> list:
    return [event.description for event in match.events]


class TestMatchEvent:
    """Tests for the MatchEvent value object."""

    def test_str_format(self) -> None:
        """Events render as ``Q<quarter> - <description>``."""
        event = MatchEvent(2, "goal", "Hawks goal!", "Hawks")
        assert str(event) == "Q2 - Hawks goal!"

    def test_event_is_immutable(self) -> None:
        """Fields cannot be changed after construction."""
        event = MatchEvent(1, "quarter_start", "Start of Q1")
        with pytest.raises(AttributeError):
            event.quarter = 3  # type: ignore[misc]


class TestMatchSetup:
    """Tests for a freshly created match."""

    def test_initial_state(self) -> None:
        """A new match is in quarter 1 with both teams at zero."""
        match = Match("Hawks", "Eagles")
        assert match.quarter == 1
        assert not match.is_finished
        assert match.home.name == "Hawks"
        assert match.away.name == "Eagles"
        assert match.score == (0, 0)

    def test_opening_marker_logged(self) -> None:
        """The first log entry marks the start of the first quarter."""
        match = Match("Hawks", "Eagles")
        assert [str(e) for e in match.events] == ["Q1 - Start of Q1"]
        assert match.events[0].event_type == "quarter_start"
        assert match.events[0].team is None

    def test_opening_marker_can_be_disabled(self) -> None:
        """Without the opening marker the log starts empty."""
        match = Match("Hawks", "Eagles", config=MatchConfig(log_opening_marker=False))
        assert match.events == ()

    def test_events_view_is_a_snapshot(self) -> None:
        """Holding an events view does not expose the internal log."""
        match = Match("Hawks", "Eagles")
        before = match.events
        match.goal_for_home()
        assert len(before) == 1
        assert len(match.events) == 2


class TestMatchActions:
    """Tests for goals, cards and penalty corners."""

    def test_repeated_home_goals(self) -> None:
        """n home goals give n goals and exactly n goal events."""
        match = Match("Hawks", "Eagles")
        for _ in range(5):
            match.goal_for("home")
        assert match.home.goals == 5
        assert match.away.goals == 0
        goal_events = [e for e in match.events if e.event_type == "goal"]
        assert len(goal_events) == 5
        assert len(match.events) == 6
        assert all(e.description == "Hawks goal!" and e.team == "Hawks" for e in goal_events)

    def test_goal_with_scorer(self) -> None:
        """A named scorer is appended to the goal description."""
        match = Match("Hawks", "Eagles")
        event = match.goal_for_away("Jansen")
        assert event.description == "Eagles goal! (Jansen)"
        assert match.events[-1] is event

    @pytest.mark.parametrize("card", list(CardType))
    def test_card_for_updates_one_counter(self, card: CardType) -> None:
        """A card only touches the matching counter of the named side."""
        match = Match("Hawks", "Eagles")
        match.card_for("away", card)
        for other in CardType:
            assert match.away.card_count(other) == (1 if other is card else 0)
            assert match.home.card_count(other) == 0
        assert match.events[-1].description == f"{card.label} card - Eagles"
        assert match.events[-1].event_type == "card"

    def test_penalty_corner(self) -> None:
        """Penalty corners are counted and logged."""
        match = Match("Hawks", "Eagles")
        match.penalty_corner_for_home()
        match.penalty_corner_for("away")
        assert match.home.penalty_corners == 1
        assert match.away.penalty_corners == 1
        assert _descriptions(match)[-2:] == ["Penalty corner - Hawks", "Penalty corner - Eagles"]

    def test_side_wrappers(self) -> None:
        """The home/away wrappers route to the right team."""
        match = Match("Hawks", "Eagles")
        match.goal_for_home()
        match.goal_for_away()
        match.card_for_home(CardType.RED)
        match.card_for_away(CardType.GREEN)
        match.penalty_corner_for_away()
        assert match.score == (1, 1)
        assert match.home.stats_line() == "0G 0Y 1R 0PC"
        assert match.away.stats_line() == "1G 0Y 0R 1PC"

    def test_unknown_side_rejected(self) -> None:
        """Only ``home`` and ``away`` are valid sides."""
        match = Match("Hawks", "Eagles")
        with pytest.raises(ValueError):
            match.goal_for("visitors")  # type: ignore[arg-type]
        assert match.score == (0, 0)
        assert len(match.events) == 1


class TestQuarterProgression:
    """Tests for advancing through the quarters."""

    def test_four_advances_finish_the_match(self) -> None:
        """Quarters run 1 -> 2 -> 3 -> 4 -> finished."""
        match = Match("Hawks", "Eagles")
        results = []
        quarters = []
        for _ in range(4):
            results.append(match.advance_quarter())
            quarters.append(match.quarter)
        assert results == [True, True, True, False]
        assert quarters == [2, 3, 4, 4]
        assert match.is_finished

    def test_advance_after_finish_is_noop(self) -> None:
        """A fifth advance returns False and logs nothing."""
        match = Match("Hawks", "Eagles")
        for _ in range(4):
            match.advance_quarter()
        count = len(match.events)
        assert match.advance_quarter() is False
        assert len(match.events) == count

    def test_quarter_markers(self) -> None:
        """Each boundary logs one end marker and, except the last, one start marker."""
        match = Match("Hawks", "Eagles")
        for _ in range(4):
            match.advance_quarter()
        assert [str(e) for e in match.events] == [
            "Q1 - Start of Q1",
            "Q1 - End of Q1",
            "Q2 - Start of Q2",
            "Q2 - End of Q2",
            "Q3 - Start of Q3",
            "Q3 - End of Q3",
            "Q4 - Start of Q4",
            "Q4 - End of Q4",
        ]

    def test_actions_rejected_after_finish(self) -> None:
        """Game actions raise MatchOverError once the match is over."""
        match = Match("Hawks", "Eagles")
        for _ in range(4):
            match.advance_quarter()
        count = len(match.events)
        with pytest.raises(MatchOverError):
            match.goal_for_home()
        with pytest.raises(MatchOverError):
            match.card_for_away(CardType.YELLOW)
        with pytest.raises(MatchOverError):
            match.penalty_corner_for_home()
        assert match.score == (0, 0)
        assert match.away.yellow_cards == 0
        assert len(match.events) == count

    def test_custom_quarter_count(self) -> None:
        """The number of periods comes from the match config."""
        match = Match("Hawks", "Eagles", config=MatchConfig(quarters=2))
        assert match.advance_quarter() is True
        assert match.advance_quarter() is False
        assert match.is_finished


class TestEventOrdering:
    """Tests for chronological order and quarter tagging."""

    def test_events_follow_call_order_and_quarter(self) -> None:
        """Each event is tagged with the quarter current when it happened."""
        match = Match("Hawks", "Eagles")
        match.goal_for_home()
        match.advance_quarter()
        match.card_for_away(CardType.GREEN)
        match.penalty_corner_for_home()
        match.advance_quarter()
        match.goal_for_away()
        assert [(e.quarter, e.description) for e in match.events] == [
            (1, "Start of Q1"),
            (1, "Hawks goal!"),
            (1, "End of Q1"),
            (2, "Start of Q2"),
            (2, "Green card - Eagles"),
            (2, "Penalty corner - Hawks"),
            (2, "End of Q2"),
            (3, "Start of Q3"),
            (3, "Eagles goal!"),
        ]

    def test_hawks_eagles_scenario(self) -> None:
        """Two home goals, an away yellow and four advances in order."""
        match = Match("Hawks", "Eagles")
        match.goal_for_home()
        match.goal_for_home()
        match.card_for_away(CardType.YELLOW)
        for _ in range(4):
            match.advance_quarter()

        assert match.home.goals == 2
        assert match.away.yellow_cards == 1
        assert match.is_finished

        types = [e.event_type for e in match.events]
        assert types.count("goal") == 2
        assert types.count("card") == 1
        assert types.count("quarter_end") == 4
        assert types.count("quarter_start") == 4  # Q1 opening marker plus Q2..Q4
        last_goal = max(i for i, t in enumerate(types) if t == "goal")
        card_index = types.index("card")
        first_end = types.index("quarter_end")
        assert last_goal < card_index < first_end


class TestDebuggerIntegration:
    """Tests for mirroring events into an attached debugger."""

    def test_every_event_is_mirrored(self) -> None:
        """The debugger receives one call per logged event."""

        class Recorder:
            def __init__(self) -> None:
                self.calls = []

            def log_match_event(self, quarter, event_type, description):
                self.calls.append((quarter, event_type, description))

        recorder = Recorder()
        match = Match("Hawks", "Eagles", debugger=recorder)  # type: ignore[arg-type]
        match.goal_for_home()
        match.advance_quarter()
        assert recorder.calls == [
            (1, "quarter_start", "Start of Q1"),
            (1, "goal", "Hawks goal!"),
            (1, "quarter_end", "End of Q1"),
            (2, "quarter_start", "Start of Q2"),
        ]
