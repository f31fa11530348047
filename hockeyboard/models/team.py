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
"""Team and disciplinary card domain models."""
from enum import Enum
from typing import Dict


class CardType(Enum):
    """Disciplinary sanctions an umpire can show, in increasing severity."""

    GREEN = "Green"
    YELLOW = "Yellow"
    RED = "Red"

    @property
    def label(self) -> str:
        """Display name used in event descriptions.

        Returns
        -------
        str
            Capitalised card colour, for example ``"Yellow"``.
        """
        return self.value


class Team:
    """Cumulative statistics for one side of a match.

    Every counter starts at zero and only ever increases; there is no undo.

    Parameters
    ----------
    name : str
        Display name of the side. Defaults for blank input are chosen by the
        caller, not here.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._goals = 0
        self._cards: Dict[CardType, int] = {card: 0 for card in CardType}
        self._penalty_corners = 0

    def __repr__(self) -> str:
        return f"Team(name={self._name!r}, goals={self._goals}, stats={self.stats_line()!r})"

    @property
    def name(self) -> str:
        """Display name of the side.

        Returns
        -------
        str
            Name passed at construction.
        """
        return self._name

    @property
    def goals(self) -> int:
        """Goals scored so far.

        Returns
        -------
        int
            Non-negative goal count.
        """
        return self._goals

    @property
    def penalty_corners(self) -> int:
        """Penalty corners awarded so far.

        Returns
        -------
        int
            Non-negative penalty corner count.
        """
        return self._penalty_corners

    @property
    def green_cards(self) -> int:
        """Return the number of green cards received."""
        return self._cards[CardType.GREEN]

    @property
    def yellow_cards(self) -> int:
        """Return the number of yellow cards received."""
        return self._cards[CardType.YELLOW]

    @property
    def red_cards(self) -> int:
        """Return the number of red cards received."""
        return self._cards[CardType.RED]

    def card_count(self, card: CardType) -> int:
        """Look up how many cards of one colour the side has received.

        Parameters
        ----------
        card : CardType
            Card colour to query.

        Returns
        -------
        int
            Number of cards of that colour.
        """
        return self._cards[card]

    def score_goal(self) -> None:
        """Add one goal."""
        self._goals += 1

    def receive_card(self, card: CardType) -> None:
        """Record a disciplinary card.

        Parameters
        ----------
        card : CardType
            Colour of the card shown.

        Raises
        ------
        ValueError
            If ``card`` is not a ``CardType`` member.
        """
        if not isinstance(card, CardType):
            raise ValueError(f"Invalid card type: {card!r}")
        self._cards[card] += 1

    def award_penalty_corner(self) -> None:
        """Add one penalty corner."""
        self._penalty_corners += 1

    def stats_line(self) -> str:
        """Summarise cards and penalty corners in a fixed order.

        Returns
        -------
        str
            Counts for green, yellow, red and penalty corners, for example
            ``"2G 1Y 0R 3PC"``.
        """
        return f"{self.green_cards}G {self.yellow_cards}Y {self.red_cards}R {self._penalty_corners}PC"
