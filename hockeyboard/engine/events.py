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
"""Event domain models for the match log."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MatchEvent:
    """Immutable entry in the chronological match log.

    Parameters
    ----------
    quarter : int
        Quarter in progress when the event was recorded.
    event_type : str
        Category of event (``"goal"``, ``"card"``, ``"penalty_corner"``,
        ``"quarter_start"`` or ``"quarter_end"``).
    description : str
        Human-readable summary of what happened.
    team : str | None, optional
        Name of the team involved, ``None`` for quarter markers.
    """

    quarter: int
    event_type: str  # goal, card, penalty_corner, quarter_start, quarter_end
    description: str
    team: Optional[str] = None

    def __str__(self) -> str:
        return f"Q{self.quarter} - {self.description}"
