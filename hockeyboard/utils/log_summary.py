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
"""Read ``MatchDebugger`` trace files back into simple counts.

A trace holds one line per logged match event and per rejected input. The
helpers here recover the event categories and quarters from those lines so a
finished session can be reviewed without re-running it.
"""
import re
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

MATCH_EVENT_RE = re.compile(r"MATCH_EVENT: Quarter: (\d+) \| Event: (\w+) \| Details: (.*)$")
ERROR_RE = re.compile(r"ERROR: Type: (\w+) \| Details: (.*)$")


@dataclass
class LogSummary:
    """Counts recovered from a trace file.

    Parameters
    ----------
    event_types : Counter
        Number of events per category.
    per_quarter : Dict[int, Counter]
        Event category counts keyed by quarter.
    events : List[Tuple[int, str, str]]
        ``(quarter, event_type, details)`` for every match event, in order.
    errors : List[Tuple[str, str]]
        ``(error_type, details)`` for every rejected input.
    """

    event_types: Counter = field(default_factory=Counter)
    per_quarter: Dict[int, Counter] = field(default_factory=lambda: defaultdict(Counter))
    events: List[Tuple[int, str, str]] = field(default_factory=list)
    errors: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def quarters_completed(self) -> int:
        """Return how many ``quarter_end`` markers the trace contains."""
        return self.event_types["quarter_end"]


def summarize(lines: Iterable[str]) -> LogSummary:
    """Tally match events and input errors from trace lines.

    Parameters
    ----------
    lines : Iterable[str]
        Raw lines of a trace file; unrelated lines are ignored.

    Returns
    -------
    LogSummary
        Counts in the order the lines were read.
    """
    summary = LogSummary()
    for line in lines:
        line = line.rstrip("\n")
        match = MATCH_EVENT_RE.search(line)
        if match:
            quarter, event_type, details = int(match.group(1)), match.group(2), match.group(3)
            summary.event_types[event_type] += 1
            summary.per_quarter[quarter][event_type] += 1
            summary.events.append((quarter, event_type, details))
            continue
        error = ERROR_RE.search(line)
        if error:
            summary.errors.append((error.group(1), error.group(2)))
    return summary


def parse_log_file(path: str) -> LogSummary:
    """Summarise a trace file on disk.

    Parameters
    ----------
    path : str
        Location of a ``match_debug_*.txt`` file.

    Returns
    -------
    LogSummary
        Counts recovered from the file.

    Raises
    ------
    FileNotFoundError
        Raised when ``path`` does not exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Log file not found: {path}")

    with p.open("r", encoding="utf-8") as fh:
        return summarize(fh)
