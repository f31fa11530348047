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
"""Print a summary of a match trace written with ``--debug-log-dir``."""
import sys
from pathlib import Path

from hockeyboard.utils.log_summary import parse_log_file

EVENT_LABELS = {
    "goal": "Goals",
    "card": "Cards",
    "penalty_corner": "Penalty corners",
    "quarter_start": "Quarter starts",
    "quarter_end": "Quarter ends",
}


def main() -> None:
    """Parse the trace named on the command line and print its counts."""
    if len(sys.argv) < 2:
        print("Usage: python tools/analyze_match_log.py <log_file_path>")
        print("\nExample:")
        print("  python tools/analyze_match_log.py debug_logs/match_debug_20251217_201500.txt")
        sys.exit(1)

    log_path = Path(sys.argv[1])

    if not log_path.exists():
        print(f"Error: Log file not found: {log_path}")
        sys.exit(1)

    print(f"Analyzing: {log_path.name}")
    print("=" * 60)

    summary = parse_log_file(str(log_path))

    print("\n=== EVENT SUMMARY ===")
    for event_type, label in EVENT_LABELS.items():
        print(f"  {label}: {summary.event_types[event_type]}")

    print("\n=== PER QUARTER ===")
    for quarter in sorted(summary.per_quarter):
        counts = summary.per_quarter[quarter]
        print(
            f"  Q{quarter}: {counts['goal']} goals, {counts['card']} cards, "
            f"{counts['penalty_corner']} penalty corners"
        )

    print(f"\nQuarters completed: {summary.quarters_completed}")
    if summary.quarters_completed < 4:
        print("  ⚠️  Match ended early")

    if summary.errors:
        print(f"\n=== INPUT ERRORS ({len(summary.errors)}) ===")
        for error_type, details in summary.errors:
            print(f"  {error_type}: {details}")

    print("\n" + "=" * 60)
    print("Analysis complete!")


if __name__ == "__main__":
    main()
