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
"""Entry point for interactive scoreboard sessions."""
import argparse
from dataclasses import replace
from typing import List, Optional

from hockeyboard.console.session import ScoreboardSession
from hockeyboard.engine.config import ENGINE_CONFIG, EngineConfig
from hockeyboard.utils.debug import MatchDebugger


def build_parser() -> argparse.ArgumentParser:
    """Describe the command-line options.

    Returns
    -------
    argparse.ArgumentParser
        Parser for the ``hockeyboard`` command.
    """
    parser = argparse.ArgumentParser(prog="hockeyboard", description="Field hockey scoreboard simulator")
    parser.add_argument("--home", help="Home team name (skips the prompt)")
    parser.add_argument("--away", help="Away team name (skips the prompt)")
    parser.add_argument(
        "--debug-log-dir",
        metavar="DIR",
        help="Write a match trace file into DIR",
    )
    parser.add_argument("--window", action="store_true", help="Also show the scoreboard in a pygame window")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the terminal between redraws")
    parser.add_argument("--ask-scorer", action="store_true", help="Prompt for a scorer name after each goal")
    return parser


def main(argv: Optional[List[str]] = None, config: Optional[EngineConfig] = None) -> None:
    """Run one match from the terminal.

    Parameters
    ----------
    argv : List[str] | None, optional
        Command-line arguments; ``sys.argv[1:]`` when ``None``.
    config : EngineConfig | None, optional
        Configuration tree. Defaults to ``ENGINE_CONFIG``.
    """
    args = build_parser().parse_args(argv)
    config = config or ENGINE_CONFIG
    if args.ask_scorer:
        config = replace(config, console=replace(config.console, ask_scorer=True))

    debugger = MatchDebugger(args.debug_log_dir) if args.debug_log_dir else None

    window = None
    if args.window:
        try:
            from hockeyboard.visualizer.visualizer import ScoreboardWindow

            window = ScoreboardWindow(config.window)
        except Exception as e:
            # pygame missing or no display available; keep going with the console only
            print(f"Scoreboard window unavailable: {e}")

    session = ScoreboardSession(config=config, debugger=debugger, window=window, clear=not args.no_clear)
    try:
        session.run(args.home, args.away)
    finally:
        if session.window is not None:
            session.window.close()
        if debugger is not None:
            debugger.close()
            print(f"Match trace written to {debugger.log_path}")


if __name__ == "__main__":
    main()
