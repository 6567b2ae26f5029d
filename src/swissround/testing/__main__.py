"""Testing CLI for Swiss Round.

Simulate seeded tournaments and validate saved ones, either from the
command line or from an interactive console.
"""

# Swiss Round
# Copyright (C) 2025  Swiss Round developers
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
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from swissround.controllers.tournament import StandingsCalculator
from swissround.exceptions import SwissRoundException
from swissround.storage import JsonTournamentStore
from swissround.testing.simulator import SimulationConfig, TournamentSimulator
from swissround.testing.validator import TournamentValidator
from swissround.utils import setup_logger

logger = setup_logger(__name__)

PROMPT = "swissround-test> "
EXIT_WORDS = ("exit", "quit", "q")
HELP_WORDS = ("help", "?", "list")

# SGR parameters for each kind of console text
_SGR = {
    "title": "1;94",
    "strong": "1",
    "ok": "92",
    "warn": "93",
    "error": "91",
    "flag": "96",
}


def paint(text: str, kind: str) -> str:
    """Wrap ``text`` in the ANSI escape for ``kind``."""
    return f"\033[{_SGR[kind]}m{text}\033[0m"


# An argparse option: flag plus add_argument keyword arguments
Option = Tuple[str, Dict[str, Any]]

SIMULATE_OPTIONS: Sequence[Option] = (
    ("--players", {"type": int, "default": 8, "help": "number of competitors"}),
    ("--rounds", {"type": int, "default": 5, "help": "number of rounds"}),
    ("--seed", {"type": int, "help": "random seed for reproducible runs"}),
    ("--draws", {"type": int, "default": 30, "help": "draw percentage"}),
    ("--bye-score", {"type": float, "default": 1.0, "help": "points for a bye"}),
    ("--output", {"help": "save the tournament to this JSON file"}),
    ("--validate", {"action": "store_true", "help": "check the result afterwards"}),
)

VALIDATE_OPTIONS: Sequence[Option] = (
    ("--file", {"required": True, "help": "saved tournament (JSON)"}),
    ("--detailed", {"action": "store_true", "help": "list every violation"}),
    ("--export", {"help": "write the report to this JSON file"}),
)


# ========== Output ==========


def print_report(report, detailed: bool = False):
    print(f"\n{paint('Validation', 'strong')}: ", end="")
    print(paint(report.summary, "ok" if report.is_valid else "error"))
    if not detailed:
        return
    for v in report.violations:
        where = f"R{v.round_number}" if v.round_number else ""
        if v.table_number:
            where += f" T{v.table_number}"
        print(f"  - [{v.check}] {where} {v.message}")


def print_top(tournament, count: int = 5):
    standings = StandingsCalculator().standings(tournament.competitors)
    print(f"\n{paint('Leaders', 'strong')}")
    for rank, competitor in enumerate(standings[:count], start=1):
        print(
            f"  {rank}. {competitor.name:20} {competitor.score:4.1f} "
            f"(Buchholz {competitor.buchholz:.1f})"
        )


# ========== Subcommands ==========


def run_simulate_command(args: argparse.Namespace) -> int:
    """Simulate one tournament, show the leaders, optionally save and check it."""
    config = SimulationConfig(
        num_competitors=args.players,
        num_rounds=args.rounds,
        seed=args.seed,
        draw_percentage=args.draws,
        bye_score=args.bye_score,
    )
    result = TournamentSimulator(config).simulate()
    tournament = result.tournament

    print(
        f"{paint('Simulated', 'title')} {len(tournament.competitors)} competitors, "
        f"{result.rounds_played}/{config.num_rounds} rounds"
    )
    if not result.completed:
        print(paint(f"Stopped early: {result.stopped_reason}", "warn"))
    print_top(tournament)

    if args.output:
        JsonTournamentStore(args.output).save(tournament)
        print(paint(f"Saved to {args.output}", "ok"))

    if not args.validate:
        return 0
    report = TournamentValidator().validate(tournament)
    print_report(report, detailed=True)
    return 0 if report.is_valid else 1


def run_validate_command(args: argparse.Namespace) -> int:
    """Check a saved tournament and optionally export the report."""
    file_path = Path(args.file)
    if not file_path.exists():
        print(paint(f"No such file: {file_path}", "error"))
        return 1

    tournament = JsonTournamentStore(file_path).load()
    report = TournamentValidator().validate(tournament)
    print(f"{paint('Checked', 'title')} {file_path}")
    print_report(report, detailed=args.detailed)

    if args.export:
        export_path = Path(args.export)
        export_path.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")
        print(paint(f"Report written to {export_path}", "ok"))

    return 0 if report.is_valid else 1


@dataclass(frozen=True)
class Subcommand:
    """One CLI subcommand; its options drive parsing, help and completion."""

    summary: str
    options: Sequence[Option]
    run: Callable[[argparse.Namespace], int]

    @property
    def flags(self) -> List[str]:
        return [flag for flag, _ in self.options]

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        for flag, kwargs in self.options:
            parser.add_argument(flag, **kwargs)

    def parser(self, name: str) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=name, description=self.summary)
        self.add_arguments(parser)
        return parser


SUBCOMMANDS: Dict[str, Subcommand] = {
    "simulate": Subcommand(
        "Simulate a seeded random tournament", SIMULATE_OPTIONS, run_simulate_command
    ),
    "validate": Subcommand(
        "Validate a saved tournament", VALIDATE_OPTIONS, run_validate_command
    ),
}


def create_main_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swissround-test",
        description="Simulate and validate Swiss Round tournaments.",
        epilog="Run without arguments for the interactive console.",
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="start the console"
    )
    subparsers = parser.add_subparsers(dest="command")
    for name, sub in SUBCOMMANDS.items():
        sub_parser = subparsers.add_parser(name, help=sub.summary)
        sub.add_arguments(sub_parser)
        sub_parser.set_defaults(func=sub.run)
    return parser


# ========== Interactive console ==========


def console_overview() -> str:
    """One line per subcommand, plus the console's own words."""
    width = max(len(name) for name in SUBCOMMANDS) + 2
    lines = [paint("Commands", "strong")]
    lines += [
        f"  {paint(name.ljust(width), 'flag')}{sub.summary}"
        for name, sub in SUBCOMMANDS.items()
    ]
    lines.append(f"  {'help'.ljust(width)}help <command> for its options")
    lines.append(f"  {'exit'.ljust(width)}leave the console")
    return "\n".join(lines)


def console_help(name: str) -> str:
    sub = SUBCOMMANDS.get(name)
    if sub is None:
        return paint(f"Unknown command: {name}", "error") + "\n" + console_overview()
    return sub.parser(name).format_help()


def create_completer() -> NestedCompleter:
    """Complete subcommand names, their flags, and ``help <command>``."""
    tree: Dict[str, Optional[WordCompleter]] = {
        name: WordCompleter(sub.flags, WORD=True)
        for name, sub in SUBCOMMANDS.items()
    }
    tree["help"] = WordCompleter(list(SUBCOMMANDS))
    for word in EXIT_WORDS[:2]:
        tree[word] = None
    return NestedCompleter.from_nested_dict(tree)


def run_console_line(line: str) -> bool:
    """Execute one console line. Returns False when the console should close."""
    words = line.split()
    if not words:
        return True
    name, rest = words[0].lstrip("/"), words[1:]

    if name in EXIT_WORDS:
        return False
    if name in HELP_WORDS:
        print(console_help(rest[0].lstrip("/")) if rest else console_overview())
        return True

    sub = SUBCOMMANDS.get(name)
    if sub is None:
        print(paint(f"Unknown command: {name}", "error") + " (try help)")
        return True
    try:
        sub.run(sub.parser(name).parse_args(rest))
    except SystemExit:
        # argparse already printed the usage error
        pass
    except SwissRoundException as e:
        logger.exception(f"Console command failed: {line}")
        print(paint(f"Error: {e}", "error"))
    return True


def run_interactive_mode() -> int:
    print(paint("Swiss Round test console", "title"))
    print("help lists the commands, exit leaves.\n")
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )
    while True:
        try:
            if not run_console_line(session.prompt(PROMPT)):
                break
        except KeyboardInterrupt:
            print(paint("Type exit to leave", "warn"))
        except EOFError:
            break
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``swissround-test`` and ``python -m swissround.testing``."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        return run_interactive_mode()

    parser = create_main_parser()
    args = parser.parse_args(argv)
    if args.interactive:
        return run_interactive_mode()
    if args.command is None:
        parser.print_help()
        return 0
    try:
        return args.func(args)
    except SwissRoundException as e:
        print(paint(f"Error: {e}", "error"))
        return 1


if __name__ == "__main__":
    sys.exit(main())
