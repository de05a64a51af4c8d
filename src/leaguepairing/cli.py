"""Command-line interface for League Pairing.

Prints bracket skeletons, Swiss pairings and standings for tournament files,
runs simulated tournaments, and offers an interactive shell with completion.
"""

# League Pairing
# Copyright (C) 2025  League Pairing developers
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
import shlex
import sys
from typing import Dict, List, Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from leaguepairing.bracket import (
    generate_single_elimination_bracket,
    get_round_label,
    total_bracket_rounds,
)
from leaguepairing.constants import FORMAT_SINGLE_ELIMINATION, FORMAT_SWISS
from leaguepairing.exceptions import LeaguePairingException, TournamentFileException
from leaguepairing.swiss import (
    SwissRoundResult,
    compute_swiss_standings,
    generate_swiss_next_round,
    generate_swiss_round1,
    get_swiss_ranking,
)
from leaguepairing.testing.rtg import RandomTournamentGenerator, ResultPattern, RTGConfig
from leaguepairing.tournament_file import TournamentFile
from leaguepairing.utils import configure_logging, setup_logger
from leaguepairing.validation import validate_swiss_round

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def _names(tournament: TournamentFile) -> Dict[str, str]:
    return {p.id: p.name for p in tournament.participants}


def _print_round(round_result: SwissRoundResult, names: Dict[str, str]) -> None:
    for board, (first, second) in enumerate(round_result.pairing_ids, start=1):
        print(f"  {board:>3}. {names.get(first, first)} vs {names.get(second, second)}")
    if round_result.bye_participant_id is not None:
        bye = round_result.bye_participant_id
        print(f"  Bye: {names.get(bye, bye)}")


def _emit_json(data) -> None:
    print(json.dumps(data, indent=2))


def run_bracket_command(args) -> int:
    """Print the bracket skeleton for a participant count."""
    slots = generate_single_elimination_bracket(args.participants)
    if args.json:
        _emit_json([slot.to_dict() for slot in slots])
        return 0

    total_rounds = total_bracket_rounds(args.participants)
    current_round = 0
    for slot in slots:
        if slot.round != current_round:
            current_round = slot.round
            label = get_round_label(current_round, total_rounds)
            print(f"\n{Colors.BOLD}{label}{Colors.ENDC}")
        if slot.round == 1:
            first = f"#{slot.seed1}" if slot.seed1 is not None else "BYE"
            second = f"#{slot.seed2}" if slot.seed2 is not None else "BYE"
            line = f"  Match {slot.position}: {first} vs {second}"
        else:
            line = f"  Match {slot.position}"
        if slot.next_position is not None:
            target = slot.next_position
            line += f" -> R{target.round} M{target.position} (slot {target.slot})"
        print(line)
    return 0


def run_round1_command(args) -> int:
    """Print round 1 pairings for the participants in a tournament file."""
    tournament = TournamentFile.load(args.file)
    round_result = generate_swiss_round1(tournament.participants)
    if args.json:
        _emit_json(round_result.to_dict())
        return 0
    print(f"{Colors.BOLD}{tournament.name} - Round 1{Colors.ENDC}")
    _print_round(round_result, _names(tournament))
    return 0


def run_next_round_command(args) -> int:
    """Print the next Swiss pairings from a tournament file's history."""
    tournament = TournamentFile.load(args.file)
    standings = compute_swiss_standings(
        tournament.participants, tournament.matches, strict=args.strict
    )
    round_result = generate_swiss_next_round(standings)
    if args.json:
        _emit_json(round_result.to_dict())
        return 0
    print(f"{Colors.BOLD}{tournament.name} - Next round{Colors.ENDC}")
    _print_round(round_result, _names(tournament))
    return 0


def run_standings_command(args) -> int:
    """Print the current Swiss ranking."""
    tournament = TournamentFile.load(args.file)
    standings = compute_swiss_standings(
        tournament.participants, tournament.matches, strict=args.strict
    )
    ranking = get_swiss_ranking(standings)
    if args.json:
        _emit_json([standing.to_dict() for standing in ranking])
        return 0

    print(f"{Colors.BOLD}{tournament.name} - Standings{Colors.ENDC}")
    print(f"  {'#':>3}  {'Name':<24} {'Pts':>5} {'Buch':>5} {'GP':>3}  W-D-L")
    for rank, s in enumerate(ranking, start=1):
        print(
            f"  {rank:>3}  {s.name:<24} {s.points:>5.1f} {s.buchholz:>5.1f}"
            f" {s.games_played:>3}"
            f"  {s.wins}-{s.draws}-{s.losses}"
        )
    return 0


def run_validate_command(args) -> int:
    """Validate the next round that would be paired from a tournament file."""
    tournament = TournamentFile.load(args.file)
    standings = compute_swiss_standings(tournament.participants, tournament.matches)
    if tournament.matches:
        round_result = generate_swiss_next_round(standings)
    else:
        round_result = generate_swiss_round1(tournament.participants)
    report = validate_swiss_round(round_result, standings)
    if args.json:
        _emit_json(report.to_dict())
    else:
        color = Colors.OKGREEN if report.is_valid else Colors.FAIL
        print(f"{color}{report.summary}{Colors.ENDC}")
        for result in report.criteria_results:
            print(f"  {result.criterion}: {result.status.value} - {result.description}")
    return 0 if report.is_valid else 1


def run_simulate_command(args) -> int:
    """Simulate a complete tournament."""
    config = RTGConfig(
        num_participants=args.players,
        num_rounds=args.rounds,
        tournament_format=args.format,
        result_pattern=ResultPattern(args.pattern),
        seed=args.seed,
        validate_rounds=args.validate,
        random_seeding=args.random_seeding,
    )
    tournament = RandomTournamentGenerator(config).generate_complete_tournament()

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                json.dump(tournament, f, indent=2)
        except OSError as e:
            raise TournamentFileException(f"Cannot write {args.output}: {e}") from e
        print(f"{Colors.OKGREEN}Tournament written to {args.output}{Colors.ENDC}")

    names = {p["id"]: p["name"] for p in tournament["participants"]}
    if tournament["format"] == FORMAT_SINGLE_ELIMINATION:
        champion = tournament["champion"]
        print(f"Champion: {names.get(champion, champion)}")
        return 0

    for rank, standing in enumerate(tournament["ranking"][: args.top], start=1):
        print(f"  {rank:>3}. {standing['name']:<24} {standing['points']:>5.1f}")
    if args.validate:
        failed = [
            r["round_number"]
            for r in tournament["rounds"]
            if r["validation"]["overall_status"] != "COMPLIANT"
        ]
        if failed:
            print(f"{Colors.FAIL}Invalid rounds: {failed}{Colors.ENDC}")
            return 1
    return 0


def _add_file_arguments(parser: argparse.ArgumentParser, strict: bool = True) -> None:
    parser.add_argument("--file", required=True, help="Tournament file (JSON)")
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    if strict:
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Reject malformed match records instead of skipping them",
        )


def create_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="league-pairing",
        description="Tournament pairing and standings for League Pairing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  league-pairing

  # Bracket skeleton for 12 entrants
  league-pairing bracket --participants 12

  # Next Swiss round from a tournament file
  league-pairing next-round --file tournament.json

  # Simulate a 20 player Swiss
  league-pairing simulate --players 20 --seed 7 --validate
        """,
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    bracket_parser = subparsers.add_parser("bracket", help="Single elimination bracket")
    bracket_parser.add_argument("--participants", type=int, required=True)
    bracket_parser.add_argument("--json", action="store_true")
    bracket_parser.set_defaults(func=run_bracket_command)

    round1_parser = subparsers.add_parser("round1", help="Swiss round 1 pairings")
    _add_file_arguments(round1_parser, strict=False)
    round1_parser.set_defaults(func=run_round1_command)

    next_parser = subparsers.add_parser("next-round", help="Next Swiss round pairings")
    _add_file_arguments(next_parser)
    next_parser.set_defaults(func=run_next_round_command)

    standings_parser = subparsers.add_parser("standings", help="Swiss standings")
    _add_file_arguments(standings_parser)
    standings_parser.set_defaults(func=run_standings_command)

    validate_parser = subparsers.add_parser("validate", help="Validate the next round")
    _add_file_arguments(validate_parser, strict=False)
    validate_parser.set_defaults(func=run_validate_command)

    sim_parser = subparsers.add_parser("simulate", help="Simulate a tournament")
    sim_parser.add_argument("--players", type=int, default=16)
    sim_parser.add_argument("--rounds", type=int, help="Swiss rounds (default: log2)")
    sim_parser.add_argument(
        "--format",
        choices=[FORMAT_SWISS, FORMAT_SINGLE_ELIMINATION],
        default=FORMAT_SWISS,
    )
    sim_parser.add_argument(
        "--pattern",
        choices=[p.value for p in ResultPattern],
        default=ResultPattern.BALANCED.value,
    )
    sim_parser.add_argument("--seed", type=int)
    sim_parser.add_argument("--top", type=int, default=10, help="Ranking rows to show")
    sim_parser.add_argument("--output", help="Write the tournament JSON here")
    sim_parser.add_argument("--validate", action="store_true")
    sim_parser.add_argument(
        "--random-seeding",
        action="store_true",
        help="Shuffle bracket seeds instead of seeding by strength",
    )
    sim_parser.set_defaults(func=run_simulate_command)

    return parser


def create_completer() -> NestedCompleter:
    """Completer for the interactive shell, built from the subcommands."""
    parser = create_parser()
    commands: Dict[str, Optional[dict]] = {}
    for action in parser._subparsers._group_actions:
        for name, subparser in action.choices.items():
            options = {
                option: None
                for sub_action in subparser._actions
                for option in sub_action.option_strings
                if option.startswith("--")
            }
            commands[name] = options or None
    commands.update({"help": None, "exit": None, "quit": None})
    return NestedCompleter.from_nested_dict(commands)


def execute(parser: argparse.ArgumentParser, argv: Sequence[str]) -> int:
    """Parse ``argv`` and run the selected subcommand."""
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    try:
        return args.func(args)
    except LeaguePairingException as e:
        logger.error("Command failed: %s", e)
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}", file=sys.stderr)
        return 1


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print(f"{Colors.HEADER}{Colors.BOLD}League Pairing{Colors.ENDC}")
    print("Type 'help' for commands, 'exit' to leave.\n")

    parser = create_parser()
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )

    while True:
        try:
            user_input = session.prompt("league> ").strip()
        except KeyboardInterrupt:
            print(f"{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
            continue
        except EOFError:
            break

        if not user_input:
            continue
        if user_input in ("exit", "quit", "q"):
            break
        if user_input in ("help", "?"):
            parser.print_help()
            continue

        try:
            execute(parser, shlex.split(user_input))
        except SystemExit:
            # argparse exits on bad arguments; stay in the shell
            continue

    print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the league-pairing CLI."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv or "--interactive" in argv or "-i" in argv:
        return run_interactive_mode()
    return execute(create_parser(), argv)


if __name__ == "__main__":
    sys.exit(main())
