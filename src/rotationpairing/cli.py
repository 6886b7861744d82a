"""Command-line interface for Rotation Pairing.

This module provides small commands around the matching engine: suggest a
round from a meeting log, run a multi-round simulation, and drive a saved
rotation one round at a time.
"""

# Rotation Pairing
# Copyright (C) 2026  Rotation Pairing developers
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
import random
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Tuple

from rotationpairing.constants import (
    DEFAULT_SIMULATION_PEOPLE,
    DEFAULT_SIMULATION_ROUNDS,
    DIRECT_PAIR_SIZE,
    GROUP_PAIR,
    GROUP_TRIPLE,
)
from rotationpairing.controllers.rotation_manager import RotationManager
from rotationpairing.exceptions import RotationPairingException
from rotationpairing.models import (
    GroupResult,
    MeetingLedger,
    Person,
    RotationConfig,
    total_score,
)
from rotationpairing.pairing import generate_matching, update_history
from rotationpairing.storage import (
    load_config,
    load_rotation,
    read_history_csv,
    read_roster_file,
    roster_from_names,
    save_rotation,
)
from rotationpairing.utils import set_log_level, setup_logger

logger = setup_logger(__name__)


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Value must be at least 1, got {number}")
    return number


def format_groups(groups: Sequence[GroupResult], out: TextIO) -> None:
    """Print numbered groups followed by round totals."""
    for index, group in enumerate(groups, start=1):
        names = ", ".join(person.name for person in group.people)
        out.write(f"{index}. {group.kind}: [{names}] (score: {group.score})\n")
    pairs = sum(1 for g in groups if g.kind == GROUP_PAIR)
    triples = sum(1 for g in groups if g.kind == GROUP_TRIPLE)
    out.write(
        f"\nTotal: {len(groups)} groups ({pairs} pairs, {triples} triples)\n"
        f"Total repeat score: {total_score(groups)}\n"
    )


def _resolve_config(args: argparse.Namespace) -> RotationConfig:
    if getattr(args, "config", None):
        return load_config(args.config)
    return RotationConfig()


# ========== Commands ==========


def cmd_suggest(args: argparse.Namespace, out: TextIO) -> int:
    ledger = read_history_csv(args.history)
    if args.roster:
        roster = read_roster_file(args.roster)
    else:
        roster = roster_from_names(ledger.people())
    out.write(
        f"Loaded {len(roster)} people and "
        f"{ledger.total_meetings()} historical pairings\n\n"
    )

    groups = generate_matching(roster, ledger, _resolve_config(args))
    if args.json:
        out.write(json.dumps([group.to_dict() for group in groups], indent=2) + "\n")
    else:
        out.write("Generated matching:\n")
        format_groups(groups, out)
    return 0


def simulate_rounds(
    num_people: int,
    num_rounds: int,
    seed: Optional[int] = None,
    config: Optional[RotationConfig] = None,
) -> Tuple[List[List[GroupResult]], MeetingLedger]:
    """Run successive generate/update rounds over synthetic people.

    With a seed, the roster order is shuffled before every round.

    Returns:
        Tuple of (groups of every round, final ledger)
    """
    roster = [Person(id=str(i), name=f"Person {i}") for i in range(1, num_people + 1)]
    rng = random.Random(seed) if seed is not None else None
    ledger = MeetingLedger()
    rounds: List[List[GroupResult]] = []
    for _ in range(num_rounds):
        order = list(roster)
        if rng is not None:
            rng.shuffle(order)
        groups = generate_matching(order, ledger, config)
        ledger = update_history(ledger, groups)
        rounds.append(groups)
    return rounds, ledger


def cmd_simulate(args: argparse.Namespace, out: TextIO) -> int:
    rounds, ledger = simulate_rounds(
        args.people, args.rounds, args.seed, _resolve_config(args)
    )
    for number, groups in enumerate(rounds, start=1):
        out.write(f"Round {number}:\n")
        format_groups(groups, out)
        out.write("\n")

    out.write("Meeting counts:\n")
    for (a, b), count in ledger.pairs():
        out.write(f"  {a}-{b}: {count}\n")
    return 0


def cmd_round(args: argparse.Namespace, out: TextIO) -> int:
    state = Path(args.state)
    if state.exists():
        rotation = load_rotation(state)
    else:
        rotation = RotationManager(config=_resolve_config(args))

    for name in args.add or []:
        rotation.add_person(name)
    for person_id in args.remove or []:
        rotation.remove_person(person_id)

    if len(rotation.roster) < DIRECT_PAIR_SIZE:
        out.write("At least two people are needed to propose a round.\n")
        save_rotation(state, rotation)
        return 1

    groups = rotation.propose_round()
    out.write(f"Round {rotation.current_round_number + 1} proposal:\n")
    format_groups(groups, out)

    if args.confirm:
        record = rotation.confirm_round()
        out.write(f"\nRound {record.round_number} confirmed.\n")
    save_rotation(state, rotation)
    return 0


def cmd_shell(args: argparse.Namespace, out: TextIO) -> int:
    from rotationpairing.shell import run_shell

    state = Path(args.state)
    if state.exists():
        rotation = load_rotation(state)
    else:
        rotation = RotationManager(config=_resolve_config(args))
    return run_shell(rotation, state)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rotation-pairing",
        description=(
            "Pair people for a recurring rotation, "
            "repeating as few past meetings as possible."
        ),
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the ROTATION_PAIRING_LOG_LEVEL environment variable",
    )
    parser.add_argument("--config", help="JSON file with engine settings")
    subparsers = parser.add_subparsers(dest="command", required=True)

    suggest = subparsers.add_parser("suggest", help="Suggest groups from a meeting log")
    suggest.add_argument("--history", required=True, help="CSV with Left,Right rows")
    suggest.add_argument("--roster", help="File with one name per line")
    suggest.add_argument("--json", action="store_true", help="Print groups as JSON")
    suggest.set_defaults(handler=cmd_suggest)

    simulate = subparsers.add_parser("simulate", help="Run several rounds in a row")
    simulate.add_argument(
        "--people", type=positive_int, default=DEFAULT_SIMULATION_PEOPLE
    )
    simulate.add_argument(
        "--rounds", type=positive_int, default=DEFAULT_SIMULATION_ROUNDS
    )
    simulate.add_argument(
        "--seed", type=int, help="Shuffle roster order with this seed"
    )
    simulate.set_defaults(handler=cmd_simulate)

    round_cmd = subparsers.add_parser(
        "round", help="Propose the next round of a saved rotation"
    )
    round_cmd.add_argument("--state", required=True, help="Rotation save file (JSON)")
    round_cmd.add_argument(
        "--add", action="append", metavar="NAME", help="Add a person"
    )
    round_cmd.add_argument(
        "--remove", action="append", metavar="ID", help="Remove a person"
    )
    round_cmd.add_argument("--confirm", action="store_true", help="Record the proposal")
    round_cmd.set_defaults(handler=cmd_round)

    shell = subparsers.add_parser("shell", help="Run a rotation interactively")
    shell.add_argument("--state", required=True, help="Rotation save file (JSON)")
    shell.set_defaults(handler=cmd_shell)

    return parser


def main(argv: Optional[Sequence[str]] = None, out: TextIO = sys.stdout) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        set_log_level(args.log_level)
    try:
        return args.handler(args, out)
    except RotationPairingException as e:
        logger.error(str(e))
        sys.stderr.write(f"Error: {e}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
