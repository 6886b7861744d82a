"""Interactive shell for running a rotation week by week.

The shell keeps a roster and meeting history in memory, proposes rounds,
and writes the rotation back to its save file after every change.
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

import shlex
import sys
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Union

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.shortcuts import confirm as confirm_prompt
from prompt_toolkit.styles import Style

from rotationpairing.controllers.rotation_manager import RotationManager
from rotationpairing.exceptions import RotationPairingException
from rotationpairing.storage import read_roster_file, save_rotation, write_roster_file
from rotationpairing.utils import setup_logger

logger = setup_logger(__name__)


# Command definitions with their usage
COMMANDS = {
    "list": {"description": "Show everyone on the roster", "usage": "list"},
    "add": {"description": "Add one or more people", "usage": "add NAME [NAME ...]"},
    "remove": {
        "description": "Remove people and their meeting history",
        "usage": "remove ID [ID ...]",
    },
    "rename": {"description": "Change a display name", "usage": "rename ID NAME"},
    "import": {
        "description": "Replace the roster from a file (clears history)",
        "usage": "import FILE",
    },
    "export": {"description": "Write roster names to a file", "usage": "export FILE"},
    "generate": {
        "description": "Propose groups for the next round",
        "usage": "generate",
    },
    "confirm": {"description": "Record the proposed round", "usage": "confirm"},
    "discard": {"description": "Drop the proposed round", "usage": "discard"},
    "rounds": {"description": "List confirmed rounds", "usage": "rounds"},
    "meetings": {"description": "Show who has met whom", "usage": "meetings"},
    "clear": {"description": "Forget all meeting history", "usage": "clear"},
    "save": {"description": "Save the rotation", "usage": "save [FILE]"},
    "help": {"description": "Show help for a command", "usage": "help [COMMAND]"},
    "exit": {"description": "Leave the shell", "usage": "exit"},
}

# Commands that change the rotation and trigger an autosave
MODIFYING_COMMANDS = {"add", "remove", "rename", "import", "confirm", "clear"}

EXIT_WORDS = ("exit", "quit", "q")


class RotationShell:
    """Command interpreter around a :class:`RotationManager`.

    Input handling is separate from the prompt loop so the shell can be
    driven line by line.
    """

    def __init__(
        self,
        rotation: RotationManager,
        state_path: Optional[Union[str, Path]] = None,
        out: TextIO = sys.stdout,
        confirm: Optional[Callable[[str], bool]] = None,
    ):
        self.rotation = rotation
        self.state_path = Path(state_path) if state_path else None
        self.out = out
        self.confirm = confirm or confirm_prompt

    def write(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def handle(self, line: str) -> bool:
        """Run one input line. Returns False when the shell should exit."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.write(f"Error: {e}")
            return True
        if not parts:
            return True

        command, args = parts[0].lstrip("/"), parts[1:]
        if command in EXIT_WORDS:
            return False
        if command == "?":
            command = "help"
        if command not in COMMANDS:
            self.write(f"Unknown command: {command}. Type 'help' to see commands.")
            return True

        handler = getattr(self, f"do_{command}")
        try:
            handler(args)
        except RotationPairingException as e:
            logger.warning(f"Command '{command}' failed: {e}")
            self.write(f"Error: {e}")
            return True

        if command in MODIFYING_COMMANDS and self.state_path is not None:
            save_rotation(self.state_path, self.rotation)
        return True

    def _usage(self, command: str) -> None:
        self.write(f"Usage: {COMMANDS[command]['usage']}")

    # ----- roster -----

    def do_list(self, args: List[str]) -> None:
        if not self.rotation.roster:
            self.write("No people yet. Use 'add NAME' or 'import FILE'.")
            return
        for person in self.rotation.roster:
            self.write(f"  {person.id:>4}  {person.name}")
        self.write(f"{len(self.rotation.roster)} people")

    def do_add(self, args: List[str]) -> None:
        if not args:
            self._usage("add")
            return
        for name in args:
            person = self.rotation.add_person(name)
            self.write(f"Added {person.name} ({person.id})")

    def do_remove(self, args: List[str]) -> None:
        if not args:
            self._usage("remove")
            return
        for person_id in args:
            person = self.rotation.remove_person(person_id)
            self.write(f"Removed {person.name} ({person.id})")

    def do_rename(self, args: List[str]) -> None:
        if len(args) < 2:
            self._usage("rename")
            return
        person = self.rotation.rename_person(args[0], " ".join(args[1:]))
        self.write(f"{person.id} is now {person.name}")

    def do_import(self, args: List[str]) -> None:
        if len(args) != 1:
            self._usage("import")
            return
        people = read_roster_file(args[0])
        if not people:
            self.write(f"No names found in {args[0]}")
            return
        if self.rotation.ledger.total_meetings() and not self.confirm(
            "Importing a roster clears all meeting history. Continue?"
        ):
            return
        self.rotation.import_roster(person.name for person in people)
        self.write(f"Imported {len(self.rotation.roster)} people")

    def do_export(self, args: List[str]) -> None:
        if len(args) != 1:
            self._usage("export")
            return
        write_roster_file(args[0], self.rotation.roster)
        self.write(f"Roster written to {args[0]}")

    # ----- rounds -----

    def do_generate(self, args: List[str]) -> None:
        from rotationpairing.cli import format_groups

        if len(self.rotation.roster) < 2:
            self.write("At least two people are needed to generate a round.")
            return
        groups = self.rotation.propose_round()
        self.write(f"Round {self.rotation.current_round_number + 1} proposal:")
        format_groups(groups, self.out)
        self.write("Type 'confirm' to record it or 'generate' to try again.")

    def do_confirm(self, args: List[str]) -> None:
        record = self.rotation.confirm_round()
        self.write(f"Round {record.round_number} confirmed and added to history.")

    def do_discard(self, args: List[str]) -> None:
        if self.rotation.discard_round():
            self.write("Proposal discarded.")
        else:
            self.write("Nothing to discard.")

    def do_rounds(self, args: List[str]) -> None:
        if not self.rotation.rounds:
            self.write("No rounds confirmed yet.")
            return
        for record in self.rotation.rounds:
            when = record.time_since()
            suffix = f", {when}" if when else ""
            self.write(
                f"  Round {record.round_number}: {len(record.groups)} groups, "
                f"repeat score {record.total_score}{suffix}"
            )

    def do_meetings(self, args: List[str]) -> None:
        summary = self.rotation.meeting_summary()
        if not summary:
            self.write("No meetings recorded.")
            return
        for first, second, count in summary:
            self.write(f"  {first.name} - {second.name}: {count}")

    def do_clear(self, args: List[str]) -> None:
        if self.confirm("Are you sure you want to clear all meeting history?"):
            self.rotation.clear_history()
            self.write("Meeting history cleared.")

    def do_save(self, args: List[str]) -> None:
        path = Path(args[0]) if args else self.state_path
        if path is None:
            self._usage("save")
            return
        save_rotation(path, self.rotation)
        self.state_path = path
        self.write(f"Rotation saved to {path}")

    def do_help(self, args: List[str]) -> None:
        if args:
            command = args[0].lstrip("/")
            if command not in COMMANDS:
                self.write(f"Unknown command: {command}")
                return
            info = COMMANDS[command]
            self.write(f"{info['usage']}: {info['description']}")
            return
        self.write("Available commands:")
        for command, info in COMMANDS.items():
            self.write(f"  {command:10} - {info['description']}")


def create_completer() -> NestedCompleter:
    """Complete command names, and command names again after 'help'."""
    completions = {command: None for command in COMMANDS}
    completions["help"] = WordCompleter(list(COMMANDS))
    return NestedCompleter.from_nested_dict(completions)


def run_shell(
    rotation: RotationManager, state_path: Optional[Union[str, Path]] = None
) -> int:
    """Run the interactive prompt until the user exits."""
    shell = RotationShell(rotation, state_path)
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#aa5500 bold"}),
    )
    shell.write(
        f"Rotation with {len(rotation.roster)} people and "
        f"{rotation.current_round_number} confirmed rounds. Type 'help' for commands."
    )

    while True:
        try:
            line = session.prompt("rotation> ")
        except KeyboardInterrupt:
            shell.write("Use 'exit' or 'quit' to leave")
            continue
        except EOFError:
            break
        if not shell.handle(line):
            break

    shell.write("Goodbye!")
    return 0
