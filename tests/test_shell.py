from io import StringIO

import pytest

from rotationpairing.controllers import RotationManager
from rotationpairing.shell import COMMANDS, RotationShell, create_completer
from rotationpairing.storage import load_rotation


@pytest.fixture
def shell(tmp_path):
    answers = []

    def confirm(question):
        answers.append(question)
        return True

    shell = RotationShell(
        RotationManager(), tmp_path / "rotation.json", StringIO(), confirm
    )
    shell.questions = answers
    return shell


def output(shell):
    text = shell.out.getvalue()
    shell.out.seek(0)
    shell.out.truncate()
    return text


def test_add_list_and_autosave(shell):
    assert shell.handle('add Ann Bob "Cy Young"')
    assert "Added Cy Young (3)" in output(shell)

    shell.handle("list")
    text = output(shell)
    assert "Cy Young" in text
    assert "3 people" in text

    saved = load_rotation(shell.state_path)
    assert [p.name for p in saved.roster] == ["Ann", "Bob", "Cy Young"]


def test_generate_confirm_and_rounds(shell):
    shell.handle("add Ann Bob Cy Dee")
    output(shell)

    shell.handle("generate")
    assert "Round 1 proposal:" in output(shell)

    shell.handle("confirm")
    assert "Round 1 confirmed" in output(shell)
    assert load_rotation(shell.state_path).current_round_number == 1

    shell.handle("rounds")
    assert "Round 1: 2 groups, repeat score 0, today" in output(shell)

    shell.handle("meetings")
    assert ": 1" in output(shell)


def test_generate_needs_two_people(shell):
    shell.handle("add Ann")
    output(shell)
    shell.handle("generate")
    assert "At least two people" in output(shell)
    assert shell.rotation.pending is None


def test_errors_are_reported_not_raised(shell):
    assert shell.handle("confirm")
    assert "Error: No proposed round to confirm" in output(shell)
    assert shell.handle("remove 42")
    assert "Error:" in output(shell)
    assert shell.handle('add "unterminated')
    assert "Error:" in output(shell)


def test_unknown_command_and_help(shell):
    shell.handle("dance")
    assert "Unknown command: dance" in output(shell)

    shell.handle("/help")
    text = output(shell)
    assert all(command in text for command in COMMANDS)

    shell.handle("help rename")
    assert "rename ID NAME" in output(shell)


def test_rename_and_remove(shell):
    shell.handle("add Ann Bob Cy")
    shell.handle("rename 1 Annie Hall")
    assert "1 is now Annie Hall" in output(shell)
    shell.handle("remove 2")
    assert [p.id for p in shell.rotation.roster] == ["1", "3"]


def test_clear_asks_first(shell):
    shell.handle("add Ann Bob")
    shell.handle("generate")
    shell.handle("confirm")
    shell.handle("clear")
    assert shell.questions
    assert shell.rotation.ledger.total_meetings() == 0


def test_clear_can_be_declined(tmp_path):
    rotation = RotationManager()
    rotation.add_person("Ann")
    rotation.add_person("Bob")
    rotation.propose_round()
    rotation.confirm_round()
    shell = RotationShell(rotation, None, StringIO(), lambda question: False)
    shell.handle("clear")
    assert rotation.ledger.total_meetings() == 1


def test_import_and_export(shell, tmp_path):
    roster = tmp_path / "people.csv"
    roster.write_text("Name\nAnn\nBob\nCy\n", encoding="utf-8")
    shell.handle(f"import {roster}")
    assert "Imported 3 people" in output(shell)
    assert [p.id for p in shell.rotation.roster] == ["1", "2", "3"]

    exported = tmp_path / "out.txt"
    shell.handle(f"export {exported}")
    assert exported.read_text(encoding="utf-8") == "Ann\nBob\nCy\n"


def test_save_to_other_file(shell, tmp_path):
    other = tmp_path / "other.json"
    shell.handle(f"save {other}")
    assert other.exists()
    assert shell.state_path == other


@pytest.mark.parametrize("word", ["exit", "quit", "q", "/exit"])
def test_exit_words(shell, word):
    assert shell.handle(word) is False


def test_blank_line_is_ignored(shell):
    assert shell.handle("   ")
    assert output(shell) == ""


def test_completer_knows_commands():
    assert create_completer() is not None
