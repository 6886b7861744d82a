from datetime import date

import pytest

from rotationpairing.controllers import RotationManager
from rotationpairing.exceptions import (
    DuplicatePersonException,
    InvalidPersonDataException,
    RosterException,
)
from rotationpairing.models import MeetingLedger, Person


@pytest.fixture
def manager():
    rotation = RotationManager()
    for name in ["Alice", "Bob", "Charlie", "Diana", "Eve"]:
        rotation.add_person(name)
    return rotation


def test_add_person_generates_ids(manager):
    assert [person.id for person in manager.roster] == ["1", "2", "3", "4", "5"]
    assert manager.add_person("Frank").id == "6"


def test_add_person_continues_after_loaded_ids():
    rotation = RotationManager(roster=[Person("10", "Ann")])
    assert rotation.add_person("Bob").id == "11"


def test_add_person_rejects_blank_and_duplicates(manager):
    with pytest.raises(InvalidPersonDataException):
        manager.add_person("  ")
    with pytest.raises(DuplicatePersonException):
        manager.add_person("Other Alice", person_id="1")


def test_rename_keeps_history(manager):
    manager.ledger = MeetingLedger.from_pairs([("1", "2")])
    manager.rename_person("1", "Alicia")
    assert manager.find_person("1").name == "Alicia"
    assert manager.ledger.count("1", "2") == 1
    with pytest.raises(RosterException):
        manager.rename_person("99", "Nobody")


def test_propose_does_not_touch_ledger(manager):
    groups = manager.propose_round()
    assert len(groups) == 2
    assert manager.ledger == MeetingLedger()
    assert manager.current_round_number == 0


def test_confirm_records_round(manager):
    groups = manager.propose_round()
    record = manager.confirm_round()

    assert record.round_number == 1
    assert record.groups == groups
    assert manager.current_round_number == 1
    assert manager.pending is None
    assert manager.ledger.total_meetings() == 4


def test_confirm_without_proposal_fails(manager):
    with pytest.raises(RosterException):
        manager.confirm_round()


def test_discard_round(manager):
    assert not manager.discard_round()
    manager.propose_round()
    assert manager.discard_round()
    assert manager.pending is None
    assert manager.ledger == MeetingLedger()


def test_roster_change_drops_pending_proposal(manager):
    manager.propose_round()
    manager.add_person("Frank")
    with pytest.raises(RosterException):
        manager.confirm_round()


def test_remove_person_prunes_history(manager):
    manager.propose_round()
    manager.confirm_round()
    removed = manager.remove_person("1")

    assert removed.name == "Alice"
    assert manager.find_person("1") is None
    assert "1" not in manager.ledger.people()
    with pytest.raises(RosterException):
        manager.remove_person("1")


def test_clear_history(manager):
    manager.propose_round()
    manager.confirm_round()
    manager.clear_history()
    assert manager.ledger == MeetingLedger()
    assert manager.rounds == []


def test_meeting_summary_most_frequent_first(manager):
    manager.ledger = MeetingLedger.from_pairs(
        [("1", "2"), ("3", "4"), ("3", "4"), ("1", "gone")]
    )
    summary = manager.meeting_summary()
    assert [(a.id, b.id, count) for a, b, count in summary] == [
        ("3", "4", 2),
        ("1", "2", 1),
    ]


def test_dict_round_trip(manager):
    manager.propose_round()
    manager.confirm_round()
    manager.propose_round()
    manager.confirm_round()

    restored = RotationManager.from_dict(manager.to_dict())
    assert restored.roster == manager.roster
    assert restored.ledger == manager.ledger
    assert restored.rounds == manager.rounds
    assert restored.config == manager.config
    assert restored.add_person("Frank").id == "6"


def test_confirmed_rounds_are_dated(manager):
    manager.propose_round()
    assert manager.confirm_round().held_on == date.today()


def test_import_roster_resets_everything(manager):
    manager.propose_round()
    manager.confirm_round()
    people = manager.import_roster(["Zed", " ", "Yan"])

    assert [(p.id, p.name) for p in people] == [("1", "Zed"), ("2", "Yan")]
    assert manager.ledger == MeetingLedger()
    assert manager.rounds == []


def test_rename_drops_pending_proposal(manager):
    manager.propose_round()
    manager.rename_person("2", "Robert")
    assert manager.pending is None
    with pytest.raises(RosterException):
        manager.confirm_round()
