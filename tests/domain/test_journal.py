import pytest
from src.domain.core.exceptions import OutOfRangeError
from src.domain.solid import Journal, PersistenceManager


def test_entries_are_numbered():
    j = Journal()

    assert j.add_entry("I cried today.") == 1
    assert j.add_entry("I ate a bug.") == 2
    assert str(j) == "1: I cried today.\n2: I ate a bug."


def test_numbering_continues_after_removal():
    j = Journal()
    j.add_entry("first")
    j.remove_entry(0)
    j.add_entry("second")

    assert j.entries == ["2: second"]


def test_remove_out_of_range():
    with pytest.raises(OutOfRangeError):
        Journal().remove_entry(0)


def test_save_to_file(tmp_path):
    j = Journal()
    j.add_entry("hello")

    path = PersistenceManager.save_to_file(j, tmp_path / "journal.txt")

    assert path.read_text() == "1: hello"
