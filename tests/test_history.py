"""Tests for OwnershipHistoryLog."""

import pytest

from equipment_registry.exceptions import DuplicateHistoryKeyError, TransferNotFoundError
from equipment_registry.models import OwnershipTransfer
from equipment_registry.store import OwnershipHistoryLog


@pytest.fixture
def log() -> OwnershipHistoryLog:
    return OwnershipHistoryLog()


class TestAppend:
    def test_first_transfer_gets_sequence_one(self, log: OwnershipHistoryLog) -> None:
        transfer = log.append(1, "a", "b", 100, "donated")

        assert transfer.sequence == 1
        assert transfer.key == (1, 1)
        assert log.get(1, 1) is transfer

    def test_sequences_are_per_equipment(self, log: OwnershipHistoryLog) -> None:
        log.append(1, "a", "b", 100, "first")
        log.append(2, "x", "y", 101, "other device")
        second = log.append(1, "b", "c", 102, "second")

        assert second.sequence == 2
        assert [t.sequence for t in log.for_equipment(1)] == [1, 2]
        assert [t.sequence for t in log.for_equipment(2)] == [1]

    def test_existing_key_is_never_overwritten(self, log: OwnershipHistoryLog) -> None:
        log.transfers[(1, 1)] = OwnershipTransfer(1, 1, "a", "b", 100, "planted")

        with pytest.raises(DuplicateHistoryKeyError):
            log.append(1, "a", "b", 100, "again")

        assert log.get(1, 1).transfer_reason == "planted"
        assert log.for_equipment(1) == []

    def test_len_and_all(self, log: OwnershipHistoryLog) -> None:
        log.append(1, "a", "b", 100, "r1")
        log.append(2, "a", "b", 100, "r2")

        assert len(log) == 2
        assert [t.transfer_reason for t in log.all()] == ["r1", "r2"]


class TestGet:
    def test_missing(self, log: OwnershipHistoryLog) -> None:
        with pytest.raises(TransferNotFoundError):
            log.get(1, 1)

    def test_for_equipment_without_transfers(self, log: OwnershipHistoryLog) -> None:
        assert log.for_equipment(42) == []
