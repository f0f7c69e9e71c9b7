"""Tests for MaintenanceLog."""

import pytest

from equipment_registry.exceptions import (
    EquipmentNotFoundError,
    InvalidAttributeError,
    MaintenanceRecordNotFoundError,
)
from equipment_registry.models import EquipmentAttributes
from equipment_registry.store import EquipmentStore, MaintenanceLog


@pytest.fixture
def equipment(router: EquipmentAttributes, owner: str) -> EquipmentStore:
    store = EquipmentStore()
    store.register(router, owner, 100)
    return store


@pytest.fixture
def log(equipment: EquipmentStore) -> MaintenanceLog:
    return MaintenanceLog(equipment=equipment)


def _add(log: MaintenanceLog, equipment_id: int = 1, performed_by: str = "tech", **overrides) -> int:
    kwargs = {
        "maintenance_type": "repair",
        "description": "Replaced antenna after storm",
        "performed_date": 120,
        "cost": 15000,
        "parts_replaced": "antenna",
        "next_maintenance_date": 500,
    }
    kwargs.update(overrides)
    return log.add(equipment_id=equipment_id, performed_by=performed_by, **kwargs)


class TestAdd:
    def test_add_record(self, log: MaintenanceLog) -> None:
        record_id = _add(log)

        assert record_id == 1
        record = log.get(1)
        assert record.equipment_id == 1
        assert record.maintenance_type == "repair"
        assert record.performed_by == "tech"
        assert record.cost == 15000
        assert record.next_maintenance_date == 500

    def test_any_caller_may_report(self, log: MaintenanceLog, other: str) -> None:
        record_id = _add(log, performed_by=other)
        assert log.get(record_id).performed_by == other

    def test_unknown_equipment_leaves_log_unchanged(self, log: MaintenanceLog) -> None:
        _add(log)

        with pytest.raises(EquipmentNotFoundError):
            _add(log, equipment_id=99)

        assert len(log) == 1
        assert log.last_id == 1
        assert _add(log) == 2

    def test_negative_cost_rejected(self, log: MaintenanceLog) -> None:
        with pytest.raises(InvalidAttributeError, match="cost"):
            _add(log, cost=-1)
        assert len(log) == 0
        assert log.last_id == 0

    def test_zero_cost_allowed(self, log: MaintenanceLog) -> None:
        assert _add(log, cost=0) == 1

    def test_ids_independent_of_equipment_ids(
        self, log: MaintenanceLog, equipment: EquipmentStore, router: EquipmentAttributes, owner: str
    ) -> None:
        for _ in range(4):
            equipment.register(router, owner, 100)

        ids = [_add(log, equipment_id=eid) for eid in (5, 1, 3, 5, 2)]

        assert ids == [1, 2, 3, 4, 5]

    def test_record_survives_decommissioning(
        self, log: MaintenanceLog, equipment: EquipmentStore, owner: str
    ) -> None:
        _add(log)
        equipment.set_status(1, "decommissioned", owner)

        assert log.get(1).equipment_id == 1


class TestQueries:
    @pytest.mark.parametrize("record_id", [0, -3, 1])
    def test_get_missing(self, log: MaintenanceLog, record_id: int) -> None:
        with pytest.raises(MaintenanceRecordNotFoundError):
            log.get(record_id)

    def test_for_equipment(
        self, log: MaintenanceLog, equipment: EquipmentStore, router: EquipmentAttributes, owner: str
    ) -> None:
        equipment.register(router, owner, 100)
        _add(log, equipment_id=1)
        _add(log, equipment_id=2)
        _add(log, equipment_id=1)

        assert [r.record_id for r in log.for_equipment(1)] == [1, 3]
        assert [r.record_id for r in log.for_equipment(2)] == [2]
        assert log.for_equipment(3) == []

    def test_due_before(self, log: MaintenanceLog) -> None:
        _add(log, next_maintenance_date=300)
        _add(log, next_maintenance_date=500)
        _add(log, next_maintenance_date=900)

        assert [r.record_id for r in log.due_before(500)] == [1, 2]
        assert log.due_before(100) == []

    def test_all(self, log: MaintenanceLog) -> None:
        _add(log)
        _add(log)
        assert [r.record_id for r in log.all()] == [1, 2]
