"""Tests for serialization, sinks and registry export."""

import json
from pathlib import Path

import pytest

from equipment_registry.exceptions import SinkError
from equipment_registry.models import EquipmentAttributes, EquipmentStatus
from equipment_registry.service import RegistryService
from equipment_registry.sinks import ConsoleSink, JsonFileSink, export_registry
from equipment_registry.sinks.serialization import serialize_value, to_dict


@pytest.fixture
def populated(service: RegistryService, router: EquipmentAttributes, other: str) -> RegistryService:
    service.register_equipment(router)
    service.register_equipment(router)
    service.transfer_ownership(1, other, "donated")
    service.add_maintenance(2, "repair", "Antenna realigned", 120, 4000, "", 600)
    return service


class TestSerialization:
    def test_dataclass(self, populated: RegistryService) -> None:
        data = to_dict(populated.get_equipment(2).unwrap())

        assert data["equipment_id"] == 2
        assert data["status"] == "active"
        assert data["coverage_radius_meters"] == 5000

    def test_dict(self) -> None:
        assert to_dict({"status": EquipmentStatus.MAINTENANCE}) == {"status": "maintenance"}

    def test_other_type(self) -> None:
        assert to_dict(42) == {"value": "42"}

    def test_serialize_values(self) -> None:
        assert serialize_value(EquipmentStatus.ACTIVE) == "active"
        assert serialize_value((1, 2)) == [1, 2]
        assert serialize_value([EquipmentStatus.ACTIVE]) == ["active"]
        assert serialize_value({"k": (3, 4)}) == {"k": [3, 4]}
        assert serialize_value(None) is None
        assert serialize_value("x") == "x"


class TestJsonFileSink:
    def test_export_registry(self, populated: RegistryService, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path / "out", pretty=True)

        counts = export_registry(populated, sink)
        sink.close()

        assert counts == {"equipment": 2, "transfers": 1, "maintenance_records": 1}
        equipment = json.loads((tmp_path / "out" / "equipment.json").read_text(encoding="utf-8"))
        transfers = json.loads(
            (tmp_path / "out" / "ownership_transfers.json").read_text(encoding="utf-8")
        )
        records = json.loads(
            (tmp_path / "out" / "maintenance_records.json").read_text(encoding="utf-8")
        )
        assert [e["equipment_id"] for e in equipment] == [1, 2]
        assert transfers[0]["sequence"] == 1
        assert transfers[0]["transfer_reason"] == "donated"
        assert records[0]["equipment_id"] == 2

    def test_write_failure_raises_sink_error(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path)
        (tmp_path / "equipment.json").mkdir()

        with pytest.raises(SinkError, match="Failed to write"):
            sink.write_batch("equipment", [{"equipment_id": 1}])


class TestConsoleSink:
    def test_write_batch(self, populated: RegistryService, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(pretty=False)

        export_registry(populated, sink)
        sink.close()

        out = capsys.readouterr().out
        assert "Entity: equipment (2 records)" in out
        assert "Entity: ownership_transfers (1 records)" in out
        assert '"serial_number": "MNP2000-12345"' in out
        assert "maintenance_records: 1 records" in out

    def test_max_records(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(max_records=1)

        sink.write_batch("equipment", [{"equipment_id": i} for i in range(3)])

        assert "... and 2 more records" in capsys.readouterr().out
