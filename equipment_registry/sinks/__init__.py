"""Output sinks for exporting registry contents."""

from typing import Any, Protocol

from equipment_registry.service import RegistryService
from equipment_registry.sinks.console import ConsoleSink
from equipment_registry.sinks.json_file import JsonFileSink


class Sink(Protocol):
    def write_batch(self, entity_type: str, records: list[Any]) -> None: ...

    def close(self) -> None: ...


def export_registry(service: RegistryService, sink: Sink) -> dict[str, int]:
    """Write every equipment, transfer and maintenance record to ``sink``.

    Returns
    -------
    dict[str, int]
        Record counts per entity type.
    """
    sink.write_batch("equipment", service.equipment.all())
    sink.write_batch("ownership_transfers", service.history.all())
    sink.write_batch("maintenance_records", service.maintenance.all())
    return service.summary()


__all__ = ["ConsoleSink", "JsonFileSink", "Sink", "export_registry"]
