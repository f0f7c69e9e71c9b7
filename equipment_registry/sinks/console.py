"""Console sink for inspecting a registry."""

import json
from typing import Any

from equipment_registry.sinks.serialization import to_dict


class ConsoleSink:
    """Print records to stdout."""

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        """
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Print a batch of records under a header."""
        print(f"\n{'=' * 60}")
        print(f"Entity: {entity_type} ({len(records)} records)")
        print("=" * 60)

        shown = records[: self.max_records] if self.max_records else records
        indent = 2 if self.pretty else None
        for record in shown:
            print(json.dumps(to_dict(record), indent=indent, ensure_ascii=False))

        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def close(self) -> None:
        """Print summary."""
        print(f"\n{'=' * 60}")
        print("Console Sink Summary")
        print("=" * 60)
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
