"""JSON file sink for exporting registry snapshots."""

import json
import logging
from pathlib import Path
from typing import Any

from equipment_registry.exceptions import SinkError
from equipment_registry.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Write each entity type to ``<output_dir>/<entity_type>.json``."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records, replacing any previous file."""
        file_path = self.output_dir / f"{entity_type}.json"
        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2 if self.pretty else None, ensure_ascii=False)
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        self._counts[entity_type] = len(records)
        logger.debug("Wrote %d %s records to %s", len(records), entity_type, file_path)

    def close(self) -> None:
        """Log summary."""
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)
