"""Configuration management for the equipment registry."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from equipment_registry.exceptions import ConfigurationError


@dataclass
class OutputConfig:
    """Export configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class ScenarioConfig:
    """Configuration for a field-network scenario run."""

    name: str = "field_network"
    num_owners: int = 5
    num_equipment: int = 20
    transfer_rate: float = 0.2
    maintenance_per_equipment: int = 2
    decommission_rate: float = 0.05
    start_height: int = 1000


@dataclass
class RegistryConfig:
    """Main configuration for the equipment registry."""

    output: OutputConfig = field(default_factory=OutputConfig)
    scenario: ScenarioConfig | None = None
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"
    initial_block_height: int = 0

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Create config from environment variables."""
        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            output=output,
            seed=_int_env("SEED"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            initial_block_height=_int_env("INITIAL_BLOCK_HEIGHT") or 0,
        )


def _int_env(name: str) -> int | None:
    """Read an optional integer environment variable."""
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
