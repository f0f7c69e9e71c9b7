"""Custom exception hierarchy for the equipment registry."""


class RegistryError(Exception):
    """Base exception for all registry errors."""

    code: int | None = None


class EntityNotFoundError(RegistryError):
    """Raised when a referenced entity does not exist."""

    code = 404


class EquipmentNotFoundError(EntityNotFoundError):
    """Raised when an equipment identifier does not resolve."""

    def __init__(self, equipment_id: int) -> None:
        super().__init__(f"Equipment {equipment_id} not found")
        self.equipment_id = equipment_id


class MaintenanceRecordNotFoundError(EntityNotFoundError):
    """Raised when a maintenance record identifier does not resolve."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"Maintenance record {record_id} not found")
        self.record_id = record_id


class TransferNotFoundError(EntityNotFoundError):
    """Raised when no ownership transfer exists for a history key."""

    def __init__(self, equipment_id: int, sequence: int) -> None:
        super().__init__(f"Transfer {sequence} for equipment {equipment_id} not found")
        self.equipment_id = equipment_id
        self.sequence = sequence


class UnauthorizedError(RegistryError):
    """Raised when the caller is not the current owner of the equipment."""

    code = 403

    def __init__(self, equipment_id: int, caller: str) -> None:
        super().__init__(f"{caller} is not the owner of equipment {equipment_id}")
        self.equipment_id = equipment_id
        self.caller = caller


class InvalidAttributeError(RegistryError, ValueError):
    """Raised when a record attribute is out of its allowed range."""


class DuplicateHistoryKeyError(RegistryError):
    """Raised when an ownership history key would be written twice."""


class ConfigurationError(RegistryError):
    """Raised when configuration is invalid or missing."""


class SinkError(RegistryError):
    """Raised when a sink operation fails."""
