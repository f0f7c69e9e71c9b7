"""Equipment and ownership transfer models."""

from dataclasses import dataclass

from equipment_registry.exceptions import InvalidAttributeError
from equipment_registry.models.enums import EquipmentStatus


@dataclass(frozen=True)
class EquipmentAttributes:
    """Caller-supplied attributes of a registration.

    Block heights (``purchase_date``, ``installation_date``) are plain
    integers. Coordinates are kept as strings exactly as reported.
    """

    equipment_type: str
    model: str
    serial_number: str
    manufacturer: str
    purchase_date: int
    installation_date: int
    location_latitude: str
    location_longitude: str
    location_description: str
    ip_address: str
    mac_address: str
    firmware_version: str
    power_source: str
    coverage_radius_meters: int

    def __post_init__(self) -> None:
        if self.coverage_radius_meters < 0:
            raise InvalidAttributeError(
                f"coverage_radius_meters must be non-negative, got {self.coverage_radius_meters}"
            )


@dataclass(frozen=True)
class Equipment:
    """Registered network device."""

    equipment_id: int
    owner: str
    equipment_type: str
    model: str
    serial_number: str
    manufacturer: str
    purchase_date: int
    installation_date: int
    registration_date: int  # Block height at registration
    location_latitude: str
    location_longitude: str
    location_description: str
    status: str
    ip_address: str
    mac_address: str
    firmware_version: str
    power_source: str
    coverage_radius_meters: int

    @classmethod
    def from_attributes(
        cls,
        equipment_id: int,
        attributes: EquipmentAttributes,
        owner: str,
        registration_date: int,
    ) -> "Equipment":
        """Build a freshly registered record; status is always ``active``."""
        return cls(
            equipment_id=equipment_id,
            owner=owner,
            equipment_type=attributes.equipment_type,
            model=attributes.model,
            serial_number=attributes.serial_number,
            manufacturer=attributes.manufacturer,
            purchase_date=attributes.purchase_date,
            installation_date=attributes.installation_date,
            registration_date=registration_date,
            location_latitude=attributes.location_latitude,
            location_longitude=attributes.location_longitude,
            location_description=attributes.location_description,
            status=EquipmentStatus.ACTIVE.value,
            ip_address=attributes.ip_address,
            mac_address=attributes.mac_address,
            firmware_version=attributes.firmware_version,
            power_source=attributes.power_source,
            coverage_radius_meters=attributes.coverage_radius_meters,
        )


@dataclass(frozen=True)
class OwnershipTransfer:
    """Append-only entry of the ownership history."""

    equipment_id: int
    sequence: int  # 1, 2, 3, ... per equipment
    previous_owner: str
    new_owner: str
    transfer_date: int
    transfer_reason: str

    @property
    def key(self) -> tuple[int, int]:
        return (self.equipment_id, self.sequence)
