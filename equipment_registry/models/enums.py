"""Enumeration types for registry entities."""

from enum import Enum


class EquipmentStatus(str, Enum):
    """Well-known status tags.

    The status field itself is an open string; any tag set by the owner is
    kept as given.
    """

    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    DECOMMISSIONED = "decommissioned"


class EquipmentType(str, Enum):
    ROUTER = "Router"
    ACCESS_POINT = "Access Point"


class MaintenanceType(str, Enum):
    INSPECTION = "inspection"
    REPAIR = "repair"
    FIRMWARE_UPGRADE = "firmware-upgrade"
    PART_REPLACEMENT = "part-replacement"
    CLEANING = "cleaning"
