"""Pytest configuration and fixtures."""

import pytest

from equipment_registry.context import ManualBlockClock, StaticIdentity
from equipment_registry.models import EquipmentAttributes
from equipment_registry.service import RegistryService

BLOCK_HEIGHT = 100


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def owner() -> str:
    return "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"


@pytest.fixture
def other() -> str:
    return "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"


@pytest.fixture
def third() -> str:
    return "ST3NBRSFKX28FQ2ZJ1MAKX58HKHSDGNV5N7R21XCP"


@pytest.fixture
def clock() -> ManualBlockClock:
    return ManualBlockClock(height=BLOCK_HEIGHT)


@pytest.fixture
def identity(owner: str) -> StaticIdentity:
    return StaticIdentity(principal=owner)


@pytest.fixture
def service(identity: StaticIdentity, clock: ManualBlockClock) -> RegistryService:
    """Fresh registry for each test, called as ``owner`` at height 100."""
    return RegistryService(identity=identity, clock=clock)


@pytest.fixture
def router() -> EquipmentAttributes:
    """Sample router attributes."""
    return EquipmentAttributes(
        equipment_type="Router",
        model="MeshNet Pro 2000",
        serial_number="MNP2000-12345",
        manufacturer="Rural Networks Inc",
        purchase_date=BLOCK_HEIGHT - 1000,
        installation_date=BLOCK_HEIGHT - 900,
        location_latitude="37.7749",
        location_longitude="-122.4194",
        location_description="Community center rooftop",
        ip_address="192.168.1.1",
        mac_address="00:1A:2B:3C:4D:5E",
        firmware_version="v2.3.4",
        power_source="Solar with battery backup",
        coverage_radius_meters=5000,
    )


@pytest.fixture
def access_point() -> EquipmentAttributes:
    """Sample access point attributes."""
    return EquipmentAttributes(
        equipment_type="Access Point",
        model="RuralConnect AP-350",
        serial_number="RCAP350-67890",
        manufacturer="Rural Networks Inc",
        purchase_date=BLOCK_HEIGHT - 800,
        installation_date=BLOCK_HEIGHT - 750,
        location_latitude="37.7750",
        location_longitude="-122.4195",
        location_description="Water tower",
        ip_address="192.168.1.2",
        mac_address="00:2C:3D:4E:5F:6A",
        firmware_version="v1.5.2",
        power_source="Grid with solar backup",
        coverage_radius_meters=2000,
    )
