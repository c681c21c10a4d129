"""Shared fixtures for fleet rules tests."""

from decimal import Decimal
from pathlib import Path

import pytest

from fleet_rules.core.config import ConfigManager
from fleet_rules.data.models.fleet import (
    Driver,
    LicenseLevel,
    Route,
    RouteType,
    Truck,
    TruckClass,
)

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


@pytest.fixture
def config_manager(monkeypatch: pytest.MonkeyPatch) -> ConfigManager:
    """Config manager reading the repository config, with no real API keys."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    return ConfigManager(config_dir=CONFIG_DIR)


@pytest.fixture
def class_a_driver() -> Driver:
    return Driver(
        driver_id="DRV-001",
        name="Ava Johnson",
        license_number="DL-A001",
        license_level=LicenseLevel.CLASS_A,
        years_of_experience=6,
        hourly_rate=Decimal("42.50"),
    )


@pytest.fixture
def class_b_driver() -> Driver:
    return Driver(
        driver_id="DRV-002",
        name="Ben Carter",
        license_number="DL-B002",
        license_level=LicenseLevel.CLASS_B,
        years_of_experience=3,
        hourly_rate=Decimal("34.00"),
    )


@pytest.fixture
def class_c_driver() -> Driver:
    return Driver(
        driver_id="DRV-003",
        name="Chloe Smith",
        license_number="DL-C003",
        license_level=LicenseLevel.CLASS_C,
        years_of_experience=1,
        hourly_rate=Decimal("26.75"),
    )


@pytest.fixture
def heavy_truck() -> Truck:
    return Truck(
        truck_number="TRK-100",
        make="Freightliner",
        model="Cascadia",
        year=2023,
        truck_class=TruckClass.HEAVY,
        capacity_lbs=80000,
        current_mileage=210000,
        next_maintenance_mileage=220000,
    )


@pytest.fixture
def medium_truck() -> Truck:
    return Truck(
        truck_number="TRK-200",
        make="Kenworth",
        model="T680",
        year=2024,
        truck_class=TruckClass.MEDIUM,
        current_mileage=98000,
        next_maintenance_mileage=110000,
    )


@pytest.fixture
def light_truck() -> Truck:
    return Truck(truck_number="TRK-300", make="Ford", model="E-Transit", truck_class=TruckClass.LIGHT)


@pytest.fixture
def standard_route() -> Route:
    return Route(
        route_number="R-2002",
        origin="Dallas",
        destination="Austin",
        distance_miles=195,
        route_type=RouteType.STANDARD,
    )
