"""
Pydantic data models for fleet business rules.

Core models:
- Driver: Driver qualifications and availability
- Truck: Vehicle class, availability and maintenance state
- Route: Trip type, distance, status and financials
- TripParameters: Pay & cost calculator input
- CostBreakdown: Driver pay and trip cost results
"""

from .fleet import (
    Driver,
    LicenseLevel,
    OrderedStrEnum,
    Route,
    RouteStatus,
    RouteType,
    Truck,
    TruckClass,
)
from .trip import CostBreakdown, TripParameters

__all__ = [
    "Driver",
    "Truck",
    "Route",
    "LicenseLevel",
    "TruckClass",
    "RouteType",
    "RouteStatus",
    "OrderedStrEnum",
    "TripParameters",
    "CostBreakdown",
]
