"""
Fleet data models - drivers, trucks and routes.

Ordered enumerations (license level, truck class) compare by the order their
members are declared in, lowest first.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class OrderedStrEnum(str, Enum):
    """
    String enum with a total order over its members.

    Members must be declared from lowest to highest.
    """

    @property
    def rank(self) -> int:
        """Position of the member in the declared order (0 = lowest)."""
        return list(type(self)).index(self)

    def _coerce(self, other: Any) -> "OrderedStrEnum":
        """Return `other` as a member of this enum; plain strings are looked up by value."""
        if isinstance(other, type(self)):
            return other
        if isinstance(other, str) and not isinstance(other, Enum):
            return type(self)(other)
        raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")

    def __lt__(self, other: Any) -> bool:
        return self.rank < self._coerce(other).rank

    def __le__(self, other: Any) -> bool:
        return self.rank <= self._coerce(other).rank

    def __gt__(self, other: Any) -> bool:
        return self.rank > self._coerce(other).rank

    def __ge__(self, other: Any) -> bool:
        return self.rank >= self._coerce(other).rank


class LicenseLevel(OrderedStrEnum):
    """Commercial driver's license class, lowest to highest."""

    CLASS_C = "class_c"
    CLASS_B = "class_b"
    CLASS_A = "class_a"

    @property
    def display_name(self) -> str:
        return {"class_c": "Class C", "class_b": "Class B", "class_a": "Class A"}[self.value]


class TruckClass(OrderedStrEnum):
    """Truck size/weight class, lightest to heaviest."""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"

    @property
    def required_license(self) -> LicenseLevel:
        """Minimum license level needed to operate a truck of this class."""
        return _REQUIRED_LICENSE[self]


_REQUIRED_LICENSE = {
    TruckClass.LIGHT: LicenseLevel.CLASS_C,
    TruckClass.MEDIUM: LicenseLevel.CLASS_B,
    TruckClass.HEAVY: LicenseLevel.CLASS_A,
}


class RouteType(str, Enum):
    """Type of route, by cargo and trip requirements."""

    STANDARD = "standard"
    HAZMAT = "hazmat"
    OVERSIZED = "oversized"
    LONG_HAUL = "long_haul"

    @property
    def display_name(self) -> str:
        return {
            "standard": "Standard",
            "hazmat": "Hazmat",
            "oversized": "Oversized",
            "long_haul": "Long haul",
        }[self.value]


class RouteStatus(str, Enum):
    """Route lifecycle status."""

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DELAYED = "delayed"


# Bonus years added to a driver's experience per license level
LICENSE_EXPERIENCE_BONUS = {
    LicenseLevel.CLASS_A: 5,
    LicenseLevel.CLASS_B: 3,
    LicenseLevel.CLASS_C: 0,
}


class Driver(BaseModel):
    """A truck driver and their qualifications."""

    # Identification
    driver_id: str = Field(..., description="Unique driver identifier")
    name: str = Field(..., min_length=1, max_length=100, description="Full name")
    license_number: Optional[str] = Field(None, max_length=50)

    # Qualifications
    license_level: LicenseLevel = Field(..., description="CDL class held")
    years_of_experience: int = Field(0, ge=0, le=50)
    hourly_rate: Decimal = Field(Decimal("0"), ge=0, le=200, description="Hourly pay (USD)")

    # Status
    is_available: bool = Field(True, description="Free for new assignments")

    # Contact
    email: Optional[str] = Field(None, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=20)
    hire_date: Optional[date] = None

    def effective_experience(self) -> int:
        """Years of experience plus the bonus granted by license level."""
        return self.years_of_experience + LICENSE_EXPERIENCE_BONUS[self.license_level]

    def can_drive_truck_class(self, truck_class: TruckClass) -> bool:
        """Check whether this driver's license covers a truck class."""
        return self.license_level >= truck_class.required_license

    def __str__(self) -> str:
        """String representation."""
        return self.name


class Truck(BaseModel):
    """
    A commercial truck in the fleet.

    Mileage fields are optional; maintenance checks only apply when the next
    maintenance mileage is known.
    """

    # Identification
    truck_number: str = Field(..., description="Fleet identifier, e.g. 'TRK-100'")
    make: Optional[str] = Field(None, max_length=50)
    model: Optional[str] = Field(None, max_length=50)
    year: Optional[int] = Field(None, ge=1990, le=2100)
    license_plate: Optional[str] = Field(None, max_length=20)

    # Capability
    truck_class: TruckClass = Field(..., description="Size/weight class")
    capacity_lbs: Optional[int] = Field(None, ge=0, le=80000)

    # Maintenance
    current_mileage: int = Field(0, ge=0)
    next_maintenance_mileage: Optional[int] = Field(None, ge=0)
    last_maintenance_date: Optional[date] = None

    # Status
    is_available: bool = True
    in_maintenance: bool = False
    notes: Optional[str] = Field(None, max_length=500)

    def required_license_level(self) -> LicenseLevel:
        """Minimum license level needed to drive this truck."""
        return self.truck_class.required_license

    def can_be_operated_by(self, driver: Driver) -> bool:
        """Check whether a driver's license covers this truck."""
        return driver.license_level >= self.required_license_level()

    def needs_maintenance_soon(self, warning_miles: int = 1000) -> bool:
        """True when within `warning_miles` of the next scheduled maintenance."""
        if self.next_maintenance_mileage is None:
            return False
        return self.next_maintenance_mileage - self.current_mileage <= warning_miles

    def is_maintenance_overdue(self) -> bool:
        """True once the odometer has reached the next maintenance mileage."""
        if self.next_maintenance_mileage is None:
            return False
        return self.current_mileage >= self.next_maintenance_mileage

    def display_name(self) -> str:
        """Display string, e.g. '2023 Freightliner Cascadia (#TRK-100)'."""
        parts = [str(p) for p in (self.year, self.make, self.model) if p]
        if not parts:
            return f"#{self.truck_number}"
        return f"{' '.join(parts)} (#{self.truck_number})"

    def __str__(self) -> str:
        """String representation."""
        return self.truck_number


class Route(BaseModel):
    """
    A delivery route: one driver and one truck on one trip.
    """

    # Identification
    route_number: str = Field(..., description="Route reference, e.g. 'R-1001'")
    origin: str = Field("", max_length=100)
    destination: str = Field("", max_length=100)

    # Trip
    distance_miles: int = Field(..., ge=0, le=5000)
    route_type: RouteType = Field(RouteType.STANDARD)
    status: RouteStatus = Field(RouteStatus.SCHEDULED)

    # Timing
    scheduled_start: Optional[datetime] = None
    estimated_end: Optional[datetime] = None
    actual_start: Optional[datetime] = None
    actual_end: Optional[datetime] = None

    # Assignment
    driver_id: Optional[str] = None
    truck_id: Optional[str] = None

    # Financial
    estimated_fuel_cost: Decimal = Field(Decimal("0"), ge=0)
    driver_pay: Decimal = Field(Decimal("0"), ge=0)
    revenue: Decimal = Field(Decimal("0"), ge=0)

    notes: Optional[str] = Field(None, max_length=1000)

    def estimated_drive_time(self, average_speed_mph: float = 60.0) -> float:
        """Estimated drive time in hours."""
        return self.distance_miles / average_speed_mph

    def profit_margin(self) -> Decimal:
        """Revenue minus driver pay and fuel."""
        return self.revenue - (self.driver_pay + self.estimated_fuel_cost)

    def profit_percentage(self) -> Decimal:
        """Profit margin as a percentage of revenue (0 when there is no revenue)."""
        if self.revenue == 0:
            return Decimal("0")
        return self.profit_margin() / self.revenue * 100

    def summary(self) -> str:
        """One-line summary, e.g. 'R-1001: Los Angeles → Phoenix (372 mi)'."""
        return f"{self.route_number}: {self.origin} → {self.destination} ({self.distance_miles} mi)"

    def __str__(self) -> str:
        """String representation."""
        return self.route_number
