"""
Assignment validation and route lifecycle rules.

Validation is a pure function: it reports every applicable violation for a
driver + truck + route assignment and never raises for business-rule breaches.
Missing entities short-circuit with a single violation.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from fleet_rules.core.config import AssignmentRules
from fleet_rules.data.models.fleet import (
    Driver,
    LicenseLevel,
    Route,
    RouteStatus,
    RouteType,
    Truck,
)


class ViolationCode(str, Enum):
    """Kinds of assignment violation."""

    DRIVER_REQUIRED = "driver_required"
    TRUCK_REQUIRED = "truck_required"
    ROUTE_REQUIRED = "route_required"
    LICENSE_TOO_LOW = "license_too_low"
    DRIVER_UNAVAILABLE = "driver_unavailable"
    TRUCK_UNAVAILABLE = "truck_unavailable"
    TRUCK_IN_MAINTENANCE = "truck_in_maintenance"
    HAZMAT_REQUIRES_CLASS_A = "hazmat_requires_class_a"
    INSUFFICIENT_EXPERIENCE = "insufficient_experience"


class WarningCode(str, Enum):
    """Non-blocking assignment warnings."""

    MAINTENANCE_DUE_SOON = "maintenance_due_soon"
    MAINTENANCE_OVERDUE = "maintenance_overdue"


class Violation(BaseModel):
    """A reason an assignment is invalid."""

    code: ViolationCode
    subject: Optional[str] = None  # Name/number of the offending entity
    required_license: Optional[LicenseLevel] = None
    route_type: Optional[RouteType] = None
    required_years: Optional[int] = None

    def __str__(self) -> str:
        return render_violation(self)


class AssignmentWarning(BaseModel):
    """A concern that does not block an assignment."""

    code: WarningCode
    subject: str
    miles_remaining: int

    def __str__(self) -> str:
        if self.code == WarningCode.MAINTENANCE_OVERDUE:
            return f"Truck {self.subject} is overdue for maintenance"
        return f"Truck {self.subject} is due for maintenance in {self.miles_remaining:,} miles"


class AssignmentResult(BaseModel):
    """Outcome of validating an assignment."""

    violations: list[Violation] = Field(default_factory=list)
    warnings: list[AssignmentWarning] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def messages(self) -> list[str]:
        """Violations rendered as display strings."""
        return [render_violation(v) for v in self.violations]


class RouteTransitionError(ValueError):
    """Raised when a route cannot move to the requested status."""


def render_violation(violation: Violation) -> str:
    """Render a violation as a human-readable message."""
    code = violation.code

    if code == ViolationCode.DRIVER_REQUIRED:
        return "Driver is required"
    if code == ViolationCode.TRUCK_REQUIRED:
        return "Truck is required"
    if code == ViolationCode.ROUTE_REQUIRED:
        return "Route is required"
    if code == ViolationCode.LICENSE_TOO_LOW:
        license_name = violation.required_license.display_name if violation.required_license else "a higher"
        return f"Driver needs {license_name} license to operate truck {violation.subject}"
    if code == ViolationCode.DRIVER_UNAVAILABLE:
        return f"Driver {violation.subject} is currently unavailable"
    if code == ViolationCode.TRUCK_UNAVAILABLE:
        return f"Truck {violation.subject} is currently unavailable"
    if code == ViolationCode.TRUCK_IN_MAINTENANCE:
        return f"Truck {violation.subject} is in maintenance"
    if code == ViolationCode.HAZMAT_REQUIRES_CLASS_A:
        return "Hazmat routes require CDL-A license"
    if code == ViolationCode.INSUFFICIENT_EXPERIENCE:
        route_name = violation.route_type.display_name if violation.route_type else "This"
        years = violation.required_years
        unit = "year" if years == 1 else "years"
        return f"{route_name} routes require at least {years} {unit} experience"

    return code.value


def validate_assignment(
    driver: Optional[Driver],
    truck: Optional[Truck],
    route: Optional[Route],
    rules: Optional[AssignmentRules] = None,
) -> list[Violation]:
    """
    Validate assigning a driver and truck to a route.

    Args:
        driver: Driver to assign (None if not selected)
        truck: Truck to assign (None if not selected)
        route: Route to cover (None if not selected)
        rules: Route-type rules (defaults to AssignmentRules())

    Returns:
        All violations found; empty when the assignment is valid
    """
    rules = rules or AssignmentRules()

    if driver is None:
        return [Violation(code=ViolationCode.DRIVER_REQUIRED)]
    if truck is None:
        return [Violation(code=ViolationCode.TRUCK_REQUIRED)]
    if route is None:
        return [Violation(code=ViolationCode.ROUTE_REQUIRED)]

    violations = []

    # License vs truck class
    if not truck.can_be_operated_by(driver):
        violations.append(
            Violation(
                code=ViolationCode.LICENSE_TOO_LOW,
                subject=truck.truck_number,
                required_license=truck.required_license_level(),
            )
        )

    # Availability
    if not driver.is_available:
        violations.append(Violation(code=ViolationCode.DRIVER_UNAVAILABLE, subject=driver.name))

    if not truck.is_available:
        violations.append(Violation(code=ViolationCode.TRUCK_UNAVAILABLE, subject=truck.truck_number))

    if truck.in_maintenance:
        violations.append(Violation(code=ViolationCode.TRUCK_IN_MAINTENANCE, subject=truck.truck_number))

    # Route type requirements
    if (
        route.route_type == RouteType.HAZMAT
        and rules.hazmat_requires_class_a
        and driver.license_level != LicenseLevel.CLASS_A
    ):
        violations.append(Violation(code=ViolationCode.HAZMAT_REQUIRES_CLASS_A, subject=driver.name))

    required_years = rules.min_experience_years.get(route.route_type)
    if required_years is not None and driver.years_of_experience < required_years:
        violations.append(
            Violation(
                code=ViolationCode.INSUFFICIENT_EXPERIENCE,
                subject=driver.name,
                route_type=route.route_type,
                required_years=required_years,
            )
        )

    return violations


def maintenance_warnings(truck: Optional[Truck], warning_miles: int = 1000) -> list[AssignmentWarning]:
    """Warn when a truck is overdue or close to its next maintenance."""
    if truck is None or truck.next_maintenance_mileage is None:
        return []

    miles_remaining = truck.next_maintenance_mileage - truck.current_mileage

    if truck.is_maintenance_overdue():
        return [
            AssignmentWarning(
                code=WarningCode.MAINTENANCE_OVERDUE,
                subject=truck.truck_number,
                miles_remaining=miles_remaining,
            )
        ]
    if truck.needs_maintenance_soon(warning_miles):
        return [
            AssignmentWarning(
                code=WarningCode.MAINTENANCE_DUE_SOON,
                subject=truck.truck_number,
                miles_remaining=miles_remaining,
            )
        ]
    return []


def assess_assignment(
    driver: Optional[Driver],
    truck: Optional[Truck],
    route: Optional[Route],
    rules: Optional[AssignmentRules] = None,
) -> AssignmentResult:
    """Validate an assignment and collect non-blocking warnings."""
    rules = rules or AssignmentRules()
    violations = validate_assignment(driver, truck, route, rules)
    warnings = maintenance_warnings(truck, rules.maintenance_warning_miles)
    return AssignmentResult(violations=violations, warnings=warnings)


def can_start_route(route: Route, driver: Optional[Driver], truck: Optional[Truck]) -> bool:
    """A scheduled route can start once its driver and truck are both ready."""
    return (
        route.status == RouteStatus.SCHEDULED
        and driver is not None
        and truck is not None
        and driver.is_available
        and truck.is_available
        and not truck.in_maintenance
    )


def can_complete_route(route: Route) -> bool:
    return route.status == RouteStatus.IN_PROGRESS


def can_cancel_route(route: Route) -> bool:
    return route.status in (RouteStatus.SCHEDULED, RouteStatus.IN_PROGRESS)


def start_route(
    route: Route,
    driver: Optional[Driver],
    truck: Optional[Truck],
    now: Optional[datetime] = None,
) -> Route:
    """
    Move a route to in-progress.

    Raises:
        RouteTransitionError: If the route cannot start
    """
    if not can_start_route(route, driver, truck):
        raise RouteTransitionError(f"Route {route.route_number} cannot start from status {route.status.value}")
    return route.model_copy(
        update={"status": RouteStatus.IN_PROGRESS, "actual_start": now or datetime.now()}
    )


def complete_route(route: Route, now: Optional[datetime] = None) -> Route:
    """
    Move an in-progress route to completed.

    Raises:
        RouteTransitionError: If the route is not in progress
    """
    if not can_complete_route(route):
        raise RouteTransitionError(f"Route {route.route_number} cannot complete from status {route.status.value}")
    return route.model_copy(update={"status": RouteStatus.COMPLETED, "actual_end": now or datetime.now()})


def cancel_route(route: Route, now: Optional[datetime] = None) -> Route:
    """
    Cancel a scheduled or in-progress route.

    Raises:
        RouteTransitionError: If the route is already finished
    """
    if not can_cancel_route(route):
        raise RouteTransitionError(f"Route {route.route_number} cannot be cancelled from status {route.status.value}")
    return route.model_copy(update={"status": RouteStatus.CANCELLED, "actual_end": now or datetime.now()})
