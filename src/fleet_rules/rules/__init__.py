"""
Pure business rules for fleet operations.

- Assignment: driver + truck + route validation and route lifecycle
- Pricing: driver pay and trip cost calculation
- Board: route filtering, pagination and summaries
"""

from .assignment import (
    AssignmentResult,
    AssignmentWarning,
    RouteTransitionError,
    Violation,
    ViolationCode,
    WarningCode,
    assess_assignment,
    cancel_route,
    can_cancel_route,
    can_complete_route,
    can_start_route,
    complete_route,
    render_violation,
    start_route,
    validate_assignment,
)
from .board import Page, RouteSummary, filter_routes, paginate, summarize_routes
from .pricing import calculate, calculate_trip_cost, estimate_fuel_cost, quote_route

__all__ = [
    "AssignmentResult",
    "AssignmentWarning",
    "RouteTransitionError",
    "Violation",
    "ViolationCode",
    "WarningCode",
    "assess_assignment",
    "validate_assignment",
    "render_violation",
    "can_start_route",
    "can_complete_route",
    "can_cancel_route",
    "start_route",
    "complete_route",
    "cancel_route",
    "calculate",
    "calculate_trip_cost",
    "estimate_fuel_cost",
    "quote_route",
    "Page",
    "RouteSummary",
    "filter_routes",
    "paginate",
    "summarize_routes",
]
