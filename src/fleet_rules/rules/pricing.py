"""
Driver pay and trip cost calculation.

All amounts are Decimal and unrounded. The calculation is deterministic and
free of side effects.
"""

from decimal import ROUND_CEILING, Decimal
from typing import Optional

from fleet_rules.core.config import PricingRules
from fleet_rules.data.models.fleet import Driver, Route, RouteType
from fleet_rules.data.models.trip import CostBreakdown, TripParameters


def drive_time_hours(distance_miles: int, rules: PricingRules) -> Decimal:
    """Estimated paid hours for a trip, continuous or rounded up to whole hours."""
    hours = Decimal(distance_miles) / rules.average_speed_mph
    if rules.drive_time_model == "whole_hours":
        return hours.to_integral_value(rounding=ROUND_CEILING)
    return hours


def experience_multiplier(years_experience: int, rules: PricingRules) -> Decimal:
    """1.0 plus the per-year bonus, capped at the maximum bonus."""
    bonus = min(Decimal(years_experience) * rules.experience_bonus_per_year, rules.max_experience_bonus)
    return Decimal("1.0") + bonus


def route_bonus(route_type: RouteType, distance_miles: int, rules: PricingRules) -> Decimal:
    """Flat bonus for special cargo, per-mile bonus for long haul."""
    if route_type == RouteType.LONG_HAUL:
        return Decimal(distance_miles) * rules.long_haul_bonus_per_mile
    return rules.route_flat_bonus.get(route_type, Decimal("0"))


def estimate_fuel_cost(distance_miles: int, rules: PricingRules) -> Decimal:
    """Gallons burned over the distance times the fuel price."""
    gallons = Decimal(distance_miles) / rules.average_mpg
    return gallons * rules.fuel_price_per_gallon


def calculate_trip_cost(params: TripParameters, rules: Optional[PricingRules] = None) -> CostBreakdown:
    """
    Calculate driver pay, operating costs and suggested minimum revenue.

    Args:
        params: Trip distance, pay rate, experience and route type
        rules: Pricing constants (defaults to PricingRules())

    Returns:
        CostBreakdown with pay components, costs and derived totals
    """
    rules = rules or PricingRules()
    distance = params.distance_miles

    hours = drive_time_hours(distance, rules)
    base_pay = params.hourly_rate * hours
    experience_bonus = base_pay * experience_multiplier(params.years_experience, rules) - base_pay

    return CostBreakdown(
        distance_miles=distance,
        drive_time_hours=hours,
        base_pay=base_pay,
        experience_bonus=experience_bonus,
        route_bonus=route_bonus(params.route_type, distance, rules),
        fuel_cost=estimate_fuel_cost(distance, rules),
        other_costs=Decimal(distance) * rules.other_cost_per_mile,
        profit_margin=rules.profit_margin,
    )


def calculate(
    distance_miles: int,
    hourly_rate: Decimal | int | str,
    years_experience: int,
    route_type: RouteType = RouteType.STANDARD,
    rules: Optional[PricingRules] = None,
) -> CostBreakdown:
    """
    Calculate a cost breakdown from plain arguments.

    Raises:
        pydantic.ValidationError: If any input is negative
    """
    params = TripParameters(
        distance_miles=distance_miles,
        hourly_rate=hourly_rate,
        years_experience=years_experience,
        route_type=route_type,
    )
    return calculate_trip_cost(params, rules)


def quote_route(driver: Driver, route: Route, rules: Optional[PricingRules] = None) -> CostBreakdown:
    """Price a route using the assigned driver's own rate and experience."""
    params = TripParameters(
        distance_miles=route.distance_miles,
        hourly_rate=driver.hourly_rate,
        years_experience=driver.years_of_experience,
        route_type=route.route_type,
    )
    return calculate_trip_cost(params, rules)
