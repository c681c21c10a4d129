"""
Pricing Agent - Driver pay and trip cost calculations.

This agent:
- Calculates driver pay (base, experience bonus, route bonus)
- Estimates fuel and other operating costs
- Suggests a minimum revenue at the target profit margin
- Prices stored routes from the assigned driver's rate and experience
"""

from decimal import Decimal
from time import time
from typing import Any, Optional

from fleet_rules.agents.base import BaseAgent
from fleet_rules.data.models.fleet import Driver, Route, RouteType
from fleet_rules.data.models.trip import CostBreakdown, TripParameters
from fleet_rules.rules import pricing


class PricingAgent(BaseAgent):
    """
    Pricing Agent for trip cost estimates.

    Pricing is pure arithmetic; the agent loads the constants from config
    and records each calculation.
    """

    def __init__(self, profile: Optional[str] = None, **kwargs: Any) -> None:
        """
        Initialize the pricing agent.

        Args:
            profile: Optional pricing profile from config.yaml (e.g. "scheduler")
        """
        super().__init__(agent_name="pricing", **kwargs)

        self.profile = profile
        self.rules = self.config_manager.get_pricing_rules(profile)

    def calculate(
        self,
        distance_miles: int,
        hourly_rate: Decimal | int | str,
        years_experience: int,
        route_type: RouteType = RouteType.STANDARD,
    ) -> CostBreakdown:
        """
        Calculate driver pay and trip costs.

        Args:
            distance_miles: Trip distance
            hourly_rate: Driver hourly pay rate
            years_experience: Driver years of experience
            route_type: Type of route

        Returns:
            CostBreakdown

        Raises:
            pydantic.ValidationError: If any input is negative
        """
        params = TripParameters(
            distance_miles=distance_miles,
            hourly_rate=hourly_rate,
            years_experience=years_experience,
            route_type=route_type,
        )
        return self.calculate_trip_cost(params)

    def calculate_trip_cost(self, params: TripParameters) -> CostBreakdown:
        """Calculate a cost breakdown for validated trip parameters."""
        start_time = time()

        self.logger.info(
            "calculating_trip_cost",
            distance=params.distance_miles,
            route_type=params.route_type.value,
            profile=self.profile,
        )

        breakdown = pricing.calculate_trip_cost(params, self.rules)
        self._record(params.model_dump(mode="json"), breakdown, start_time)

        return breakdown

    def quote_route(self, driver: Driver, route: Route) -> CostBreakdown:
        """
        Price a route for its assigned driver.

        Args:
            driver: Driver whose hourly rate and experience apply
            route: Route to price

        Returns:
            CostBreakdown
        """
        start_time = time()

        self.logger.info(
            "quoting_route",
            route=route.route_number,
            driver_id=driver.driver_id,
            profile=self.profile,
        )

        breakdown = pricing.quote_route(driver, route, self.rules)
        self._record(
            {"route_number": route.route_number, "driver_id": driver.driver_id},
            breakdown,
            start_time,
        )

        return breakdown

    def execute(self, *args: Any, **kwargs: Any) -> CostBreakdown:
        """
        Execute a cost calculation (delegates to calculate).

        Returns:
            CostBreakdown
        """
        return self.calculate(*args, **kwargs)

    def _record(self, input_data: dict[str, Any], breakdown: CostBreakdown, start_time: float) -> None:
        rounded = breakdown.rounded()
        self.record_decision(
            decision_type="trip_cost_calculation",
            input_data=input_data,
            output_data={
                "total_driver_pay": float(rounded["total_driver_pay"]),
                "total_cost": float(rounded["total_cost"]),
                "minimum_revenue": float(rounded["minimum_revenue"]),
            },
            reasoning=f"Priced {breakdown.distance_miles} miles at {self.rules.average_speed_mph} mph average",
            started_at=start_time,
            tools_used=["pay_calculator", "fuel_estimator"],
        )


def main() -> None:
    """Example usage of the pricing agent."""
    from fleet_rules.core.logging import configure_logging

    configure_logging()

    agent = PricingAgent()

    breakdown = agent.calculate(
        distance_miles=500,
        hourly_rate=Decimal("28"),
        years_experience=5,
        route_type=RouteType.STANDARD,
    )
    costs = breakdown.rounded()

    print("\n" + "=" * 80)
    print("TRIP COST ESTIMATE")
    print("=" * 80)
    print(f"Distance: {breakdown.distance_miles:,} miles")
    print(f"Drive Time: {breakdown.drive_time_hours:.2f}h")
    print()

    print("DRIVER PAY:")
    print(f"  Base Pay: ${costs['base_pay']}")
    print(f"  Experience Bonus: ${costs['experience_bonus']}")
    print(f"  Route Bonus: ${costs['route_bonus']}")
    print(f"  Total Driver Pay: ${costs['total_driver_pay']}")
    print()

    print("COSTS:")
    print(f"  Fuel: ${costs['fuel_cost']}")
    print(f"  Other: ${costs['other_costs']}")
    print(f"  Total Cost: ${costs['total_cost']}")
    print()

    print(f"MINIMUM REVENUE: ${costs['minimum_revenue']}")
    print(f"Profit at Minimum: ${costs['profit']}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
