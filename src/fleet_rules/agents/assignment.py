"""
Assignment Agent - Driver, truck and route assignment checks.

This agent:
- Validates driver + truck + route assignments against business rules
- Flags trucks that are due or overdue for maintenance
- Guards route lifecycle transitions (start, complete, cancel)
- Explains assignment problems in plain language for dispatchers
"""

import json
from datetime import datetime
from time import time
from typing import Any, Optional

from fleet_rules.agents.base import BaseAgent
from fleet_rules.data.models.fleet import Driver, Route, Truck
from fleet_rules.rules import assignment as assignment_rules


class AssignmentAgent(BaseAgent):
    """
    Assignment Agent for dispatch validation.

    Uses LLM only for:
    - Turning violation lists into dispatcher-friendly explanations
    """

    def __init__(self, profile: Optional[str] = None, **kwargs: Any) -> None:
        """
        Initialize the assignment agent.

        Args:
            profile: Optional assignment rules profile from config.yaml
        """
        super().__init__(agent_name="assignment", **kwargs)

        self.profile = profile
        self.rules = self.config_manager.get_assignment_rules(profile)

    def validate_assignment(
        self,
        driver: Optional[Driver],
        truck: Optional[Truck],
        route: Optional[Route],
    ) -> assignment_rules.AssignmentResult:
        """
        Validate an assignment and collect maintenance warnings.

        Args:
            driver: Driver to assign
            truck: Truck to assign
            route: Route to cover

        Returns:
            AssignmentResult with violations and warnings
        """
        start_time = time()

        self.logger.info(
            "validating_assignment",
            driver=driver.driver_id if driver else None,
            truck=truck.truck_number if truck else None,
            route=route.route_number if route else None,
            profile=self.profile,
        )

        result = assignment_rules.assess_assignment(driver, truck, route, self.rules)

        if result.is_valid:
            reasoning = "Assignment meets all business rules"
        else:
            reasoning = f"Assignment has {len(result.violations)} violation(s)"

        self.record_decision(
            decision_type="assignment_validation",
            input_data={
                "driver_id": driver.driver_id if driver else None,
                "truck_number": truck.truck_number if truck else None,
                "route_number": route.route_number if route else None,
            },
            output_data={
                "is_valid": result.is_valid,
                "violations": [v.code.value for v in result.violations],
                "warnings": [w.code.value for w in result.warnings],
            },
            reasoning=reasoning,
            started_at=start_time,
            tools_used=["assignment_rules", "maintenance_check"],
        )

        return result

    def start_route(self, route: Route, driver: Optional[Driver], truck: Optional[Truck]) -> Route:
        """Start a scheduled route, raising RouteTransitionError if not allowed."""
        try:
            started = assignment_rules.start_route(route, driver, truck)
        except assignment_rules.RouteTransitionError as e:
            self.logger.warning("route_start_rejected", route=route.route_number, error=str(e))
            raise

        self.logger.info("route_started", route=route.route_number)
        return started

    def complete_route(self, route: Route) -> Route:
        """Complete an in-progress route, raising RouteTransitionError if not allowed."""
        try:
            completed = assignment_rules.complete_route(route)
        except assignment_rules.RouteTransitionError as e:
            self.logger.warning("route_complete_rejected", route=route.route_number, error=str(e))
            raise

        self.logger.info("route_completed", route=route.route_number)
        return completed

    def cancel_route(self, route: Route) -> Route:
        """Cancel a scheduled or in-progress route, raising RouteTransitionError if not allowed."""
        try:
            cancelled = assignment_rules.cancel_route(route)
        except assignment_rules.RouteTransitionError as e:
            self.logger.warning("route_cancel_rejected", route=route.route_number, error=str(e))
            raise

        self.logger.info("route_cancelled", route=route.route_number)
        return cancelled

    def explain_assignment(self, result: assignment_rules.AssignmentResult) -> str:
        """
        Explain an assignment result for a dispatcher.

        Falls back to a rule-based explanation when the LLM is unavailable.

        Args:
            result: Result from validate_assignment

        Returns:
            Plain-language explanation
        """
        if result.is_valid and not result.warnings:
            return "Assignment is valid and ready."

        context = {
            "violations": result.messages,
            "warnings": [str(w) for w in result.warnings],
        }
        prompt = f"""A dispatcher tried to assign a driver and truck to a route.

Validation results:
{json.dumps(context, indent=2)}

In two or three sentences, explain what is wrong and what the dispatcher
could change (different driver, different truck, or wait) to make the
assignment work. Do not invent rules beyond those listed.
"""

        try:
            return self.call_llm(prompt, temperature=0.2, max_tokens=512).strip()
        except Exception as e:
            self.logger.error("assignment_explanation_failed", error=str(e))
            return self._rule_based_explanation(result)

    def execute(self, *args: Any, **kwargs: Any) -> assignment_rules.AssignmentResult:
        """
        Execute assignment validation (delegates to validate_assignment).

        Returns:
            AssignmentResult
        """
        return self.validate_assignment(*args, **kwargs)

    def _rule_based_explanation(self, result: assignment_rules.AssignmentResult) -> str:
        """Join violations and warnings into a readable explanation."""
        lines = []
        if result.violations:
            lines.append("Assignment cannot proceed:")
            lines.extend(f"- {message}" for message in result.messages)
        else:
            lines.append("Assignment is valid.")
        if result.warnings:
            lines.append("Warnings:")
            lines.extend(f"- {w}" for w in result.warnings)
        return "\n".join(lines)


def main() -> None:
    """Example usage of the assignment agent."""
    from fleet_rules.core.logging import configure_logging
    from fleet_rules.data.models.fleet import LicenseLevel, RouteType, TruckClass

    configure_logging()

    agent = AssignmentAgent()

    driver = Driver(
        driver_id="DRV-002",
        name="Ben Carter",
        license_level=LicenseLevel.CLASS_B,
        years_of_experience=3,
    )
    truck = Truck(
        truck_number="TRK-100",
        make="Freightliner",
        model="Cascadia",
        year=datetime.now().year - 2,
        truck_class=TruckClass.HEAVY,
        current_mileage=219500,
        next_maintenance_mileage=220000,
    )
    route = Route(
        route_number="R-1001",
        origin="Los Angeles",
        destination="Phoenix",
        distance_miles=372,
        route_type=RouteType.HAZMAT,
    )

    result = agent.validate_assignment(driver, truck, route)

    print("\n" + "=" * 80)
    print("ASSIGNMENT CHECK")
    print("=" * 80)
    print(f"Driver: {driver.name} ({driver.license_level.display_name})")
    print(f"Truck: {truck.display_name()}")
    print(f"Route: {route.summary()}")
    print()
    print(f"Valid: {result.is_valid}")

    if result.violations:
        print("\nVIOLATIONS:")
        for message in result.messages:
            print(f"  ❌ {message}")

    if result.warnings:
        print("\nWARNINGS:")
        for warning in result.warnings:
            print(f"  ⚠️  {warning}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
