"""Tests for the fleet rule agents."""

import json
from decimal import Decimal
from pathlib import Path

import pytest

from fleet_rules.agents import AssignmentAgent, DispatchBoardAgent, PricingAgent
from fleet_rules.core.config import ConfigManager
from fleet_rules.data.models.fleet import (
    Driver,
    Route,
    RouteStatus,
    RouteType,
    Truck,
)
from fleet_rules.rules.assignment import RouteTransitionError


@pytest.fixture
def assignment_agent(config_manager: ConfigManager) -> AssignmentAgent:
    return AssignmentAgent(config_manager=config_manager)


@pytest.fixture
def pricing_agent(config_manager: ConfigManager) -> PricingAgent:
    return PricingAgent(config_manager=config_manager)


class TestAssignmentAgent:
    def test_repr(self, assignment_agent: AssignmentAgent) -> None:
        assert repr(assignment_agent) == "AssignmentAgent(agent_name='assignment')"

    def test_validate_records_decision(
        self, assignment_agent: AssignmentAgent, class_b_driver: Driver, heavy_truck: Truck, standard_route: Route
    ) -> None:
        result = assignment_agent.validate_assignment(class_b_driver, heavy_truck, standard_route)

        assert not result.is_valid
        (decision,) = assignment_agent.decision_history
        assert decision.decision_type == "assignment_validation"
        assert decision.output_data["violations"] == ["license_too_low"]
        assert decision.confidence == 1.0

    def test_missing_driver_is_a_result_not_an_error(
        self, assignment_agent: AssignmentAgent, heavy_truck: Truck, standard_route: Route
    ) -> None:
        result = assignment_agent.execute(None, heavy_truck, standard_route)
        assert result.messages == ["Driver is required"]

    def test_profile_changes_rules(self, config_manager: ConfigManager, class_c_driver: Driver, light_truck: Truck) -> None:
        route = Route(route_number="R-9", distance_miles=800, route_type=RouteType.LONG_HAUL)
        novice = class_c_driver.model_copy(update={"years_of_experience": 0})

        assert AssignmentAgent(config_manager=config_manager).validate_assignment(novice, light_truck, route).is_valid

        demo = AssignmentAgent(profile="training_demo", config_manager=config_manager)
        assert not demo.validate_assignment(novice, light_truck, route).is_valid

    def test_explain_falls_back_when_llm_fails(
        self,
        assignment_agent: AssignmentAgent,
        monkeypatch: pytest.MonkeyPatch,
        class_c_driver: Driver,
        heavy_truck: Truck,
        standard_route: Route,
    ) -> None:
        def unavailable(*args, **kwargs):
            raise ValueError("ANTHROPIC_API_KEY not set in environment")

        monkeypatch.setattr(assignment_agent, "call_llm", unavailable)
        result = assignment_agent.validate_assignment(class_c_driver, heavy_truck, standard_route)

        explanation = assignment_agent.explain_assignment(result)
        assert explanation == (
            "Assignment cannot proceed:\n- Driver needs Class A license to operate truck TRK-100"
        )

    def test_explain_uses_llm_response(
        self,
        assignment_agent: AssignmentAgent,
        monkeypatch: pytest.MonkeyPatch,
        class_c_driver: Driver,
        heavy_truck: Truck,
        standard_route: Route,
    ) -> None:
        prompts = []

        def fake_call_llm(prompt: str, **kwargs) -> str:
            prompts.append(prompt)
            return "  Pick a Class A driver.  "

        monkeypatch.setattr(assignment_agent, "call_llm", fake_call_llm)
        result = assignment_agent.validate_assignment(class_c_driver, heavy_truck, standard_route)

        assert assignment_agent.explain_assignment(result) == "Pick a Class A driver."
        assert "Driver needs Class A license" in prompts[0]

    def test_explain_valid_assignment_skips_llm(
        self,
        assignment_agent: AssignmentAgent,
        monkeypatch: pytest.MonkeyPatch,
        class_a_driver: Driver,
        heavy_truck: Truck,
        standard_route: Route,
    ) -> None:
        def fail(*args, **kwargs):
            raise AssertionError("LLM should not be called")

        monkeypatch.setattr(assignment_agent, "call_llm", fail)
        result = assignment_agent.validate_assignment(class_a_driver, heavy_truck, standard_route)
        assert assignment_agent.explain_assignment(result) == "Assignment is valid and ready."

    def test_route_lifecycle(
        self, assignment_agent: AssignmentAgent, class_a_driver: Driver, heavy_truck: Truck, standard_route: Route
    ) -> None:
        started = assignment_agent.start_route(standard_route, class_a_driver, heavy_truck)
        assert started.status == RouteStatus.IN_PROGRESS
        assert assignment_agent.complete_route(started).status == RouteStatus.COMPLETED

        with pytest.raises(RouteTransitionError):
            assignment_agent.complete_route(standard_route)

    def test_cancel_route(self, assignment_agent: AssignmentAgent, standard_route: Route) -> None:
        cancelled = assignment_agent.cancel_route(standard_route)
        assert cancelled.status == RouteStatus.CANCELLED
        with pytest.raises(RouteTransitionError):
            assignment_agent.cancel_route(cancelled)

    def test_llm_client_requires_api_key(self, assignment_agent: AssignmentAgent) -> None:
        with pytest.raises(ValueError, match="ANTHROPIC_API_KEY"):
            assignment_agent.anthropic_client

    def test_export_decisions(
        self,
        assignment_agent: AssignmentAgent,
        tmp_path: Path,
        class_a_driver: Driver,
        heavy_truck: Truck,
        standard_route: Route,
    ) -> None:
        assignment_agent.validate_assignment(class_a_driver, heavy_truck, standard_route)
        assignment_agent.validate_assignment(None, heavy_truck, standard_route)

        output = tmp_path / "decisions.json"
        assignment_agent.export_decisions(str(output))

        exported = json.loads(output.read_text())
        assert [d["output_data"]["is_valid"] for d in exported] == [True, False]


class TestPricingAgent:
    def test_has_no_llm_configured(self, pricing_agent: PricingAgent) -> None:
        assert pricing_agent.llm_config is None
        with pytest.raises(ValueError, match="No LLM configured"):
            pricing_agent.call_llm("Summarize this trip")

    def test_calculate_reference_trip(self, pricing_agent: PricingAgent) -> None:
        breakdown = pricing_agent.calculate(500, Decimal("28"), 5, RouteType.STANDARD)

        assert breakdown.rounded()["minimum_revenue"] == Decimal("709.38")
        (decision,) = pricing_agent.decision_history
        assert decision.output_data["total_cost"] == pytest.approx(591.15)

    def test_scheduler_profile_bills_whole_hours(self, config_manager: ConfigManager) -> None:
        agent = PricingAgent(profile="scheduler", config_manager=config_manager)
        breakdown = agent.execute(120, Decimal("25"), 0)
        assert breakdown.drive_time_hours == Decimal("3")
        assert breakdown.base_pay == Decimal("75")

    def test_quote_route(self, pricing_agent: PricingAgent, class_a_driver: Driver) -> None:
        route = Route(route_number="R-1001", distance_miles=372, route_type=RouteType.LONG_HAUL)
        breakdown = pricing_agent.quote_route(class_a_driver, route)

        assert breakdown.distance_miles == 372
        assert pricing_agent.decision_history[-1].input_data == {
            "route_number": "R-1001",
            "driver_id": "DRV-001",
        }


class TestDispatchBoardAgent:
    def test_build_board(self, config_manager: ConfigManager) -> None:
        agent = DispatchBoardAgent(config_manager=config_manager)
        routes = [
            Route(route_number=f"R-{i}", driver_id=f"D-{i % 3}", distance_miles=100, revenue=Decimal("500"), status=status)
            for i, status in enumerate([RouteStatus.COMPLETED] * 5 + [RouteStatus.SCHEDULED] * 2)
        ]

        board = agent.build_board(routes, status=RouteStatus.COMPLETED, page=2, page_size=2)

        assert [r.route_number for r in board.page.items] == ["R-2", "R-3"]
        assert board.page.total_pages == 3
        assert board.summary.route_count == 5
        assert board.summary.total_revenue == Decimal("2500")
        assert board.summary.unique_drivers == 3

    def test_default_page_size_from_config(self, config_manager: ConfigManager) -> None:
        agent = DispatchBoardAgent(config_manager=config_manager)
        board = agent.execute([Route(route_number="R-1", distance_miles=10)])
        assert board.page.page_size == 20
        assert board.status_filter is None

    def test_explicit_zero_page_size_is_rejected(self, config_manager: ConfigManager) -> None:
        agent = DispatchBoardAgent(config_manager=config_manager)
        with pytest.raises(ValueError):
            agent.build_board([Route(route_number="R-1", distance_miles=10)], page_size=0)
