"""
Dispatch Board Agent - Route listing for dispatchers.

This agent:
- Filters routes by status
- Pages through the filtered list
- Summarizes distance, revenue and drivers for the filtered routes
"""

from datetime import datetime
from decimal import Decimal
from time import time
from typing import Any, Optional, Sequence

from pydantic import BaseModel

from fleet_rules.agents.base import BaseAgent
from fleet_rules.data.models.fleet import Route, RouteStatus
from fleet_rules.rules.board import Page, RouteSummary, filter_routes, paginate, summarize_routes


class DispatchBoard(BaseModel):
    """One rendered view of the dispatch board."""

    timestamp: datetime
    status_filter: Optional[RouteStatus] = None
    page: Page
    summary: RouteSummary


class DispatchBoardAgent(BaseAgent):
    """
    Dispatch Board Agent for route listings.
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the dispatch board agent."""
        super().__init__(agent_name="dispatch_board", **kwargs)

        self.settings = self.config_manager.get_board_settings()

    def build_board(
        self,
        routes: Sequence[Route],
        status: Optional[RouteStatus] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> DispatchBoard:
        """
        Filter, page and summarize routes.

        The summary covers every route matching the filter, not only the
        current page.

        Args:
            routes: All known routes
            status: Optional status filter
            page: Page number (clamped to the valid range)
            page_size: Routes per page (defaults to the configured size)

        Returns:
            DispatchBoard with the page and summary
        """
        start_time = time()
        page_size = page_size if page_size is not None else self.settings.page_size

        self.logger.info(
            "building_dispatch_board",
            routes=len(routes),
            status=status.value if status else None,
            page=page,
            page_size=page_size,
        )

        filtered = filter_routes(routes, status)
        board = DispatchBoard(
            timestamp=datetime.now(),
            status_filter=status,
            page=paginate(filtered, page, page_size),
            summary=summarize_routes(filtered),
        )

        self.record_decision(
            decision_type="dispatch_board",
            input_data={"routes": len(routes), "status": status.value if status else None},
            output_data={
                "matching_routes": board.summary.route_count,
                "page": board.page.page,
                "total_pages": board.page.total_pages,
            },
            reasoning=f"Listed {len(board.page.items)} of {board.summary.route_count} matching routes",
            started_at=start_time,
            tools_used=["route_filter", "paginator"],
        )

        return board

    def execute(self, *args: Any, **kwargs: Any) -> DispatchBoard:
        """
        Execute a board listing (delegates to build_board).

        Returns:
            DispatchBoard
        """
        return self.build_board(*args, **kwargs)


def main() -> None:
    """Example usage of the dispatch board agent."""
    from fleet_rules.core.logging import configure_logging

    configure_logging()

    agent = DispatchBoardAgent()

    routes = [
        Route(route_number="R-1001", driver_id="DRV-001", distance_miles=450, revenue=Decimal("2850"), status=RouteStatus.COMPLETED),
        Route(route_number="R-1002", driver_id="DRV-002", distance_miles=680, revenue=Decimal("4250"), status=RouteStatus.IN_PROGRESS),
        Route(route_number="R-1003", driver_id="DRV-001", distance_miles=320, revenue=Decimal("1920"), status=RouteStatus.SCHEDULED),
        Route(route_number="R-1004", driver_id="DRV-003", distance_miles=890, revenue=Decimal("5800"), status=RouteStatus.DELAYED),
        Route(route_number="R-1005", driver_id="DRV-004", distance_miles=520, revenue=Decimal("3150"), status=RouteStatus.COMPLETED),
        Route(route_number="R-1006", driver_id="DRV-002", distance_miles=740, revenue=Decimal("4680"), status=RouteStatus.COMPLETED),
    ]

    board = agent.build_board(routes, status=RouteStatus.COMPLETED, page_size=2)

    print("\n" + "=" * 80)
    print("DISPATCH BOARD - COMPLETED")
    print("=" * 80)
    for route in board.page.items:
        print(f"  {route.route_number}  {route.distance_miles:>5} mi  ${route.revenue:,.2f}")
    print(f"\nPage {board.page.page} of {board.page.total_pages}")
    print()
    print(f"Routes: {board.summary.route_count}")
    print(f"Total Distance: {board.summary.total_distance:,} mi")
    print(f"Total Revenue: ${board.summary.total_revenue:,.2f}")
    print(f"Average Revenue: ${board.summary.average_revenue:,.2f}")
    print(f"Unique Drivers: {board.summary.unique_drivers}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
