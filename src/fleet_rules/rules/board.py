"""
Dispatch board helpers: status filtering, pagination and route summaries.
"""

import math
from decimal import Decimal
from typing import Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel

from fleet_rules.data.models.fleet import Route, RouteStatus

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of a list."""

    items: list[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


class RouteSummary(BaseModel):
    """Totals over a set of routes."""

    route_count: int
    total_distance: int
    total_revenue: Decimal
    average_revenue: Decimal
    unique_drivers: int


def filter_routes(routes: Sequence[Route], status: Optional[RouteStatus] = None) -> list[Route]:
    """All routes, or only those with the given status."""
    if status is None:
        return list(routes)
    return [r for r in routes if r.status == status]


def paginate(items: Sequence[T], page: int = 1, page_size: int = 20) -> Page[T]:
    """
    Return one page of items (skip/take).

    The page number is clamped to the valid range; an empty list yields a
    single empty page.

    Raises:
        ValueError: If page_size is less than 1
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    total_items = len(items)
    total_pages = max(1, math.ceil(total_items / page_size))
    page = min(max(page, 1), total_pages)

    start = (page - 1) * page_size
    return Page(
        items=list(items[start : start + page_size]),
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
    )


def summarize_routes(routes: Sequence[Route]) -> RouteSummary:
    """Count, distance, revenue and distinct drivers over a set of routes."""
    total_revenue = sum((r.revenue for r in routes), Decimal("0"))
    average_revenue = total_revenue / len(routes) if routes else Decimal("0")
    drivers = {r.driver_id for r in routes if r.driver_id is not None}

    return RouteSummary(
        route_count=len(routes),
        total_distance=sum(r.distance_miles for r in routes),
        total_revenue=total_revenue,
        average_revenue=average_revenue,
        unique_drivers=len(drivers),
    )
