"""
Trip pricing models - calculator input and cost breakdown.
"""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field, computed_field

from fleet_rules.data.models.fleet import RouteType


class TripParameters(BaseModel):
    """Inputs to the pay & cost calculator."""

    distance_miles: int = Field(..., ge=0, description="Trip distance in miles")
    hourly_rate: Decimal = Field(..., ge=0, description="Driver hourly pay (USD)")
    years_experience: int = Field(0, ge=0, description="Driver years of experience")
    route_type: RouteType = Field(RouteType.STANDARD)


class CostBreakdown(BaseModel):
    """
    Driver pay and trip cost breakdown.

    Component amounts are stored; totals are derived. Amounts are unrounded,
    round for display only.
    """

    distance_miles: int
    drive_time_hours: Decimal

    # Driver pay components
    base_pay: Decimal
    experience_bonus: Decimal
    route_bonus: Decimal

    # Operating costs
    fuel_cost: Decimal
    other_costs: Decimal

    profit_margin: Decimal = Field(..., description="Revenue multiplier over total cost")

    @computed_field
    @property
    def total_driver_pay(self) -> Decimal:
        """Base pay plus experience and route bonuses."""
        return self.base_pay + self.experience_bonus + self.route_bonus

    @computed_field
    @property
    def total_cost(self) -> Decimal:
        """Driver pay plus fuel and other costs."""
        return self.total_driver_pay + self.fuel_cost + self.other_costs

    @computed_field
    @property
    def minimum_revenue(self) -> Decimal:
        """Suggested minimum revenue at the target profit margin."""
        return self.total_cost * self.profit_margin

    @computed_field
    @property
    def profit(self) -> Decimal:
        """Profit at the suggested minimum revenue."""
        return self.minimum_revenue - self.total_cost

    def rounded(self, places: int = 2) -> dict[str, Decimal]:
        """Money fields rounded half up for display."""
        quantum = Decimal(1).scaleb(-places)
        fields = [
            "base_pay",
            "experience_bonus",
            "route_bonus",
            "total_driver_pay",
            "fuel_cost",
            "other_costs",
            "total_cost",
            "minimum_revenue",
            "profit",
        ]
        return {name: getattr(self, name).quantize(quantum, rounding=ROUND_HALF_UP) for name in fields}
