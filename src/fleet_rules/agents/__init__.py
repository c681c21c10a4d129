"""
Agents for fleet business rules.

This module contains specialized agents for:
- Assignment: Driver/truck/route validation and route lifecycle
- Pricing: Driver pay and trip cost estimates
- Dispatch Board: Route filtering, paging and summaries
"""

from .assignment import AssignmentAgent
from .base import AgentDecision, BaseAgent
from .dispatch_board import DispatchBoard, DispatchBoardAgent
from .pricing import PricingAgent

__all__ = [
    "BaseAgent",
    "AgentDecision",
    "AssignmentAgent",
    "PricingAgent",
    "DispatchBoardAgent",
    "DispatchBoard",
]
