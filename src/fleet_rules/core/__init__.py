"""
Core infrastructure for the fleet rules platform.

This module provides:
- Config: Configuration and rule-set management
- Logging: structlog setup
"""

from .config import (
    AssignmentRules,
    BoardSettings,
    ConfigManager,
    PricingRules,
    get_config,
)
from .logging import configure_logging

__all__ = [
    "ConfigManager",
    "get_config",
    "AssignmentRules",
    "PricingRules",
    "BoardSettings",
    "configure_logging",
]
