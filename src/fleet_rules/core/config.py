"""
Configuration management for the fleet rules platform.

Handles loading and accessing:
- Business rules (config.yaml), with named profiles
- LLM configuration (llms.json)
- Environment variables
"""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fleet_rules.data.models.fleet import RouteType


class LLMModelConfig(BaseModel):
    """Configuration for a specific LLM model."""

    provider: str
    model: str
    temperature: float = 0.2
    max_tokens: int = 4096
    timeout_seconds: int = 60


class AgentLLMConfig(BaseModel):
    """LLM configuration for a specific agent."""

    primary_model: LLMModelConfig
    fallback_model: Optional[LLMModelConfig] = None
    reasoning: str
    system_prompt_template: str
    tools_enabled: list[str] = Field(default_factory=list)


class AssignmentRules(BaseModel):
    """Route-type rules applied by the assignment validator."""

    hazmat_requires_class_a: bool = True
    min_experience_years: dict[RouteType, int] = Field(
        default_factory=lambda: {RouteType.OVERSIZED: 3}
    )
    maintenance_warning_miles: int = Field(1000, ge=0)


class PricingRules(BaseModel):
    """Constants used by the pay & cost calculator."""

    fuel_price_per_gallon: Decimal = Field(Decimal("3.85"), gt=0)
    average_mpg: Decimal = Field(Decimal("6.5"), gt=0)
    other_cost_per_mile: Decimal = Field(Decimal("0.10"), ge=0)
    profit_margin: Decimal = Field(Decimal("1.20"), ge=1)

    # Drive time
    average_speed_mph: Decimal = Field(Decimal("60"), gt=0)
    drive_time_model: Literal["continuous", "whole_hours"] = "continuous"

    # Experience bonus: rate per year, capped
    experience_bonus_per_year: Decimal = Field(Decimal("0.01"), ge=0)
    max_experience_bonus: Decimal = Field(Decimal("0.25"), ge=0)

    # Route bonuses
    route_flat_bonus: dict[RouteType, Decimal] = Field(
        default_factory=lambda: {
            RouteType.HAZMAT: Decimal("250"),
            RouteType.OVERSIZED: Decimal("300"),
        }
    )
    long_haul_bonus_per_mile: Decimal = Field(Decimal("0.15"), ge=0)


class BoardSettings(BaseModel):
    """Dispatch board defaults."""

    page_size: int = Field(20, ge=1)


class EnvironmentSettings(BaseSettings):
    """Environment variables configuration."""

    # LLM Provider API Keys
    anthropic_api_key: Optional[str] = Field(None, alias="ANTHROPIC_API_KEY")
    openai_api_key: Optional[str] = Field(None, alias="OPENAI_API_KEY")

    # Config location override
    config_dir: Optional[str] = Field(None, alias="FLEET_RULES_CONFIG_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class ConfigManager:
    """
    Central configuration manager for the fleet rules platform.

    Loads and provides access to:
    - Business rules from config/config.yaml
    - LLM configuration from config/llms.json
    - Environment variables from .env
    """

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_dir: Optional path to config directory. Defaults to
                FLEET_RULES_CONFIG_DIR, then the source checkout's config/.
                Installed packages do not ship config/, so set
                FLEET_RULES_CONFIG_DIR there.
        """
        self._business_config: Optional[dict[str, Any]] = None
        self._llm_config: Optional[dict[str, Any]] = None
        self._env_settings: Optional[EnvironmentSettings] = None

        if config_dir is None:
            if self.env.config_dir:
                config_dir = Path(self.env.config_dir)
            else:
                project_root = Path(__file__).resolve().parents[3]
                config_dir = project_root / "config"

        self.config_dir = Path(config_dir)

    def _config_path(self, filename: str) -> Path:
        config_path = self.config_dir / filename
        if not config_path.is_file():
            raise FileNotFoundError(
                f"{config_path} not found; set FLEET_RULES_CONFIG_DIR to the directory "
                "holding config.yaml and llms.json"
            )
        return config_path

    @property
    def business_config(self) -> dict[str, Any]:
        """Load and return business configuration from config.yaml."""
        if self._business_config is None:
            config_path = self._config_path("config.yaml")
            with open(config_path, "r") as f:
                self._business_config = yaml.safe_load(f) or {}
        return self._business_config

    @property
    def llm_config(self) -> dict[str, Any]:
        """Load and return LLM configuration from llms.json."""
        if self._llm_config is None:
            config_path = self._config_path("llms.json")
            with open(config_path, "r") as f:
                self._llm_config = json.load(f)
        return self._llm_config

    @property
    def env(self) -> EnvironmentSettings:
        """Load and return environment settings."""
        if self._env_settings is None:
            self._env_settings = EnvironmentSettings()
        return self._env_settings

    def get_agent_llm_config(self, agent_name: str) -> AgentLLMConfig:
        """
        Get LLM configuration for a specific agent.

        Args:
            agent_name: Name of the agent (e.g., "assignment", "pricing")

        Returns:
            AgentLLMConfig with the agent's LLM settings

        Raises:
            KeyError: If agent configuration is not found
        """
        agent_assignments = self.llm_config.get("agent_assignments", {})
        if agent_name not in agent_assignments:
            raise KeyError(f"No LLM configuration found for agent: {agent_name}")

        agent_config = agent_assignments[agent_name]
        return AgentLLMConfig(**agent_config)

    def get_api_key(self, provider: str) -> Optional[str]:
        """
        Get API key for a specific provider.

        Args:
            provider: Provider name ("anthropic" or "openai")

        Returns:
            API key or None if not set
        """
        provider_map = {
            "anthropic": self.env.anthropic_api_key,
            "openai": self.env.openai_api_key,
        }
        return provider_map.get(provider.lower())

    def get_company_info(self) -> dict[str, Any]:
        """Get company information from business config."""
        return self.business_config.get("company", {})

    def get_assignment_rules(self, profile: Optional[str] = None) -> AssignmentRules:
        """
        Get assignment validation rules.

        Args:
            profile: Optional named profile overriding the base rules

        Raises:
            KeyError: If the profile is not defined
        """
        return AssignmentRules(**self._section_with_profile("assignment", profile))

    def get_pricing_rules(self, profile: Optional[str] = None) -> PricingRules:
        """
        Get pay & cost calculator constants.

        Args:
            profile: Optional named profile overriding the base constants

        Raises:
            KeyError: If the profile is not defined
        """
        return PricingRules(**self._section_with_profile("pricing", profile))

    def get_board_settings(self) -> BoardSettings:
        """Get dispatch board defaults."""
        return BoardSettings(**self.business_config.get("dispatch_board", {}))

    def _section_with_profile(self, section: str, profile: Optional[str]) -> dict[str, Any]:
        """Return a config section with a named profile shallow-merged on top."""
        base = dict(self.business_config.get(section, {}))
        profiles = base.pop("profiles", {}) or {}

        if profile is None:
            return base

        if profile not in profiles:
            raise KeyError(f"No {section} profile named: {profile}")

        return {**base, **profiles[profile]}


# Global config instance
_config_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """
    Get the global configuration manager instance.

    Returns:
        ConfigManager singleton instance
    """
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
