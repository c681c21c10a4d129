"""
Base agent class for fleet rule agents.

Provides common functionality:
- Configuration and rule-set loading
- Lazy LLM client initialization (explanations only, rules never use an LLM)
- Logging and decision tracking
"""

import json
from abc import ABC, abstractmethod
from datetime import datetime
from time import time
from typing import Any, Optional

import structlog
from anthropic import Anthropic
from openai import OpenAI
from pydantic import BaseModel

from fleet_rules.core.config import AgentLLMConfig, ConfigManager, get_config


class AgentDecision(BaseModel):
    """
    Record of one rule evaluation made by an agent.
    """

    timestamp: datetime
    agent_name: str
    decision_type: str
    input_data: dict[str, Any]
    reasoning: str
    confidence: float  # 0.0 to 1.0
    output_data: dict[str, Any]
    tools_used: list[str]
    execution_time_seconds: float


class BaseAgent(ABC):
    """
    Base class for fleet rule agents.

    Rule evaluation is delegated to the pure functions in fleet_rules.rules;
    agents add configuration, logging and a decision history on top.
    """

    def __init__(
        self,
        agent_name: str,
        config_manager: Optional[ConfigManager] = None,
        logger: Optional[structlog.BoundLogger] = None,
    ) -> None:
        """
        Initialize the base agent.

        Args:
            agent_name: Name of the agent (e.g., "assignment", "pricing")
            config_manager: Optional config manager (defaults to global instance)
            logger: Optional structured logger
        """
        self.agent_name = agent_name
        self.config_manager = config_manager or get_config()
        self.logger = logger or structlog.get_logger(agent_name=agent_name)

        # Agents without an llms.json entry never call an LLM
        self.llm_config: Optional[AgentLLMConfig] = None
        if agent_name in self.config_manager.llm_config.get("agent_assignments", {}):
            self.llm_config = self.config_manager.get_agent_llm_config(agent_name)

        self._anthropic_client: Optional[Anthropic] = None
        self._openai_client: Optional[OpenAI] = None

        self.decision_history: list[AgentDecision] = []

        self.logger.info("agent_initialized", agent_name=agent_name)

    @property
    def anthropic_client(self) -> Anthropic:
        """Get or create Anthropic client."""
        if self._anthropic_client is None:
            api_key = self.config_manager.get_api_key("anthropic")
            if not api_key:
                raise ValueError("ANTHROPIC_API_KEY not set in environment")
            self._anthropic_client = Anthropic(api_key=api_key)
        return self._anthropic_client

    @property
    def openai_client(self) -> OpenAI:
        """Get or create OpenAI client."""
        if self._openai_client is None:
            api_key = self.config_manager.get_api_key("openai")
            if not api_key:
                raise ValueError("OPENAI_API_KEY not set in environment")
            self._openai_client = OpenAI(api_key=api_key)
        return self._openai_client

    def call_llm(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        use_fallback: bool = False,
        **kwargs: Any,
    ) -> str:
        """
        Call the configured LLM with the given prompt.

        Args:
            prompt: User prompt
            system_prompt: Optional system prompt (defaults to agent's template)
            use_fallback: Whether to use fallback model
            **kwargs: Additional arguments to pass to the LLM

        Returns:
            LLM response text
        """
        if self.llm_config is None:
            raise ValueError(f"No LLM configured for agent: {self.agent_name}")

        model_config = self.llm_config.fallback_model if use_fallback else self.llm_config.primary_model
        if model_config is None:
            model_config = self.llm_config.primary_model

        system_prompt = system_prompt or self.llm_config.system_prompt_template

        call_kwargs = {
            "temperature": model_config.temperature,
            "max_tokens": model_config.max_tokens,
            **kwargs,
        }

        self.logger.info(
            "calling_llm",
            provider=model_config.provider,
            model=model_config.model,
            prompt_length=len(prompt),
        )

        try:
            if model_config.provider == "anthropic":
                response = self.anthropic_client.messages.create(
                    model=model_config.model,
                    system=system_prompt,
                    messages=[{"role": "user", "content": prompt}],
                    **call_kwargs,
                )
                return response.content[0].text

            elif model_config.provider == "openai":
                messages = [
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt},
                ]
                response = self.openai_client.chat.completions.create(
                    model=model_config.model, messages=messages, **call_kwargs
                )
                return response.choices[0].message.content or ""

            else:
                raise ValueError(f"Unsupported provider: {model_config.provider}")

        except Exception as e:
            self.logger.error("llm_call_failed", error=str(e), provider=model_config.provider)
            raise

    def record_decision(
        self,
        decision_type: str,
        input_data: dict[str, Any],
        output_data: dict[str, Any],
        reasoning: str,
        started_at: float,
        tools_used: Optional[list[str]] = None,
        confidence: float = 1.0,
    ) -> AgentDecision:
        """
        Build and log a decision for a rule evaluation started at `started_at`.

        Rule evaluations are deterministic, so confidence defaults to 1.0.
        """
        decision = AgentDecision(
            timestamp=datetime.now(),
            agent_name=self.agent_name,
            decision_type=decision_type,
            input_data=input_data,
            reasoning=reasoning,
            confidence=confidence,
            output_data=output_data,
            tools_used=tools_used or [],
            execution_time_seconds=time() - started_at,
        )
        self.log_decision(decision)
        return decision

    def log_decision(self, decision: AgentDecision) -> None:
        """
        Log an agent decision and keep it in the history.

        Args:
            decision: AgentDecision instance with decision details
        """
        self.decision_history.append(decision)
        self.logger.info(
            "agent_decision",
            decision_type=decision.decision_type,
            confidence=decision.confidence,
            reasoning=decision.reasoning,
            execution_time=decision.execution_time_seconds,
        )

    def export_decisions(self, filepath: str) -> None:
        """
        Export decision history to a JSON file.

        Args:
            filepath: Path to output JSON file
        """
        with open(filepath, "w") as f:
            decisions_dict = [d.model_dump(mode="json") for d in self.decision_history]
            json.dump(decisions_dict, f, indent=2, default=str)

        self.logger.info("decisions_exported", filepath=filepath, count=len(self.decision_history))

    @abstractmethod
    def execute(self, *args: Any, **kwargs: Any) -> Any:
        """
        Execute the agent's primary function.

        Returns:
            Agent-specific output
        """
        pass

    def __repr__(self) -> str:
        """String representation of the agent."""
        return f"{self.__class__.__name__}(agent_name='{self.agent_name}')"
