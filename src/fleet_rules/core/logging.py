"""
Structured logging setup.
"""

import structlog


def configure_logging(json_output: bool = True) -> None:
    """
    Configure structlog with ISO timestamps and log levels.

    Args:
        json_output: Render JSON lines (default) or human-readable console output
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ]
    )
