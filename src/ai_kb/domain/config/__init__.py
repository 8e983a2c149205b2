"""Configuration models with Pydantic validation."""

from ai_kb.domain.config.app import AppConfig
from ai_kb.domain.config.output import OutputConfig
from ai_kb.domain.config.run import RunOptions

__all__ = [
    "AppConfig",
    "OutputConfig",
    "RunOptions",
]
