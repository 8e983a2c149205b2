"""Main application configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from ai_kb.domain.config.output import OutputConfig
from ai_kb.domain.config.run import RunOptions


class AppConfig(BaseModel):
    """Main application configuration.

    Aggregates all configuration sections. Validation is performed at load
    time to fail fast on configuration errors.

    Attributes:
        sections_file: Path of the sections file (relative to root)
        root: Project root the patterns are resolved against
        run: Run options
        output: Output configuration
    """

    sections_file: str = Field(".ai-kb-config", min_length=1)
    root: str = "."
    run: RunOptions = Field(default_factory=RunOptions)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "sections_file": ".ai-kb-config",
                "root": ".",
                "run": {"verbose": False, "mode": "generate"},
                "output": {"directory": "docs/kb", "prefix": "ai-kb-", "tree_name": "tree"},
            }
        },
    )
