"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TAGHELPERS__SECTION__KEY)
3. Project YAML (.taghelpers/config.yaml)
4. Global YAML (~/.config/taghelpers/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TAGHELPERS__<SECTION>__<KEY>=<VALUE>

Examples:
    TAGHELPERS__LOGGING__LEVEL=DEBUG
    TAGHELPERS__DISCOVERY__INCLUDE_DOCUMENTATION=true
    TAGHELPERS__DISCOVERY__EXCLUDE_HIDDEN=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ProducerName = Literal["default", "component", "bind", "event_handler", "ref", "key", "splat"]

# Order matters: bind derives component bind descriptors from component output.
ALL_PRODUCERS: tuple[ProducerName, ...] = (
    "default",
    "component",
    "bind",
    "event_handler",
    "ref",
    "key",
    "splat",
)


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TAGHELPERS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG traces every candidate type.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class DiscoveryConfig(BaseModel):
    """Descriptor discovery flags.

    Env vars:
        TAGHELPERS__DISCOVERY__INCLUDE_DOCUMENTATION: Attach doc-comment XML
        TAGHELPERS__DISCOVERY__EXCLUDE_HIDDEN: Skip EditorBrowsable(Never) symbols
        TAGHELPERS__DISCOVERY__EXCLUDE_SYSTEM_ASSEMBLIES: Skip System.* assemblies when finding components
    """

    include_documentation: bool = Field(
        default=False,
        description="Attach doc-comment XML verbatim to descriptors and bound attributes.",
    )
    exclude_hidden: bool = Field(
        default=False,
        description="Omit types and properties marked EditorBrowsable(Never).",
    )
    exclude_system_assemblies: bool = Field(
        default=True,
        description="Skip component types from assemblies whose name starts with 'System.'.",
    )


class ProducersConfig(BaseModel):
    """Which descriptor producers run, in pipeline order."""

    enabled: list[ProducerName] = Field(
        default_factory=lambda: list(ALL_PRODUCERS),
        description="Producer names to run. Order is fixed by the pipeline.",
    )

    @field_validator("enabled")
    @classmethod
    def dedupe_enabled(cls, v: list[ProducerName]) -> list[ProducerName]:
        seen: list[ProducerName] = []
        for name in v:
            if name not in seen:
                seen.append(name)
        return seen


class TagHelpersConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    producers: ProducersConfig = Field(default_factory=ProducersConfig)
