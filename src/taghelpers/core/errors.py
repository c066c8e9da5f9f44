"""taghelpers error types with typed error codes.

Malformed user declarations never raise: they become diagnostics on the
descriptor graph (see ``taghelpers.descriptors.diagnostics``). The errors
here cover the ambient layers around the extraction core.

Error code ranges:
- 2xxx: Config
- 3xxx: Symbol manifest
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2003

    # Symbol manifest (3xxx)
    MANIFEST_PARSE_ERROR = 3001
    MANIFEST_INVALID_ENTRY = 3002
    MANIFEST_UNRESOLVED_TYPE = 3003


@dataclass(frozen=True, slots=True)
class TagHelperError(Exception):
    """Base error with structured context for CLI and log output."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TagHelperError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ManifestError(TagHelperError):
    """Errors raised while loading a symbol manifest."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ManifestError":
        return cls(
            code=ErrorCode.MANIFEST_PARSE_ERROR,
            message=f"Failed to parse symbol manifest at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_entry(cls, location: str, reason: str) -> "ManifestError":
        return cls(
            code=ErrorCode.MANIFEST_INVALID_ENTRY,
            message=f"Invalid manifest entry at '{location}': {reason}",
            details={"location": location, "reason": reason},
        )

    @classmethod
    def unresolved_type(cls, type_name: str, referenced_by: str) -> "ManifestError":
        return cls(
            code=ErrorCode.MANIFEST_UNRESOLVED_TYPE,
            message=f"Type '{type_name}' referenced by '{referenced_by}' is not in the manifest",
            details={"type_name": type_name, "referenced_by": referenced_by},
        )
