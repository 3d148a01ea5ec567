"""rstags error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Source / Parse
- 9xxx: Internal

End-of-input is not an error: parsing finishes through
``EndOfInput`` in the parsing package, which does not derive from
``RsTagsError`` and is caught only by the declaration parser.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Source / Parse (3xxx)
    SOURCE_UNREADABLE = 3001
    SOURCE_TOO_LARGE = 3002
    PARSE_UNEXPECTED_TOKEN = 3101

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class RsTagsError(Exception):
    """Base error with structured context."""

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


class ConfigError(RsTagsError):
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


class SourceError(RsTagsError):
    """Errors reading an input file."""

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "SourceError":
        return cls(
            code=ErrorCode.SOURCE_UNREADABLE,
            message=f"Cannot read {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def too_large(cls, path: str, size: int, limit: int) -> "SourceError":
        return cls(
            code=ErrorCode.SOURCE_TOO_LARGE,
            message=f"Skipping {path}: {size} bytes exceeds limit of {limit} bytes",
            details={"path": path, "size": size, "limit": limit},
        )


class ParseError(RsTagsError):
    """Internal consistency failure while scanning declarations (strict mode)."""

    @classmethod
    def unexpected_token(
        cls, expected: str, found: str, *, path: str = "", line: int = 0
    ) -> "ParseError":
        where = f"{path}:{line}" if path else f"line {line}"
        return cls(
            code=ErrorCode.PARSE_UNEXPECTED_TOKEN,
            message=f"Expected {expected} at {where}, found {found}",
            details={"expected": expected, "found": found, "path": path, "line": line},
        )


class InternalError(RsTagsError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
