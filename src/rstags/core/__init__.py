"""Core module exports."""

from rstags.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    ParseError,
    RsTagsError,
    SourceError,
)
from rstags.core.logging import configure_logging, set_run_id
from rstags.core.progress import pluralize, progress, status

__all__ = [
    # Errors
    "RsTagsError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "ParseError",
    "SourceError",
    # Logging
    "configure_logging",
    "set_run_id",
    # Progress
    "pluralize",
    "progress",
    "status",
]
