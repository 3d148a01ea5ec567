"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (RSTAGS__SECTION__KEY)
3. Project YAML (.rstags/config.yaml)
4. Global YAML (~/.config/rstags/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    RSTAGS__<SECTION>__<KEY>=<VALUE>

Examples:
    RSTAGS__LOGGING__LEVEL=DEBUG
    RSTAGS__TAGS__QUALIFIED_TAGS=true
    RSTAGS__PARSER__STRICT=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from rstags.config.constants import DEFAULT_EXTENSIONS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
OutputFormat = Literal["ctags", "json"]


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
        RSTAGS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO reports per-run summaries, DEBUG per-file detail.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class KindsConfig(BaseModel):
    """Which tag kinds are emitted.

    Env vars:
        RSTAGS__TAGS__KINDS__FUNCTION, RSTAGS__TAGS__KINDS__TYPE, RSTAGS__TAGS__KINDS__LET
    """

    function: bool = Field(default=True, description="Functions and methods (f).")
    type: bool = Field(default=True, description="Type aliases (t).")
    let: bool = Field(default=True, description="Local bindings (l).")


class TagsConfig(BaseModel):
    """Tag generation configuration.

    Env vars:
        RSTAGS__TAGS__QUALIFIED_TAGS: Also emit scope-qualified names
        RSTAGS__TAGS__OUTPUT_FORMAT: ctags or json
        RSTAGS__TAGS__MAX_FILE_SIZE_MB: Skip files larger than this
    """

    kinds: KindsConfig = Field(default_factory=KindsConfig)
    qualified_tags: bool = Field(
        default=False,
        description="Emit an extra 'scope.name' tag for every tag found under a scope.",
    )
    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="File extensions scanned when walking directories.",
    )
    exclude_dirs: list[str] = Field(
        default_factory=list,
        description="Additional directory names to prune while walking.",
    )
    max_file_size_mb: int = Field(
        default=10,
        description="Skip files larger than this (MB).",
    )
    output_format: OutputFormat = "ctags"
    sort: bool = Field(default=True, description="Sort ctags output by name.")

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in v]

    @field_validator("max_file_size_mb")
    @classmethod
    def validate_max_file_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"max_file_size_mb must be positive, got {v}")
        return v


class ParserConfig(BaseModel):
    """Declaration parser configuration.

    Env vars:
        RSTAGS__PARSER__STRICT: Abort a file on unexpected tokens instead of skipping
    """

    strict: bool = Field(
        default=False,
        description="Treat internal consistency checks as errors. The file is then skipped.",
    )


class RsTagsConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tags: TagsConfig = Field(default_factory=TagsConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
