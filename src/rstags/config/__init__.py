"""Config module exports."""

from rstags.config.loader import RsTagsSettings, load_config
from rstags.config.models import (
    KindsConfig,
    LoggingConfig,
    ParserConfig,
    RsTagsConfig,
    TagsConfig,
)

__all__ = [
    "load_config",
    "RsTagsConfig",
    "RsTagsSettings",
    "KindsConfig",
    "LoggingConfig",
    "ParserConfig",
    "TagsConfig",
]
