"""Index module - declaration tags for Rust sources.

Public API is in `rstags.index.ops`:
- generate_tags: Run discovery, parsing and emission over paths
- parse_file / parse_source: Single-file helpers
- TagRunStats: Result type

Emitters (ctags, JSON lines, in-memory) are in `rstags.index.emitters`.
The lexer and declaration scanner live in `rstags.index._internal.parsing`.
"""

from rstags.index.emitters import (
    CollectingEmitter,
    CtagsEmitter,
    JsonLinesEmitter,
    TagEmitter,
    make_emitter,
)
from rstags.index.models import ALL_KINDS, Tag, TagKind
from rstags.index.ops import (
    TagRunStats,
    discover_sources,
    enabled_kinds,
    generate_tags,
    parse_file,
    parse_source,
)

__all__ = [
    # Public API (ops.py)
    "generate_tags",
    "parse_file",
    "parse_source",
    "discover_sources",
    "enabled_kinds",
    "TagRunStats",
    # Models
    "Tag",
    "TagKind",
    "ALL_KINDS",
    # Emitters
    "TagEmitter",
    "CollectingEmitter",
    "CtagsEmitter",
    "JsonLinesEmitter",
    "make_emitter",
]
