"""Directory exclusion tiers for source discovery.

Tier 0 (HARDCODED_DIRS): Never traversed, not user-configurable.
    - VCS internals, rstags data directory

Tier 1 (DEFAULT_PRUNABLE_DIRS): Skipped by default.
    - Build outputs, dependency caches, editor state
    - Extra names can be added with ``tags.exclude_dirs`` in config
"""

from __future__ import annotations

from collections.abc import Iterable

# =============================================================================
# Tier 0: HARDCODED - Never traverse
# =============================================================================

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        # VCS internals
        ".git",
        ".svn",
        ".hg",
        ".bzr",
        # rstags data
        ".rstags",
    )
)

# =============================================================================
# Tier 1: DEFAULT_PRUNABLE - Skipped by default
# =============================================================================

DEFAULT_PRUNABLE_DIRS: frozenset[str] = frozenset(
    (
        # -------------------------------------------------------------------------
        # Rust ecosystem
        # -------------------------------------------------------------------------
        "target",  # Cargo build output
        ".cargo",  # Cargo home when vendored into the repo
        # -------------------------------------------------------------------------
        # Mixed-language workspaces
        # -------------------------------------------------------------------------
        "node_modules",
        "__pycache__",
        ".venv",
        "venv",
        # -------------------------------------------------------------------------
        # IDE/Editor directories
        # -------------------------------------------------------------------------
        ".idea",  # JetBrains
        ".vscode",  # VS Code
        ".vs",  # Visual Studio
        # -------------------------------------------------------------------------
        # Misc caches
        # -------------------------------------------------------------------------
        ".cache",
        "tmp",
    )
)

PRUNABLE_DIRS: frozenset[str] = HARDCODED_DIRS | DEFAULT_PRUNABLE_DIRS


def prunable_dirs(extra: Iterable[str] = ()) -> frozenset[str]:
    """Directory names to prune during a walk, including user additions."""
    return PRUNABLE_DIRS | frozenset(extra)
