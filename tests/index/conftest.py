"""Shared fixtures for index tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from rstags.config.models import RsTagsConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def rust_sample() -> Path:
    """A real-world Rust file (old base64 module) with lifetimes and doc comments."""
    return FIXTURES_DIR / "rust-sample.rs"


@pytest.fixture
def config() -> RsTagsConfig:
    """Default configuration."""
    return RsTagsConfig()


@pytest.fixture
def crate_dir(tmp_path: Path) -> Path:
    """A small crate layout with sources, build output and VCS data."""
    root = tmp_path / "crate"
    (root / "src" / "util").mkdir(parents=True)
    (root / "target" / "debug").mkdir(parents=True)
    (root / ".git").mkdir()

    (root / "src" / "lib.rs").write_text("fn alpha() {}\ntype Id = u64;\n")
    (root / "src" / "util" / "mod.rs").write_text("fn beta(x) {\n}\nlet gamma = 1;\n")
    (root / "src" / "notes.txt").write_text("fn not_rust() {}\n")
    (root / "target" / "debug" / "build.rs").write_text("fn generated() {}\n")
    (root / ".git" / "hook.rs").write_text("fn hidden() {}\n")
    return root
