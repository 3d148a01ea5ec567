"""High-level tag generation.

Pipeline: Discovery -> Read -> Parse -> Emit

- ``discover_sources`` expands the paths given on the command line
- ``parse_file`` / ``parse_source`` run one declaration-parser pass
- ``generate_tags`` drives a whole run, isolating per-file failures
"""

from __future__ import annotations

import os
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from rstags.config.models import KindsConfig, RsTagsConfig
from rstags.core.errors import RsTagsError, SourceError
from rstags.core.excludes import prunable_dirs
from rstags.core.progress import progress
from rstags.index._internal.parsing import CharSource, DeclarationParser
from rstags.index.emitters import CollectingEmitter, TagEmitter
from rstags.index.models import ALL_KINDS, Tag, TagKind

log = structlog.get_logger(__name__)

_BYTES_PER_MB = 1024 * 1024


@dataclass
class TagRunStats:
    """Outcome of one ``generate_tags`` run."""

    files_scanned: int = 0
    files_failed: int = 0
    tags_emitted: int = 0
    errors: list[dict[str, object]] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "files_scanned": self.files_scanned,
            "files_failed": self.files_failed,
            "tags_emitted": self.tags_emitted,
            "errors": self.errors,
        }


def enabled_kinds(kinds: KindsConfig) -> frozenset[TagKind]:
    """Translate the per-kind config switches into a kind set."""
    toggles = {
        TagKind.FUNCTION: kinds.function,
        TagKind.TYPE: kinds.type,
        TagKind.LET: kinds.let,
    }
    return frozenset(kind for kind, on in toggles.items() if on)


def discover_sources(
    paths: Iterable[Path],
    extensions: Collection[str],
    exclude_dirs: Iterable[str] = (),
) -> list[Path]:
    """Expand paths into source files.

    Files are taken as given regardless of extension. Directories are walked,
    pruning VCS/build directories, and only files with a matching extension
    are kept. The result is sorted and free of duplicates.
    """
    pruned = prunable_dirs(exclude_dirs)
    found: set[Path] = set()
    for path in paths:
        if path.is_file():
            found.add(path)
            continue
        if not path.is_dir():
            log.warning("path_not_found", path=str(path))
            continue
        for dirpath, dirnames, filenames in os.walk(path):
            dirnames[:] = [d for d in dirnames if d not in pruned]
            for filename in filenames:
                if any(filename.endswith(ext) for ext in extensions):
                    found.add(Path(dirpath) / filename)
    return sorted(found)


def parse_source(
    text: str,
    *,
    path: str = "",
    scope: str | None = None,
    qualified_tags: bool = False,
    kinds: Collection[TagKind] = ALL_KINDS,
    strict: bool = False,
) -> list[Tag]:
    """Parse in-memory text and return its tags in emission order."""
    emitter = CollectingEmitter()
    DeclarationParser(
        CharSource.from_text(text, name=path),
        emitter,
        path=path,
        scope=scope,
        qualified_tags=qualified_tags,
        enabled_kinds=kinds,
        strict=strict,
    ).parse()
    return emitter.tags


def read_source(path: Path, *, max_file_size_mb: int) -> bytes:
    """Read a source file, enforcing the size limit.

    Raises:
        SourceError: File cannot be read or is over the limit.
    """
    limit = max_file_size_mb * _BYTES_PER_MB
    try:
        size = path.stat().st_size
        if size > limit:
            raise SourceError.too_large(str(path), size, limit)
        return path.read_bytes()
    except OSError as e:
        raise SourceError.unreadable(str(path), e.strerror or str(e)) from e


def parse_file(
    path: Path,
    config: RsTagsConfig,
    *,
    scope: str | None = None,
    display_path: str | None = None,
) -> list[Tag]:
    """Parse one file with the given configuration.

    Tags are collected first so that a strict-mode failure leaves nothing
    half-emitted for this file.

    Raises:
        SourceError: File cannot be read or is too large.
        ParseError: Strict mode and an internal consistency check failed.
    """
    data = read_source(path, max_file_size_mb=config.tags.max_file_size_mb)
    name = display_path or str(path)
    emitter = CollectingEmitter()
    DeclarationParser(
        CharSource(data, name=name),
        emitter,
        path=name,
        scope=scope,
        qualified_tags=config.tags.qualified_tags,
        enabled_kinds=enabled_kinds(config.tags.kinds),
        strict=config.parser.strict,
    ).parse()
    return emitter.tags


def generate_tags(
    paths: Iterable[Path],
    config: RsTagsConfig,
    emitter: TagEmitter,
    *,
    scope: str | None = None,
    relative_to: Path | None = None,
) -> TagRunStats:
    """Tag every source under ``paths`` and feed the emitter.

    Per-file errors are logged and counted; they never stop the run. The
    emitter is closed when all files are done.
    """
    stats = TagRunStats()
    sources = discover_sources(paths, config.tags.extensions, config.tags.exclude_dirs)
    log.info("tag_run_start", files=len(sources))

    try:
        for path in progress(sources, desc="Tagging"):
            display = _display_path(path, relative_to)
            try:
                tags = parse_file(path, config, scope=scope, display_path=display)
            except RsTagsError as e:
                stats.files_failed += 1
                stats.errors.append(e.to_dict())
                log.warning("file_skipped", path=display, error=e.error_name, reason=e.message)
                continue

            stats.files_scanned += 1
            for tag in tags:
                emitter.emit(tag)
            stats.tags_emitted += len(tags)
            log.debug("file_tagged", path=display, tags=len(tags))
    finally:
        emitter.close()

    log.info("tag_run_done", **stats.to_dict())
    return stats


def _display_path(path: Path, relative_to: Path | None) -> str:
    if relative_to is not None:
        try:
            return path.resolve().relative_to(relative_to.resolve()).as_posix()
        except ValueError:
            pass
    return path.as_posix()
