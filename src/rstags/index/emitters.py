"""Tag emitters: where parsed tags go.

The declaration parser hands every tag to a :class:`TagEmitter`. Emitters
decide the output format; they never filter (kind toggles and scope
qualification are applied before a tag reaches them).

Design principles:
- One emitter per run, shared across files
- ``close()`` flushes buffered output (sorted ctags is written at close)
- Emitters write to a caller-owned text stream and never close it
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import TextIO

from rstags.config.constants import PROGRAM_NAME, PROGRAM_VERSION, TAG_FILE_FORMAT
from rstags.config.models import OutputFormat
from rstags.index.models import Tag


class TagEmitter(ABC):
    """Abstract sink for tags."""

    @abstractmethod
    def emit(self, tag: Tag) -> None:
        """Accept one tag."""
        ...

    def close(self) -> None:  # noqa: B027
        """Flush anything buffered. Default: nothing to do."""


class CollectingEmitter(TagEmitter):
    """Keeps tags in memory, in emission order."""

    def __init__(self) -> None:
        self.tags: list[Tag] = []

    def emit(self, tag: Tag) -> None:
        self.tags.append(tag)


# =============================================================================
# ctags - extended tag file format
# =============================================================================


def format_tag_line(tag: Tag) -> str:
    """Render one extended-format line: ``name<TAB>path<TAB>line;"<TAB>kind``."""
    return f'{tag.name}\t{tag.path}\t{tag.line};"\t{tag.kind.letter}'


def pseudo_tags(*, sorted_output: bool) -> list[str]:
    return [
        f"!_TAG_FILE_FORMAT\t{TAG_FILE_FORMAT}\t/extended format/",
        f"!_TAG_FILE_SORTED\t{1 if sorted_output else 0}\t/0=unsorted, 1=sorted/",
        f"!_TAG_PROGRAM_NAME\t{PROGRAM_NAME}\t//",
        f"!_TAG_PROGRAM_VERSION\t{PROGRAM_VERSION}\t//",
    ]


class CtagsEmitter(TagEmitter):
    """Writes a ctags-compatible tag file.

    Sorted output is buffered until :meth:`close`; unsorted output is
    streamed as tags arrive.
    """

    def __init__(self, stream: TextIO, *, sort: bool = True) -> None:
        self._stream = stream
        self._sort = sort
        self._pending: list[Tag] = []
        self._closed = False
        for line in pseudo_tags(sorted_output=sort):
            stream.write(line + "\n")

    def emit(self, tag: Tag) -> None:
        if self._sort:
            self._pending.append(tag)
        else:
            self._stream.write(format_tag_line(tag) + "\n")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        for tag in sorted(self._pending, key=lambda t: (t.name, t.path, t.line)):
            self._stream.write(format_tag_line(tag) + "\n")
        self._pending.clear()
        self._stream.flush()


# =============================================================================
# JSON lines
# =============================================================================


class JsonLinesEmitter(TagEmitter):
    """Writes one JSON object per tag."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def emit(self, tag: Tag) -> None:
        self._stream.write(json.dumps(tag.to_dict(), ensure_ascii=False) + "\n")

    def close(self) -> None:
        self._stream.flush()


def make_emitter(output_format: OutputFormat, stream: TextIO, *, sort: bool = True) -> TagEmitter:
    """Build the emitter for a configured output format."""
    if output_format == "json":
        return JsonLinesEmitter(stream)
    return CtagsEmitter(stream, sort=sort)
