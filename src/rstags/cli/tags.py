"""rstags tags command - write a tag file."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, TextIO

import click

from rstags.config.constants import DEFAULT_TAGS_FILE
from rstags.config.loader import load_config
from rstags.core.errors import RsTagsError
from rstags.core.logging import configure_logging, set_run_id
from rstags.core.progress import pluralize, status
from rstags.index.emitters import make_emitter
from rstags.index.models import TagKind
from rstags.index.ops import generate_tags


def _kinds_override(letters: str) -> dict[str, bool]:
    try:
        selected = {TagKind.from_letter(letter) for letter in letters}
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--kinds") from e
    return {
        "function": TagKind.FUNCTION in selected,
        "type": TagKind.TYPE in selected,
        "let": TagKind.LET in selected,
    }


def _build_overrides(
    *,
    output_format: str | None,
    kinds: str | None,
    qualified: bool | None,
    strict: bool | None,
    sort: bool | None,
) -> dict[str, Any]:
    tags: dict[str, Any] = {}
    if output_format is not None:
        tags["output_format"] = output_format
    if kinds is not None:
        tags["kinds"] = _kinds_override(kinds)
    if qualified is not None:
        tags["qualified_tags"] = qualified
    if sort is not None:
        tags["sort"] = sort

    overrides: dict[str, Any] = {}
    if tags:
        overrides["tags"] = tags
    if strict is not None:
        overrides["parser"] = {"strict": strict}
    return overrides


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option(
    "-o",
    "--output",
    default=DEFAULT_TAGS_FILE,
    show_default=True,
    help="Tag file to write, or '-' for stdout.",
)
@click.option(
    "--format", "output_format", type=click.Choice(["ctags", "json"]), help="Output format."
)
@click.option("--kinds", help="Kind letters to emit, e.g. 'ft' (see: rstags kinds).")
@click.option("--qualified/--no-qualified", default=None, help="Also emit scope.name tags.")
@click.option("--scope", help="Scope name used for qualified tags.")
@click.option("--strict/--no-strict", default=None, help="Skip files that fail consistency checks.")
@click.option("--sort/--no-sort", default=None, help="Sort ctags output by name.")
@click.option("--json", "as_json", is_flag=True, help="Print the run summary as JSON.")
@click.pass_context
def tags_command(
    ctx: click.Context,
    paths: tuple[Path, ...],
    output: str,
    output_format: str | None,
    kinds: str | None,
    qualified: bool | None,
    scope: str | None,
    strict: bool | None,
    sort: bool | None,
    as_json: bool,
) -> None:
    """Generate tags for Rust sources.

    PATHS are files or directories (default: current directory). Directories
    are searched recursively for configured extensions.
    """
    project_root = Path.cwd()
    overrides = _build_overrides(
        output_format=output_format, kinds=kinds, qualified=qualified, strict=strict, sort=sort
    )
    try:
        config = load_config(project_root, **overrides)
    except RsTagsError as e:
        raise click.ClickException(str(e)) from e

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    log_file = None if verbose else configure_logging(config=config.logging)
    set_run_id()

    targets = list(paths) or [project_root]
    to_stdout = output == "-"
    stream: TextIO
    if to_stdout:
        stream = sys.stdout
    else:
        try:
            stream = open(output, "w", encoding="utf-8")  # noqa: SIM115
        except OSError as e:
            raise click.FileError(output, hint=e.strerror or str(e)) from e
    try:
        emitter = make_emitter(config.tags.output_format, stream, sort=config.tags.sort)
        stats = generate_tags(targets, config, emitter, scope=scope, relative_to=project_root)
    finally:
        if not to_stdout:
            stream.close()

    if as_json:
        click.echo(json.dumps({"output": output, **stats.to_dict()}), err=to_stdout)
        return

    destination = "stdout" if to_stdout else output
    status(
        f"Wrote {pluralize(stats.tags_emitted, 'tag')} from "
        f"{pluralize(stats.files_scanned, 'file')} to {destination}",
        style="success",
    )
    if stats.files_failed:
        status(f"Skipped {pluralize(stats.files_failed, 'file')}", style="warning")
        for error in stats.errors:
            status(str(error["message"]), style="none", indent=4)
        if log_file is not None:
            status(f"Details in {log_file}")
