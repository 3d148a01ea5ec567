"""rstags kinds command - list tag kinds."""

from pathlib import Path

import click

from rstags.config.loader import load_config
from rstags.core.errors import RsTagsError
from rstags.index.models import TagKind
from rstags.index.ops import enabled_kinds


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def kinds_command(as_json: bool) -> None:
    """List tag kinds and whether they are enabled."""
    try:
        config = load_config(Path.cwd())
    except RsTagsError as e:
        raise click.ClickException(str(e)) from e
    enabled = enabled_kinds(config.tags.kinds)

    if as_json:
        import json

        click.echo(
            json.dumps(
                [
                    {
                        "letter": kind.letter,
                        "name": kind.kind_name,
                        "description": kind.description,
                        "enabled": kind in enabled,
                    }
                    for kind in TagKind
                ]
            )
        )
        return

    for kind in TagKind:
        marker = "" if kind in enabled else "  [off]"
        click.echo(f"{kind.letter}  {kind.kind_name:<5} {kind.description}{marker}")
