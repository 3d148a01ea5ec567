"""rstags CLI - rstags command."""

import click

from rstags.cli.kinds import kinds_command
from rstags.cli.tags import tags_command
from rstags.config.constants import PROGRAM_NAME, PROGRAM_VERSION
from rstags.core.logging import configure_logging


@click.group()
@click.version_option(version=PROGRAM_VERSION, prog_name=PROGRAM_NAME)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """rstags - ctags-style declaration tags for Rust sources."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(tags_command, name="tags")
cli.add_command(kinds_command, name="kinds")


if __name__ == "__main__":
    cli()
