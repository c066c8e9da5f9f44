"""taghelpers CLI - thd command."""

import click

from taghelpers import __version__
from taghelpers.cli.attributes import parse_attributes_command
from taghelpers.cli.describe import describe_command
from taghelpers.cli.typenames import html_case_command, rewrite_type_command
from taghelpers.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="thd")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """taghelpers - extract tag helper descriptors from type manifests."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(describe_command, name="describe")
cli.add_command(parse_attributes_command, name="parse-attributes")
cli.add_command(rewrite_type_command, name="rewrite-type")
cli.add_command(html_case_command, name="html-case")


if __name__ == "__main__":
    cli()
