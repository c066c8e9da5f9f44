"""thd describe command - discover tag helpers from a symbol manifest."""

import json
from pathlib import Path

import click

from taghelpers.cli.output import console, descriptor_table, status
from taghelpers.config.loader import load_config
from taghelpers.core.errors import TagHelperError
from taghelpers.core.logging import configure_logging
from taghelpers.discovery.pipeline import discover_tag_helpers
from taghelpers.symbols.manifest import load_manifest


@click.command()
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--include-documentation", is_flag=True, help="Copy doc comments onto descriptors")
@click.option("--exclude-hidden", is_flag=True, help="Skip EditorBrowsable(Never) members")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: .taghelpers/config.yaml)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def describe_command(
    ctx: click.Context,
    manifest: Path,
    include_documentation: bool,
    exclude_hidden: bool,
    config_path: Path | None,
    as_json: bool,
) -> None:
    """Discover tag helpers declared in MANIFEST.

    MANIFEST is a YAML or JSON description of the assembly's types.
    """
    try:
        config = load_config(config_path=config_path)
        symbols = load_manifest(manifest)
    except TagHelperError as e:
        raise click.ClickException(str(e)) from e

    logging_config = config.logging
    if ctx.obj and ctx.obj.get("verbose"):
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)

    overrides = {}
    if include_documentation:
        overrides["include_documentation"] = True
    if exclude_hidden:
        overrides["exclude_hidden"] = True
    if overrides:
        config = config.model_copy(update={"discovery": config.discovery.model_copy(update=overrides)})

    descriptors = discover_tag_helpers(symbols, config)

    if as_json:
        click.echo(json.dumps([d.to_dict() for d in descriptors], indent=2))
        return

    console.print(descriptor_table(descriptors))
    failed = sum(1 for d in descriptors if d.has_errors)
    if failed:
        status(f"{failed} of {len(descriptors)} tag helpers have errors", style="error")
    else:
        status(f"{len(descriptors)} tag helpers")
