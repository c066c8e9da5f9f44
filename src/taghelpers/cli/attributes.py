"""thd parse-attributes command - parse a required-attribute selector list."""

import json

import click

from taghelpers.cli.output import console, print_diagnostics, required_attribute_table
from taghelpers.discovery.required_attributes import parse_required_attributes


@click.command()
@click.argument("selector")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def parse_attributes_command(selector: str, as_json: bool) -> None:
    """Parse SELECTOR as an HtmlTargetElement Attributes value.

    Example: thd parse-attributes "class, [type=text], data-*"
    """
    attributes = parse_required_attributes(selector)

    if as_json:
        click.echo(json.dumps([a.to_dict() for a in attributes], indent=2))
    else:
        console.print(required_attribute_table(attributes))
        print_diagnostics(d for a in attributes for d in a.diagnostics)

    if any(a.has_errors for a in attributes):
        raise SystemExit(1)
