"""thd rewrite-type and html-case commands."""

import click

from taghelpers.descriptors.conventions import to_html_case
from taghelpers.typenames.generic import GenericTypeNameRewriter
from taghelpers.typenames.global_qualified import GlobalQualifiedTypeNameRewriter


def _parse_binding(value: str) -> tuple[str, str]:
    name, sep, argument = value.partition("=")
    if not sep or not name.strip() or not argument.strip():
        raise click.BadParameter(f"expected NAME=TYPE, got '{value}'", param_hint="--bind")
    return name.strip(), argument.strip()


@click.command()
@click.argument("type_name")
@click.option("--bind", "bindings", multiple=True, metavar="NAME=TYPE", help="Bind a type parameter")
@click.option(
    "--unspecified",
    multiple=True,
    metavar="NAME",
    help="Type parameter with no argument (becomes System.Object)",
)
@click.option("--global-qualify", is_flag=True, help="Prefix type references with global::")
@click.option("--param", "type_parameters", multiple=True, metavar="NAME", help="Type parameter to leave unqualified")
def rewrite_type_command(
    type_name: str,
    bindings: tuple[str, ...],
    unspecified: tuple[str, ...],
    global_qualify: bool,
    type_parameters: tuple[str, ...],
) -> None:
    """Rewrite TYPE_NAME, substituting type arguments and/or qualifying names.

    Generic substitution runs first, then global qualification.
    """
    mapping: dict[str, str | None] = dict(_parse_binding(b) for b in bindings)
    for name in unspecified:
        mapping[name] = None

    result = type_name
    if mapping:
        result = GenericTypeNameRewriter(mapping).rewrite(result)
    if global_qualify:
        # Bound parameters were replaced above; only the remaining ones stay bare.
        remaining = [p for p in type_parameters if p not in mapping]
        result = GlobalQualifiedTypeNameRewriter(remaining).rewrite(result)
    click.echo(result)


@click.command()
@click.argument("name")
def html_case_command(name: str) -> None:
    """Print the kebab-case HTML form of a PascalCase NAME."""
    click.echo(to_html_case(name))
