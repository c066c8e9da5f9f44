"""Rich rendering for CLI output.

Tables go to stdout; status markers go to stderr so ``--json`` output
stays pipeable.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taghelpers.descriptors.diagnostics import Diagnostic
from taghelpers.descriptors.models import RequiredAttributeDescriptor, TagHelperDescriptor

console = Console()
_err_console = Console(stderr=True)

_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
}


def status(message: str, *, style: str = "success") -> None:
    _err_console.print(_STYLES.get(style, "") + escape(message), highlight=False)


def _rule_summary(descriptor: TagHelperDescriptor) -> str:
    parts = []
    for rule in descriptor.tag_matching_rules:
        text = escape(rule.tag_name)
        if rule.attributes:
            text += escape("[" + ", ".join(a.display_name for a in rule.attributes) + "]")
        if rule.parent_tag:
            text = f"{escape(rule.parent_tag)} > {text}"
        parts.append(text)
    return "\n".join(parts)


def descriptor_table(descriptors: Iterable[TagHelperDescriptor]) -> Table:
    table = Table(title="Tag helpers", show_lines=False)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Matches", style="green")
    table.add_column("Attributes")
    table.add_column("Diagnostics", style="red")

    for descriptor in descriptors:
        diagnostics = list(descriptor.get_all_diagnostics())
        table.add_row(
            descriptor.kind.value,
            escape(descriptor.display_name),
            _rule_summary(descriptor),
            escape("\n".join(a.display_name for a in descriptor.bound_attributes)),
            "\n".join(d.id for d in diagnostics),
        )
    return table


def required_attribute_table(attributes: Iterable[RequiredAttributeDescriptor]) -> Table:
    table = Table(title="Required attributes")
    table.add_column("Name", style="cyan")
    table.add_column("Name match")
    table.add_column("Value")
    table.add_column("Value match")
    table.add_column("Diagnostics", style="red")

    for attribute in attributes:
        table.add_row(
            escape(attribute.name),
            attribute.name_comparison.value,
            escape(attribute.value) if attribute.value is not None else "",
            attribute.value_comparison.value,
            "\n".join(d.id for d in attribute.diagnostics),
        )
    return table


def print_diagnostics(diagnostics: Iterable[Diagnostic]) -> None:
    for diagnostic in diagnostics:
        style = "error" if diagnostic.is_error else "warning"
        status(str(diagnostic), style=style)
