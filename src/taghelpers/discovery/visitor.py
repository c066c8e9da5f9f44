"""Candidate type filtering."""

from __future__ import annotations

from collections.abc import Iterable

from taghelpers.symbols import wellknown
from taghelpers.symbols.facade import TypeKind, TypeSymbol, implements, is_accessible

SYSTEM_ASSEMBLY_PREFIX = "System."


class TagHelperTypeVisitor:
    """Select the types a discovery pass should describe.

    A type qualifies when it is a public (through every enclosing type),
    non-abstract class that implements ``interface_name`` somewhere along
    its base-type chain. Generic types are rejected unless
    ``allow_generic`` is set. Output keeps input order.
    """

    def __init__(
        self,
        interface_name: str = wellknown.ITAG_HELPER,
        *,
        allow_generic: bool = False,
        exclude_system_assemblies: bool = False,
    ) -> None:
        self.interface_name = interface_name
        self.allow_generic = allow_generic
        self.exclude_system_assemblies = exclude_system_assemblies

    def is_candidate(self, symbol: TypeSymbol) -> bool:
        if symbol.kind is not TypeKind.CLASS or symbol.is_abstract:
            return False
        if not self.allow_generic and symbol.arity != 0:
            return False
        if self.exclude_system_assemblies and symbol.assembly_name.startswith(SYSTEM_ASSEMBLY_PREFIX):
            return False
        return is_accessible(symbol) and implements(symbol, self.interface_name)

    def filter(self, symbols: Iterable[TypeSymbol]) -> list[TypeSymbol]:
        return [symbol for symbol in symbols if self.is_candidate(symbol)]


def component_type_visitor(*, exclude_system_assemblies: bool = True) -> TagHelperTypeVisitor:
    """Visitor for components: ``IComponent`` implementers, generics allowed."""
    return TagHelperTypeVisitor(
        wellknown.ICOMPONENT,
        allow_generic=True,
        exclude_system_assemblies=exclude_system_assemblies,
    )
