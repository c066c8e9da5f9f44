"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides symbol factories shared across the suite.
"""

import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local taghelpers package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of taghelpers modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("taghelpers"):
        del sys.modules[module_name]

from taghelpers.symbols import wellknown  # noqa: E402
from taghelpers.symbols.model import SymbolAttribute, SymbolProperty, SymbolType  # noqa: E402


@pytest.fixture
def make_tag_helper() -> Callable[..., SymbolType]:
    """Factory for ``ITagHelper`` implementations in ``TestNamespace``.

    Types given a ``base_type`` inherit the interface instead of declaring it.
    """

    def _make(
        name: str,
        *,
        properties: Sequence[SymbolProperty] = (),
        attributes: Sequence[SymbolAttribute] = (),
        base_type: SymbolType | None = None,
        **kwargs: Any,
    ) -> SymbolType:
        interfaces = () if base_type is not None else (wellknown.ITAG_HELPER,)
        return SymbolType(
            name,
            namespace=kwargs.pop("namespace", "TestNamespace"),
            assembly_name=kwargs.pop("assembly_name", "TestAssembly"),
            interfaces=kwargs.pop("interfaces", interfaces),
            properties=tuple(properties),
            attributes=tuple(attributes),
            base_type=base_type,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_component() -> Callable[..., SymbolType]:
    """Factory for ``IComponent`` implementations in ``Test``."""

    def _make(
        name: str,
        *,
        properties: Sequence[SymbolProperty] = (),
        **kwargs: Any,
    ) -> SymbolType:
        return SymbolType(
            name,
            namespace=kwargs.pop("namespace", "Test"),
            assembly_name=kwargs.pop("assembly_name", "TestAssembly"),
            interfaces=kwargs.pop("interfaces", (wellknown.ICOMPONENT,)),
            properties=tuple(properties),
            **kwargs,
        )

    return _make
