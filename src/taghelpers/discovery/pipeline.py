"""End-to-end discovery over a set of type symbols.

Usage::

    table = load_manifest(Path("types.yaml"))
    descriptors = discover_tag_helpers(table, load_config())
"""

from __future__ import annotations

from collections.abc import Iterable

from taghelpers.config.models import TagHelpersConfig
from taghelpers.core.logging import get_logger
from taghelpers.descriptors.models import TagHelperDescriptor
from taghelpers.discovery.factory import DescriptorFactory
from taghelpers.discovery.visitor import TagHelperTypeVisitor, component_type_visitor
from taghelpers.producers.bind import BindTagHelperProducer
from taghelpers.producers.component import ComponentTagHelperProducer
from taghelpers.producers.event_handler import EventHandlerTagHelperProducer
from taghelpers.producers.intrinsics import (
    create_key_descriptor,
    create_ref_descriptor,
    create_splat_descriptor,
)
from taghelpers.symbols.facade import TypeSymbol

log = get_logger(__name__)


def discover_tag_helpers(
    symbols: Iterable[TypeSymbol],
    config: TagHelpersConfig | None = None,
) -> tuple[TagHelperDescriptor, ...]:
    """Run every enabled producer over ``symbols``.

    Producers run in a fixed order (default, component, bind,
    event_handler, ref, key, splat) whatever order they are enabled in.
    Component bind descriptors need the component producer enabled.
    """
    config = config or TagHelpersConfig()
    discovery = config.discovery
    enabled = set(config.producers.enabled)
    candidates = list(symbols)

    log.debug("discovery_started", types=len(candidates), producers=sorted(enabled))

    results: list[TagHelperDescriptor] = []

    if "default" in enabled:
        factory = DescriptorFactory(
            include_documentation=discovery.include_documentation,
            exclude_hidden=discovery.exclude_hidden,
        )
        produced = [
            descriptor
            for symbol in TagHelperTypeVisitor().filter(candidates)
            if (descriptor := factory.create_descriptor(symbol)) is not None
        ]
        log.debug("producer_finished", producer="default", count=len(produced))
        results.extend(produced)

    components: list[TagHelperDescriptor] = []
    if "component" in enabled:
        producer = ComponentTagHelperProducer(include_documentation=discovery.include_documentation)
        visitor = component_type_visitor(exclude_system_assemblies=discovery.exclude_system_assemblies)
        for symbol in visitor.filter(candidates):
            components.extend(producer.produce(symbol))
        log.debug("producer_finished", producer="component", count=len(components))
        results.extend(components)

    if "bind" in enabled:
        bind = BindTagHelperProducer()
        produced = [bind.create_fallback_descriptor()]
        for symbol in candidates:
            produced.extend(bind.produce(symbol))
        for component in components:
            produced.extend(bind.produce_for_component(component))
        log.debug("producer_finished", producer="bind", count=len(produced))
        results.extend(produced)

    if "event_handler" in enabled:
        event_handlers = EventHandlerTagHelperProducer()
        produced = [d for symbol in candidates for d in event_handlers.produce(symbol)]
        log.debug("producer_finished", producer="event_handler", count=len(produced))
        results.extend(produced)

    if "ref" in enabled:
        results.append(create_ref_descriptor())
    if "key" in enabled:
        results.append(create_key_descriptor())
    if "splat" in enabled:
        results.append(create_splat_descriptor())

    log.debug(
        "discovery_complete",
        descriptors=len(results),
        with_errors=sum(1 for d in results if d.has_errors),
    )
    return tuple(results)
