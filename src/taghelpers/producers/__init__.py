"""Descriptor producers for component and directive-attribute intrinsics."""

from taghelpers.producers.bind import BindTagHelperProducer
from taghelpers.producers.component import (
    ComponentTagHelperProducer,
    PropertyKind,
    classify_property,
    collect_parameters,
)
from taghelpers.producers.event_handler import EventHandlerTagHelperProducer
from taghelpers.producers.intrinsics import (
    create_key_descriptor,
    create_ref_descriptor,
    create_splat_descriptor,
)

__all__ = [
    # Symbol-driven
    "BindTagHelperProducer",
    "ComponentTagHelperProducer",
    "EventHandlerTagHelperProducer",
    "PropertyKind",
    "classify_property",
    "collect_parameters",
    # Fixed
    "create_key_descriptor",
    "create_ref_descriptor",
    "create_splat_descriptor",
]
