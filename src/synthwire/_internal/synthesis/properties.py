from __future__ import annotations

from synthwire._internal.members import GET_SERVICE_MEMBER
from synthwire._internal.reflection import PropertyDescriptor, all_properties
from synthwire._internal.synthesis.builder import (
    ClassDefinition,
    is_reserved_name,
    is_valid_member_name,
    template,
)
from synthwire._internal.synthesis.templates import PROPERTY_TEMPLATE
from synthwire.exceptions import SynthWireReflectionError
from synthwire.policies import PropertyKeyPolicy
from synthwire.services import default_value_for


class PropertyInterceptorSynthesizer:
    """Override readable properties so reads are answered by the service container."""

    def __init__(
        self,
        *,
        accessor_name: str,
        property_key_policy: PropertyKeyPolicy = PropertyKeyPolicy.NONE,
    ) -> None:
        self._accessor_name = accessor_name
        self._property_key_policy = property_key_policy
        self._template = template(PROPERTY_TEMPLATE)

    def build(self, definition: ClassDefinition) -> tuple[PropertyDescriptor, ...]:
        """Add a property override for every readable base property.

        Args:
            definition: Class definition under construction.

        """
        intercepted = tuple(
            descriptor
            for descriptor in all_properties(definition.base)
            if descriptor.name != self._accessor_name
        )
        for index, descriptor in enumerate(intercepted):
            self._build_property(definition, descriptor, index=index)
        return intercepted

    def _build_property(
        self,
        definition: ClassDefinition,
        descriptor: PropertyDescriptor,
        *,
        index: int,
    ) -> None:
        if not is_valid_member_name(descriptor.name):
            msg = f"property name {descriptor.name!r} is not an identifier"
            raise SynthWireReflectionError(descriptor.prop, ValueError(msg))
        if is_reserved_name(descriptor.name):
            msg = f"property name {descriptor.name!r} is reserved for generated code"
            raise SynthWireReflectionError(descriptor.prop, ValueError(msg))

        prefix = f"_synthwire_intercepted_{index}"
        definition.bind(prefix, descriptor.prop)
        definition.bind(f"{prefix}_type", descriptor.value_type)
        definition.bind(f"{prefix}_default", default_value_for(descriptor.value_type))
        name_binding = definition.bind(f"{prefix}_name", descriptor.name)

        if self._property_key_policy is PropertyKeyPolicy.PROPERTY_NAME:
            key_expression = name_binding
        else:
            key_expression = "None"

        definition.add_member(
            self._template.render(
                index=index,
                name=descriptor.name,
                accessor_name=self._accessor_name,
                get_service_name=GET_SERVICE_MEMBER.name,
                key_expression=key_expression,
            ),
        )
