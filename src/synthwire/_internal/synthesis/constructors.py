from __future__ import annotations

import inspect
from dataclasses import dataclass

from synthwire._internal.reflection import ConstructorDescriptor, accessible_constructors
from synthwire._internal.synthesis.builder import ClassDefinition, is_reserved_name, template
from synthwire._internal.synthesis.templates import (
    CONSTRUCTOR_TEMPLATE,
    FORWARDING_CONSTRUCTOR_TEMPLATE,
    NO_CONSTRUCTOR_TEMPLATE,
    OVERLOAD_CONSTRUCTOR_TEMPLATE,
)
from synthwire.exceptions import SynthWireConstructorNotFoundError, SynthWireReflectionError
from synthwire.markers import private_constructor


@dataclass(frozen=True, slots=True)
class _RenderedSignature:
    parameters: str
    arguments: str


class ConstructorSynthesizer:
    """Emit forwarding constructors mirroring every accessible base constructor."""

    def __init__(self) -> None:
        self._constructor_template = template(CONSTRUCTOR_TEMPLATE)
        self._overload_template = template(OVERLOAD_CONSTRUCTOR_TEMPLATE)
        self._forwarding_template = template(FORWARDING_CONSTRUCTOR_TEMPLATE)

    def build(self, definition: ClassDefinition) -> tuple[ConstructorDescriptor, ...]:
        """Add constructors of the definition base to the definition.

        Args:
            definition: Class definition under construction.

        """
        constructors = accessible_constructors(definition.base)
        if not constructors:
            self._build_unconstructible(definition)
        elif len(constructors) == 1 and not constructors[0].is_overload:
            self._build_single(definition, constructors[0])
        else:
            self._build_overloaded(definition, constructors)
        return constructors

    def _build_single(
        self,
        definition: ClassDefinition,
        constructor: ConstructorDescriptor,
    ) -> None:
        rendered = self._render_signature(definition, constructor, index=0)
        definition.add_member(
            self._constructor_template.render(
                class_name=definition.class_name,
                instance_name=constructor.instance_parameter_name,
                parameters=rendered.parameters,
                arguments=rendered.arguments,
            ),
        )

    def _build_overloaded(
        self,
        definition: ClassDefinition,
        constructors: tuple[ConstructorDescriptor, ...],
    ) -> None:
        blocks = [
            self._overload_template.render(
                parameters=self._render_signature(definition, constructor, index=index).parameters,
            )
            for index, constructor in enumerate(constructors)
        ]
        blocks.append(self._forwarding_template.render(class_name=definition.class_name))
        definition.add_member("\n\n".join(blocks))

    def _build_unconstructible(self, definition: ClassDefinition) -> None:
        definition.bind("_synthwire_private_constructor", private_constructor)
        definition.bind("_synthwire_constructor_not_found_error", SynthWireConstructorNotFoundError)
        definition.bind(
            "_synthwire_constructor_not_found_message",
            f"{definition.base.__qualname__} has no constructor accessible to descendants.",
        )
        definition.add_member(NO_CONSTRUCTOR_TEMPLATE)

    def _render_signature(
        self,
        definition: ClassDefinition,
        constructor: ConstructorDescriptor,
        *,
        index: int,
    ) -> _RenderedSignature:
        parameters = [constructor.instance_parameter_name]
        arguments: list[str] = []
        signature_parameters = list(constructor.signature.parameters.values())
        last_positional_only = max(
            (
                position
                for position, parameter in enumerate(signature_parameters)
                if parameter.kind is inspect.Parameter.POSITIONAL_ONLY
            ),
            default=None,
        )
        has_var_positional = any(
            parameter.kind is inspect.Parameter.VAR_POSITIONAL for parameter in signature_parameters
        )
        keyword_marker_emitted = False

        for position, (parameter, parameter_type) in enumerate(
            zip(signature_parameters, constructor.parameter_types, strict=True),
        ):
            if is_reserved_name(parameter.name):
                msg = f"parameter name {parameter.name!r} is reserved for generated code"
                raise SynthWireReflectionError(constructor.function, ValueError(msg))
            kind = parameter.kind
            if (
                kind is inspect.Parameter.KEYWORD_ONLY
                and not has_var_positional
                and not keyword_marker_emitted
            ):
                parameters.append("*")
                keyword_marker_emitted = True

            annotation_name = definition.bind(
                f"_synthwire_ctor_{index}_type_{position}",
                parameter_type,
            )
            if kind is inspect.Parameter.VAR_POSITIONAL:
                rendered = f"*{parameter.name}: {annotation_name}"
                arguments.append(f"*{parameter.name}")
            elif kind is inspect.Parameter.VAR_KEYWORD:
                rendered = f"**{parameter.name}: {annotation_name}"
                arguments.append(f"**{parameter.name}")
            elif kind is inspect.Parameter.KEYWORD_ONLY:
                rendered = f"{parameter.name}: {annotation_name}"
                arguments.append(f"{parameter.name}={parameter.name}")
            else:
                rendered = f"{parameter.name}: {annotation_name}"
                arguments.append(parameter.name)

            if parameter.default is not inspect.Parameter.empty:
                default_name = definition.bind(
                    f"_synthwire_ctor_{index}_default_{position}",
                    parameter.default,
                )
                rendered = f"{rendered} = {default_name}"
            parameters.append(rendered)

            if position == last_positional_only:
                parameters.append("/")

        return _RenderedSignature(
            parameters=", ".join(parameters),
            arguments=", ".join(arguments),
        )
