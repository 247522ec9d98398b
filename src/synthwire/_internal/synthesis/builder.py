from __future__ import annotations

import keyword
import logging
import typing
from textwrap import indent
from typing import Any

from jinja2 import Environment, StrictUndefined, Template

from synthwire._internal.synthesis.templates import CLASS_TEMPLATE

_INDENT = " " * 4
RESERVED_PREFIX = "_synthwire_"
logger = logging.getLogger(__name__)

_environment = Environment(
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)


def template(text: str) -> Template:
    """Compile template text with the shared code generation environment.

    Args:
        text: jinja2 template source.

    """
    return _environment.from_string(text)


def is_valid_member_name(name: str) -> bool:
    """Return true when name can be declared directly in generated source.

    Args:
        name: Member name to check.

    """
    return name.isidentifier() and not keyword.iskeyword(name)


def is_reserved_name(name: str) -> bool:
    """Return true when name collides with the names bound for generated code.

    Args:
        name: Member or parameter name to check.

    """
    return name.startswith(RESERVED_PREFIX)


class ClassDefinition:
    """A synthesized class under construction.

    Synthesizers add rendered member blocks and bind the runtime objects those
    blocks refer to. ``create_type`` renders the class source, executes it in a
    fresh namespace and returns the finished class. A definition is created
    once and finalized once.
    """

    def __init__(
        self,
        *,
        base: type[Any],
        class_name: str,
        module_name: str,
    ) -> None:
        self.base = base
        self.class_name = class_name
        self.module_name = module_name
        self._member_blocks: list[str] = []
        self._interfaces: list[Any] = []
        self._namespace: dict[str, Any] = {
            "__name__": module_name,
            "_synthwire_base_type": base,
            "_synthwire_any": Any,
            "_synthwire_overload": typing.overload,
            "_synthwire_property": property,
            "_synthwire_super": super,
        }
        self._created_type: type[Any] | None = None

    @property
    def interfaces(self) -> tuple[Any, ...]:
        """Return capability interfaces the class is declared to implement."""
        return tuple(self._interfaces)

    def bind(self, name: str, value: Any) -> str:
        """Bind a runtime object to a global name visible to generated code.

        Args:
            name: Global name used by rendered member blocks.
            value: Object the name refers to.

        """
        self._namespace[name] = value
        return name

    def private_name(self, name: str) -> str:
        """Return the attribute name ``__name`` is mangled to inside the class body.

        Args:
            name: Private member name without leading underscores.

        """
        return f"_{self.class_name.lstrip('_')}__{name}"

    def add_member(self, block: str) -> None:
        """Append a rendered member block.

        Args:
            block: Unindented member source.

        """
        self._member_blocks.append(indent(block, _INDENT))

    def add_interface(self, interface: Any) -> None:
        """Declare that the class implements an ABC based capability.

        The class is registered as a virtual subclass on ``create_type`` so
        that bases with custom metaclasses are supported.

        Args:
            interface: ABC to register the class with.

        """
        self._interfaces.append(interface)

    def render(self) -> str:
        """Render the class source."""
        return template(CLASS_TEMPLATE).render(
            class_name=self.class_name,
            member_blocks=self._member_blocks,
        )

    def create_type(self) -> type[Any]:
        """Execute the rendered class source and return the finished class."""
        if self._created_type is not None:
            msg = f"{self.class_name} is already created."
            raise RuntimeError(msg)

        code = self.render()
        logger.debug("Generated source for %s:\n%s", self.class_name, code)

        namespace = dict(self._namespace)
        filename = f"<synthwire {self.module_name}.{self.class_name}>"
        exec(compile(code, filename, "exec"), namespace)  # noqa: S102
        created_type: type[Any] = namespace[self.class_name]

        for interface in self._interfaces:
            interface.register(created_type)

        self._created_type = created_type
        return created_type
