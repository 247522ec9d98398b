from __future__ import annotations

from collections.abc import Callable
from typing import Any

from synthwire._internal.members import SERVICE_CONTAINER_MEMBER
from synthwire._internal.synthesis.builder import ClassDefinition, template
from synthwire._internal.synthesis.templates import CAPABILITY_TEMPLATE
from synthwire.services import ServiceContainerProtocol, SupportsServices


class CapabilityInstaller:
    """Make synthesized classes implement ``SupportsServices``.

    Bases that already implement the capability are left untouched. Other
    bases get a private slot and a lazily initializing accessor. The slot is
    written with ``object.__setattr__`` so a base ``__setattr__`` never sees it.
    """

    def __init__(
        self,
        *,
        service_container_factory: Callable[[Any], ServiceContainerProtocol],
    ) -> None:
        self._service_container_factory = service_container_factory
        self._template = template(CAPABILITY_TEMPLATE)

    @property
    def accessor_name(self) -> str:
        """Return the member name required by the capability."""
        return SERVICE_CONTAINER_MEMBER.name

    def build(self, definition: ClassDefinition) -> bool:
        """Install the capability on the definition when the base lacks it.

        Returns true when an accessor was installed.

        Args:
            definition: Class definition under construction.

        """
        if issubclass(definition.base, SERVICE_CONTAINER_MEMBER.owner):
            return False

        definition.bind("_synthwire_service_container_factory", self._service_container_factory)
        definition.bind("_synthwire_service_container_type", ServiceContainerProtocol)
        definition.bind("_synthwire_object_setattr", object.__setattr__)
        definition.add_member(
            self._template.render(
                slot_name=self.accessor_name,
                slot_attribute=definition.private_name(self.accessor_name),
                accessor_name=self.accessor_name,
            ),
        )
        definition.add_interface(SupportsServices)
        return True
