from __future__ import annotations

import logging
import types
import uuid
from typing import Any

from synthwire._internal.synthesis.builder import ClassDefinition, is_valid_member_name

_GENERATED_PACKAGE = "synthwire.generated"
logger = logging.getLogger(__name__)


class GenerationModule:
    """Generation container owning the classes synthesized from one originating module."""

    def __init__(self, origin: str) -> None:
        self.origin = origin
        self.name = f"{_GENERATED_PACKAGE}.{origin.replace('.', '_')}_{uuid.uuid4().hex}"
        self.module = types.ModuleType(
            self.name,
            f"Classes synthesized from classes declared in {origin!r}.",
        )
        logger.debug("Created generation module %s for %s", self.name, origin)

    def define_type(self, base: type[Any]) -> ClassDefinition:
        """Start a uniquely named class definition deriving from base.

        Args:
            base: Class the synthesized class derives from.

        """
        prefix = base.__name__ if is_valid_member_name(base.__name__) else "Synthesized"
        class_name = f"{prefix}_{uuid.uuid4().hex}"
        return ClassDefinition(
            base=base,
            class_name=class_name,
            module_name=self.name,
        )

    def add_type(self, created_type: type[Any]) -> None:
        """Expose a finished class as an attribute of the generation module.

        Args:
            created_type: Class created from a definition of this module.

        """
        setattr(self.module, created_type.__name__, created_type)

    @property
    def type_names(self) -> tuple[str, ...]:
        """Return names of the classes owned by this module."""
        return tuple(name for name, value in vars(self.module).items() if isinstance(value, type))
