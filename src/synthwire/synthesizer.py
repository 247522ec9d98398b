from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from synthwire._internal.cache import SynthesisCache
from synthwire._internal.synthesis.capability import CapabilityInstaller
from synthwire._internal.synthesis.constructors import ConstructorSynthesizer
from synthwire._internal.synthesis.generation import GenerationModule
from synthwire._internal.synthesis.properties import PropertyInterceptorSynthesizer
from synthwire._internal.type_checks import is_runtime_class
from synthwire.exceptions import SynthWireInvalidBaseTypeError
from synthwire.lock_mode import LockMode
from synthwire.policies import PropertyKeyPolicy
from synthwire.services import ServiceContainer, ServiceContainerProtocol

T = TypeVar("T")

logger = logging.getLogger(__name__)


class TypeSynthesizer:
    """Synthesize service-aware subclasses of arbitrary classes.

    A synthesizer is the state of one execution context: it owns the cache of
    synthesized classes and the generation modules holding them. Each base
    class is synthesized at most once per synthesizer. Create one synthesizer
    per thread with ``lock_mode=LockMode.NONE``, or share one between threads
    with the default ``LockMode.THREAD``.

    Examples:
        .. code-block:: python

            class Greeter:
                @property
                def greeting(self) -> str:
                    return "hello"


            synthesizer = TypeSynthesizer()
            greeter_type = synthesizer.synthesize(Greeter)
            greeter = greeter_type()
            greeter.service_container.register(str, "hi")
            assert greeter.greeting == "hi"

    """

    def __init__(
        self,
        *,
        lock_mode: LockMode = LockMode.THREAD,
        property_key_policy: PropertyKeyPolicy = PropertyKeyPolicy.NONE,
        service_container_factory: Callable[[Any], ServiceContainerProtocol] = ServiceContainer,
    ) -> None:
        """Initialize the synthesizer.

        Args:
            lock_mode: Locking used by the synthesized types cache.
            property_key_policy: Key passed to ``get_service`` by intercepted properties.
            service_container_factory: Callable receiving the owner instance and
                returning its service container.

        """
        self._types: SynthesisCache[type[Any], type[Any]] = SynthesisCache(lock_mode=lock_mode)
        self._modules: SynthesisCache[str, GenerationModule] = SynthesisCache(lock_mode=lock_mode)
        self._constructor_synthesizer = ConstructorSynthesizer()
        self._capability_installer = CapabilityInstaller(
            service_container_factory=service_container_factory,
        )
        self._property_synthesizer = PropertyInterceptorSynthesizer(
            accessor_name=self._capability_installer.accessor_name,
            property_key_policy=property_key_policy,
        )

    def synthesize(self, base: type[T]) -> type[T]:
        """Return the synthesized subclass of base, creating it on first request.

        Args:
            base: Class the synthesized class derives from.

        """
        if not is_runtime_class(base):
            msg = f"Cannot synthesize a subclass of {base!r}: expected a class."
            raise SynthWireInvalidBaseTypeError(msg)
        return self._types.get_or_create(base, lambda: self._create_type(base))

    def get_synthesized(self, base: type[T]) -> type[T] | None:
        """Return the synthesized subclass of base if it was already created.

        Args:
            base: Class the synthesized class derives from.

        """
        return self._types.get(base)

    def get_generation_module(self, origin: str) -> GenerationModule | None:
        """Return the generation module for an originating module name, if created.

        Args:
            origin: ``__module__`` of the base classes grouped by the generation module.

        """
        return self._modules.get(origin)

    def _create_type(self, base: type[Any]) -> type[Any]:
        module = self._modules.get_or_create(
            base.__module__,
            lambda: GenerationModule(base.__module__),
        )
        definition = module.define_type(base)

        constructors = self._constructor_synthesizer.build(definition)
        capability_installed = self._capability_installer.build(definition)
        properties = self._property_synthesizer.build(definition)

        created_type = definition.create_type()
        module.add_type(created_type)
        logger.info(
            (
                "Synthesized %s.%s from %s.%s: constructors=%d intercepted_properties=%d "
                "capability_installed=%s"
            ),
            module.name,
            created_type.__name__,
            base.__module__,
            base.__qualname__,
            len(constructors),
            len(properties),
            capability_installed,
        )
        return created_type
