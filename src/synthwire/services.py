from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, overload, runtime_checkable

T = TypeVar("T")

_BUILTIN_DEFAULTS: dict[Any, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
}


@runtime_checkable
class ServiceContainerProtocol(Protocol):
    """Protocol for per-instance service containers used by intercepted properties."""

    @overload
    def get_service(
        self,
        service_type: type[T],
        key: str | None = None,
        default: T | None = None,
    ) -> T | None: ...

    @overload
    def get_service(
        self,
        service_type: Any,
        key: str | None = None,
        default: Any = None,
    ) -> Any: ...

    def get_service(self, service_type: Any, key: str | None = None, default: Any = None) -> Any:
        """Return the value supplied for the given service type and key.

        Args:
            service_type: Declared value type of the requested service.
            key: Optional key that distinguishes services of the same type.
            default: Value returned when nothing is registered for the request.

        """


class SupportsServices(ABC):
    """Capability of objects that expose a service container.

    Every synthesized class implements this capability. Classes may also
    implement it themselves; synthesis then keeps their accessor and routes
    intercepted properties through it.
    """

    @property
    @abstractmethod
    def service_container(self) -> ServiceContainerProtocol:
        """Return the service container bound to this instance."""


class ServiceContainer:
    """Default per-instance service container.

    Values are looked up by ``(service_type, key)`` first and by
    ``(service_type, None)`` next. Unregistered requests return the caller
    supplied default.
    """

    __slots__ = ("_factories", "_owner", "_values")

    def __init__(self, owner: object) -> None:
        """Initialize an empty container.

        Args:
            owner: Instance the container supplies services for.

        """
        self._owner = owner
        self._values: dict[tuple[Any, str | None], Any] = {}
        self._factories: dict[tuple[Any, str | None], Callable[[Any], Any]] = {}

    @property
    def owner(self) -> object:
        """Return the instance this container was created for."""
        return self._owner

    def register(self, service_type: Any, value: Any, *, key: str | None = None) -> None:
        """Register a fixed value for a service type.

        Args:
            service_type: Declared value type the value is supplied for.
            value: Value returned on lookup.
            key: Optional key that restricts the registration to one property name.

        """
        self._factories.pop((service_type, key), None)
        self._values[service_type, key] = value

    def register_factory(
        self,
        service_type: Any,
        factory: Callable[[Any], Any],
        *,
        key: str | None = None,
    ) -> None:
        """Register a factory called with the owner on every lookup.

        Args:
            service_type: Declared value type the factory supplies.
            factory: Callable receiving the owner instance.
            key: Optional key that restricts the registration to one property name.

        """
        self._values.pop((service_type, key), None)
        self._factories[service_type, key] = factory

    def get_service(self, service_type: Any, key: str | None = None, default: Any = None) -> Any:
        """Return the registered value for the service type and key.

        Args:
            service_type: Declared value type of the requested service.
            key: Optional key that distinguishes services of the same type.
            default: Value returned when nothing is registered for the request.

        """
        lookup_keys = [(service_type, key)]
        if key is not None:
            lookup_keys.append((service_type, None))
        for lookup_key in lookup_keys:
            if lookup_key in self._values:
                return self._values[lookup_key]
            factory = self._factories.get(lookup_key)
            if factory is not None:
                return factory(self._owner)
        return default


def default_value_for(value_type: Any) -> Any:
    """Return the literal default value for a declared value type.

    Numeric and boolean builtins default to their zero value, everything else
    defaults to ``None``.

    Args:
        value_type: Declared value type of a property.

    """
    try:
        return _BUILTIN_DEFAULTS.get(value_type)
    except TypeError:
        # unhashable annotation objects
        return None
