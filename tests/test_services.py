"""Tests for the default service container and the services capability."""

from typing import Any

import pytest

from synthwire.services import (
    ServiceContainer,
    ServiceContainerProtocol,
    SupportsServices,
    default_value_for,
)


class Owner:
    pass


class Clock:
    pass


def test_unregistered_service_returns_default() -> None:
    container = ServiceContainer(Owner())

    assert container.get_service(Clock) is None
    assert container.get_service(int, default=0) == 0


def test_registered_value_is_returned() -> None:
    container = ServiceContainer(Owner())
    clock = Clock()
    container.register(Clock, clock)

    assert container.get_service(Clock) is clock
    assert container.get_service(Clock, "any_key") is clock


def test_keyed_registration_wins_over_unkeyed() -> None:
    container = ServiceContainer(Owner())
    container.register(str, "shared")
    container.register(str, "titled", key="title")

    assert container.get_service(str, "title") == "titled"
    assert container.get_service(str, "subtitle") == "shared"
    assert container.get_service(str) == "shared"


def test_keyed_registration_is_not_used_without_key() -> None:
    container = ServiceContainer(Owner())
    container.register(str, "titled", key="title")

    assert container.get_service(str, None, "fallback") == "fallback"


def test_factory_receives_owner_on_every_lookup() -> None:
    owner = Owner()
    container = ServiceContainer(owner)
    calls: list[Any] = []

    def build_clock(received_owner: Any) -> Clock:
        calls.append(received_owner)
        return Clock()

    container.register_factory(Clock, build_clock)

    first = container.get_service(Clock)
    second = container.get_service(Clock)

    assert first is not second
    assert calls == [owner, owner]
    assert container.owner is owner


def test_value_and_factory_registrations_replace_each_other() -> None:
    container = ServiceContainer(Owner())
    container.register_factory(int, lambda _: 1)
    container.register(int, 2)
    assert container.get_service(int) == 2

    container.register_factory(int, lambda _: 3)
    assert container.get_service(int) == 3


def test_default_container_satisfies_protocol() -> None:
    assert isinstance(ServiceContainer(Owner()), ServiceContainerProtocol)


def test_supports_services_is_abstract() -> None:
    with pytest.raises(TypeError):
        SupportsServices()  # type: ignore[abstract]


@pytest.mark.parametrize(
    ("value_type", "expected"),
    [
        (int, 0),
        (float, 0.0),
        (bool, False),
        (complex, 0j),
        (str, None),
        (Clock, None),
        (Any, None),
        (list[int], None),
    ],
)
def test_default_value_for(value_type: Any, expected: Any) -> None:
    result = default_value_for(value_type)

    assert result == expected
    assert type(result) is type(expected)
