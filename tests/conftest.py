"""Shared pytest fixtures for synthwire tests."""

import pytest

from synthwire.construction import InstanceBuilder
from synthwire.integrations.pytest_plugin import (  # noqa: F401
    synthwire_builder,
    synthwire_synthesizer,
)
from synthwire.lock_mode import LockMode
from synthwire.synthesizer import TypeSynthesizer


@pytest.fixture()
def synthesizer() -> TypeSynthesizer:
    """Synthesizer with default configuration."""
    return TypeSynthesizer()


@pytest.fixture()
def unlocked_synthesizer() -> TypeSynthesizer:
    """Synthesizer owned by a single execution context."""
    return TypeSynthesizer(lock_mode=LockMode.NONE)


@pytest.fixture()
def builder(synthesizer: TypeSynthesizer) -> InstanceBuilder:
    """InstanceBuilder bound to the default synthesizer."""
    return InstanceBuilder(synthesizer)
