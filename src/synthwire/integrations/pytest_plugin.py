"""pytest fixtures providing a fresh synthesizer per test.

Enable with ``pytest_plugins = ("synthwire.integrations.pytest_plugin",)`` in a
``conftest.py``. Override ``synthwire_synthesizer`` to change configuration.
"""

from __future__ import annotations

import pytest

from synthwire.construction import InstanceBuilder
from synthwire.synthesizer import TypeSynthesizer


@pytest.fixture()
def synthwire_synthesizer() -> TypeSynthesizer:
    """Synthesizer with default configuration, isolated to one test."""
    return TypeSynthesizer()


@pytest.fixture()
def synthwire_builder(synthwire_synthesizer: TypeSynthesizer) -> InstanceBuilder:
    """Instance builder bound to the test synthesizer."""
    return InstanceBuilder(synthwire_synthesizer)
