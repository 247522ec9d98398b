"""Tests for the exception hierarchy."""

import pytest

from synthwire import exceptions
from synthwire.construction import InstanceBuilder, New
from synthwire.exceptions import (
    SynthWireConstructorNotFoundError,
    SynthWireError,
    SynthWireInvalidBaseTypeError,
    SynthWireInvalidExpressionShapeError,
    SynthWireMemberLookupError,
    SynthWireReflectionError,
)
from synthwire.synthesizer import TypeSynthesizer


class Target:
    def __init__(self, value: int) -> None:
        self.value = value


@pytest.mark.parametrize(
    "error_type",
    [
        SynthWireConstructorNotFoundError,
        SynthWireInvalidBaseTypeError,
        SynthWireInvalidExpressionShapeError,
        SynthWireMemberLookupError,
        SynthWireReflectionError,
    ],
)
def test_all_errors_derive_from_base_error(error_type: type[Exception]) -> None:
    assert issubclass(error_type, SynthWireError)


def test_every_public_error_is_documented() -> None:
    for name in dir(exceptions):
        error_type = getattr(exceptions, name)
        if isinstance(error_type, type) and issubclass(error_type, SynthWireError):
            assert error_type.__doc__, name


def test_reflection_error_keeps_member_and_cause() -> None:
    cause = NameError("name 'Missing' is not defined")

    error = SynthWireReflectionError(Target.__init__, cause)

    assert error.member is Target.__init__
    assert error.error is cause
    assert "Missing" in str(error)


def test_constructor_not_found_message_names_expression(builder: InstanceBuilder) -> None:
    with pytest.raises(SynthWireConstructorNotFoundError, match=r"New\(Target, 'x', 'y'\)"):
        builder.build(New(Target, "x", "y"))


def test_invalid_base_message_names_value(synthesizer: TypeSynthesizer) -> None:
    with pytest.raises(SynthWireInvalidBaseTypeError, match="expected a class"):
        synthesizer.synthesize(Target(1))  # type: ignore[arg-type]


def test_invalid_expression_can_be_caught_as_base_error(builder: InstanceBuilder) -> None:
    with pytest.raises(SynthWireError):
        builder.build(Target(1))  # type: ignore[arg-type]
