from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from synthwire._internal.reflection import ConstructorDescriptor, accessible_constructors
from synthwire._internal.type_checks import is_runtime_class
from synthwire.exceptions import (
    SynthWireConstructorNotFoundError,
    SynthWireInvalidExpressionShapeError,
)
from synthwire.synthesizer import TypeSynthesizer

T = TypeVar("T")


class New(Generic[T]):
    """Construction expression equivalent to ``target(*args, **kwargs)``.

    Examples:
        .. code-block:: python

            expression = New(Repository, "sqlite://", timeout=5)

    """

    __slots__ = ("args", "kwargs", "target")

    def __init__(self, target: type[T], /, *args: Any, **kwargs: Any) -> None:
        """Describe a constructor call without performing it.

        Args:
            target: Class being constructed.
            *args: Positional constructor arguments.
            **kwargs: Keyword constructor arguments.

        """
        if not is_runtime_class(target):
            msg = f"New(...) expects a class as its target, got {target!r}."
            raise SynthWireInvalidExpressionShapeError(msg)
        self.target = target
        self.args = args
        self.kwargs: Mapping[str, Any] = kwargs

    def retarget(self, target: type[Any]) -> New[Any]:
        """Return the same call with a different class, keeping arguments untouched.

        Args:
            target: Class the returned expression constructs.

        """
        return New(target, *self.args, **self.kwargs)

    def evaluate(self) -> T:
        """Perform the constructor call."""
        return self.target(*self.args, **self.kwargs)

    def __repr__(self) -> str:
        arguments = [repr(argument) for argument in self.args]
        arguments.extend(f"{name}={value!r}" for name, value in self.kwargs.items())
        return f"New({', '.join([self.target.__qualname__, *arguments])})"


class MemberInit(Generic[T]):
    """Construction expression followed by member assignments.

    Equivalent to constructing with ``new`` and then assigning each binding, in
    order, exactly once.

    Examples:
        .. code-block:: python

            expression = MemberInit(New(Settings), debug=True, retries=3)

    """

    __slots__ = ("bindings", "new")

    def __init__(self, new: New[T], /, **bindings: Any) -> None:
        """Describe a constructor call with member initializers.

        Args:
            new: Construction expression performed first.
            **bindings: Member names and values assigned after construction.

        """
        if not isinstance(new, New):
            msg = f"MemberInit(...) expects a New(...) expression, got {new!r}."
            raise SynthWireInvalidExpressionShapeError(msg)
        self.new = new
        self.bindings: Mapping[str, Any] = bindings

    def retarget(self, target: type[Any]) -> MemberInit[Any]:
        """Return the expression with its constructor call retargeted.

        Args:
            target: Class the returned expression constructs.

        """
        return MemberInit(self.new.retarget(target), **self.bindings)

    def evaluate(self) -> T:
        """Perform the constructor call, then apply member bindings."""
        instance = self.new.evaluate()
        for name, value in self.bindings.items():
            setattr(instance, name, value)
        return instance

    def __repr__(self) -> str:
        bindings = ", ".join(f"{name}={value!r}" for name, value in self.bindings.items())
        return f"MemberInit({self.new!r}, {bindings})" if bindings else f"MemberInit({self.new!r})"


class InstanceBuilder:
    """Build instances of synthesized classes from construction expressions."""

    def __init__(self, synthesizer: TypeSynthesizer | None = None) -> None:
        """Initialize the builder.

        Args:
            synthesizer: Synthesizer that owns the synthesized classes. A new
                synthesizer with default configuration is created when omitted.

        """
        self._synthesizer = synthesizer if synthesizer is not None else TypeSynthesizer()

    @property
    def synthesizer(self) -> TypeSynthesizer:
        """Return the synthesizer used by this builder."""
        return self._synthesizer

    def build(self, expression: New[T] | MemberInit[T]) -> T:
        """Construct an instance of the synthesized subclass described by expression.

        The expression constructor call is retargeted to the synthesized class
        constructor with the same parameter types. Arguments and member
        bindings are passed through unchanged.

        Args:
            expression: ``New(...)`` or ``MemberInit(New(...), ...)`` expression.

        """
        if isinstance(expression, MemberInit):
            new = expression.new
        elif isinstance(expression, New):
            new = expression
        else:
            msg = (
                "Expected a New(...) or MemberInit(New(...), ...) construction expression, "
                f"got {expression!r}."
            )
            raise SynthWireInvalidExpressionShapeError(msg)

        synthesized = self._synthesizer.synthesize(new.target)
        target_constructor = self._target_constructor(new)
        self._ensure_matching_constructor(synthesized, target_constructor)
        return expression.retarget(synthesized).evaluate()

    def _target_constructor(self, new: New[Any]) -> ConstructorDescriptor:
        for constructor in accessible_constructors(new.target):
            try:
                constructor.signature.bind(*new.args, **new.kwargs)
            except TypeError:
                continue
            return constructor
        msg = f"{new!r} does not match any constructor accessible to descendants."
        raise SynthWireConstructorNotFoundError(msg)

    def _ensure_matching_constructor(
        self,
        synthesized: type[Any],
        target_constructor: ConstructorDescriptor,
    ) -> None:
        for constructor in accessible_constructors(synthesized):
            if constructor.parameter_types == target_constructor.parameter_types:
                return
        msg = (
            f"{synthesized.__qualname__} has no constructor with parameter types "
            f"{target_constructor.parameter_types!r}."
        )
        raise SynthWireConstructorNotFoundError(msg)
