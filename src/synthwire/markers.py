from collections.abc import Callable
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

PRIVATE_CONSTRUCTOR_MARKER = "__synthwire_private_constructor__"


def private_constructor(func: F) -> F:
    """Mark an ``__init__`` (or one of its overloads) as not callable by descendants.

    Synthesized classes never reproduce private constructors, so
    ``InstanceBuilder.build`` cannot construct instances through them.

    Examples:
        .. code-block:: python

            class Settings:
                @overload
                def __init__(self) -> None: ...

                @overload
                @private_constructor
                def __init__(self, raw: bytes) -> None: ...

                def __init__(self, raw: bytes = b"") -> None:
                    self.raw = raw

    Args:
        func: Constructor function to mark.

    """
    setattr(func, PRIVATE_CONSTRUCTOR_MARKER, True)
    return func


def is_private_constructor(func: object) -> bool:
    """Return true when func carries the ``private_constructor`` marker.

    Args:
        func: Constructor function or overload to check.

    """
    return bool(getattr(func, PRIVATE_CONSTRUCTOR_MARKER, False))
