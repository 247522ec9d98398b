from __future__ import annotations

import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_mangled_name(name: str, owner: type[Any]) -> bool:
    """Return true when name is a class-private (name-mangled) attribute of owner.

    Args:
        name: Attribute name as stored in the owner namespace.
        owner: Class whose namespace declares the attribute.

    """
    stripped_owner_name = owner.__name__.lstrip("_")
    if not stripped_owner_name:
        return False
    return name.startswith(f"_{stripped_owner_name}__") and not name.endswith("__")


__all__ = ["is_mangled_name", "is_runtime_class"]
