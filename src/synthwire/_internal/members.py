from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Literal

from synthwire.exceptions import SynthWireMemberLookupError
from synthwire.services import ServiceContainerProtocol, SupportsServices

MemberKind = Literal["property", "method"]


@dataclass(frozen=True, slots=True)
class MemberHandle:
    """Validated reference to a member declared by a class.

    Handles are created once at import time so that generated code refers to
    members by a name that is known to exist.
    """

    owner: type[Any]
    name: str
    kind: MemberKind

    @classmethod
    def of(cls, owner: type[Any], name: str, kind: MemberKind) -> MemberHandle:
        """Create a handle after checking that owner declares the member.

        Args:
            owner: Class expected to declare the member.
            name: Member name.
            kind: Expected member kind.

        """
        member = inspect.getattr_static(owner, name, None)
        if member is None:
            msg = f"{owner.__qualname__} does not declare member {name!r}."
            raise SynthWireMemberLookupError(msg)
        if kind == "property" and not isinstance(member, property):
            msg = f"{owner.__qualname__}.{name} is not a property."
            raise SynthWireMemberLookupError(msg)
        if kind == "method" and not callable(member):
            msg = f"{owner.__qualname__}.{name} is not a method."
            raise SynthWireMemberLookupError(msg)
        return cls(owner=owner, name=name, kind=kind)


SERVICE_CONTAINER_MEMBER = MemberHandle.of(SupportsServices, "service_container", "property")
GET_SERVICE_MEMBER = MemberHandle.of(ServiceContainerProtocol, "get_service", "method")


__all__ = ["GET_SERVICE_MEMBER", "SERVICE_CONTAINER_MEMBER", "MemberHandle"]
