from synthwire.construction import InstanceBuilder, MemberInit, New
from synthwire.exceptions import (
    SynthWireConstructorNotFoundError,
    SynthWireError,
    SynthWireInvalidBaseTypeError,
    SynthWireInvalidExpressionShapeError,
    SynthWireMemberLookupError,
    SynthWireReflectionError,
)
from synthwire.lock_mode import LockMode
from synthwire.markers import private_constructor
from synthwire.policies import PropertyKeyPolicy
from synthwire.services import ServiceContainer, ServiceContainerProtocol, SupportsServices
from synthwire.synthesizer import TypeSynthesizer

__all__ = [
    "InstanceBuilder",
    "LockMode",
    "MemberInit",
    "New",
    "PropertyKeyPolicy",
    "ServiceContainer",
    "ServiceContainerProtocol",
    "SupportsServices",
    "SynthWireConstructorNotFoundError",
    "SynthWireError",
    "SynthWireInvalidBaseTypeError",
    "SynthWireInvalidExpressionShapeError",
    "SynthWireMemberLookupError",
    "SynthWireReflectionError",
    "TypeSynthesizer",
    "private_constructor",
]
