class SynthWireError(Exception):
    """Represent a base class for all SynthWire-specific failures.

    Catch this type when you want to handle any SynthWire error path without
    matching each concrete exception class individually.
    """


class SynthWireInvalidBaseTypeError(SynthWireError):
    """Signal a synthesis request for something that is not a runtime class.

    Raised by ``TypeSynthesizer.synthesize`` when the requested base is an
    instance, a generic alias such as ``list[int]``, or another non-class value.

    Typical fix is passing the plain class object, for example ``Service``
    instead of ``Service()`` or ``Service[int]``.
    """


class SynthWireInvalidExpressionShapeError(SynthWireError):
    """Signal a construction expression with an unsupported shape.

    Raised by ``InstanceBuilder.build`` when the expression is neither a
    ``New(...)`` construction call nor a ``MemberInit(New(...), ...)``
    member-initializing construction call, and by ``New`` when its target is
    not a runtime class.

    Typical fix is wrapping the call as ``New(Service, *args, **kwargs)``.
    """


class SynthWireConstructorNotFoundError(SynthWireError):
    """Signal that no constructor matches a construction expression.

    Raised by ``InstanceBuilder.build`` when the expression arguments do not
    bind to any accessible base constructor, or when the synthesized class has
    no constructor with the same parameter types. Also raised when a
    synthesized class without accessible constructors is called directly.

    Typical fixes include passing arguments that match one of the base
    ``__init__`` signatures (or its ``typing.overload`` variants) and removing
    ``private_constructor`` from a constructor that descendants must call.
    """


class SynthWireMemberLookupError(SynthWireError):
    """Signal an invalid member identifier.

    Raised while creating a ``MemberHandle`` when the owner does not declare
    the named member, or declares it with an unexpected kind. This is a
    programmer error and is never caught inside SynthWire.
    """


class SynthWireReflectionError(SynthWireError):
    """Signal that a member of a base class cannot be reflected into generated code.

    Raised while reflecting constructors and properties when
    ``typing.get_type_hints`` fails, usually because of a forward reference to
    a name that is not importable from the declaring module. Also raised for
    property and constructor parameter names that cannot be declared in
    generated source: non-identifiers and names starting with ``_synthwire_``.

    Typical fixes include defining referenced classes at module level,
    importing them outside ``TYPE_CHECKING`` blocks, or renaming the member.
    """

    def __init__(self, member: object, error: Exception) -> None:
        self.member = member
        self.error = error
        super().__init__(f"Cannot reflect {member!r}: {error}")
