from enum import Enum


class PropertyKeyPolicy(str, Enum):
    """Policy for the key passed to ``get_service`` by intercepted properties."""

    NONE = "none"
    """Pass ``None``; the container distinguishes properties only by value type."""

    PROPERTY_NAME = "property_name"
    """Pass the property name so same-typed properties can resolve differently."""
