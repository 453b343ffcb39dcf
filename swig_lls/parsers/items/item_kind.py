"""
Item kind enumeration for type-safe classification of binding declarations.
"""

from enum import Enum


class ItemKind(Enum):
    """Type-safe enumeration of symbol model item kinds."""
    NAMESPACE = "namespace"
    CLASS = "class"
    FUNCTION = "function"
    VARIABLE = "variable"
    TYPEDEF = "typedef"
    ENUM = "enum"
