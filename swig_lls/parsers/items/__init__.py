"""
Symbol model for declarations extracted from SWIG XML.

Every item shares the BaseItem capabilities (parent, declared and symbolic
names, kind, children, qualified name); ItemKind tags the variant.
"""

from .item_kind import ItemKind
from .base_item import BaseItem
from .function_item import FunctionItem, Overload, Parameter
from .variable_item import VariableItem
from .typedef_item import TypedefItem
from .enum_item import EnumItem, EnumValue, UNRESOLVED_ENUM_VALUE
from .class_item import ClassItem, NamespaceItem

__all__ = [
    'ItemKind',
    'BaseItem',
    'FunctionItem',
    'Overload',
    'Parameter',
    'VariableItem',
    'TypedefItem',
    'EnumItem',
    'EnumValue',
    'UNRESOLVED_ENUM_VALUE',
    'ClassItem',
    'NamespaceItem',
]
