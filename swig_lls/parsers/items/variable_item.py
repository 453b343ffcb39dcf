"""
Variable item representation.
"""

from typing import Optional

from .base_item import BaseItem
from .item_kind import ItemKind


class VariableItem(BaseItem):
    """
    Represents a public variable at namespace or class scope.

    Attributes:
        type_token: Raw SWIG type token
        cpp_type: The same type written as C++ (see cpp_type.to_cpp_type)
    """

    def __init__(self, declared_name: str = None, type_token: Optional[str] = None,
                 cpp_type: Optional[str] = None):
        super().__init__(ItemKind.VARIABLE, declared_name)
        self.type_token = type_token
        self.cpp_type = cpp_type
