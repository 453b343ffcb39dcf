"""
Enum item representation.
"""

from dataclasses import dataclass
from typing import List

from .base_item import BaseItem
from .item_kind import ItemKind


UNRESOLVED_ENUM_VALUE = -1


@dataclass
class EnumValue:
    name: str
    value: int = UNRESOLVED_ENUM_VALUE


class EnumItem(BaseItem):
    """
    Represents a C++ enum.

    Attributes:
        values: Ordered (name, value) pairs
    """

    def __init__(self, declared_name: str = None, symbolic_name: str = None):
        super().__init__(ItemKind.ENUM, declared_name, symbolic_name)
        self.values: List[EnumValue] = []
