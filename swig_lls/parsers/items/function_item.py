"""
Function item representation: one declared name, one or more overloads.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .base_item import BaseItem
from .item_kind import ItemKind


@dataclass
class Parameter:
    type_token: str
    name: Optional[str] = None


@dataclass
class Overload:
    """
    One concrete signature.

    Attributes:
        parameters: Ordered parameter list
        return_type: SWIG type token of the return value, if any
        returns_owner: True for constructors, which return their class
    """
    parameters: List[Parameter] = field(default_factory=list)
    return_type: Optional[str] = None
    returns_owner: bool = False


class FunctionItem(BaseItem):
    """
    Represents a bound function or method.

    Attributes:
        overloads: All signatures sharing this declared name
        is_static: True for static member functions
    """

    def __init__(self, declared_name: str = None, symbolic_name: str = None,
                 overloads: List[Overload] = None, is_static: bool = False):
        super().__init__(ItemKind.FUNCTION, declared_name, symbolic_name)
        self.overloads: List[Overload] = list(overloads or [])
        self.is_static: bool = is_static

    def merge(self, other: 'FunctionItem'):
        """Append the overloads of a same-named function to this one."""
        self.overloads.extend(other.overloads)
