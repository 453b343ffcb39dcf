"""
Base item class for the symbol model built from SWIG XML.
"""

import weakref
from abc import ABC
from typing import List, Optional

from .item_kind import ItemKind
from ...config import NAMESPACE_SEPARATOR, LUA_PATH_SEPARATOR


class BaseItem(ABC):
    """
    Abstract base class for every declaration in the symbol model.

    Attributes:
        kind: ItemKind of this item
        declared_name: Raw name from the binding, possibly namespace-qualified
        symbolic_name: Generation-safe identifier (falls back to the last
            component of declared_name)
        parent: Owning container; held as a weak reference
    """

    def __init__(self, kind: ItemKind, declared_name: Optional[str] = None,
                 symbolic_name: Optional[str] = None):
        self.kind: ItemKind = kind
        self.declared_name: Optional[str] = declared_name
        self._symbolic_name: Optional[str] = symbolic_name
        self._parent_ref = None

    @property
    def symbolic_name(self) -> Optional[str]:
        if self._symbolic_name is not None:
            return self._symbolic_name
        if self.declared_name is None:
            return None
        return self.declared_name.split(NAMESPACE_SEPARATOR)[-1]

    @symbolic_name.setter
    def symbolic_name(self, value: Optional[str]):
        self._symbolic_name = value

    @property
    def parent(self) -> Optional['BaseItem']:
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, value: Optional['BaseItem']):
        self._parent_ref = weakref.ref(value) if value is not None else None

    @property
    def children(self) -> Optional[List['BaseItem']]:
        """Child items in emission order, or None for leaf kinds."""
        return None

    @property
    def qualified_name(self) -> Optional[str]:
        """Lua path of this item, e.g. Physics.Body.applyForce"""
        parent = self.parent
        if parent is None or parent.symbolic_name is None:
            return self.symbolic_name
        return f"{parent.qualified_name}{LUA_PATH_SEPARATOR}{self.symbolic_name}"

    @property
    def native_name(self) -> Optional[str]:
        """Fully qualified C++ name, e.g. Physics::Body"""
        parent = self.parent
        if parent is None or parent.native_name is None:
            return self.declared_name
        if self.declared_name is None:
            return None
        prefix = parent.native_name + NAMESPACE_SEPARATOR
        if self.declared_name.startswith(prefix):
            return self.declared_name
        return prefix + self.declared_name

    def sort_items(self):
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.kind.value}: {self.declared_name})"
