"""
Class and namespace item representation.
"""

from typing import List

from .base_item import BaseItem
from .item_kind import ItemKind
from .function_item import FunctionItem
from .variable_item import VariableItem
from .typedef_item import TypedefItem
from .enum_item import EnumItem


def _sort_key(item: BaseItem) -> str:
    return item.symbolic_name or ''


class ClassItem(BaseItem):
    """
    Represents a bound C++ class, or any other container of declarations.

    Attributes:
        namespaces: Nested namespaces (only populated on the global namespace)
        classes: Nested classes
        functions: Member or free functions, one item per overload set
        variables: Member or namespace variables
        typedefs: Typedef aliases, in discovery order
        enums: Enums, in discovery order
    """

    def __init__(self, declared_name: str = None, symbolic_name: str = None,
                 kind: ItemKind = ItemKind.CLASS):
        if kind not in (ItemKind.CLASS, ItemKind.NAMESPACE):
            raise ValueError(f"ClassItem requires CLASS or NAMESPACE kind, got {kind}")
        super().__init__(kind, declared_name, symbolic_name)
        self.namespaces: List['NamespaceItem'] = []
        self.classes: List['ClassItem'] = []
        self.functions: List[FunctionItem] = []
        self.variables: List[VariableItem] = []
        self.typedefs: List[TypedefItem] = []
        self.enums: List[EnumItem] = []

    @property
    def children(self) -> List[BaseItem]:
        return [*self.namespaces, *self.classes, *self.functions,
                *self.variables, *self.typedefs, *self.enums]

    def add(self, item: BaseItem):
        """Append an item to the collection matching its kind."""
        collections = {
            ItemKind.NAMESPACE: self.namespaces,
            ItemKind.CLASS: self.classes,
            ItemKind.FUNCTION: self.functions,
            ItemKind.VARIABLE: self.variables,
            ItemKind.TYPEDEF: self.typedefs,
            ItemKind.ENUM: self.enums,
        }
        collections[item.kind].append(item)

    def is_single_enum_wrapper(self) -> bool:
        """True for the enum-class idiom: exactly one enum, no functions or subclasses."""
        return len(self.enums) == 1 and not self.classes and not self.functions

    def sort_items(self):
        self.functions.sort(key=_sort_key)
        self.classes.sort(key=_sort_key)
        self.variables.sort(key=_sort_key)


class NamespaceItem(ClassItem):
    """A class-shaped container distinguished only by its kind."""

    def __init__(self, name: str = None):
        super().__init__(name, name, kind=ItemKind.NAMESPACE)

    @property
    def is_global(self) -> bool:
        return self.declared_name is None
