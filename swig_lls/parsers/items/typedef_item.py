"""
Typedef item representation.
"""

from .base_item import BaseItem
from .item_kind import ItemKind


class TypedefItem(BaseItem):
    """
    A rewrite rule: resolving the typedef's name means resolving alias_target,
    or an opaque type when the alias itself is a pointer.
    """

    def __init__(self, declared_name: str = None, alias_target: str = None,
                 is_pointer_alias: bool = False):
        super().__init__(ItemKind.TYPEDEF, declared_name)
        self.alias_target = alias_target
        self.is_pointer_alias = is_pointer_alias
