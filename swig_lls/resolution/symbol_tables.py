"""
Global lookup tables for type resolution.
"""

import re
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .. import logger
from ..parsers.items import BaseItem, ClassItem, EnumItem, ItemKind, TypedefItem

_WHITESPACE_RE = re.compile(r'\s+')


def normalize_native_name(name: str) -> str:
    """
    Canonical form of a C++ name for table lookups.

    Drops whitespace and SWIG's parenthesized template arguments, so that
    ``std::vector< double >`` and ``std::vector<(double)>`` share a key.
    """
    name = _WHITESPACE_RE.sub('', name)
    return name.replace('<(', '<').replace(')>', '>').replace('),(', ',')


class SymbolTables:
    """
    Typedef, class and enum tables keyed by fully qualified native name.

    Built once over the whole model before any resolution, so declarations
    may be used before they appear in the document.
    """

    def __init__(self, typedefs: Mapping[str, TypedefItem], classes: Mapping[str, ClassItem],
                 enums: Mapping[str, EnumItem]):
        self.typedefs = MappingProxyType(dict(typedefs))
        self.classes = MappingProxyType(dict(classes))
        self.enums = MappingProxyType(dict(enums))

    @classmethod
    def build(cls, root: BaseItem) -> 'SymbolTables':
        typedefs: Dict[str, TypedefItem] = {}
        classes: Dict[str, ClassItem] = {}
        enums: Dict[str, EnumItem] = {}
        tables = {
            ItemKind.TYPEDEF: typedefs,
            ItemKind.CLASS: classes,
            ItemKind.ENUM: enums,
        }

        def visit(item: BaseItem):
            table = tables.get(item.kind)
            native_name = item.native_name
            if table is not None and native_name is not None:
                table.setdefault(normalize_native_name(native_name), item)
            for child in item.children or []:
                visit(child)

        visit(root)
        logger.info(f"Symbol tables: {len(typedefs)} typedefs, {len(classes)} classes, {len(enums)} enums")
        return cls(typedefs, classes, enums)

    def get_typedef(self, name: str) -> Optional[TypedefItem]:
        return self.typedefs.get(normalize_native_name(name))

    def get_class(self, name: str) -> Optional[ClassItem]:
        return self.classes.get(normalize_native_name(name))

    def get_enum(self, name: str) -> Optional[EnumItem]:
        return self.enums.get(normalize_native_name(name))
