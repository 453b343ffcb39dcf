"""
Turns the raw item tree from SwigXmlParser into the linked symbol model.
"""

from typing import Dict, List

from .. import logger
from ..config import NAMESPACE_SEPARATOR
from .items import BaseItem, ClassItem, FunctionItem, NamespaceItem


class ModelBuilder:
    """
    Runs the three builder passes in fixed order:

    1. namespace synthesis (one level, split on the first separator)
    2. overload consolidation per class
    3. parent linkage and sorting
    """

    def build(self, raw_root: ClassItem) -> NamespaceItem:
        root = self.build_namespaces(raw_root)
        self.consolidate_functions(root)
        self.set_parents(root)
        self.sort_items(root)
        logger.info(f"Built symbol model with {len(root.namespaces)} namespaces")
        return root

    def build_namespaces(self, raw_root: ClassItem) -> NamespaceItem:
        """Re-home qualified top-level declarations under synthesized namespaces."""
        namespaces: Dict[str, NamespaceItem] = {}
        top = NamespaceItem()

        for child in raw_root.children:
            name = child.declared_name
            if name is not None and NAMESPACE_SEPARATOR in name:
                ns_name, _, rest = name.partition(NAMESPACE_SEPARATOR)
                namespace = namespaces.get(ns_name)
                if namespace is None:
                    namespace = NamespaceItem(ns_name)
                    namespaces[ns_name] = namespace
                    logger.debug(f"Synthesized namespace {ns_name}")
                child.declared_name = rest
                namespace.add(child)
            else:
                top.add(child)

        top.namespaces.extend(namespaces.values())
        return top

    def consolidate_functions(self, item: BaseItem) -> None:
        """Merge same-named functions of every class into single overload sets."""
        if isinstance(item, ClassItem):
            merged: Dict[str, FunctionItem] = {}
            for func in item.functions:
                if func.declared_name is None:
                    continue
                canonical = merged.get(func.declared_name)
                if canonical is None:
                    merged[func.declared_name] = func
                else:
                    canonical.merge(func)
            item.functions = list(merged.values())

        for child in item.children or []:
            self.consolidate_functions(child)

    def set_parents(self, item: BaseItem) -> None:
        for child in item.children or []:
            child.parent = item
            self.set_parents(child)

    def sort_items(self, item: BaseItem) -> None:
        item.sort_items()
        for child in item.children or []:
            self.sort_items(child)


def collect_namespaces(root: NamespaceItem) -> List[NamespaceItem]:
    """All named namespaces in traversal order."""
    found = []

    def visit(item: BaseItem):
        if isinstance(item, NamespaceItem) and not item.is_global:
            found.append(item)
            return
        for child in item.children or []:
            visit(child)

    visit(root)
    return found
