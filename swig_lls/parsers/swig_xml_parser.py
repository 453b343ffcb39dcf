"""
Parser for SWIG XML output (swig -xml) to extract bound declarations.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional

from .. import logger
from ..config import GeneratorConfig
from .cpp_type import split_type_token, to_cpp_type, POINTER, REFERENCE, RVALUE_REFERENCE, ARRAY_PREFIX, FUNCTION_PREFIX
from .items import (ClassItem, FunctionItem, Overload, Parameter, VariableItem,
                    TypedefItem, EnumItem, EnumValue, UNRESOLVED_ENUM_VALUE)


class SwigXmlError(Exception):
    """Raised when the input document is not well-formed XML."""


class SwigXmlParser:
    """
    Reads a SWIG XML document into a raw, unlinked item tree.

    The result of parse() is a class-shaped container holding every top-level
    declaration in discovery order. Namespace synthesis, overload merging and
    parent linkage are left to ModelBuilder.
    """

    def __init__(self, xml_file: Path, config: Optional[GeneratorConfig] = None):
        self.xml_file = Path(xml_file)
        self.config = config or GeneratorConfig()
        self.module_name: Optional[str] = None
        self.defects: List[str] = []

    def parse(self) -> ClassItem:
        """Parse the whole document and return the raw root container."""
        if not self.xml_file.exists():
            raise FileNotFoundError(f"SWIG XML not found at {self.xml_file}")

        logger.info(f"Parsing SWIG XML from {self.xml_file}")
        try:
            tree = ET.parse(self.xml_file)
        except ET.ParseError as e:
            raise SwigXmlError(f"Failed to parse {self.xml_file}: {e}") from e

        root = self.parse_element(tree.getroot())
        logger.info(f"Parsed module '{self.module_name}' with {len(root.children)} top-level declarations")
        return root

    def parse_element(self, document: ET.Element) -> ClassItem:
        """Ingest an already loaded document element."""
        start = document
        for include in document.iter('include'):
            module = include.find('module')
            if module is not None:
                self.module_name = get_attribute(module, 'name')
                start = include
                break
        else:
            logger.warning(f"No <module> element in {self.xml_file}, ingesting the whole document")

        if not self.module_name:
            self.module_name = self.xml_file.stem

        root = ClassItem()
        self._visit(start, root)
        return root

    def _visit(self, node: ET.Element, container: ClassItem) -> None:
        tag = node.tag

        if tag == 'attributelist':
            return
        if tag == 'class':
            self._parse_class(node, container)
        elif tag == 'cdecl':
            self._parse_cdecl(node, container)
        elif tag == 'constructor':
            if is_public(node):
                container.add(self._parse_constructor(node))
        elif tag == 'template':
            return
        elif tag == 'enum':
            self._parse_enum(node, container)
        else:
            for child in node:
                self._visit(child, container)

    def _report(self, message: str) -> None:
        logger.warning(message)
        self.defects.append(message)

    def _parse_class(self, node: ET.Element, container: ClassItem) -> None:
        name = get_attribute(node, 'name')
        sym_name = get_attribute(node, 'sym_name')
        if sym_name is None:
            self._report(f"No sym_name for class {name}")
            return

        lclass = ClassItem(name, sym_name)
        for child in node:
            self._visit(child, lclass)

        if lclass.is_single_enum_wrapper():
            # enum class idiom: hoist the enum under the class's own name
            lenum = lclass.enums[0]
            lenum.declared_name = lclass.declared_name
            lenum.symbolic_name = lclass.symbolic_name
            logger.debug(f"Collapsed class {name} into enum")
            container.add(lenum)
        else:
            container.add(lclass)

    def _parse_cdecl(self, node: ET.Element, container: ClassItem) -> None:
        if not is_public(node):
            return

        kind = get_attribute(node, 'kind')
        if kind == 'function':
            container.add(self._parse_function(node))
        elif kind == 'variable':
            container.add(self._parse_variable(node))
        elif kind == 'typedef':
            container.add(self._parse_typedef(node))

    def _parse_function(self, node: ET.Element) -> FunctionItem:
        name = get_attribute(node, 'name')
        sym_name = get_attribute(node, 'sym_name') or name
        view = get_attribute(node, 'view')

        overload = Overload(
            parameters=self._parse_parameters(node),
            return_type=declared_type(get_attribute(node, 'type'), get_attribute(node, 'decl'))
        )
        return FunctionItem(name, sym_name, [overload],
                            is_static=(view == self.config.static_view_marker))

    def _parse_constructor(self, node: ET.Element) -> FunctionItem:
        overload = Overload(parameters=self._parse_parameters(node), returns_owner=True)
        return FunctionItem('new', 'new', [overload], is_static=True)

    def _parse_parameters(self, node: ET.Element) -> List[Parameter]:
        return [
            Parameter(get_attribute(parm, 'type'), get_attribute(parm, 'name'))
            for parm in node.findall('attributelist/parmlist/parm')
        ]

    def _parse_variable(self, node: ET.Element) -> VariableItem:
        token = declared_type(get_attribute(node, 'type'), get_attribute(node, 'decl'))
        return VariableItem(get_attribute(node, 'name'), token, to_cpp_type(token))

    def _parse_typedef(self, node: ET.Element) -> TypedefItem:
        target = get_attribute(node, 'type')
        if target == self.config.callback_alias:
            target = 'function'
        decl = get_attribute(node, 'decl') or ''
        return TypedefItem(get_attribute(node, 'name'), target,
                           is_pointer_alias=decl.startswith(POINTER + '.'))

    def _parse_enum(self, node: ET.Element, container: ClassItem) -> None:
        sym_name = get_attribute(node, 'sym_name')
        if sym_name is None:
            self._report(f"No sym_name for enum {get_attribute(node, 'name')}")
            return

        lenum = EnumItem(get_attribute(node, 'name') or sym_name, sym_name)
        for child in node:
            if child.tag != 'enumitem':
                continue
            value_name = get_attribute(child, 'sym_name') or get_attribute(child, 'name')
            lenum.values.append(EnumValue(value_name, parse_enum_value(get_attribute(child, 'enumvalueex'))))
        container.add(lenum)


def get_attribute(element: ET.Element, name: str) -> Optional[str]:
    """Look up a value in the element's <attributelist>."""
    attribute = element.find(f"attributelist/attribute[@name='{name}']")
    return attribute.get('value') if attribute is not None else None


def is_public(element: ET.Element) -> bool:
    access = get_attribute(element, 'access')
    return access is None or access == 'public'


def parse_enum_value(text: Optional[str]) -> int:
    if text is None:
        return UNRESOLVED_ENUM_VALUE
    try:
        return int(text)
    except ValueError:
        return UNRESOLVED_ENUM_VALUE


def declared_type(type_token: Optional[str], decl: Optional[str]) -> Optional[str]:
    """
    Combine a cdecl's base type with the pointer/reference/array part of its declarator.

    SWIG keeps ``char *name()`` as type ``char`` with decl ``f().p.``; the
    function part of the declarator is dropped.
    """
    if type_token is None or not decl:
        return type_token

    qualifiers, _ = split_type_token(decl)
    kept = []
    for qual in qualifiers:
        if qual.startswith(FUNCTION_PREFIX):
            kept = []
        elif qual in (POINTER, REFERENCE, RVALUE_REFERENCE) or qual.startswith(ARRAY_PREFIX):
            kept.append(qual)
    if not kept:
        return type_token
    return '.'.join(kept) + '.' + type_token
