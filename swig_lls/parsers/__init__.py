"""
SWIG XML ingest and symbol model construction.
"""

from .swig_xml_parser import SwigXmlParser, SwigXmlError
from .model_builder import ModelBuilder, collect_namespaces
from .items import ItemKind, BaseItem, ClassItem, NamespaceItem, FunctionItem, EnumItem

__all__ = ['SwigXmlParser', 'SwigXmlError', 'ModelBuilder', 'collect_namespaces', 'ItemKind',
           'BaseItem', 'ClassItem', 'NamespaceItem', 'FunctionItem', 'EnumItem']
