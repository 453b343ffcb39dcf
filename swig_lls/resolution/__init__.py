"""
Type resolution: global symbol tables and the SWIG-to-Lua type resolver.
"""

from .symbol_tables import SymbolTables, normalize_native_name
from .type_resolver import TypeResolver, ANY, STRING, INTEGER, NUMBER, BOOLEAN, NO_ANNOTATION

__all__ = ['SymbolTables', 'normalize_native_name', 'TypeResolver',
           'ANY', 'STRING', 'INTEGER', 'NUMBER', 'BOOLEAN', 'NO_ANNOTATION']
