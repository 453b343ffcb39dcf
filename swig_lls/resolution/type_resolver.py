"""
Resolution of SWIG type tokens to Lua annotation types.
"""

import re
from typing import Dict, Optional, Set, Tuple

from .. import logger
from ..config import GeneratorConfig
from ..parsers.cpp_type import split_type_token, is_variadic, POINTER, ARRAY_PREFIX
from .symbol_tables import SymbolTables

ANY = 'any'
STRING = 'string'
INTEGER = 'integer'
NUMBER = 'number'
BOOLEAN = 'boolean'
FUNCTION = 'function'
USERDATA = 'userdata'

# Resolved, but nothing to annotate (void returns, variadic parameters)
NO_ANNOTATION = ''

ENUM_SUFFIX = '::Enum'

INTEGER_TYPES = {
    'signed char', 'unsigned char',
    'short', 'unsigned short', 'int', 'unsigned int', 'unsigned',
    'long', 'unsigned long', 'long long', 'unsigned long long',
    'int8_t', 'int16_t', 'int32_t', 'int64_t',
    'uint8_t', 'uint16_t', 'uint32_t', 'uint64_t',
    'size_t', 'ptrdiff_t', 'intptr_t', 'uintptr_t',
}
NUMBER_TYPES = {'float', 'double', 'long double'}
BOOLEAN_TYPES = {'bool'}
STRING_TYPES = {'char', 'std::string', 'string'}
PASSTHROUGH_TYPES = {FUNCTION, USERDATA}

_SMART_POINTER_RE = re.compile(r'^(?:std::)?(?:shared_ptr|unique_ptr|weak_ptr)<\s*\(?(.*?)\)?\s*>$')


def _is_pointer_qualifier(qual: str) -> bool:
    return qual == POINTER or qual.startswith(ARRAY_PREFIX)


class TypeResolver:
    """
    Maps SWIG type tokens to Lua annotation types.

    resolve() returns the annotation type, NO_ANNOTATION for void and
    variadic markers, or None when the type cannot be expressed. Unresolved
    base names are collected in ``unresolved``.
    """

    def __init__(self, tables: SymbolTables, config: Optional[GeneratorConfig] = None):
        self.tables = tables
        config = config or GeneratorConfig()
        self.callback_alias = config.callback_alias
        self.type_overrides: Dict[str, str] = dict(config.type_overrides)
        self.unresolved: Set[str] = set()

    def resolve(self, token: Optional[str]) -> Optional[str]:
        if token is None:
            return NO_ANNOTATION
        if is_variadic(token):
            return NO_ANNOTATION

        qualifiers, base = split_type_token(token)
        is_pointer = any(_is_pointer_qualifier(q) for q in qualifiers)
        base, wrapped = self._unwrap_smart_pointer(base)
        is_pointer = is_pointer or wrapped

        # typedef struct Foo Foo; aliases a name to itself, so a revisit ends
        # the chain and the name falls through to the class and enum tables
        seen = set()
        typedef = self.tables.get_typedef(base)
        while typedef is not None and base not in seen:
            seen.add(base)
            if typedef.is_pointer_alias:
                return ANY
            qualifiers, base = split_type_token(typedef.alias_target)
            base, wrapped = self._unwrap_smart_pointer(base)
            is_pointer = is_pointer or wrapped or any(_is_pointer_qualifier(q) for q in qualifiers)
            typedef = self.tables.get_typedef(base)

        if base in self.type_overrides:
            return self.type_overrides[base]

        if is_pointer:
            return self._resolve_pointer(base)
        return self._resolve_value(base)

    def _unwrap_smart_pointer(self, base: str) -> Tuple[str, bool]:
        match = _SMART_POINTER_RE.match(base)
        if match is None:
            return base, False
        _, inner = split_type_token(match.group(1).strip())
        return inner, True

    def _resolve_pointer(self, base: str) -> str:
        if base == 'char':
            return STRING
        lclass = self.tables.get_class(base)
        if lclass is not None:
            return lclass.qualified_name
        return ANY

    def _resolve_value(self, base: str) -> Optional[str]:
        if base in INTEGER_TYPES:
            return INTEGER
        if base in NUMBER_TYPES:
            return NUMBER
        if base in BOOLEAN_TYPES:
            return BOOLEAN
        if base in STRING_TYPES:
            return STRING
        if base == 'void':
            return NO_ANNOTATION
        if base in PASSTHROUGH_TYPES:
            return base
        if base == self.callback_alias:
            return FUNCTION

        name = base[:-len(ENUM_SUFFIX)] if base.endswith(ENUM_SUFFIX) else base
        lenum = self.tables.get_enum(name)
        if lenum is not None:
            return f"{lenum.qualified_name}Enum"
        lclass = self.tables.get_class(name)
        if lclass is not None:
            return lclass.qualified_name

        return self._unresolved(base)

    def _unresolved(self, base: str) -> None:
        if base not in self.unresolved:
            logger.debug(f"Unresolved type: {base}")
            self.unresolved.add(base)
        return None
