"""
Helpers for SWIG type tokens.

SWIG writes declared types as dot-separated qualifier chains ending in a base
type, e.g. ``r.q(const).std::string`` or ``p.p.char``. Dots inside template
arguments or qualifier parentheses are not separators.
"""

from typing import List, Optional, Tuple

POINTER = 'p'
REFERENCE = 'r'
RVALUE_REFERENCE = 'z'
CONST = 'q(const)'
ARRAY_PREFIX = 'a('
FUNCTION_PREFIX = 'f('
VARIADIC_PREFIX = 'v('


def split_type_token(token: str) -> Tuple[List[str], str]:
    """
    Split a SWIG type token into its qualifier segments and base type.

    Returns:
        (qualifiers, base) where qualifiers keep their original order
    """
    segments = []
    depth = 0
    start = 0
    for i, ch in enumerate(token):
        if ch in '(<':
            depth += 1
        elif ch in ')>':
            depth -= 1
        elif ch == '.' and depth == 0:
            segments.append(token[start:i])
            start = i + 1
    segments.append(token[start:])
    return segments[:-1], segments[-1]


def is_variadic(token: Optional[str]) -> bool:
    return token is not None and token.startswith(VARIADIC_PREFIX)


def to_cpp_type(token: Optional[str]) -> Optional[str]:
    """
    Render a SWIG type token as C++, e.g. ``r.q(const).int`` -> ``const int&``.

    Tokens containing a qualifier with no C++ rendering here are returned unchanged.
    """
    if token is None:
        return None

    qualifiers, cpp_type = split_type_token(token)
    for qual in qualifiers:
        if qual == REFERENCE:
            cpp_type += '&'
        elif qual == RVALUE_REFERENCE:
            cpp_type += '&&'
        elif qual == POINTER:
            cpp_type += '*'
        elif qual == CONST:
            cpp_type = 'const ' + cpp_type
        elif qual.startswith(ARRAY_PREFIX):
            cpp_type += '[]'
        else:
            return token
    return cpp_type
