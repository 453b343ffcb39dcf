"""
Output writers for the symbol model.
"""

from .lls_writer import LLSWriter, lua_parameter_name

__all__ = ['LLSWriter', 'lua_parameter_name']
