"""
swig-lls: LuaLS annotation files from SWIG XML binding descriptions.
"""

from .generator import LLSGenerator
from .result import GenerationReport, OverloadResult, ResultStatus

__all__ = ['LLSGenerator', 'GenerationReport', 'OverloadResult', 'ResultStatus']
