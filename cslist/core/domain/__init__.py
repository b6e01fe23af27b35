"""
Обёртки comma-separated списков.

CS — переменной длины, CSArray/StrictCSArray — фиксированной длины N.
"""

from cslist.core.domain.cs import CS
from cslist.core.domain.cs_array import CSArray, StrictCSArray

__all__ = [
    "CS",
    "CSArray",
    "StrictCSArray",
]
