"""
Package classification by geometry and mass.

Pure threshold predicates plus the fixed decision matrix that maps
(bulky, heavy) to a handling stack.
"""
from .thresholds import is_bulky, is_heavy, sort


__all__ = [
    'is_bulky',
    'is_heavy',
    'sort',
]
