"""
Composite guards - Guard composition patterns.

These guards combine multiple guards using logical operators.
"""

from shapeguard.guards.composite.union import UnionGuard, union

__all__ = [
    "UnionGuard",
    "union",
]
