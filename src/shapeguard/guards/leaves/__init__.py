"""
Leaf guards - Single-value structural tests with no composition logic.

Usable directly or as value_guard / key_guard for container guards.
"""

from shapeguard.guards.leaves.callables import (
    is_async_function,
    is_async_generator,
    is_async_generator_function,
    is_awaitable,
    is_function,
    is_generator,
    is_generator_function,
)
from shapeguard.guards.leaves.scalars import (
    is_boolean,
    is_none,
    is_number,
    is_object,
    is_string,
)

__all__ = [
    # Scalars
    "is_string",
    "is_number",
    "is_boolean",
    "is_none",
    "is_object",
    # Callables
    "is_function",
    "is_async_function",
    "is_generator_function",
    "is_async_generator_function",
    "is_generator",
    "is_async_generator",
    "is_awaitable",
]
