"""
Guards for shapeguard.

Guards are deterministic checks that return True, or False / raise
TypeMismatchError, for a single untrusted value.

Organization by role:
- factory: create_guard and the Guard base class
- composite/: Guard composition patterns (union)
- containers/: Structural container guards with inner validation
- leaves/: Single-value tests
"""

from shapeguard.guards.composite import UnionGuard, union
from shapeguard.guards.containers import (
    ContainerGuard,
    MappingGuard,
    RecordGuard,
    SequenceGuard,
    SetGuard,
    is_map,
    is_plain_structure,
    is_sequence,
    is_set,
)
from shapeguard.guards.factory import Guard, create_guard, probe
from shapeguard.guards.leaves import (
    is_async_function,
    is_async_generator,
    is_async_generator_function,
    is_awaitable,
    is_boolean,
    is_function,
    is_generator,
    is_generator_function,
    is_none,
    is_number,
    is_object,
    is_string,
)

__all__ = [
    # Factory
    "Guard",
    "create_guard",
    "probe",
    # Composition
    "UnionGuard",
    "union",
    # Containers
    "ContainerGuard",
    "SequenceGuard",
    "SetGuard",
    "MappingGuard",
    "RecordGuard",
    "is_sequence",
    "is_set",
    "is_map",
    "is_plain_structure",
    # Leaves
    "is_string",
    "is_number",
    "is_boolean",
    "is_none",
    "is_object",
    "is_function",
    "is_async_function",
    "is_generator_function",
    "is_async_generator_function",
    "is_generator",
    "is_async_generator",
    "is_awaitable",
]
