"""
shapeguard: Composable runtime guards for untrusted values.

Validates the shape of values whose type is not statically known (decoded
JSON, plugin input, third-party API responses) and narrows them to a known
type when validation succeeds.

Example:
    from shapeguard import is_map, is_number, is_sequence, is_string, union

    payload = json.loads(raw)
    if is_map(payload, key_guard=is_string, value_guard=union(is_string, is_number)):
        ...  # payload is a Mapping[str, str | int | float]

    is_sequence(payload["ids"], value_guard=is_number, throw_error=True)
"""

# Domain types
from shapeguard.domain import (
    ContainerGuardOptions,
    ContainerKind,
    GuardInterface,
    GuardOptions,
    GuardResult,
    TypeMismatchError,
    classify,
)

# Guards
from shapeguard.guards import (
    ContainerGuard,
    Guard,
    MappingGuard,
    RecordGuard,
    SequenceGuard,
    SetGuard,
    UnionGuard,
    create_guard,
    is_async_function,
    is_async_generator,
    is_async_generator_function,
    is_awaitable,
    is_boolean,
    is_function,
    is_generator,
    is_generator_function,
    is_map,
    is_none,
    is_number,
    is_object,
    is_plain_structure,
    is_sequence,
    is_set,
    is_string,
    union,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "GuardOptions",
    "ContainerGuardOptions",
    "GuardResult",
    "ContainerKind",
    "classify",
    # Domain interfaces
    "GuardInterface",
    # Domain exceptions
    "TypeMismatchError",
    # Factory and combinators
    "Guard",
    "create_guard",
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
