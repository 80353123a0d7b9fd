"""
Scalar leaf guards.

One-line structural tests for the primitive values found in decoded data.
"""

from numbers import Number

from shapeguard.domain.classification import classify
from shapeguard.domain.models import ContainerKind
from shapeguard.guards.factory import create_guard

is_string = create_guard(lambda value: isinstance(value, str), "string")

# bool is an int subclass but not a number for validation purposes.
is_number = create_guard(
    lambda value: isinstance(value, Number) and not isinstance(value, bool),
    "number",
)

is_boolean = create_guard(lambda value: isinstance(value, bool), "boolean")

is_none = create_guard(lambda value: value is None, "None")

is_object = create_guard(
    lambda value: classify(value)
    not in (ContainerKind.NONE, ContainerKind.SCALAR, ContainerKind.CALLABLE),
    "object",
)
