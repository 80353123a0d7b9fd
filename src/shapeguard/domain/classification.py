"""
Structural classification of untrusted values.

classify() maps any value onto exactly one ContainerKind. Container guards
decide their structural check by membership in a set of accepted kinds,
so every kind decision lives here.
"""

import weakref
from collections.abc import Mapping, Sequence, Set
from numbers import Number

from shapeguard.domain.models import ContainerKind

_SCALAR_TYPES = (str, bytes, bytearray, memoryview, bool, Number)
_WEAK_MAPPING_TYPES = (weakref.WeakKeyDictionary, weakref.WeakValueDictionary)


def classify(value: object) -> ContainerKind:
    """
    Classify a value into its ContainerKind.

    Checks run in a fixed order; the first match wins. Weak containers are
    tested before the generic ABCs because they register as MutableSet and
    MutableMapping. Callability is tested after the container ABCs, so a
    container type that also defines __call__ still classifies as a container.
    """
    if value is None:
        return ContainerKind.NONE
    if isinstance(value, _SCALAR_TYPES):
        return ContainerKind.SCALAR
    if isinstance(value, weakref.WeakSet):
        return ContainerKind.WEAK_SET
    if isinstance(value, _WEAK_MAPPING_TYPES):
        return ContainerKind.WEAK_MAPPING
    if type(value) is dict:
        return ContainerKind.RECORD
    if isinstance(value, Mapping):
        return ContainerKind.MAPPING
    if isinstance(value, Set):
        return ContainerKind.SET
    if isinstance(value, Sequence):
        return ContainerKind.SEQUENCE
    if callable(value):
        return ContainerKind.CALLABLE
    return ContainerKind.INSTANCE
