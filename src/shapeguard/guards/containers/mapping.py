"""Key-value mapping guard."""

from collections.abc import Iterable, Mapping
from typing import Any

from shapeguard.domain.models import ContainerKind
from shapeguard.guards.containers.base import ContainerGuard


class MappingGuard(ContainerGuard[Mapping[Any, Any]]):
    """
    Accepts any collections.abc.Mapping, plain dicts included.

    WeakKeyDictionary and WeakValueDictionary are rejected.
    """

    accepted_kinds = frozenset({ContainerKind.MAPPING, ContainerKind.RECORD})
    kind_label = "mapping"
    has_keys = True

    def entries(self, value: Mapping[Any, Any]) -> Iterable[tuple[object, object]]:
        return value.items()

    def describe(self, key: object) -> str:
        return f"value for key {key!r}"


is_map = MappingGuard()
