"""Plain keyed structure guard."""

from collections.abc import Iterable
from typing import Any

from shapeguard.domain.models import ContainerKind
from shapeguard.guards.containers.base import ContainerGuard


class RecordGuard(ContainerGuard[dict[Any, Any]]):
    """
    Accepts plain data objects: instances of exactly dict, the shape decoded
    JSON objects take.

    dict subclasses (OrderedDict, defaultdict, Counter), other mappings,
    class instances, classes and functions are rejected even when they
    expose keyed attributes.
    """

    accepted_kinds = frozenset({ContainerKind.RECORD})
    kind_label = "plain structure"
    has_keys = True

    def entries(self, value: dict[Any, Any]) -> Iterable[tuple[object, object]]:
        return value.items()

    def describe(self, key: object) -> str:
        return f"value for key {key!r}"


is_plain_structure = RecordGuard()
