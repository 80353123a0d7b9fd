"""Set guard."""

from collections.abc import Iterable, Set
from typing import Any

from shapeguard.domain.models import ContainerKind
from shapeguard.guards.containers.base import ContainerGuard


class SetGuard(ContainerGuard[Set[Any]]):
    """
    Accepts set, frozenset and other collections.abc.Set types, including
    the set-like dict views from keys() and items(). values() views are not
    sets and are rejected.

    weakref.WeakSet is rejected: its membership changes under garbage
    collection, so a validated snapshot of it means nothing.
    """

    accepted_kinds = frozenset({ContainerKind.SET})
    kind_label = "set"

    def entries(self, value: Set[Any]) -> Iterable[tuple[object, object]]:
        return ((None, element) for element in value)

    def describe(self, key: object) -> str:
        return "element"


is_set = SetGuard()
