"""Ordered-sequence guard."""

from collections.abc import Iterable, Sequence
from typing import Any

from shapeguard.domain.models import ContainerKind
from shapeguard.guards.containers.base import ContainerGuard


class SequenceGuard(ContainerGuard[Sequence[Any]]):
    """
    Accepts index-ordered finite collections: list, tuple, range, deque and
    other collections.abc.Sequence types. Text and bytes are scalars and
    are rejected.
    """

    accepted_kinds = frozenset({ContainerKind.SEQUENCE})
    kind_label = "sequence"

    def entries(self, value: Sequence[Any]) -> Iterable[tuple[object, object]]:
        return enumerate(value)

    def describe(self, key: object) -> str:
        return f"element at index {key}"


is_sequence = SequenceGuard()
