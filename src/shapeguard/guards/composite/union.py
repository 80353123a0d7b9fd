"""
Union combinator.

UnionGuard is the logical OR of its component guards: the input is accepted
as soon as one component accepts it.
"""

from typing import Any

from shapeguard.domain.interfaces import GuardInterface
from shapeguard.domain.models import InnerGuard
from shapeguard.guards.factory import Guard, T, probe


def _joined_label(guards: tuple[InnerGuard, ...]) -> str | None:
    labels = [
        guard.label
        for guard in guards
        if isinstance(guard, GuardInterface) and guard.label
    ]
    return " | ".join(labels) or None


class UnionGuard(Guard[T]):
    """
    Logical OR of one or more guards.

    Components are probed in order in non-throwing mode and evaluation
    short-circuits on the first match. Order affects only how many
    components run, never the outcome.

    The default label joins the component labels ("string | number");
    unlabelled components are left out of it.
    """

    def __init__(self, *guards: InnerGuard, label: str | None = None):
        """
        Args:
            *guards: Guards or predicates to combine (at least one)
            label: Explicit label replacing the joined component labels
        """
        if not guards:
            raise ValueError("union() requires at least one guard")
        for guard in guards:
            if not callable(guard):
                raise TypeError(f"union members must be callable, got {guard!r}")
        self.guards = guards
        self._explicit_label = label is not None
        if label is None:
            label = _joined_label(guards)
        super().__init__(self._any, label)

    def _any(self, value: object) -> bool:
        return any(probe(guard, value) for guard in self.guards)

    def __or__(self, other: InnerGuard) -> "UnionGuard[Any]":
        # Flatten chained unions: (a | b) | c has three components.
        if self._explicit_label:
            return UnionGuard(self, other)
        return UnionGuard(*self.guards, other)


def union(*guards: InnerGuard, label: str | None = None) -> UnionGuard[Any]:
    """
    Combine guards with logical OR.

    Example:
        is_key = union(is_string, is_number)
        is_key(1)                          # True
        is_key(None, throw_error=True)     # raises "expected input to be string | number"
    """
    return UnionGuard(*guards, label=label)
