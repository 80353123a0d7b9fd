"""
Base container guard.

All container guards share one algorithm: a structural check by
ContainerKind, then an optional containment check that probes every
element (and key) with the configured inner guards.
"""

import logging
from abc import abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar

from shapeguard.domain.classification import classify
from shapeguard.domain.exceptions import mismatch_message
from shapeguard.domain.models import (
    ContainerGuardOptions,
    ContainerKind,
    GuardOptions,
    GuardResult,
    InnerGuard,
)
from shapeguard.guards.factory import Guard, T, probe

logger = logging.getLogger(__name__)


class ContainerGuard(Guard[T]):
    """
    Structural check followed by element validation.

    Subclasses declare the accepted kinds, a kind label and how to iterate
    their (key, element) pairs. Inner guards always run in non-throwing
    mode; an element failure folds into the outer result, so a throwing
    call raises once with the outer label.
    """

    options_type = ContainerGuardOptions
    accepted_kinds: ClassVar[frozenset[ContainerKind]] = frozenset()
    kind_label: ClassVar[str] = ""
    has_keys: ClassVar[bool] = False  # Whether key_guard applies

    def __init__(self, defaults: ContainerGuardOptions | None = None):
        """
        Args:
            defaults: Options used when the guard is called without an
                options object and when it is probed as an inner guard
        """
        super().__init__(self._is_kind, self.kind_label)
        if defaults is not None:
            self._defaults = defaults

    def of(
        self,
        value_guard: InnerGuard | None = None,
        *,
        key_guard: InnerGuard | None = None,
        label: str | None = None,
    ) -> "ContainerGuard[Any]":
        """
        Bind inner guards, returning a new guard of the same kind.

        The bound guard can itself be passed as an inner guard, e.g.
        is_map.of(is_sequence.of(is_number)). This guard is left unchanged.
        """
        bound = self._defaults.merged(
            value_guard=value_guard, key_guard=key_guard, label=label
        )
        return type(self)(bound)

    @abstractmethod
    def entries(self, value: Any) -> Iterable[tuple[object, object]]:
        """Yield (key, element) pairs; key is a position or None for sets."""
        pass

    def describe(self, key: object) -> str:
        return f"element {key!r}"

    def _is_kind(self, value: object) -> bool:
        return classify(value) in self.accepted_kinds

    def _check(self, value: object, options: GuardOptions) -> GuardResult:
        label = options.label or self.label
        kind = classify(value)
        if kind not in self.accepted_kinds:
            logger.debug("%r rejected structural kind %s", label, kind.value)
            return GuardResult.failure(mismatch_message(label))

        value_guard = getattr(options, "value_guard", None)
        key_guard = getattr(options, "key_guard", None) if self.has_keys else None
        if value_guard is None and key_guard is None:
            return GuardResult.success(value)

        for key, element in self.entries(value):
            if key_guard is not None and not probe(key_guard, key):
                return self._reject(label, f"key {key!r} rejected by key guard")
            if value_guard is not None and not probe(value_guard, element):
                return self._reject(
                    label, f"{self.describe(key)} rejected by value guard"
                )
        return GuardResult.success(value)

    def _reject(self, label: str | None, detail: str) -> GuardResult:
        logger.debug("%r rejected contents: %s", label, detail)
        message = mismatch_message(label)
        return GuardResult.failure(f"{message} ({detail})" if message else detail)
