"""
Guard factory.

Wraps a raw predicate into a Guard: a callable with a dual-mode contract
(boolean return, or raise on mismatch) and an optional label used in error
text. Every other guard in the package is a Guard subclass.
"""

import logging
from collections.abc import Callable
from dataclasses import fields
from typing import TYPE_CHECKING, Any, Generic, TypeGuard, TypeVar

from shapeguard.domain.exceptions import TypeMismatchError, mismatch_message
from shapeguard.domain.interfaces import GuardInterface
from shapeguard.domain.models import GuardOptions, GuardResult, InnerGuard

if TYPE_CHECKING:
    from shapeguard.guards.composite.union import UnionGuard

T = TypeVar("T")

logger = logging.getLogger(__name__)


def probe(guard: InnerGuard, value: object) -> bool:
    """
    Evaluate an inner guard in non-throwing mode.

    Guard instances are asked through validate() so they can never raise a
    TypeMismatchError; bare predicates are called directly.
    """
    if isinstance(guard, GuardInterface):
        return guard.validate(value).passed
    return bool(guard(value))


class Guard(GuardInterface, Generic[T]):
    """
    A predicate with the uniform guard contract.

    guard(value) returns a bool. guard(value, throw_error=True) returns True
    or raises TypeMismatchError, never False.
    """

    options_type: type[GuardOptions] = GuardOptions

    def __init__(self, predicate: Callable[[object], bool], label: str | None = None):
        """
        Args:
            predicate: Total function of one value returning a bool
            label: Name of the accepted type, used in error messages
        """
        self._predicate = predicate
        self._label = label
        self._defaults = self.options_type()

    @property
    def label(self) -> str | None:
        return self._label

    def validate(self, value: object) -> GuardResult:
        """Probe the value with this guard's default options."""
        return self._check(value, self._defaults)

    def __call__(
        self,
        value: object,
        options: GuardOptions | None = None,
        **overrides: Any,
    ) -> TypeGuard[T]:
        """
        Check a value.

        Args:
            value: The untrusted input
            options: Options object layered over the guard's defaults; its
                unset (None) fields keep the bound values
            **overrides: Individual options (throw_error=, label=, ...) applied
                on top of the options object

        Raises:
            TypeMismatchError: If throw_error is set and the check fails
        """
        resolved = self._resolve(options, overrides)
        result = self._check(value, resolved)
        if result.passed:
            return True
        if resolved.throw_error:
            raise TypeMismatchError(resolved.label or self.label, value)
        return False

    def __or__(self, other: InnerGuard) -> "UnionGuard[Any]":
        # Lazy import to avoid circular dependency
        from shapeguard.guards.composite.union import union

        return union(self, other)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.label!r}>"

    def _resolve(
        self, options: GuardOptions | None, overrides: dict[str, Any]
    ) -> GuardOptions:
        options = self._defaults if options is None else self._layer(options)
        if not overrides:
            return options
        return options.merged(**overrides)

    def _layer(self, options: GuardOptions) -> GuardOptions:
        # Only fields this guard understands; None never clears a bound value.
        known = {f.name for f in fields(self._defaults)}
        layered = {
            f.name: getattr(options, f.name) for f in fields(options) if f.name in known
        }
        return self._defaults.merged(**layered)

    def _check(self, value: object, options: GuardOptions) -> GuardResult:
        if self._predicate(value):
            return GuardResult.success(value)
        label = options.label or self.label
        logger.debug("%r rejected value of type %s", label, type(value).__name__)
        return GuardResult.failure(mismatch_message(label))


def create_guard(
    predicate: Callable[[object], bool], label: str | None = None
) -> Guard[Any]:
    """
    Turn a raw predicate into a Guard.

    Example:
        is_foo: Guard[Foo] = create_guard(lambda v: isinstance(v, Foo), "Foo")
        is_foo(Foo())                      # True
        is_foo(None, throw_error=True)     # raises "expected input to be Foo"

    Args:
        predicate: Function of one value returning a bool. Exceptions it
            raises propagate unchanged.
        label: Optional name of the accepted type for error messages

    Returns:
        A stateless Guard
    """
    if not callable(predicate):
        raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")
    return Guard(predicate, label)
