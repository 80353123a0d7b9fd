"""
Domain models for shapeguard.

Pure data structures describing how a guard is invoked and what it reports.
All models are immutable (frozen dataclasses) so options and results can be
shared freely between guards and threads.
"""

from collections.abc import Callable
from dataclasses import dataclass, fields
from enum import Enum

# Anything usable as an inner guard: a Guard instance or a bare predicate.
InnerGuard = Callable[[object], bool]


# =============================================================================
# CALL OPTIONS
# =============================================================================


@dataclass(frozen=True)
class GuardOptions:
    """Per-call switches accepted by every guard."""

    throw_error: bool = False  # Raise TypeMismatchError instead of returning False
    label: str | None = None  # Overrides the guard's own label in error text

    def merged(self, **overrides: object) -> "GuardOptions":
        """
        Return a copy with keyword overrides applied.

        Overrides set to None are ignored, so callers can forward optional
        keyword arguments without clearing configured values.
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(
                f"{type(self).__name__} got unexpected option(s): {sorted(unknown)}"
            )
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return type(self)(**values)


@dataclass(frozen=True)
class ContainerGuardOptions(GuardOptions):
    """
    Options for container guards.

    Omitting value_guard or key_guard means "accept any contents"; the
    container guard then validates structure only.
    """

    value_guard: InnerGuard | None = None
    key_guard: InnerGuard | None = None  # Mappings and plain structures only

    def __post_init__(self) -> None:
        for name in ("value_guard", "key_guard"):
            guard = getattr(self, name)
            if guard is not None and not callable(guard):
                raise TypeError(f"{name} must be callable, got {type(guard).__name__}")


# =============================================================================
# GUARD RESULT
# =============================================================================


@dataclass(frozen=True)
class GuardResult:
    """
    Immutable guard outcome.

    Carries the narrowed value on success so callers working from the
    result rather than the boolean keep the type information.
    """

    passed: bool
    value: object = None  # The validated input (None when rejected)
    feedback: str = ""  # Why the input was rejected (empty if passed)

    def __bool__(self) -> bool:
        return self.passed

    @classmethod
    def success(cls, value: object) -> "GuardResult":
        return cls(passed=True, value=value)

    @classmethod
    def failure(cls, feedback: str = "") -> "GuardResult":
        return cls(passed=False, feedback=feedback)


# =============================================================================
# CONTAINER KINDS
# =============================================================================


class ContainerKind(Enum):
    """Closed set of structural kinds a value is classified into."""

    NONE = "none"  # The None singleton
    SCALAR = "scalar"  # Text, bytes, numbers, booleans
    CALLABLE = "callable"  # Functions, classes, callable objects
    SEQUENCE = "sequence"  # Index-ordered finite collections
    SET = "set"  # Unordered collections of unique values
    WEAK_SET = "weak_set"  # weakref.WeakSet
    MAPPING = "mapping"  # Key -> value collections other than a plain dict
    WEAK_MAPPING = "weak_mapping"  # WeakKeyDictionary / WeakValueDictionary
    RECORD = "record"  # A plain dict: keys and values are the data
    INSTANCE = "instance"  # Any other object
