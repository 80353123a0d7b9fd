"""
Domain layer for shapeguard.

Contains the option, result and classification types with no dependency on
the guard implementations.
"""

from shapeguard.domain.classification import classify
from shapeguard.domain.exceptions import TypeMismatchError, mismatch_message
from shapeguard.domain.interfaces import GuardInterface
from shapeguard.domain.models import (
    ContainerGuardOptions,
    ContainerKind,
    GuardOptions,
    GuardResult,
    InnerGuard,
)

__all__ = [
    # Models
    "GuardOptions",
    "ContainerGuardOptions",
    "GuardResult",
    "ContainerKind",
    "InnerGuard",
    # Classification
    "classify",
    # Interfaces
    "GuardInterface",
    # Exceptions
    "TypeMismatchError",
    "mismatch_message",
]
