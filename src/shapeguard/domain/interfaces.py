"""
Domain interfaces (Ports) for shapeguard.

These abstract base classes define the contracts guard implementations
must satisfy. They have no external dependencies.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapeguard.domain.models import GuardResult


class GuardInterface(ABC):
    """
    Port for value validation.

    Guards are deterministic, side-effect free checks over a single value.
    validate() is the non-throwing probe every combinator relies on.
    """

    @abstractmethod
    def validate(self, value: object) -> "GuardResult":
        """
        Check a value without raising on mismatch.

        Args:
            value: The untrusted input

        Returns:
            GuardResult with passed=True and the narrowed value, or
            passed=False with feedback
        """
        pass

    @property
    @abstractmethod
    def label(self) -> str | None:
        """Human-readable name of the type this guard accepts."""
        pass
