"""
Domain exceptions for shapeguard.

A guard has exactly one failure mode that surfaces as an exception: the
input did not have the expected shape and the caller asked for a raise.
"""


class TypeMismatchError(TypeError):
    """
    Raised by a guard running with throw_error=True when its check fails.

    The message is "expected input to be {label}", or the empty string when
    the guard carries no label.
    """

    def __init__(self, label: str | None = None, value: object = None):
        """
        Args:
            label: Human-readable name of the expected type (may be None)
            value: The rejected input
        """
        super().__init__(mismatch_message(label))
        self.label = label
        self.value = value


def mismatch_message(label: str | None) -> str:
    """Render the error text for a failed guard."""
    if not label:
        return ""
    return f"expected input to be {label}"
