"""Confirmation providers for interactive conflict resolution.

The UI supplies the real dialog; these cover scripted and test use.
"""

from typing import Any, Callable, List, Protocol, Tuple, runtime_checkable

from layout_styles.editing.outcomes import ConflictInfo


@runtime_checkable
class ConfirmationProvider(Protocol):
    def confirm(self, conflict: ConflictInfo, property_name: str, value: Any) -> bool:
        """Return True to unlink the style and apply the edit, False to keep the style."""
        ...


class StaticConfirmation:
    """Always gives the same answer and records what it was asked."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.requests: List[Tuple[ConflictInfo, str, Any]] = []

    def confirm(self, conflict: ConflictInfo, property_name: str, value: Any) -> bool:
        self.requests.append((conflict, property_name, value))
        return self.answer


class CallbackConfirmation:
    """Adapts a plain callable to the provider protocol."""

    def __init__(self, callback: Callable[[ConflictInfo, str, Any], bool]) -> None:
        self._callback = callback

    def confirm(self, conflict: ConflictInfo, property_name: str, value: Any) -> bool:
        return bool(self._callback(conflict, property_name, value))
