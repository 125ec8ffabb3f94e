"""
Undo/redo history.

Two bounded stacks of whole-document snapshots. The undo stack holds the
states *before* each recorded mutation; the caller hands in the current
state when undoing or redoing so it can be parked on the opposite stack.
"""

from collections import deque
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..core.id import ComponentId
from ..domain.components import CanvasComponent, ComponentBase


MAX_HISTORY_SIZE = 50


class Snapshot(BaseModel):
    """Immutable copy of the forest plus selection."""

    model_config = ConfigDict(frozen=True)

    components: list[CanvasComponent] = Field(default_factory=list)
    selected: ComponentId | None = None
    description: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)

    @classmethod
    def capture(
        cls,
        components: list[ComponentBase],
        selected: ComponentId | None = None,
        description: str = "",
    ) -> "Snapshot":
        """Deep-copy ``components`` so later edits cannot leak into history."""
        return cls(
            components=[component.model_copy(deep=True) for component in components],
            selected=selected,
            description=description,
        )

    def restore(self) -> list[ComponentBase]:
        """Fresh deep copy of the stored forest, safe to mutate."""
        return [component.model_copy(deep=True) for component in self.components]


class History:
    """
    Bounded undo/redo stacks.

    Examples:
        >>> history = History(max_size=10)
        >>> history.push(Snapshot.capture(before, description="Add Component"))
        >>> previous = history.undo(Snapshot.capture(after))
        >>> history.redo(previous)  # returns the "after" state
    """

    def __init__(self, max_size: int = MAX_HISTORY_SIZE):
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self._undo: deque[Snapshot] = deque(maxlen=max_size)
        self._redo: deque[Snapshot] = deque(maxlen=max_size)

    def push(self, snapshot: Snapshot) -> None:
        """Record a pre-mutation state; clears redo and evicts the oldest entry when full."""
        self._redo.clear()
        self._undo.append(snapshot)

    def undo(self, current: Snapshot) -> Snapshot | None:
        """Park ``current`` on redo and return the state to restore, or None."""
        if not self._undo:
            return None
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: Snapshot) -> Snapshot | None:
        """Inverse of ``undo``."""
        if not self._redo:
            return None
        self._undo.append(current)
        return self._redo.pop()

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo_stack(self) -> list[Snapshot]:
        """Undo entries newest first (for a history panel)."""
        return list(reversed(self._undo))

    def redo_stack(self) -> list[Snapshot]:
        return list(reversed(self._redo))

    def restore_to(self, index: int, current: Snapshot) -> Snapshot | None:
        """
        Jump back to ``undo_stack()[index]``.

        Newer entries (and ``current``) move to the redo stack, so the jump
        can be redone step by step.
        """
        if index < 0 or index >= len(self._undo):
            return None
        state = current
        for _ in range(index + 1):
            previous = self.undo(state)
            if previous is None:
                break
            state = previous
        return state

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def __len__(self) -> int:
        return len(self._undo)


__all__ = ["Snapshot", "History", "MAX_HISTORY_SIZE"]
