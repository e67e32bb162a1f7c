"""
Undo and redo management for the Voxel Editor.
Each actor gets an independent pair of stacks.
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Union

from .operation import Operation, PartialApplyError
from .results import HistoryEmpty, WriteFailed


@dataclass
class ActorHistory:
    undo_stack: List[Operation] = field(default_factory=list)
    redo_stack: List[Operation] = field(default_factory=list)


class HistoryManager:
    """
    Per-actor undo/redo stacks. Recording pushes onto the undo stack and
    clears redo. Undo moves the top operation to the redo stack after
    reverting it; redo moves it back after re-applying it. Only the undo
    stack is capped at max_history.
    """

    def __init__(self, max_history: int = 20):
        if max_history < 1:
            raise ValueError(f"max_history must be at least 1, got {max_history}")
        self.max_history = max_history
        self.histories: Dict[Hashable, ActorHistory] = {}

    def _history(self, actor: Hashable) -> ActorHistory:
        history = self.histories.get(actor)
        if history is None:
            history = self.histories[actor] = ActorHistory()
        return history

    def record(self, actor: Hashable, op: Operation):
        history = self._history(actor)
        history.undo_stack.append(op)
        history.redo_stack.clear()
        while len(history.undo_stack) > self.max_history:
            history.undo_stack.pop(0)

    def undo(self, actor: Hashable) -> Union[Operation, HistoryEmpty, WriteFailed]:
        history = self._history(actor)
        if not history.undo_stack:
            return HistoryEmpty("undo")

        op = history.undo_stack[-1]
        try:
            op.revert()
        except PartialApplyError as e:
            return WriteFailed(e)
        history.redo_stack.append(history.undo_stack.pop())
        return op

    def redo(self, actor: Hashable) -> Union[Operation, HistoryEmpty, WriteFailed]:
        history = self._history(actor)
        if not history.redo_stack:
            return HistoryEmpty("redo")

        op = history.redo_stack[-1]
        try:
            op.apply()
        except PartialApplyError as e:
            return WriteFailed(e)
        history.undo_stack.append(history.redo_stack.pop())
        return op

    def undo_depth(self, actor: Hashable) -> int:
        history = self.histories.get(actor)
        return len(history.undo_stack) if history else 0

    def redo_depth(self, actor: Hashable) -> int:
        history = self.histories.get(actor)
        return len(history.redo_stack) if history else 0

    def clear(self, actor: Hashable):
        history = self.histories.get(actor)
        if history:
            history.undo_stack.clear()
            history.redo_stack.clear()
