"""
Result types reported by the editing service instead of raising.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EditFailure:
    """Base class for every non-success outcome."""

    ok = False

    @property
    def message(self) -> str:
        return "Nothing happened."


@dataclass(frozen=True)
class IncompleteSelection(EditFailure):
    @property
    def message(self) -> str:
        return "You must set pos1 and pos2 first."


@dataclass(frozen=True)
class InvalidShapeParameter(EditFailure):
    reason: str

    @property
    def message(self) -> str:
        return self.reason


@dataclass(frozen=True)
class NoMatches(EditFailure):
    pattern: str = ""

    @property
    def message(self) -> str:
        if self.pattern:
            return f"No blocks matched {self.pattern}."
        return "No blocks matched."


@dataclass(frozen=True)
class HistoryEmpty(EditFailure):
    kind: str  # "undo" or "redo"

    @property
    def message(self) -> str:
        return f"Nothing to {self.kind}."


@dataclass(frozen=True)
class Empty(EditFailure):
    @property
    def message(self) -> str:
        return "Brush stroke changed no blocks."


@dataclass(frozen=True)
class OutsideWorld(EditFailure):
    what: str  # "Selection" or "Paste target"
    min_y: int
    max_y: int  # Exclusive

    @property
    def message(self) -> str:
        return (
            f"{self.what} is outside the world (y {self.min_y} to {self.max_y - 1}). "
            "No blocks changed."
        )


@dataclass(frozen=True)
class ClipboardEmpty(EditFailure):
    @property
    def message(self) -> str:
        return "Your clipboard is empty. Use /se copy first."


@dataclass(frozen=True)
class NoBrush(EditFailure):
    @property
    def message(self) -> str:
        return "You have no brush configured. Use /se brush sphere ..."


@dataclass(frozen=True)
class WriteFailed(EditFailure):
    error: Exception

    @property
    def message(self) -> str:
        return f"Edit aborted: {self.error}"
