"""
Command handling for the Voxel Editor.
Parses "/se ..." style command lines and routes them to the editing service.
"""

from dataclasses import dataclass
from typing import Hashable, List, Optional, TYPE_CHECKING

from .models import Clipboard, Coordinate
from .operation import Operation
from .palette import InvalidContentError
from .results import (
    Empty,
    EditFailure,
    HistoryEmpty,
    InvalidShapeParameter,
    NoMatches,
    OutsideWorld,
)

if TYPE_CHECKING:
    from .editor import EditingService

SUBCOMMANDS = [
    "pos1",
    "pos2",
    "tp",
    "set",
    "replace",
    "copy",
    "paste",
    "undo",
    "redo",
    "brush",
    "paint",
    "help",
]

HELP_LINES = [
    ("/se pos1 <x> <y> <z>", "set the first selection corner"),
    ("/se pos2 <x> <y> <z>", "set the second selection corner"),
    ("/se tp <x> <y> <z>", "move to a block position"),
    ("/se set <blockdata> [mask=materials]", "fill selection with block"),
    ("/se replace <from> <to>", "replace blocks in selection"),
    ("/se copy", "copy selection to clipboard"),
    ("/se paste", "paste clipboard at your location"),
    ("/se undo / redo", "undo/redo last operation"),
    ("/se brush sphere <radius> <blockdata> [mask=materials]", "create sphere brush"),
    ("/se paint <x> <y> <z>", "use the brush on a block"),
]


@dataclass
class Actor:
    id: Hashable
    position: Coordinate = Coordinate(0, 0, 0)


@dataclass
class Feedback:
    message: str
    style: str = "green"  # rich style name used by the console


def _failure(result: EditFailure) -> Feedback:
    # Informational outcomes leave the world untouched, nothing went wrong
    if isinstance(result, (HistoryEmpty, NoMatches, Empty, OutsideWorld)):
        return Feedback(result.message, "yellow")
    return Feedback(result.message, "red")


class CommandHandler:
    def __init__(self, service: "EditingService"):
        self.service = service

    def handle(self, actor: Actor, line: str) -> Feedback:
        """Process a single command line and describe the outcome."""
        args = line.strip().split()
        if args and args[0].lower() in ("/se", "se"):
            args = args[1:]
        if not args:
            return self.help()

        sub = args[0].lower()
        if sub in ("pos1", "pos2", "tp", "paint"):
            return self._handle_position(actor, sub, args)
        if sub == "set":
            if len(args) < 2:
                return Feedback("Usage: /se set <blockdata> [mask=materials]", "red")
            return self._handle_set(actor, args)
        if sub == "replace":
            if len(args) < 3:
                return Feedback("Usage: /se replace <from> <to>", "red")
            return self._handle_replace(actor, args)
        if sub == "copy":
            return self._report(self.service.copy(actor.id))
        if sub == "paste":
            return self._report(self.service.paste(actor.id, actor.position), "Pasted")
        if sub == "undo":
            return self._report(self.service.undo(actor.id), "Undo complete:")
        if sub == "redo":
            return self._report(self.service.redo(actor.id), "Redo complete:")
        if sub == "brush":
            return self._handle_brush(actor, args)
        return self.help()

    def help(self) -> Feedback:
        lines = ["Voxel Editor commands:"] + [f"{cmd} - {desc}" for cmd, desc in HELP_LINES]
        return Feedback("\n".join(lines), "cyan")

    def complete(self, args: List[str]) -> List[str]:
        """Tab completion for the sub-command and the brush shape."""
        if len(args) == 1:
            prefix = args[0].lower()
            return [opt for opt in SUBCOMMANDS if opt.startswith(prefix)]
        if len(args) == 2 and args[0].lower() == "brush":
            if "sphere".startswith(args[1].lower()):
                return ["sphere"]
        return []

    def _handle_position(self, actor: Actor, sub: str, args: List[str]) -> Feedback:
        pos = _parse_coordinate(args[1:4])
        if pos is None:
            return Feedback(f"Usage: /se {sub} <x> <y> <z>", "red")
        if sub == "pos1":
            self.service.set_pos1(actor.id, pos)
            return Feedback(f"Pos1 set to: {pos}", "yellow")
        if sub == "pos2":
            self.service.set_pos2(actor.id, pos)
            return Feedback(f"Pos2 set to: {pos}", "yellow")
        if sub == "tp":
            actor.position = pos
            return Feedback(f"Moved to {pos}", "yellow")
        return self._report(self.service.paint(actor.id, pos), "Painted sphere:")

    def _handle_set(self, actor: Actor, args: List[str]) -> Feedback:
        try:
            content = self.service.palette.parse(args[1])
        except InvalidContentError as e:
            return _failure(InvalidShapeParameter(str(e)))
        mask = self.service.palette.parse_mask(_mask_arg(args, 2))
        return self._report(self.service.fill(actor.id, content, mask), "Set")

    def _handle_replace(self, actor: Actor, args: List[str]) -> Feedback:
        try:
            pattern = self.service.palette.parse(args[1])
        except InvalidContentError:
            return _failure(InvalidShapeParameter(f"Invalid from block: {args[1]}"))
        try:
            content = self.service.palette.parse(args[2])
        except InvalidContentError:
            return _failure(InvalidShapeParameter(f"Invalid to block: {args[2]}"))
        return self._report(self.service.replace(actor.id, pattern, content), "Replaced")

    def _handle_brush(self, actor: Actor, args: List[str]) -> Feedback:
        usage = "Usage: /se brush sphere <radius> <blockdata> [mask=materials]"
        if len(args) < 4 or args[1].lower() != "sphere":
            return Feedback(usage, "red")
        try:
            radius = int(args[2])
        except ValueError:
            return _failure(InvalidShapeParameter(f"Invalid radius: {args[2]}"))
        try:
            content = self.service.palette.parse(args[3])
        except InvalidContentError as e:
            return _failure(InvalidShapeParameter(str(e)))
        mask = self.service.palette.parse_mask(_mask_arg(args, 4))

        result = self.service.set_brush(actor.id, radius, content, mask)
        if isinstance(result, EditFailure):
            return _failure(result)
        return Feedback(f"Sphere brush set (r={result.radius}). Use /se paint to paint.", "cyan")

    def _report(self, result, verb: str = "") -> Feedback:
        if isinstance(result, EditFailure):
            return _failure(result)
        if isinstance(result, Clipboard):
            return Feedback(f"Copied selection ({len(result)} blocks).", "cyan")
        if isinstance(result, Operation):
            return Feedback(f"{verb} {len(result)} blocks.")
        return Feedback(str(result))


def _mask_arg(args: List[str], index: int) -> Optional[str]:
    if len(args) > index and args[index].lower().startswith("mask="):
        return args[index][len("mask=") :]
    return None


def _parse_coordinate(parts: List[str]) -> Optional[Coordinate]:
    if len(parts) != 3:
        return None
    try:
        x, y, z = (int(p) for p in parts)
    except ValueError:
        return None
    return Coordinate(x, y, z)

