"""
Editing service for the Voxel Editor.

Ties the per-actor managers to the editing tools: resolve the actor's
selection, clipboard or brush, build an Operation, apply it and record it
in the actor's history.
"""

from typing import FrozenSet, Hashable, Optional, Union

from .brush_manager import BrushManager
from .clipboard_manager import ClipboardManager
from .config import EditorConfig
from .models import BlockState, Brush, Clipboard, Coordinate, Region
from .operation import Operation, PartialApplyError
from .palette import Palette
from .results import (
    ClipboardEmpty,
    Empty,
    HistoryEmpty,
    IncompleteSelection,
    InvalidShapeParameter,
    NoBrush,
    NoMatches,
    OutsideWorld,
    WriteFailed,
)
from .selection_manager import SelectionManager
from .undo_manager import HistoryManager
from .world import World
from . import tools


class EditingService:
    def __init__(self, world: World, config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        self.world = world
        self.palette = Palette(self.config.known_materials)
        self.selection_mgr = SelectionManager()
        self.clipboard_mgr = ClipboardManager()
        self.brush_mgr = BrushManager(self.config.max_brush_radius)
        self.history = HistoryManager(self.config.undo_limit)

    def _commit(self, actor: Hashable, op: Operation) -> Union[Operation, WriteFailed]:
        try:
            op.apply()
        except PartialApplyError as e:
            return WriteFailed(e)
        self.history.record(actor, op)
        return op

    def _outside(self, region: Region) -> Optional[OutsideWorld]:
        min_y, max_y = self.world.get_vertical_bounds()
        if region.max_y < min_y or region.min_y >= max_y:
            return OutsideWorld("Selection", min_y, max_y)
        return None

    # Selection

    def set_pos1(self, actor: Hashable, pos: Coordinate):
        self.selection_mgr.set_pos1(actor, pos)

    def set_pos2(self, actor: Hashable, pos: Coordinate):
        self.selection_mgr.set_pos2(actor, pos)

    # Region edits

    def fill(
        self,
        actor: Hashable,
        content: BlockState,
        mask: Optional[FrozenSet[str]] = None,
    ) -> Union[Operation, NoMatches, IncompleteSelection, OutsideWorld, WriteFailed]:
        region = self.selection_mgr.get_selection(actor)
        if region is None:
            return IncompleteSelection()
        outside = self._outside(region)
        if outside is not None:
            return outside
        op = tools.build_fill(self.world, region, content, mask)
        if not op:
            return NoMatches(",".join(sorted(mask)) if mask else "")
        return self._commit(actor, op)

    def replace(
        self, actor: Hashable, pattern: BlockState, content: BlockState
    ) -> Union[Operation, NoMatches, IncompleteSelection, OutsideWorld, WriteFailed]:
        region = self.selection_mgr.get_selection(actor)
        if region is None:
            return IncompleteSelection()
        outside = self._outside(region)
        if outside is not None:
            return outside
        op = tools.build_replace(self.world, region, pattern, content)
        if not op:
            return NoMatches(str(pattern))
        return self._commit(actor, op)

    # Clipboard

    def copy(self, actor: Hashable) -> Union[Clipboard, IncompleteSelection, OutsideWorld]:
        region = self.selection_mgr.get_selection(actor)
        if region is None:
            return IncompleteSelection()
        outside = self._outside(region)
        if outside is not None:
            return outside
        clipboard = tools.copy_region(self.world, region)
        self.clipboard_mgr.store(actor, clipboard)
        return clipboard

    def paste(
        self, actor: Hashable, anchor: Coordinate
    ) -> Union[Operation, ClipboardEmpty, OutsideWorld, WriteFailed]:
        clipboard = self.clipboard_mgr.get(actor)
        if clipboard is None:
            return ClipboardEmpty()
        op = tools.build_paste(self.world, clipboard, anchor)
        if not op:
            # Every target row lies outside the vertical bounds
            return OutsideWorld("Paste target", *self.world.get_vertical_bounds())
        return self._commit(actor, op)

    # Brushes

    def set_brush(
        self,
        actor: Hashable,
        radius: int,
        content: BlockState,
        mask: Optional[FrozenSet[str]] = None,
    ) -> Union[Brush, InvalidShapeParameter]:
        return self.brush_mgr.set_brush(actor, radius, content, mask)

    def paint(
        self, actor: Hashable, center: Coordinate
    ) -> Union[Operation, Empty, NoBrush, WriteFailed]:
        brush = self.brush_mgr.get_brush(actor)
        if brush is None:
            return NoBrush()
        op = tools.build_sphere(self.world, brush, center)
        if not op:
            return Empty()
        return self._commit(actor, op)

    # History

    def undo(self, actor: Hashable) -> Union[Operation, HistoryEmpty, WriteFailed]:
        return self.history.undo(actor)

    def redo(self, actor: Hashable) -> Union[Operation, HistoryEmpty, WriteFailed]:
        return self.history.redo(actor)
