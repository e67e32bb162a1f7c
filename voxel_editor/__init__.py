"""
Voxel Editor - region, clipboard and brush editing with per-actor undo/redo.
"""

from .models import AIR, BlockState, Brush, Clipboard, Coordinate, Region
from .operation import Operation, PartialApplyError
from .undo_manager import HistoryManager
from .world import ChunkedWorld, World, WorldBoundsError
from .editor import EditingService

__version__ = "0.1.0"
__all__ = [
    "AIR",
    "BlockState",
    "Brush",
    "Clipboard",
    "Coordinate",
    "Region",
    "Operation",
    "PartialApplyError",
    "HistoryManager",
    "ChunkedWorld",
    "World",
    "WorldBoundsError",
    "EditingService",
]
