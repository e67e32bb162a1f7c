"""
Per-actor selection corners for the Voxel Editor.
"""

from typing import Dict, Hashable, Optional

from .models import Coordinate, Region


class SelectionManager:
    def __init__(self):
        self.pos1: Dict[Hashable, Coordinate] = {}
        self.pos2: Dict[Hashable, Coordinate] = {}

    def set_pos1(self, actor: Hashable, pos: Coordinate):
        self.pos1[actor] = pos

    def set_pos2(self, actor: Hashable, pos: Coordinate):
        self.pos2[actor] = pos

    def get_selection(self, actor: Hashable) -> Optional[Region]:
        """Region spanned by the actor's corners, or None if either is unset."""
        a = self.pos1.get(actor)
        b = self.pos2.get(actor)
        if a is None or b is None:
            return None
        return Region.from_corners(a, b)

    def clear(self, actor: Hashable):
        self.pos1.pop(actor, None)
        self.pos2.pop(actor, None)
