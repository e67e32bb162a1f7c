"""
Sphere brush storage for the Voxel Editor.
"""

from typing import Dict, FrozenSet, Hashable, Optional, Union

from .models import BlockState, Brush
from .results import InvalidShapeParameter


class BrushManager:
    """Holds one active brush per actor. Setting a brush discards the old one."""

    def __init__(self, max_radius: int = 32):
        self.max_radius = max_radius
        self.brushes: Dict[Hashable, Brush] = {}

    def set_brush(
        self,
        actor: Hashable,
        radius: int,
        content: BlockState,
        mask: Optional[FrozenSet[str]] = None,
    ) -> Union[Brush, InvalidShapeParameter]:
        if radius < 1:
            return InvalidShapeParameter("Radius must be at least 1.")
        if radius > self.max_radius:
            return InvalidShapeParameter(f"Radius must be at most {self.max_radius}.")
        brush = Brush(radius, content, mask)
        self.brushes[actor] = brush
        return brush

    def get_brush(self, actor: Hashable) -> Optional[Brush]:
        return self.brushes.get(actor)

    def clear(self, actor: Hashable):
        self.brushes.pop(actor, None)
