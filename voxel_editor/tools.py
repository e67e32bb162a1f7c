"""
Editing algorithms for the Voxel Editor.

Each builder enumerates candidate cells, filters them and snapshots the
current and new contents into an Operation. None of them write to the
world; the caller applies the Operation.
"""

import numpy as np
from functools import lru_cache
from typing import Dict, FrozenSet, Optional, Tuple, TYPE_CHECKING

from .models import BlockState, Brush, Clipboard, Coordinate, Region
from .operation import Operation

if TYPE_CHECKING:
    from .world import World

# Added to the radius so voxelised spheres look round rather than spiky
SPHERE_ROUNDING = 0.5


def build_fill(
    world: "World",
    region: Region,
    content: BlockState,
    mask: Optional[FrozenSet[str]] = None,
) -> Operation:
    """Set every cell in the region, or only those whose material is in mask."""
    min_y, max_y = world.get_vertical_bounds()
    before: Dict[Coordinate, BlockState] = {}
    after: Dict[Coordinate, BlockState] = {}

    for coord in region.iter_cells(min_y, max_y):
        current = world.get_content(coord)
        if mask is not None and current.category not in mask:
            continue
        before[coord] = current
        after[coord] = content
    return Operation(world, before, after)


def build_replace(
    world: "World", region: Region, pattern: BlockState, content: BlockState
) -> Operation:
    """Set the cells in the region whose content matches pattern."""
    min_y, max_y = world.get_vertical_bounds()
    before: Dict[Coordinate, BlockState] = {}
    after: Dict[Coordinate, BlockState] = {}

    for coord in region.iter_cells(min_y, max_y):
        current = world.get_content(coord)
        if current.matches(pattern):
            before[coord] = current
            after[coord] = content
    return Operation(world, before, after)


def copy_region(world: "World", region: Region) -> Clipboard:
    """Snapshot a region relative to its minimum corner."""
    min_y, max_y = world.get_vertical_bounds()
    cells = {
        coord - region.min: world.get_content(coord)
        for coord in region.iter_cells(min_y, max_y)
    }
    return Clipboard(cells, region.size)


def build_paste(world: "World", clipboard: Clipboard, anchor: Coordinate) -> Operation:
    """Overwrite the clipboard's footprint with its origin placed at anchor."""
    min_y, max_y = world.get_vertical_bounds()
    before: Dict[Coordinate, BlockState] = {}
    after: Dict[Coordinate, BlockState] = {}

    for offset, content in clipboard.cells.items():
        target = anchor + offset
        if not min_y <= target.y < max_y:
            continue
        before[target] = world.get_content(target)
        after[target] = content
    return Operation(world, before, after)


@lru_cache(maxsize=32)
def sphere_offsets(radius: int) -> Tuple[Coordinate, ...]:
    """Offsets within radius + 0.5 of the centre, in dx, dy, dz order."""
    if radius < 1:
        raise ValueError(f"Radius must be at least 1, got {radius}")
    span = np.arange(-radius, radius + 1)
    dx, dy, dz = np.meshgrid(span, span, span, indexing="ij")
    limit = (radius + SPHERE_ROUNDING) ** 2
    inside = (dx * dx + dy * dy + dz * dz) <= limit
    return tuple(
        Coordinate(int(x), int(y), int(z))
        for x, y, z in zip(dx[inside], dy[inside], dz[inside])
    )


def build_sphere(world: "World", brush: Brush, center: Coordinate) -> Operation:
    """Paint the brush's sphere around center, honouring its mask."""
    min_y, max_y = world.get_vertical_bounds()
    before: Dict[Coordinate, BlockState] = {}
    after: Dict[Coordinate, BlockState] = {}

    for offset in sphere_offsets(brush.radius):
        target = center + offset
        if not min_y <= target.y < max_y:
            continue
        current = world.get_content(target)
        if not brush.is_allowed(current):
            continue
        before[target] = current
        after[target] = brush.content
    return Operation(world, before, after)
