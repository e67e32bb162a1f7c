"""
World access for the Voxel Editor.

The editor never owns the grid. It reads and writes cells through the small
World protocol below. ChunkedWorld is the in-memory implementation used by
the console and the tests: columns are grouped into square chunks that are
allocated on first write and store palette indices in numpy arrays.
"""

import numpy as np
from typing import Dict, List, Protocol, Tuple

from .models import AIR, BlockState, Coordinate


class World(Protocol):
    def get_content(self, coordinate: Coordinate) -> BlockState: ...

    def set_content(self, coordinate: Coordinate, content: BlockState) -> None: ...

    def get_vertical_bounds(self) -> Tuple[int, int]:
        """Return (min_y, max_y); valid cells satisfy min_y <= y < max_y."""
        ...


class WorldBoundsError(ValueError):
    """Raised when writing outside the world's vertical bounds."""


class Chunk:
    """A column of cells chunk_size wide on x and z."""

    def __init__(self, cx: int, cz: int, size: int, height: int):
        # World position of the chunk corner; cx, cz are chunk coordinates
        self.world_x = cx * size
        self.world_z = cz * size
        # Index 0 is always the world's default content
        self.cells = np.zeros((size, height, size), dtype=np.uint16)

    def count_non_default(self) -> int:
        return int(np.count_nonzero(self.cells))


class ChunkedWorld:
    """In-memory voxel world with lazily allocated chunks."""

    def __init__(
        self,
        chunk_size: int = 16,
        min_y: int = 0,
        max_y: int = 256,
        default: BlockState = AIR,
    ):
        if max_y <= min_y:
            raise ValueError(f"max_y ({max_y}) must be greater than min_y ({min_y})")
        self.chunk_size = chunk_size
        self.min_y = min_y
        self.max_y = max_y
        self.default = default
        self.chunks: Dict[Tuple[int, int], Chunk] = {}

        # Shared palette: content <-> index stored in the chunk arrays
        self._states: List[BlockState] = [default]
        self._index: Dict[BlockState, int] = {default: 0}

    @classmethod
    def from_config(cls, config) -> "ChunkedWorld":
        from .palette import parse_content

        return cls(
            chunk_size=config.chunk_size,
            min_y=config.min_y,
            max_y=config.max_y,
            default=parse_content(config.default_material),
        )

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    def get_vertical_bounds(self) -> Tuple[int, int]:
        return self.min_y, self.max_y

    def in_bounds(self, c: Coordinate) -> bool:
        return self.min_y <= c.y < self.max_y

    def get_chunk_coords(self, x: int, z: int) -> Tuple[int, int]:
        return x // self.chunk_size, z // self.chunk_size

    def get_content(self, c: Coordinate) -> BlockState:
        if not self.in_bounds(c):
            return self.default
        chunk = self.chunks.get(self.get_chunk_coords(c.x, c.z))
        if chunk is None:
            return self.default
        idx = chunk.cells[c.x - chunk.world_x, c.y - self.min_y, c.z - chunk.world_z]
        return self._states[idx]

    def set_content(self, c: Coordinate, content: BlockState) -> None:
        if not self.in_bounds(c):
            raise WorldBoundsError(
                f"y={c.y} outside world bounds [{self.min_y}, {self.max_y})"
            )
        coords = self.get_chunk_coords(c.x, c.z)
        chunk = self.chunks.get(coords)
        if chunk is None:
            if content == self.default:
                return
            chunk = Chunk(coords[0], coords[1], self.chunk_size, self.height)
            self.chunks[coords] = chunk
        chunk.cells[c.x - chunk.world_x, c.y - self.min_y, c.z - chunk.world_z] = (
            self._palette_index(content)
        )

    def _palette_index(self, content: BlockState) -> int:
        idx = self._index.get(content)
        if idx is None:
            idx = len(self._states)
            if idx > np.iinfo(np.uint16).max:
                raise OverflowError("Too many distinct block states in world palette")
            self._states.append(content)
            self._index[content] = idx
        return idx

    def count_non_default(self) -> int:
        """Number of cells holding something other than the default content."""
        return sum(chunk.count_non_default() for chunk in self.chunks.values())
