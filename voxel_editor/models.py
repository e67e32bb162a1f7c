"""
Core models and data structures for the Voxel Editor.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Integer grid position, also used as an offset inside a clipboard."""

    x: int
    y: int
    z: int

    def __add__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True, slots=True)
class BlockState:
    """Material of a single cell plus its state properties.

    Instances are immutable, so a snapshot can hold the same object the
    world handed out without copying it.
    """

    material: str
    properties: Tuple[Tuple[str, str], ...] = ()

    @property
    def category(self) -> str:
        return self.material

    def matches(self, pattern: "BlockState") -> bool:
        """True if the material is the same and every property the pattern
        names has the same value here. Properties missing from the pattern
        match anything."""
        if self.material != pattern.material:
            return False
        own = dict(self.properties)
        return all(own.get(k) == v for k, v in pattern.properties)

    def __str__(self) -> str:
        if not self.properties:
            return self.material
        props = ",".join(f"{k}={v}" for k, v in self.properties)
        return f"{self.material}[{props}]"


AIR = BlockState("air")


@dataclass(frozen=True, slots=True)
class Region:
    """Axis-aligned box between two corners, inclusive on every axis."""

    min: Coordinate
    max: Coordinate

    @classmethod
    def from_corners(cls, a: Coordinate, b: Coordinate) -> "Region":
        return cls(
            Coordinate(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z)),
            Coordinate(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z)),
        )

    def __post_init__(self):
        if self.min.x > self.max.x or self.min.y > self.max.y or self.min.z > self.max.z:
            raise ValueError(f"Region corners out of order: {self.min} > {self.max}")

    @property
    def min_x(self) -> int:
        return self.min.x

    @property
    def min_y(self) -> int:
        return self.min.y

    @property
    def min_z(self) -> int:
        return self.min.z

    @property
    def max_x(self) -> int:
        return self.max.x

    @property
    def max_y(self) -> int:
        return self.max.y

    @property
    def max_z(self) -> int:
        return self.max.z

    @property
    def size(self) -> Coordinate:
        return Coordinate(
            self.max.x - self.min.x + 1,
            self.max.y - self.min.y + 1,
            self.max.z - self.min.z + 1,
        )

    @property
    def volume(self) -> int:
        sx, sy, sz = self.size
        return sx * sy * sz

    def __contains__(self, c: Coordinate) -> bool:
        return (
            self.min.x <= c.x <= self.max.x
            and self.min.y <= c.y <= self.max.y
            and self.min.z <= c.z <= self.max.z
        )

    def __iter__(self) -> Iterator[Coordinate]:
        return self.iter_cells()

    def iter_cells(
        self, min_y: Optional[int] = None, max_y: Optional[int] = None
    ) -> Iterator[Coordinate]:
        """Yield every cell in x, y, z order, optionally clipped to the
        half-open vertical range [min_y, max_y)."""
        y_lo = self.min.y if min_y is None else max(self.min.y, min_y)
        y_hi = self.max.y + 1 if max_y is None else min(self.max.y + 1, max_y)
        for x in range(self.min.x, self.max.x + 1):
            for y in range(y_lo, y_hi):
                for z in range(self.min.z, self.max.z + 1):
                    yield Coordinate(x, y, z)


@dataclass
class Clipboard:
    """Region snapshot keyed by offset from the region's minimum corner."""

    cells: Dict[Coordinate, BlockState]
    size: Coordinate

    def __post_init__(self):
        for offset in self.cells:
            if not (
                0 <= offset.x < self.size.x
                and 0 <= offset.y < self.size.y
                and 0 <= offset.z < self.size.z
            ):
                raise ValueError(f"Clipboard offset {offset} outside size {self.size}")

    def __len__(self) -> int:
        return len(self.cells)

    def is_empty(self) -> bool:
        return not self.cells


@dataclass(frozen=True)
class Brush:
    """Sphere brush: radius, the content it paints and an optional mask of
    materials it may overwrite (None allows everything)."""

    radius: int
    content: BlockState
    mask: Optional[FrozenSet[str]] = field(default=None)

    def __post_init__(self):
        if self.radius < 1:
            raise ValueError(f"Brush radius must be at least 1, got {self.radius}")
        if self.mask is not None and not isinstance(self.mask, frozenset):
            object.__setattr__(self, "mask", frozenset(self.mask))

    def is_allowed(self, current: BlockState) -> bool:
        return self.mask is None or current.category in self.mask
