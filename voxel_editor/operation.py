"""
Reversible edits for the Voxel Editor.

An Operation is a before/after snapshot over a set of cells. apply() writes
the after values, revert() writes the before values. Both are plain replay
passes, so calling either twice leaves the world unchanged the second time.
"""

from typing import Dict, List, TYPE_CHECKING

from .models import BlockState, Coordinate

if TYPE_CHECKING:
    from .world import World


class PartialApplyError(RuntimeError):
    """A world write failed partway through a replay pass.

    The cells written before the failure have already been put back to what
    they held when the pass started; `restored` says how many of them the
    world accepted.
    """

    def __init__(self, written: int, restored: int, total: int, cause: Exception):
        super().__init__(
            f"World write failed after {written}/{total} cells "
            f"({restored} rolled back): {cause}"
        )
        self.written = written
        self.restored = restored
        self.total = total
        self.cause = cause


class Operation:
    def __init__(
        self,
        world: "World",
        before: Dict[Coordinate, BlockState],
        after: Dict[Coordinate, BlockState],
    ):
        if before.keys() != after.keys():
            raise ValueError("Operation before/after snapshots cover different cells")
        self.world = world
        self.before = dict(before)
        self.after = dict(after)

    def __len__(self) -> int:
        return len(self.after)

    def __bool__(self) -> bool:
        return bool(self.after)

    def __repr__(self) -> str:
        return f"<Operation cells={len(self)}>"

    @property
    def coordinates(self) -> List[Coordinate]:
        return list(self.after)

    def apply(self):
        """Write the new contents."""
        self._replay(self.after)

    def revert(self):
        """Restore the original contents."""
        self._replay(self.before)

    def _replay(self, target: Dict[Coordinate, BlockState]):
        prior: Dict[Coordinate, BlockState] = {}
        for coord, content in target.items():
            try:
                current = self.world.get_content(coord)
                self.world.set_content(coord, content)
            except Exception as e:
                restored = self._rollback(prior)
                raise PartialApplyError(len(prior), restored, len(target), e) from e
            prior[coord] = current

    def _rollback(self, prior: Dict[Coordinate, BlockState]) -> int:
        restored = 0
        for coord in reversed(list(prior)):
            try:
                self.world.set_content(coord, prior[coord])
            except Exception:
                # The world already failed once; keep restoring what it accepts
                continue
            restored += 1
        return restored
