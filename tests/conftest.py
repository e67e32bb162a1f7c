"""
Pytest configuration and shared fixtures for Voxel Editor tests.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from voxel_editor.config import EditorConfig
from voxel_editor.editor import EditingService
from voxel_editor.input_handler import Actor, CommandHandler
from voxel_editor.models import BlockState, Coordinate
from voxel_editor.world import ChunkedWorld

STONE = BlockState("stone")
DIRT = BlockState("dirt")
GLASS = BlockState("glass")


class FlakyWorld(ChunkedWorld):
    """ChunkedWorld that refuses writes after a set number of them."""

    def __init__(self, fail_after: int, **kwargs):
        super().__init__(**kwargs)
        self.fail_after = fail_after
        self.writes = 0
        self.armed = False

    def set_content(self, c, content):
        if self.armed:
            if self.writes >= self.fail_after:
                raise IOError("disk full")
            self.writes += 1
        super().set_content(c, content)


@pytest.fixture
def world():
    """Empty world, y in [0, 64)."""
    return ChunkedWorld(chunk_size=8, min_y=0, max_y=64)


@pytest.fixture
def stone_floor(world):
    """World with a 4x1x4 stone slab at y=0 and dirt on top at y=1."""
    for x in range(4):
        for z in range(4):
            world.set_content(Coordinate(x, 0, z), STONE)
            world.set_content(Coordinate(x, 1, z), DIRT)
    return world


@pytest.fixture
def config():
    return EditorConfig(undo_limit=5)


@pytest.fixture
def service(world, config):
    return EditingService(world, config)


@pytest.fixture
def handler(service):
    return CommandHandler(service)


@pytest.fixture
def actor():
    return Actor("alice", Coordinate(10, 5, 10))


def snapshot(world, coords):
    return {c: world.get_content(c) for c in coords}
