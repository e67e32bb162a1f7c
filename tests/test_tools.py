"""
Tests for the fill, replace, clipboard and sphere builders.
"""

import math

import pytest
from conftest import DIRT, GLASS, STONE, snapshot
from voxel_editor.models import AIR, BlockState, Brush, Coordinate, Region
from voxel_editor import tools


def region(a, b):
    return Region.from_corners(Coordinate(*a), Coordinate(*b))


class TestFill:
    def test_fill_covers_region(self, world):
        op = tools.build_fill(world, region((0, 0, 0), (1, 1, 1)), STONE)
        assert len(op) == 8
        assert all(v == AIR for v in op.before.values())
        assert all(v == STONE for v in op.after.values())

    def test_builder_does_not_write(self, world):
        tools.build_fill(world, region((0, 0, 0), (1, 1, 1)), STONE)
        assert world.count_non_default() == 0

    def test_mask_filters_current_content(self, stone_floor):
        op = tools.build_fill(
            stone_floor, region((0, 0, 0), (3, 3, 3)), GLASS, frozenset({"dirt"})
        )
        assert len(op) == 16
        assert all(c.y == 1 for c in op.coordinates)

    def test_fill_clipped_to_vertical_bounds(self, world):
        op = tools.build_fill(world, region((0, -5, 0), (0, 70, 0)), STONE)
        assert len(op) == 64
        op.apply()


class TestReplace:
    def test_only_matching_cells(self, stone_floor):
        op = tools.build_replace(stone_floor, region((0, 0, 0), (3, 5, 3)), STONE, GLASS)
        assert len(op) == 16
        assert all(v == STONE for v in op.before.values())

    def test_pattern_properties(self, world):
        north = BlockState("oak_stairs", (("facing", "north"),))
        south = BlockState("oak_stairs", (("facing", "south"),))
        world.set_content(Coordinate(0, 0, 0), north)
        world.set_content(Coordinate(1, 0, 0), south)
        area = region((0, 0, 0), (1, 0, 0))

        assert len(tools.build_replace(world, area, BlockState("oak_stairs"), STONE)) == 2
        only_north = tools.build_replace(world, area, north, STONE)
        assert only_north.coordinates == [Coordinate(0, 0, 0)]

    def test_no_matches_gives_empty_operation(self, stone_floor):
        op = tools.build_replace(stone_floor, region((0, 0, 0), (3, 1, 3)), GLASS, DIRT)
        assert not op


class TestClipboard:
    def test_copy_keys_are_offsets_from_min(self, stone_floor):
        clipboard = tools.copy_region(stone_floor, region((3, 1, 3), (2, 0, 2)))
        assert clipboard.size == Coordinate(2, 2, 2)
        assert set(clipboard.cells) == {
            Coordinate(x, y, z) for x in range(2) for y in range(2) for z in range(2)
        }
        assert clipboard.cells[Coordinate(0, 0, 0)] == STONE
        assert clipboard.cells[Coordinate(1, 1, 1)] == DIRT

    def test_paste_at_min_reproduces_region(self, stone_floor):
        area = region((0, 0, 0), (3, 2, 3))
        original = snapshot(stone_floor, list(area))
        clipboard = tools.copy_region(stone_floor, area)

        tools.build_fill(stone_floor, area, GLASS).apply()
        tools.build_paste(stone_floor, clipboard, area.min).apply()
        assert snapshot(stone_floor, list(area)) == original

    def test_paste_elsewhere_transposes(self, stone_floor):
        clipboard = tools.copy_region(stone_floor, region((0, 0, 0), (1, 1, 0)))
        anchor = Coordinate(20, 10, -20)
        op = tools.build_paste(stone_floor, clipboard, anchor)
        op.apply()

        assert stone_floor.get_content(Coordinate(20, 10, -20)) == STONE
        assert stone_floor.get_content(Coordinate(21, 11, -20)) == DIRT
        assert len(op) == 4

    def test_paste_overwrites_unconditionally(self, stone_floor):
        clipboard = tools.copy_region(stone_floor, region((10, 0, 10), (11, 1, 11)))
        op = tools.build_paste(stone_floor, clipboard, Coordinate(0, 0, 0))
        op.apply()
        assert stone_floor.get_content(Coordinate(0, 0, 0)) == AIR
        assert stone_floor.get_content(Coordinate(1, 1, 1)) == AIR

    def test_paste_skips_cells_above_world(self, world):
        clipboard = tools.copy_region(world, region((0, 0, 0), (0, 3, 0)))
        op = tools.build_paste(world, clipboard, Coordinate(0, 62, 0))
        assert {c.y for c in op.coordinates} == {62, 63}


class TestSphere:
    def test_radius_one_is_cube_without_corners(self):
        offsets = set(tools.sphere_offsets(1))
        assert len(offsets) == 19
        # Edge cells sit at sqrt(2) < 1.5, corners at sqrt(3) > 1.5
        assert Coordinate(1, 1, 0) in offsets
        assert Coordinate(0, -1, 1) in offsets
        corners = {
            Coordinate(dx, dy, dz) for dx in (-1, 1) for dy in (-1, 1) for dz in (-1, 1)
        }
        assert offsets.isdisjoint(corners)

    @pytest.mark.parametrize("radius", [1, 2, 3, 5])
    def test_offsets_match_distance_rule(self, radius):
        expected = {
            Coordinate(dx, dy, dz)
            for dx in range(-radius, radius + 1)
            for dy in range(-radius, radius + 1)
            for dz in range(-radius, radius + 1)
            if math.sqrt(dx * dx + dy * dy + dz * dz) <= radius + 0.5
        }
        assert set(tools.sphere_offsets(radius)) == expected

    def test_invalid_radius(self):
        with pytest.raises(ValueError):
            tools.sphere_offsets(0)

    def test_brush_at_centre(self, world):
        brush = Brush(1, GLASS)
        op = tools.build_sphere(world, brush, Coordinate(5, 10, 5))
        assert len(op) == 19
        assert Coordinate(5, 11, 5) in op.after
        assert Coordinate(6, 11, 5) in op.after
        assert Coordinate(6, 11, 6) not in op.after

    def test_brush_skips_cells_outside_vertical_bounds(self, world):
        op = tools.build_sphere(world, Brush(2, GLASS), Coordinate(0, 0, 0))
        assert all(c.y >= 0 for c in op.coordinates)
        assert len(op) < len(tools.sphere_offsets(2))

    def test_brush_mask(self, stone_floor):
        brush = Brush(3, GLASS, frozenset({"dirt"}))
        op = tools.build_sphere(stone_floor, brush, Coordinate(1, 1, 1))
        assert op
        assert all(v == DIRT for v in op.before.values())

    def test_fully_masked_brush_is_empty(self, world):
        brush = Brush(2, GLASS, frozenset({"stone"}))
        assert not tools.build_sphere(world, brush, Coordinate(5, 10, 5))
