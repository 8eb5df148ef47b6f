"""Pytest configuration and fixtures for clipboard and schematic tests."""

import pytest

from clipboard import RegionClipboard
from edit_session import MemoryEditSession
from point3d import Point3D


class RecordingSink:
    """Block sink that remembers every write in order."""

    def __init__(self):
        self.writes = []

    def set_block(self, x, y, z, block_id):
        self.writes.append(((x, y, z), block_id))


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def cube_ids():
    """Ids of the 2x2x2 cube keyed by (x, y, z)."""
    return {
        (0, 0, 0): 1, (1, 0, 0): 2, (0, 1, 0): 3, (1, 1, 0): 4,
        (0, 0, 1): 5, (1, 0, 1): 6, (0, 1, 1): 7, (1, 1, 1): 8,
    }


@pytest.fixture
def cube_clipboard(cube_ids):
    """2x2x2 clipboard at min=(0,0,0), max=(1,1,1), origin=(0,0,0) copied from a world."""
    world = MemoryEditSession(Point3D(0, 0, 0), Point3D(1, 1, 1))
    for (x, y, z), block_id in cube_ids.items():
        world.set_block(x, y, z, block_id)
    clipboard = RegionClipboard(Point3D(0, 0, 0), Point3D(1, 1, 1), Point3D(0, 0, 0))
    clipboard.copy(world)
    return clipboard


@pytest.fixture
def stone_shell():
    """
    3x3x3 stone cube (id 1) with an air block in the center, copied from
    world box (5, 64, -3)..(7, 66, -1) with the player standing at (6, 63, -5).
    """
    world = MemoryEditSession(Point3D(0, 60, -10), Point3D(10, 70, 0))
    for x in range(5, 8):
        for y in range(64, 67):
            for z in range(-3, 0):
                world.set_block(x, y, z, 1)
    world.set_block(6, 65, -2, 0)
    clipboard = RegionClipboard(Point3D(5, 64, -3), Point3D(7, 66, -1), Point3D(6, 63, -5))
    clipboard.copy(world)
    return clipboard
