# edit_session.py
"""
The host-world side of copy/paste.

A clipboard only needs two calls from the world it is copied from or pasted
into:

    get_block(x, y, z) -> int
    set_block(x, y, z, block_id)

Anything providing those works (a live server connection, a level editor...).
MemoryEditSession is a bounded in-memory world backed by a numpy array, handy
for scripting and for tests.
"""

from typing import Protocol

import numpy as np

from point3d import Point3D


class BlockSource(Protocol):
    def get_block(self, x: int, y: int, z: int) -> int: ...


class BlockSink(Protocol):
    def set_block(self, x: int, y: int, z: int, block_id: int) -> None: ...


class WorldError(Exception):
    """Raised by a world when it refuses a read or a write."""


class WorldBoundsError(WorldError):
    def __init__(self, x, y, z):
        self.position = Point3D(x, y, z)
        super().__init__(f"Block ({x}, {y}, {z}) is outside the world")


class MemoryEditSession:
    def __init__(self, min_point: Point3D, max_point: Point3D):
        self.min_point = min_point
        self.max_point = max_point
        shape = tuple(hi - lo + 1 for lo, hi in zip(min_point, max_point))
        self.blocks = np.zeros(shape, dtype=np.int32)  # indexed [x, y, z] relative to min_point
        self.blocks_changed = 0

    def _local(self, x, y, z):
        lo, hi = self.min_point, self.max_point
        if not (lo.x <= x <= hi.x and lo.y <= y <= hi.y and lo.z <= z <= hi.z):
            raise WorldBoundsError(x, y, z)
        return x - lo.x, y - lo.y, z - lo.z

    def get_block(self, x: int, y: int, z: int) -> int:
        return int(self.blocks[self._local(x, y, z)])

    def set_block(self, x: int, y: int, z: int, block_id: int) -> None:
        self.blocks[self._local(x, y, z)] = block_id
        self.blocks_changed += 1
