# clipboard.py
"""
A copied cuboid of blocks.

The clipboard remembers the world box it was taken from (min_point..max_point,
both inclusive) and an origin, usually where the player stood when copying.
Pasting keeps the box's position relative to that origin, so pasting at the
same origin puts every block back where it came from.

    data[x, y, z]  ->  world (min.x + x, min.y + y, min.z + z)
"""

from logging import getLogger

import numpy as np

from point3d import Point3D
from schematic_errors import GeometryError

log = getLogger(__name__)


class RegionClipboard:
    def __init__(self, min_point: Point3D, max_point: Point3D, origin: Point3D):
        for axis, lo, hi in zip("xyz", min_point, max_point):
            if lo > hi:
                raise GeometryError(
                    f"Clipboard minimum {axis}={lo} is above maximum {axis}={hi}"
                )
        self.min_point = min_point
        self.max_point = max_point
        self.origin = origin
        self.data = np.zeros(self.size, dtype=np.int32)

    def __repr__(self):
        return (f"RegionClipboard(min={tuple(self.min_point)}, max={tuple(self.max_point)}, "
                f"origin={tuple(self.origin)})")

    @property
    def width(self):
        """X extent."""
        return self.max_point.x - self.min_point.x + 1

    @property
    def height(self):
        """Y extent."""
        return self.max_point.y - self.min_point.y + 1

    @property
    def length(self):
        """Z extent."""
        return self.max_point.z - self.min_point.z + 1

    @property
    def size(self):
        return self.width, self.height, self.length

    @property
    def volume(self):
        return self.width * self.height * self.length

    def copy(self, source):
        """
        Read every block of the box from source (anything with get_block(x, y, z)).
        Errors from the source propagate and leave the clipboard partly filled.
        """
        lo, hi = self.min_point, self.max_point
        log.debug("Copying %s blocks from %s..%s", self.volume, tuple(lo), tuple(hi))
        for x in range(lo.x, hi.x + 1):
            for y in range(lo.y, hi.y + 1):
                for z in range(lo.z, hi.z + 1):
                    self.data[x - lo.x, y - lo.y, z - lo.z] = source.get_block(x, y, z)

    def paste(self, sink, new_origin: Point3D, no_air=False):
        """
        Write the clipboard into sink (anything with set_block(x, y, z, id)),
        re-anchored so that the old origin lands on new_origin.

        With no_air, cells holding 0 are skipped and the world keeps what it had there.
        """
        W, H, L = self.size
        offset = self.min_point - self.origin + new_origin
        log.debug("Pasting %s blocks at offset %s (no_air=%s)", self.volume, tuple(offset), no_air)

        for x in range(W):
            for y in range(H):
                for z in range(L):
                    block_id = int(self.data[x, y, z])
                    if no_air and block_id == 0:
                        continue
                    sink.set_block(x + offset.x, y + offset.y, z + offset.z, block_id)

    def save_schematic(self, path, gzipped=True):
        from exporter_schematic import save_schematic
        return save_schematic(self, path, gzipped=gzipped)

    @classmethod
    def load_schematic(cls, path, origin: Point3D):
        from importer_schematic import load_schematic
        return load_schematic(path, origin, clipboard_type=cls)
