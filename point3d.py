# point3d.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Point3D:
    """Integer block position, also used as a relative offset."""
    x: int
    y: int
    z: int

    def __add__(self, other):
        x, y, z = other
        return Point3D(self.x + x, self.y + y, self.z + z)

    def __sub__(self, other):
        x, y, z = other
        return Point3D(self.x - x, self.y - y, self.z - z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))
