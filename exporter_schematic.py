# exporter_schematic.py
import os
from logging import getLogger

import numpy as np
import nbtlib
from nbtlib import Compound, List
from nbtlib.tag import Short, String, ByteArray

from schematic_errors import GeometryError

log = getLogger(__name__)

MAX_EXTENT = 32767  # Width/Height/Length are TAG_Short


def blocks_layout(data):
    """
    Flatten a (W, H, L) [x, y, z] array into schematic order:
    index = y * W * L + z * W + x  (Y slowest, X fastest).
    """
    return data.transpose(1, 2, 0).ravel()


def _to_bytes(flat):
    # Only the low 8 bits survive; -128..-1 and 128..255 map to the same byte.
    lossy = int(np.count_nonzero((flat < -128) | (flat > 255)))
    if lossy:
        log.warning("%s block ids do not fit in a byte and were truncated", lossy)
    return (flat & 0xFF).astype(np.uint8).view(np.int8)


def build_schematic(clipboard):
    """
    Build the legacy MCEdit/WorldEdit .schematic tag tree for a clipboard.
    Note the naming: Length is the z extent and Height the y extent.
    """
    W, H, L = clipboard.size
    for name, extent in (("Width", W), ("Height", H), ("Length", L)):
        if extent > MAX_EXTENT:
            raise GeometryError(f"{name} {extent} does not fit in a schematic (max {MAX_EXTENT})")

    blocks = _to_bytes(blocks_layout(clipboard.data))
    data = np.zeros(W * H * L, dtype=np.int8)  # block data values are not kept

    root = Compound({
        "Width":  Short(W),
        "Length": Short(L),
        "Height": Short(H),
        "Materials": String("Alpha"),
        "Blocks": ByteArray(blocks),
        "Data":   ByteArray(data),
        "Entities": List[Compound]([]),
        "TileEntities": List[Compound]([]),
    })
    return nbtlib.File(root, root_name="Schematic")


def write_schematic(clipboard, fileobj):
    """Write the named root tag to an open binary stream (uncompressed)."""
    build_schematic(clipboard).write(fileobj)


def save_schematic(clipboard, path, gzipped=True):
    """
    Write legacy MCEdit .schematic
    """
    path = os.path.abspath(os.path.expanduser(path))
    os.makedirs(os.path.dirname(path), exist_ok=True)

    schematic = build_schematic(clipboard)
    schematic.save(path, gzipped=gzipped)
    log.debug("Saved %s x %s x %s schematic to %s", *clipboard.size, path)
    return path, os.path.getsize(path)
