# importer_schematic.py
"""
Read a legacy MCEdit/WorldEdit .schematic back into a RegionClipboard.

Checks run in a fixed order and stop at the first problem:
    root tag "Schematic" -> Blocks present -> Width/Length/Height are Shorts
    -> Materials == "Alpha" -> Blocks is a ByteArray
followed by sanity checks on the sizes. Data, Entities and TileEntities are
only type-checked; their contents are dropped.
"""

import gzip
import os
import zlib
from logging import getLogger

import numpy as np
import nbtlib
from nbtlib import List
from nbtlib.tag import Short, String, ByteArray

from clipboard import RegionClipboard
from point3d import Point3D
from schematic_errors import (
    MissingRootError,
    MissingTagError,
    RootTagError,
    SchematicFormatError,
    TagTypeError,
    UnsupportedMaterialsError,
)

log = getLogger(__name__)


class StrictReader:
    """
    File wrapper for nbtlib parsing. nbtlib reads a short stream as zeros,
    so read(n) here raises EOFError unless it gets all n bytes.
    """

    chunk_size = 1 << 16  # lengths come from the file, never read them in one go

    def __init__(self, fileobj):
        self.fileobj = fileobj
        self.bytes_read = 0

    def read(self, size):
        if size < 0:
            raise ValueError(f"negative length {size} at offset {self.bytes_read}")
        chunks = []
        remaining = size
        while remaining:
            chunk = self.fileobj.read(min(remaining, self.chunk_size))
            if not chunk:
                raise EOFError(
                    f"needed {size} bytes at offset {self.bytes_read}, "
                    f"got {size - remaining}"
                )
            chunks.append(chunk)
            remaining -= len(chunk)
            self.bytes_read += len(chunk)
        return b"".join(chunks)


def parse_schematic(fileobj):
    """
    Parse one named root compound from a seekable binary stream, gzipped or not.
    Returns an nbtlib.File carrying the root name.
    """
    magic_number = fileobj.read(2)
    fileobj.seek(0)
    if magic_number == b"\x1f\x8b":
        with gzip.GzipFile(fileobj=fileobj) as unzipped:
            schematic = _parse_root(unzipped)
            try:
                unzipped.read()  # reaching the end checks the gzip trailer
            except (EOFError, zlib.error, gzip.BadGzipFile) as exc:
                raise SchematicFormatError(f"Schematic file is truncated or corrupt: {exc}") from exc
            return schematic
    return _parse_root(fileobj)


def _parse_root(fileobj):
    reader = StrictReader(fileobj)
    try:
        return nbtlib.File.parse(reader)
    except EOFError as exc:
        if reader.bytes_read == 0:
            raise MissingRootError() from exc
        raise SchematicFormatError(f"Schematic file is truncated or corrupt: {exc}") from exc
    except (TypeError, KeyError) as exc:
        if reader.bytes_read == 1:  # only the root tag id was read
            raise RootTagError(None, tag_type=str(exc)) from exc
        raise SchematicFormatError(f"Schematic file is truncated or corrupt: {exc}") from exc
    except (ValueError, zlib.error, gzip.BadGzipFile) as exc:
        raise SchematicFormatError(f"Schematic file is truncated or corrupt: {exc}") from exc


def _child(schematic, key, expected):
    if key not in schematic:
        raise MissingTagError(key)
    tag = schematic[key]
    if not isinstance(tag, expected):
        raise TagTypeError(key, expected.__name__, type(tag).__name__)
    return tag


def read_schematic(fileobj, origin: Point3D, clipboard_type=RegionClipboard):
    """
    Build a clipboard_type instance from a .schematic stream. The clipboard's
    min corner and origin are both `origin`.
    """
    schematic = parse_schematic(fileobj)
    if schematic.root_name != "Schematic":
        raise RootTagError(schematic.root_name)

    if "Blocks" not in schematic:
        raise MissingTagError("Blocks")

    W = int(_child(schematic, "Width", Short))
    L = int(_child(schematic, "Length", Short))
    H = int(_child(schematic, "Height", Short))

    materials = schematic.get("Materials")
    if not isinstance(materials, String) or str(materials) != "Alpha":
        raise UnsupportedMaterialsError(str(materials) if isinstance(materials, String) else None)

    blocks = _child(schematic, "Blocks", ByteArray)

    if W <= 0 or H <= 0 or L <= 0:
        raise SchematicFormatError(f"Schematic has an empty size {W} x {H} x {L}")
    volume = W * H * L
    if len(blocks) < volume:
        raise SchematicFormatError(
            f"Blocks holds {len(blocks)} entries but {W} x {H} x {L} needs {volume}"
        )
    if len(blocks) > volume:
        log.debug("Ignoring %s trailing Blocks entries", len(blocks) - volume)

    if "Data" in schematic:
        _child(schematic, "Data", ByteArray)
    for key in ("Entities", "TileEntities"):
        if key in schematic:
            _child(schematic, key, List)

    clipboard = clipboard_type(origin, origin + (W - 1, H - 1, L - 1), origin)

    # flat index y * W * L + z * W + x, bytes are signed
    flat = np.asarray(blocks, dtype=np.int8)[:volume].astype(np.int32)
    clipboard.data[...] = flat.reshape(H, L, W).transpose(2, 0, 1)
    return clipboard


def load_schematic(path, origin: Point3D, clipboard_type=RegionClipboard):
    path = os.path.abspath(os.path.expanduser(path))
    log.debug("Loading schematic %s at %s", path, tuple(origin))
    with open(path, "rb") as fileobj:
        return read_schematic(fileobj, origin, clipboard_type)
