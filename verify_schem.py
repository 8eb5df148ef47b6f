# verify_schem.py
# Check that a legacy .schematic loads as a clipboard and report what it holds.
import argparse
import logging
import os

import numpy as np

from importer_schematic import load_schematic
from point3d import Point3D
from schematic_errors import SchematicFormatError


def summarize(clipboard):
    W, H, L = clipboard.size
    filled = int(np.count_nonzero(clipboard.data))
    ids = np.unique(clipboard.data)
    return {
        "size": (W, H, L),
        "volume": clipboard.volume,
        "filled": filled,
        "block_ids": [int(i) for i in ids if i != 0],
        "min": tuple(clipboard.min_point),
        "max": tuple(clipboard.max_point),
    }


def main(argv=None):
    ap = argparse.ArgumentParser(description="Verify a legacy Alpha .schematic file.")
    ap.add_argument("path", help="Path to the .schematic file")
    ap.add_argument("--origin", type=int, nargs=3, default=(0, 0, 0), metavar=("X", "Y", "Z"),
                    help="World position the schematic would be pasted at")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    path = os.path.abspath(args.path)
    print("CHECKING:", path)

    try:
        clipboard = load_schematic(path, Point3D(*args.origin))
    except SchematicFormatError as exc:
        raise SystemExit(f"Not a usable schematic: {exc}")

    info = summarize(clipboard)
    W, H, L = info["size"]
    print(f"Dimensions: {W} x {H} x {L}  (volume: {info['volume']})")
    print(f"Filled blocks (non-air): {info['filled']} / {info['volume']}")
    print(f"Block ids: {info['block_ids']}")
    print(f"World box at origin {tuple(args.origin)}: {info['min']} .. {info['max']}")
    return info


if __name__ == "__main__":
    main()
