# renderer/ppm.py
import logging
from pathlib import Path
from typing import TextIO, Union

import numpy as np

logger = logging.getLogger(__name__)


def write(rows: int, data, stream: TextIO):
    """
    Writes row-major RGB 8-bit samples as a plain-text (P3) PPM image.

    data is any flat sequence of bytes (or an (H, W, 3) uint8 array) whose
    length is exactly rows * cols * 3.
    """
    data = np.asarray(data, dtype=np.uint8).reshape(-1)
    if rows < 1:
        raise ValueError(f"rows must be at least 1, got {rows}")
    num_bytes = data.size
    cols = num_bytes // rows // 3
    if cols * rows * 3 != num_bytes or cols == 0:
        raise ValueError(f"{num_bytes} bytes do not split into {rows} rows of RGB pixels")

    stream.write("P3\n")
    stream.write(f"{cols} {rows}\n")
    stream.write("255\n")

    for index, row in enumerate(data.reshape(rows, cols * 3)):
        logger.debug(f"writing row {index + 1}/{rows}")
        stream.write("".join(f"{r} {g} {b} " for r, g, b in row.reshape(cols, 3)))
        stream.write("\n")


def write_path(rows: int, data, path: Union[str, Path]):
    """
    Writes a P3 PPM image to path.
    """
    with open(path, "w", encoding="ascii", newline="\n") as f:
        write(rows, data, f)


def read(stream: TextIO) -> np.ndarray:
    """
    Reads a P3 PPM image written by write() back into an (H, W, 3) uint8 array.
    """
    tokens = []
    for line in stream:
        tokens.extend(line.split("#", 1)[0].split())
    if not tokens or tokens[0] != "P3":
        raise ValueError("Not a plain-text (P3) PPM image")
    cols, rows, max_value = (int(t) for t in tokens[1:4])
    if max_value != 255:
        raise ValueError(f"Unsupported max value {max_value}")
    values = np.array([int(t) for t in tokens[4:]], dtype=np.uint8)
    if values.size != rows * cols * 3:
        raise ValueError(f"Expected {rows * cols * 3} samples, found {values.size}")
    return values.reshape(rows, cols, 3)
