# renderer/output.py
import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from rt_one.renderer import ppm
from rt_one.renderer.tone_mapping import TONE_MAPPERS, quantize

logger = logging.getLogger(__name__)


def to_bytes(image: np.ndarray, gamma: bool = True, tone_map: str = "none") -> np.ndarray:
    """
    Converts a linear HDR image (H, W, 3) into displayable 8-bit samples.
    """
    if tone_map not in TONE_MAPPERS:
        raise ValueError(f"Unknown tone mapping {tone_map!r}, expected one of {sorted(TONE_MAPPERS)}")
    return quantize(TONE_MAPPERS[tone_map](image), gamma=gamma)


def save_image(image: np.ndarray, path: Union[str, Path], gamma: bool = True,
               tone_map: str = "none") -> Path:
    """
    Saves a linear image. .ppm files use the plain-text PPM writer; any other
    extension is handed to Pillow.
    """
    path = Path(path)
    data = to_bytes(image, gamma=gamma, tone_map=tone_map)
    if path.suffix.lower() == ".ppm":
        ppm.write_path(data.shape[0], data, path)
    else:
        Image.fromarray(data).save(path)
    logger.info(f"Wrote {data.shape[1]}x{data.shape[0]} image to {path}")
    return path


def load_image(path: Union[str, Path]) -> np.ndarray:
    """
    Loads an 8-bit RGB image as an (H, W, 3) uint8 array.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")
    if path.suffix.lower() == ".ppm":
        with open(path, encoding="ascii") as f:
            return ppm.read(f)
    with Image.open(path) as img:
        if img.mode != "RGB":
            img = img.convert("RGB")
        return np.asarray(img, dtype=np.uint8)
