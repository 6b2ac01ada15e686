# renderer/tone_mapping.py
import numpy as np
from numba import njit


def encode_srgb(linear):
    """
    Applies the sRGB transfer function to linear values in [0, 1].
    """
    linear = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    return np.where(linear <= 0.0031308,
                    linear * 12.92,
                    1.055 * np.power(linear, 1.0 / 2.4) - 0.055)


def decode_srgb(encoded):
    """
    Inverse of encode_srgb: sRGB-encoded values in [0, 1] back to linear.
    """
    encoded = np.clip(np.asarray(encoded, dtype=np.float64), 0.0, 1.0)
    return np.where(encoded <= 0.04045,
                    encoded / 12.92,
                    np.power((encoded + 0.055) / 1.055, 2.4))


@njit(cache=True)
def quantize_kernel(encoded_image, output_image):
    height, width, channels = encoded_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = encoded_image[y, x, c]
                # NaN fails both comparisons and ends up black.
                if not v > 0.0:
                    v = 0.0
                elif v > 1.0:
                    v = 1.0
                output_image[y, x, c] = int(v * 255.0 + 0.5)


def quantize(image: np.ndarray, gamma: bool = True) -> np.ndarray:
    """
    Converts a linear float image (H, W, 3) into 8-bit samples, clamping to
    [0, 1] and optionally sRGB-encoding first.
    """
    image = np.ascontiguousarray(image, dtype=np.float64)
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {image.shape}")
    if gamma:
        image = encode_srgb(image)
    output = np.empty(image.shape, dtype=np.uint8)
    quantize_kernel(image, output)
    return output


def dequantize(data: np.ndarray, gamma: bool = True) -> np.ndarray:
    """
    Converts 8-bit samples back to linear floats, undoing quantize().
    """
    encoded = np.asarray(data, dtype=np.float64) / 255.0
    if gamma:
        return decode_srgb(encoded).astype(np.float32)
    return encoded.astype(np.float32)


def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0):
    """
    Apply Reinhard tone mapping to a linear radiance image, compressing
    unbounded values into [0, 1). The result stays linear.
    """
    scaled = np.maximum(np.asarray(accumulated, dtype=np.float32), 0.0) * exposure
    return scaled / (1.0 + scaled / white_point)


TONE_MAPPERS = {
    "none": lambda image: image,
    "reinhard": reinhard_tone_mapping,
}
