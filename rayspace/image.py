"""rayspace/image.py

Image buffers are plain numpy arrays laid out as
im[frame, y, x, channel]
so a single gray image of size (h, w) is stored as (1, h, w, 1).
Frame-wise arithmetic is just numpy arithmetic on im[t].
"""

import numpy as np

from .utils import export


@export
def as_image(img):
    """Promote a 2D (h, w) or 3D (h, w, c) array to (1, h, w, c).

    The promoted array is a view of the input, so writes through it
    land in the caller's array.
    """
    img = np.asarray(img)
    if img.ndim == 2:
        return img[None, :, :, None]
    elif img.ndim == 3:
        return img[None]
    elif img.ndim == 4:
        return img
    raise ValueError(f"Cannot interpret an array with {img.ndim} dims as an image")


@export
def new_image(frames, width, height, channels, dtype=np.float32):
    return np.zeros((frames, height, width, channels), dtype=dtype)


def float_dtype(dtype):
    """Smallest floating dtype that holds values of `dtype`"""
    return np.result_type(dtype, np.float32)


def full_intensity(dtype):
    if np.issubdtype(dtype, np.integer):
        return np.iinfo(dtype).max
    return 1


def squeeze(img):
    """Drop the singleton frame and channel axes, for display and saving"""
    if img.shape[0] == 1:
        img = img[0]
    if img.shape[-1] == 1:
        img = img[..., 0]
    return img
