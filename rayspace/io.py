"""rayspace/io.py

basic image loading and saving
"""

import os

from PIL import Image, ImageSequence
import matplotlib.image as mpimg
import numpy as np
import scipy.io as sio

from .image import as_image, squeeze
from .utils import export

_SINGLE_FRAME = (".png", ".jpg", ".jpeg", ".bmp")


def _ext(img_path):
    return os.path.splitext(str(img_path))[1].lower()


@export
def load(img_path, *args, **kwargs):
    ext = _ext(img_path)
    if ext in (".tif", ".tiff"):
        return load_tiff(img_path)
    elif ext == ".mat":
        return load_mat(img_path)
    elif ext == ".npy":
        return np.load(img_path)
    # This is using Pillow under the hood
    return mpimg.imread(img_path, *args, **kwargs)


@export
def load_image(img_path):
    """Load an image as a [frame, y, x, c] float array in [0, 1]

    Every page of a tiff becomes one frame.
    """
    if _ext(img_path) in (".tif", ".tiff"):
        img = _tiff_pages(img_path)
        if img.ndim == 3:
            img = img[..., None]
    else:
        img = load(img_path)
    if isinstance(img, dict):
        raise ValueError(f"{img_path} holds more than one array")
    if np.issubdtype(img.dtype, np.integer):
        img = img / np.iinfo(img.dtype).max
    return as_image(img)


def _tiff_pages(img_path):
    img = Image.open(img_path)
    images = []
    for im in ImageSequence.Iterator(img):
        images.append(np.array(im))

    img_arr = np.array(images)
    img.close()
    return img_arr


def load_tiff(img_path):
    """
    img_path - Path to the multipage-tiff file
    """
    img_arr = _tiff_pages(img_path)
    try:
        return img_arr.squeeze(axis=0)
    except ValueError:
        return img_arr


def load_mat(mat_path):
    data = sio.loadmat(mat_path)
    data.pop("__header__", None)
    data.pop("__version__", None)
    data.pop("__globals__", None)
    keys = list(data.keys())
    if len(keys) == 1:
        return data[keys[0]]
    else:
        return data


def _to_pil(frame):
    frame = squeeze(as_image(frame))
    if np.issubdtype(frame.dtype, np.floating):
        frame = np.round(np.clip(frame, 0, 1) * 255)
    frame = frame.astype(np.uint8)
    if frame.ndim == 3 and frame.shape[-1] not in (3, 4):
        raise ValueError(f"Cannot save a {frame.shape[-1]} channel image")
    return Image.fromarray(frame)


@export
def save(img, img_path):
    """Save a [frame, y, x, c] image, the format chosen by extension.

    .npy and .mat keep the array as is, .tif stores one page per frame
    and the 8 bit formats take a single frame clipped to [0, 1].
    Single channel floating point tiffs keep full precision, color
    tiffs are stored as 8 bit RGB(A) pages.
    """
    ext = _ext(img_path)
    img = np.asarray(img)
    if ext == ".npy":
        np.save(img_path, img)
    elif ext == ".mat":
        sio.savemat(img_path, {"image": img})
    elif ext in (".tif", ".tiff"):
        img = as_image(img)
        if np.issubdtype(img.dtype, np.floating) and img.shape[-1] == 1:
            pages = [Image.fromarray(f.astype(np.float32)) for f in img[..., 0]]
        else:
            pages = [_to_pil(f) for f in img]
        pages[0].save(img_path, save_all=True, append_images=pages[1:])
    elif ext in _SINGLE_FRAME:
        img = as_image(img)
        if img.shape[0] != 1:
            raise ValueError(
                f"{ext} holds a single frame, got {img.shape[0]}; use .tif or .npy"
            )
        _to_pil(img).save(img_path)
    else:
        raise ValueError(f"Unrecognized image format {ext}")


def check_format(img_path, frames=1, channels=1):
    """Raise before any processing if `img_path` cannot hold an image
    of `frames` frames with `channels` channels"""
    ext = _ext(img_path)
    if ext not in _SINGLE_FRAME + (".npy", ".mat", ".tif", ".tiff"):
        raise ValueError(f"Unrecognized image format {ext}")
    if frames > 1 and ext in _SINGLE_FRAME:
        raise ValueError(
            f"{ext} holds a single frame, got {frames}; use .tif or .npy"
        )
    if ext not in (".npy", ".mat") and channels not in (1, 3, 4):
        raise ValueError(f"{ext} cannot hold {channels} channels; use .npy")
