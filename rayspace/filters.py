"""rayspace/filters.py

Resampling and band-limiting filters applied to single images,
used when shifting and accumulating sub-aperture views.
"""

import numpy as np
from scipy import ndimage

from .utils import export


@export
def translate(image, dx, dy):
    """Move image content by (dx, dy) pixels using linear interpolation

    Parameters
    ----------
    image: image with 2 (gray) or 3 (color) dimensions, [y, x(, c)]
    dx: shift to the right, may be fractional
    dy: shift downwards, may be fractional

    Samples pulled from outside the image are zero.
    """
    # Diagram (o are source pixels, * the pixel pulled to the origin)
    # ---------------------------------------------------------------
    #         |___a1___               |
    #        s1d      :              s1u
    #  --[s0d-o-----------------------o--
    #    [    |       :               |
    #  a0[    |       :               |
    #    [ . .|. . . .* -shift        |
    #         |                       |
    #  ---s0u-o-----------------------o--
    #         |                       |
    if dx == 0 and dy == 0:
        return image
    shift = (-dy, -dx)

    if image.ndim == 3:
        no_color = False
    else:
        image = image[:, :, None]
        no_color = True
    n, m, c = image.shape

    a0 = shift[0] - np.floor(shift[0])
    a1 = shift[1] - np.floor(shift[1])

    s0d = int(np.floor(shift[0]))
    s0u = s0d + 1
    s1d = int(np.floor(shift[1]))
    s1u = s1d + 1

    # zero padding by max shift, always at least one pixel
    ms0 = max(abs(s0u), abs(s0d))
    ms1 = max(abs(s1u), abs(s1d))

    pI = np.zeros((n + ms0 * 2, m + ms1 * 2, c), dtype=image.dtype)
    pI[ms0:-ms0, ms1:-ms1, :] = image

    I1d2d = pI[ms0 + s0d : ms0 + s0d + n, ms1 + s1d : ms1 + s1d + m, :]
    I1u2d = pI[ms0 + s0u : ms0 + s0u + n, ms1 + s1d : ms1 + s1d + m, :]
    I1d2u = pI[ms0 + s0d : ms0 + s0d + n, ms1 + s1u : ms1 + s1u + m, :]
    I1u2u = pI[ms0 + s0u : ms0 + s0u + n, ms1 + s1u : ms1 + s1u + m, :]

    nI = (
        I1d2d * (1 - a0) * (1 - a1)
        + I1d2u * (1 - a0) * (a1)
        + I1u2d * (a0) * (1 - a1)
        + I1u2u * (a0) * (a1)
    )
    if no_color:
        nI = nI[..., 0]
    return nI


def lanczos(x, lobes=3):
    x = np.asarray(x, dtype=float)
    return np.sinc(x) * np.sinc(x / lobes) * (np.abs(x) < lobes)


def lanczos_kernel(radius, lobes=3):
    """Normalized Lanczos taps stretched so the main lobe spans `radius` pixels"""
    if radius <= 0:
        raise ValueError("Lanczos radius must be positive")
    n = int(np.ceil(lobes * radius))
    taps = lanczos(np.r_[-n : n + 1] / radius, lobes)
    return taps / taps.sum()


@export
def lanczos_blur(image, width, height, frames=0):
    """Separable Lanczos low-pass filter

    Parameters
    ----------
    image: [y, x(, c)] or a full [frame, y, x, c] image
    width, height: filter radius along x and y, 0 to skip that axis
    frames: filter radius across frames, only for 4D images
    """
    if image.ndim == 2:
        y_axis, x_axis = 0, 1
    else:
        y_axis, x_axis = image.ndim - 3, image.ndim - 2
    out = image
    for radius, axis in [(width, x_axis), (height, y_axis)]:
        if radius > 0:
            out = ndimage.convolve1d(
                out, lanczos_kernel(radius), axis=axis, mode="nearest"
            )
    if frames > 0:
        if image.ndim != 4:
            raise ValueError("Can only blur across frames of a 4D image")
        out = ndimage.convolve1d(out, lanczos_kernel(frames), axis=0, mode="nearest")
    return out
