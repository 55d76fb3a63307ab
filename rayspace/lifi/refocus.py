"""rayspace/lifi/refocus.py

Shift-and-add refocusing of a lenslet light field into a focal stack.

alpha is the slope in line space, i.e. how many pixels a view moves per
unit of angular offset from the center of the aperture. alpha = 0 keeps
the native focal plane.
"""

import logging

import numpy as np

from ..filters import lanczos_blur, translate
from ..image import float_dtype, new_image
from ..utils import export


@export
def alpha_range(min_alpha, max_alpha, delta_alpha):
    """The refocus slopes in [min_alpha, max_alpha], stepped by delta_alpha.

    The slopes come from one accumulating single precision counter so the
    upper endpoint is included exactly when the running sum lands on it.
    """
    if not delta_alpha > 0:
        raise ValueError(f"delta_alpha must be positive, got {delta_alpha}")
    if min_alpha > max_alpha:
        raise ValueError(f"Empty alpha range [{min_alpha}, {max_alpha}]")
    alphas = []
    alpha = np.float32(min_alpha)
    while alpha <= np.float32(max_alpha):
        alphas.append(float(alpha))
        alpha = np.float32(alpha + np.float32(delta_alpha))
    return alphas


def _refocus_frame(lf, alpha):
    nU, nV = lf.nU, lf.nV
    frame = np.zeros((lf.nY, lf.nX, lf.nC), dtype=float_dtype(lf.dtype))
    for v in range(nV):
        for u in range(nU):
            view = lf.view(u, v).astype(frame.dtype)
            if alpha * u != 0 or alpha * v != 0:
                view = translate(
                    view, (u - (nU - 1) * 0.5) * alpha, (v - (nV - 1) * 0.5) * alpha
                )
            if abs(alpha) > 1:
                view = lanczos_blur(view, abs(alpha), abs(alpha), 0)
            frame += view
    frame /= nU * nV
    return frame


@export
def refocus(lf, alpha):
    """A single refocused image [y, x, c] at slope alpha"""
    return _refocus_frame(lf, alpha)


@export
def focal_stack(lf, min_alpha, max_alpha, delta_alpha, map_func=map):
    """Turn a light field into a focal stack.

    Parameters
    ----------
    lf: LightField
    min_alpha, max_alpha, delta_alpha: refocus slopes, see alpha_range
    map_func: map-like callable used to compute the frames, e.g.
        ThreadPoolExecutor().map to build frames concurrently

    Returns
    -------
    [alpha, y, x, c] image, each frame the average of all shifted
    (and, for |alpha| > 1, band-limited) sub-aperture views
    """
    if lf.image.shape[0] != 1:
        raise ValueError("Can only turn a single light field into a focal stack")
    alphas = alpha_range(min_alpha, max_alpha, delta_alpha)
    out = new_image(len(alphas), lf.nX, lf.nY, lf.nC, dtype=float_dtype(lf.dtype))

    def compute(args):
        t, alpha = args
        logging.info(f"computing frame {t + 1} of {len(alphas)} (alpha={alpha:g})")
        out[t] = _refocus_frame(lf, alpha)

    for _ in map_func(compute, enumerate(alphas)):
        pass
    return out
