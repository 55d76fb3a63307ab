"""rayspace/lifi/warp.py

Resample a light field through a per-pixel index map.

The index map is an image with 4 channels holding normalized
(s, t, u, v) coordinates in [0, 1], s and t spatial, u and v angular.
"""

import numpy as np

from ..image import as_image, float_dtype
from ..utils import export


@export
def warp(lf, warper, quick=False):
    """Sample `lf` at every (s, t, u, v) of `warper`.

    Parameters
    ----------
    lf: LightField to sample from
    warper: [frame, y, x, 4] index image (2D/3D arrays are promoted)
    quick: use nearest neighbor lookups instead of quadrilinear sampling

    Returns
    -------
    [frame, y, x, nC] image with the frames, height and width of `warper`
    """
    warper = as_image(warper)
    if warper.shape[-1] != 4:
        raise ValueError(
            f"Index image for warp must have 4 channels, got {warper.shape[-1]}"
        )
    lx = warper[..., 0] * (lf.nX - 1)
    ly = warper[..., 1] * (lf.nY - 1)
    lu = warper[..., 2] * (lf.nU - 1)
    lv = warper[..., 3] * (lf.nV - 1)

    out = np.empty(warper.shape[:3] + (lf.nC,), dtype=float_dtype(lf.dtype))
    if not quick:
        out[...] = lf.sample4D(lx, ly, lu, lv)
    else:
        idx = tuple(
            np.clip((c + 0.5).astype(int), 0, n - 1)
            for c, n in zip((lx, ly, lu, lv), lf.shape[:4])
        )
        out[...] = lf[idx]
    return out


@export
def identity_map(nX, nY, nU, nV, frames=1):
    """Index image that reproduces the lenslet raster of an
    (nX, nY, nU, nV) light field under `warp`"""
    width, height = nX * nU, nY * nV
    cols = np.r_[:width]
    rows = np.r_[:height]
    out = np.zeros((frames, height, width, 4))
    out[..., 0] = (cols // nU) / max(nX - 1, 1)
    out[..., 1] = ((rows // nV) / max(nY - 1, 1))[:, None]
    out[..., 2] = (cols % nU) / max(nU - 1, 1)
    out[..., 3] = ((rows % nV) / max(nV - 1, 1))[:, None]
    return out
