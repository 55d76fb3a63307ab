"""rayspace/lifi/lightfield.py

A 4D ray-space view over a lenslet image.

The lenslet image is a macro-pixel raster: every spatial sample (x, y)
is a contiguous block of nU x nV angular samples, and the blocks tile
the image row-major. Ray (x, y, u, v, c) therefore lives at raster
column x * nU + u, row y * nV + v.
"""

import itertools
import numbers

import numpy as np

from ..image import as_image
from ..utils import export
from .layout import draw_lenselet_image


@export
class LightField(object):
    """A light field that borrows its pixels from a single-frame image.

    Nothing is copied: lf[x, y, u, v, c] and the image's
    im[0, y * nV + v, x * nU + u, c] are the same memory, so edits
    through either show up in the other.

    Parameters
    ----------
    image: [frame, y, x, c] image with exactly one frame,
        or a 2D/3D array that is promoted to one
    nU, nV: lenslet width and height in pixels
    """

    def __init__(self, image, nU, nV):
        super(LightField, self).__init__()
        image = as_image(image)
        if image.shape[0] != 1:
            raise ValueError(
                f"A light field must wrap a single frame, got {image.shape[0]} frames"
            )
        nU, nV = int(nU), int(nV)
        if nU < 1 or nV < 1:
            raise ValueError(f"Lenslet size must be positive, got {nU}x{nV}")
        _, height, width, nC = image.shape
        if width % nU or height % nV:
            raise ValueError(
                f"Image of size {width}x{height} is not tiled by {nU}x{nV} lenslets"
            )
        self.image = image
        self.nU = nU
        self.nV = nV
        self.nX = width // nU
        self.nY = height // nV
        self.nC = nC

        # splitting axes never copies, so this stays a view
        blocks = image[0].reshape(self.nY, nV, self.nX, nU, nC)
        self._blocks = blocks  # [y, v, x, u, c]
        self._rays = blocks.transpose(2, 0, 3, 1, 4)  # [x, y, u, v, c]

    @classmethod
    def from_views(cls, views):
        """Build a lenslet image from a [v, u, y, x(, c)] stack of views"""
        views = np.asarray(views)
        if views.ndim == 4:
            views = views[..., None]
        elif views.ndim != 5:
            raise ValueError(
                f"Expected views of shape [v, u, y, x(, c)], got {views.shape}"
            )
        nV, nU = views.shape[:2]
        raster = np.ascontiguousarray(draw_lenselet_image(views))
        return cls(raster, nU, nV)

    @property
    def shape(self):
        return (self.nX, self.nY, self.nU, self.nV, self.nC)

    @property
    def dtype(self):
        return self.image.dtype

    def _check_index(self, key):
        if not isinstance(key, tuple):
            key = (key,)
        for k, n, name in zip(key, self.shape, "xyuvc"):
            if isinstance(k, numbers.Integral) and not 0 <= k < n:
                raise IndexError(f"{name}={k} is outside [0, {n})")

    def __getitem__(self, key):
        self._check_index(key)
        return self._rays[key]

    def __setitem__(self, key, value):
        self._check_index(key)
        self._rays[key] = value

    def at(self, x, y, u, v, c):
        return self[x, y, u, v, c]

    def view(self, u, v):
        """The sub-aperture view at (u, v) as a [y, x, c] view"""
        self._check_index((0, 0, u, v))
        return self._blocks[:, v, :, u, :]

    def views(self):
        """All sub-aperture views as a [v, u, y, x, c] view"""
        return self._blocks.transpose(1, 3, 0, 2, 4)

    def sample4D(self, x, y, u, v, out=None):
        """Quadrilinear interpolation at a continuous 4D position.

        Every axis is clamped to [0, n - 1] independently before the
        16 lattice corners around the position are blended, so positions
        past the edge return the edge value.

        Parameters
        ----------
        x, y, u, v: scalars, or arrays that broadcast together
        out: optional buffer that receives the nC channel values

        Returns
        -------
        array of shape (*broadcast(x, y, u, v).shape, nC)
        """
        coords = np.broadcast_arrays(
            *[np.asarray(c, dtype=float) for c in (x, y, u, v)]
        )
        lo, hi, frac = [], [], []
        for c, n in zip(coords, self.shape[:4]):
            c = np.clip(c, 0, n - 1)
            i0 = np.floor(c).astype(int)
            lo.append(i0)
            hi.append(np.minimum(i0 + 1, n - 1))
            frac.append(c - i0)

        res = np.zeros(coords[0].shape + (self.nC,))
        for corner in itertools.product((0, 1), repeat=4):
            idx = tuple(h if b else l for b, l, h in zip(corner, lo, hi))
            weight = np.asarray(
                np.prod([f if b else 1 - f for b, f in zip(corner, frac)], axis=0)
            )
            res += weight[..., None] * self._rays[idx]

        if out is not None:
            out[...] = res
            return out
        return res

    def __repr__(self):
        return (
            f"LightField(nX={self.nX}, nY={self.nY}, nU={self.nU}, "
            f"nV={self.nV}, nC={self.nC}, dtype={self.dtype})"
        )
