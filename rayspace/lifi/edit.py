"""rayspace/lifi/edit.py

In-place edits of a light field.
"""

from ..image import full_intensity
from ..utils import export


@export
def splat_point(lf, px, py, pz):
    """Color a single 3D point white in every sub-aperture view.

    px, py are in [0, 1] at the focal plane and pz is disparity, so
    pz = 0 puts the point on the focal plane where every view sees it
    at the same pixel. Views that see the point off-image are left
    untouched. Returns `lf`, which is modified in place.
    """
    white = full_intensity(lf.dtype)
    for v in range(lf.nV):
        for u in range(lf.nU):
            pu = u + 0.5 - lf.nU * 0.5
            pv = v + 0.5 - lf.nV * 0.5
            # figure out the correct x y
            x = int((px + pz * pu) * lf.nX + 0.5)
            y = int((py + pz * pv) * lf.nY + 0.5)
            if x < 0 or x >= lf.nX or y < 0 or y >= lf.nY:
                continue
            lf[x, y, u, v] = white
    return lf


@export
def splat_points(lf, points):
    for px, py, pz in points:
        splat_point(lf, px, py, pz)
    return lf
