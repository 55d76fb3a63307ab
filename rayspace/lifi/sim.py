"""rayspace/lifi/sim.py

Simulate light fields of flat textured objects floating at
different disparities.

A continuous light field is a function lf(v, u, y, x) of angular offset
from the aperture center (v, u) and pixel position (y, x). An object at
disparity d moves d pixels per unit of angular offset.
"""

import numpy as np

from .lightfield import LightField


def continuous_disk(R=5):
    return lambda y, x: 1.0 * (x ** 2 + y ** 2 < R ** 2)


def continuous_rectangle(w=10, h=10):
    return lambda y, x: (np.abs(x) < w / 2) * (np.abs(y) < h / 2) * 1.0


def continuous_checkerboard(period=4):
    return lambda y, x: (
        (np.floor(x / period) + np.floor(y / period)) % 2 == 0
    ) * 1.0


def generate_continuous_lightfield(obj_list):
    """obj_list holds (disparity, cy, cx, obj) tuples ordered front to back,
    obj being a function of (y, x) that is zero outside the object.
    Objects earlier in the list occlude later ones."""

    def contLF(v, u, y, x):
        return 0.0

    def window(v, u, y, x):
        return 1.0

    for d, cy, cx, obj in obj_list:

        def objLF(v, u, y, x, d=d, cy=cy, cx=cx, obj=obj):
            return obj(y - d * v - cy, x - d * u - cx)

        def occ_objLF(v, u, y, x, objLF=objLF, window=window):
            return objLF(v, u, y, x) * window(v, u, y, x)

        def window(v, u, y, x, window=window, occ_objLF=occ_objLF):
            return window(v, u, y, x) * (occ_objLF(v, u, y, x) == 0)

        def contLF(v, u, y, x, contLF=contLF, occ_objLF=occ_objLF):
            return contLF(v, u, y, x) + occ_objLF(v, u, y, x)

    return contLF


def discretize(clf, nV, nU, nY, nX):
    """Sample a continuous light field on a grid centered in every axis,
    returning views in [v, u, y, x] form"""
    v = np.r_[:nV] - (nV - 1) / 2
    u = np.r_[:nU] - (nU - 1) / 2
    y = np.r_[:nY] - (nY - 1) / 2
    x = np.r_[:nX] - (nX - 1) / 2
    # simulate ndgrid with meshgrid
    V, U, Y, X = np.meshgrid(v, u, y, x, indexing="ij")
    lf = clf(V, U, Y, X) * np.ones(V.shape)
    return np.ascontiguousarray(lf)


def plane_lf(obj, disparity, nX, nY, nU, nV):
    """LightField of a single object covering the field of view"""
    clf = generate_continuous_lightfield([(disparity, 0, 0, obj)])
    return LightField.from_views(discretize(clf, nV, nU, nY, nX))
