"""rayspace/lifi/__init__.py

This package contains code specific to working with
light field data.

A captured light field arrives as a lenslet image, a single-frame
[frame, y, x, c] image where each spatial sample is a contiguous
block of nU x nV angular samples. LightField wraps such an image
and addresses it functionally as lf[x, y, u, v, c].

Stacks of sub-aperture views use the matrix style row-major form
lf[v, u, y, x, c]
where u is the horizontal view index and x is the horizontal image index (v,y similarly).
Note this is the functional form (lf[x,y,u,v]) transposed.

this package uses gantry-style axis directions:
X increases to the right
Y increases down
U increases as the perspective shifts right
V increases as the perspective shifts down
"""
from . import edit, io, layout, lightfield, refocus, sim, warp
from .edit import splat_point, splat_points
from .lightfield import LightField
from .refocus import alpha_range, focal_stack, refocus as refocus_image
from .warp import identity_map, warp as warp_lf
