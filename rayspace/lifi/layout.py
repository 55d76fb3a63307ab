"""rayspace/lifi/layout.py

Reshaping between the [v, u, y, x(, c)] view stack and 2D mosaics of it.
"""


def draw_subaperture_matrix(lf):
    """Tile the sub-aperture views next to each other"""
    v, u, y, x = 0, 1, 2, 3
    Nv, Nu, Ny, Nx = lf.shape[:4]
    rest = list(range(4, lf.ndim))
    return lf.transpose([v, y, u, x, *rest]).reshape(
        Nv * Ny, Nu * Nx, *lf.shape[4:]
    )


def draw_lenselet_image(lf):
    """Interleave the views into a lenslet raster,
    each lenslet a contiguous Nu x Nv block"""
    v, u, y, x = 0, 1, 2, 3
    Nv, Nu, Ny, Nx = lf.shape[:4]
    rest = list(range(4, lf.ndim))
    return lf.transpose([y, v, x, u, *rest]).reshape(
        Nv * Ny, Nu * Nx, *lf.shape[4:]
    )


def extreme_views(lf):
    return lf[[0, -1], [0, -1]]
