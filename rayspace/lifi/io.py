from glob import glob
import os

import numpy as np

from .. import config
from ..io import load_image
from .lightfield import LightField


def get_lf_directories():
    dirs = glob(
        os.path.join(config.DATABANK, "lightfield/**/config.toml"), recursive=True
    )
    res = {}
    for d in dirs:
        dlist = d.split(os.sep)
        res[dlist[-2]] = os.sep.join(dlist[:-1])
    return res


def load_views(lf_directory, ext, v=None, u=None, prefix=""):
    """Load a directory of sub-aperture images, sorted by name in
    row-major view order, as a [v, u, y, x, c] array"""
    # find the image names
    fnames = glob(os.path.join(lf_directory, f"{prefix}*{ext}"))
    if len(fnames) == 0:
        raise ValueError(f"No images found matching {prefix}*{ext} at {lf_directory}")
    fnames.sort()

    # load all of the image into memory
    lf = []
    for filename in fnames:
        lf.append(load_image(filename)[0])
    lf = np.array(lf)

    # determine proper v,u reshape
    num = lf.shape[0]
    if v is None and u is None:
        u = int(np.sqrt(num))
        v = u
    elif v is not None:
        u = num // v
    else:
        v = num // u
    if u * v != num:
        raise ValueError(f"Cannot arrange {num} views as a {v}x{u} grid")
    lf = lf.reshape([v, u, *lf.shape[1:]])
    return lf


def load(lf_directory, ext=".png", v=None, u=None, prefix=""):
    """Load a directory of sub-aperture images as a LightField"""
    return LightField.from_views(load_views(lf_directory, ext, v, u, prefix))
