from itertools import product

import numpy as np
import pytest

from rayspace.lifi import LightField, identity_map, warp_lf

# n - 1 is a power of two on every axis so lattice coordinates
# survive normalization exactly
nX, nY, nU, nV, nC = 5, 3, 3, 5, 3


def random_lf(seed=0):
    image = np.random.default_rng(seed).random((1, nY * nV, nX * nU, nC))
    return LightField(image, nU, nV)


def lattice_map(shape, seed=1):
    rng = np.random.default_rng(seed)
    warper = np.zeros(shape + (4,))
    for i, n in enumerate((nX, nY, nU, nV)):
        warper[..., i] = rng.integers(0, n, size=shape) / (n - 1)
    return warper


def test_index_image_must_have_four_channels():
    lf = random_lf()
    with pytest.raises(ValueError):
        warp_lf(lf, np.zeros((1, 4, 4, 3)))
    with pytest.raises(ValueError):
        warp_lf(lf, np.zeros((1, 4, 4, 3)), quick=True)


@pytest.mark.parametrize("quick", [False, True])
def test_output_geometry(quick):
    lf = random_lf()
    out = warp_lf(lf, lattice_map((2, 6, 7)), quick=quick)
    assert out.shape == (2, 6, 7, nC)


def test_3d_index_image_is_promoted():
    lf = random_lf()
    out = warp_lf(lf, lattice_map((6, 7)))
    assert out.shape == (1, 6, 7, nC)


def test_quick_and_continuous_agree_on_lattice():
    lf = random_lf()
    warper = lattice_map((2, 8, 9))
    assert (warp_lf(lf, warper) == warp_lf(lf, warper, quick=True)).all()


def test_lattice_samples_are_exact():
    lf = random_lf()
    warper = lattice_map((1, 4, 4))
    out = warp_lf(lf, warper)
    for i, j in product(range(4), range(4)):
        s, t, u, v = warper[0, i, j]
        idx = (
            round(s * (nX - 1)),
            round(t * (nY - 1)),
            round(u * (nU - 1)),
            round(v * (nV - 1)),
        )
        assert (out[0, i, j] == lf[idx]).all()


def test_identity_map_reproduces_lenslet_image():
    lf = random_lf()
    warper = identity_map(nX, nY, nU, nV)
    assert warper.shape == (1, nY * nV, nX * nU, 4)
    assert (warp_lf(lf, warper, quick=True) == lf.image).all()
    assert np.allclose(warp_lf(lf, warper), lf.image)


def test_continuous_mode_interpolates():
    lf = random_lf()
    warper = np.zeros((1, 1, 1, 4))
    warper[..., 0] = 0.5 / (nX - 1)  # halfway between x = 0 and x = 1
    out = warp_lf(lf, warper)
    assert np.allclose(out[0, 0, 0], (lf[0, 0, 0, 0] + lf[1, 0, 0, 0]) / 2)


def test_quick_mode_rounds_half_up():
    lf = random_lf()
    warper = np.zeros((1, 1, 2, 4))
    warper[0, 0, 0, 0] = 1.5 / (nX - 1)
    warper[0, 0, 1, 0] = 1.49 / (nX - 1)
    out = warp_lf(lf, warper, quick=True)
    assert (out[0, 0, 0] == lf[2, 0, 0, 0]).all()
    assert (out[0, 0, 1] == lf[1, 0, 0, 0]).all()


@pytest.mark.parametrize("quick", [False, True])
def test_out_of_range_indices_clamp(quick):
    lf = random_lf()
    warper = np.full((1, 1, 2, 4), 0.5)
    warper[0, 0, 0] = [-0.5, -2, -1, -0.3]
    warper[0, 0, 1] = [1.7, 3, 1.2, 2]
    out = warp_lf(lf, warper, quick=quick)
    assert np.allclose(out[0, 0, 0], lf[0, 0, 0, 0])
    assert np.allclose(out[0, 0, 1], lf[nX - 1, nY - 1, nU - 1, nV - 1])
