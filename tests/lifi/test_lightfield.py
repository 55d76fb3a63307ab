from itertools import product

import numpy as np
import pytest

from rayspace.lifi import LightField

nX, nY, nU, nV, nC = 5, 4, 3, 2, 2


def random_lf(seed=0):
    image = np.random.default_rng(seed).random((1, nY * nV, nX * nU, nC))
    return image, LightField(image, nU, nV)


def test_geometry():
    _, lf = random_lf()
    assert lf.shape == (nX, nY, nU, nV, nC)
    assert (lf.nX, lf.nY, lf.nU, lf.nV, lf.nC) == (nX, nY, nU, nV, nC)


def test_lenslet_addressing():
    image, lf = random_lf()
    for x, y, u, v, c in product(*[range(n) for n in lf.shape]):
        assert lf.at(x, y, u, v, c) == image[0, y * nV + v, x * nU + u, c]


def test_writes_are_shared_with_image():
    image, lf = random_lf()
    lf[2, 1, 0, 1] = 7
    assert (image[0, 1 * nV + 1, 2 * nU + 0] == 7).all()
    image[0, 0, 1, 1] = -3
    assert lf[0, 0, 1, 0, 1] == -3


def test_2d_image_is_wrapped_without_copy():
    img = np.zeros((nY * nV, nX * nU))
    lf = LightField(img, nU, nV)
    assert lf.nC == 1
    lf[1, 1, 1, 1, 0] = 1
    assert img[1 * nV + 1, 1 * nU + 1] == 1
    assert img.sum() == 1


def test_view_is_subaperture_image():
    image, lf = random_lf()
    for u, v in product(range(nU), range(nV)):
        assert (lf.view(u, v) == image[0, v::nV, u::nU]).all()
        assert lf.view(u, v).shape == (nY, nX, nC)


def test_views_matrix_form():
    _, lf = random_lf()
    views = lf.views()
    assert views.shape == (nV, nU, nY, nX, nC)
    for u, v in product(range(nU), range(nV)):
        assert (views[v, u] == lf.view(u, v)).all()


def test_from_views_round_trip():
    image, lf = random_lf()
    lf2 = LightField.from_views(lf.views())
    assert lf2.shape == lf.shape
    assert (lf2.image == image).all()
    gray = LightField.from_views(np.ones((nV, nU, nY, nX)))
    assert gray.shape == (nX, nY, nU, nV, 1)


def test_multi_frame_image_is_rejected():
    with pytest.raises(ValueError):
        LightField(np.zeros((2, nY * nV, nX * nU, 1)), nU, nV)


@pytest.mark.parametrize("lenslet", [(2, 2), (4, 2), (0, 2), (3, -1)])
def test_lenslets_must_tile_the_image(lenslet):
    with pytest.raises(ValueError):
        LightField(np.zeros((1, 8, 15, 1)), *lenslet)


def test_strided_image_is_wrapped_without_copy():
    base = np.zeros((1, nY * nV, 2 * nX * nU, 1))
    lf = LightField(base[:, :, ::2], nU, nV)
    lf[1, 0, 2, 1] = 5
    assert base[0, 1, 2 * (1 * nU + 2), 0] == 5


@pytest.mark.parametrize(
    "index",
    [
        (-1, 0, 0, 0, 0),
        (nX, 0, 0, 0, 0),
        (0, nY, 0, 0, 0),
        (0, 0, 0, nV, 0),
        (0, 0, 0, 0, nC),
    ],
)
def test_out_of_range_access_fails(index):
    _, lf = random_lf()
    with pytest.raises(IndexError):
        lf.at(*index)
    with pytest.raises(IndexError):
        lf[index] = 1


def test_sample_lattice_identity():
    image, lf = random_lf()
    for x, y, u, v in product(range(nX), range(nY), range(nU), range(nV)):
        res = lf.sample4D(float(x), float(y), float(u), float(v))
        assert (res == image[0, y * nV + v, x * nU + u]).all()


@pytest.mark.parametrize("axis", [0, 1, 2, 3])
def test_sample_midpoint_is_mean(axis):
    _, lf = random_lf(seed=axis)
    a = [1, 1, 0, 0]
    b = list(a)
    b[axis] += 1
    mid = list(a)
    mid[axis] += 0.5
    expected = (lf[tuple(a)] + lf[tuple(b)]) / 2
    assert np.allclose(lf.sample4D(*mid), expected)


def test_sample_is_linear_along_axis():
    _, lf = random_lf()
    res = lf.sample4D(1.25, 2, 1, 0)
    assert np.allclose(res, 0.75 * lf[1, 2, 1, 0] + 0.25 * lf[2, 2, 1, 0])


@pytest.mark.parametrize("axis", [0, 1, 2, 3])
def test_sample_clamps_to_edges(axis):
    _, lf = random_lf()
    n = lf.shape[axis]
    base = [1.5, 1.5, 0.5, 0.5]

    low = list(base)
    low[axis] = -2.5
    edge = list(base)
    edge[axis] = 0
    assert np.allclose(lf.sample4D(*low), lf.sample4D(*edge))

    high = list(base)
    high[axis] = n - 1 + 3.7
    edge[axis] = n - 1
    assert np.allclose(lf.sample4D(*high), lf.sample4D(*edge))


def test_sample_into_buffer():
    _, lf = random_lf()
    out = np.empty(nC)
    res = lf.sample4D(0.3, 1.2, 0.7, 0.1, out=out)
    assert res is out
    assert np.allclose(out, lf.sample4D(0.3, 1.2, 0.7, 0.1))


def test_sample_vectorized():
    _, lf = random_lf()
    x = np.array([[0.0, 1.5], [3.2, 4.0]])
    y = np.array([[0.0, 2.5], [1.0, 3.0]])
    res = lf.sample4D(x, y, 1.5, 0.25)
    assert res.shape == (2, 2, nC)
    for i, j in product(range(2), range(2)):
        assert np.allclose(res[i, j], lf.sample4D(x[i, j], y[i, j], 1.5, 0.25))
