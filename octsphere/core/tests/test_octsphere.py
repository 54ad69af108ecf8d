import warnings

import numpy as np
import numpy.testing as npt
import pytest

import octsphere.core.octsphere as octsphere_module
from octsphere.core.geometry import signed_volume
from octsphere.core.octsphere import (Mesh, base_octahedron, octsphere,
                                      octsphere_mesh, resolve_radius)
from octsphere.testing import assert_inward_winding, assert_on_sphere

OCTAHEDRON_VERTICES = [(0, 0, 1), (0, 1, 0), (0, -1, 0), (1, 0, 0),
                       (-1, 0, 0), (0, 0, -1)]
OCTAHEDRON_FACES = [(0, 1, 3), (0, 3, 2), (0, 2, 4), (0, 4, 1),
                    (5, 3, 1), (5, 2, 3), (5, 4, 2), (5, 1, 4)]


def test_base_octahedron_literals():
    vertices, faces = base_octahedron()
    npt.assert_array_equal(vertices, OCTAHEDRON_VERTICES)
    npt.assert_array_equal(faces, OCTAHEDRON_FACES)

    vertices, faces = base_octahedron(hemisphere=True)
    npt.assert_array_equal(vertices, OCTAHEDRON_VERTICES[:5])
    npt.assert_array_equal(faces, OCTAHEDRON_FACES[:4])


def test_base_octahedron_is_a_fresh_copy():
    vertices, faces = base_octahedron()
    vertices[0] = 99
    faces[0] = 0
    vertices, faces = base_octahedron()
    npt.assert_array_equal(vertices[0], [0, 0, 1])
    npt.assert_array_equal(faces[0], [0, 1, 3])


def test_octahedron_when_resolution_snaps_to_level_zero():
    mesh = octsphere(r=1, hemisphere=False, fn=4)
    npt.assert_equal(isinstance(mesh, Mesh), True)
    vertices, faces = mesh
    npt.assert_array_equal(vertices, OCTAHEDRON_VERTICES)
    npt.assert_equal(faces, OCTAHEDRON_FACES)
    for face in faces:
        npt.assert_equal(all(type(i) is int for i in face), True)


def test_sphere_counts():
    for levels in range(5):
        vertices, faces = octsphere_mesh(levels=levels)
        npt.assert_equal(len(faces), 8 * 4 ** levels)
        expected = 6 if levels == 0 else 6 * 8 * 4 ** (levels - 1)
        npt.assert_equal(len(vertices), expected)
        npt.assert_equal(all(len(face) == 3 for face in faces), True)


def test_hemisphere_counts():
    for levels in range(5):
        vertices, faces = octsphere_mesh(hemisphere=True, levels=levels)
        nlv = 4 * 2 ** levels
        refined = 5 if levels == 0 else 6 * 4 * 4 ** (levels - 1)
        npt.assert_equal(len(vertices), refined + nlv + 1)
        npt.assert_equal(len(faces), 4 * 4 ** levels + 1)
        npt.assert_equal(all(len(face) == 3 for face in faces[:-1]), True)

        closing = faces[-1]
        npt.assert_equal(len(closing), nlv)
        npt.assert_equal(len(set(closing)), nlv)
        npt.assert_array_equal(vertices[list(closing), 2], 0)
        # only the upper half is built
        npt.assert_equal((vertices[:, 2] >= 0).all(), True)


def test_unit_sphere_and_winding():
    for levels in range(5):
        vertices, faces = octsphere_mesh(levels=levels)
        assert_on_sphere(vertices)
        assert_inward_winding(vertices, faces)
        npt.assert_equal(signed_volume(vertices, faces) < 0, True)

        vertices, faces = octsphere_mesh(hemisphere=True, levels=levels)
        assert_on_sphere(vertices)
        assert_inward_winding(vertices, faces[:-1])


def test_scale_linearity():
    for hemisphere in (False, True):
        for levels in range(4):
            unit = octsphere_mesh(1., hemisphere=hemisphere, levels=levels)
            big = octsphere_mesh(2.5, hemisphere=hemisphere, levels=levels)
            npt.assert_array_almost_equal(big.vertices, 2.5 * unit.vertices)
            npt.assert_equal(big.faces, unit.faces)
            assert_on_sphere(big.vertices, radius=2.5)


def test_resolution_hint_selects_level():
    npt.assert_equal(len(octsphere_mesh(fn=10).faces), 8 * 4)
    npt.assert_equal(len(octsphere_mesh(fn=12).faces), 8 * 16)
    npt.assert_equal(len(octsphere_mesh(fn=30).faces), 8 * 64)
    # explicit levels win over fn
    npt.assert_equal(len(octsphere_mesh(fn=30, levels=1).faces), 8 * 4)
    # without a hint the radius decides: 5 fragments for a unit sphere
    npt.assert_equal(len(octsphere_mesh(1.).faces), 8)
    npt.assert_equal(len(octsphere_mesh(10.).faces), 8 * 64)


def test_shared_edges_mesh():
    vertices, faces = octsphere_mesh(levels=2, shared_edges=True)
    npt.assert_equal(len(vertices), 66)
    npt.assert_equal(len(faces), 128)
    assert_on_sphere(vertices)

    vertices, faces = octsphere_mesh(hemisphere=True, levels=2,
                                     shared_edges=True)
    npt.assert_equal(len(faces), 65)
    npt.assert_array_equal(vertices[list(faces[-1]), 2], 0)


def test_resolve_radius():
    npt.assert_equal(resolve_radius(), 1)
    npt.assert_equal(resolve_radius(r=3), 3)
    npt.assert_equal(resolve_radius(d=3), 1.5)
    npt.assert_equal(resolve_radius(r=2, d=10), 2)
    npt.assert_equal(resolve_radius(r=0, d=10), 5)
    npt.assert_equal(resolve_radius(r=-1, d=-1), 1)


def test_octsphere_radius_and_diameter():
    vertices, _ = octsphere(d=4, fn=4)
    assert_on_sphere(vertices, radius=2)
    vertices, _ = octsphere(r=3, d=4, fn=4)
    assert_on_sphere(vertices, radius=3)
    vertices, _ = octsphere(fn=4)
    assert_on_sphere(vertices, radius=1)


def test_octsphere_resolution_settings():
    # radius 10: 30 fragments from fa=12, giving a 32-sided equator
    _, faces = octsphere(r=10)
    npt.assert_equal(len(faces), 8 * 4 ** 3)
    _, faces = octsphere(r=10, fa=45)
    npt.assert_equal(len(faces), 8 * 4)
    _, faces = octsphere(r=10, fn=16)
    npt.assert_equal(len(faces), 8 * 4 ** 2)
    _, faces = octsphere(r=10, hemisphere=True, fn=8)
    npt.assert_equal(len(faces), 4 * 4 + 1)
    npt.assert_equal(len(faces[-1]), 8)


def test_octsphere_mesh_bad_arguments():
    npt.assert_raises(ValueError, octsphere_mesh, 0.)
    npt.assert_raises(ValueError, octsphere_mesh, -1.)
    npt.assert_raises(ValueError, octsphere_mesh, np.inf)
    npt.assert_raises(ValueError, octsphere_mesh, np.nan)
    npt.assert_raises(ValueError, octsphere_mesh, 1., fn=0)
    npt.assert_raises(ValueError, octsphere_mesh, 1., fn=np.nan)
    npt.assert_raises(ValueError, octsphere_mesh, 1., levels=-1)
    npt.assert_raises(ValueError, octsphere_mesh, 1., levels=1.5)
    npt.assert_raises(ValueError, octsphere_mesh, 1., levels=True)
    npt.assert_raises(ValueError, octsphere, r=1, fa=0)


def test_large_levels_warn(monkeypatch):
    monkeypatch.setattr(octsphere_module, "MAX_RECOMMENDED_LEVELS", 1)
    with pytest.warns(UserWarning, match="2 subdivision levels produce 128 "):
        octsphere_mesh(levels=2)
    with pytest.warns(UserWarning, match="2 subdivision levels produce 64 "):
        octsphere_mesh(hemisphere=True, levels=2)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        octsphere_mesh(levels=1)


def test_independent_calls_do_not_share_state():
    first = octsphere_mesh(levels=1)
    first.vertices[:] = 0
    first.faces.clear()
    second = octsphere_mesh(levels=1)
    assert_on_sphere(second.vertices)
    npt.assert_equal(len(second.faces), 32)
