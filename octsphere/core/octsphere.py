"""Sphere and hemisphere meshes from a recursively subdivided octahedron.

The unit octahedron is refined until its equator is the regular polygon that
best matches the requested circle resolution, then scaled to the requested
radius. Subdividing an octahedron, rather than sampling longitude and
latitude, avoids crowding vertices around the poles.

Faces are wound clockwise when seen from outside the solid, the convention
of polyhedron renderers; with the right-hand rule their normals point inward
and :func:`octsphere.core.geometry.signed_volume` of a full sphere is
negative.
"""

from collections import namedtuple
import logging
import warnings

import numpy as np

from octsphere.core.hemisphere import cap_hemisphere
from octsphere.core.resolution import (DEFAULT_FA, DEFAULT_FS, DEFAULT_FN,
                                       get_fragments_from_r,
                                       subdivision_level)
from octsphere.core.subdivide import refine

logger = logging.getLogger(__name__)

__all__ = ['Mesh', 'base_octahedron', 'octsphere', 'octsphere_mesh',
           'resolve_radius']

Mesh = namedtuple('Mesh', ['vertices', 'faces'])
Mesh.__doc__ = """Vertices and faces of a polyhedron.

vertices : (N, 3) ndarray
    Point coordinates; a face refers to a point by its row index.
faces : list of tuple of int
    Triangles, plus for hemispheres one closing polygon.
"""

# Beyond this many passes the face count runs into the millions
MAX_RECOMMENDED_LEVELS = 8

OCTAHEDRON_VERTICES = np.array(
    [[0.0, 0.0, 1.0],    # 0 north pole
     [0.0, 1.0, 0.0],    # 1
     [0.0, -1.0, 0.0],   # 2
     [1.0, 0.0, 0.0],    # 3
     [-1.0, 0.0, 0.0],   # 4
     [0.0, 0.0, -1.0]])  # 5 south pole
OCTAHEDRON_FACES = np.array(
    [[0, 1, 3],
     [0, 3, 2],
     [0, 2, 4],
     [0, 4, 1],
     [5, 3, 1],
     [5, 2, 3],
     [5, 4, 2],
     [5, 1, 4]])
OCTAHEDRON_VERTICES.flags.writeable = False
OCTAHEDRON_FACES.flags.writeable = False


def base_octahedron(hemisphere=False):
    """Unit octahedron, or its upper half, as fresh arrays.

    Parameters
    ----------
    hemisphere : bool, optional
        Drop the south pole and the four faces around it.

    Returns
    -------
    vertices : (6, 3) or (5, 3) ndarray
    faces : (8, 3) or (4, 3) ndarray

    """
    if hemisphere:
        return OCTAHEDRON_VERTICES[:5].copy(), OCTAHEDRON_FACES[:4].copy()
    return OCTAHEDRON_VERTICES.copy(), OCTAHEDRON_FACES.copy()


def resolve_radius(r=None, d=None):
    """Radius from an optional radius and an optional diameter.

    A positive `r` wins, otherwise half of a positive `d` is used, otherwise
    the radius is 1.
    """
    if r is not None and r > 0:
        return r
    if d is not None and d > 0:
        return d / 2.
    return 1.


def _check_positive(name, value):
    if not np.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive finite number, "
                         f"got {value!r}")


def octsphere_mesh(radius=1., hemisphere=False, fn=None, levels=None,
                   shared_edges=False):
    """Mesh of a sphere or upper hemisphere of the given radius.

    Parameters
    ----------
    radius : float, optional
        Sphere radius.
    hemisphere : bool, optional
        Build only the half with ``z >= 0``, closed by a flat face.
    fn : float, optional
        Desired number of sides of the equator. The subdivision level is the
        one whose ``4 * 2**levels`` sides come closest. If neither `fn` nor
        `levels` is given, `fn` follows from `radius` and the default circle
        resolution settings.
    levels : int, optional
        Subdivision level to use directly, ignoring `fn`.
    shared_edges : bool, optional
        Share midpoint vertices between neighbouring triangles. The surface is
        the same, the vertex array is smaller and indices differ from the
        default layout.

    Returns
    -------
    mesh : Mesh
        ``(vertices, faces)``. Hemispheres carry ``4 * 4**levels`` triangles,
        then the equator polygon with ``4 * 2**levels`` vertices.

    Raises
    ------
    ValueError
        If `radius` or `fn` is not a positive finite number, or if `levels`
        is not a non-negative integer.

    """
    _check_positive("radius", radius)
    if levels is None:
        if fn is None:
            fn = get_fragments_from_r(radius)
        _check_positive("fn", fn)
        levels = subdivision_level(fn)
    elif isinstance(levels, bool) or \
            not isinstance(levels, (int, np.integer)) or levels < 0:
        raise ValueError(f"levels must be a non-negative integer, "
                         f"got {levels!r}")
    levels = int(levels)

    vertices, faces = base_octahedron(hemisphere)
    if levels > MAX_RECOMMENDED_LEVELS:
        warnings.warn(f"{levels} subdivision levels produce "
                      f"{len(faces) * 4 ** levels} triangles; this may "
                      "exhaust memory.")

    vertices, faces = refine(vertices, faces, levels,
                             shared_edges=shared_edges)
    if hemisphere:
        vertices, faces = cap_hemisphere(vertices, faces, levels)
    else:
        faces = [tuple(int(i) for i in face) for face in faces]

    vertices = vertices * radius
    logger.info("Built %s of radius %s at level %d: %d vertices, %d faces",
                "hemisphere" if hemisphere else "sphere", radius, levels,
                len(vertices), len(faces))
    return Mesh(vertices, faces)


def octsphere(r=None, d=None, hemisphere=False, fn=DEFAULT_FN, fa=DEFAULT_FA,
              fs=DEFAULT_FS):
    """Geodesic sphere from radius or diameter and circle resolution settings.

    Parameters
    ----------
    r : float, optional
        Radius. Takes precedence over `d` when positive.
    d : float, optional
        Diameter, used when `r` is not given.
    hemisphere : bool, optional
        Build only the upper half, closed at ``z = 0``.
    fn : float, optional
        Fixed number of fragments per circle; 0 derives it from `fa` and `fs`.
    fa : float, optional
        Minimum angle in degrees of one fragment.
    fs : float, optional
        Minimum length of one fragment.

    Returns
    -------
    mesh : Mesh
        ``(vertices, faces)``, see :func:`octsphere_mesh`.

    Examples
    --------
    >>> vertices, faces = octsphere(r=1, fn=4)
    >>> len(vertices), len(faces)
    (6, 8)

    """
    radius = resolve_radius(r, d)
    fragments = get_fragments_from_r(radius, fn=fn or 0, fs=fs, fa=fa)
    return octsphere_mesh(radius, hemisphere=hemisphere, fn=fragments)
