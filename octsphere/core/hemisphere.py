"""Closing the open equator of a subdivided half octahedron."""

import logging

import numpy as np

from octsphere.core.resolution import equator_sides

logger = logging.getLogger(__name__)


def equator_ring(levels):
    """Points of the regular equator polygon for a subdivision level.

    Parameters
    ----------
    levels : int
        Subdivision level; the polygon has ``nlv = 4 * 2**levels`` sides.

    Returns
    -------
    ring : (nlv + 1, 3) ndarray
        Points ``(cos t, sin t, 0)`` for ``t = n * 360 / nlv`` degrees,
        ``n = 0 .. nlv``. The last point repeats the first one.

    """
    nlv = equator_sides(levels)
    t = np.deg2rad(np.arange(nlv + 1) * 360. / nlv)
    return np.column_stack([np.cos(t), np.sin(t), np.zeros(nlv + 1)])


def cap_hemisphere(vertices, faces, levels):
    """Add a flat polygon closing a hemisphere at ``z = 0``.

    The equator ring of :func:`equator_ring` is appended to `vertices` and a
    single face visiting its first ``nlv`` points is appended to `faces`. The
    repeated last ring point stays in the vertex array but is not used by
    any face.

    The ring is not stitched to the triangles: the subdivided boundary
    already runs along the same regular polygon, so the cap only adds a
    face on top of it.

    Parameters
    ----------
    vertices : (N, 3) array_like
        Vertices of the refined upper half.
    faces : (T, 3) array_like
        Triangles of the refined upper half.
    levels : int
        Subdivision level used to refine the half.

    Returns
    -------
    vertices : (N + nlv + 1, 3) ndarray
    faces : list of tuple
        The ``T`` triangles followed by the closing ``nlv``-gon.

    """
    vertices = np.asarray(vertices, dtype=float).reshape(-1, 3)
    ring = equator_ring(levels)
    pstart = len(vertices)
    nlv = len(ring) - 1

    new_faces = [tuple(int(i) for i in face)
                 for face in np.asarray(faces).reshape(-1, 3)]
    new_faces.append(tuple(range(pstart, pstart + nlv)))
    logger.debug("Closing hemisphere with a %d-sided equator face", nlv)
    return np.vstack([vertices, ring]), new_faces
