r"""Split the triangles of a mesh on the unit sphere into smaller ones.

Every pass replaces a triangle ``[p0, p1, p2]`` by four triangles built on
its corners and its edge midpoints ``a = mid(p0, p1)``, ``b = mid(p1, p2)``
and ``c = mid(p0, p2)``, all projected onto the unit sphere::

               p1
               /\
              /  \
            a/____\b
            /\    /\
           /  \  /  \
          /____\/____\
        p0      c     p2

The new faces are ``[p0, a, c]``, ``[a, p1, b]``, ``[c, b, p2]`` and
``[a, b, c]``; each keeps the winding of its parent.

Two layouts of the result are available. :func:`subdivide_triangles` gives
every triangle its own six vertices, so an edge shared by two triangles gets
two copies of its midpoint. :func:`subdivide_shared` keeps one vertex per
edge midpoint. Both describe the same surface.
"""

import logging

import numpy as np

from octsphere.core.geometry import sphere_midpoint

logger = logging.getLogger(__name__)

# Faces of one split triangle, in terms of the six vertices it emits:
# p0, p1, p2, mid(p0, p1), mid(p1, p2), mid(p0, p2)
_SPLIT_FACES = np.array([[0, 3, 5],
                         [3, 1, 4],
                         [5, 4, 2],
                         [3, 4, 5]])


def _as_mesh_arrays(vertices, faces):
    vertices = np.asarray(vertices, dtype=float).reshape(-1, 3)
    faces = np.asarray(faces, dtype=np.intp).reshape(-1, 3)
    return vertices, faces


def unique_edges(faces, return_mapping=False):
    """Extract all unique edges from given triangular faces.

    Parameters
    ----------
    faces : (N, 3) ndarray
        Vertex indices forming triangular faces.
    return_mapping : bool
        If true, a mapping to the edges of each face is returned.

    Returns
    -------
    edges : (N, 2) ndarray
        Unique edges.
    mapping : (N, 3)
        For each face, [x, y, z], a mapping to its edges [a, b, c].
        ::

                y
                /\
               /  \
             a/    \b
             /      \
            /        \
           /__________\
          x      c     z

    """
    faces = np.asarray(faces)
    edges = np.concatenate([faces[:, 0:2], faces[:, 1:3], faces[:, ::2]])
    if return_mapping:
        ue, inverse = unique_sets(edges, return_inverse=True)
        return ue, inverse.reshape((3, -1)).T
    else:
        return unique_sets(edges)


def unique_sets(sets, return_inverse=False):
    """Remove duplicate sets.

    Parameters
    ----------
    sets : array (N, k)
        N sets of size k.
    return_inverse : bool
        If True, also returns the indices of unique_sets that can be used
        to reconstruct `sets` (the original ordering of each set may not be
        preserved).

    Returns
    -------
    unique_sets : array
        Unique sets.
    inverse : array (N,)
        The indices to reconstruct `sets` from `unique_sets`.

    """
    sets = np.sort(sets, 1)
    order = np.lexsort(sets.T)
    sets = sets[order]
    flag = np.ones(len(sets), 'bool')
    flag[1:] = (sets[1:] != sets[:-1]).any(-1)
    uniqsets = sets[flag]
    if return_inverse:
        inverse = np.empty_like(order)
        inverse[order] = np.arange(len(order))
        index = flag.cumsum() - 1
        return uniqsets, index[inverse]
    else:
        return uniqsets


def subdivide_triangles(vertices, faces):
    """Split every triangle into four, duplicating shared midpoints.

    Triangle ``t`` of the input writes six vertices starting at index
    ``6 * t``: its corners ``p0, p1, p2`` followed by ``mid(p0, p1)``,
    ``mid(p1, p2)`` and ``mid(p0, p2)``. Its four children follow each other
    in the output faces. Vertices are not merged across triangles.

    Parameters
    ----------
    vertices : (N, 3) array_like
        Points on the unit sphere.
    faces : (T, 3) array_like
        Indices into `vertices`.

    Returns
    -------
    new_vertices : (6 * T, 3) ndarray
    new_faces : (4 * T, 3) ndarray

    """
    vertices, faces = _as_mesh_arrays(vertices, faces)
    p0, p1, p2 = (vertices[faces[:, i]] for i in range(3))
    new_vertices = np.stack([p0, p1, p2,
                             sphere_midpoint(p0, p1),
                             sphere_midpoint(p1, p2),
                             sphere_midpoint(p0, p2)], axis=1)
    base = 6 * np.arange(len(faces), dtype=np.intp)
    new_faces = base[:, None, None] + _SPLIT_FACES
    return new_vertices.reshape(-1, 3), new_faces.reshape(-1, 3)


def subdivide_shared(vertices, faces):
    """Split every triangle into four, sharing midpoints between neighbours.

    Existing vertices keep their indices and one new vertex per unique edge
    is appended after them. The children of each triangle are laid out as in
    :func:`subdivide_triangles`.

    Parameters
    ----------
    vertices : (N, 3) array_like
        Points on the unit sphere.
    faces : (T, 3) array_like
        Indices into `vertices`.

    Returns
    -------
    new_vertices : (N + E, 3) ndarray
        E is the number of unique edges of `faces`.
    new_faces : (4 * T, 3) ndarray

    """
    vertices, faces = _as_mesh_arrays(vertices, faces)
    if len(faces) == 0:
        return vertices.copy(), faces.copy()
    edges, mapping = unique_edges(faces, return_mapping=True)
    midpoints = sphere_midpoint(vertices[edges[:, 0]], vertices[edges[:, 1]])
    mapping += len(vertices)

    x, y, z = faces.T
    a, b, c = mapping.T
    new_faces = np.stack([x, a, c,
                          a, y, b,
                          c, b, z,
                          a, b, c], axis=1)
    return np.vstack([vertices, midpoints]), new_faces.reshape(-1, 3)


def refine(vertices, faces, levels, shared_edges=False):
    """Subdivide a triangle mesh `levels` times.

    Parameters
    ----------
    vertices : (N, 3) array_like
        Points on the unit sphere.
    faces : (T, 3) array_like
        Indices into `vertices`.
    levels : int
        Number of passes. Zero returns copies of the inputs.
    shared_edges : bool, optional
        Use :func:`subdivide_shared` instead of the default
        :func:`subdivide_triangles`.

    Returns
    -------
    vertices : ndarray
    faces : (T * 4**levels, 3) ndarray

    Notes
    -----
    Each pass multiplies the face count by four, so memory grows
    exponentially with `levels`.

    """
    vertices, faces = _as_mesh_arrays(vertices, faces)
    vertices, faces = vertices.copy(), faces.copy()
    split = subdivide_shared if shared_edges else subdivide_triangles
    for level in range(levels):
        vertices, faces = split(vertices, faces)
        logger.debug("Subdivision pass %d: %d vertices, %d faces",
                     level + 1, len(vertices), len(faces))
    return vertices, faces
