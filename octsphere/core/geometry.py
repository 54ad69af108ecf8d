""" Utility functions for vectors on and around the unit sphere """

import numpy as np


def vector_norm(vec, axis=-1, keepdims=False):
    """ Return vector Euclidean (L2) norm

    Parameters
    ----------
    vec : array_like
        Vectors to norm.
    axis : int
        Axis over which to norm. By default norm over last axis. If `axis` is
        None, `vec` is flattened then normed.
    keepdims : bool
        If True, the output will have the same number of dimensions as `vec`,
        with shape 1 on `axis`.

    Returns
    -------
    norm : array
        Euclidean norms of vectors.

    Examples
    --------
    >>> import numpy as np
    >>> vec = [[8, 15, 0], [0, 36, 77]]
    >>> vector_norm(vec)
    array([ 17.,  85.])
    >>> vector_norm(vec, keepdims=True)
    array([[ 17.],
           [ 85.]])
    >>> vector_norm(vec, axis=0)
    array([  8.,  39.,  77.])

    """
    vec = np.asarray(vec)
    vec_norm = np.sqrt((vec * vec).sum(axis))
    if keepdims:
        if axis is None:
            shape = [1] * vec.ndim
        else:
            shape = list(vec.shape)
            shape[axis] = 1
        vec_norm = vec_norm.reshape(shape)
    return vec_norm


def normalized_vector(vec, axis=-1):
    """ Return vector divided by its Euclidean (L2) norm

    Parameters
    ----------
    vec : array_like shape (3,)

    Returns
    -------
    nvec : array shape (3,)
       vector divided by L2 norm

    Examples
    --------
    >>> vec = [1, 2, 3]
    >>> l2n = np.sqrt(np.dot(vec, vec))
    >>> nvec = normalized_vector(vec)
    >>> np.allclose(np.array(vec) / l2n, nvec)
    True
    >>> vec = np.array([[1, 2, 3]])
    >>> normalized_vector(vec).shape == (1, 3)
    True

    """
    vec = np.asarray(vec, dtype=float)
    return vec / vector_norm(vec, axis, keepdims=True)


def sphere_midpoint(p1, p2):
    r""" Midpoint of two points on the unit sphere, projected back onto it

    The arithmetic midpoint of `p1` and `p2` lies inside the sphere; dividing
    it by its norm moves it onto the unit sphere along the shorter great
    circle arc joining the two points::

        m = \frac{p_1 + p_2}{\lVert p_1 + p_2 \rVert}

    Parameters
    ----------
    p1, p2 : array_like (..., 3)
        Points at the same nonzero distance from the origin. Arrays of points
        are handled row by row.

    Returns
    -------
    mid : ndarray (..., 3)
        Unit vectors half way between `p1` and `p2`.

    Notes
    -----
    Antipodal points (``p1 == -p2``) have no defined midpoint; the sum is the
    zero vector. No edge of an octahedron, or of any of its subdivisions,
    joins antipodal vertices, so the subdivision code never asks for one.

    Examples
    --------
    >>> sphere_midpoint([1, 0, 0], [0, 1, 0])
    array([ 0.70710678,  0.70710678,  0.        ])

    """
    p1 = np.asarray(p1, dtype=float)
    p2 = np.asarray(p2, dtype=float)
    return normalized_vector((p1 + p2) / 2.)


def triangle_normals(vertices, faces):
    """ Unnormalized normals of triangular faces

    Parameters
    ----------
    vertices : (N, 3) ndarray
    faces : (F, 3) ndarray
        Indices into `vertices`, counter-clockwise when seen from the side the
        normal should point to.

    Returns
    -------
    normals : (F, 3) ndarray
        ``(p1 - p0) x (p2 - p0)`` for every face; the length is twice the
        triangle area.
    """
    vertices = np.asarray(vertices, dtype=float)
    faces = np.asarray(faces)
    p0, p1, p2 = (vertices[faces[:, i]] for i in range(3))
    return np.cross(p1 - p0, p2 - p0)


def signed_volume(vertices, faces):
    """ Signed volume enclosed by a closed triangle surface

    Each face contributes the signed volume of the tetrahedron it spans with
    the origin. A closed surface with outward winding has a positive volume.

    Parameters
    ----------
    vertices : (N, 3) ndarray
    faces : (F, 3) ndarray

    Returns
    -------
    volume : float
    """
    vertices = np.asarray(vertices, dtype=float)
    faces = np.asarray(faces)
    p0 = vertices[faces[:, 0]]
    p1 = vertices[faces[:, 1]]
    p2 = vertices[faces[:, 2]]
    return float((p0 * np.cross(p1, p2)).sum() / 6.)
