"""Reading and writing polygon meshes.

Two formats are supported:

- Wavefront OBJ text (``.obj``), readable by most 3D tools,
- NumPy archives (``.npz``) holding the vertex array, the concatenated face
  indices and the length of each face.

Both keep faces of any number of vertices, so hemisphere meshes with their
closing polygon survive a round trip.
"""

import logging
from os.path import splitext

import numpy as np

from octsphere.core.octsphere import Mesh

logger = logging.getLogger(__name__)


def save_obj(fname, vertices, faces):
    """Save a mesh as Wavefront OBJ text.

    Parameters
    ----------
    fname : str
        Output file name.
    vertices : (N, 3) array_like
    faces : sequence of sequences of int
        Zero based vertex indices; written one based as OBJ requires.

    """
    vertices = np.asarray(vertices, dtype=float).reshape(-1, 3)
    with open(fname, 'wt') as fobj:
        fobj.write(f"# {len(vertices)} vertices, {len(faces)} faces\n")
        for x, y, z in vertices.tolist():
            fobj.write(f"v {x!r} {y!r} {z!r}\n")
        for face in faces:
            fobj.write("f " + " ".join(str(int(i) + 1) for i in face) + "\n")


def load_obj(fname):
    """Load the vertices and faces of a Wavefront OBJ file.

    Only ``v`` and ``f`` records are read. Texture and normal references in
    face records (``f 1/4/2 ...``) are dropped, as are comments and any other
    record type.

    Parameters
    ----------
    fname : str

    Returns
    -------
    mesh : Mesh
        Faces hold zero based indices.

    """
    vertices = []
    faces = []
    with open(fname, 'rt') as fobj:
        for lineno, line in enumerate(fobj, 1):
            tokens = line.split('#', 1)[0].split()
            if not tokens:
                continue
            if tokens[0] == 'v':
                if len(tokens) < 4:
                    raise IOError(f"{fname}:{lineno}: vertex record needs "
                                  "three coordinates")
                vertices.append([float(t) for t in tokens[1:4]])
            elif tokens[0] == 'f':
                faces.append(tuple(
                    _obj_index(t, len(vertices), fname, lineno)
                    for t in tokens[1:]))
    return Mesh(np.array(vertices, dtype=float).reshape(-1, 3), faces)


def _obj_index(token, n_vertices, fname, lineno):
    index = int(token.split('/')[0])
    if index == 0 or abs(index) > n_vertices:
        raise IOError(f"{fname}:{lineno}: face index {index} is out of "
                      f"range for {n_vertices} vertices")
    # negative indices count back from the last vertex read
    if index < 0:
        return n_vertices + index
    return index - 1


def save_mesh_npz(fname, vertices, faces):
    """Save a mesh as a NumPy ``.npz`` archive."""
    faces = [tuple(face) for face in faces]
    face_sizes = np.array([len(face) for face in faces], dtype=np.intp)
    face_indices = np.array([i for face in faces for i in face],
                            dtype=np.intp)
    np.savez(fname, vertices=np.asarray(vertices, dtype=float),
             face_indices=face_indices, face_sizes=face_sizes)


def load_mesh_npz(fname):
    """Load a mesh saved with :func:`save_mesh_npz`.

    Returns
    -------
    mesh : Mesh

    """
    with np.load(fname) as data:
        vertices = data['vertices']
        face_indices = data['face_indices']
        face_sizes = data['face_sizes']
    if face_sizes.sum() != len(face_indices):
        raise IOError(f"{fname}: face sizes do not match the face indices")
    faces = []
    start = 0
    for size in face_sizes:
        faces.append(tuple(int(i) for i in face_indices[start:start + size]))
        start += size
    return Mesh(vertices, faces)


def save_mesh(fname, mesh):
    """Save a mesh, choosing the format from the file extension.

    Parameters
    ----------
    fname : str
        Output file name ending in ``.obj`` or ``.npz``.
    mesh : Mesh or tuple
        ``(vertices, faces)``.

    """
    vertices, faces = mesh
    _, ext = splitext(fname)
    ext = ext.lower()
    if ext == '.obj':
        save_obj(fname, vertices, faces)
    elif ext == '.npz':
        save_mesh_npz(fname, vertices, faces)
    else:
        raise ValueError(f"Unknown mesh format {ext!r}; "
                         "use .obj or .npz")
    logger.info(f"Mesh saved at {fname}")


def load_mesh(fname):
    """Load a mesh, choosing the format from the file extension."""
    _, ext = splitext(fname)
    ext = ext.lower()
    if ext == '.obj':
        return load_obj(fname)
    elif ext == '.npz':
        return load_mesh_npz(fname)
    raise ValueError(f"Unknown mesh format {ext!r}; use .obj or .npz")
