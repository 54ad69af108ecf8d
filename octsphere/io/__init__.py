# Init file for io
"""Mesh persistence"""

from octsphere.io.mesh import (load_mesh, load_mesh_npz, load_obj, save_mesh,
                               save_mesh_npz, save_obj)

__all__ = ['load_mesh', 'load_mesh_npz', 'load_obj', 'save_mesh',
           'save_mesh_npz', 'save_obj']
