"""
Geodesic spheres in Python
==========================

Subpackages
-----------
::

 core              -- Octahedron subdivision engine
 core.resolution   -- Subdivision level from a circle-resolution hint
 core.geometry     -- Vector norms, sphere midpoints, winding helpers
 core.subdivide    -- Triangle splitting and repeated refinement
 core.hemisphere   -- Equatorial ring and closing face of a hemisphere
 core.octsphere    -- Sphere and hemisphere mesh assembly
 io                -- Loading/saving of meshes (OBJ, npz)
 workflows         -- Predefined command line for common tasks

Utilities
---------
::

 __version__   -- octsphere version

"""
from octsphere.info import __version__

submodules = [
    'core',
    'io',
    'testing',
    'workflows',
]

__all__ = submodules + ['__version__']
