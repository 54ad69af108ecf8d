""" This file contains defines parameters for octsphere that we use to fill
settings in setup.py and the octsphere top-level docstring.  In setup.py in
particular, we exec this file, so it cannot import octsphere
"""

# octsphere version information.  An empty _version_extra corresponds to a
# full release.  '.dev' as a _version_extra string means this is a development
# version
_version_major = 0
_version_minor = 3
_version_micro = 0
_version_extra = ''

# Format expected by setup.py: string of form "X.Y.Z"
__version__ = f"{_version_major}.{_version_minor}.{_version_micro}{_version_extra}"

CLASSIFIERS = ["Development Status :: 4 - Beta",
               "Environment :: Console",
               "Intended Audience :: Science/Research",
               "License :: OSI Approved :: BSD License",
               "Operating System :: OS Independent",
               "Programming Language :: Python",
               "Programming Language :: Python :: 3",
               "Topic :: Scientific/Engineering",
               "Topic :: Multimedia :: Graphics :: 3D Modeling"]

description = 'Geodesic spheres from a recursively subdivided octahedron'

long_description = """
=========
octsphere
=========

octsphere builds triangulated spheres and hemispheres by recursively
splitting the faces of an octahedron and projecting the new vertices onto
the unit sphere. The number of passes is chosen so that the equator is a
regular polygon whose side count best matches a circle-resolution hint.

Hemispheres are closed with a single flat polygon lying in the equatorial
plane.

License
=======
octsphere is licensed under the terms of the BSD license.
"""

# versions for dependencies
NUMPY_MIN_VERSION = '1.22.4'
LAZY_LOADER_MIN_VERSION = '0.1'
NUMPYDOC_MIN_VERSION = '1.5'
PYTEST_MIN_VERSION = '7.0'

# Main setup parameters
NAME = 'octsphere'
MAINTAINER = "octsphere developers"
MAINTAINER_EMAIL = "octsphere@python.org"
DESCRIPTION = description
LONG_DESCRIPTION = long_description
URL = "https://pypi.org/project/octsphere/"
LICENSE = "BSD license"
CLASSIFIERS = CLASSIFIERS
AUTHOR = "octsphere developers"
AUTHOR_EMAIL = "octsphere@python.org"
PLATFORMS = "OS Independent"
MAJOR = _version_major
MINOR = _version_minor
MICRO = _version_micro
ISRELEASE = _version_extra == ''
VERSION = __version__
PROVIDES = ["octsphere"]
REQUIRES = [f"numpy (>={NUMPY_MIN_VERSION})",
            f"lazy_loader (>={LAZY_LOADER_MIN_VERSION})",
            f"numpydoc (>={NUMPYDOC_MIN_VERSION})"]
INSTALL_REQUIRES = [f"numpy>={NUMPY_MIN_VERSION}",
                    f"lazy_loader>={LAZY_LOADER_MIN_VERSION}",
                    f"numpydoc>={NUMPYDOC_MIN_VERSION}"]
EXTRAS_REQUIRE = {
    "test": [f"pytest>={PYTEST_MIN_VERSION}"],
}
