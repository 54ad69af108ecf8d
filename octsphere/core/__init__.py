# Init for core octsphere objects
"""Core objects"""

import lazy_loader as lazy

__getattr__, __dir__, __all__ = lazy.attach(
    __name__,
    submodules=[
        "geometry",
        "hemisphere",
        "octsphere",
        "resolution",
        "subdivide",
    ],
)

__all__ += [
    "geometry",
    "hemisphere",
    "octsphere",
    "resolution",
    "subdivide",
]
