"""Choosing how finely to subdivide the octahedron.

A curved surface is drawn with a number of straight *fragments* per full
circle. The conventional settings that decide this number are

- ``fn``: a fixed fragment count, used whenever it is positive,
- ``fa``: the minimum angle, in degrees, covered by one fragment,
- ``fs``: the minimum length of one fragment.

Subdividing an octahedron ``levels`` times turns its equator into a regular
polygon with ``4 * 2**levels`` sides, so only powers of two times four are
reachable. :func:`subdivision_level` picks the level whose equator comes
closest to the requested fragment count.
"""

import logging
import math

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_FN = 0
DEFAULT_FA = 12.
DEFAULT_FS = 2.

# radii below this are treated as a point
GRID_FINE = 1e-8


def get_fragments_from_r(r, fn=DEFAULT_FN, fs=DEFAULT_FS, fa=DEFAULT_FA):
    """Number of fragments used to draw a circle of radius `r`.

    Parameters
    ----------
    r : float
        Circle radius.
    fn : float, optional
        Fixed number of fragments. Used (with a minimum of 3) when positive.
    fs : float, optional
        Minimum fragment length.
    fa : float, optional
        Minimum fragment angle in degrees.

    Returns
    -------
    fragments : int
        At least 3. When `fn` is not set, at least 5.

    Raises
    ------
    ValueError
        If `fn` is not set and `fa` or `fs` is not positive.

    Examples
    --------
    >>> get_fragments_from_r(1)
    5
    >>> get_fragments_from_r(10)
    30
    >>> get_fragments_from_r(10, fn=64)
    64

    """
    if r < GRID_FINE:
        return 3
    if fn > 0:
        return int(fn) if fn >= 3 else 3
    if fa <= 0 or fs <= 0:
        raise ValueError("fa and fs must be positive when fn is not set.")
    return int(math.ceil(max(min(360. / fa, r * 2 * math.pi / fs), 5)))


def equator_sides(levels):
    """Number of sides of the equator polygon after `levels` subdivisions."""
    return 4 * 2 ** levels


def subdivision_level(fn):
    r"""Subdivision level whose equator side count is closest to `fn`.

    With ``pn = log2(fn / 4)`` the two candidate levels are ``floor(pn)`` and
    ``ceil(pn)``; the one whose ``4 * 2**level`` lies nearer to `fn` wins. A
    hint lying exactly half way between two side counts (12, 24, 48, ...)
    resolves to the finer level. The result is never negative since a bare
    octahedron, with its square equator, is the coarsest sphere available.

    Parameters
    ----------
    fn : float
        Desired number of sides of a circle; a positive finite number.

    Returns
    -------
    levels : int

    Examples
    --------
    >>> subdivision_level(4)
    0
    >>> subdivision_level(10)
    1
    >>> subdivision_level(12)
    2
    >>> subdivision_level(30)
    3

    """
    pn = np.log2(fn / 4.)
    candidates = np.array([np.ceil(pn), np.floor(pn)])
    distance = np.abs(4 * 2. ** candidates - fn)
    levels = max(int(candidates[np.argmin(distance)]), 0)
    logger.debug("Resolution hint %s gives %d subdivision levels "
                 "(%d-sided equator)", fn, levels, equator_sides(levels))
    return levels
