"""Utilities for testing."""
from functools import partial
import operator

import numpy as np
import numpy.testing as npt

from octsphere.core.geometry import triangle_normals, vector_norm


def assert_operator(value1, value2, msg="", op=operator.eq):
    """Check Boolean statement."""
    try:
        if op == operator.is_:
            value1 = bool(value1)
        assert op(value1, value2)
    except AssertionError:
        raise AssertionError(msg.format(str(value2), str(value1)))


assert_greater = partial(assert_operator, op=operator.gt,
                         msg="{0} > {1}")
assert_less = partial(assert_operator, op=operator.lt,
                      msg="{0} < {1}")
assert_true = partial(assert_operator, value2=True, op=operator.is_,
                      msg="False is not true")
assert_false = partial(assert_operator, value2=False, op=operator.is_,
                       msg="True is not false")


def assert_on_sphere(vertices, radius=1., decimal=10):
    """Check every vertex lies at `radius` from the origin."""
    npt.assert_array_almost_equal(vector_norm(vertices),
                                  np.full(len(vertices), radius),
                                  decimal=decimal)


def assert_inward_winding(vertices, faces):
    """Check every triangle's right-hand normal points towards the origin.

    This is the clockwise-from-outside winding of the octahedron literals.
    """
    vertices = np.asarray(vertices, dtype=float)
    faces = np.asarray(faces)
    centers = vertices[faces].mean(1)
    outwardness = (triangle_normals(vertices, faces) * centers).sum(-1)
    assert_true((outwardness < 0).all())
