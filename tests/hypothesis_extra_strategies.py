"""Extra hypothesis strategies for generation of examples of custom types"""

from math import pi

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from euclid3d.cube import Cube3D
from euclid3d.geometry import Point3D
from euclid3d.line import Line3D

# Keep magnitudes moderate, so that accumulated rounding stays well inside the equality tolerance.
MAX_ABS_COORDINATE = 1e3
MAX_ABS_ANGLE = 4 * pi


def gen_coordinate() -> SearchStrategy[float]:
    return st.floats(
        min_value=-MAX_ABS_COORDINATE,
        max_value=MAX_ABS_COORDINATE,
        allow_nan=False,
        allow_infinity=False,
    )


def gen_angle() -> SearchStrategy[float]:
    return st.floats(min_value=-MAX_ABS_ANGLE, max_value=MAX_ABS_ANGLE, allow_nan=False, allow_infinity=False)


def gen_point() -> SearchStrategy[Point3D]:
    return st.builds(Point3D, gen_coordinate(), gen_coordinate(), gen_coordinate())


def gen_distinct_points() -> SearchStrategy[tuple[Point3D, Point3D]]:
    return st.tuples(gen_point(), gen_point()).filter(lambda pq: pq[0] != pq[1])


def gen_line() -> SearchStrategy[Line3D]:
    return gen_distinct_points().map(lambda pq: Line3D(*pq))


def gen_side_length() -> SearchStrategy[float]:
    return st.floats(min_value=1e-3, max_value=MAX_ABS_COORDINATE)


def gen_cube() -> SearchStrategy[Cube3D]:
    return st.tuples(gen_point(), gen_side_length())\
        .map(lambda args: Cube3D.from_center_and_side(center=args[0], side_length=args[1]))
