"""Test fixtures and utilities"""

import pytest

from euclid3d.cube import Cube3D
from euclid3d.geometry import Point3D
from euclid3d.line import Line3D


#################################################################
# Fixtures
#################################################################
@pytest.fixture
def origin():
    return Point3D.origin()


@pytest.fixture
def x_axis(origin):
    return Line3D(origin, Point3D(1, 0, 0))


@pytest.fixture
def cube_side_two(origin):
    return Cube3D.from_center_and_side(origin, 2)


@pytest.fixture
def cube_vertices_side_two():
    return [
        Point3D(-1, -1, -1), Point3D(1, -1, -1), Point3D(1, 1, -1), Point3D(-1, 1, -1),
        Point3D(-1, -1, 1), Point3D(1, -1, 1), Point3D(1, 1, 1), Point3D(-1, 1, 1),
    ]


#################################################################
# Other helpers
#################################################################
def has_record_at_level(records, level: int) -> bool:
    return any(r.levelno == level for r in records)
