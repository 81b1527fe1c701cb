"""Lines in 3D space, each determined by a pair of distinct points"""

import logging
from typing import Any, Callable, Optional

import attrs
from expression import Result

from euclid3d import PARALLEL_TOLERANCE
from euclid3d.exceptions import InvalidArgumentError
from euclid3d.geometry import Point3D, cross, dot
from euclid3d.utilities import fail_invalid_argument, wrap_exception

__all__ = ["Line3D"]

logger = logging.getLogger(__name__)


def _is_endpoint_distinct_from(other_endpoint_name: str) -> Callable[[Any, attrs.Attribute, Optional[Point3D]], None]:
    def check(instance: "Line3D", attribute: attrs.Attribute, value: Optional[Point3D]) -> None:
        if value is None:
            fail_invalid_argument(f"{attribute.name.capitalize()} point cannot be None", logger=logger)
        if not isinstance(value, Point3D):
            raise TypeError(f"Value for {attribute.name} isn't a Point3D, but {type(value).__name__}")
        # During construction the other endpoint is already assigned; on reassignment, it's the current one.
        if value == getattr(instance, other_endpoint_name):
            fail_invalid_argument(
                "Start and end points must be distinct",
                logger=logger,
                log_message=f"New {attribute.name} point equals {other_endpoint_name}, cannot define a line",
            )
    return check


def _log_endpoint_update(_, attribute: attrs.Attribute, value: Point3D) -> Point3D:
    logger.info("Updated %s to %s", attribute.name, value)
    return value


def _require_other_line(other: Optional["Line3D"], purpose: str) -> "Line3D":
    if other is None:
        fail_invalid_argument(
            "Other line cannot be None",
            logger=logger,
            log_message=f"Null line provided for {purpose}",
        )
    return other


@attrs.define(eq=False, on_setattr=[attrs.setters.validate, _log_endpoint_update])
class Line3D:
    """
    An infinite line through two distinct points.

    The defining points are retained, and they alone determine length and direction.
    Either endpoint may be reassigned, but never to a point equal to the other endpoint.
    As with points, there's no internal synchronisation of reassignment.
    """

    start = attrs.field(validator=_is_endpoint_distinct_from("end")) # type: Point3D
    end = attrs.field(validator=_is_endpoint_distinct_from("start")) # type: Point3D

    def __attrs_post_init__(self) -> None:
        logger.info("Created Line3D from %s to %s", self.start, self.end)

    @classmethod
    def try_from_points(cls, start: Point3D, end: Point3D) -> Result["Line3D", InvalidArgumentError]:
        @wrap_exception(InvalidArgumentError)
        def build(s: Point3D, e: Point3D) -> "Line3D":
            return cls(s, e)
        return build(start, end)

    def length(self) -> float:
        """Distance between the defining points (the line itself is unbounded)"""
        logger.info("Calculating length between defining points %s and %s", self.start, self.end)
        return self.start.distance_to(self.end)

    def direction(self) -> Point3D:
        """Vector from start to end, not normalised"""
        logger.info("Computing direction vector for line")
        return self.end.subtract(self.start)

    def shortest_distance_to(self, other: "Line3D") -> float:
        """
        Compute the minimum distance between this line and another.

        For lines with nonparallel directions (skew or intersecting), this is the length of the projection
        of the separation between the start points onto the common normal. For parallel or collinear lines,
        it's the distance from the other line's start point to this line.
        """
        other = _require_other_line(other, "shortest distance calculation")
        logger.info("Calculating shortest distance to another line")
        u = self.direction()
        v = other.direction()
        w = self.start.subtract(other.start)
        normal = cross(u, v)
        normal_norm = normal.magnitude()
        if normal_norm == 0:
            u_norm = u.magnitude()
            if u_norm == 0:
                logger.warning("Zero magnitude direction vector encountered")
                return 0.0
            return cross(w, u).magnitude() / u_norm
        return abs(dot(w, normal)) / normal_norm

    def is_parallel_to(self, other: "Line3D") -> bool:
        other = _require_other_line(other, "parallel check")
        logger.info("Checking if lines are parallel")
        return cross(self.direction(), other.direction()).magnitude() < PARALLEL_TOLERANCE

    def __str__(self) -> str:
        return f"Line3D[start={self.start}, end={self.end}]"

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Line3D):
            return NotImplemented
        logger.debug("Comparing lines for equality")
        return (self.start == other.start and self.end == other.end) or \
            (self.start == other.end and self.end == other.start)

    def __hash__(self) -> int:
        return hash(self.start) ^ hash(self.end)
