## affine points in two and three dimensions for yapDatum

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""affine points for **yapDatum**

A point is a position, not a displacement.  It has no length, and
points cannot be added together; the difference of two points is a
vector, and a point plus a vector is another point.

Every point transformation is written the same way.  For a
transformation anchored at some origin ``O`` (the center of a scale,
the origin of a rotation axis or mirror plane, the origin of a
frame)::

    transform(p) = O + linear_part(p - O)

The linear part is one of the vector operations in ``yapdatum.vector``.
Keeping to this pattern means the result is always an honest point,
and that moving the anchor moves the result with it.

"""

from __future__ import annotations

from dataclasses import dataclass
from math import hypot
from typing import TYPE_CHECKING, Optional, Tuple

from yapdatum.vector import Vector2d, Vector3d, close

if TYPE_CHECKING:
    from yapdatum.axis import Axis2d, Axis3d
    from yapdatum.direction import Direction2d, Direction3d
    from yapdatum.frame import Frame2d, Frame3d, PlanarFrame3d
    from yapdatum.plane import Plane3d


## two dimensional points
## ----------------------

@dataclass(frozen=True)
class Point2d:
    """Position in the plane."""

    x: float
    y: float

    @classmethod
    def origin(cls) -> Point2d:
        return cls(0.0, 0.0)

    @classmethod
    def from_coordinates(cls, x: float, y: float) -> Point2d:
        return cls(float(x), float(y))

    @classmethod
    def interpolate(cls, start: Point2d, end: Point2d, t: float) -> Point2d:
        """Point at parameter ``t`` on the line from ``start`` (``t=0``)
        to ``end`` (``t=1``).  Values outside ``[0, 1]`` extrapolate."""
        return cls(start.x + t * (end.x - start.x),
                   start.y + t * (end.y - start.y))

    @classmethod
    def midpoint(cls, a: Point2d, b: Point2d) -> Point2d:
        return cls.interpolate(a, b, 0.5)

    @classmethod
    def along(cls, axis: Axis2d, distance: float) -> Point2d:
        """Point at signed ``distance`` from the axis origin, in the axis
        direction."""
        o = axis.origin
        d = axis.direction
        return cls(o.x + distance * d.x, o.y + distance * d.y)

    @property
    def coordinates(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other):
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Point2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if isinstance(other, Point2d):
            return Vector2d(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2d):
            return Point2d(self.x - other.x, self.y - other.y)
        return NotImplemented

    def vector_to(self, other: Point2d) -> Vector2d:
        """Displacement from this point to ``other``."""
        return Vector2d(other.x - self.x, other.y - self.y)

    def distance_from(self, other: Point2d) -> float:
        return hypot(self.x - other.x, self.y - other.y)

    def squared_distance_from(self, other: Point2d) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def translate_by(self, v: Vector2d) -> Point2d:
        return Point2d(self.x + v.x, self.y + v.y)

    def translate_in(self, direction: Direction2d, distance: float) -> Point2d:
        return self.translate_by(direction.times(distance))

    def scale_about(self, center: Point2d, k: float) -> Point2d:
        """Scale away from ``center`` by factor ``k``.

        ``k == 1`` leaves the point alone and ``k == 0`` collapses it onto
        ``center``.  Negative factors are accepted and give a point
        reflection through ``center``; prefer ``rotate_around`` or
        ``mirror_across`` to say what you mean.
        """
        return center + (self - center) * k

    def rotate_around(self, center: Point2d, angle: float) -> Point2d:
        """Rotate counter-clockwise about ``center`` by ``angle`` radians."""
        return center + (self - center).rotate_by(angle)

    def mirror_across(self, axis: Axis2d) -> Point2d:
        o = axis.origin
        return o + (self - o).mirror_across(axis)

    def project_onto_axis(self, axis: Axis2d) -> Point2d:
        o = axis.origin
        return o + (self - o).project_onto_axis(axis)

    def signed_distance_along(self, axis: Axis2d) -> float:
        """Distance along ``axis`` from its origin to the projection of
        this point; positive in the axis direction."""
        return (self - axis.origin).dot(axis.direction)

    def signed_distance_from(self, axis: Axis2d) -> float:
        """Distance from the line of ``axis``; positive to the left, i.e.
        on the side of the axis direction's perpendicular."""
        return axis.direction.vector.cross(self - axis.origin)

    def distance_from_axis(self, axis: Axis2d) -> float:
        return abs(self.signed_distance_from(axis))

    def localize_to(self, frame: Frame2d) -> Point2d:
        """Coordinates of this point relative to ``frame``."""
        v = (self - frame.origin).localize_to(frame)
        return Point2d(v.x, v.y)

    def place_in(self, frame: Frame2d) -> Point2d:
        """Treat these as coordinates relative to ``frame`` and return the
        global point; the inverse of ``localize_to``."""
        return frame.origin + Vector2d(self.x, self.y).place_in(frame)

    def place_onto(self, frame: PlanarFrame3d) -> Point3d:
        """Treat these as coordinates in the plane of ``frame`` and return
        the corresponding 3D point."""
        return frame.origin + Vector2d(self.x, self.y).place_onto(frame)

    def isclose(self, other: Point2d, tol: Optional[float] = None) -> bool:
        return close(self.distance_from(other), 0.0, tol)


## three dimensional points
## ------------------------

@dataclass(frozen=True)
class Point3d:
    """Position in space."""

    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> Point3d:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_coordinates(cls, x: float, y: float, z: float) -> Point3d:
        return cls(float(x), float(y), float(z))

    @classmethod
    def interpolate(cls, start: Point3d, end: Point3d, t: float) -> Point3d:
        """Point at parameter ``t`` on the line from ``start`` (``t=0``)
        to ``end`` (``t=1``).  Values outside ``[0, 1]`` extrapolate."""
        return cls(start.x + t * (end.x - start.x),
                   start.y + t * (end.y - start.y),
                   start.z + t * (end.z - start.z))

    @classmethod
    def midpoint(cls, a: Point3d, b: Point3d) -> Point3d:
        return cls.interpolate(a, b, 0.5)

    @classmethod
    def along(cls, axis: Axis3d, distance: float) -> Point3d:
        """Point at signed ``distance`` from the axis origin, in the axis
        direction."""
        o = axis.origin
        d = axis.direction
        return cls(o.x + distance * d.x,
                   o.y + distance * d.y,
                   o.z + distance * d.z)

    @property
    def coordinates(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other):
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Point3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if isinstance(other, Point3d):
            return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3d):
            return Point3d(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def vector_to(self, other: Point3d) -> Vector3d:
        """Displacement from this point to ``other``."""
        return Vector3d(other.x - self.x, other.y - self.y, other.z - self.z)

    def distance_from(self, other: Point3d) -> float:
        return hypot(self.x - other.x, self.y - other.y, self.z - other.z)

    def squared_distance_from(self, other: Point3d) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def translate_by(self, v: Vector3d) -> Point3d:
        return Point3d(self.x + v.x, self.y + v.y, self.z + v.z)

    def translate_in(self, direction: Direction3d, distance: float) -> Point3d:
        return self.translate_by(direction.times(distance))

    def scale_about(self, center: Point3d, k: float) -> Point3d:
        """Scale away from ``center`` by factor ``k``.

        ``k == 1`` leaves the point alone and ``k == 0`` collapses it onto
        ``center``.  Negative factors are accepted and give a point
        reflection through ``center``; prefer ``rotate_around`` or
        ``mirror_across`` to say what you mean.
        """
        return center + (self - center) * k

    def rotate_around(self, axis: Axis3d, angle: float) -> Point3d:
        """Rotate about ``axis`` by ``angle`` radians (right-hand rule)."""
        o = axis.origin
        return o + (self - o).rotate_around(axis, angle)

    def mirror_across(self, plane: Plane3d) -> Point3d:
        o = plane.origin
        return o + (self - o).mirror_across(plane)

    def project_onto(self, plane: Plane3d) -> Point3d:
        o = plane.origin
        return o + (self - o).project_onto(plane)

    def project_onto_axis(self, axis: Axis3d) -> Point3d:
        o = axis.origin
        return o + (self - o).project_onto_axis(axis)

    def signed_distance_along(self, axis: Axis3d) -> float:
        """Distance along ``axis`` from its origin to the projection of
        this point; positive in the axis direction."""
        return (self - axis.origin).dot(axis.direction)

    def signed_distance_from(self, plane: Plane3d) -> float:
        """Distance from ``plane``; positive on the side the normal
        points toward."""
        return (self - plane.origin).dot(plane.normal_direction)

    def distance_from_axis(self, axis: Axis3d) -> float:
        v = self - axis.origin
        return (v - v.project_onto_axis(axis)).length()

    def project_into_2d(self, frame: PlanarFrame3d) -> Point2d:
        """Project onto the plane of ``frame`` and return the 2D
        coordinates of the result in the frame's own x/y basis."""
        v = (self - frame.origin).project_into_2d(frame)
        return Point2d(v.x, v.y)

    def localize_to(self, frame: Frame3d) -> Point3d:
        """Coordinates of this point relative to ``frame``."""
        v = (self - frame.origin).localize_to(frame)
        return Point3d(v.x, v.y, v.z)

    def place_in(self, frame: Frame3d) -> Point3d:
        """Treat these as coordinates relative to ``frame`` and return the
        global point; the inverse of ``localize_to``."""
        return frame.origin + Vector3d(self.x, self.y, self.z).place_in(frame)

    def isclose(self, other: Point3d, tol: Optional[float] = None) -> bool:
        return close(self.distance_from(other), 0.0, tol)


__all__ = [
    'Point2d',
    'Point3d',
]
