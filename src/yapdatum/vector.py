## free vector arithmetic in two and three dimensions for yapDatum

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

"""free vectors for **yapDatum**

====================
OVERVIEW
====================

A vector is a displacement with no position: the difference between
two points, a velocity, the linear part of a transformation.  The
``Vector2d`` and ``Vector3d`` types are immutable values with named
``x``, ``y`` (and ``z``) components.  There is no invariant beyond
finiteness, and no operation here raises: degenerate input simply
propagates NaN or Inf per ordinary floating point rules.

constants
=========

``epsilon`` is the tolerance used by the advisory comparison helpers
(``close``, ``isclose``) and by debug-mode invariant checks on
directions and datums.  It is never used to decide the result of a
geometric operation.  Redefine it at your peril.

transformations
===============

The linear parts of every transformation in the library live here:
rotation about an axis direction (Rodrigues' formula), mirroring
across a plane (``v - 2(v.n)n``), projection onto a plane
(``v - (v.n)n``) or onto an axis (``(v.d)d``), and change of basis
into and out of a frame (``localize_to`` / ``place_in``).  Points,
directions and datums build their own transformations on top of these.

Angles are in radians and right-handed: a positive angle rotates
counter-clockwise when looking back along the axis direction toward
its origin.

"""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, hypot, sin
from numbers import Real
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from yapdatum.axis import Axis2d, Axis3d
    from yapdatum.direction import Direction2d, Direction3d
    from yapdatum.frame import Frame2d, Frame3d, PlanarFrame3d
    from yapdatum.plane import Plane3d
    from yapdatum.point import Point2d, Point3d

## constants
epsilon = 0.000005


def close(a: float, b: float, tol: Optional[float] = None) -> bool:
    """ are two scalars the same within ``tol`` (default ``epsilon``)
    """
    return abs(a - b) < (epsilon if tol is None else tol)


## two dimensional vectors
## -----------------------

@dataclass(frozen=True)
class Vector2d:
    """Free vector in the plane."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> Vector2d:
        return cls(0.0, 0.0)

    @classmethod
    def from_components(cls, x: float, y: float) -> Vector2d:
        return cls(float(x), float(y))

    @classmethod
    def polar(cls, radius: float, angle: float) -> Vector2d:
        """Vector of length ``radius`` at ``angle`` radians from +X."""
        return cls(radius * cos(angle), radius * sin(angle))

    @classmethod
    def from_points(cls, start: Point2d, end: Point2d) -> Vector2d:
        """Displacement from ``start`` to ``end``."""
        return cls(end.x - start.x, end.y - start.y)

    @property
    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other):
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2d:
        return Vector2d(-self.x, -self.y)

    def __mul__(self, k):
        if not isinstance(k, Real):
            return NotImplemented
        return Vector2d(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        if not isinstance(k, Real):
            return NotImplemented
        return Vector2d(self.x / k, self.y / k)

    def scale_by(self, k: float) -> Vector2d:
        return self * k

    def reverse(self) -> Vector2d:
        return -self

    def length(self) -> float:
        return hypot(self.x, self.y)

    def squared_length(self) -> float:
        """Square of the length, for comparisons without a square root."""
        return self.x * self.x + self.y * self.y

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other) -> float:
        """z component of the cross product of the two vectors lifted into
        the XY plane; positive when ``other`` is counter-clockwise of
        ``self``."""
        return self.x * other.y - self.y * other.x

    def component_in(self, direction: Direction2d) -> float:
        return self.dot(direction)

    def direction(self) -> Optional[Direction2d]:
        """The direction of this vector, or ``None`` for the zero vector."""
        from yapdatum.direction import Direction2d
        return Direction2d.of_vector(self)

    def perpendicular(self) -> Vector2d:
        """This vector rotated counter-clockwise by 90 degrees."""
        return Vector2d(-self.y, self.x)

    def rotate_by(self, angle: float) -> Vector2d:
        c = cos(angle)
        s = sin(angle)
        return Vector2d(self.x * c - self.y * s,
                        self.x * s + self.y * c)

    def mirror_across(self, axis: Axis2d) -> Vector2d:
        """Reflect across the line of ``axis``; the component along the
        axis is kept and the perpendicular component reversed."""
        d = axis.direction
        k = 2.0 * self.dot(d)
        return Vector2d(k * d.x - self.x, k * d.y - self.y)

    def project_onto_axis(self, axis: Axis2d) -> Vector2d:
        d = axis.direction
        k = self.dot(d)
        return Vector2d(k * d.x, k * d.y)

    def localize_to(self, frame: Frame2d) -> Vector2d:
        """Components of this vector in the basis of ``frame``."""
        return Vector2d(self.dot(frame.x_direction),
                        self.dot(frame.y_direction))

    def place_in(self, frame: Frame2d) -> Vector2d:
        """Treat this vector as expressed in ``frame`` and return its
        global components."""
        xd = frame.x_direction
        yd = frame.y_direction
        return Vector2d(self.x * xd.x + self.y * yd.x,
                        self.x * xd.y + self.y * yd.y)

    def place_onto(self, frame: PlanarFrame3d) -> Vector3d:
        """Embed this vector in 3D space along the plane of ``frame``."""
        xd = frame.x_direction
        yd = frame.y_direction
        return Vector3d(self.x * xd.x + self.y * yd.x,
                        self.x * xd.y + self.y * yd.y,
                        self.x * xd.z + self.y * yd.z)

    def isclose(self, other, tol: Optional[float] = None) -> bool:
        return close((self - other).length(), 0.0, tol)


## three dimensional vectors
## -------------------------

@dataclass(frozen=True)
class Vector3d:
    """Free vector in space."""

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector3d:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_components(cls, x: float, y: float, z: float) -> Vector3d:
        return cls(float(x), float(y), float(z))

    @classmethod
    def from_points(cls, start: Point3d, end: Point3d) -> Vector3d:
        """Displacement from ``start`` to ``end``."""
        return cls(end.x - start.x, end.y - start.y, end.z - start.z)

    @property
    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other):
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3d:
        return Vector3d(-self.x, -self.y, -self.z)

    def __mul__(self, k):
        if not isinstance(k, Real):
            return NotImplemented
        return Vector3d(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        if not isinstance(k, Real):
            return NotImplemented
        return Vector3d(self.x / k, self.y / k, self.z / k)

    def scale_by(self, k: float) -> Vector3d:
        return self * k

    def reverse(self) -> Vector3d:
        return -self

    def length(self) -> float:
        return hypot(self.x, self.y, self.z)

    def squared_length(self) -> float:
        """Square of the length, for comparisons without a square root."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> Vector3d:
        return Vector3d(self.y * other.z - self.z * other.y,
                        self.z * other.x - self.x * other.z,
                        self.x * other.y - self.y * other.x)

    def component_in(self, direction: Direction3d) -> float:
        return self.dot(direction)

    def direction(self) -> Optional[Direction3d]:
        """The direction of this vector, or ``None`` for the zero vector."""
        from yapdatum.direction import Direction3d
        return Direction3d.of_vector(self)

    def perpendicular(self) -> Vector3d:
        """Some vector perpendicular to this one.

        The vector is crossed with the coordinate axis along which it has
        the smallest absolute component, which is the axis it is least
        aligned with, so the result is never near zero for a non-zero
        input.  The result is not normalized.
        """
        ax = abs(self.x)
        ay = abs(self.y)
        az = abs(self.z)
        if ax <= ay:
            if ax <= az:
                return Vector3d(0.0, -self.z, self.y)
            return Vector3d(-self.y, self.x, 0.0)
        if ay <= az:
            return Vector3d(self.z, 0.0, -self.x)
        return Vector3d(-self.y, self.x, 0.0)

    def rotate_around(self, axis: Axis3d, angle: float) -> Vector3d:
        """Rotate about the direction of ``axis`` by ``angle`` radians.

        Uses Rodrigues' formula::

            v' = v cos(a) + (k x v) sin(a) + k (k . v)(1 - cos(a))

        Only the axis direction matters for a free vector; the axis
        origin is ignored.
        """
        k = axis.direction
        c = cos(angle)
        s = sin(angle)
        t = self.dot(k) * (1.0 - c)
        kxv_x = k.y * self.z - k.z * self.y
        kxv_y = k.z * self.x - k.x * self.z
        kxv_z = k.x * self.y - k.y * self.x
        return Vector3d(self.x * c + kxv_x * s + k.x * t,
                        self.y * c + kxv_y * s + k.y * t,
                        self.z * c + kxv_z * s + k.z * t)

    def mirror_across(self, plane: Plane3d) -> Vector3d:
        n = plane.normal_direction
        k = 2.0 * self.dot(n)
        return Vector3d(self.x - k * n.x, self.y - k * n.y, self.z - k * n.z)

    def project_onto(self, plane: Plane3d) -> Vector3d:
        n = plane.normal_direction
        k = self.dot(n)
        return Vector3d(self.x - k * n.x, self.y - k * n.y, self.z - k * n.z)

    def project_onto_axis(self, axis: Axis3d) -> Vector3d:
        d = axis.direction
        k = self.dot(d)
        return Vector3d(k * d.x, k * d.y, k * d.z)

    def project_into_2d(self, frame: PlanarFrame3d) -> Vector2d:
        """Drop the component normal to ``frame`` and express the rest in
        the frame's own x/y basis."""
        return Vector2d(self.dot(frame.x_direction),
                        self.dot(frame.y_direction))

    def localize_to(self, frame: Frame3d) -> Vector3d:
        """Components of this vector in the basis of ``frame``."""
        return Vector3d(self.dot(frame.x_direction),
                        self.dot(frame.y_direction),
                        self.dot(frame.z_direction))

    def place_in(self, frame: Frame3d) -> Vector3d:
        """Treat this vector as expressed in ``frame`` and return its
        global components."""
        xd = frame.x_direction
        yd = frame.y_direction
        zd = frame.z_direction
        return Vector3d(self.x * xd.x + self.y * yd.x + self.z * zd.x,
                        self.x * xd.y + self.y * yd.y + self.z * zd.y,
                        self.x * xd.z + self.y * yd.z + self.z * zd.z)

    def isclose(self, other, tol: Optional[float] = None) -> bool:
        return close((self - other).length(), 0.0, tol)


__all__ = [
    'epsilon',
    'close',
    'Vector2d',
    'Vector3d',
]
