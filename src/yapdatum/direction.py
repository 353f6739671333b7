## unit directions in two and three dimensions for yapDatum

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

"""unit directions for **yapDatum**

A direction is a vector of length one: it carries orientation and
nothing else.  ``Direction2d`` and ``Direction3d`` are distinct types
from the vectors they resemble, so that code which needs a guaranteed
unit vector can ask for one.

There are only a few ways to get a direction:

* normalize a vector with ``of_vector`` (or ``from_components``).
  This is the one fallible operation in the library: the zero vector
  has no direction, and you get ``None`` back instead.
* use a named constant such as ``Direction3d.positive_z()``, or
  ``Direction2d.from_angle()``.
* transform an existing direction with a length-preserving operation:
  rotation, mirroring, reversal, perpendicular construction, or
  placement in a frame.

Calling the dataclass constructor directly is allowed, but the
components must already have unit length; while ``__debug__`` is set
this is checked, and ``InvariantError`` raised if it fails.

Directions are never scaled.  ``times()`` produces a vector.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import acos, atan2, cos, hypot, pi, sin
from typing import TYPE_CHECKING, Optional, Tuple

from yapdatum.geometry_checks import check_unit, enforce
from yapdatum.vector import Vector2d, Vector3d, close

if TYPE_CHECKING:
    from yapdatum.axis import Axis2d, Axis3d
    from yapdatum.frame import Frame2d, Frame3d, PlanarFrame3d
    from yapdatum.plane import Plane3d

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Direction2d:
    """Unit vector in the plane."""

    x: float
    y: float

    def __post_init__(self):
        if __debug__:
            enforce(check_unit((self.x, self.y)), 'Direction2d')

    @classmethod
    def of_vector(cls, v) -> Optional[Direction2d]:
        """Normalize ``v``; ``None`` if it is the zero vector."""
        length = hypot(v.x, v.y)
        if length == 0.0:
            logger.debug('zero-length vector has no direction')
            return None
        return cls(v.x / length, v.y / length)

    @classmethod
    def from_components(cls, x: float, y: float) -> Optional[Direction2d]:
        return cls.of_vector(Vector2d(x, y))

    @classmethod
    def from_angle(cls, angle: float) -> Direction2d:
        """Direction at ``angle`` radians counter-clockwise from +X."""
        return cls(cos(angle), sin(angle))

    @classmethod
    def positive_x(cls) -> Direction2d:
        return cls(1.0, 0.0)

    @classmethod
    def positive_y(cls) -> Direction2d:
        return cls(0.0, 1.0)

    @classmethod
    def negative_x(cls) -> Direction2d:
        return cls(-1.0, 0.0)

    @classmethod
    def negative_y(cls) -> Direction2d:
        return cls(0.0, -1.0)

    @property
    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def vector(self) -> Vector2d:
        return Vector2d(self.x, self.y)

    def to_angle(self) -> float:
        return atan2(self.y, self.x)

    def reverse(self) -> Direction2d:
        return Direction2d(-self.x, -self.y)

    __neg__ = reverse

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y

    component_in = dot

    def times(self, k: float) -> Vector2d:
        """Vector of signed length ``k`` in this direction."""
        return Vector2d(self.x * k, self.y * k)

    def perpendicular(self) -> Direction2d:
        """This direction rotated counter-clockwise by 90 degrees."""
        return Direction2d(-self.y, self.x)

    def angle_to(self, other: Direction2d) -> float:
        """Signed angle from this direction to ``other``, in ``(-pi, pi]``."""
        a = atan2(self.x * other.y - self.y * other.x, self.dot(other))
        return pi if a == -pi else a

    def rotate_by(self, angle: float) -> Direction2d:
        v = self.vector.rotate_by(angle)
        return Direction2d(v.x, v.y)

    def mirror_across(self, axis: Axis2d) -> Direction2d:
        v = self.vector.mirror_across(axis)
        return Direction2d(v.x, v.y)

    def localize_to(self, frame: Frame2d) -> Direction2d:
        v = self.vector.localize_to(frame)
        return Direction2d(v.x, v.y)

    def place_in(self, frame: Frame2d) -> Direction2d:
        v = self.vector.place_in(frame)
        return Direction2d(v.x, v.y)

    def place_onto(self, frame: PlanarFrame3d) -> Direction3d:
        v = self.vector.place_onto(frame)
        return Direction3d(v.x, v.y, v.z)

    def isclose(self, other, tol: Optional[float] = None) -> bool:
        return close(hypot(self.x - other.x, self.y - other.y), 0.0, tol)


@dataclass(frozen=True)
class Direction3d:
    """Unit vector in space."""

    x: float
    y: float
    z: float

    def __post_init__(self):
        if __debug__:
            enforce(check_unit((self.x, self.y, self.z)), 'Direction3d')

    @classmethod
    def of_vector(cls, v) -> Optional[Direction3d]:
        """Normalize ``v``; ``None`` if it is the zero vector."""
        length = hypot(v.x, v.y, v.z)
        if length == 0.0:
            logger.debug('zero-length vector has no direction')
            return None
        return cls(v.x / length, v.y / length, v.z / length)

    @classmethod
    def from_components(cls, x: float, y: float, z: float) -> Optional[Direction3d]:
        return cls.of_vector(Vector3d(x, y, z))

    @classmethod
    def positive_x(cls) -> Direction3d:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def positive_y(cls) -> Direction3d:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def positive_z(cls) -> Direction3d:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def negative_x(cls) -> Direction3d:
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def negative_y(cls) -> Direction3d:
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def negative_z(cls) -> Direction3d:
        return cls(0.0, 0.0, -1.0)

    @property
    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def vector(self) -> Vector3d:
        return Vector3d(self.x, self.y, self.z)

    def reverse(self) -> Direction3d:
        return Direction3d(-self.x, -self.y, -self.z)

    __neg__ = reverse

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    component_in = dot

    def cross(self, other) -> Vector3d:
        return self.vector.cross(other)

    def times(self, k: float) -> Vector3d:
        """Vector of signed length ``k`` in this direction."""
        return Vector3d(self.x * k, self.y * k, self.z * k)

    def perpendicular(self) -> Direction3d:
        """Some direction perpendicular to this one (see
        ``Vector3d.perpendicular`` for how it is chosen)."""
        p = self.vector.perpendicular()
        length = p.length()
        return Direction3d(p.x / length, p.y / length, p.z / length)

    def perpendicular_basis(self) -> Tuple[Direction3d, Direction3d]:
        """Return ``(u, v)`` such that ``(self, u, v)`` is a right-handed
        orthonormal basis: ``u`` is ``perpendicular()`` and
        ``v = self x u``."""
        u = self.perpendicular()
        return u, orthonormal_cross(self, u)

    def angle_to(self, other: Direction3d) -> float:
        """Unsigned angle between the two directions, in ``[0, pi]``."""
        d = self.dot(other)
        # acos raises rather than returning NaN just outside [-1, 1]
        if d > 1.0:
            d = 1.0
        elif d < -1.0:
            d = -1.0
        return acos(d)

    def rotate_around(self, axis: Axis3d, angle: float) -> Direction3d:
        v = self.vector.rotate_around(axis, angle)
        return Direction3d(v.x, v.y, v.z)

    def mirror_across(self, plane: Plane3d) -> Direction3d:
        v = self.vector.mirror_across(plane)
        return Direction3d(v.x, v.y, v.z)

    def project_onto(self, plane: Plane3d) -> Optional[Direction3d]:
        """Projection onto ``plane``, renormalized; ``None`` when this
        direction is the plane normal (or its reverse)."""
        return Direction3d.of_vector(self.vector.project_onto(plane))

    def project_into_2d(self, frame: PlanarFrame3d) -> Optional[Direction2d]:
        return Direction2d.of_vector(self.vector.project_into_2d(frame))

    def localize_to(self, frame: Frame3d) -> Direction3d:
        v = self.vector.localize_to(frame)
        return Direction3d(v.x, v.y, v.z)

    def place_in(self, frame: Frame3d) -> Direction3d:
        v = self.vector.place_in(frame)
        return Direction3d(v.x, v.y, v.z)

    def isclose(self, other, tol: Optional[float] = None) -> bool:
        return close(hypot(self.x - other.x, self.y - other.y, self.z - other.z),
                     0.0, tol)


def orthonormal_cross(a: Direction3d, b: Direction3d) -> Direction3d:
    """``a x b`` as a direction.  ``a`` and ``b`` must be perpendicular,
    so that the product already has unit length."""
    v = a.cross(b)
    return Direction3d(v.x, v.y, v.z)


__all__ = [
    'Direction2d',
    'Direction3d',
    'orthonormal_cross',
]
