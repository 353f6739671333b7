## homogeneous matrix equivalents of the yapDatum transformations

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

from math import cos, sin

import numpy as np

from yapdatum.point import Point3d
from yapdatum.vector import Vector3d

## A matrix is represented as a list of four rows of four numbers.
## Points are treated as column vectors [x, y, z, 1] and free vectors
## as [x, y, z, 0], so Mx applies the translation column to points
## only.  The builders below produce the same results as the value
## operations in yapdatum (Point3d.rotate_around, mirror_across,
## scale_about, place_in, localize_to) to within rounding; the value
## operations are the reference, and the matrices are for handing a
## composed transformation to code that wants one.


def _isgoodnum(n):
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def _dot4(a, b):
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2] + a[3]*b[3]


class Matrix:
    """4x4 transformation matrix for homogeneous 3D coordinates"""

    def __init__(self, a=None, trans=False):
        self.m = [[1.0, 0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0, 0.0],
                  [0.0, 0.0, 1.0, 0.0],
                  [0.0, 0.0, 0.0, 1.0]]
        self.trans = False

        if isinstance(a, Matrix):
            for i in range(4):
                self.setrow(i, a.getrow(i))
        elif isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list)) and len(r) == 4
                                   for r in a):
                values = [x for r in a for x in r]
            elif len(a) == 16:
                values = list(a)
            else:
                raise ValueError('bad shape for matrix initialization: {}'.format(a))
            for ind, x in enumerate(values):
                if not _isgoodnum(x):
                    raise ValueError('bad element in matrix initialization: {}'.format(x))
                self.m[ind // 4][ind % 4] = float(x)
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        self.trans = trans

    def __repr__(self):
        return "Matrix({},{},{},{},{})".format(self.m[0], self.m[1],
                                               self.m[2], self.m[3], self.trans)

    #return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        if self.trans:
            return self.m[j][i]
        return self.m[i][j]

    #set value indexed by i,j
    def set(self, i, j, x):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to set: {},{}'.format(i, j))
        if not _isgoodnum(x):
            raise ValueError('bad value passed to set: {}'.format(x))
        if self.trans:
            self.m[j][i] = x
        else:
            self.m[i][j] = x

    def getrow(self, i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        if self.trans:
            return [self.m[0][i], self.m[1][i], self.m[2][i], self.m[3][i]]
        return list(self.m[i])

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        if self.trans:
            return list(self.m[j])
        return [self.m[0][j], self.m[1][j], self.m[2][j], self.m[3][j]]

    def setrow(self, i, x):
        if len(x) != 4 or not all(_isgoodnum(v) for v in x):
            raise ValueError('bad non-vector passed to setrow: {}'.format(x))
        for j in range(4):
            self.set(i, j, x[j])

    def setcol(self, j, x):
        if len(x) != 4 or not all(_isgoodnum(v) for v in x):
            raise ValueError('bad non-vector passed to setcol: {}'.format(x))
        for i in range(4):
            self.set(i, j, x[i])

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # scalar, compute xM.  Respects transpose flag.
    def mul(self, x):
        if isinstance(x, Matrix):
            result = Matrix()
            for i in range(4):
                row = self.getrow(i)
                for j in range(4):
                    result.set(i, j, _dot4(row, x.getcol(j)))
            return result
        elif _isgoodnum(x):
            result = Matrix()
            for i in range(4):
                result.setrow(i, [v * x for v in self.getrow(i)])
            return result

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def transform_point(self, p):
        """Apply to a ``Point3d``, dividing through by w."""
        h = [p.x, p.y, p.z, 1.0]
        x, y, z, w = (_dot4(self.getrow(i), h) for i in range(4))
        return Point3d(x / w, y / w, z / w)

    def transform_vector(self, v):
        """Apply the linear part only to a ``Vector3d``."""
        h = [v.x, v.y, v.z, 0.0]
        return Vector3d(*(_dot4(self.getrow(i), h) for i in range(3)))

    def toarray(self):
        """Return the matrix as a 4x4 NumPy array (transpose applied)."""
        return np.array([self.getrow(i) for i in range(4)], dtype=float)

    @classmethod
    def fromarray(cls, a):
        arr = np.asarray(a, dtype=float)
        if arr.shape != (4, 4):
            raise ValueError('expected a 4x4 array, got shape {}'.format(arr.shape))
        return cls(arr.tolist())


def _about(linear, center):
    """Embed the 3x3 ``linear`` part so that ``center`` is a fixed point:
    translation column is ``c - L c``."""
    c = (center.x, center.y, center.z)
    rows = []
    for i in range(3):
        r = linear[i]
        rows.append([r[0], r[1], r[2],
                     c[i] - (r[0]*c[0] + r[1]*c[1] + r[2]*c[2])])
    rows.append([0.0, 0.0, 0.0, 1.0])
    return Matrix(rows)


def Translation(delta, inverse=False):
    if inverse:
        delta = -delta
    return Matrix([[1, 0, 0, delta.x],
                   [0, 1, 0, delta.y],
                   [0, 0, 1, delta.z],
                   [0, 0, 0, 1]])


# rotation by angle radians about an Axis3d, right-hand rule
def Rotation(axis, angle, inverse=False):
    if inverse:
        angle = -angle
    k = axis.direction
    c = cos(angle)
    s = sin(angle)
    t = 1.0 - c
    # Rodrigues' formula written out as a matrix, see
    # http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[c + k.x*k.x*t, k.x*k.y*t - k.z*s, k.x*k.z*t + k.y*s],
         [k.y*k.x*t + k.z*s, c + k.y*k.y*t, k.y*k.z*t - k.x*s],
         [k.z*k.x*t - k.y*s, k.z*k.y*t + k.x*s, c + k.z*k.z*t]]
    return _about(R, axis.origin)


# uniform scale by k about a center point
def Scale(center, k, inverse=False):
    if not _isgoodnum(k):
        raise ValueError('bad scaling value passed to Scale: {}'.format(k))
    if inverse:
        k = 1.0/k
    S = [[k, 0.0, 0.0],
         [0.0, k, 0.0],
         [0.0, 0.0, k]]
    return _about(S, center)


# reflection across a Plane3d; its own inverse
def Mirror(plane):
    n = plane.normal_direction
    H = [[1.0 - 2*n.x*n.x, -2*n.x*n.y, -2*n.x*n.z],
         [-2*n.y*n.x, 1.0 - 2*n.y*n.y, -2*n.y*n.z],
         [-2*n.z*n.x, -2*n.z*n.y, 1.0 - 2*n.z*n.z]]
    return _about(H, plane.origin)


# local-to-global: columns are the frame directions and origin
def Placement(frame):
    P = Matrix()
    for j, d in enumerate((frame.x_direction, frame.y_direction,
                           frame.z_direction)):
        P.setcol(j, [d.x, d.y, d.z, 0.0])
    o = frame.origin
    P.setcol(3, [o.x, o.y, o.z, 1.0])
    return P


# global-to-local: the transpose of the rotation part, and the origin
# expressed in the frame's own directions
def Localization(frame):
    L = Matrix()
    o = frame.origin
    for i, d in enumerate((frame.x_direction, frame.y_direction,
                           frame.z_direction)):
        L.setrow(i, [d.x, d.y, d.z, -(d.x*o.x + d.y*o.y + d.z*o.z)])
    return L
