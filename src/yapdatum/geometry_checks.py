"""Invariant checks for yapDatum directions and datums."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from yapdatum import vector
from yapdatum.errors import InvariantError

logger = logging.getLogger(__name__)


def _tol(tol: Optional[float]) -> float:
    return vector.epsilon if tol is None else tol


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(p * q for p, q in zip(a, b))


# Comparisons are written as "deviation > tol" so that NaN components pass
# through unflagged and propagate like any other degenerate arithmetic.

def check_unit(components: Sequence[float], tol: Optional[float] = None) -> "CheckResult":
    """Return a passing result if ``components`` has unit length within ``tol``."""

    deviation = abs(_dot(components, components) - 1.0)
    if deviation > _tol(tol):
        return CheckResult(False, [f'length of {tuple(components)} is not 1'])
    return CheckResult(True, [])


def check_frame2d(x: Sequence[float], y: Sequence[float],
                  tol: Optional[float] = None) -> "CheckResult":
    """Check that ``x`` and ``y`` form a right-handed orthonormal 2D basis."""

    tol = _tol(tol)
    warnings: List[str] = []
    for name, d in (('x', x), ('y', y)):
        if not check_unit(d, tol):
            warnings.append(f'{name} direction is not unit length')
    if abs(_dot(x, y)) > tol:
        warnings.append('x and y directions are not orthogonal')
    if x[0] * y[1] - x[1] * y[0] < 1.0 - tol:
        warnings.append('basis is not right-handed')
    return CheckResult(not warnings, warnings)


def check_orthonormal_pair(x: Sequence[float], y: Sequence[float],
                           tol: Optional[float] = None) -> "CheckResult":
    """Check that two 3D directions are unit length and mutually orthogonal."""

    tol = _tol(tol)
    warnings: List[str] = []
    for name, d in (('x', x), ('y', y)):
        if not check_unit(d, tol):
            warnings.append(f'{name} direction is not unit length')
    if abs(_dot(x, y)) > tol:
        warnings.append('x and y directions are not orthogonal')
    return CheckResult(not warnings, warnings)


def check_basis3d(x: Sequence[float], y: Sequence[float], z: Sequence[float],
                  tol: Optional[float] = None) -> "CheckResult":
    """Check that ``(x, y, z)`` is a right-handed orthonormal basis, i.e.
    that ``z == x cross y`` within ``tol``."""

    tol = _tol(tol)
    result = check_orthonormal_pair(x, y, tol)
    warnings = list(result.warnings)
    if not check_unit(z, tol):
        warnings.append('third direction is not unit length')
    xy = (x[1] * y[2] - x[2] * y[1],
          x[2] * y[0] - x[0] * y[2],
          x[0] * y[1] - x[1] * y[0])
    if _dot(xy, z) < 1.0 - tol:
        warnings.append('third direction is not x cross y (basis not right-handed)')
    return CheckResult(not warnings, warnings)


def enforce(result: "CheckResult", what: str) -> None:
    """Raise :class:`InvariantError` describing ``what`` if ``result`` failed."""

    if not result:
        message = f"invalid {what}: {'; '.join(result.warnings)}"
        logger.debug(message)
        raise InvariantError(message)


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    'CheckResult',
    'check_unit',
    'check_frame2d',
    'check_orthonormal_pair',
    'check_basis3d',
    'enforce',
]
