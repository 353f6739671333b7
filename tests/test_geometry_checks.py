import logging
import math

import pytest

from yapdatum import vector
from yapdatum.errors import InvariantError
from yapdatum.geometry_checks import (
    CheckResult,
    check_basis3d,
    check_frame2d,
    check_orthonormal_pair,
    check_unit,
    enforce,
)

S = math.sqrt(0.5)


def test_check_result_truthiness():
    assert CheckResult(True, [])
    assert not CheckResult(False, ['oops'])


def test_check_unit():
    assert check_unit((1.0, 0.0, 0.0))
    assert check_unit((S, S))
    result = check_unit((1.0, 1.0, 0.0))
    assert not result
    assert 'is not 1' in result.warnings[0]


def test_check_unit_tolerance(monkeypatch):
    almost = (1.0 + 1e-4, 0.0, 0.0)
    assert not check_unit(almost)
    assert check_unit(almost, tol=1e-3)
    monkeypatch.setattr(vector, 'epsilon', 1e-3)
    assert check_unit(almost)


def test_nan_passes():
    assert check_unit((math.nan, 0.0, 0.0))


def test_check_frame2d():
    assert check_frame2d((1.0, 0.0), (0.0, 1.0))
    assert check_frame2d((S, S), (-S, S))
    left = check_frame2d((1.0, 0.0), (0.0, -1.0))
    assert not left
    assert left.warnings == ['basis is not right-handed']
    skew = check_frame2d((1.0, 0.0), (S, S))
    assert 'x and y directions are not orthogonal' in skew.warnings


def test_check_orthonormal_pair():
    assert check_orthonormal_pair((0.0, 0.0, 1.0), (1.0, 0.0, 0.0))
    # no handedness for a lone pair
    assert check_orthonormal_pair((0.0, 1.0, 0.0), (1.0, 0.0, 0.0))
    result = check_orthonormal_pair((2.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert result.warnings == ['x direction is not unit length']


def test_check_basis3d():
    x, y, z = (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)
    assert check_basis3d(x, y, z)
    assert check_basis3d(y, z, x)
    assert check_basis3d(z, x, y)
    left = check_basis3d(x, y, (0.0, 0.0, -1.0))
    assert not left
    assert any('not right-handed' in w for w in left.warnings)
    assert not check_basis3d(y, x, z)


def test_enforce():
    enforce(CheckResult(True, []), 'anything')
    with pytest.raises(InvariantError) as excinfo:
        enforce(CheckResult(False, ['first', 'second']), 'Widget')
    assert str(excinfo.value) == 'invalid Widget: first; second'
    assert isinstance(excinfo.value, ValueError)


def test_enforce_logs(caplog):
    caplog.set_level(logging.DEBUG, logger='yapdatum.geometry_checks')
    with pytest.raises(InvariantError):
        enforce(check_basis3d((1.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
                'Frame3d')
    assert any('invalid Frame3d' in r.message for r in caplog.records)
