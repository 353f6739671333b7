"""Exceptions raised by yapDatum."""


class InvariantError(ValueError):
    """A direction or datum was constructed from components that break its
    invariant (unit length, orthogonality, or right-handedness)."""


__all__ = ['InvariantError']
