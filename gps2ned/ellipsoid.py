"""
Representation of the reference ellipsoid
"""

__all__ = ['EllipsoidModel', 'WGS84']

from functools import cached_property

from gps2ned._const import WGS84_A, WGS84_B
from gps2ned.exceptions import ConfigError


class EllipsoidModel:
    """
    An ellipsoid of revolution, defined by its semi-major and semi-minor axes.

    Args:
        a:
            Semi-major axis, in meters

        b:
            Semi-minor axis, in meters. Must satisfy 0 < b < a.
    """

    def __init__(self, a: float, b: float):
        a, b = float(a), float(b)
        if not 0 < b < a:
            raise ConfigError(
                f'Ellipsoid axes must satisfy 0 < b < a (got a={a}, b={b})'
            )

        self.a = a
        self.b = b

    def __eq__(self, other):
        if not isinstance(other, EllipsoidModel):
            return False

        return self.a == other.a and self.b == other.b

    def __hash__(self):
        return hash((self.a, self.b))

    def __repr__(self):
        return f'<EllipsoidModel(a={self.a}, b={self.b})>'

    @cached_property
    def e2(self) -> float:
        """First eccentricity squared"""
        return 1. - (self.b / self.a) ** 2


WGS84 = EllipsoidModel(WGS84_A, WGS84_B)
