"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_up', 'round_significant']

from gps2ned._const import SIGNIFICANT_DIGITS


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def round_significant(value: float, digits: int = SIGNIFICANT_DIGITS) -> float:
    """
    Rounds a value to a number of significant digits (not decimal places) by
    formatting it with the %g conversion and parsing the result back.

    Used to strip floating point noise before comparing against fixture
    expectations, e.g. 123456.7 -> 123457.0 while 0.1234567 -> 0.123457.

    Args:
        value:
            The float value to be rounded

        digits: (int)
            (Default 6) The number of significant digits to keep

    Returns:
        float
    """
    return float(f'{value:.{digits}g}')
