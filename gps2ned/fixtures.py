"""
Fixture-driven checks of the NED conversion.

A fixture is a pair of text streams: one of whitespace-separated sexagesimal
`latitude longitude` pairs, and one of whitespace-separated `north east`
expectations rounded to six significant digits. Pairs are consumed together and
compared after rounding the computed values the same way.
"""

__all__ = ['FixtureReport', 'check_fixtures', 'read_pairs', 'run_fixture_files']

from dataclasses import dataclass, field
from itertools import zip_longest
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from gps2ned._const import SIGNIFICANT_DIGITS
from gps2ned.conversion import convert_sexagesimal
from gps2ned.ellipsoid import EllipsoidModel, WGS84
from gps2ned.exceptions import FixtureMismatch, ValidationError
from gps2ned.reference import ReferencePoint, get_reference
from gps2ned.utils.functions import round_significant
from gps2ned.utils.logging import LOGGER


@dataclass
class FixtureReport:
    """Outcome of a fixture run"""
    total: int = 0
    failures: List[FixtureMismatch] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures


def read_pairs(stream: Union[TextIO, Iterable[str]]) -> Iterator[Tuple[str, str]]:
    """
    Yields consecutive pairs of whitespace-separated tokens from a text stream,
    regardless of how they are split across lines.

    Raises:
        ValidationError if the stream holds an odd number of tokens
    """
    tokens = (token for line in stream for token in line.split())
    for first in tokens:
        second = next(tokens, None)
        if second is None:
            raise ValidationError(
                [], f'Dangling token {first!r}; fixture values come in pairs'
            )
        yield first, second


def _expectation(wanted: Tuple[str, str], index: int) -> Tuple[float, float]:
    try:
        return float(wanted[0]), float(wanted[1])
    except ValueError as e:
        raise ValidationError(
            [], f'Non-numeric expectation {wanted!r} at test {index}'
        ) from e


def check_fixtures(
    inputs: Union[TextIO, Iterable[str]],
    expected: Union[TextIO, Iterable[str]],
    altitude: Optional[float] = None,
    reference: Optional[ReferencePoint] = None,
    ellipsoid: EllipsoidModel = WGS84,
    collect_all: bool = False,
    signed: bool = True,
    legacy_altitude: bool = False,
) -> FixtureReport:
    """
    Converts every input pair and compares it to the paired expectation.

    Args:
        inputs:
            Stream of sexagesimal `latitude longitude` pairs

        expected:
            Stream of `north east` pairs, rounded to six significant digits

        altitude: (Optional)
            Altitude of every input point. Defaults to the reference altitude.

        reference: (Optional)
            The origin of the local frame. Defaults to the configured reference.

        ellipsoid:
            (Default WGS84) The ellipsoid model

        collect_all: (bool)
            (Default False) If False, stop at the first mismatch. If True, check
            every pair and report all mismatches together.

        signed, legacy_altitude:
            See gps2ned.conversion.gps_to_ned()

    Returns:
        FixtureReport, if every pair matched

    Raises:
        ValidationError listing the failing 1-based indices
    """
    reference = reference if reference is not None else get_reference()
    altitude = reference.altitude if altitude is None else altitude
    report = FixtureReport()

    for index, (point, wanted) in enumerate(
        zip_longest(read_pairs(inputs), read_pairs(expected)), start=1
    ):
        report.total = index
        if point is None or wanted is None:
            LOGGER.error('Fixture streams have different lengths at test %d', index)
            report.failures.append(
                FixtureMismatch(index, _expectation(wanted, index) if wanted else None, None)
            )
            break

        exp = _expectation(wanted, index)
        ned = convert_sexagesimal(
            point[0],
            point[1],
            altitude,
            reference=reference,
            ellipsoid=ellipsoid,
            signed=signed,
            legacy_altitude=legacy_altitude,
        )
        actual = (
            round_significant(ned.north, SIGNIFICANT_DIGITS),
            round_significant(ned.east, SIGNIFICANT_DIGITS),
        )
        if actual != exp:
            LOGGER.debug('Test %d: expected %s, got %s', index, exp, actual)
            report.failures.append(FixtureMismatch(index, exp, actual))
            if not collect_all:
                break

    if report.failures:
        raise ValidationError(report.failures)

    LOGGER.info('All %d fixture tests passed', report.total)
    return report


def run_fixture_files(
    input_path: Union[str, Path],
    expected_path: Union[str, Path],
    **kwargs,
) -> FixtureReport:
    """Opens a pair of fixture files and runs check_fixtures() on them"""
    with open(input_path, 'r', encoding='utf-8') as inputs, \
            open(expected_path, 'r', encoding='utf-8') as expected:
        return check_fixtures(inputs, expected, **kwargs)
