import io

import pytest

from gps2ned.conversion import convert_sexagesimal
from gps2ned.exceptions import ParseError, ValidationError
from gps2ned.fixtures import *
from gps2ned.reference import TEST_REFERENCE, use_reference
from gps2ned.utils.functions import round_significant


POINTS = [
    ('N38-09-01.50', 'W076-25-29.70'),
    ('N38-09-11.50', 'W076-25-20.00'),
    ('N38-08-45.25', 'W076-26-01.10'),
    ('N38-10-00.00', 'W076-24-00.00'),
]


def _expected_lines(points, **kwargs):
    lines = []
    for lat, lon in points:
        ned = convert_sexagesimal(lat, lon, TEST_REFERENCE.altitude, reference=TEST_REFERENCE, **kwargs)
        lines.append(f'{round_significant(ned.north)!r} {round_significant(ned.east)!r}\n')
    return lines


def _input_lines(points):
    return [f'{lat} {lon}\n' for lat, lon in points]


def test_read_pairs():
    assert list(read_pairs(['a b c', ' d\n', '\n', 'e f'])) == [('a', 'b'), ('c', 'd'), ('e', 'f')]
    assert list(read_pairs([])) == []

    with pytest.raises(ValidationError):
        list(read_pairs(['a b c']))


def test_check_fixtures():
    report = check_fixtures(
        _input_lines(POINTS),
        _expected_lines(POINTS),
        reference=TEST_REFERENCE,
    )
    assert report.passed
    assert report.total == len(POINTS)

    # Uses the configured reference and its altitude by default
    with use_reference(TEST_REFERENCE):
        report = check_fixtures(io.StringIO(''.join(_input_lines(POINTS))), _expected_lines(POINTS))
    assert report.passed


def test_check_fixtures_first_failure():
    expected = _expected_lines(POINTS)
    expected[1] = '1.0 2.0\n'
    expected[3] = '3.0 4.0\n'

    with pytest.raises(ValidationError) as e:
        check_fixtures(_input_lines(POINTS), expected, reference=TEST_REFERENCE)

    assert e.value.index == 2
    assert [x.index for x in e.value.failures] == [2]
    assert e.value.failures[0].expected == (1.0, 2.0)
    assert str(e.value) == 'Test 2 failed'


def test_check_fixtures_collect_all():
    expected = _expected_lines(POINTS)
    expected[1] = '1.0 2.0\n'
    expected[3] = '3.0 4.0\n'

    with pytest.raises(ValidationError) as e:
        check_fixtures(_input_lines(POINTS), expected, reference=TEST_REFERENCE, collect_all=True)

    assert [x.index for x in e.value.failures] == [2, 4]
    assert str(e.value) == 'Test 2 failed; Test 4 failed'


def test_check_fixtures_length_mismatch():
    with pytest.raises(ValidationError) as e:
        check_fixtures(_input_lines(POINTS), _expected_lines(POINTS[:2]), reference=TEST_REFERENCE)

    assert e.value.index == 3
    assert e.value.failures[0].actual is None


def test_check_fixtures_bad_input():
    with pytest.raises(ParseError):
        check_fixtures(['N38-09-01.50 W76-25-29.70'], ['0 0'], reference=TEST_REFERENCE)


def test_check_fixtures_legacy():
    expected = _expected_lines(POINTS, signed=False, legacy_altitude=True)
    report = check_fixtures(
        _input_lines(POINTS),
        expected,
        reference=TEST_REFERENCE,
        signed=False,
        legacy_altitude=True,
    )
    assert report.passed


def test_run_fixture_files(tmp_path):
    input_path = tmp_path / 'test_input.txt'
    expected_path = tmp_path / 'test_expected_output.txt'
    input_path.write_text(''.join(_input_lines(POINTS)), encoding='utf-8')
    expected_path.write_text(''.join(_expected_lines(POINTS)), encoding='utf-8')

    report = run_fixture_files(input_path, expected_path, reference=TEST_REFERENCE)
    assert report.total == len(POINTS)


def test_check_fixtures_non_numeric_expectation():
    with pytest.raises(ValidationError) as e:
        check_fixtures(['N38-09-01.50 W076-25-29.70'], ['abc 0'], reference=TEST_REFERENCE)

    assert 'test 1' in str(e.value)
    assert isinstance(e.value.__cause__, ValueError)

    # Also when the expectations outlast the inputs
    with pytest.raises(ValidationError):
        check_fixtures(
            _input_lines(POINTS[:1]),
            _expected_lines(POINTS[:1]) + ['0 x\n'],
            reference=TEST_REFERENCE,
        )
