import pytest

from gps2ned.coordinates import *
from gps2ned.exceptions import ParseError
from gps2ned.utils import logging as gps2ned_logging


def test_parse_sexagesimal():
    result = parse_sexagesimal('N38-09-01.50', 'W076-25-29.70')
    assert result.latitude == pytest.approx(38 + 9 / 60 + 1.5 / 3600)
    assert result.longitude == pytest.approx(-(76 + 25 / 60 + 29.7 / 3600))

    result = parse_sexagesimal('S00-30-00.00', 'E010-00-36.00')
    assert result == (pytest.approx(-0.5), pytest.approx(10.01))


def test_parse_sexagesimal_unsigned():
    # Hemisphere letters are ignored entirely
    result = parse_sexagesimal('S38-09-01.50', 'W076-25-29.70', signed=False)
    assert result.latitude == pytest.approx(38 + 9 / 60 + 1.5 / 3600)
    assert result.longitude == pytest.approx(76 + 25 / 60 + 29.7 / 3600)

    assert parse_sexagesimal('N38-09-01.50', 'E076-25-29.70', signed=False) == \
        parse_sexagesimal('S38-09-01.50', 'W076-25-29.70', signed=False)


def test_parse_sexagesimal_short_seconds():
    result = parse_sexagesimal('N41-50-5.778', 'W111-54-5')
    assert result.latitude == pytest.approx(41 + 50 / 60 + 5.778 / 3600)
    assert result.longitude == pytest.approx(-(111 + 54 / 60 + 5 / 3600))


def test_parse_sexagesimal_truncates_seconds(caplog, monkeypatch):
    monkeypatch.setattr(gps2ned_logging, '_WARNINGS', set())

    result = parse_sexagesimal('N41-50-5.778', 'W111-54-34.854')
    assert result.longitude == pytest.approx(-(111 + 54 / 60 + 34.85 / 3600))
    assert 'additional digits are ignored' in caplog.text


@pytest.mark.parametrize(
    'latitude, longitude, field',
    [
        ('N3809-01.50', 'W076-25-29.70', 'latitude'),
        ('N038-09-01.50', 'W076-25-29.70', 'latitude'),
        ('X38-09-01.50', 'W076-25-29.70', 'latitude'),
        ('E38-09-01.50', 'W076-25-29.70', 'latitude'),
        ('N38-09-0a.50', 'W076-25-29.70', 'latitude'),
        ('n38-09-01.50', 'W076-25-29.70', 'latitude'),
        ('', 'W076-25-29.70', 'latitude'),
        ('N38-09-01.50', 'W76-25-29.70', 'longitude'),
        ('N38-09-01.50', 'N076-25-29.70', 'longitude'),
        ('N38-09-01.50', 'W076-25-', 'longitude'),
        ('N38-09-01.50', 'W076-25-29.70 ', 'longitude'),
        ('N\u0663\u0668-09-01.50', 'W076-25-29.70', 'latitude'),
        ('N38-09-01.50', 'W\uff10\uff17\uff16-25-29.70', 'longitude'),
    ]
)
def test_parse_sexagesimal_malformed(latitude, longitude, field):
    with pytest.raises(ParseError) as e:
        parse_sexagesimal(latitude, longitude)

    assert e.value.field == field
    assert isinstance(e.value, ValueError)


def test_parse_angle():
    assert parse_angle('N00-00-00.00', 'latitude') == 0.
    assert parse_angle('W001-00-00', 'longitude') == -1.

    with pytest.raises(ParseError):
        parse_angle(38.15, 'latitude')

    with pytest.raises(ValueError):
        parse_angle('N00-00-00.00', 'altitude')


def test_format_sexagesimal():
    assert format_sexagesimal(38 + 9 / 60 + 1.5 / 3600, 'latitude') == 'N38-09-01.50'
    assert format_sexagesimal(-(76 + 25 / 60 + 29.7 / 3600), 'longitude') == 'W076-25-29.70'
    assert format_sexagesimal(0., 'longitude') == 'E000-00-00.00'
    assert format_sexagesimal(-0.5, 'latitude') == 'S00-30-00.00'

    # Seconds that round up carry into minutes
    assert format_sexagesimal(59.9999 / 3600, 'latitude') == 'N00-01-00.00'

    with pytest.raises(ValueError):
        format_sexagesimal(0., 'altitude')


def test_latlon_sexagesimal():
    latlon = LatLon.from_sexagesimal('N38-09-01.50', 'W076-25-29.70')
    assert latlon.to_sexagesimal() == ('N38-09-01.50', 'W076-25-29.70')


def test_ned():
    ned = NED(1., 2., 3.)
    assert tuple(ned) == (1., 2., 3.)
    assert ned.north == 1. and ned.east == 2. and ned.down == 3.

    with pytest.raises(AttributeError):
        ned.north = 5.


def test_ned_rounded():
    assert NED(123456.7, 0.1234567, -1.).rounded() == NED(123457., 0.123457, -1.)
    assert NED(123456.7, 0.1234567, -1.).rounded(3) == NED(123000., 0.123, -1.)


def test_ned_to_str():
    assert NED(1.5, -2., 0.).to_str() == 'N: 1.5\nE: -2\nD: 0'
    assert NED(1234567.8, 0.1234567, -10.).to_str() == 'N: 1.23457e+06\nE: 0.123457\nD: -10'
