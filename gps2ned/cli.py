"""Command line entry point: gps2ned LAT LON ALT"""

__all__ = ['main']

import argparse
import sys
from typing import List, Optional

from gps2ned.conversion import convert_sexagesimal
from gps2ned.exceptions import Gps2NedError, ValidationError
from gps2ned.fixtures import run_fixture_files
from gps2ned.reference import ReferencePoint, TEST_REFERENCE, get_reference, use_reference
from gps2ned.utils.logging import set_verbose


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='gps2ned',
        description='Convert a sexagesimal GPS fix to local North-East-Down coordinates (meters).'
    )
    ap.add_argument('latitude', nargs='?', help="latitude, ex. 'N38-09-01.50'")
    ap.add_argument('longitude', nargs='?', help="longitude, ex. 'W076-25-29.70'")
    ap.add_argument('altitude', nargs='?', type=float, help='altitude above MSL (m)')
    ap.add_argument('--reference', nargs=3, metavar=('LAT', 'LON', 'ALT'),
                    help='origin of the local frame; default: the configured reference')
    ap.add_argument('--legacy', action='store_true',
                    help='ignore hemisphere letters and scale the reference altitude by '
                         'pi/180, reproducing fixtures generated by older tools')
    ap.add_argument('--test', action='store_true',
                    help='check fixture files against the test reference point')
    ap.add_argument('--input', default='test_input.txt',
                    help="fixture file of 'lat lon' pairs (with --test)")
    ap.add_argument('--expected', default='test_expected_output.txt',
                    help="fixture file of 'north east' pairs (with --test)")
    ap.add_argument('--collect-all', action='store_true',
                    help='report every fixture mismatch instead of stopping at the first')
    ap.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    return ap


def _run_tests(args) -> int:
    try:
        report = run_fixture_files(
            args.input,
            args.expected,
            collect_all=args.collect_all,
            signed=not args.legacy,
            legacy_altitude=args.legacy,
        )
    except ValidationError as e:
        for failure in e.failures:
            sys.stdout.write(f'Test {failure.index} failed\n')
        if not e.failures:
            sys.stderr.write(f'ERROR: {e}\n')
        return 1
    except (ValueError, OSError) as e:
        sys.stderr.write(f'ERROR: {e}\n')
        return 1

    sys.stdout.write(f'All tests passed ({report.total})\n')
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)
    if args.test and args.latitude is not None:
        ap.error('LAT LON ALT cannot be combined with --test')
    set_verbose(args.verbose)

    reference = TEST_REFERENCE if args.test else get_reference()
    if args.reference:
        lat, lon, alt = args.reference
        try:
            reference = ReferencePoint(lat, lon, float(alt))
            reference.to_latlon()
        except ValueError as e:
            sys.stderr.write(f'ERROR: {e}\n')
            return 1

    if args.test:
        with use_reference(reference):
            return _run_tests(args)

    if args.altitude is None:
        ap.print_usage(sys.stderr)
        return 2

    try:
        ned = convert_sexagesimal(
            args.latitude,
            args.longitude,
            args.altitude,
            reference=reference,
            signed=not args.legacy,
            legacy_altitude=args.legacy,
        )
    except Gps2NedError as e:
        sys.stderr.write(f'ERROR: {e}\n')
        return 1

    sys.stdout.write(ned.to_str() + '\n')
    return 0
