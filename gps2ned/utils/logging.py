"""Logging utility for gps2ned"""

__all__ = ['LOGGER', 'set_verbose', 'warn_once']

import logging

LOGGER = logging.getLogger('gps2ned')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str):
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)


def set_verbose(verbose: bool = True):
    """Toggles DEBUG output for the package logger"""
    LOGGER.setLevel(logging.DEBUG if verbose else logging.WARNING)
