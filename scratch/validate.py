"""
Light input validation for command-line and config values.

The server enforces the real rules; these checks only catch obvious typos
before a request is made. Each validator trims the value, returns it on
success and raises MalformedArgument otherwise, so they plug straight into
argparse `type=`.
"""

import argparse
import re

from scratch.api.formats import parse_format

LIFETIME_PATTERN = r'^\d+(h|m|s)$'
PREFIX_PATTERN = r'^[a-zA-Z0-9._\-:|]{1,64}$'
PASSWORD_PATTERN = r'^[a-zA-Z0-9._-]{1,20}$'

_LIFETIME_RE = re.compile(LIFETIME_PATTERN)
_PREFIX_RE = re.compile(PREFIX_PATTERN)
_PASSWORD_RE = re.compile(PASSWORD_PATTERN)


class MalformedArgument(argparse.ArgumentTypeError):
    def __init__(self, name, value, expected):
        super().__init__(f'{name} was {value} but must match {expected}')
        self.name = name
        self.value = value


def _check(name, regex, pattern, value):
    text = str(value).strip()
    if not regex.fullmatch(text):
        raise MalformedArgument(name, value, pattern)
    return text


def lifetime(value):
    """'10m', '2h', '90s'"""
    return _check('lifetime', _LIFETIME_RE, LIFETIME_PATTERN, value)


def prefix(value):
    return _check('prefix', _PREFIX_RE, PREFIX_PATTERN, value)


def password(value):
    return _check('pw', _PASSWORD_RE, PASSWORD_PATTERN, value)


def response_format(value):
    fmt = parse_format(value)
    if fmt is None:
        raise MalformedArgument('response format', value,
                                'either of text/plain, text/javascript')
    return fmt
