"""
Response format negotiation.

The service renders every response either as plain text or as a minimal
javascript object. The same aliases are accepted from the command line, the
config file, and the Content-Type header of a response.
"""

import enum


class ResponseFormat(enum.Enum):
    PLAIN = 'text/plain'
    JAVASCRIPT = 'text/javascript'

    def __str__(self):
        return self.value


_ALIASES = {
    'txt':             ResponseFormat.PLAIN,
    'text':            ResponseFormat.PLAIN,
    'text/plain':      ResponseFormat.PLAIN,
    'js':              ResponseFormat.JAVASCRIPT,
    'json':            ResponseFormat.JAVASCRIPT,
    'javascript':      ResponseFormat.JAVASCRIPT,
    'text/javascript': ResponseFormat.JAVASCRIPT,
}

ALIASES = tuple(_ALIASES)


def parse_format(value):
    """
    Map an alias to a ResponseFormat. Case-sensitive.
    Returns None for anything unrecognised; callers decide if that's an error.
    """
    if isinstance(value, ResponseFormat):
        return value
    return _ALIASES.get(value)


def content_type_format(header):
    """
    Parse a Content-Type header value ('text/plain; charset=utf-8') into a
    ResponseFormat, ignoring media-type parameters. None when absent/unknown.
    """
    if not header:
        return None
    media_type = header.split(';', 1)[0].strip()
    return parse_format(media_type)


def accept_header(fmt):
    """Return the Accept header value for fmt, or None to send no header."""
    fmt = parse_format(fmt)
    return fmt.value if fmt else None
