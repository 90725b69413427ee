"""
Recover the created file id from a create response body.

The service guarantees a minimal body shape, so this is a narrow pattern
match rather than a JSON parse: anything other than exactly {"id": "..."}
is treated as "no id".
"""

import re

from .formats import ResponseFormat

_ID_RE = re.compile(r'\{\s*"id"\s*:\s*"([^"]*)"\s*\}')


def extract_id(text, fmt):
    """Return the id contained in text for the given format, or None."""
    if fmt is ResponseFormat.JAVASCRIPT:
        match = _ID_RE.fullmatch(text.strip())
        file_id = match.group(1) if match else None
    elif fmt is ResponseFormat.PLAIN:
        file_id = text.strip()
    else:
        return None
    return file_id or None
