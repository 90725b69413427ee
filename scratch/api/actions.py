"""
Account-scoped API calls: list, delete, stats.

Each returns the raw response text; rendering is left to the caller and
depends on the response format that was requested.
"""

from .helpers import bearer, read_text, send, url


def list_files(endpoint, session, api_key, fmt=None):
    """List metadata for every file on the account."""
    res = send(session, 'GET', url(endpoint, 'file'), fmt=fmt,
               headers=bearer(api_key))
    return read_text(res)


def delete(endpoint, session, api_key, file_id, fmt=None):
    res = send(session, 'DELETE', url(endpoint, f'file/{file_id}'), fmt=fmt,
               headers=bearer(api_key))
    return read_text(res)


def stats(endpoint, session, api_key, fmt=None):
    """Usage and capacity stats for the account."""
    res = send(session, 'GET', url(endpoint, 'me/stats'), fmt=fmt,
               headers=bearer(api_key))
    return read_text(res)
