"""
Request plumbing shared by every dataplane call.

URL convention:
  <endpoint>/scratch/<action>     e.g. https://x.io/scratch/file/abc123

send() is the single point where requests exceptions and non-2xx
responses are turned into ApiError subclasses.
"""

import logging

import requests

from scratch import PRODUCT
from .body import decode_body
from .errors import ServerContractError, ServerStatusError, TransportError
from .formats import accept_header

logger = logging.getLogger(__name__)

CHUNK = 256 * 1024  # 256 KB read/write chunks


def url(endpoint, action):
    """Join endpoint + product + action with exactly one slash between each."""
    return f'{endpoint.rstrip("/")}/{PRODUCT}/{action}'


def bearer(api_key):
    return {'Authorization': f'Bearer {api_key}'}


def send(session, method, target, fmt=None, headers=None, **kwargs):
    """
    Issue one request and return the response if it was 2xx.

    Raises TransportError if the request could not complete and
    ServerStatusError for any non-2xx status.
    """
    headers = dict(headers or {})
    accept = accept_header(fmt)
    if accept:
        headers['Accept'] = accept

    logger.debug('%s %s', method, target)
    try:
        res = session.request(method, target, headers=headers, **kwargs)
    except requests.RequestException as e:
        logger.debug('%s %s failed: %s', method, target, e)
        raise TransportError.from_exception(e) from e

    logger.debug('%s %s -> HTTP %s', method, target, res.status_code)
    if not res.ok:
        err = ServerStatusError.from_response(res)
        res.close()
        raise err
    return res


def read_text(res):
    """Decode a successful response body or fail with a contract error."""
    try:
        return decode_body(res)
    except (UnicodeDecodeError, LookupError):
        raise ServerContractError('bad encoding') from None
    except requests.RequestException as e:
        raise TransportError.from_exception(e) from e

