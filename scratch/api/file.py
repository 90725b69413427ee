"""
File push/pull API calls.

Push flow (two sequential requests, never concurrent):
  1. POST /scratch/file?lifetime=&private=&pw=&burn=&prefix=
       → creates an empty file, body carries the new id
  2. POST /scratch/file/<id>
       → streams the payload with an exact Content-Length

If step 1 fails nothing exists server-side. If step 2 fails the file from
step 1 already exists; the raised error carries its id in `file_id`, and
the reporter callback has already been handed the step 1 body.

Pull flow:
  GET /scratch/file/<id or "latest">?pw=
       → bytes are streamed straight into the caller's sink
"""

import logging

import requests

from .errors import ApiError, LocalIOError, ServerContractError, TransportError
from .extract import extract_id
from .formats import content_type_format
from .helpers import CHUNK, bearer, read_text, send, url

logger = logging.getLogger(__name__)

LATEST = 'latest'


def push(endpoint, session, api_key, payload, report, lifetime=None,
         private=None, pw=None, burn=None, prefix=None, fmt=None):
    """
    Create a file and upload payload into it.

    report(body) is called with the raw create-response body as soon as
    the id is known, before the upload starts. Returns the upload response
    text. The payload is closed when this returns or raises.
    """
    try:
        created_id, body = _create(endpoint, session, api_key, fmt,
                                   lifetime=lifetime, private=private, pw=pw,
                                   burn=burn, prefix=prefix)
        report(body)
        try:
            return _upload(endpoint, session, api_key, payload, created_id, fmt)
        except ApiError as e:
            logger.debug('upload of %s failed after create: %s', created_id, e)
            e.file_id = created_id
            raise
    finally:
        payload.close()


def _create(endpoint, session, api_key, fmt, **modifiers):
    params = {}
    for name, value in modifiers.items():
        if value is None:
            continue
        params[name] = _param(value)

    headers = bearer(api_key)
    headers['Content-Length'] = '0'
    res = send(session, 'POST', url(endpoint, 'file'), fmt=fmt,
               headers=headers, params=params)

    content_type = content_type_format(res.headers.get('Content-Type'))
    body = read_text(res)
    if content_type is None:
        raise ServerContractError('no content_type')
    created_id = extract_id(body, content_type)
    if created_id is None:
        raise ServerContractError('no id')
    logger.debug('created file %s', created_id)
    return created_id, body


def _upload(endpoint, session, api_key, payload, created_id, fmt):
    headers = bearer(api_key)
    headers['Content-Length'] = str(payload.size)
    res = send(session, 'POST', url(endpoint, f'file/{created_id}'), fmt=fmt,
               headers=headers, data=payload.request_body())
    return read_text(res)


def _param(value):
    # Booleans go over the wire lowercase, like the service expects.
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def pull(endpoint, session, output, file_id=None, api_key=None, pw=None,
         fmt=None):
    """
    Stream a file into output (any object with a binary write()).

    Without file_id the most recently pushed file is fetched. Without
    api_key the request is anonymous, which the server only allows for
    public files. Returns ''; the payload is never returned as text.
    """
    headers = bearer(api_key) if api_key else {}
    params = {'pw': pw} if pw is not None else {}
    target = url(endpoint, f'file/{file_id or LATEST}')

    res = send(session, 'GET', target, fmt=fmt, headers=headers,
               params=params, stream=True)
    with res:
        chunks = res.iter_content(chunk_size=CHUNK)
        while True:
            try:
                chunk = next(chunks, None)
            except requests.RequestException as e:
                raise TransportError.from_exception(e) from e
            if chunk is None:
                break
            if not chunk:
                continue
            try:
                output.write(chunk)
            except OSError as e:
                raise LocalIOError.from_exception(e) from e
        flush = getattr(output, 'flush', None)
        try:
            if flush:
                flush()
        except OSError as e:
            raise LocalIOError.from_exception(e) from e
    return ''
