"""
scratch push — upload data and print the new file id.

  scratch push < notes.txt               push stdin (buffered in memory)
  scratch push --file ~/.aws/config      stream a file
  scratch push --lifetime 2h --burn      expire after 2h or first read
  scratch push --prefix creds.aws: --private --pw hunter2
  scratch push --url < notes.txt         print a full URL instead of the id
"""

import os
import sys

import requests

from scratch import PRODUCT, api, options
from scratch.api import ResponseFormat
from scratch.format import err, render
from scratch.progress import ProgressBar, ProgressReader


def cmd_push(args):
    opts = options.resolve(args)
    payload, bar = _payload(args)

    def report(body):
        if bar:
            bar.clear()
        print(_render_id(body, opts, getattr(args, 'url', False)))
        sys.stdout.flush()

    try:
        result = api.push(
            opts.endpoint, requests.Session(), opts.api_key, payload, report,
            lifetime=opts.lifetime,
            private=opts.private,
            pw=getattr(args, 'pw', None),
            burn=opts.burn,
            prefix=opts.prefix,
            fmt=opts.fmt,
        )
    except api.ApiError as e:
        if bar:
            bar.clear()
        err(str(e))
        if e.file_id:
            err(f'{e.file_id} was created but its upload failed. '
                f'Push again, or remove it with: scratch rm {e.file_id}')
        sys.exit(1)

    if bar:
        bar.done()
    render(result)


def _payload(args):
    """Return (Payload, ProgressBar or None) for --file / --stdin."""
    path = getattr(args, 'file', None)
    if not path:
        return api.Payload.from_bytes(sys.stdin.buffer.read()), None

    try:
        payload = api.Payload.from_path(os.path.expanduser(path))
    except OSError as e:
        raise api.LocalIOError.from_exception(e) from e
    if not payload.is_file or not sys.stderr.isatty():
        return payload, None
    bar = ProgressBar(payload.size, label='uploading')
    return api.Payload(ProgressReader(payload.body, payload.size, bar), payload.size), bar


def _render_id(body, opts, as_url):
    """
    The create body trimmed, or a full file URL with --url. JS-format bodies
    are objects, not bare ids, so they're always printed as-is.
    """
    text = body.strip()
    if not as_url or opts.fmt is ResponseFormat.JAVASCRIPT:
        return text
    return f'{opts.endpoint.rstrip("/")}/{PRODUCT}/file/{text}'
