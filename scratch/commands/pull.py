"""
scratch pull — write a file's raw bytes to stdout or a local path.

  scratch pull                    most recently pushed file
  scratch pull creds.aws:f0022e5a
  scratch pull abc123 --pw hunter2
  scratch pull abc123 --anon      no credentials (public files only)
  scratch pull abc123 -o out.bin
"""

import os
import sys

import requests

from scratch import api, options
from scratch.format import green


def cmd_pull(args):
    opts = options.resolve(args)
    output_path = getattr(args, 'output', None)

    if not output_path:
        _pull(args, opts, sys.stdout.buffer)
        return

    sink = OutputFile(os.path.expanduser(output_path))
    try:
        _pull(args, opts, sink)
    finally:
        sink.close()
    print(f'{green("✓", stream=sys.stderr)} saved {output_path}', file=sys.stderr)


def _pull(args, opts, sink):
    api.pull(
        opts.endpoint, requests.Session(), sink,
        file_id=getattr(args, 'id', None),
        api_key=opts.api_key,
        pw=getattr(args, 'pw', None),
        fmt=opts.fmt,
    )


class OutputFile:
    """
    Binary sink for -o that opens (and truncates) its path only once the
    server has answered with data, so a failed pull leaves an existing
    file untouched. Open errors surface from write()/flush() as OSError.
    """

    def __init__(self, path):
        self.path = path
        self._f = None

    def _file(self):
        if self._f is None:
            self._f = open(self.path, 'wb')
        return self._f

    def write(self, chunk):
        return self._file().write(chunk)

    def flush(self):
        # Called once the download is complete; an empty file still gets created.
        self._file().flush()

    def close(self):
        if self._f is not None:
            self._f.close()
