"""
Push input: either an in-memory buffer or an open binary file.

The size must be known before the upload request is sent, so it is
resolved when the Payload is built. Pipes, FIFOs and other non-regular
files report no usable size, so they are read into memory up front.
"""

import io
import os
import stat


class Payload:
    def __init__(self, body, size):
        self.body = body
        self.size = size

    @classmethod
    def from_bytes(cls, data):
        return cls(bytes(data), len(data))

    @classmethod
    def from_file(cls, f, size=None):
        """Wrap an open binary file. Size comes from file metadata unless given."""
        if size is None:
            if not _is_regular(f):
                with f:
                    return cls.from_bytes(f.read())
            size = _file_size(f)
        return cls(f, size)

    @classmethod
    def from_path(cls, path):
        return cls.from_file(open(path, 'rb'))

    @property
    def is_file(self):
        return not isinstance(self.body, bytes)

    def request_body(self):
        """
        The body to hand to requests for the upload.

        Files are wrapped so requests takes the length from self.size and
        sends a plain Content-Length body. An empty payload is sent as b''
        since requests would otherwise fall back to chunked encoding.
        """
        if not self.size:
            return b''
        if not self.is_file:
            return self.body
        return SizedReader(self.body, self.size)

    def close(self):
        if self.is_file:
            self.body.close()


class SizedReader:
    """
    Read-only view of a file that never yields more than size bytes.

    Has __len__ and no __iter__, so requests treats it as a body of known
    length instead of a stream of unknown length.
    """

    def __init__(self, f, size):
        self._f = f
        self._remaining = size
        self._size = size

    def read(self, n=-1):
        if self._remaining <= 0:
            return b''
        if n is None or n < 0 or n > self._remaining:
            n = self._remaining
        chunk = self._f.read(n)
        self._remaining -= len(chunk)
        return chunk

    def __len__(self):
        return self._size


def _is_regular(f):
    try:
        return stat.S_ISREG(os.fstat(f.fileno()).st_mode)
    except (AttributeError, OSError, io.UnsupportedOperation):
        # In-memory file objects (BytesIO and friends) are seekable.
        return True


def _file_size(f):
    try:
        return os.fstat(f.fileno()).st_size
    except (AttributeError, OSError, io.UnsupportedOperation):
        pos = f.tell()
        end = f.seek(0, io.SEEK_END)
        f.seek(pos)
        return end - pos
