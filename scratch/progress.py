"""
Upload progress bar for `scratch push --file`.

Usage:
    bar = ProgressBar(total_bytes, label='uploading')
    reader = ProgressReader(f, total_bytes, bar)   # pass as the request body
    ...
    bar.done()

Renders to stderr only when stderr is a TTY, so pipes stay clean.
"""

import sys
import time

from scratch.format import cyan, dim, green, human_size

_BAR_WIDTH = 30

# Carriage return + erase to end of line.
_CLEAR = '\r\033[K'


class ProgressBar:
    """
    Renders a bar like:
      uploading    [=============>        ]  62%  6.2M/10.0M  1.4M/s
    """

    def __init__(self, total: int, label: str = '', stream=None):
        self.total = max(total, 1)
        self.label = label
        self.sent = 0
        self._stream = stream or sys.stderr
        self._start = time.monotonic()
        self._tty = self._stream.isatty()
        self._render()

    def update(self, n: int):
        self.sent = min(self.sent + n, self.total)
        self._render()

    def done(self):
        if not self._tty:
            return
        elapsed = time.monotonic() - self._start
        speed = self.total / elapsed if elapsed > 0 else 0
        tick = green('✓', stream=self._stream)
        self._stream.write(
            f'{_CLEAR}  {tick} {self.label}  {human_size(self.total)}  '
            f'({human_size(speed)}/s  {elapsed:.1f}s)\n'
        )
        self._stream.flush()

    def clear(self):
        """Erase a partial bar, e.g. before printing an error."""
        if self._tty:
            self._stream.write(_CLEAR)
            self._stream.flush()

    def _render(self):
        if not self._tty:
            return
        pct = self.sent / self.total
        filled = int(pct * _BAR_WIDTH)
        arrow = '>' if filled < _BAR_WIDTH else ''
        fill = '=' * filled + arrow
        empty = ' ' * (_BAR_WIDTH - filled - len(arrow))
        bar = dim('[', self._stream) + cyan(fill, self._stream) + empty + dim(']', self._stream)

        elapsed = time.monotonic() - self._start
        speed = self.sent / elapsed if elapsed > 0.1 else 0
        speed_s = f'  {human_size(speed)}/s' if speed > 0 else ''
        self._stream.write(
            f'\r  {self.label:<12} {bar} {int(pct * 100):>3}%  '
            f'{human_size(self.sent)}/{human_size(self.total)}{speed_s}'
        )
        self._stream.flush()


class ProgressReader:
    """File wrapper that advances a ProgressBar as the body is read."""

    def __init__(self, f, size, bar):
        self._f = f
        self._size = size
        self._bar = bar

    def read(self, n=-1):
        chunk = self._f.read(n)
        if chunk:
            self._bar.update(len(chunk))
        return chunk

    def __len__(self):
        return self._size

    def close(self):
        self._f.close()
