"""
Console output helpers: minimal ANSI color, byte sizes, error lines.

Color priority:
  NO_COLOR env var     → always off
  FORCE_COLOR env var  → on, even without a TTY
  otherwise            → on only when the stream's fd is a real TTY

Response data always goes to stdout uncolored so it can be piped;
diagnostics go to stderr.
"""

import os
import sys


# ── Sizes ─────────────────────────────────────────────────────────────────────

def human_size(n):
    """1234567 → '1.2M'"""
    for unit in ('B', 'K', 'M', 'G', 'T'):
        if n < 1024:
            return f'{int(n)}B' if unit == 'B' else f'{n:.1f}{unit}'
        n /= 1024
    return f'{n:.1f}P'


# ── ANSI color ────────────────────────────────────────────────────────────────

def _ansi_on(stream=None) -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    target = stream if stream is not None else sys.stdout
    try:
        return os.isatty(target.fileno())
    except Exception:
        return getattr(target, 'isatty', lambda: False)()


def _c(code: str, text: str, stream=None) -> str:
    if _ansi_on(stream):
        return f'\033[{code}m{text}\033[0m'
    return text


def green(text, stream=None):  return _c('1;32', text, stream)
def red(text, stream=None):    return _c('1;31', text, stream)
def dim(text, stream=None):    return _c('2', text, stream)
def cyan(text, stream=None):   return _c('1;36', text, stream)


# ── Output ────────────────────────────────────────────────────────────────────

def err(msg):
    """Print a formatted error to stderr."""
    print(f'{red("✗", stream=sys.stderr)} {msg}', file=sys.stderr)


def render(text):
    """Print response text trimmed; blank responses print nothing."""
    text = (text or '').strip()
    if text:
        print(text)
        sys.stdout.flush()
