"""
Credential bootstrap against the control-plane host.

Uses Basic auth (handle:password) to fetch an api key and the account's
dataplane endpoint. Both lookups must succeed; there is no partial result.
"""

import base64
from collections import namedtuple

from scratch import BOOTSTRAP_HOST
from .helpers import read_text, send

BootstrapResult = namedtuple('BootstrapResult', ['api_key', 'dataplane_endpoint'])


def bootstrap(session, handle, password):
    """Return a BootstrapResult. Nothing is persisted here."""
    token = base64.b64encode(f'{handle}:{password}'.encode()).decode('ascii')
    authorization = f'Basic {token}'
    return BootstrapResult(
        api_key=_fetch(session, 'api_key', authorization),
        dataplane_endpoint=_fetch(session, 'dataplane_endpoint', authorization),
    )


def _fetch(session, component, authorization):
    res = send(session, 'GET', f'{BOOTSTRAP_HOST}/bootstrap/{component}',
               headers={'Authorization': authorization})
    return read_text(res).strip()
