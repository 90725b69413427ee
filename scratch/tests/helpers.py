"""
Shared test helpers: canned responses built without a network.
"""

import io

import requests
from requests.adapters import BaseAdapter

ENDPOINT = 'https://x.io'


def make_response(status=200, body=b'', content_type='text/plain'):
    """Build a real requests.Response whose body streams from memory."""
    if isinstance(body, str):
        body = body.encode()
    res = requests.Response()
    res.status_code = status
    res.url = ENDPOINT
    if content_type:
        res.headers['Content-Type'] = content_type
    res.raw = io.BytesIO(body)
    return res


def call_url(call):
    """Target URL of a recorded session.request call."""
    return call.args[1]


def call_headers(call):
    return call.kwargs.get('headers', {})


class RecordingAdapter(BaseAdapter):
    """
    Transport adapter for a real requests.Session: records each
    PreparedRequest (and its body, read out while still open) and answers
    from a queue of canned responses.
    """

    def __init__(self, *responses):
        super().__init__()
        self.responses = list(responses)
        self.sent = []
        self.bodies = []

    def send(self, request, **kwargs):
        body = request.body
        if hasattr(body, 'read'):
            body = body.read()
        self.sent.append(request)
        self.bodies.append(body)
        res = self.responses.pop(0)
        res.request = request
        return res

    def close(self):
        pass


def recording_session(*responses):
    session = requests.Session()
    session.trust_env = False
    adapter = RecordingAdapter(*responses)
    session.mount('https://', adapter)
    return session, adapter
