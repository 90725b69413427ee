"""
Response body decoding shared by the success path and error classification.
"""


def decode_body(res):
    """Strict decode: the declared charset if any, utf-8 otherwise."""
    charset = _charset(res.headers.get('Content-Type'))
    return res.content.decode(charset or 'utf-8')


def _charset(content_type):
    if not content_type:
        return None
    for param in content_type.split(';')[1:]:
        name, _, value = param.partition('=')
        if name.strip().lower() == 'charset':
            return value.strip().strip('"\'') or None
    return None
