"""
Public API surface for the scratch protocol client.
Import from here to keep command modules clean.
"""

from .actions import delete, list_files, stats
from .auth import BootstrapResult, bootstrap
from .errors import (ApiError, ErrorKind, LocalIOError, ServerContractError,
                     ServerStatusError, TransportError)
from .extract import extract_id
from .file import pull, push
from .formats import ResponseFormat, accept_header, content_type_format, parse_format
from .payload import Payload

__all__ = [
    'push', 'pull', 'list_files', 'delete', 'stats',
    'bootstrap', 'BootstrapResult',
    'Payload',
    'ResponseFormat', 'parse_format', 'content_type_format', 'accept_header',
    'extract_id',
    'ApiError', 'ErrorKind', 'TransportError', 'ServerStatusError',
    'ServerContractError', 'LocalIOError',
]
