"""
Failure classification for every remote call.

All core operations raise a subclass of ApiError; nothing is retried and
nothing is printed here. The command layer renders str(error) and exits.

  TransportError       the request never completed (DNS, refused, timeout)
  ServerStatusError    the server answered with a non-2xx status
  ServerContractError  a 2xx response we could not interpret
  LocalIOError         opening a push input or writing a pulled payload failed
"""

import enum

import requests

from .body import decode_body


class ErrorKind(enum.Enum):
    TRANSPORT = 'transport'
    SERVER_STATUS = 'server_status'
    SERVER_CONTRACT = 'server_contract'
    LOCAL_IO = 'local_io'


class ApiError(Exception):
    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message
        # Set on push upload-phase failures: the file already exists server-side.
        self.file_id = None

    def __str__(self):
        return self.message


class TransportError(ApiError):
    kind = ErrorKind.TRANSPORT

    @classmethod
    def from_exception(cls, exc):
        return cls(f'unexpected request error {exc}')


class ServerStatusError(ApiError):
    kind = ErrorKind.SERVER_STATUS

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code

    @classmethod
    def from_response(cls, res):
        """Use the response body as the message when it decodes cleanly."""
        try:
            message = decode_body(res)
        except (UnicodeDecodeError, LookupError, requests.RequestException):
            message = 'malformed response body'
        return cls(message, status_code=res.status_code)


class ServerContractError(ApiError):
    kind = ErrorKind.SERVER_CONTRACT

    def __init__(self, reason):
        super().__init__(f'malformed resp from server: {reason}')
        self.reason = reason


class LocalIOError(ApiError):
    kind = ErrorKind.LOCAL_IO

    @classmethod
    def from_exception(cls, exc):
        return cls(f'local io error: {exc}')
