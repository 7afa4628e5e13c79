"""Exceptions collection for the rtlite library."""

import typing


class RtError(Exception):
    """ Super class of all Rt Errors """


class AuthorizationError(RtError):
    """ Exception raised when module cannot access :term:`API` due to invalid
    or missing credentials. """


class UnexpectedResponseError(RtError):
    """ Exception raised when unexpected HTTP code is received, or when the
    status line of the message carries a code other than 200. """

    def __init__(self, message: str, status_code: typing.Optional[int] = None) -> None:
        """ Initialization."""
        super().__init__(message)
        self.status_code = status_code


class UnexpectedMessageFormatError(RtError):
    """ Exception raised when the response envelope is malformed, e.g. the
    first line is not an RT status line as in `RT/4.0.7 200 Ok`. """


class NotFoundError(RtError):
    """Exception raised if requested resource is not found."""


class TransportError(RtError):
    """ Encapsulation of various exceptions indicating network problems. """

    def __init__(self, message: str, cause: Exception) -> None:
        """ Initialization of exception extended by cause parameter.

        Only the type of *cause* goes into the message, its text may contain
        the request URL including credentials.

        :keyword message: Exception details
        :keyword cause: Cause exception
        """
        super().__init__(f'{message} (Caused by {type(cause).__name__})')
        self.cause = cause


class DecodeError(RtError):
    """ Exception raised when a message payload cannot be decoded into records. """

    def __init__(self, message: str, cause: typing.Optional[Exception] = None) -> None:
        super().__init__(message)
        self.cause = cause


class MalformedLineError(DecodeError):
    """ Exception raised when a payload line has no ``key: value`` form. """


class CoercionError(DecodeError):
    """ Exception raised when a value does not fit the declared field type. """


class InvalidTargetError(DecodeError):
    """ Exception raised when decoding into something that is not a record shape. """
