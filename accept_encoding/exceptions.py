"""
    accept_encoding.exceptions
    ~~~~~~~~~~~~~~~~~~~~~~~~~~

    Errors raised while parsing an `Accept-Encoding` header.

    All errors derive from :class:`AcceptEncodingError`, which is also a
    :class:`~werkzeug.exceptions.BadRequest`, so an error left to propagate
    through a werkzeug application renders as a ``400 BAD REQUEST``.

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import enum

from werkzeug.exceptions import BadRequest


class ErrorKind(enum.Enum):
    #: A quality value was not a number in ``[0.0, 1.0]``, or the header
    #: could not be interpreted as text.
    INVALID_ENCODING = 'invalid encoding'

    #: A token did not name a recognized encoding.  Only raised by strict
    #: entry points.
    UNKNOWN_ENCODING = 'unknown encoding'


class AcceptEncodingError(BadRequest):
    kind = None

    def __init__(self, description=None, *, kind=None):
        super(AcceptEncodingError, self).__init__(description)
        if kind is not None:
            self.kind = kind

    def __repr__(self):
        return '<{name} kind={kind} {description!r}>'.format(
            name=self.__class__.__name__,
            kind=self.kind.name if self.kind is not None else None,
            description=self.description,
        )


class InvalidEncoding(AcceptEncodingError):
    kind = ErrorKind.INVALID_ENCODING


class UnknownEncoding(AcceptEncodingError):
    kind = ErrorKind.UNKNOWN_ENCODING
