"""
    accept_encoding.headers
    ~~~~~~~~~~~~~~~~~~~~~~~

    Helpers for pulling `Accept-Encoding` values out of whatever the caller
    stores its request headers in.

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import re
from collections.abc import Mapping

from werkzeug.datastructures import EnvironHeaders, Headers

from accept_encoding.exceptions import InvalidEncoding


ACCEPT_ENCODING = 'Accept-Encoding'

# visible ascii, space and horizontal tab
_header_value_re = re.compile(r'[\t\x20-\x7e]*')


def _to_text(value):
    if isinstance(value, bytes):
        try:
            value = value.decode('ascii')
        except UnicodeDecodeError as e:
            raise InvalidEncoding(
                "Accept-Encoding header is not valid ascii"
            ) from e

    if not isinstance(value, str):
        raise TypeError("Expected header value, got %r" % (value,))

    if _header_value_re.fullmatch(value) is None:
        raise InvalidEncoding(
            "Accept-Encoding header contains invalid characters: %r" % value
        )

    return value


def get_accept_encoding_values(headers):
    """Returns every occurrence of the `Accept-Encoding` header as a list of
    strings, in the order they were received.

    `headers` can be `None` (no headers at all), a single header value, a
    werkzeug :class:`~werkzeug.datastructures.Headers` object or anything
    else providing ``getlist``, a WSGI environ, a plain mapping of header
    names to values, or an iterable of header values.  Header names are
    matched case-insensitively.

    :raises InvalidEncoding:
        if a value cannot be interpreted as header text.
    """
    if headers is None:
        values = []
    elif isinstance(headers, (str, bytes)):
        values = [headers]
    elif hasattr(headers, 'getlist'):
        values = headers.getlist(ACCEPT_ENCODING)
    elif isinstance(headers, Mapping):
        if 'wsgi.version' in headers:
            headers = EnvironHeaders(headers)
        else:
            try:
                headers = Headers(headers)
            except ValueError as e:
                raise InvalidEncoding(
                    "Request headers contain invalid characters"
                ) from e
        values = headers.getlist(ACCEPT_ENCODING)
    else:
        values = list(headers)

    return [_to_text(value) for value in values]
