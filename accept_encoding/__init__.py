"""
    accept_encoding
    ~~~~~~~~~~~~~~~

    Parsing and negotiation of the HTTP `Accept-Encoding` header.

    https://tools.ietf.org/html/rfc7231#section-5.3.4

    :copyright: (c) 2016 by Ben Mather.
    :license: BSD, see LICENSE for more details.
"""
from accept_encoding.encoding import Encoding, parse_encoding_header
from accept_encoding.exceptions import (
    ErrorKind, AcceptEncodingError, InvalidEncoding, UnknownEncoding,
)
from accept_encoding.directives import (
    Directive, AcceptEncoding,
    split_accept_encoding_string, parse_accept_encoding_header,
)
from accept_encoding.selection import select_best, parse, rank

__all__ = [
    'Encoding', 'parse_encoding_header',
    'ErrorKind', 'AcceptEncodingError', 'InvalidEncoding', 'UnknownEncoding',
    'Directive', 'AcceptEncoding',
    'split_accept_encoding_string', 'parse_accept_encoding_header',
    'select_best', 'parse', 'rank',
]
