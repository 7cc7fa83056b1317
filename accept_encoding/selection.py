"""
    accept_encoding.selection
    ~~~~~~~~~~~~~~~~~~~~~~~~~

    Choosing a content-coding from the `Accept-Encoding` headers of a
    request.

    The selector walks the directives in the order the client sent them.
    The first directive with a quality of (about) ``1`` wins outright.
    Otherwise the directive with the highest quality wins, with earlier
    directives beating later ones of equal quality.  Directives with a
    quality of ``0`` never win.

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
from accept_encoding.encoding import Encoding
from accept_encoding.directives import (
    AcceptEncoding, parse_accept_encoding_header,
)
from accept_encoding.headers import get_accept_encoding_values


#: Quality values closer than this to ``1`` count as a top preference and
#: end the search.
QUALITY_TOLERANCE = 0.01


def _parse_all(headers, strict):
    values = get_accept_encoding_values(headers)
    if not values:
        return None

    directives = []
    for value in values:
        directives.extend(parse_accept_encoding_header(value, strict=strict))
    return AcceptEncoding(directives)


def select_best(headers, *, strict=False):
    """Returns the `Encoding` the client most prefers.

    Returns ``Encoding.NO_PREFERENCE`` if the header is absent or no
    directive has a non-zero quality, and ``Encoding.ANY`` if the wildcard
    won, in which case any encoding is acceptable.

    :param headers:
        The request headers.  See
        :func:`~accept_encoding.headers.get_accept_encoding_values` for the
        accepted types.
    :param strict:
        Raise :exc:`~accept_encoding.exceptions.UnknownEncoding` for
        unrecognized tokens instead of ignoring them.

    :raises InvalidEncoding: if any quality value is malformed.
    """
    accept = _parse_all(headers, strict)
    if accept is None:
        return Encoding.NO_PREFERENCE

    best = Encoding.NO_PREFERENCE
    best_q = 0.0
    for directive in accept:
        if abs(directive.q - 1.0) < QUALITY_TOLERANCE:
            return directive.encoding

        if directive.q > best_q:
            best = directive.encoding
            best_q = directive.q

    return best


def parse(headers, *, strict=False):
    """Like :func:`select_best`, but a winning wildcard is reported as
    ``Encoding.NO_PREFERENCE`` so that the result is always either a
    concrete encoding or no preference at all.
    """
    best = select_best(headers, strict=strict)
    if best.is_any:
        return Encoding.NO_PREFERENCE
    return best


def rank(headers, *, strict=False):
    """Returns a list of ``(encoding, q)`` tuples for every recognized
    directive, in the order they appear in the request.  No sorting is done.
    """
    accept = _parse_all(headers, strict)
    if accept is None:
        return []
    return [tuple(directive) for directive in accept]
