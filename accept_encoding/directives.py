"""
    accept_encoding.directives
    ~~~~~~~~~~~~~~~~~~~~~~~~~~

    Parsing of individual `Accept-Encoding` header values.

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
from accept_encoding.encoding import Encoding
from accept_encoding.exceptions import InvalidEncoding, UnknownEncoding


def _parse_q(string):
    try:
        q = float(string)
    except ValueError as e:
        raise InvalidEncoding("Invalid quality value: %r" % string) from e

    # also rejects nan
    if not 0.0 <= q <= 1.0:
        raise InvalidEncoding("Quality value out of range: %r" % string)

    return q


class Directive(object):
    """A single ``encoding;q=value`` entry from an `Accept-Encoding` header.
    """
    def __init__(self, encoding, q=1.0):
        if not isinstance(encoding, Encoding):
            raise TypeError("Expected Encoding, got %r" % (encoding,))
        if encoding.is_no_preference:
            raise ValueError("NO_PREFERENCE cannot appear in a directive")
        self.encoding = encoding

        if isinstance(q, str):
            q = _parse_q(q)
        elif not 0.0 <= q <= 1.0:
            raise InvalidEncoding("Quality value out of range: %r" % q)
        self.q = float(q)

    def __iter__(self):
        yield self.encoding
        yield self.q

    def __eq__(self, other):
        if not isinstance(other, Directive):
            return NotImplemented
        return self.encoding is other.encoding and self.q == other.q

    def __hash__(self):
        return hash((self.encoding, self.q))

    def __repr__(self):
        return '{name}(Encoding.{encoding}, q={q!r})'.format(
            name=self.__class__.__name__,
            encoding=self.encoding.name,
            q=self.q,
        )

    def __str__(self):
        return self.to_header()

    def to_header(self):
        header = self.encoding.value

        if self.q != 1:
            header += ';q=%s' % self.q

        return header


class AcceptEncoding(object):
    """Ordered collection of the directives of one or more `Accept-Encoding`
    header values.
    """
    def __init__(self, directives=()):
        self._directives = []
        for directive in directives:
            if isinstance(directive, Encoding):
                directive = (directive,)
            if not isinstance(directive, Directive):
                directive = Directive(*directive)
            self._directives.append(directive)

    def __iter__(self):
        return iter(self._directives)

    def __len__(self):
        return len(self._directives)

    def __getitem__(self, index):
        return self._directives[index]

    def __eq__(self, other):
        if not isinstance(other, AcceptEncoding):
            return NotImplemented
        return self._directives == other._directives

    def __add__(self, other):
        return AcceptEncoding(self._directives + list(other))

    def __repr__(self):
        return '{name}({directives!r})'.format(
            name=self.__class__.__name__,
            directives=self._directives,
        )

    def __str__(self):
        return self.to_header()

    def to_header(self):
        """Return an equivalent string suitable for use as an
        `Accept-Encoding` header.
        """
        return ','.join(directive.to_header() for directive in self)


def split_accept_encoding_string(string):
    """Yields a ``(token, q)`` pair for each non-empty, comma separated
    segment of `string`.  `q` is the raw string following ``;q=``, or `None`
    if the segment does not carry one.
    """
    for segment in string.split(','):
        segment = segment.strip()
        if not segment:
            continue

        token, sep, q = segment.partition(';q=')
        if not sep:
            q = None

        yield token.strip(), q


def parse_accept_encoding_header(string, *, strict=False):
    """Creates a new `AcceptEncoding` object from a single `Accept-Encoding`
    header value.

    Unrecognized tokens are skipped unless `strict` is set.  A malformed
    quality value aborts the whole parse.

    :raises InvalidEncoding:
        if a quality value is not a number between ``0`` and ``1``.
    :raises UnknownEncoding:
        in strict mode, if a token is not a recognized encoding.
    """
    directives = []
    for token, q in split_accept_encoding_string(string):
        encoding = Encoding.from_token(token)
        if encoding is None:
            if strict:
                raise UnknownEncoding("Unknown encoding: %r" % token)
            continue

        if q is None:
            directives.append(Directive(encoding))
        else:
            directives.append(Directive(encoding, _parse_q(q)))

    return AcceptEncoding(directives)
