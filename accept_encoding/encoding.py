"""
    accept_encoding.encoding
    ~~~~~~~~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import enum

from accept_encoding.exceptions import UnknownEncoding


class Encoding(enum.Enum):
    """The content-codings understood during negotiation.

    Alongside the real content-codings there are two markers: ``ANY`` for the
    ``*`` wildcard and ``NO_PREFERENCE`` for a client that did not express a
    usable preference.  Neither marker may be sent back in a
    `Content-Encoding` header.
    """
    GZIP = 'gzip'
    DEFLATE = 'deflate'
    BROTLI = 'br'
    ZSTD = 'zstd'
    IDENTITY = 'identity'
    ANY = '*'
    NO_PREFERENCE = None

    @classmethod
    def from_token(cls, token):
        """Returns the encoding matching `token` exactly, or `None`.
        """
        if token is None:
            return None
        return _BY_TOKEN.get(token)

    @property
    def is_gzip(self):
        return self is Encoding.GZIP

    @property
    def is_deflate(self):
        return self is Encoding.DEFLATE

    @property
    def is_brotli(self):
        return self is Encoding.BROTLI

    @property
    def is_zstd(self):
        return self is Encoding.ZSTD

    @property
    def is_identity(self):
        return self is Encoding.IDENTITY

    @property
    def is_any(self):
        return self is Encoding.ANY

    @property
    def is_no_preference(self):
        return self is Encoding.NO_PREFERENCE

    @property
    def is_concrete(self):
        """`True` for encodings that can appear in a `Content-Encoding`
        header.
        """
        return self not in (Encoding.ANY, Encoding.NO_PREFERENCE)

    def to_header(self):
        """Returns a string suitable for use as a `Content-Encoding` header.

        :raises ValueError: for the wildcard and no-preference markers.
        """
        if not self.is_concrete:
            raise ValueError(
                "%s is not a valid content-coding" % self.name
            )
        return self.value


_BY_TOKEN = {
    encoding.value: encoding
    for encoding in Encoding
    if encoding.value is not None
}


def parse_encoding_header(string):
    """Parses a single encoding token, such as the value of a
    `Content-Encoding` header.

    Unlike the `Accept-Encoding` parser this treats an unrecognized token as
    an error.

    :raises UnknownEncoding: if `string` is not a recognized token.
    """
    encoding = Encoding.from_token(string.strip())
    if encoding is None:
        raise UnknownEncoding("Unknown encoding: %r" % string)
    return encoding
