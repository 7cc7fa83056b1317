"""
    accept_encoding.wrappers
    ~~~~~~~~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
from werkzeug.utils import cached_property

from accept_encoding.selection import rank, select_best


class AcceptEncodingMixin(object):
    """Adds `Accept-Encoding` negotiation to a werkzeug request object.

    Parse errors are instances of
    :class:`~werkzeug.exceptions.BadRequest` and are raised on first access.
    """

    @cached_property
    def accept_encodings(self):
        """List of ``(encoding, q)`` tuples sent by the client."""
        return rank(self.headers)

    @cached_property
    def preferred_encoding(self):
        """The :class:`~accept_encoding.encoding.Encoding` the client most
        prefers.
        """
        return select_best(self.headers)
