"""
    accept_encoding.testsuite
    ~~~~~~~~~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.

"""
import unittest

from accept_encoding.testsuite import (
    test_exceptions, test_encoding, test_directives, test_headers,
    test_selection, test_wrappers,
)


loader = unittest.TestLoader()
suite = unittest.TestSuite((
    loader.loadTestsFromModule(test_exceptions),
    loader.loadTestsFromModule(test_encoding),
    loader.loadTestsFromModule(test_directives),
    loader.loadTestsFromModule(test_headers),
    loader.loadTestsFromModule(test_selection),
    loader.loadTestsFromModule(test_wrappers),
))
