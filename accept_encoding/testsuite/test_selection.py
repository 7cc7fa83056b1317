"""
    accept_encoding.testsuite.test_selection
    ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

    Tests for choosing an encoding from the request headers.

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import unittest

from werkzeug.datastructures import Headers

from accept_encoding import Encoding, select_best, parse, rank
from accept_encoding.exceptions import InvalidEncoding, UnknownEncoding


class SelectBestTestCase(unittest.TestCase):
    def test_absent(self):
        self.assertIs(Encoding.NO_PREFERENCE, select_best(None))
        self.assertIs(Encoding.NO_PREFERENCE, select_best(Headers()))
        self.assertIs(Encoding.NO_PREFERENCE, select_best({}))
        self.assertIs(Encoding.NO_PREFERENCE, select_best([]))

    def test_empty(self):
        self.assertIs(Encoding.NO_PREFERENCE, select_best(''))

    def test_single_encoding(self):
        for token, encoding in [
                ('gzip', Encoding.GZIP),
                ('deflate', Encoding.DEFLATE),
                ('br', Encoding.BROTLI),
                ('zstd', Encoding.ZSTD),
                ('identity', Encoding.IDENTITY)]:
            with self.subTest(token=token):
                self.assertIs(encoding, select_best(token))

    def test_multiple_encodings(self):
        self.assertIs(Encoding.GZIP, select_best('gzip, deflate, br'))
        self.assertIs(Encoding.BROTLI, select_best('br, gzip, deflate'))

    def test_single_encoding_with_qval(self):
        self.assertIs(Encoding.DEFLATE, select_best('deflate;q=1.0'))

    def test_exact_preference_last(self):
        self.assertIs(
            Encoding.BROTLI,
            select_best('gzip;q=0.5, deflate;q=0.9, br;q=1.0')
        )

    def test_implicit_preference_first(self):
        self.assertIs(
            Encoding.DEFLATE,
            select_best('deflate, gzip;q=1.0, *;q=0.5')
        )

    def test_exact_preference_middle(self):
        self.assertIs(
            Encoding.DEFLATE,
            select_best('gzip;q=0.5, deflate;q=1.0, *;q=0.5')
        )

    def test_highest_q(self):
        self.assertIs(
            Encoding.ZSTD,
            select_best('gzip;q=0.5, zstd;q=0.8, br;q=0.7')
        )

    def test_highest_q_tie(self):
        self.assertIs(
            Encoding.GZIP,
            select_best('gzip;q=0.5, zstd;q=0.5')
        )

    def test_tolerance(self):
        self.assertIs(
            Encoding.GZIP,
            select_best('gzip;q=0.995, br;q=1')
        )
        self.assertIs(
            Encoding.BROTLI,
            select_best('gzip;q=0.95, br;q=1')
        )

    def test_wildcard(self):
        result = select_best('gzip;q=0.5, deflate;q=0.75, *;q=1.0')
        self.assertIs(Encoding.ANY, result)
        self.assertFalse(result.is_concrete)

    def test_wildcard_highest_q(self):
        self.assertIs(Encoding.ANY, select_best('gzip;q=0.2, *;q=0.4'))

    def test_all_refused(self):
        self.assertIs(
            Encoding.NO_PREFERENCE,
            select_best('gzip;q=0, identity;q=0, *;q=0')
        )

    def test_unknown_only(self):
        self.assertIs(Encoding.NO_PREFERENCE, select_best('compress, x-foo'))

    def test_unknown_ignored(self):
        self.assertIs(
            Encoding.BROTLI,
            select_best('compress;q=1.0, br;q=0.9, gzip;q=0.5')
        )

    def test_strict(self):
        with self.assertRaises(UnknownEncoding):
            select_best('compress, gzip', strict=True)

    def test_invalid_q(self):
        self.assertRaises(InvalidEncoding, select_best, 'gzip;q=1.5')
        self.assertRaises(InvalidEncoding, select_best, 'br, gzip;q=oops')

    def test_multiple_headers(self):
        headers = Headers()
        headers.add('Accept-Encoding', 'gzip;q=0.5')
        headers.add('accept-encoding', 'br;q=0.8')
        self.assertIs(Encoding.BROTLI, select_best(headers))

    def test_multiple_headers_invalid(self):
        headers = Headers()
        headers.add('Accept-Encoding', 'gzip')
        headers.add('Accept-Encoding', 'br;q=2')
        self.assertRaises(InvalidEncoding, select_best, headers)

    def test_newline(self):
        self.assertRaises(InvalidEncoding, select_best, b'br\n')
        self.assertRaises(
            InvalidEncoding, select_best, {'Accept-Encoding': 'gzip\nX: 1'}
        )

    def test_idempotent(self):
        value = 'gzip;q=0.5, deflate;q=0.9, zstd;q=0.1'
        self.assertIs(select_best(value), select_best(value))


class ParseTestCase(unittest.TestCase):
    def test_absent(self):
        self.assertIs(Encoding.NO_PREFERENCE, parse(None))

    def test_concrete(self):
        self.assertIs(Encoding.GZIP, parse('gzip, deflate, br'))

    def test_wildcard(self):
        self.assertIs(
            Encoding.NO_PREFERENCE,
            parse('gzip;q=0.5, deflate;q=0.75, *;q=1.0')
        )

    def test_invalid_q(self):
        self.assertRaises(InvalidEncoding, parse, 'gzip;q=1.5')


class RankTestCase(unittest.TestCase):
    def test_absent(self):
        self.assertEqual([], rank(None))

    def test_list_encodings(self):
        self.assertEqual(
            [
                (Encoding.ZSTD, 1.0),
                (Encoding.DEFLATE, 0.8),
                (Encoding.BROTLI, 0.9),
            ],
            rank('zstd;q=1.0, deflate;q=0.8, br;q=0.9')
        )

    def test_ignore_unknown(self):
        self.assertEqual(
            [(Encoding.ZSTD, 1.0), (Encoding.BROTLI, 0.9)],
            rank('zstd;q=1.0, unknown;q=0.8, br;q=0.9')
        )

    def test_wildcard_kept(self):
        self.assertEqual(
            [(Encoding.GZIP, 1.0), (Encoding.ANY, 0.0)],
            rank('gzip, *;q=0')
        )

    def test_multiple_headers(self):
        self.assertEqual(
            [
                (Encoding.GZIP, 0.5),
                (Encoding.IDENTITY, 1.0),
                (Encoding.BROTLI, 0.25),
            ],
            rank(['gzip;q=0.5, identity', 'br;q=0.25'])
        )

    def test_many_headers(self):
        values = ['gzip;q=0.5', 'br;q=0.25', 'x-foo'] * 200
        self.assertEqual(
            [(Encoding.GZIP, 0.5), (Encoding.BROTLI, 0.25)] * 200,
            rank(values)
        )

    def test_newline(self):
        self.assertRaises(
            InvalidEncoding, rank, {'Accept-Encoding': 'gzip\nX-Evil: 1'}
        )

    def test_invalid_q(self):
        self.assertRaises(
            InvalidEncoding, rank, 'zstd;q=1.0, gzip;q=1.5, br;q=0.9'
        )
