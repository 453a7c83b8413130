"""Tests for :mod:`approov_auth.binding`."""

import base64
import hashlib
from unittest import TestCase

from werkzeug.datastructures import Headers

from .. import binding
from ..domain import RejectReason


def _pay(value: bytes) -> str:
    return base64.b64encode(hashlib.sha256(value).digest()).decode('ascii')


class TestExpectedPay(TestCase):
    """Tests for :func:`binding.expected_pay`."""

    def test_expected_pay(self):
        """The claim is the standard base64 of the SHA-256 digest."""
        self.assertEqual(binding.expected_pay('Bearer abc'),
                         _pay(b'Bearer abc'))
        self.assertTrue(binding.expected_pay('Bearer abc').endswith('='))

    def test_latin1_header(self):
        """Header text from WSGI is hashed as the original bytes."""
        self.assertEqual(binding.expected_pay('caf\xe9'), _pay(b'caf\xe9'))

    def test_non_latin1_text(self):
        """Text outside latin-1 is hashed as UTF-8."""
        self.assertEqual(binding.expected_pay('€'),
                         _pay('€'.encode('utf-8')))


class TestVerify(TestCase):
    """Tests for :func:`binding.verify`."""

    def setUp(self):
        self.claims = {'pay': _pay(b'Bearer abc'), 'exp': 1}

    def test_bound(self):
        """The claim matches the hash of the Authorization header."""
        headers = Headers({'Authorization': 'Bearer abc'})
        result = binding.verify(headers, self.claims)
        self.assertTrue(result.valid)
        self.assertIsNone(result.reason)

    def test_other_credential(self):
        """A different Authorization header fails the check."""
        headers = Headers({'Authorization': 'Bearer abd'})
        result = binding.verify(headers, self.claims)
        self.assertFalse(result.valid)
        self.assertEqual(result.reason, RejectReason.BINDING_MISMATCH)

    def test_any_changed_byte(self):
        """Changing any single byte of the header fails the check."""
        value = 'Bearer abc'
        for i in range(len(value)):
            changed = value[:i] + chr(ord(value[i]) ^ 1) + value[i + 1:]
            result = binding.verify(Headers({'Authorization': changed}),
                                    self.claims)
            self.assertFalse(result.valid, f'{changed} is not bound')

    def test_no_normalization(self):
        """Whitespace and casing differences are not tolerated."""
        for value in ('Bearer abc ', ' Bearer abc', 'bearer abc',
                      'Bearer  abc'):
            result = binding.verify(Headers({'Authorization': value}),
                                    self.claims)
            self.assertFalse(result.valid, f'{value!r} is not bound')

    def test_claim_encoding(self):
        """The claim must be padded standard base64, not a variant."""
        headers = Headers({'Authorization': 'Bearer abc'})
        pay = self.claims['pay']
        variants = [pay.rstrip('='), pay + '\n',
                    base64.b16encode(hashlib.sha256(b'Bearer abc').digest())
                    .decode('ascii'),
                    hashlib.sha256(b'Bearer abc').hexdigest()]
        if '+' in pay or '/' in pay:
            variants.append(pay.replace('+', '-').replace('/', '_'))
        for variant in variants:
            result = binding.verify(headers, {'pay': variant})
            self.assertFalse(result.valid, f'{variant} is not accepted')

    def test_no_claim(self):
        """The token has no binding claim."""
        headers = Headers({'Authorization': 'Bearer abc'})
        for claims in ({}, {'pay': ''}, {'pay': None}):
            result = binding.verify(headers, claims)
            self.assertFalse(result.valid)
            self.assertEqual(result.reason,
                             RejectReason.MISSING_BINDING_CLAIM)

    def test_claim_not_text(self):
        """A binding claim that is not a string never matches."""
        headers = Headers({'Authorization': 'Bearer abc'})
        for pay in (12345, ['x'], {'a': 'b'}, True):
            result = binding.verify(headers, {'pay': pay})
            self.assertFalse(result.valid)
            self.assertEqual(result.reason, RejectReason.BINDING_MISMATCH)

    def test_claim_not_ascii(self):
        """Non-ASCII text in the claim is a mismatch, not an error."""
        headers = Headers({'Authorization': 'Bearer abc'})
        result = binding.verify(headers, {'pay': 'é' * 44})
        self.assertEqual(result.reason, RejectReason.BINDING_MISMATCH)

    def test_no_header(self):
        """The request has no binding header."""
        for headers in (Headers(), Headers({'Authorization': ''})):
            result = binding.verify(headers, self.claims)
            self.assertFalse(result.valid)
            self.assertEqual(result.reason,
                             RejectReason.MISSING_BINDING_HEADER)

    def test_other_header(self):
        """The binding header name is configurable."""
        claims = {'pay': _pay(b'user-42')}
        headers = Headers({'X-Device-Session': 'user-42',
                           'Authorization': 'Bearer abc'})
        self.assertTrue(binding.verify(headers, claims,
                                       'x-device-session').valid)
        self.assertFalse(binding.verify(headers, claims).valid)
