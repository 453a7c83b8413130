"""
Approov token binding.

The mobile app binds its Approov token to another request header by putting
``base64(sha256(<header value>))`` in the ``pay`` claim. Recomputing that
value from the header on the request and comparing it with the claim ties the
token to one credential: replaying it with another ``Authorization`` header
fails the check.
"""

import base64
import hashlib
import hmac
import logging
from typing import Mapping

from .domain import BindingResult, Claims, RejectReason

logger = logging.getLogger(__name__)

BINDING_HEADER = 'Authorization'
BINDING_CLAIM = 'pay'


def _header_bytes(value: str) -> bytes:
    # WSGI hands over header values as latin-1 decoded text.
    try:
        return value.encode('latin-1')
    except UnicodeEncodeError:
        return value.encode('utf-8')


def expected_pay(value: str) -> str:
    """Compute the ``pay`` claim that binds a token to a header ``value``."""
    digest = hashlib.sha256(_header_bytes(value)).digest()
    return base64.b64encode(digest).decode('ascii')


def verify(headers: Mapping[str, str], claims: Claims,
           header: str = BINDING_HEADER) -> BindingResult:
    """
    Check that verified token ``claims`` are bound to the binding header.

    ``claims`` must come from a successful :func:`approov_auth.tokens.verify`.
    """
    pay = claims.get(BINDING_CLAIM)
    if not pay:
        logger.debug('Missing Approov token binding claim')
        return BindingResult(False, RejectReason.MISSING_BINDING_CLAIM)

    value = headers.get(header)
    if not value:
        logger.debug('Missing Approov token binding header: %s', header)
        return BindingResult(False, RejectReason.MISSING_BINDING_HEADER)

    if not isinstance(pay, str) or not hmac.compare_digest(
            pay.encode('utf-8'), expected_pay(value).encode('ascii')):
        logger.debug('Approov token binding mismatch')
        return BindingResult(False, RejectReason.BINDING_MISMATCH)
    return BindingResult(True)
