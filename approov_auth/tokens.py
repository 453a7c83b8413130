"""Functions for verifying the Approov token on incoming requests."""

import logging
import re
from typing import Mapping, Optional, Union

import jwt

from .domain import Claims, RejectReason, TokenResult
from .exceptions import InvalidToken

logger = logging.getLogger(__name__)

TOKEN_HEADER = 'Approov-Token'
ALGORITHM = 'HS256'

_COMPACT_JWT = re.compile(r'[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+')

# Only exp, nbf and iat are checked; other claims are left to the app.
_OPTIONS = {'verify_aud': False, 'verify_iss': False, 'verify_sub': False,
            'verify_jti': False}


def decode(token: str, secret: bytes) -> Claims:
    """
    Verify an Approov token and return its claims.

    The Approov secret is a raw binary value, not a JWKS key set, so a token
    carrying a ``kid`` in its header can never be checked against it and is
    refused outright.

    Raises
    ------
    :class:`.InvalidToken`
        With the :class:`.RejectReason` that applies.

    """
    if not _COMPACT_JWT.fullmatch(token):
        raise InvalidToken(RejectReason.MALFORMED_TOKEN)

    try:
        header = jwt.get_unverified_header(token)
    except jwt.exceptions.PyJWTError as e:
        raise InvalidToken(RejectReason.MALFORMED_TOKEN, str(e)) from e

    if 'kid' in header:
        raise InvalidToken(RejectReason.DISALLOWED_HEADER,
                           'Token header carries a key id')
    if header.get('alg') != ALGORITHM:
        raise InvalidToken(RejectReason.DISALLOWED_HEADER,
                           f'Unexpected algorithm: {header.get("alg")}')

    try:
        claims: Claims = jwt.decode(token, secret, algorithms=[ALGORITHM],
                                    options=_OPTIONS)
    except jwt.exceptions.InvalidSignatureError as e:
        raise InvalidToken(RejectReason.SIGNATURE_INVALID, str(e)) from e
    except jwt.exceptions.InvalidAlgorithmError as e:
        raise InvalidToken(RejectReason.DISALLOWED_HEADER, str(e)) from e
    except jwt.exceptions.ExpiredSignatureError as e:
        raise InvalidToken(RejectReason.TOKEN_EXPIRED, str(e)) from e
    except (jwt.exceptions.ImmatureSignatureError,
            jwt.exceptions.InvalidIssuedAtError) as e:
        raise InvalidToken(RejectReason.INVALID_CLAIMS, str(e)) from e
    except jwt.exceptions.DecodeError as e:
        raise InvalidToken(RejectReason.MALFORMED_TOKEN, str(e)) from e
    except jwt.exceptions.PyJWTError as e:
        raise InvalidToken(RejectReason.INVALID_TOKEN, str(e)) from e
    return claims


def verify(headers: Mapping[str, str],
           secret: Optional[Union[bytes, str]]) -> TokenResult:
    """
    Verify the Approov token on a request.

    Parameters
    ----------
    headers : Mapping
        Case-insensitive request headers, e.g. :class:`werkzeug.datastructures.Headers`.
    secret : bytes
        The Approov secret. If empty, every token is rejected.

    Returns
    -------
    :class:`.TokenResult`
        With ``claims`` on success, otherwise with the reject ``reason``.

    """
    token = headers.get(TOKEN_HEADER)
    if not token:
        logger.debug('Missing Approov token')
        return TokenResult(reason=RejectReason.MISSING_TOKEN)

    if not secret:
        logger.error('Missing Approov secret; rejecting all requests')
        return TokenResult(reason=RejectReason.MISSING_SECRET)
    if isinstance(secret, str):
        secret = secret.encode('utf-8')

    try:
        claims = decode(token, secret)
    except InvalidToken as e:
        logger.debug('Approov token not valid: %s', e)
        return TokenResult(reason=e.reason)
    return TokenResult(claims=claims)
