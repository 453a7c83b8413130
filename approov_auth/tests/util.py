"""Helpers for minting Approov tokens in tests."""

import hashlib
import hmac
import json
import time
from typing import Any, Dict, Optional

import jwt

SECRET = hashlib.sha256(b'approov test secret').digest()
"""A 32 byte binary secret, like the ones the Approov CLI hands out."""

OTHER_SECRET = hashlib.sha256(b'some other secret').digest()


def make_token(claims: Optional[Dict[str, Any]] = None,
               secret: bytes = SECRET, algorithm: str = 'HS256',
               headers: Optional[Dict[str, Any]] = None) -> str:
    """Sign ``claims`` the way the Approov service does; expires in 5 min."""
    payload: Dict[str, Any] = {'exp': int(time.time()) + 300,
                               'ip': '1.2.3.4', 'did': 'ExampleApproovTokenDID=='}
    payload.update(claims or {})
    return jwt.encode(payload, secret, algorithm=algorithm, headers=headers)


def tamper(token: str, segment: int) -> str:
    """Change the first character of one of the token's segments."""
    parts = token.split('.')
    first = parts[segment][0]
    parts[segment] = ('B' if first == 'A' else 'A') + parts[segment][1:]
    return '.'.join(parts)


def sign_raw(header: Dict[str, Any], payload: Dict[str, Any],
             secret: bytes = SECRET) -> str:
    """Sign a token with an arbitrary header, bypassing PyJWT's checks."""
    segments = [jwt.utils.base64url_encode(json.dumps(part).encode('utf-8'))
                for part in (header, payload)]
    signing_input = b'.'.join(segments)
    signature = hmac.new(secret, signing_input, hashlib.sha256).digest()
    return b'.'.join([signing_input,
                      jwt.utils.base64url_encode(signature)]).decode('ascii')
