"""Core concepts for Approov token checks."""

from enum import Enum
from typing import Any, Dict, NamedTuple, Optional

Claims = Dict[str, Any]
"""Decoded payload of a verified Approov token."""


class RejectReason(Enum):
    """Why a request failed the Approov check. Never sent to the client."""

    MISSING_TOKEN = 'missing token'
    MISSING_SECRET = 'missing secret'
    MALFORMED_TOKEN = 'malformed token'
    SIGNATURE_INVALID = 'signature invalid'
    DISALLOWED_HEADER = 'disallowed algorithm or key id'
    TOKEN_EXPIRED = 'token expired'
    INVALID_CLAIMS = 'invalid registered claims'
    INVALID_TOKEN = 'invalid token'

    MISSING_BINDING_CLAIM = 'missing binding claim'
    MISSING_BINDING_HEADER = 'missing binding header'
    BINDING_MISMATCH = 'binding mismatch'


class TokenResult(NamedTuple):
    """Outcome of verifying the Approov token on a request."""

    claims: Optional[Claims] = None
    """Set only if the token signature was verified."""

    reason: Optional[RejectReason] = None

    @property
    def ok(self) -> bool:
        """Whether the token was accepted."""
        return self.claims is not None


class BindingResult(NamedTuple):
    """Outcome of checking the token binding."""

    valid: bool
    reason: Optional[RejectReason] = None
