"""The request filter that combines the token and binding checks."""

import logging
from typing import Mapping, NamedTuple, Optional, Union

from . import binding, tokens
from .domain import Claims, RejectReason

logger = logging.getLogger(__name__)


class Decision(NamedTuple):
    """Whether a request may proceed. ``reason`` is for logs only."""

    allowed: bool
    claims: Optional[Claims] = None
    reason: Optional[RejectReason] = None


class ApproovCheck:
    """
    Decides whether a request carries a valid Approov token.

    Holds nothing but the secret and the binding header name, both fixed at
    construction, so one instance can serve concurrent requests.

    Parameters
    ----------
    secret : bytes
        The Approov secret. An empty secret rejects every request.
    binding_header : str or None
        Name of the header the token must be bound to. ``None`` disables the
        binding check.

    """

    __slots__ = ('_secret', '_binding_header')

    def __init__(self, secret: Optional[Union[bytes, str]],
                 binding_header: Optional[str] = None) -> None:
        if isinstance(secret, str):
            secret = secret.encode('utf-8')
        self._secret = secret or b''
        self._binding_header = binding_header or None

    @property
    def binding_header(self) -> Optional[str]:
        """The header tokens are bound to, if binding is enabled."""
        return self._binding_header

    def check(self, headers: Mapping[str, str]) -> Decision:
        """Run the token check, then the binding check if enabled."""
        result = tokens.verify(headers, self._secret)
        claims = result.claims
        if claims is None:
            return Decision(False, reason=result.reason)

        if self._binding_header is not None:
            bound = binding.verify(headers, claims, self._binding_header)
            if not bound.valid:
                return Decision(False, reason=bound.reason)
        return Decision(True, claims=claims)

    def __call__(self, headers: Mapping[str, str]) -> bool:
        return self.check(headers).allowed
