"""Flask extension that runs the Approov check before each request."""

import base64
import binascii
import logging
from typing import Any, Optional, Union

from flask import Flask, Response, current_app, g, jsonify, request

from .check import ApproovCheck
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = 'approov_auth'


def _enabled(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


class Approov(object):
    """
    Rejects requests that do not carry a valid Approov token.

    Reads from ``Flask.config``:

    - ``APPROOV_SECRET``: the binary secret, or else
      ``APPROOV_BASE64_SECRET``: its base64 encoding.
    - ``APPROOV_TOKEN_BINDING``: require tokens bound to
      ``APPROOV_TOKEN_BINDING_HEADER`` (default ``Authorization``).
    - ``APPROOV_AUTH_DEBUG``: log why each request was rejected.

    The secret is loaded on the first request. Rejected requests get a
    ``401`` with an empty JSON object, whichever check failed. Claims of
    accepted tokens are available as ``flask.g.approov_claims``.
    """

    def __init__(self, app: Optional[Flask] = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Attach :meth:`.check_request` to the Flask app."""
        app.extensions['approov'] = self
        app.config.setdefault('APPROOV_TOKEN_BINDING', False)
        app.config.setdefault('APPROOV_TOKEN_BINDING_HEADER', 'Authorization')
        if _enabled(app.config.get('APPROOV_AUTH_DEBUG')):
            self.auth_debug()
            logger.debug('APPROOV_AUTH_DEBUG is set, logging reject reasons')
        app.before_request(self.check_request)

    @staticmethod
    def load_secret(app: Flask) -> bytes:
        """
        Get the Approov secret from the app config.

        Raises
        ------
        :class:`.ConfigurationError`
            If ``APPROOV_BASE64_SECRET`` is not valid base64.

        """
        secret: Union[bytes, str, None] = app.config.get('APPROOV_SECRET')
        if secret:
            return secret.encode('utf-8') if isinstance(secret, str) else secret

        encoded = app.config.get('APPROOV_BASE64_SECRET')
        if not encoded:
            return b''
        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ConfigurationError('APPROOV_BASE64_SECRET is not valid '
                                     'base64') from e

    def get_check(self, app: Flask) -> ApproovCheck:
        """The :class:`.ApproovCheck` for ``app``, built on first use."""
        check: Optional[ApproovCheck] = app.extensions.get('approov.check')
        if check is None:
            try:
                secret = self.load_secret(app)
            except ConfigurationError as e:
                logger.error('%s; rejecting all requests', e)
                secret = b''
            binding_header = None
            if _enabled(app.config['APPROOV_TOKEN_BINDING']):
                binding_header = app.config['APPROOV_TOKEN_BINDING_HEADER']
            check = ApproovCheck(secret, binding_header)
            app.extensions['approov.check'] = check
        return check

    def check_request(self) -> Optional[Response]:
        """Reject the current request unless its Approov token checks out."""
        decision = self.get_check(current_app).check(request.headers)
        if not decision.allowed:
            logger.debug('Rejected %s %s: %s', request.method, request.path,
                         decision.reason.value if decision.reason else None)
            response: Response = jsonify({})
            response.status_code = 401
            return response
        g.approov_claims = decision.claims
        return None

    def auth_debug(self) -> None:
        """Set the approov_auth loggers to DEBUG."""
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)
