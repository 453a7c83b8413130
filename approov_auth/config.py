"""Flask configuration for the Approov-protected service."""

import os

APPROOV_BASE64_SECRET = os.environ.get('APPROOV_BASE64_SECRET', '')
"""Base64 encoding of the binary Approov secret. Unset rejects all requests."""

APPROOV_TOKEN_BINDING = os.environ.get('APPROOV_TOKEN_BINDING', '0')
"""Set to ``1`` to require tokens bound to the binding header."""

APPROOV_TOKEN_BINDING_HEADER = os.environ.get('APPROOV_TOKEN_BINDING_HEADER',
                                              'Authorization')

APPROOV_AUTH_DEBUG = os.environ.get('APPROOV_AUTH_DEBUG', '0')

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
LOG_JSON = os.environ.get('LOG_JSON', '0')
