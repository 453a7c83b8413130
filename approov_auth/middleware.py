"""WSGI middleware for applications that are not built on Flask."""

import logging
from typing import Callable, Iterable, Optional, Union

from werkzeug.datastructures import EnvironHeaders
from werkzeug.wrappers import Response

from .check import ApproovCheck

logger = logging.getLogger(__name__)

WSGIApp = Callable[[dict, Callable], Iterable[bytes]]

CLAIMS_KEY = 'approov.claims'


class ApproovMiddleware(object):
    """
    Answers ``401`` for requests without a valid Approov token.

    Accepted requests are passed on to the wrapped application with the
    token claims in ``environ['approov.claims']``.

    .. code-block:: python

       app.wsgi_app = ApproovMiddleware(app.wsgi_app, secret, 'Authorization')

    """

    def __init__(self, app: WSGIApp, secret: Union[bytes, str, None],
                 binding_header: Optional[str] = None) -> None:
        self.app = app
        self.check = ApproovCheck(secret, binding_header)

    def __call__(self, environ: dict,
                 start_response: Callable) -> Iterable[bytes]:
        decision = self.check.check(EnvironHeaders(environ))
        if not decision.allowed:
            logger.debug('Rejected %s: %s', environ.get('PATH_INFO'),
                         decision.reason.value if decision.reason else None)
            response = Response('{}', status=401, mimetype='application/json')
            return response(environ, start_response)
        environ[CLAIMS_KEY] = decision.claims
        return self.app(environ, start_response)
