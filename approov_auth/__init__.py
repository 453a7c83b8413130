"""
Approov token checks for Flask and WSGI applications.

Mobile app instances that pass attestation receive a short-lived Approov
token, an HS256 JWT signed with a secret shared between the attestation
service and this backend. Clients send it in the ``Approov-Token`` header on
each request.

:class:`Approov` attaches the check to a Flask app as a ``before_request``
hook. Requests without a valid token are answered with ``401`` and an empty
JSON object; nothing about the failure is revealed to the caller.

Optionally the token can be bound to another request header (usually
``Authorization``). The app computes ``base64(sha256(header))`` and puts it
in the ``pay`` claim before requesting the token, so a captured token is only
good together with the header value it was issued for.

.. code-block:: python

   from flask import Flask
   from approov_auth import Approov


   def create_web_app() -> Flask:
       app = Flask('someapp')
       app.config['APPROOV_BASE64_SECRET'] = '...'
       app.config['APPROOV_TOKEN_BINDING'] = True
       Approov(app)
       return app

"""

from .check import ApproovCheck, Decision
from .domain import RejectReason
from .extension import Approov

__all__ = ('Approov', 'ApproovCheck', 'Decision', 'RejectReason')
