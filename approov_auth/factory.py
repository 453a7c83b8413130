"""Provides an app factory for the Approov-protected service."""

from typing import Any

from flask import Flask, Response, jsonify
from werkzeug.exceptions import NotFound

from . import routes
from .extension import Approov


def jsonify_not_found(error: NotFound) -> Response:
    response: Response = jsonify(error='Not Found.')
    response.status_code = error.code or 404
    return response


def create_app(**config: Any) -> Flask:
    """
    Initialize an instance of the service.

    Keyword arguments override values from ``config.py``.
    """
    app = Flask('approov_auth')
    app.config.from_pyfile('config.py')
    app.config.update(config)

    Approov(app)

    app.register_blueprint(routes.blueprint)
    app.errorhandler(NotFound)(jsonify_not_found)
    return app
