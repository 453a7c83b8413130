"""Web Server Gateway Interface entry-point."""

import os

from approov_auth.app_logging import setup_logger
from approov_auth.factory import create_app

__flask_app__ = None


def application(environ, start_response):    # type: ignore
    """WSGI application."""
    global __flask_app__
    if __flask_app__ is None:
        for key, value in environ.items():
            # uWSGI passes deployment config in the environ; config.py
            # reads it from os.environ.
            if key.startswith(('APPROOV_', 'LOG_')):
                os.environ[key] = str(value)
        __flask_app__ = create_app()
        setup_logger(__flask_app__.config['LOG_LEVEL'],
                     json=__flask_app__.config['LOG_JSON'] == '1')
    return __flask_app__(environ, start_response)
