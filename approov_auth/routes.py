"""Routes of the Approov-protected service."""

from flask import Blueprint, Response, jsonify

blueprint = Blueprint('approov', __name__, url_prefix='')


@blueprint.route('/', methods=['GET'])
def hello() -> Response:
    """Greet a client that passed the Approov check."""
    return jsonify({'message': 'Hello, World!'})
