"""Provides the check endpoint for reverse-proxy auth sub-requests."""

from flask import Blueprint, jsonify, Response

from . import domain
from .decorators import authenticated

blueprint = Blueprint('authgate', __name__, url_prefix='/auth')


@blueprint.route('/check', methods=['GET'])
@authenticated
def check() -> Response:
    """Confirm that the request carries a token the auth service accepts."""
    return jsonify({'data': {'message': 'ok', 'code': domain.SUCCESS}})
