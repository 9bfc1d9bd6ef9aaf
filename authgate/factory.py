"""Provides an app factory for the authentication gate service."""

from flask import Flask, Response, jsonify
from werkzeug.exceptions import HTTPException, NotFound, MethodNotAllowed

from . import AuthGate, routes
from .app_logging import setup_logger


def jsonify_exception(error: HTTPException) -> Response:
    exc_resp = error.get_response()
    response: Response = jsonify(reason=error.description)
    response.status_code = exc_resp.status_code
    return response


def create_app() -> Flask:
    """Initialize an instance of the authentication gate service."""
    app = Flask('authgate')
    app.config.from_pyfile('config.py')
    setup_logger(app.config['LOGLEVEL'], app.config['LOGFORMAT_JSON'])

    AuthGate(app)

    app.register_blueprint(routes.blueprint)
    app.errorhandler(NotFound)(jsonify_exception)
    app.errorhandler(MethodNotAllowed)(jsonify_exception)
    return app
