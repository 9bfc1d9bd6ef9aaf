"""
Authentication of requests to Flask routes.

This module provides :func:`authenticated`, a decorator used to protect Flask
routes that may only be used by clients holding a token that the remote
authentication service accepts.

.. code-block:: python

   from authgate.decorators import authenticated


   @blueprint.route('/streams/<string:room>', methods=['GET'])
   @authenticated
   def get_stream(room: str):
       '''Only authenticated clients may see a stream.'''
       ...


When the decorated route function is called...

- The bearer token is taken from the ``Authorization`` header.
- The token is sent to the authentication service at ``AUTH_SERVER_URL``.
- If the token is missing or rejected, or the service is unavailable, a JSON
  error response is returned and the route is not called.
- Otherwise the route is called with the original parameters, and its return
  value is passed back untouched.

"""

from typing import Any, Callable
from functools import wraps

from flask import Response, jsonify, request

from . import domain
from .interceptor import authenticate
from .services import authentication


def failure_response(failure: domain.FailureResponse) -> Response:
    """Render a :class:`.domain.FailureResponse` as a JSON response."""
    response: Response = jsonify(failure.to_dict())
    response.status_code = failure.status
    return response


def authenticated(func: Callable) -> Callable:
    """Require a valid bearer token before executing ``func``."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        failure = authenticate(request.headers,
                               authentication.current_session())
        if failure is not None:
            return failure_response(failure)
        return func(*args, **kwargs)
    return wrapper
