"""WSGI middleware for gating a whole application behind authentication."""

import json
from typing import Callable, Iterable, Optional

from werkzeug.datastructures import EnvironHeaders
from werkzeug.wrappers import Response

from .domain import CONTENT_TYPE_JSON
from .interceptor import authenticate
from .services.authentication import AuthServiceSession

WSGIApp = Callable[[dict, Callable], Iterable[bytes]]


class AuthGateMiddleware(object):
    """
    Middleware that only lets authenticated requests through to ``app``.

    Each request is authenticated with :func:`.interceptor.authenticate`
    against the authentication service at ``auth_server_url``. Rejected
    requests get a single JSON error response; accepted requests are handed
    to the wrapped application with their original ``environ`` and
    ``start_response``.

    .. code-block:: python

       app.wsgi_app = AuthGateMiddleware(app.wsgi_app,
                                         'http://auth.internal:8080')

    """

    def __init__(self, app: WSGIApp, auth_server_url: str,
                 timeout: Optional[float] = None) -> None:
        """Wrap ``app``."""
        self.app = app
        self.auth_server_url = auth_server_url
        self.timeout = timeout

    def __call__(self, environ: dict,
                 start_response: Callable) -> Iterable[bytes]:
        """Authenticate the request, and forward it if allowed."""
        with AuthServiceSession(self.auth_server_url, self.timeout) as session:
            failure = authenticate(EnvironHeaders(environ), session)
        if failure is None:
            return self.app(environ, start_response)

        response = Response(json.dumps(failure.to_dict()),
                            status=failure.status,
                            content_type=CONTENT_TYPE_JSON)
        return response(environ, start_response)
