"""
Gates protected request handlers behind a remote authentication service.

Clients present a bearer token in the ``Authorization`` header. Rather than
verifying the token ourselves, we ask the authentication service (see
:mod:`.services.authentication`) whether it is valid, and only let the
request through to the protected handler if it is. Otherwise the client gets
a JSON error of the form ``{"data": {"message": ..., "code": ...}}``.

Use :func:`.decorators.authenticated` to protect individual Flask routes, or
:class:`.middleware.AuthGateMiddleware` to protect an entire WSGI
application.
"""

from typing import Optional

from flask import Flask

from .services import authentication


class AuthGate(object):
    """
    Configures a Flask application for use with :mod:`.decorators`.

    Intended for use in a Flask application factory, for example:

    .. code-block:: python

       from flask import Flask
       from authgate import AuthGate
       from someapp import routes


       def create_web_app() -> Flask:
          app = Flask('someapp')
          app.config.from_pyfile('config.py')
          AuthGate(app)
          app.register_blueprint(routes.blueprint)
          return app

    """

    def __init__(self, app: Optional[Flask] = None) -> None:
        """
        Initialize ``app`` with config defaults.

        Parameters
        ----------
        app : :class:`Flask`

        """
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """
        Set configuration defaults on the Flask app.

        ``AUTH_SERVER_URL`` must be set by the application before the first
        protected request is handled.

        Parameters
        ----------
        app : :class:`Flask`

        """
        self.app = app
        authentication.init_app(app)
