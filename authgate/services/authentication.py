"""
Client for the remote authentication service.

The authentication service owns all knowledge of users and tokens. We hand it
the bearer token from the request and it tells us whether the token is good,
using the same ``{"message": ..., "code": ...}`` structure that we pass back
to clients.
"""

import logging
from typing import Any, Optional, Tuple

import requests
from flask import Flask, current_app, g, has_app_context

from .. import domain
from ..exceptions import AuthServiceUnavailable, BadAuthResponse, \
    ConfigurationError


logger = logging.getLogger(__name__)

VALIDATE_PATH = '/auth/auth_jwt'
PLACEHOLDER_ID = 0
"""The service looks up identity from the token itself; the id is ignored."""


class AuthServiceSession(object):
    """Issues validation requests to the authentication service."""

    def __init__(self, base_url: str, timeout: Optional[float] = None) -> None:
        """Create a new HTTP session."""
        self.endpoint = base_url.rstrip('/') + VALIDATE_PATH
        self.timeout = timeout
        self._session = requests.Session()
        self._adapter = requests.adapters.HTTPAdapter(max_retries=0)
        self._session.mount('http://', self._adapter)
        self._session.mount('https://', self._adapter)
        logger.debug('New AuthServiceSession for %s', self.endpoint)

    def validate(self, token: str) -> domain.ValidationOutcome:
        """
        Ask the authentication service to verify a token.

        Parameters
        ----------
        token : str
            Bearer token from the client request.

        Returns
        -------
        :class:`.domain.ValidationOutcome`
            May or may not indicate success; callers should check
            :attr:`.domain.ValidationOutcome.succeeded`.

        Raises
        ------
        :class:`.AuthServiceUnavailable`
            If the service could not be reached at all.
        :class:`.BadAuthResponse`
            If the transfer failed part-way, or the body could not be decoded.

        """
        payload = {'id': PLACEHOLDER_ID, 'jwt': token, 'verify': True}
        try:
            response = self._session.post(self.endpoint, json=payload,
                                          timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.debug('Failed to auth: %s', e)
            if e.response is None:
                raise AuthServiceUnavailable(str(e)) from e
            # Whatever was left over from a failed transfer (e.g. the last of
            # too many redirects) is not read.
            raise BadAuthResponse(str(e)) from e
        logger.debug('Auth service responded with status %i',
                     response.status_code)

        try:
            code, message = _decode(response)
        except ValueError as e:
            logger.debug('Failed to decode the response: %s', e)
            raise BadAuthResponse(str(e)) from e
        return domain.ValidationOutcome(response.status_code, code, message)

    def close(self) -> None:
        """Release pooled connections to the authentication service."""
        self._session.close()

    def __enter__(self) -> 'AuthServiceSession':
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _decode(response: requests.Response) -> Tuple[int, str]:
    """Read ``code`` and ``message`` from an auth service response body."""
    data: Any = response.json()
    if not isinstance(data, dict):
        raise ValueError('response body is not a JSON object')
    # A missing code is not read as success (0); the request is refused.
    code = data.get('code')
    if not isinstance(code, int) or isinstance(code, bool):
        raise ValueError('response body has no integer code')
    message = data.get('message', '')
    if not isinstance(message, str):
        raise ValueError('response body message is not a string')
    return code, message


def init_app(app: Optional[Flask] = None) -> None:
    """
    Set required configuration defaults for the application.

    Parameters
    ----------
    app : :class:`flask.Flask`

    """
    if app is not None:
        app.config.setdefault('AUTH_SERVER_URL', None)
        app.config.setdefault('AUTH_SERVER_TIMEOUT', None)
        app.teardown_appcontext(close_session)


def get_session(app: Optional[Flask] = None) -> AuthServiceSession:
    """
    Create a new authentication service session.

    Parameters
    ----------
    app : :class:`flask.Flask`
        Defaults to the current application.

    Return
    ------
    :class:`.AuthServiceSession`

    """
    config = app.config if app is not None else current_app.config
    base_url = config.get('AUTH_SERVER_URL')
    if not base_url:
        raise ConfigurationError('Missing required config parameter: '
                                 'AUTH_SERVER_URL')
    return AuthServiceSession(base_url, config.get('AUTH_SERVER_TIMEOUT'))


def current_session() -> AuthServiceSession:
    """Get the authentication service session for this request context."""
    if not has_app_context():
        raise ConfigurationError('No application context')
    if 'auth_service' not in g:
        g.auth_service = get_session()
    session: AuthServiceSession = g.auth_service
    return session


def close_session(exception: Optional[BaseException] = None) -> None:
    """Close the session for this application context, if there is one."""
    session: Optional[AuthServiceSession] = g.pop('auth_service', None)
    if session is not None:
        session.close()
