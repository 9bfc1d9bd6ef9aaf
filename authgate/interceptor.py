"""
Decides whether a request may proceed to a protected handler.

:func:`authenticate` is the gate itself: it takes the request headers and an
authentication service session, and returns either ``None`` (the request may
be forwarded) or a single :class:`.domain.FailureResponse` describing why it
was rejected. It never touches the response; the framework-specific wrappers
in :mod:`.decorators` and :mod:`.middleware` write whatever it returns.

The outcomes are:

- No usable bearer token: 401 with code 301 (invalid token).
- Authentication service unreachable, or its reply unreadable: 500 with code
  500 (internal error).
- Authentication service rejects the token: its own HTTP status, code, and
  message, passed through as-is.
- Authentication service accepts the token: ``None``.
"""

import logging
from http import HTTPStatus
from typing import Mapping, Optional, Protocol

from . import domain, tokens
from .exceptions import InvalidCredential, AuthServiceError

logger = logging.getLogger(__name__)


class TokenValidator(Protocol):
    """Anything that can validate a bearer token remotely."""

    def validate(self, token: str) -> domain.ValidationOutcome:
        ...


def authenticate(headers: Mapping[str, str],
                 validator: TokenValidator) -> Optional[domain.FailureResponse]:
    """
    Authenticate a request using its ``Authorization`` header.

    Parameters
    ----------
    headers : mapping
        Case-insensitive request headers.
    validator : :class:`.TokenValidator`
        Usually a :class:`.services.authentication.AuthServiceSession`.

    Returns
    -------
    :class:`.domain.FailureResponse` or None
        ``None`` if the request should be forwarded to the protected handler.

    """
    try:
        token = tokens.get_token_string(headers)
    except InvalidCredential as e:
        logger.info('Failed to get the token: %s', e)
        return domain.FailureResponse(HTTPStatus.UNAUTHORIZED,
                                      domain.INVALID_TOKEN, str(e))

    try:
        outcome = validator.validate(token)
    except AuthServiceError as e:
        logger.info('Failed to auth: %s', e)
        return domain.FailureResponse(HTTPStatus.INTERNAL_SERVER_ERROR,
                                      domain.INTERNAL_ERROR, str(e))

    if not outcome.succeeded:
        logger.info('Invalid token: %s', outcome.message)
        return domain.FailureResponse(outcome.status_code, outcome.code,
                                      outcome.message)
    logger.debug('Request is authenticated, proceeding')
    return None
