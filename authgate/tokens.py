"""Functions for working with bearer tokens on incoming requests."""

from typing import Mapping, Optional

from .exceptions import MissingAuthHeader, EmptyToken, MalformedScheme

BEARER_PREFIX = 'Bearer '


def get_token_string(headers: Mapping[str, str]) -> str:
    """
    Get the bearer token from the ``Authorization`` request header.

    Parameters
    ----------
    headers : mapping
        Request headers. Should be a case-insensitive mapping such as
        :class:`werkzeug.datastructures.Headers`; only the first
        ``Authorization`` value is considered.

    Returns
    -------
    str
        The token, exactly as it follows the ``Bearer`` prefix.

    Raises
    ------
    :class:`.MissingAuthHeader`
        If there is no ``Authorization`` header.
    :class:`.EmptyToken`
        If the header, or the token following the prefix, is empty.
    :class:`.MalformedScheme`
        If the header does not start with ``Bearer``.

    """
    auth_header: Optional[str] = headers.get('Authorization')
    if auth_header is None:
        raise MissingAuthHeader('no auth method found')
    if auth_header == '':
        raise EmptyToken('token not found')
    if not auth_header.startswith(BEARER_PREFIX):
        raise MalformedScheme('token format error')
    token = auth_header[len(BEARER_PREFIX):]
    if token == '':
        raise EmptyToken('token not found')
    return token
