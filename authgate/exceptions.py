"""Exceptions."""


class InvalidCredential(RuntimeError):
    """No usable bearer credential could be found on the request."""


class MissingAuthHeader(InvalidCredential):
    """The request has no Authorization header."""


class EmptyToken(InvalidCredential):
    """The Authorization header carries no token."""


class MalformedScheme(InvalidCredential):
    """The Authorization header does not use the Bearer scheme."""


class AuthServiceError(RuntimeError):
    """The remote authentication service could not validate the token."""


class AuthServiceUnavailable(AuthServiceError):
    """The remote authentication service could not be reached."""


class BadAuthResponse(AuthServiceError):
    """The remote authentication service replied with an unreadable body."""


class ConfigurationError(RuntimeError):
    """Raised when a required service parameter is missing."""
