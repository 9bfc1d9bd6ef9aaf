"""Defines the values exchanged with the authentication service."""

from typing import Any, Dict, NamedTuple

SUCCESS = 0
INVALID_TOKEN = 301
LOGIN_AGAIN_NEEDED = 302
INTERNAL_ERROR = 500
DATABASE_FAILURE = 501

CONTENT_TYPE_JSON = 'application/json'


class ValidationOutcome(NamedTuple):
    """Decoded result of a token validation call."""

    status_code: int
    """HTTP status of the authentication service response."""

    code: int
    """Application status code reported by the authentication service."""

    message: str
    """Human-readable explanation reported by the authentication service."""

    @property
    def succeeded(self) -> bool:
        """Whether the authentication service accepted the token."""
        return self.code == SUCCESS


class FailureResponse(NamedTuple):
    """A rejection to be written back to the client."""

    status: int
    code: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Generate the JSON-serializable response body."""
        return {'data': {'message': self.message, 'code': self.code}}
