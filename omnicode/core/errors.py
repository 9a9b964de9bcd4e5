"""Tagged error taxonomy for the chat gateway.

Every failure the gateway can signal carries an ``ErrorKind`` and the HTTP
status it maps to. The API layer is the only place these are turned into
responses.
"""

from enum import Enum

GENERIC_SERVER_ERROR = "A critical server error occurred."
MISSING_FIELDS = "Missing required fields."
AUTH_FAILED = "Authentication failed."


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    AUTH = "auth"
    UPSTREAM_TRANSIENT = "upstream_transient"
    UPSTREAM_FATAL = "upstream_fatal"
    PERSISTENCE = "persistence"


class GatewayError(Exception):
    kind: ErrorKind = ErrorKind.UPSTREAM_FATAL
    status_code: int = 500
    public_message: str = GENERIC_SERVER_ERROR
    # Whether the underlying message is returned to the caller in "details"
    expose_details: bool = True

    def to_body(self) -> dict:
        body = {"status": "error", "message": self.public_message}
        if self.expose_details:
            body["details"] = str(self)
        return body


class RequestValidationError(GatewayError):
    kind = ErrorKind.VALIDATION
    status_code = 400
    public_message = MISSING_FIELDS
    expose_details = False


class AuthenticationError(GatewayError):
    """Missing, malformed or unverifiable bearer token."""

    kind = ErrorKind.AUTH
    status_code = 401
    public_message = AUTH_FAILED


class AuthorizationError(AuthenticationError):
    """Token is valid but belongs to a different user."""

    status_code = 403


class UpstreamTransientError(GatewayError):
    kind = ErrorKind.UPSTREAM_TRANSIENT


class UpstreamFatalError(GatewayError):
    kind = ErrorKind.UPSTREAM_FATAL


class PersistenceError(GatewayError):
    kind = ErrorKind.PERSISTENCE
