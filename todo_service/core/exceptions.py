"""
Error taxonomy for Todo Service.

Every error raised by the service layer is a ``ServiceError`` tagged with an
``ErrorKind``. The exception handlers in ``main`` translate errors into
responses using ``kind`` and ``status_code`` only; message text is for humans.
"""
import enum
from typing import Any, Dict, Optional


class ErrorKind(str, enum.Enum):
    """Closed set of fault kinds"""
    CALLER_FAULT = "caller_fault"
    UPSTREAM_FAULT = "upstream_fault"


class ServiceError(Exception):
    """Base class for all errors raised by the service layer."""

    kind: ErrorKind = ErrorKind.CALLER_FAULT
    status_code: int = 400

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def __repr__(self):
        return f"{type(self).__name__}(kind={self.kind.value}, message={self.message!r})"


class InvalidRequestError(ServiceError):
    """Bad input or a violated precondition, e.g. a todo without a valid owner."""


class NotFoundError(ServiceError):
    """A referenced entity does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} not found", {"entity": entity, "id": entity_id})


class AuthError(ServiceError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class ForbiddenError(ServiceError):
    """Authenticated, but not allowed."""

    status_code = 403


class UpstreamServiceError(ServiceError):
    """An external collaborator failed or answered with an unusable payload."""

    kind = ErrorKind.UPSTREAM_FAULT
    status_code = 502
