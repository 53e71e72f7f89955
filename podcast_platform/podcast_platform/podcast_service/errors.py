"""
Error taxonomy shared by the account and catalog services.

Domain errors are raised and caught inside a single service operation and
reach callers only as the ``error`` string of a result. ``InvalidTokenError``
is the exception: ``JwtService.verify`` raises it to its caller.
"""
from typing import Optional


class ServiceError(Exception):
    """Base class for errors whose message is safe to show to a caller."""
    default_message = "Internal server error occurred."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateAccountError(ServiceError):
    default_message = "There is a user with that email already"


class NotFoundError(ServiceError):
    default_message = "Not found"


class InvalidCredentialsError(ServiceError):
    default_message = "Wrong password"


class InvalidTokenError(ServiceError):
    default_message = "Invalid token"


class InternalError(ServiceError):
    pass


class EntityNotFoundError(Exception):
    """Raised by a store's fetch-or-fail lookup."""
    def __init__(self, entity: str, identifier):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"Could not find any entity of type {entity} matching id {identifier}")
