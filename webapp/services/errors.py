"""
Storefront Errors

Error taxonomy shared by the session, profile and password-reset services.
Each error carries the message shown to the customer.
"""


class StorefrontError(Exception):
    """Base class for storefront errors."""

    error_code = "STOREFRONT_ERROR"

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self):
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(StorefrontError):
    """A form precondition failed; nothing was sent to the identity store."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message, field=None):
        super().__init__(message, {"field": field})


class NotFoundError(StorefrontError):
    """The identity store has no account for the given email."""

    error_code = "NOT_FOUND"

    def __init__(self, message, email=None):
        super().__init__(message, {"email": email})


class RemoteError(StorefrontError):
    """The identity store rejected or failed a mutation."""

    error_code = "REMOTE_ERROR"


class UnexpectedError(StorefrontError):
    """Anything else that went wrong during a submission."""

    error_code = "UNEXPECTED_ERROR"


class IdentityParseError(StorefrontError):
    """The persisted identity record could not be parsed."""

    error_code = "IDENTITY_PARSE_ERROR"

    def __init__(self, message, field=None):
        super().__init__(message, {"field": field})
