"""
Domain errors shared by every app.

Services raise these; config.middleware.ApiErrorMiddleware turns them into a
JSON body of the form {"error": {"kind", "message", "details"}}.
"""


class FoundicError(Exception):
    """Base class for errors surfaced to API callers."""

    kind = 'error'
    status_code = 400
    default_message = 'Request failed'

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def as_dict(self) -> dict:
        return {
            'error': {
                'kind': self.kind,
                'message': self.message,
                'details': self.details,
            }
        }


class NotFoundError(FoundicError):
    kind = 'not_found'
    status_code = 404
    default_message = 'Not found'


class UnauthorizedError(FoundicError):
    """Caller is known but not allowed to touch this resource."""
    kind = 'unauthorized'
    status_code = 403
    default_message = 'Not authorized'


class AuthenticationRequired(UnauthorizedError):
    status_code = 401
    default_message = 'Authentication required'


class ValidationFailed(FoundicError):
    kind = 'validation'
    status_code = 400
    default_message = 'Invalid request'

    @classmethod
    def from_form(cls, form, message=None):
        """Build from a bound, invalid Django form."""
        return cls(message or 'Invalid request', details=form.errors.get_json_data())


class ConflictError(FoundicError):
    kind = 'conflict'
    status_code = 409
    default_message = 'Conflict'
