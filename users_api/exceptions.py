"""
exceptions.py — Domain error taxonomy for the Users API

Business Rules:
- ValidationError: malformed input, surfaced as 400 with its message
- NotFoundError: no matching row, surfaced as 404
- PersistenceError: any other storage failure, surfaced as 500 with a
  generic message; the cause stays chained for server-side logs only
- Nothing here is ever retried

Called by: repositories, services, routers, main (exception handler)
Depends on: nothing
"""


class UsersApiError(Exception):
    """Base class. Carries the client-facing message and HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(UsersApiError):
    status_code = 400


class NotFoundError(UsersApiError):
    status_code = 404

    def __init__(self, message: str = "user not found"):
        super().__init__(message)


class PersistenceError(UsersApiError):
    status_code = 500
