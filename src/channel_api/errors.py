"""
Application errors.

Every error carries the HTTP status it maps to; the exception handler in
``main`` renders them as ``{"error": message}``.
"""


class AppError(Exception):
    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """Missing required input (400)."""

    def __init__(self, message: str = "Missing fields"):
        super().__init__(message)


class ConflictError(AppError):
    """Email already registered (400)."""

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message)


class NotFoundError(AppError):
    """Unknown user (400)."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class AuthError(AppError):
    """Password mismatch (400)."""

    def __init__(self, message: str = "Invalid password"):
        super().__init__(message)


class UpstreamError(AppError):
    """Completion provider failure (500)."""

    status_code = 500

    def __init__(self, message: str = "AI service error"):
        super().__init__(message)


class StoreError(AppError):
    """Database unavailable or failing (500)."""

    status_code = 500

    def __init__(self, message: str = "Database error"):
        super().__init__(message)
