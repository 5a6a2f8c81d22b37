# server/core/errors.py

"""
Error taxonomy shared by the Authenticator and the Card Service.

Every error carries the HTTP status it is rendered with, so routes can simply
raise and let the handler registered in ``server.main`` build the response
body (``{"error": message}``).
"""


class CardsError(Exception):
    status_code = 500

    def __init__(self, message: str = "An unexpected error occurred", status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(CardsError):
    """Missing or malformed client input."""
    status_code = 400


class InvalidCredentials(CardsError):
    status_code = 401

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class MissingToken(CardsError):
    status_code = 401

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class InvalidToken(CardsError):
    """Bad signature, malformed token or expired token."""
    status_code = 400

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class UnknownUser(CardsError):
    status_code = 401

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class NotFound(CardsError):
    status_code = 404

    def __init__(self, message: str = "Card not found."):
        super().__init__(message)


class ConflictError(CardsError):
    """A card with the same slug already exists."""
    status_code = 409


class UploadError(CardsError):
    status_code = 500


class StoreError(CardsError):
    status_code = 500
