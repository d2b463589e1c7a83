"""Business errors shared across services.

Services raise subclasses of BusinessError; the app-level handler in main.py turns them into
JSON error responses (status ``http_status``, body with ``code``).
"""


class BusinessError(Exception):
    def __init__(self, code: str, message: str, http_status: int = 400, **extra):
        self.code = code
        self.message = message
        self.http_status = http_status
        self.extra = extra
        super().__init__(message)


class TransportError(BusinessError):
    """The AI transport failed (network error, vendor error, bad request)."""

    def __init__(self, message: str, **extra):
        super().__init__(code="TRANSPORT_ERROR", message=message, http_status=503, **extra)


class InvalidCredentialsError(BusinessError):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(code="INVALID_CREDENTIALS", message=message, http_status=401)


class UserAlreadyExistsError(BusinessError):
    def __init__(self, message: str = "User already exists"):
        super().__init__(code="USER_ALREADY_EXISTS", message=message, http_status=409)


class UserNotFoundError(BusinessError):
    def __init__(self, message: str = "User not found"):
        super().__init__(code="USER_NOT_FOUND", message=message, http_status=404)


class NotAuthenticatedError(BusinessError):
    def __init__(self, message: str = "No user is logged in"):
        super().__init__(code="NOT_AUTHENTICATED", message=message, http_status=401)
