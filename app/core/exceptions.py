"""
Error kinds shared by the validators, the services and the error responder.
Every failure that reaches a client is an HttpError carrying its status code.
"""

API_ERRORS = {
    "NOT_FOUND": "Not found",
    "SERVER_ERROR": "Internal Server Error",
}

API_ENDPOINTS = {
    "HEALTH_CHECK": "/health-check",
    "USERS": "/users",
    "MOVIES": "/movies",
    "GENRES": "/genres",
}


class HttpError(Exception):
    """Base class for errors that map directly to an HTTP status"""

    def __init__(self, message: str, code: int):
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code})"


class ValidationError(HttpError):
    """Raised when a request payload fails a field check"""

    def __init__(self, message: str, code: int = 400):
        super().__init__(message, code)


class NotFoundError(HttpError):
    """Raised when an identifier does not resolve to a record"""

    def __init__(self, message: str = API_ERRORS["NOT_FOUND"]):
        super().__init__(message, 404)


class ServerError(HttpError):
    """Raised when the store or anything else fails unexpectedly"""

    def __init__(self, message: str = API_ERRORS["SERVER_ERROR"]):
        super().__init__(message, 500)
