
class ServerError(Exception):
    """Base class for server-related errors"""

    def __init__(self, msg="Server error occurred", status_code=500):
        self.msg = msg
        self.status_code = status_code
        super().__init__(self.msg)


class InvalidRequestError(ServerError):
    """Raised when request is invalid"""

    def __init__(self, msg="Invalid request", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class ValidationError(InvalidRequestError):
    """Raised when submitted fields are missing or malformed"""

    def __init__(self, msg="Datos inválidos", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class DuplicateError(InvalidRequestError):
    """Raised when a subscriber email is already registered"""

    def __init__(self, msg="Este email ya está suscrito.", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class RateLimitError(ServerError):
    """Raised when a client exceeds the request window"""

    def __init__(
        self, msg="Demasiados intentos. Intenta más tarde.", status_code=429
    ):
        super().__init__(msg=msg, status_code=status_code)


class InternalServerError(ServerError):
    """Raised when an internal server error occurs"""

    def __init__(self, msg="Error interno del servidor.", status_code=500):
        super().__init__(msg=msg, status_code=status_code)


class PersistenceError(InternalServerError):
    """Raised when a record could not be written to the store"""


class DispatchError(InternalServerError):
    """Raised when an outbound email could not be delivered

    The record that triggered the email may already be persisted.
    """


class DatabaseError(ServerError):
    """Raised when a database operation fails"""

    def __init__(self, msg="Database operation failed", status_code=500):
        super().__init__(msg=msg, status_code=status_code)


class DatabaseIntegrityError(DatabaseError):
    """Raised when database integrity constraint is violated"""

    def __init__(self, msg="Database constraint violated", status_code=400):
        super().__init__(msg=msg, status_code=status_code)
