"""Custom exceptions for the mock server and its clients."""


class ClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class APIError(ClientError):
    """Raised when an operation fails with an HTTP-equivalent status."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)


class NotFoundError(APIError):
    """Raised when a resource does not exist or is not visible to the user."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class UnauthorizedError(APIError):
    """Raised when an operation requires a signed-in user."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, status_code=401)


class UnsupportedQueryError(ClientError):
    """Raised when a query parameter holds a value the mock cannot honour."""

    def __init__(self, message: str, field: str, value, *args, **kwargs):
        self.field = field
        self.value = value
        super().__init__(message, *args, **kwargs)


class UnsupportedScopeError(UnsupportedQueryError):
    """Raised when the scope parameter is not a recognised scope."""

    def __init__(self, value):
        super().__init__(f"Scope '{value}' is not supported", field="scope", value=value)


class UnsupportedOrderByError(UnsupportedQueryError):
    """Raised when the order_by parameter is not a recognised ordering."""

    def __init__(self, value):
        super().__init__(
            f"OrderBy '{value}' is not supported", field="order_by", value=value
        )


class NotImplementedOperationError(ClientError):
    """Raised by operations the mock deliberately does not implement."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} is not implemented by the mock server")


class ValidationError(ClientError):
    """Raised when request data fails validation."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)
