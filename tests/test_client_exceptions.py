"""Tests for client exception classes."""


from gitlab_mock.clients import (
    APIError,
    ClientError,
    NotFoundError,
    NotImplementedOperationError,
    UnauthorizedError,
    UnsupportedOrderByError,
    UnsupportedQueryError,
    UnsupportedScopeError,
    ValidationError,
)


class TestClientError:
    """Tests for the base ClientError exception."""

    def test_instantiation_with_message(self):
        """ClientError stores the error message."""
        error = ClientError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_inheritance(self):
        """ClientError is an Exception."""
        assert isinstance(ClientError("test"), Exception)


class TestAPIError:
    """Tests for APIError exception."""

    def test_instantiation_with_status_code(self):
        """APIError stores message and status code."""
        error = APIError("Server error", status_code=500)

        assert error.message == "Server error"
        assert error.status_code == 500

    def test_inheritance(self):
        """APIError inherits from ClientError."""
        assert isinstance(APIError("test", status_code=500), ClientError)


class TestNotFoundError:
    """Tests for NotFoundError exception."""

    def test_default_message(self):
        """NotFoundError has a default message."""
        error = NotFoundError()

        assert error.message == "Resource not found"
        assert error.status_code == 404

    def test_custom_message(self):
        """NotFoundError accepts custom message."""
        error = NotFoundError("Issue #3 not found in project 1")

        assert error.message == "Issue #3 not found in project 1"
        assert error.status_code == 404

    def test_inheritance(self):
        """NotFoundError inherits from APIError."""
        error = NotFoundError()

        assert isinstance(error, APIError)
        assert isinstance(error, ClientError)


class TestUnauthorizedError:
    """Tests for UnauthorizedError exception."""

    def test_default_message(self):
        """UnauthorizedError has a default message and a 401 status."""
        error = UnauthorizedError()

        assert error.message == "Authentication required"
        assert error.status_code == 401

    def test_inheritance(self):
        """UnauthorizedError inherits from APIError."""
        assert isinstance(UnauthorizedError(), APIError)


class TestUnsupportedQueryErrors:
    """Tests for the unsupported query parameter exceptions."""

    def test_scope_error(self):
        """UnsupportedScopeError names the rejected scope."""
        error = UnsupportedScopeError("bogus")

        assert error.message == "Scope 'bogus' is not supported"
        assert error.field == "scope"
        assert error.value == "bogus"

    def test_order_by_error(self):
        """UnsupportedOrderByError names the rejected field."""
        error = UnsupportedOrderByError("priority")

        assert error.message == "OrderBy 'priority' is not supported"
        assert error.field == "order_by"
        assert error.value == "priority"

    def test_inheritance(self):
        """Both errors share UnsupportedQueryError as a base."""
        for error in (UnsupportedScopeError("x"), UnsupportedOrderByError("y")):
            assert isinstance(error, UnsupportedQueryError)
            assert isinstance(error, ClientError)
            assert not isinstance(error, APIError)


class TestNotImplementedOperationError:
    """Tests for NotImplementedOperationError exception."""

    def test_names_operation(self):
        """NotImplementedOperationError stores the operation name."""
        error = NotImplementedOperationError("closed_by")

        assert error.operation == "closed_by"
        assert "closed_by" in error.message

    def test_is_not_builtin_not_implemented(self):
        """The error is a ClientError, not a NotImplementedError."""
        error = NotImplementedOperationError("related_to")

        assert isinstance(error, ClientError)
        assert not isinstance(error, NotImplementedError)


class TestValidationError:
    """Tests for ValidationError exception."""

    def test_instantiation_with_message(self):
        """ValidationError stores message."""
        error = ValidationError("Invalid data")

        assert error.message == "Invalid data"
        assert error.errors == []

    def test_instantiation_with_errors(self):
        """ValidationError stores validation error details."""
        errors = ["title: field required", "project_id: field required"]
        error = ValidationError("Validation failed", errors=errors)

        assert error.errors == errors

    def test_inheritance(self):
        """ValidationError inherits from ClientError."""
        assert isinstance(ValidationError("test"), ClientError)
