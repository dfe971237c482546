"""Unit tests for outline_client.errors module."""

import pytest

from outline_import.outline_client.errors import (
    OutlineImportError,
    ConfigurationError,
    RemoteError,
    InvalidCredentialsError,
    APIUnreachableError,
)


class TestConfigurationError:
    """Test cases for ConfigurationError."""

    def test_inherits_from_base(self):
        assert issubclass(ConfigurationError, OutlineImportError)

    def test_message_without_field(self):
        error = ConfigurationError("token missing")
        assert str(error) == "Configuration error: token missing"
        assert error.config_field is None
        assert error.original_message == "token missing"

    def test_message_with_field(self):
        error = ConfigurationError("is required", config_field="collection")
        assert str(error) == "Configuration error in field 'collection': is required"


class TestRemoteError:
    """Test cases for RemoteError and its subclasses."""

    def test_carries_endpoint_body_and_status(self):
        """RemoteError keeps the raw body for diagnostics."""
        error = RemoteError("/api/documents.create", body='{"ok":false}', status_code=400)

        assert error.endpoint == "/api/documents.create"
        assert error.body == '{"ok":false}'
        assert error.status_code == 400
        assert str(error) == (
            'Outline API call /api/documents.create failed with status 400: {"ok":false}'
        )

    def test_message_without_status(self):
        error = RemoteError("/api/collections.list")
        assert str(error) == "Outline API call /api/collections.list failed"

    def test_custom_message(self):
        error = RemoteError("/api/documents.import", message="boom")
        assert str(error) == "boom"

    def test_invalid_credentials_is_remote_error(self):
        error = InvalidCredentialsError("/api/collections.list", body="unauthorized")

        assert isinstance(error, RemoteError)
        assert error.status_code == 401
        assert error.body == "unauthorized"
        assert "rejected" in str(error)

    def test_api_unreachable_is_remote_error(self):
        error = APIUnreachableError("/api/documents.create", reason="Connection refused")

        assert isinstance(error, RemoteError)
        assert error.status_code is None
        assert error.reason == "Connection refused"
        assert str(error) == "API is not available at /api/documents.create: Connection refused"

    def test_can_be_caught_as_base(self):
        with pytest.raises(OutlineImportError):
            raise RemoteError("/api/documents.create")
