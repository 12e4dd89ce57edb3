"""Tests for the exception hierarchy."""

import pytest

from adventure_schema.exceptions import (
    AdventureSchemaError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    SchemaDefinitionError,
    SerializationError,
)


class TestExceptions:
    """Test exception types and context."""

    def test_context(self):
        error = DecodeError("bad", context={"path": "acts[0]"})
        assert str(error) == "bad"
        assert error.context == {"path": "acts[0]"}
        assert error.details is error.context

    def test_details_alias(self):
        assert ConfigurationError("bad", details={"key": "indent"}).context == {"key": "indent"}

    def test_context_defaults_to_empty(self):
        assert AdventureSchemaError("bad").context == {}

    @pytest.mark.parametrize(
        "error_type,parent",
        [
            (ConfigurationError, AdventureSchemaError),
            (SchemaDefinitionError, ConfigurationError),
            (SerializationError, AdventureSchemaError),
            (DecodeError, SerializationError),
            (EncodeError, SerializationError),
        ],
    )
    def test_hierarchy(self, error_type, parent):
        assert issubclass(error_type, parent)

    def test_decode_and_encode_are_distinct(self):
        assert not issubclass(DecodeError, EncodeError)
        assert not issubclass(SchemaDefinitionError, SerializationError)
