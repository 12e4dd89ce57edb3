"""Exception hierarchy for the adventure schema engine.

Two families of failure exist. Configuration defects (a record type whose
annotations cannot be described, a constraint config with an unknown type,
an invalid settings file) are raised when a schema or setting is built.
Serialization failures (text that is not well-formed JSON, values of the
wrong JSON type, unrepresentable in-memory values) are raised by the codec
and turned into result data by the orchestrator.

Example:
    ```python
    from adventure_schema.exceptions import AdventureSchemaError, DecodeError

    try:
        codec.decode(text, Adventure)
    except DecodeError as e:
        logger.warning(f"Bad document: {e}")
        if e.context:
            logger.warning(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class AdventureSchemaError(Exception):
    """Base exception for the adventure schema engine.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (field path, type, ...)
        details: Alternative to context (both are supported)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ConfigurationError(AdventureSchemaError):
    """Raised when settings are invalid or cannot be loaded."""

    pass


class SchemaDefinitionError(ConfigurationError):
    """Raised when a record type cannot be compiled into a schema descriptor.

    Common scenarios include:
    - A field annotation outside the supported kinds
    - A constraint configuration with an unknown type
    - A non-dataclass type handed to the schema registry

    Example:
        ```python
        raise SchemaDefinitionError(
            "Unsupported annotation for field 'tags'",
            context={"record": "Adventure", "field": "tags", "annotation": "set[str]"}
        )
        ```
    """

    pass


class SerializationError(AdventureSchemaError):
    """Raised when encoding or decoding a record fails."""

    pass


class DecodeError(SerializationError):
    """Raised when input text cannot be decoded into a record.

    This is a structural failure (syntax error, wrong JSON type, unknown
    fields under the reject policy) and is distinct from a constraint
    violation on well-formed data.
    """

    pass


class EncodeError(SerializationError):
    """Raised when an in-memory record cannot be represented as JSON."""

    pass


__all__ = [
    "AdventureSchemaError",
    "ConfigurationError",
    "SchemaDefinitionError",
    "SerializationError",
    "DecodeError",
    "EncodeError",
]
