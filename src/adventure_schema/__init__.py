"""Constraint validation and JSON round-tripping for adventure documents.

- **Validation**: constraint primitives, cached schema descriptors and a
  depth-first walker that reports every violation with its field path
- **Codec**: canonical JSON encoding and case-insensitive decoding
- **SchemaValidator**: validate records, decode-and-validate JSON, and prove
  that encode/decode is lossless for a record
- **Models**: the adventure, campaign, party, story and prompt records

Example:
    ```python
    from adventure_schema import SchemaValidator
    from adventure_schema.models import Adventure

    validator = SchemaValidator()
    adventure, result = validator.decode_and_validate(text, Adventure)
    print(result.to_dict())
    ```
"""

from adventure_schema.codec import JsonCodec
from adventure_schema.config import SchemaSettings, UnknownFieldPolicy
from adventure_schema.exceptions import (
    AdventureSchemaError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    SchemaDefinitionError,
    SerializationError,
)
from adventure_schema.validation import (
    Constraint,
    FieldKind,
    MinCount,
    NumericRange,
    Required,
    SchemaDescriptor,
    SchemaRegistry,
    SchemaValidationResult,
    StringLength,
    Validator,
    Violation,
    get_schema,
    schema_field,
)
from adventure_schema.validator import SchemaValidator

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "AdventureSchemaError",
    "ConfigurationError",
    "SchemaDefinitionError",
    "SerializationError",
    "DecodeError",
    "EncodeError",
    # Settings
    "SchemaSettings",
    "UnknownFieldPolicy",
    # Validation
    "Constraint",
    "Required",
    "StringLength",
    "NumericRange",
    "MinCount",
    "FieldKind",
    "SchemaDescriptor",
    "SchemaRegistry",
    "SchemaValidationResult",
    "Violation",
    "Validator",
    "get_schema",
    "schema_field",
    # Codec and orchestration
    "JsonCodec",
    "SchemaValidator",
]
