"""Validation entry points for records and JSON documents.

:class:`SchemaValidator` composes the JSON codec with the graph walker and
always answers with a :class:`SchemaValidationResult`. Decode failures and
constraint failures are both reported as data; neither raises.

Example:
    ```python
    validator = SchemaValidator()

    adventure, result = validator.decode_and_validate(text, Adventure)
    if not result.is_valid:
        for error in result.errors:
            print(error)

    assert validator.round_trip(adventure).is_valid
    ```
"""

from __future__ import annotations

import logging
from typing import Any, Tuple, Type, TypeVar

from .codec import JsonCodec
from .config import SchemaSettings
from .exceptions import DecodeError, SerializationError
from .validation.result import SchemaValidationResult
from .validation.schema import SchemaRegistry, default_registry
from .validation.walker import Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SchemaValidator:
    """Validates records in memory, from JSON text, and across a round trip.

    Args:
        settings: Codec settings; defaults to ``SchemaSettings()``
        registry: Schema registry shared by the codec and the walker
    """

    def __init__(
        self,
        settings: SchemaSettings | None = None,
        registry: SchemaRegistry | None = None,
    ):
        self._registry = registry or default_registry
        self._codec = JsonCodec(settings, self._registry)
        self._validator = Validator(self._registry)

    @property
    def codec(self) -> JsonCodec:
        return self._codec

    def validate_instance(self, instance: Any) -> SchemaValidationResult:
        """Validate an in-memory record and everything nested in it.

        Args:
            instance: Record to validate

        Returns:
            SchemaValidationResult listing every violation found
        """
        result = self._validator.validate(instance)
        if not result.is_valid:
            logger.info(
                f"{type(instance).__name__} failed validation with {len(result.errors)} error(s)"
            )
        return result

    def decode_and_validate(
        self, text: str | bytes, record_type: Type[T]
    ) -> Tuple[T | None, SchemaValidationResult]:
        """Deserialize JSON and validate the result.

        Args:
            text: JSON document
            record_type: Record type the document should represent

        Returns:
            ``(record, result)``; record is None when decoding failed, in
            which case the result carries the single decode error
        """
        try:
            data = self._codec.parse(text)
            if data is None:
                logger.warning(f"JSON document for {record_type.__name__} is null")
                return None, SchemaValidationResult.failure("Failed to deserialize JSON")
            instance = self._codec.from_dict(record_type, data)
        except DecodeError as e:
            logger.warning(f"Failed to decode {record_type.__name__}: {e}")
            return None, SchemaValidationResult.failure(f"JSON error: {e}")

        return instance, self.validate_instance(instance)

    def serialize(self, instance: Any) -> str:
        """Serialize a record to JSON text.

        Raises:
            EncodeError: If the record holds a value JSON cannot represent
        """
        return self._codec.encode(instance)

    def round_trip(self, instance: Any, strict: bool = False) -> SchemaValidationResult:
        """Serialize, deserialize and validate a record.

        A record that validates in memory can still fail here when encoding
        or decoding loses information for some field.

        Args:
            instance: Record to round-trip
            strict: Also report every field whose decoded value differs from
                the original

        Returns:
            SchemaValidationResult for the decoded record
        """
        record_type = type(instance)
        try:
            text = self._codec.encode(instance)
            decoded = self._codec.decode(text, record_type)
        except SerializationError as e:
            logger.warning(f"Round trip of {record_type.__name__} failed: {e}")
            return SchemaValidationResult.failure(f"Round-trip error: {e}")

        result = self.validate_instance(decoded)
        if strict:
            for path in self._codec.find_divergences(instance, decoded):
                result.add_error(f"Round-trip mismatch at {path}")
        return result
