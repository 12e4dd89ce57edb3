"""JSON codec for record instances.

Encoding writes every declared field under its wire name, including absent
optional fields as an explicit ``null``, so that decoding the text gives
back the same record. Decoding matches field names case-insensitively
(configurable), collects unknown fields into the record's extension mapping
when it declares one, and otherwise ignores or rejects them according to
:class:`~adventure_schema.config.UnknownFieldPolicy`.

Example:
    ```python
    codec = JsonCodec()
    text = codec.encode(adventure)
    restored = codec.decode(text, Adventure)
    assert restored == adventure
    ```
"""

from __future__ import annotations

import json
import logging
import math
import re
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Tuple, Type, TypeVar

from .config import SchemaSettings, UnknownFieldPolicy
from .exceptions import DecodeError, EncodeError
from .validation.result import PathSegment, format_path
from .validation.schema import (
    FieldDescriptor,
    FieldKind,
    SchemaDescriptor,
    SchemaRegistry,
    default_registry,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Path = Tuple[PathSegment, ...]

_FRACTION = re.compile(r"\.(\d+)")

_SCALAR_KINDS = (FieldKind.REQUIRED_SCALAR, FieldKind.OPTIONAL_SCALAR)


def _where(path: Path) -> str:
    return format_path(path) or "$"


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _last_key_wins(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    obj: Dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            logger.debug(f"Duplicate key '{key}' in JSON object, last value wins")
        obj[key] = value
    return obj


def parse_datetime(text: str) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a ``Z`` suffix and any
    number of fractional-second digits."""
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    return datetime.fromisoformat(text)


class JsonCodec:
    """Converts records to and from canonical JSON text.

    Args:
        settings: Codec settings (indentation, name matching, unknown fields)
        registry: Registry providing schema descriptors
    """

    def __init__(
        self,
        settings: SchemaSettings | None = None,
        registry: SchemaRegistry | None = None,
    ):
        self._settings = settings or SchemaSettings()
        self._registry = registry or default_registry

    @property
    def settings(self) -> SchemaSettings:
        return self._settings

    # Encoding

    def encode(self, instance: Any) -> str:
        """Serialize a record to JSON text.

        Raises:
            EncodeError: If a value cannot be represented in JSON
        """
        data = self.to_dict(instance)
        try:
            return json.dumps(
                data,
                indent=self._settings.indent,
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            raise EncodeError(
                f"Failed to encode {type(instance).__name__}: {e}",
                context={"type": type(instance).__name__},
            ) from e

    def to_dict(self, instance: Any) -> Dict[str, Any]:
        """Convert a record to a JSON-ready dictionary keyed by wire names."""
        schema = self._registry.ensure(type(instance))
        return self._encode_record(instance, schema, ())

    def _encode_record(
        self, instance: Any, schema: SchemaDescriptor, path: Path
    ) -> Dict[str, Any]:
        if not isinstance(instance, schema.record_type):
            raise EncodeError(
                f"{_where(path)}: expected a {schema.name} record, got {type(instance).__name__}",
                context={"path": _where(path)},
            )
        return {
            fd.wire_name: self._encode_value(fd, fd.get(instance), path + (fd.wire_name,))
            for fd in schema.fields
        }

    def _encode_value(self, fd: FieldDescriptor, value: Any, path: Path) -> Any:
        if value is None:
            return None

        if fd.kind in _SCALAR_KINDS:
            return self._encode_scalar(value, path)

        if fd.kind is FieldKind.NESTED_RECORD:
            return self._encode_record(value, self._registry.get(fd.record_type), path)

        if fd.kind is FieldKind.MAPPING:
            if not isinstance(value, dict):
                raise EncodeError(
                    f"{_where(path)}: expected a dict, got {type(value).__name__}",
                    context={"path": _where(path)},
                )
            items = sorted(value.items()) if self._settings.sort_mapping_keys else value.items()
            return {str(k): self._encode_scalar(v, path + (str(k),)) for k, v in items}

        if not isinstance(value, (list, tuple)):
            raise EncodeError(
                f"{_where(path)}: expected a list, got {type(value).__name__}",
                context={"path": _where(path)},
            )
        if fd.kind is FieldKind.LIST_OF_RECORD:
            nested = self._registry.get(fd.record_type)
            return [
                self._encode_record(element, nested, path + (index,))
                for index, element in enumerate(value)
            ]
        return [self._encode_scalar(element, path + (index,)) for index, element in enumerate(value)]

    def _encode_scalar(self, value: Any, path: Path) -> Any:
        if value is None or isinstance(value, (str, bool, int)):
            return value
        if isinstance(value, Enum):
            return self._encode_scalar(value.value, path)
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, float):
            if math.isnan(value) or math.isinf(value):
                raise EncodeError(
                    f"{_where(path)}: {value} cannot be represented in JSON",
                    context={"path": _where(path)},
                )
            return value
        raise EncodeError(
            f"{_where(path)}: unsupported value of type {type(value).__name__}",
            context={"path": _where(path), "type": type(value).__name__},
        )

    # Decoding

    def parse(self, text: str | bytes | bytearray) -> Any:
        """Parse JSON text without binding it to a record type.

        Raises:
            DecodeError: If the text is not well-formed JSON
        """
        if not isinstance(text, (str, bytes, bytearray)):
            raise DecodeError(
                f"Expected JSON text, got {type(text).__name__}",
                context={"type": type(text).__name__},
            )
        try:
            return json.loads(text, object_pairs_hook=_last_key_wins)
        except json.JSONDecodeError as e:
            raise DecodeError(str(e), context={"line": e.lineno, "column": e.colno}) from e
        except (UnicodeDecodeError, RecursionError) as e:
            raise DecodeError(str(e) or type(e).__name__) from e

    def decode(self, text: str | bytes | bytearray, record_type: Type[T]) -> T:
        """Deserialize JSON text into a record.

        Raises:
            DecodeError: If the text is malformed, is ``null``, or does not
                match the shape of ``record_type``
        """
        data = self.parse(text)
        if data is None:
            raise DecodeError(
                "Failed to deserialize JSON: document is null",
                context={"record": record_type.__name__},
            )
        return self.from_dict(record_type, data)

    def from_dict(self, record_type: Type[T], data: Any) -> T:
        """Build a record from a parsed JSON value."""
        schema = self._registry.ensure(record_type)
        return self._decode_record(schema, data, ())

    def _decode_record(self, schema: SchemaDescriptor, data: Any, path: Path) -> Any:
        if not isinstance(data, dict):
            raise DecodeError(
                f"{_where(path)}: expected a JSON object for {schema.name}, got {_json_type(data)}",
                context={"path": _where(path), "record": schema.name},
            )

        values: Dict[str, Any] = {}
        unknown: Dict[str, Any] = {}
        for key, raw in data.items():
            fd = schema.lookup(key, self._settings.case_insensitive)
            if fd is None:
                unknown[key] = raw
                continue
            if fd.name in values:
                logger.debug(f"{_where(path)}: '{key}' repeats field {fd.wire_name}, last value wins")
            values[fd.name] = self._decode_value(fd, raw, path + (fd.wire_name,))

        if unknown:
            self._collect_unknown(schema, values, unknown, path)

        try:
            return schema.record_type(**values)
        except (TypeError, ValueError) as e:
            raise DecodeError(
                f"{_where(path)}: cannot build {schema.name}: {e}",
                context={"path": _where(path), "record": schema.name},
            ) from e

    def _collect_unknown(
        self,
        schema: SchemaDescriptor,
        values: Dict[str, Any],
        unknown: Dict[str, Any],
        path: Path,
    ) -> None:
        extension = schema.extension_field
        if extension is not None:
            collected = dict(values.get(extension.name) or {})
            for key, raw in unknown.items():
                collected.setdefault(key, raw if isinstance(raw, str) else json.dumps(raw))
            values[extension.name] = collected
            return

        names = ", ".join(sorted(unknown))
        if self._settings.unknown_fields is UnknownFieldPolicy.REJECT:
            raise DecodeError(
                f"{_where(path)}: unknown field(s) for {schema.name}: {names}",
                context={"path": _where(path), "record": schema.name, "fields": sorted(unknown)},
            )
        logger.debug(f"{_where(path)}: ignoring unknown field(s) for {schema.name}: {names}")

    def _decode_value(self, fd: FieldDescriptor, raw: Any, path: Path) -> Any:
        if raw is None:
            if fd.nullable:
                return None
            raise DecodeError(
                f"{_where(path)}: null is not allowed",
                context={"path": _where(path)},
            )

        if fd.kind in _SCALAR_KINDS:
            return self._decode_scalar(fd.scalar_type, raw, path)

        if fd.kind is FieldKind.NESTED_RECORD:
            return self._decode_record(self._registry.get(fd.record_type), raw, path)

        if fd.kind is FieldKind.MAPPING:
            if not isinstance(raw, dict):
                raise DecodeError(
                    f"{_where(path)}: expected a JSON object, got {_json_type(raw)}",
                    context={"path": _where(path)},
                )
            for key, value in raw.items():
                if not isinstance(value, str):
                    raise DecodeError(
                        f"{_where(path + (key,))}: expected a string, got {_json_type(value)}",
                        context={"path": _where(path + (key,))},
                    )
            return dict(raw)

        if not isinstance(raw, list):
            raise DecodeError(
                f"{_where(path)}: expected a JSON array, got {_json_type(raw)}",
                context={"path": _where(path)},
            )

        elements = []
        for index, element in enumerate(raw):
            element_path = path + (index,)
            if element is None:
                raise DecodeError(
                    f"{_where(element_path)}: null is not allowed",
                    context={"path": _where(element_path)},
                )
            if fd.kind is FieldKind.LIST_OF_RECORD:
                nested = self._registry.get(fd.record_type)
                elements.append(self._decode_record(nested, element, element_path))
            else:
                elements.append(self._decode_scalar(fd.scalar_type, element, element_path))
        return elements

    def _decode_scalar(self, scalar_type: Any, raw: Any, path: Path) -> Any:
        if issubclass(scalar_type, Enum):
            for member in scalar_type:
                if isinstance(raw, str):
                    folded = raw.casefold()
                    if folded == member.name.casefold() or (
                        isinstance(member.value, str) and folded == member.value.casefold()
                    ):
                        return member
                elif not isinstance(raw, bool) and raw == member.value:
                    return member
            allowed = [m.value for m in scalar_type]
            raise DecodeError(
                f"{_where(path)}: {raw!r} is not one of {', '.join(map(str, allowed))}",
                context={"path": _where(path), "allowed": allowed},
            )

        if scalar_type is datetime:
            if isinstance(raw, str):
                try:
                    return parse_datetime(raw)
                except ValueError as e:
                    raise DecodeError(
                        f"{_where(path)}: invalid timestamp {raw!r}",
                        context={"path": _where(path)},
                    ) from e
        elif scalar_type is bool:
            if isinstance(raw, bool):
                return raw
        elif scalar_type is int:
            if isinstance(raw, int) and not isinstance(raw, bool):
                return raw
        elif scalar_type is float:
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                return float(raw)
        elif scalar_type is str:
            if isinstance(raw, str):
                return raw

        raise DecodeError(
            f"{_where(path)}: expected {scalar_type.__name__}, got {_json_type(raw)}",
            context={"path": _where(path), "expected": scalar_type.__name__},
        )

    # Fidelity

    def find_divergences(self, original: Any, decoded: Any) -> List[str]:
        """List the field paths whose values differ between two records.

        Used to check that ``decode(encode(x))`` reproduces ``x``; absent and
        present-empty values count as different.
        """
        schema = self._registry.ensure(type(original))
        divergences: List[str] = []
        self._diff_record(schema, original, decoded, (), divergences)
        return divergences

    def _diff_record(
        self,
        schema: SchemaDescriptor,
        left: Any,
        right: Any,
        path: Path,
        out: List[str],
    ) -> None:
        if not isinstance(left, schema.record_type) or not isinstance(right, schema.record_type):
            if left != right:
                out.append(_where(path))
            return

        for fd in schema.fields:
            field_path = path + (fd.wire_name,)
            a, b = fd.get(left), fd.get(right)
            if fd.record_type is None or a is None or b is None:
                if a != b or type(a) is not type(b):
                    out.append(_where(field_path))
                continue

            nested = self._registry.get(fd.record_type)
            if fd.kind is FieldKind.NESTED_RECORD:
                self._diff_record(nested, a, b, field_path, out)
            elif len(a) != len(b):
                out.append(_where(field_path))
            else:
                for index, (x, y) in enumerate(zip(a, b)):
                    self._diff_record(nested, x, y, field_path + (index,), out)
