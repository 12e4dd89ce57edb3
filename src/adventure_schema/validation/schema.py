"""Schema descriptors compiled from record dataclasses.

A record type is a dataclass whose fields carry their constraints in field
metadata, declared with :func:`schema_field`:

    ```python
    @dataclass
    class Act:
        title: str | None = schema_field(
            Required(message="Act title is required"),
            StringLength(min=1, max=200),
        )
        scenes: list[Scene] | None = schema_field(default_factory=list)
    ```

:class:`SchemaRegistry` compiles each type once into an immutable
:class:`SchemaDescriptor` and hands the same instance back on every later
request. Nested record types are held by reference, so a type that nests
itself compiles without recursion.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
import types
from dataclasses import MISSING, dataclass
from dataclasses import field as dataclass_field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterator, Tuple, Union, get_args, get_origin, get_type_hints

from ..exceptions import SchemaDefinitionError
from .constraints import Constraint
from .factory import ConstraintFactory, constraint_factory

logger = logging.getLogger(__name__)

SCHEMA_METADATA_KEY = "adventure_schema"

SCALAR_TYPES: Tuple[type, ...] = (str, int, float, bool, datetime)


class FieldKind(Enum):
    """Structural kind of a declared field."""

    REQUIRED_SCALAR = "required_scalar"
    OPTIONAL_SCALAR = "optional_scalar"
    NESTED_RECORD = "nested_record"
    LIST_OF_SCALAR = "list_of_scalar"
    LIST_OF_RECORD = "list_of_record"
    MAPPING = "mapping"


@dataclass(frozen=True)
class FieldOptions:
    """Schema options attached to a dataclass field's metadata."""

    constraints: Tuple[Constraint | Dict[str, Any], ...] = ()
    alias: str | None = None
    extension: bool = False


def schema_field(
    *constraints: Constraint | Dict[str, Any],
    default: Any = MISSING,
    default_factory: Any = MISSING,
    alias: str | None = None,
    extension: bool = False,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field together with its constraints.

    Args:
        *constraints: Constraint objects or constraint config dictionaries
        default: Field default
        default_factory: Field default factory
        alias: Serialized name; defaults to the camelCase attribute name
        extension: Collect unknown input fields of the record into this mapping
        **kwargs: Passed through to ``dataclasses.field``

    Returns:
        A dataclass field
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[SCHEMA_METADATA_KEY] = FieldOptions(
        constraints=tuple(constraints), alias=alias, extension=extension
    )
    return dataclass_field(
        default=default, default_factory=default_factory, metadata=metadata, **kwargs
    )


def camel_case(name: str) -> str:
    """Convert ``featured_npcs`` to ``featuredNpcs``."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


@dataclass(frozen=True)
class FieldDescriptor:
    """Compiled description of one record field.

    Attributes:
        name: Python attribute name
        wire_name: Serialized name, also used as the error path segment
        kind: Structural kind
        constraints: Constraints in declaration order
        nullable: Whether None is an accepted value
        scalar_type: Element type for scalar and list-of-scalar fields
        record_type: Record type for nested-record and list-of-record fields
        extension: Whether unknown input fields are collected here
    """

    name: str
    wire_name: str
    kind: FieldKind
    constraints: Tuple[Constraint, ...] = ()
    nullable: bool = False
    scalar_type: type | None = None
    record_type: type | None = None
    extension: bool = False

    @property
    def is_record(self) -> bool:
        return self.kind in (FieldKind.NESTED_RECORD, FieldKind.LIST_OF_RECORD)

    def get(self, instance: Any) -> Any:
        return getattr(instance, self.name)


@dataclass(frozen=True)
class SchemaDescriptor:
    """Immutable, ordered field list of one record type."""

    record_type: type
    fields: Tuple[FieldDescriptor, ...]
    _by_wire_name: Dict[str, FieldDescriptor] = dataclass_field(
        init=False, repr=False, compare=False
    )
    _by_folded_name: Dict[str, FieldDescriptor] = dataclass_field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        by_wire: Dict[str, FieldDescriptor] = {}
        by_folded: Dict[str, FieldDescriptor] = {}
        for fd in self.fields:
            folded = fd.wire_name.casefold()
            if folded in by_folded:
                raise SchemaDefinitionError(
                    f"Duplicate field name '{fd.wire_name}' in {self.name}",
                    context={"record": self.name, "field": fd.name},
                )
            by_wire[fd.wire_name] = fd
            by_folded[folded] = fd

        extensions = [fd for fd in self.fields if fd.extension]
        if len(extensions) > 1:
            raise SchemaDefinitionError(
                f"{self.name} declares more than one extension field",
                context={"record": self.name, "fields": [fd.name for fd in extensions]},
            )

        object.__setattr__(self, "_by_wire_name", by_wire)
        object.__setattr__(self, "_by_folded_name", by_folded)

    @property
    def name(self) -> str:
        return self.record_type.__name__

    @property
    def extension_field(self) -> FieldDescriptor | None:
        for fd in self.fields:
            if fd.extension:
                return fd
        return None

    def lookup(self, wire_name: str, case_insensitive: bool = True) -> FieldDescriptor | None:
        """Find a field by its serialized name."""
        if case_insensitive:
            return self._by_folded_name.get(wire_name.casefold())
        return self._by_wire_name.get(wire_name)

    def field(self, name: str) -> FieldDescriptor:
        """Find a field by its Python attribute name."""
        for fd in self.fields:
            if fd.name == name:
                return fd
        raise KeyError(f"{self.name} has no field '{name}'")

    def nested_types(self) -> Iterator[type]:
        """Record types referenced by this schema, in declaration order."""
        for fd in self.fields:
            if fd.record_type is not None:
                yield fd.record_type

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def to_dict(self) -> Dict[str, Any]:
        """Describe the schema as plain data."""
        return {
            "name": self.name,
            "fields": [
                {
                    "name": fd.wire_name,
                    "kind": fd.kind.value,
                    "nullable": fd.nullable,
                    "type": (fd.record_type or fd.scalar_type or dict).__name__,
                    "constraints": [c.to_dict() for c in fd.constraints],
                }
                for fd in self.fields
            ],
        }


def _is_class(value: Any) -> bool:
    # list[X] passes isinstance(..., type) on older interpreters
    return isinstance(value, type) and get_origin(value) is None


def is_record_type(value: Any) -> bool:
    return _is_class(value) and dataclasses.is_dataclass(value)


def _is_scalar_type(value: Any) -> bool:
    return _is_class(value) and (value in SCALAR_TYPES or issubclass(value, Enum))


def _unwrap_optional(hint: Any) -> Tuple[Any, bool]:
    origin = get_origin(hint)
    if origin is Union or origin is types.UnionType:
        args = get_args(hint)
        others = [a for a in args if a is not type(None)]
        if len(others) == 1 and len(args) == 2:
            return others[0], True
        return hint, False
    return hint, False


def _classify(
    record_type: type, name: str, hint: Any
) -> Tuple[FieldKind, bool, type | None, type | None]:
    """Map an annotation to (kind, nullable, scalar_type, record_type)."""
    inner, nullable = _unwrap_optional(hint)

    if _is_scalar_type(inner):
        kind = FieldKind.OPTIONAL_SCALAR if nullable else FieldKind.REQUIRED_SCALAR
        return kind, nullable, inner, None

    if is_record_type(inner):
        return FieldKind.NESTED_RECORD, nullable, None, inner

    origin = get_origin(inner)
    args = get_args(inner)
    if origin is list and len(args) == 1:
        (element,) = args
        if _is_scalar_type(element):
            return FieldKind.LIST_OF_SCALAR, nullable, element, None
        if is_record_type(element):
            return FieldKind.LIST_OF_RECORD, nullable, None, element
    elif origin is dict and args == (str, str):
        return FieldKind.MAPPING, nullable, str, None

    raise SchemaDefinitionError(
        f"Unsupported annotation for field '{name}' of {record_type.__name__}: {hint!r}",
        context={"record": record_type.__name__, "field": name, "annotation": repr(hint)},
    )


def build_descriptor(
    record_type: type, factory: ConstraintFactory | None = None
) -> SchemaDescriptor:
    """Compile a record type's own fields into a SchemaDescriptor.

    Nested record types are classified but not compiled.

    Args:
        record_type: Dataclass type to compile
        factory: Factory for constraints declared as dictionaries

    Returns:
        SchemaDescriptor for ``record_type``

    Raises:
        SchemaDefinitionError: If the type is not a dataclass or a field
            annotation is outside the supported kinds
    """
    if not is_record_type(record_type):
        raise SchemaDefinitionError(
            f"Not a record type: {record_type!r}",
            context={"type": repr(record_type)},
        )
    factory = factory or constraint_factory

    try:
        hints = get_type_hints(record_type)
    except (NameError, TypeError) as e:
        raise SchemaDefinitionError(
            f"Cannot resolve annotations of {record_type.__name__}: {e}",
            context={"record": record_type.__name__},
        ) from e

    descriptors = []
    for f in dataclasses.fields(record_type):
        if not f.init:
            continue
        options = f.metadata.get(SCHEMA_METADATA_KEY) or FieldOptions()
        kind, nullable, scalar_type, nested_type = _classify(record_type, f.name, hints[f.name])

        if options.extension and kind is not FieldKind.MAPPING:
            raise SchemaDefinitionError(
                f"Extension field '{f.name}' of {record_type.__name__} must be a dict[str, str]",
                context={"record": record_type.__name__, "field": f.name},
            )

        descriptors.append(
            FieldDescriptor(
                name=f.name,
                wire_name=options.alias or camel_case(f.name),
                kind=kind,
                constraints=factory.build(options.constraints),
                nullable=nullable,
                scalar_type=scalar_type,
                record_type=nested_type,
                extension=options.extension,
            )
        )

    return SchemaDescriptor(record_type=record_type, fields=tuple(descriptors))


class SchemaRegistry:
    """Thread-safe cache of compiled schema descriptors keyed by type.

    Descriptors are built at most once per registry: the first caller
    compiles and publishes under the lock, everyone after reads the
    published instance.

    Example:
        ```python
        registry = SchemaRegistry()
        schema = registry.get(Adventure)
        assert registry.get(Adventure) is schema
        ```
    """

    def __init__(self, name: str = "schemas", factory: ConstraintFactory | None = None):
        self._name = name
        self._factory = factory or constraint_factory
        self._descriptors: Dict[type, SchemaDescriptor] = {}
        self._closed: set[type] = set()
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    def get(self, record_type: type) -> SchemaDescriptor:
        """Get the descriptor for a record type, compiling it on first use.

        Raises:
            SchemaDefinitionError: If the type cannot be compiled
        """
        descriptor = self._descriptors.get(record_type)
        if descriptor is not None:
            return descriptor

        with self._lock:
            descriptor = self._descriptors.get(record_type)
            if descriptor is None:
                descriptor = build_descriptor(record_type, self._factory)
                self._descriptors[record_type] = descriptor
                logger.debug(
                    f"Compiled schema {descriptor.name} with {len(descriptor)} fields "
                    f"in registry {self._name}"
                )
        return descriptor

    def resolve_all(self, root: type) -> Dict[type, SchemaDescriptor]:
        """Compile every record type reachable from ``root``.

        Surfaces configuration errors anywhere in the type graph before a
        validation starts. Self-referencing types are visited once.

        Returns:
            Mapping of every reachable type to its descriptor, root first
        """
        resolved: Dict[type, SchemaDescriptor] = {}
        pending = [root]
        while pending:
            record_type = pending.pop(0)
            if record_type in resolved:
                continue
            descriptor = self.get(record_type)
            resolved[record_type] = descriptor
            pending.extend(t for t in descriptor.nested_types() if t not in resolved)

        with self._lock:
            self._closed.update(resolved)
        return resolved

    def ensure(self, root: type) -> SchemaDescriptor:
        """Get ``root``'s descriptor after making sure its type graph compiles."""
        if root not in self._closed:
            self.resolve_all(root)
        return self.get(root)

    def has(self, record_type: type) -> bool:
        return record_type in self._descriptors

    def list_types(self) -> list[type]:
        with self._lock:
            return list(self._descriptors)

    def count(self) -> int:
        return len(self._descriptors)

    def clear(self) -> None:
        with self._lock:
            self._descriptors.clear()
            self._closed.clear()


default_registry = SchemaRegistry("default")


def get_schema(record_type: type) -> SchemaDescriptor:
    """Get a descriptor from the process-wide default registry."""
    return default_registry.get(record_type)
