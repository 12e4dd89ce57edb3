"""Constraint validation for record graphs.

- Constraint primitives that each report at most one violation per value
- Schema descriptors compiled once per record type and cached
- A depth-first walker that aggregates every violation with its field path
"""

from .constraints import (
    Constraint,
    ConstraintKind,
    MinCount,
    NumericRange,
    Required,
    StringLength,
)
from .factory import ConstraintFactory, constraint_factory
from .result import SchemaValidationResult, Violation, format_path
from .schema import (
    FieldDescriptor,
    FieldKind,
    SchemaDescriptor,
    SchemaRegistry,
    build_descriptor,
    default_registry,
    get_schema,
    schema_field,
)
from .walker import Validator, validate

__all__ = [
    # Result types
    "SchemaValidationResult",
    "Violation",
    "format_path",
    # Constraints
    "Constraint",
    "ConstraintKind",
    "Required",
    "StringLength",
    "NumericRange",
    "MinCount",
    # Schema
    "FieldKind",
    "FieldDescriptor",
    "SchemaDescriptor",
    "SchemaRegistry",
    "build_descriptor",
    "default_registry",
    "get_schema",
    "schema_field",
    # Walker
    "Validator",
    "validate",
    # Factories
    "ConstraintFactory",
    "constraint_factory",
]
