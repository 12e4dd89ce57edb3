"""Depth-first validation of record graphs.

The walker visits every field of a record in declaration order, applies the
field's constraints, then descends into nested records and lists of records
before moving on to the next field. It never stops early: one call reports
every violation reachable from the root.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Tuple

from .result import PathSegment, SchemaValidationResult, Violation
from .schema import FieldKind, SchemaDescriptor, SchemaRegistry, default_registry

logger = logging.getLogger(__name__)


class Validator:
    """Validates record instances against their schema descriptors.

    Args:
        registry: Registry used to look up nested record schemas
    """

    def __init__(self, registry: SchemaRegistry | None = None):
        self._registry = registry or default_registry

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry

    def validate(
        self, instance: Any, schema: SchemaDescriptor | None = None
    ) -> SchemaValidationResult:
        """Validate a record and everything reachable from it.

        Args:
            instance: Record instance to validate; it is never modified
            schema: Descriptor to validate against; looked up from the
                instance's type when omitted

        Returns:
            SchemaValidationResult with violations in depth-first order
        """
        if schema is None:
            schema = self._registry.ensure(type(instance))
        result = SchemaValidationResult.from_violations(self.iter_violations(instance, schema))
        logger.debug(
            f"Validated {schema.name}: {len(result.violations)} violation(s)"
        )
        return result

    def iter_violations(
        self,
        instance: Any,
        schema: SchemaDescriptor,
        prefix: Tuple[PathSegment, ...] = (),
    ) -> Iterator[Violation]:
        """Yield violations for ``instance`` in pre-order, declaration order."""
        for fd in schema.fields:
            value = fd.get(instance)
            path = prefix + (fd.wire_name,)
            present = value is not None

            for constraint in fd.constraints:
                violation = constraint.evaluate(path, value, present)
                if violation is not None:
                    yield violation

            # Nothing below an absent field
            if not present or fd.record_type is None:
                continue

            nested = self._registry.get(fd.record_type)
            if fd.kind is FieldKind.NESTED_RECORD:
                yield from self._walk_record(value, nested, path)
            elif isinstance(value, (list, tuple)):
                for index, element in enumerate(value):
                    yield from self._walk_record(element, nested, path + (index,))
            else:
                yield Violation(path, f"{fd.wire_name} must be a list, got {type(value).__name__}")

    def _walk_record(
        self, value: Any, schema: SchemaDescriptor, path: Tuple[PathSegment, ...]
    ) -> Iterator[Violation]:
        if not isinstance(value, schema.record_type):
            yield Violation(
                path, f"Expected a {schema.name} record, got {type(value).__name__}"
            )
            return
        yield from self.iter_violations(value, schema, path)


def validate(instance: Any) -> SchemaValidationResult:
    """Validate a record against the default registry's schema for its type."""
    return Validator().validate(instance)
