"""Factory for building constraints from configuration."""

import logging
from typing import Any, Iterable

from ..exceptions import SchemaDefinitionError
from .constraints import (
    Constraint,
    ConstraintKind,
    MinCount,
    NumericRange,
    Required,
    StringLength,
)

logger = logging.getLogger(__name__)


class ConstraintFactory:
    """Factory for creating constraints from configuration dictionaries.

    Configuration Options:
        type (str): One of ``required``, ``length``, ``range``, ``min_count``
        min (number): Lower bound (length, range, min_count)
        max (number): Upper bound (length, range)
        message (str): Optional message template

    Example Configuration:
        constraints:
          - type: required
            message: Adventure hook is required
          - type: length
            min: 10
            max: 2000
    """

    def create(self, **config: Any) -> Constraint:
        """Create a Constraint instance from configuration.

        Args:
            **config: Constraint configuration

        Returns:
            Constraint instance

        Raises:
            SchemaDefinitionError: If the type is unknown or parameters are invalid
        """
        constraint_type = str(config.get("type", "")).lower()
        message = config.get("message")

        try:
            kind = ConstraintKind(constraint_type)
        except ValueError as e:
            logger.error(f"Unknown constraint type: {constraint_type}")
            raise SchemaDefinitionError(
                f"Unknown constraint type: {constraint_type!r}",
                context={"config": config, "allowed": [k.value for k in ConstraintKind]},
            ) from e

        try:
            if kind is ConstraintKind.REQUIRED:
                return Required(message=message)
            elif kind is ConstraintKind.STRING_LENGTH:
                return StringLength(min=config.get("min"), max=config.get("max"), message=message)
            elif kind is ConstraintKind.NUMERIC_RANGE:
                return NumericRange(min=config.get("min"), max=config.get("max"), message=message)
            else:
                if "min" not in config:
                    raise ValueError("min_count requires 'min'")
                return MinCount(min=config["min"], message=message)
        except (TypeError, ValueError) as e:
            raise SchemaDefinitionError(
                f"Invalid {kind.value} constraint: {e}",
                context={"config": config},
            ) from e

    def build(self, configs: Iterable[Constraint | dict[str, Any]]) -> tuple[Constraint, ...]:
        """Build constraints, passing through ones that are already built.

        Args:
            configs: Constraint objects or configuration dictionaries

        Returns:
            Tuple of Constraint objects in declaration order
        """
        constraints: list[Constraint] = []
        for config in configs:
            if isinstance(config, Constraint):
                constraints.append(config)
            elif isinstance(config, dict):
                constraints.append(self.create(**config))
            else:
                raise SchemaDefinitionError(
                    f"Constraint must be a Constraint or dict, got {type(config).__name__}"
                )
        return tuple(constraints)


constraint_factory = ConstraintFactory()
