"""Settings for the codec and validator.

Settings can be built from dictionaries, YAML or JSON files, and environment
variables. String values may reference environment variables with
``${VAR}`` or ``${VAR:default}``. Variables named
``ADVENTURE_SCHEMA_<SETTING>`` override whatever the sources declared.

Example:
    ```yaml
    # adventure_schema.yaml
    indent: 2
    unknown_fields: ${ADVENTURE_UNKNOWN_FIELDS:ignore}
    case_insensitive: true
    ```

    ```python
    settings = SchemaSettings.load("adventure_schema.yaml")
    validator = SchemaValidator(settings=settings)
    ```
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "ADVENTURE_SCHEMA_"

# ${VAR}, ${VAR:default} or ${VAR:-default}
VAR_PATTERN = re.compile(r'\$\{([^}:]+)(?::(-)?([^}]*))?\}')


class UnknownFieldPolicy(Enum):
    """What the codec does with input fields a record does not declare.

    Records that declare an extension mapping always collect unknown fields
    into it, regardless of this policy.
    """

    IGNORE = "ignore"
    REJECT = "reject"


@dataclass(frozen=True)
class SchemaSettings:
    """Codec and validator settings.

    Attributes:
        indent: JSON indentation used when encoding (None for compact output)
        unknown_fields: Policy for unknown input fields
        case_insensitive: Match input field names ignoring case
        sort_mapping_keys: Emit mapping entries in sorted key order
    """

    indent: int | None = 2
    unknown_fields: UnknownFieldPolicy = UnknownFieldPolicy.IGNORE
    case_insensitive: bool = True
    sort_mapping_keys: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.unknown_fields, str):
            try:
                policy = UnknownFieldPolicy(self.unknown_fields.lower())
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid unknown_fields policy: {self.unknown_fields}",
                    context={"allowed": [p.value for p in UnknownFieldPolicy]},
                ) from e
            object.__setattr__(self, "unknown_fields", policy)
        if self.indent is not None and (
            isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0
        ):
            raise ConfigurationError(
                f"indent must be a non-negative integer or null, got {self.indent!r}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SchemaSettings:
        """Create settings from a dictionary.

        Args:
            data: Settings dictionary

        Returns:
            SchemaSettings instance

        Raises:
            ConfigurationError: If the dictionary has unknown keys or bad values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown settings: {', '.join(unknown)}",
                context={"unknown": unknown, "known": sorted(known)},
            )
        return cls(**_substitute(data))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> SchemaSettings:
        """Create settings from a YAML or JSON file.

        Args:
            path: Path to the settings file

        Returns:
            SchemaSettings instance
        """
        return cls.from_dict(_load_file(path))

    @classmethod
    def load(cls, *sources: Union[str, Path, dict], use_env: bool = True) -> SchemaSettings:
        """Merge settings from several sources, later sources winning.

        Args:
            *sources: File paths or dictionaries
            use_env: Apply ``ADVENTURE_SCHEMA_*`` overrides last

        Returns:
            SchemaSettings instance
        """
        merged: Dict[str, Any] = {}
        for source in sources:
            if isinstance(source, dict):
                merged.update(source)
            elif isinstance(source, (str, Path)):
                merged.update(_load_file(source))
            else:
                raise ConfigurationError(f"Invalid source type: {type(source)}")

        settings = cls.from_dict(merged)
        if use_env:
            settings = settings.with_env_overrides()
        return settings

    def with_env_overrides(self, environ: Dict[str, str] | None = None) -> SchemaSettings:
        """Return a copy with ``ADVENTURE_SCHEMA_<SETTING>`` overrides applied."""
        environ = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}
        for f in fields(self):
            key = f"{ENV_PREFIX}{f.name.upper()}"
            if key in environ:
                overrides[f.name] = _parse_value(environ[key])
                logger.debug(f"Setting {f.name} overridden from {key}")
        if not overrides:
            return self
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a plain dictionary."""
        return {
            "indent": self.indent,
            "unknown_fields": self.unknown_fields.value,
            "case_insensitive": self.case_insensitive,
            "sort_mapping_keys": self.sort_mapping_keys,
        }


def _load_file(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path).resolve()
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}", context={"path": str(path)})

    suffix = path.suffix.lower()
    with open(path) as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ConfigurationError(f"Unsupported file format: {suffix}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Settings file must contain a mapping, got {type(data).__name__}",
            context={"path": str(path)},
        )
    return data


def _substitute(value: Any) -> Any:
    """Recursively substitute environment variables in string values."""
    if isinstance(value, str):
        return _substitute_string(value)
    elif isinstance(value, dict):
        return {k: _substitute(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_substitute(v) for v in value]
    return value


def _substitute_string(text: str) -> Any:
    # A string that is exactly one reference keeps the variable's parsed type
    match = VAR_PATTERN.fullmatch(text)
    if match:
        return _parse_value(_lookup(match))

    if "${" not in text:
        return text
    return VAR_PATTERN.sub(_lookup, text)


def _lookup(match: re.Match) -> str:
    var_name = match.group(1)
    has_default = match.group(2) is not None or match.group(3) is not None
    if var_name in os.environ:
        return os.environ[var_name]
    if has_default:
        return match.group(3) or ""
    raise ConfigurationError(
        f"Environment variable '{var_name}' not found",
        context={"variable": var_name},
    )


def _parse_value(value: str) -> Any:
    """Convert an environment string to bool, int, None or leave it as str."""
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    if lowered in ("null", "none", ""):
        return None
    try:
        return int(lowered)
    except ValueError:
        return value
