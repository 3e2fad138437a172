"""Factory for building schemas from declarative configuration."""

from __future__ import annotations

import importlib
import logging
import re
from pathlib import Path
from typing import Any, Callable, Dict

import yaml

from .composites import array, nullable, strict_object
from .exceptions import SchemaConfigurationError
from .primitives import boolean, date, instance_of, integer, number, string
from .standard import StandardSchema
from .utils import snake_case

logger = logging.getLogger(__name__)

_COMMON_KEYS = {"type", "nullable", "description"}

# options each type accepts on top of the common keys
_TYPE_OPTIONS = {
    "boolean": set(),
    "number": {"min", "max"},
    "integer": {"min", "max"},
    "string": {"min", "max"},
    "date": set(),
    "instance_of": {"class"},
    "array": {"items"},
    "strict_object": {"fields"},
}


def _normalize_type(raw_type: str) -> str:
    # "strictObject" / "StrictObject" -> "strict_object", "STRING" -> "string"
    if raw_type.isupper():
        return raw_type.lower()
    return re.sub(r"_+", "_", snake_case(raw_type)).lstrip("_").lower()


def _is_yaml_file(source: str | Path) -> bool:
    if isinstance(source, Path):
        return True
    if "\n" in source:
        return False
    try:
        return Path(source).is_file()
    except OSError:
        # e.g. a single line of YAML longer than the OS path limit
        return False


class SchemaFactory:
    """Factory for creating schemas from configuration.

    Configuration Options:
        type (str): One of boolean, number, integer, string, date,
            instance_of, array, strict_object. camelCase spellings
            (``instanceOf``, ``strictObject``) and any letter case are accepted.
        nullable (bool): Wrap the schema so it also accepts null
        description (str): Ignored by validation, allowed for documentation
        min / max: Bounds for number, integer and string
        items (dict): Element schema for array
        fields (dict): Field name to schema mapping for strict_object
        class (str): Dotted import path for instance_of

    Example Configuration:
        schemas:
          - name: user
            type: strict_object
            fields:
              username:
                type: string
                min: 3
                max: 20
              age:
                type: integer
                min: 13
                nullable: true
              tags:
                type: array
                items:
                  type: string
              joined:
                type: date
    """

    def __init__(self) -> None:
        self._builders: Dict[str, Callable[[Dict[str, Any]], StandardSchema]] = {
            "boolean": lambda config: boolean(),
            "number": lambda config: number(**self._bounds(config)),
            "integer": lambda config: integer(**self._bounds(config)),
            "string": lambda config: string(**self._bounds(config)),
            "date": lambda config: date(),
            "instance_of": self._build_instance_of,
            "array": self._build_array,
            "strict_object": self._build_strict_object,
        }

    def create(self, **config: Any) -> StandardSchema:
        """Create a schema from configuration.

        Args:
            **config: Schema configuration

        Returns:
            Schema instance

        Raises:
            SchemaConfigurationError: If the configuration is invalid
        """
        logger.info(f"Creating schema of type: {config.get('type')}")
        return self._build(config, path="$")

    def from_yaml(self, source: str | Path) -> StandardSchema:
        """Create a schema from YAML text or a YAML file.

        A ``Path`` is always read as a file. A single-line string naming an
        existing file is read as that file, whatever its extension; any
        other string is parsed as YAML text.

        Args:
            source: Path to a YAML file, or YAML text

        Returns:
            Schema instance
        """
        if _is_yaml_file(source):
            with open(source, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        else:
            config = yaml.safe_load(source)

        if not isinstance(config, dict):
            raise SchemaConfigurationError(
                "YAML schema configuration must be a mapping",
                context={"loaded_type": type(config).__name__},
            )
        return self.create(**config)

    def _build(self, config: Any, path: str) -> StandardSchema:
        if not isinstance(config, dict):
            raise SchemaConfigurationError(
                f"Schema configuration at {path} must be a mapping",
                context={"path": path},
            )

        raw_type = config.get("type")
        if not isinstance(raw_type, str):
            raise SchemaConfigurationError(
                f"Schema configuration at {path} is missing 'type'",
                context={"path": path},
            )

        schema_type = _normalize_type(raw_type)
        builder = self._builders.get(schema_type)
        if builder is None:
            raise SchemaConfigurationError(
                f"Unknown schema type '{raw_type}' at {path}",
                context={"path": path, "available": sorted(self._builders)},
            )

        unknown = set(config) - _COMMON_KEYS - _TYPE_OPTIONS[schema_type]
        if unknown:
            raise SchemaConfigurationError(
                f"Unknown options {sorted(unknown)} for {schema_type} at {path}",
                context={"path": path, "options": sorted(unknown)},
            )

        logger.debug(f"Building {schema_type} schema at {path}")
        schema = builder({**config, "_path": path})

        if config.get("nullable", False):
            schema = nullable(schema)
        return schema

    def _bounds(self, config: Dict[str, Any]) -> Dict[str, Any]:
        return {key: config[key] for key in ("min", "max") if config.get(key) is not None}

    def _build_instance_of(self, config: Dict[str, Any]) -> StandardSchema:
        path = config["_path"]
        class_path = config.get("class")
        if not isinstance(class_path, str) or "." not in class_path:
            raise SchemaConfigurationError(
                f"instance_of at {path} requires a dotted 'class' path",
                context={"path": path, "class": class_path},
            )

        module_path, class_name = class_path.rsplit(".", 1)
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise SchemaConfigurationError(
                f"Failed to import {class_path}: {e}", context={"path": path}
            ) from e

        if not hasattr(module, class_name):
            raise SchemaConfigurationError(
                f"Class {class_name} not found in {module_path}", context={"path": path}
            )
        return instance_of(getattr(module, class_name))

    def _build_array(self, config: Dict[str, Any]) -> StandardSchema:
        path = config["_path"]
        if "items" not in config:
            raise SchemaConfigurationError(
                f"array at {path} requires 'items'", context={"path": path}
            )
        return array(self._build(config["items"], path=f"{path}[]"))

    def _build_strict_object(self, config: Dict[str, Any]) -> StandardSchema:
        path = config["_path"]
        fields = config.get("fields")
        if not isinstance(fields, dict):
            raise SchemaConfigurationError(
                f"strict_object at {path} requires a 'fields' mapping",
                context={"path": path},
            )
        return strict_object(
            {name: self._build(field, path=f"{path}.{name}") for name, field in fields.items()}
        )


# Singleton instance for registration
schema_factory = SchemaFactory()
