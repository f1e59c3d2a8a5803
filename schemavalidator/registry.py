"""Named schema registry and document validation.

Provides the SchemaRegistry, the module-level default ``registry`` and
the ``validate_document()`` convenience function that parses a JSON/YAML
text and validates it against a registered schema.

Usage::

    from schemavalidator.registry import registry, validate_document

    registry.load_file("config", "schemas/config.json")
    result = validate_document(text, "config")
    if not result.is_valid:
        for violation in result.result:
            print(violation)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from schemavalidator.exceptions import SchemaLoadError
from schemavalidator.models import Invalid, ValidationResult, invalid
from schemavalidator.schema import Schema
from schemavalidator.validator import SchemaValidator

logger = logging.getLogger(__name__)

# =============================================================================
# DOCUMENT LOADING
# =============================================================================


def parse_document(content: str, *, source: str = "<string>") -> Any:
    """Parse a JSON or YAML text into Python values.

    Raises:
        SchemaLoadError: If the text is not valid YAML (JSON is a subset).
    """
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise SchemaLoadError(f"Invalid document syntax: {exc}", path=source) from exc


def load_document(path: str | Path) -> Any:
    """Read a JSON (``.json``) or YAML file.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Cannot read {path}: {exc.strerror or exc}", path=path) from exc

    if path.suffix.lower() == ".json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(f"Invalid JSON in {path}: {exc}", path=path) from exc
    return parse_document(content, source=str(path))


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class SchemaRegistry:
    """Registry mapping schema names to schema nodes.

    Schemas are registered once and shared by every validation that
    names them; the validator never modifies a registered node.
    """

    def __init__(self) -> None:
        self._schemas: dict[str, Schema] = {}

    def register(self, name: str, schema: Schema) -> None:
        """Register a schema node under a name.

        Args:
            name: Unique schema name (e.g., "config.service").
            schema: Boolean or structured schema node.

        Raises:
            ValueError: If name is already registered.
        """
        if name in self._schemas:
            raise ValueError(f"Schema '{name}' is already registered")
        # Rejects anything that is not a schema node
        SchemaValidator(schema)
        self._schemas[name] = schema
        logger.debug("Registered schema %s", name)

    def load_file(self, name: str, path: str | Path) -> Schema:
        """Load a schema document from disk and register it.

        Raises:
            SchemaLoadError: If the file cannot be read or parsed, or does
                not hold a schema node.
            ValueError: If name is already registered.
        """
        schema = load_document(path)
        if not isinstance(schema, (bool, dict)):
            raise SchemaLoadError(
                f"Schema document must be a boolean or an object, got {type(schema).__name__}",
                path=path,
            )
        self.register(name, schema)
        logger.debug("Loaded schema %s from %s", name, path)
        return schema

    def list_schemas(self) -> list[str]:
        """Return list of registered schema names."""
        return list(self._schemas.keys())

    def get_schema(self, name: str) -> Schema:
        """Get a registered schema node.

        Raises:
            KeyError: If schema name is not registered.
        """
        if name not in self._schemas:
            raise KeyError(f"Schema '{name}' is not registered")
        return self._schemas[name]

    def validate(self, name: str, value: Any) -> ValidationResult:
        """Validate a value against a registered schema.

        Raises:
            KeyError: If schema name is not registered.
        """
        result = SchemaValidator(self.get_schema(name)).validate(value)
        if result.is_valid:
            logger.debug("Value is valid against %s", name)
        else:
            logger.debug("Value has %d violation(s) against %s", len(result.result), name)
        return result


# =============================================================================
# TOP-LEVEL API
# =============================================================================


# Module-level default registry
registry = SchemaRegistry()


def validate_document(
    content: str,
    schema_name: str,
    *,
    registry: SchemaRegistry | None = None,
) -> ValidationResult:
    """Parse a JSON/YAML string and validate it against a named schema.

    Args:
        content: Document text.
        schema_name: Registered schema name.
        registry: Optional SchemaRegistry (defaults to the module-level registry).

    Returns:
        ValidationResult; a syntax error is reported as a single violation
        located at the document root.

    Raises:
        KeyError: If schema_name is not registered.
    """
    reg = registry or _get_default_registry()
    schema = reg.get_schema(schema_name)

    try:
        data = parse_document(content)
    except SchemaLoadError as exc:
        return invalid(Invalid(schema_node=schema, reason=exc.message))

    return reg.validate(schema_name, data)


def _get_default_registry() -> SchemaRegistry:
    """Return the module-level default registry."""
    return registry
