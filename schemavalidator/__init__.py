"""JSON Schema (draft-07 subset) structural validator.

Decides whether a value conforms to a schema node and, when it does not,
reports every violation with its schema location and value path. Valid
values come back reconstructed, with schema defaults substituted for
absent properties.

Usage::

    from schemavalidator import builder as S
    from schemavalidator import validate

    schema = S.object_(required={"name": S.string()}, optional={"role": S.string(default="user")})
    result = validate(schema, {"name": "ada"})
    if result.is_valid:
        print(result.result)  # {'name': 'ada', 'role': 'user'}
    else:
        for violation in result.result:
            print(f"{violation.value_path}: {violation.reason}")
"""

from __future__ import annotations

from schemavalidator import builder
from schemavalidator.exceptions import (
    ConfigurationError,
    SchemaError,
    SchemaLoadError,
    SchemaValidatorError,
)
from schemavalidator.jsontypes import UNDEFINED, JsonType, json_type_of
from schemavalidator.models import Invalid, InvalidResult, ValidationResult, ValidResult
from schemavalidator.registry import SchemaRegistry, load_document, registry, validate_document
from schemavalidator.schema import JSONSchema7, Schema
from schemavalidator.validator import SchemaValidator, validate

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "ConfigurationError",
    "Invalid",
    "InvalidResult",
    "JSONSchema7",
    "JsonType",
    "Schema",
    "SchemaError",
    "SchemaLoadError",
    "SchemaRegistry",
    "SchemaValidator",
    "SchemaValidatorError",
    "ValidResult",
    "ValidationResult",
    "builder",
    "json_type_of",
    "load_document",
    "registry",
    "validate",
    "validate_document",
]
