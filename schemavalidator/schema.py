"""Typing declarations for JSON Schema draft-07 nodes.

A schema node is either a boolean (``True`` accepts everything, ``False``
accepts nothing) or a structured mapping. Structured nodes are plain
mappings so schemas loaded from JSON/YAML documents, written as literals
or produced by ``schemavalidator.builder`` are all accepted as-is. The
validator only ever reads them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias, TypedDict, Union

TypeName: TypeAlias = str

JSONSchema7 = TypedDict(
    "JSONSchema7",
    {
        "$id": str,
        "$schema": str,
        "$ref": str,
        "$comment": str,
        "title": str,
        "description": str,
        "default": Any,
        "readOnly": bool,
        "writeOnly": bool,
        "examples": Sequence[Any],
        "const": Any,
        "enum": Sequence[Any],
        "type": Union[TypeName, Sequence[TypeName]],
        "format": str,
        # string
        "minLength": int,
        "maxLength": int,
        "pattern": str,
        # number / integer
        "multipleOf": Union[int, float],
        "minimum": Union[int, float],
        "maximum": Union[int, float],
        "exclusiveMinimum": Union[int, float],
        "exclusiveMaximum": Union[int, float],
        # array
        "items": Union["Schema", Sequence["Schema"]],
        "additionalItems": "Schema",
        "minItems": int,
        "maxItems": int,
        "uniqueItems": bool,
        "contains": "Schema",
        # object
        "properties": Mapping[str, "Schema"],
        "patternProperties": Mapping[str, "Schema"],
        "additionalProperties": "Schema",
        "required": Sequence[str],
        "propertyNames": "Schema",
        "minProperties": int,
        "maxProperties": int,
        "definitions": Mapping[str, "Schema"],
        "dependencies": Mapping[str, Union["Schema", Sequence[str]]],
        # combinators (declared, not applied by the validator)
        "allOf": Sequence["Schema"],
        "anyOf": Sequence["Schema"],
        "oneOf": Sequence["Schema"],
        "not": "Schema",
        "if": "Schema",
        "then": "Schema",
        "else": "Schema",
    },
    total=False,
)

Schema: TypeAlias = Union[bool, JSONSchema7, Mapping[str, Any]]
