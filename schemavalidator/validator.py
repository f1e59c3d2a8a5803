"""Structural JSON Schema (draft-07 subset) validator.

``validate(schema, value)`` walks the value guided by the schema and
returns a ``ValidationResult``: either the value as reconstructed by the
validator (with schema defaults substituted for absent values) or every
violation found, each located by a ``#/...`` schema pointer and value
path.

Violations accumulate; no check short-circuits its siblings. The only
check that stops descent is a tuple-mode array shorter than its tuple,
which skips the per-element checks for that array alone.

Applied keywords: ``type`` (single), ``const``, ``enum``, ``default``,
``minLength``/``maxLength``/``pattern``, ``minimum``/``maximum``/
``exclusiveMinimum``/``exclusiveMaximum``/``multipleOf``, ``items``
(list and tuple mode), ``required``, ``properties``,
``patternProperties``, ``additionalProperties``, ``propertyNames``,
``minProperties``/``maxProperties``.

Declared but not applied: ``minItems``/``maxItems``/``uniqueItems``,
``additionalItems``, ``$ref`` and the combinators. A union ``type``
(list of type names) always yields an invalid result with no violations.

Validation is recursive: nesting deeper than the interpreter recursion
limit raises ``RecursionError``.
"""

from __future__ import annotations

import copy
import logging
import math
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from schemavalidator.exceptions import SchemaError
from schemavalidator.jsontypes import (
    UNDEFINED,
    JsonType,
    is_array,
    is_falsy,
    is_number,
    is_object,
    json_contains,
    json_equal,
    render,
    render_json,
    type_mismatch,
)
from schemavalidator.models import Invalid, ValidationResult, invalid, valid
from schemavalidator.schema import Schema

logger = logging.getLogger(__name__)

# Renders one const/enum literal inside a reason
Renderer = Callable[[Any], str]


def _quoted(literal: Any) -> str:
    return f"'{render(literal)}'"


def _is_integral(value: int | float) -> bool:
    if isinstance(value, int):
        return True
    if math.isinf(value):
        return True
    return value.is_integer()


def _is_multiple(value: int | float, multiple_of: int | float) -> bool:
    """Remainder check; exact for ints, floating remainder otherwise."""
    if isinstance(value, int) and isinstance(multiple_of, int):
        return value % multiple_of == 0
    try:
        return math.isfinite(value) and math.fmod(value, multiple_of) == 0
    except OverflowError:
        # An int beyond float range has no finite float remainder
        return False


def _search(pattern: str, text: str, schema_location: str) -> bool:
    """Unanchored regex search; a broken pattern is a schema defect."""
    try:
        return re.search(pattern, text) is not None
    except re.error as exc:
        raise SchemaError(
            f"Invalid regular expression /{pattern}/: {exc}",
            schema_location=schema_location,
        ) from exc


@dataclass
class _ObjectPart:
    """Accumulator for the object validator.

    ``consumed`` records every key the properties and patternProperties
    steps merged, valid or not. Those keys are never additional.
    """

    object: dict[str, Any] = field(default_factory=dict)
    consumed: set[Any] = field(default_factory=set)
    invalids: list[Invalid] = field(default_factory=list)

    def merge(self, key: Any, validation: ValidationResult) -> None:
        self.consumed.add(key)
        if not validation.is_valid:
            self.object.pop(key, None)
            self.invalids.extend(validation.result)
        elif validation.result is UNDEFINED:
            self.object.pop(key, None)
        else:
            self.object[key] = validation.result

    def pass_through(self, value: Mapping[Any, Any], keys: Sequence[Any]) -> None:
        for key in keys:
            self.object[key] = value[key]


class SchemaValidator:
    """Validates values against a single schema node.

    The node is only read, never modified, so one validator (or one
    schema) can serve any number of concurrent validations.

    Args:
        schema: Boolean schema or structured schema mapping.

    Raises:
        SchemaError: If the node is neither a boolean nor a mapping.
    """

    def __init__(self, schema: Schema) -> None:
        if not isinstance(schema, (bool, Mapping)):
            raise SchemaError(
                f"Schema node must be a boolean or an object, got {type(schema).__name__}"
            )
        self._schema = schema

    @property
    def schema(self) -> Schema:
        return self._schema

    def validate(
        self,
        value: Any = UNDEFINED,
        schema_location: str = "#",
        value_path: str = "#",
    ) -> ValidationResult:
        """Validate a value against this validator's schema node.

        Args:
            value: Value to validate; ``UNDEFINED`` when absent.
            schema_location: Pointer of this node within the root schema.
            value_path: Pointer of this value within the root value.

        Returns:
            ValidResult with the reconstructed value, or InvalidResult
            with the violations in discovery order.
        """
        schema = self._schema
        if isinstance(schema, bool):
            if schema:
                return valid(value)
            return invalid(
                Invalid(
                    value=value,
                    schema_node=schema,
                    reason="Nothing validates against a false schema",
                    schema_location=schema_location,
                    value_path=value_path,
                )
            )

        if value is UNDEFINED:
            default = schema.get("default", UNDEFINED)
            if default is not UNDEFINED:
                # Results never alias the shared schema
                return valid(copy.deepcopy(default))
            return invalid(
                Invalid(
                    schema_node=schema,
                    reason="Value should not be undefined, schema does not have a default value",
                    schema_location=schema_location,
                    value_path=value_path,
                )
            )

        declared = schema.get("type")
        if is_array(declared):
            return self._validate_any_of(schema_location, value_path, value, declared)

        json_type = JsonType.parse(declared)
        if json_type is None:
            return valid(value)

        validators = {
            JsonType.STRING: self._validate_string,
            JsonType.NUMBER: self._validate_number,
            JsonType.INTEGER: self._validate_integer,
            JsonType.BOOLEAN: self._validate_boolean,
            JsonType.NULL: self._validate_null,
            JsonType.OBJECT: self._validate_object,
            JsonType.ARRAY: self._validate_array,
        }
        return validators[json_type](schema_location, value_path, value)

    # ------------------------------------------------------------------
    # Shared checks
    # ------------------------------------------------------------------

    def _violation(
        self,
        reason: str,
        schema_location: str,
        value_path: str,
        value: Any,
    ) -> Invalid:
        return Invalid(
            value=value,
            schema_node=self._schema,
            reason=reason,
            schema_location=schema_location,
            value_path=value_path,
        )

    def _guard_reasons(
        self,
        value: Any,
        json_type: JsonType,
        render_literal: Renderer | None = None,
    ) -> list[str]:
        """Type guard, then const and enum when a renderer is given."""
        reasons: list[str] = []
        mismatch = type_mismatch(value, json_type)
        if mismatch:
            reasons.append(mismatch)
        if render_literal is None:
            return reasons

        const = self._schema.get("const", UNDEFINED)
        if const is not UNDEFINED and not json_equal(value, const):
            reasons.append(f"Value should have been exactly {render_literal(const)}")
        enum = self._schema.get("enum")
        if enum is not None and not json_contains(enum, value):
            allowed = ", ".join(render_literal(literal) for literal in enum)
            reasons.append(f"Value should have been one of [{allowed}]")
        return reasons

    def _result(
        self,
        reasons: list[str],
        schema_location: str,
        value_path: str,
        value: Any,
    ) -> ValidationResult:
        if reasons:
            return invalid(
                *(self._violation(reason, schema_location, value_path, value) for reason in reasons)
            )
        return valid(value)

    # ------------------------------------------------------------------
    # Union types
    # ------------------------------------------------------------------

    def _validate_any_of(
        self,
        schema_location: str,
        value_path: str,
        value: Any,
        types: Sequence[Any],
    ) -> ValidationResult:
        # Union types are not applied yet: always invalid, no violations.
        logger.debug(
            "Union type %s at %s is not supported; reporting %s as invalid",
            list(types),
            schema_location,
            value_path,
        )
        return invalid()

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def _validate_string(self, schema_location: str, value_path: str, value: Any) -> ValidationResult:
        schema = self._schema
        reasons = self._guard_reasons(value, JsonType.STRING, _quoted)
        if isinstance(value, str):
            min_length = schema.get("minLength")
            if min_length is not None and len(value) < min_length:
                reasons.append(f"Value should have a minimum length of {render(min_length)} character(s)")
            max_length = schema.get("maxLength")
            if max_length is not None and len(value) > max_length:
                reasons.append(f"Value should have a maximum length of {render(max_length)} character(s)")
            pattern = schema.get("pattern")
            if pattern is not None and not _search(pattern, value, f"{schema_location}/pattern"):
                reasons.append(f"Value should match the following pattern /{pattern}/")
        return self._result(reasons, schema_location, value_path, value)

    def _validate_number(self, schema_location: str, value_path: str, value: Any) -> ValidationResult:
        schema = self._schema
        reasons = self._guard_reasons(value, JsonType.NUMBER, render)
        if is_number(value):
            minimum = schema.get("minimum")
            if minimum is not None and value < minimum:
                reasons.append(f"Value should have a minimum value of {render(minimum)}")
            exclusive_minimum = schema.get("exclusiveMinimum")
            if exclusive_minimum is not None and value <= exclusive_minimum:
                reasons.append(f"Value should have an exclusive minimum value of {render(exclusive_minimum)}")
            maximum = schema.get("maximum")
            if maximum is not None and value > maximum:
                reasons.append(f"Value should have a maximum value of {render(maximum)}")
            exclusive_maximum = schema.get("exclusiveMaximum")
            if exclusive_maximum is not None and value >= exclusive_maximum:
                reasons.append(f"Value should have an exclusive maximum value of {render(exclusive_maximum)}")
            multiple_of = schema.get("multipleOf")
            # multipleOf of 0 is no constraint
            if multiple_of is not None and multiple_of != 0 and not _is_multiple(value, multiple_of):
                reasons.append(f"Value should be a multiple of {render(multiple_of)}")
        return self._result(reasons, schema_location, value_path, value)

    def _validate_integer(self, schema_location: str, value_path: str, value: Any) -> ValidationResult:
        validation = self._validate_number(schema_location, value_path, value)
        if is_number(value) and not _is_integral(value):
            others = [] if validation.is_valid else validation.result
            return invalid(
                self._violation("Value should have been an integer", schema_location, value_path, value),
                *others,
            )
        return validation

    def _validate_boolean(self, schema_location: str, value_path: str, value: Any) -> ValidationResult:
        reasons = self._guard_reasons(value, JsonType.BOOLEAN)
        return self._result(reasons, schema_location, value_path, value)

    def _validate_null(self, schema_location: str, value_path: str, value: Any) -> ValidationResult:
        reasons = self._guard_reasons(value, JsonType.NULL)
        return self._result(reasons, schema_location, value_path, value)

    # ------------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------------

    def _validate_array(self, schema_location: str, value_path: str, value: Any) -> ValidationResult:
        invalids = [
            self._violation(reason, schema_location, value_path, value)
            for reason in self._guard_reasons(value, JsonType.ARRAY, render_json)
        ]
        array = value
        if is_array(value):
            array = self._validate_items(schema_location, value_path, value, invalids)
        if invalids:
            return invalid(*invalids)
        return valid(array)

    def _validate_items(
        self,
        schema_location: str,
        value_path: str,
        value: Sequence[Any],
        invalids: list[Invalid],
    ) -> Sequence[Any]:
        """Apply ``items`` in list or tuple mode, collecting into ``invalids``."""
        items = self._schema.get("items", UNDEFINED)
        if items is UNDEFINED:
            return value

        array: list[Any] = []
        if is_array(items):
            if len(value) < len(items):
                invalids.append(
                    self._violation(
                        f"Should have tuple length {len(items)} but was {len(value)}",
                        schema_location,
                        value_path,
                        value,
                    )
                )
                return array
            for index, item_schema in enumerate(items):
                validation = validate(
                    item_schema,
                    value[index],
                    f"{schema_location}/items/{index}",
                    f"{value_path}/{index}",
                )
                _append_element(array, invalids, validation)
            # Only positional results are kept; elements past the tuple are dropped
            return array

        for index, element in enumerate(value):
            validation = validate(items, element, f"{schema_location}/items", f"{value_path}/{index}")
            _append_element(array, invalids, validation)
        return array

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    def _validate_object(self, schema_location: str, value_path: str, value: Any) -> ValidationResult:
        invalids = [
            self._violation(reason, schema_location, value_path, value)
            for reason in self._guard_reasons(value, JsonType.OBJECT, render_json)
        ]
        reconstructed: dict[str, Any] = {}
        if is_object(value):
            part = self._validate_members(schema_location, value_path, value)
            invalids.extend(part.invalids)
            reconstructed = part.object
        if invalids:
            return invalid(*invalids)
        return valid(reconstructed)

    def _validate_members(
        self,
        schema_location: str,
        value_path: str,
        value: Mapping[Any, Any],
    ) -> _ObjectPart:
        """Run the object checks in order: required, properties,
        patternProperties, additionalProperties, propertyNames, cardinality.
        """
        schema = self._schema
        keys = list(value.keys())
        defined_keys = [key for key in keys if value[key] is not UNDEFINED]
        defined = set(defined_keys)
        part = _ObjectPart()

        missing = [name for name in schema.get("required") or () if name not in defined]
        if missing:
            part.invalids.append(
                self._violation(
                    f"Value should have all required properties but is missing [{', '.join(missing)}]",
                    schema_location,
                    value_path,
                    value,
                )
            )

        self._merge_properties(schema_location, value_path, value, part)
        self._merge_pattern_properties(schema_location, value_path, value, keys, part)
        extra = [key for key in defined_keys if key not in part.consumed]
        self._merge_additional_properties(schema_location, value_path, value, extra, part)

        names_schema = schema.get("propertyNames", UNDEFINED)
        if names_schema is not UNDEFINED:
            names_location = f"{schema_location}/propertyNames"
            for key in keys:
                validation = _validate_property_name(names_schema, key, names_location, value_path)
                if not validation.is_valid:
                    part.invalids.extend(validation.result)

        min_properties = schema.get("minProperties")
        if min_properties and len(keys) < min_properties:
            part.invalids.append(
                self._violation(
                    f"Object should have a minimum of {render(min_properties)} properties",
                    schema_location,
                    value_path,
                    value,
                )
            )
        max_properties = schema.get("maxProperties")
        if max_properties is not None and len(keys) > max_properties:
            part.invalids.append(
                self._violation(
                    f"Object should have a maximum of {render(max_properties)} properties",
                    schema_location,
                    value_path,
                    value,
                )
            )
        return part

    def _merge_properties(
        self,
        schema_location: str,
        value_path: str,
        value: Mapping[Any, Any],
        part: _ObjectPart,
    ) -> None:
        for name, child in (self._schema.get("properties") or {}).items():
            property_value = value.get(name, UNDEFINED)
            validation = validate(
                child,
                property_value,
                f"{schema_location}/properties/{name}",
                f"{value_path}/{name}",
            )
            # Absent or falsy optional values are left to the required check
            if not validation.is_valid and is_falsy(property_value):
                continue
            part.merge(name, validation)

    def _merge_pattern_properties(
        self,
        schema_location: str,
        value_path: str,
        value: Mapping[Any, Any],
        keys: list[Any],
        part: _ObjectPart,
    ) -> None:
        for pattern, child in (self._schema.get("patternProperties") or {}).items():
            pattern_location = f"{schema_location}/patternProperties/{pattern}"
            for key in keys:
                if not _search(pattern, str(key), pattern_location):
                    continue
                validation = validate(child, value[key], pattern_location, f"{value_path}/{key}")
                part.merge(key, validation)

    def _merge_additional_properties(
        self,
        schema_location: str,
        value_path: str,
        value: Mapping[Any, Any],
        extra: list[Any],
        part: _ObjectPart,
    ) -> None:
        if not extra:
            return
        additional = self._schema.get("additionalProperties", UNDEFINED)
        if additional is UNDEFINED or additional is True:
            part.pass_through(value, extra)
            return

        additional_location = f"{schema_location}/additionalProperties"
        if additional is False:
            part.invalids.append(
                Invalid(
                    value=value,
                    schema_node=False,
                    reason=f"Should have no additional properties, found [{','.join(map(str, extra))}]",
                    schema_location=additional_location,
                    value_path=value_path,
                )
            )
            return

        for key in extra:
            property_value = value[key]
            validation = validate(additional, property_value, additional_location, f"{value_path}/{key}")
            if not validation.is_valid and is_falsy(property_value):
                continue
            part.merge(key, validation)


def _append_element(array: list[Any], invalids: list[Invalid], validation: ValidationResult) -> None:
    if validation.is_valid:
        array.append(None if validation.result is UNDEFINED else validation.result)
    else:
        array.append(None)
        invalids.extend(validation.result)


def _validate_property_name(
    names_schema: Schema,
    name: Any,
    schema_location: str,
    value_path: str,
) -> ValidationResult:
    """Apply ``propertyNames`` to one key.

    Structured nodes are applied as string schemas whether or not they
    declare ``type``; boolean nodes go through the dispatcher.
    """
    validator = SchemaValidator(names_schema)
    if isinstance(names_schema, bool):
        return validator.validate(str(name), schema_location, value_path)
    return validator._validate_string(schema_location, value_path, str(name))


def validate(
    schema: Schema,
    value: Any = UNDEFINED,
    schema_location: str = "#",
    value_path: str = "#",
) -> ValidationResult:
    """Validate a value against a schema node.

    Args:
        schema: Boolean schema or structured schema mapping.
        value: Value to validate; omit (or pass ``UNDEFINED``) for an absent value.
        schema_location: Pointer of ``schema`` within its root schema.
        value_path: Pointer of ``value`` within its root value.

    Returns:
        ValidResult or InvalidResult.

    Raises:
        SchemaError: If the schema is not a boolean/mapping or holds an
            uncompilable regex.

    Example::

        result = validate({"type": "string", "minLength": 2}, "x")
        if not result.is_valid:
            for violation in result.result:
                print(f"{violation.value_path}: {violation.reason}")
    """
    return SchemaValidator(schema).validate(value, schema_location, value_path)
