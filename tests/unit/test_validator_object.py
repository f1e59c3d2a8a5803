"""Unit tests for the object validator.

Covers required, properties (with default substitution), patternProperties,
additionalProperties, propertyNames, min/maxProperties and the order in
which their violations are reported.
"""

from __future__ import annotations

from schemavalidator import UNDEFINED, validate
from schemavalidator import builder as S
from tests.helpers.validation import expect_invalid_reason, expect_invalid_reasons, expect_valid

MISSING = "Value should not be undefined, schema does not have a default value"


class TestObjectType:
    """Test existence, type guard, const and enum."""

    def test_should_exist(self) -> None:
        schema = S.object_()
        expect_invalid_reason(schema, UNDEFINED, MISSING)
        expect_valid(schema, {}, {})
        expect_valid(S.object_(default={"a": "abc"}), UNDEFINED, {"a": "abc"})

    def test_type_object(self) -> None:
        schema = S.object_(additionalProperties=True)
        expect_invalid_reason(schema, "1234", "Value should have been a object but was of type string")
        expect_invalid_reason(schema, ["a"], "Value should have been a object but was of type array")
        expect_invalid_reason(schema, None, "Value should have been a object but was of type null")
        expect_valid(schema, {"x": "abc"}, {"x": "abc"})

    def test_wrong_type_skips_member_checks(self) -> None:
        violations = expect_invalid_reasons(
            S.object_(required={"a": S.string()}),
            "abc",
            {"reason": "Value should have been a object but was of type string"},
        )
        assert len(violations) == 1

    def test_const(self) -> None:
        """const compares structurally and is reported once."""
        schema = {"type": "object", "const": {"a": 1}}
        violations = expect_invalid_reasons(
            schema, {"a": 2}, {"reason": 'Value should have been exactly {"a":1}'}
        )
        assert len(violations) == 1
        expect_valid(schema, {"a": 1}, {"a": 1})

    def test_enum(self) -> None:
        schema = {"type": "object", "enum": [{"a": 1}, {"b": [2]}]}
        expect_invalid_reason(schema, {}, 'Value should have been one of [{"a":1}, {"b":[2]}]')
        expect_valid(schema, {"b": [2]}, {"b": [2]})


class TestRequired:
    """Test the required check."""

    def test_required_properties(self) -> None:
        """Missing names are listed together, in declaration order."""
        schema = S.object_(required={"a": S.string(), "b": S.number()})
        violations = expect_invalid_reasons(
            schema,
            {},
            {
                "reason": "Value should have all required properties but is missing [a, b]",
                "schema_location": "#",
                "value_path": "#",
            },
        )
        assert len(violations) == 1
        expect_valid(schema, {"a": "abc", "b": 5}, {"a": "abc", "b": 5})

    def test_required_without_properties(self) -> None:
        schema = {"type": "object", "required": ["a", "b"]}
        expect_invalid_reason(
            schema, {"b": 1}, "Value should have all required properties but is missing [a]"
        )

    def test_undefined_value_counts_as_missing(self) -> None:
        schema = {"type": "object", "required": ["a"]}
        expect_invalid_reason(
            schema, {"a": UNDEFINED}, "Value should have all required properties but is missing [a]"
        )

    def test_null_value_is_present(self) -> None:
        expect_valid({"type": "object", "required": ["a"]}, {"a": None}, {"a": None})


class TestProperties:
    """Test declared properties, defaults and the suppression rule."""

    def test_required_properties_in_child(self) -> None:
        schema = S.object_(required={"a": S.object_(required={"b": S.string()})})
        expect_invalid_reasons(
            schema,
            {"a": {}, "c": 2},
            {
                "schema_location": "#/properties/a",
                "value_path": "#/a",
                "reason": "Value should have all required properties but is missing [b]",
            },
            {
                "schema_location": "#/additionalProperties",
                "value_path": "#",
                "reason": "Should have no additional properties, found [c]",
            },
        )
        expect_valid(schema, {"a": {"b": "abc"}}, {"a": {"b": "abc"}})

    def test_map_defaults_in_result(self) -> None:
        schema = S.object_(required={"a": S.object_(optional={"b": S.string(default="xyz")})})
        expect_valid(schema, {"a": {}}, {"a": {"b": "xyz"}})

    def test_default_for_missing_optional_property(self) -> None:
        schema = S.object_(optional={"role": S.string(default="user"), "name": S.string()})
        expect_valid(schema, {"name": "ada"}, {"role": "user", "name": "ada"})

    def test_default_is_not_shared_with_schema(self) -> None:
        """Mutating a reconstructed default leaves the schema untouched."""
        schema = S.object_(optional={"tags": S.array(default=["a"])})
        result = expect_valid(schema, {}, {"tags": ["a"]})
        result["tags"].append("b")
        assert schema["properties"]["tags"]["default"] == ["a"]

    def test_invalid_truthy_property_is_reported(self) -> None:
        schema = S.object_(optional={"a": S.string()})
        violations = expect_invalid_reasons(
            schema,
            {"a": 5},
            {
                "schema_location": "#/properties/a",
                "value_path": "#/a",
                "reason": "Value should have been a string but was of type number",
                "value": 5,
            },
        )
        assert len(violations) == 1

    def test_invalid_falsy_property_is_suppressed(self) -> None:
        """Falsy values failing their property schema are not reported there."""
        schema = S.object_(optional={"a": S.string()}, additionalProperties=True)
        expect_valid(schema, {"a": None}, {"a": None})
        expect_valid(schema, {"a": 0}, {"a": 0})

    def test_suppressed_property_counts_as_additional(self) -> None:
        """A suppressed property is not consumed, so it is an extra key."""
        schema = S.object_(optional={"a": S.string()})
        violations = expect_invalid_reasons(
            schema,
            {"a": 0},
            {
                "schema_location": "#/additionalProperties",
                "reason": "Should have no additional properties, found [a]",
            },
        )
        assert len(violations) == 1

    def test_empty_containers_are_truthy(self) -> None:
        schema = S.object_(optional={"a": S.string(), "b": S.string()})
        violations = validate(schema, {"a": [], "b": {}}).result
        assert [v.value_path for v in violations] == ["#/a", "#/b"]

    def test_nested_locations(self) -> None:
        schema = S.object_(required={"a": S.object_(required={"b": S.array(items=S.integer())})})
        expect_invalid_reasons(
            schema,
            {"a": {"b": [1, "x"]}},
            {
                "schema_location": "#/properties/a/properties/b/items",
                "value_path": "#/a/b/1",
                "reason": "Value should have been a number but was of type string",
            },
        )

    def test_boolean_property_schemas(self) -> None:
        schema = {"type": "object", "properties": {"a": True, "b": False}}
        expect_valid(schema, {"a": 1}, {"a": 1})
        expect_invalid_reasons(
            schema,
            {"b": 1},
            {
                "schema_location": "#/properties/b",
                "value_path": "#/b",
                "reason": "Nothing validates against a false schema",
                "schema_node": False,
            },
        )


class TestPatternProperties:
    """Test patternProperties."""

    SCHEMA = {
        "type": "object",
        "patternProperties": {"^x-": {"type": "integer"}},
        "additionalProperties": False,
    }

    def test_matching_keys_are_validated(self) -> None:
        violations = expect_invalid_reasons(
            self.SCHEMA,
            {"x-a": 1, "x-b": "no", "y": 2},
            {
                "schema_location": "#/patternProperties/^x-",
                "value_path": "#/x-b",
                "reason": "Value should have been a number but was of type string",
            },
            {
                "schema_location": "#/additionalProperties",
                "reason": "Should have no additional properties, found [y]",
            },
        )
        assert len(violations) == 2

    def test_matching_keys_are_not_additional(self) -> None:
        expect_valid(self.SCHEMA, {"x-a": 1, "x-b": 2}, {"x-a": 1, "x-b": 2})

    def test_invalid_falsy_pattern_values_are_reported(self) -> None:
        expect_invalid_reason(
            self.SCHEMA,
            {"x-a": ""},
            "Value should have been a number but was of type string",
            value_path="#/x-a",
        )

    def test_every_matching_pattern_applies(self) -> None:
        schema = {
            "type": "object",
            "patternProperties": {"a": {"type": "string"}, "b": {"type": "string", "minLength": 3}},
        }
        expect_invalid_reasons(
            schema,
            {"ab": "xy"},
            {
                "schema_location": "#/patternProperties/b",
                "value_path": "#/ab",
                "reason": "Value should have a minimum length of 3 character(s)",
            },
        )

    def test_pattern_defaults_merge_with_properties(self) -> None:
        schema = {
            "type": "object",
            "properties": {"name": {"type": "string", "default": "anon"}},
            "patternProperties": {"^n_": {"type": "number"}},
            "additionalProperties": False,
        }
        expect_valid(schema, {"n_1": 1}, {"name": "anon", "n_1": 1})


class TestAdditionalProperties:
    """Test additionalProperties."""

    def test_no_additional_properties(self) -> None:
        schema = S.object_(required={"a": S.string(), "b": S.number()})
        [violation] = expect_invalid_reasons(
            schema,
            {"a": "abc", "b": 5, "c": True},
            {
                "schema_location": "#/additionalProperties",
                "value_path": "#",
                "reason": "Should have no additional properties, found [c]",
            },
        )
        assert violation.schema_node is False
        assert violation.value == {"a": "abc", "b": 5, "c": True}
        expect_valid(schema, {"a": "abc", "b": 5}, {"a": "abc", "b": 5})

    def test_no_additional_properties_empty(self) -> None:
        schema = S.object_(additionalProperties=False)
        expect_invalid_reasons(
            schema,
            {"c": True},
            {
                "schema_location": "#/additionalProperties",
                "value_path": "#",
                "reason": "Should have no additional properties, found [c]",
            },
        )
        expect_valid(schema, {}, {})

    def test_declared_properties_are_not_additional(self) -> None:
        schema = S.object_(required={"a": S.string()})
        expect_invalid_reason(
            schema, {"a": "abc", "c": True}, "Should have no additional properties, found [c]"
        )
        expect_valid(schema, {"a": "abc"}, {"a": "abc"})

    def test_all_extra_names_listed(self) -> None:
        expect_invalid_reason(
            S.object_(additionalProperties=False),
            {"c": 1, "d": 2},
            "Should have no additional properties, found [c,d]",
        )

    def test_absent_additional_properties_passes_extras_through(self) -> None:
        schema = {"type": "object", "properties": {"a": {"type": "string"}}}
        expect_valid(schema, {"a": "x", "z": [1]}, {"a": "x", "z": [1]})

    def test_additional_properties_schema(self) -> None:
        schema = {
            "type": "object",
            "properties": {"a": {"type": "string"}},
            "additionalProperties": {"type": "number"},
        }
        expect_valid(schema, {"a": "s", "b": 2}, {"a": "s", "b": 2})
        expect_invalid_reasons(
            schema,
            {"a": "s", "b": 2, "c": "x"},
            {
                "schema_location": "#/additionalProperties",
                "value_path": "#/c",
                "reason": "Value should have been a number but was of type string",
            },
        )

    def test_additional_schema_drops_falsy_failures(self) -> None:
        schema = {"type": "object", "additionalProperties": {"type": "number"}}
        expect_valid(schema, {"b": ""}, {})


class TestPropertyNames:
    """Test propertyNames."""

    def test_names_checked_as_strings(self) -> None:
        schema = {"type": "object", "propertyNames": {"pattern": "^[a-z]+$"}}
        expect_valid(schema, {"ok": 1}, {"ok": 1})
        [violation] = expect_invalid_reasons(
            schema,
            {"ok": 1, "Bad": 2},
            {
                "schema_location": "#/propertyNames",
                "value_path": "#",
                "reason": "Value should match the following pattern /^[a-z]+$/",
            },
        )
        assert violation.value == "Bad"

    def test_name_length(self) -> None:
        schema = {"type": "object", "propertyNames": {"maxLength": 3}}
        expect_invalid_reason(schema, {"long": 1}, "Value should have a maximum length of 3 character(s)")

    def test_false_property_names(self) -> None:
        schema = {"type": "object", "propertyNames": False}
        expect_valid(schema, {}, {})
        expect_invalid_reasons(
            schema,
            {"a": 1},
            {
                "schema_location": "#/propertyNames",
                "value_path": "#",
                "reason": "Nothing validates against a false schema",
            },
        )


class TestCardinality:
    """Test minProperties and maxProperties."""

    def test_min_properties(self) -> None:
        schema = {"type": "object", "minProperties": 2}
        expect_invalid_reason(schema, {"a": 1}, "Object should have a minimum of 2 properties")
        expect_valid(schema, {"a": 1, "b": 2})

    def test_max_properties(self) -> None:
        schema = {"type": "object", "maxProperties": 1}
        expect_invalid_reason(schema, {"a": 1, "b": 2}, "Object should have a maximum of 1 properties")
        expect_valid(schema, {"a": 1})

    def test_max_properties_zero(self) -> None:
        schema = {"type": "object", "maxProperties": 0}
        expect_valid(schema, {}, {})
        expect_invalid_reason(schema, {"a": 1}, "Object should have a maximum of 0 properties")


class TestViolationOrder:
    """Test that object violations are accumulated in a fixed order."""

    def test_all_checks_report(self) -> None:
        schema = {
            "type": "object",
            "required": ["z"],
            "properties": {"a": {"type": "string"}},
            "additionalProperties": False,
            "propertyNames": {"maxLength": 1},
            "maxProperties": 1,
        }
        violations = validate(schema, {"a": 5, "bb": 1}).result
        assert [v.reason for v in violations] == [
            "Value should have all required properties but is missing [z]",
            "Value should have been a string but was of type number",
            "Should have no additional properties, found [bb]",
            "Value should have a maximum length of 1 character(s)",
            "Object should have a maximum of 1 properties",
        ]
