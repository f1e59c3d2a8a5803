"""Schema builder DSL.

Free constructor functions returning plain schema mappings, plus a
``Schemas`` collection for named definitions. Conventionally imported as
``S``::

    from schemavalidator import builder as S

    person = S.object_(
        required={"name": S.string(minLength=1)},
        optional={"age": S.integer(minimum=0), "tags": S.array(items=S.string())},
    )

Keyword arguments are JSON Schema keywords and are copied verbatim, so
they keep their camelCase spelling (``minLength``, ``additionalProperties``).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from schemavalidator.schema import JSONSchema7, Schema


def _typed(type_name: str, props: Mapping[str, Any]) -> JSONSchema7:
    return {"type": type_name, **props}  # type: ignore[return-value,typeddict-item]


def string(**props: Any) -> JSONSchema7:
    return _typed("string", props)


def number(**props: Any) -> JSONSchema7:
    return _typed("number", props)


def integer(**props: Any) -> JSONSchema7:
    return _typed("integer", props)


def boolean(**props: Any) -> JSONSchema7:
    return _typed("boolean", props)


def null(**props: Any) -> JSONSchema7:
    return _typed("null", props)


def array(**props: Any) -> JSONSchema7:
    return _typed("array", props)


def object_(
    *,
    title: str | None = None,
    required: Mapping[str, Schema] | None = None,
    optional: Mapping[str, Schema] | None = None,
    **props: Any,
) -> JSONSchema7:
    """Build an object schema.

    ``required`` and ``optional`` both feed ``properties``; only the names
    of ``required`` are listed under ``required``. Unless overridden,
    ``additionalProperties`` is ``False``. Called without arguments this
    returns the bare ``{"type": "object"}``.
    """
    if title is None and required is None and optional is None and not props:
        return {"type": "object"}

    schema: dict[str, Any] = {"type": "object"}
    if title:
        schema["title"] = title
    if required is not None:
        schema["required"] = list(required)
    schema["properties"] = {**(required or {}), **(optional or {})}
    schema.update(props)
    schema["additionalProperties"] = props.get("additionalProperties", False)
    return schema  # type: ignore[return-value]


def ref(location: str) -> JSONSchema7:
    """Reference another schema by pointer (not resolved by the validator)."""
    return {"$ref": location}


# =============================================================================
# NAMED DEFINITIONS
# =============================================================================


class SchemaBuilder:
    """Builder bound to a ``Schemas`` collection and one definition name.

    Adds reference helpers on top of the free constructors and titles
    object schemas after the definition they are built for.
    """

    def __init__(self, location: str, name: str | None = None) -> None:
        self._location = location
        self._name = name

    def ref(self, name: str) -> JSONSchema7:
        return ref(f"{self._location}/{name}")

    def string(self, **props: Any) -> JSONSchema7:
        return string(**props)

    def number(self, **props: Any) -> JSONSchema7:
        return number(**props)

    def integer(self, **props: Any) -> JSONSchema7:
        return integer(**props)

    def boolean(self, **props: Any) -> JSONSchema7:
        return boolean(**props)

    def null(self, **props: Any) -> JSONSchema7:
        return null(**props)

    def array(self, **props: Any) -> JSONSchema7:
        return array(**props)

    def array_of(self, name: str, **props: Any) -> JSONSchema7:
        """Array whose items reference the named definition."""
        return array(items=self.ref(name), **props)

    def object_(
        self,
        *,
        title: str | None = None,
        required: Mapping[str, Schema] | None = None,
        optional: Mapping[str, Schema] | None = None,
        **props: Any,
    ) -> JSONSchema7:
        return object_(
            title=title or self._name,
            required=required,
            optional=optional,
            **props,
        )


SchemaFactory = Callable[[SchemaBuilder], Schema]


class Schemas:
    """Collection of named schemas addressed by ``<location>/<name>``.

    Usage::

        defs = (
            Schemas.create()
            .add("Tag", S.string(minLength=1))
            .add("Post", lambda b: b.object_(required={"tags": b.array_of("Tag")}))
        )
        root = {"definitions": defs.definitions, **defs.definitions["Post"]}
    """

    def __init__(self, location: str) -> None:
        self._location = location
        self._schemas: dict[str, Schema] = {}

    @classmethod
    def create(cls, location: str = "#/definitions") -> Schemas:
        return cls(location)

    def add(self, name: str, schema: Schema | SchemaFactory) -> Schemas:
        """Add a schema, or build one with a factory receiving a ``SchemaBuilder``."""
        if callable(schema):
            self._schemas[name] = schema(SchemaBuilder(self._location, name))
        else:
            self._schemas[name] = schema
        return self

    def ref(self, name: str) -> str:
        return f"{self._location}/{name}"

    @property
    def definitions(self) -> dict[str, Schema]:
        return dict(self._schemas)
