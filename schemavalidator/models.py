"""Validation result models.

``validate()`` returns exactly one of two variants:

- ``ValidResult``: ``is_valid=True`` and ``result`` holds the value as
  reconstructed by the validator (defaults substituted)
- ``InvalidResult``: ``is_valid=False`` and ``result`` holds the ordered
  ``Invalid`` violations

Callers branch on ``is_valid``; ``to_dict()`` produces the wire shape
``{"isValid": ..., "result": ...}``.
"""

from __future__ import annotations

from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from schemavalidator.jsontypes import UNDEFINED

# =============================================================================
# MODELS
# =============================================================================


class Invalid(BaseModel):
    """A single located violation.

    Attributes:
        value: The offending value (``UNDEFINED`` when the value was absent).
        schema_node: The schema node that rejected the value.
        reason: Human-readable description of the violation.
        schema_location: ``#/...`` pointer into the schema.
        value_path: ``#/...`` pointer into the validated value.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    value: Any = UNDEFINED
    schema_node: Any
    reason: str
    schema_location: str = "#"
    value_path: str = "#"

    @property
    def has_value(self) -> bool:
        return self.value is not UNDEFINED

    def to_dict(self) -> dict[str, Any]:
        """Wire representation; ``value`` is omitted when absent."""
        data: dict[str, Any] = {}
        if self.has_value:
            data["value"] = self.value
        data["schema"] = self.schema_node
        data["reason"] = self.reason
        data["schemaLocation"] = self.schema_location
        data["valuePath"] = self.value_path
        return data

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"{self.value_path}: {self.reason}"


class ValidResult(BaseModel):
    """The value conforms; ``result`` is the reconstructed value."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    is_valid: Literal[True] = True
    result: Any = UNDEFINED

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"isValid": True}
        if self.result is not UNDEFINED:
            data["result"] = self.result
        return data


class InvalidResult(BaseModel):
    """The value does not conform; ``result`` lists the violations in discovery order."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    is_valid: Literal[False] = False
    result: list[Invalid] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"isValid": False, "result": [invalid.to_dict() for invalid in self.result]}


ValidationResult: TypeAlias = ValidResult | InvalidResult


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def valid(result: Any = UNDEFINED) -> ValidResult:
    return ValidResult(result=result)


def invalid(*invalids: Invalid) -> InvalidResult:
    return InvalidResult(result=list(invalids))
