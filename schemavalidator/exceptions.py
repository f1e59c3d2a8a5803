"""schemavalidator exception hierarchy.

Value violations are never raised: they are returned as ``Invalid``
records inside a ``ValidationResult``. Exceptions are reserved for
defects outside the validated value (a broken schema, an unreadable
file, bad configuration).

Usage:
    from schemavalidator.exceptions import SchemaError, SchemaLoadError

    try:
        schema = load_document(path)
    except SchemaLoadError as e:
        logger.error("Could not load %s: %s", e.path, e)
"""

from pathlib import Path


class SchemaValidatorError(Exception):
    """Base exception for all schemavalidator errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SchemaError(SchemaValidatorError):
    """A schema node could not be applied (e.g. an uncompilable regex).

    Carries the schema location of the offending node so the caller can
    point at the broken part of the schema document.
    """

    def __init__(self, message: str, *, schema_location: str = "#"):
        self.schema_location = schema_location
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.schema_location}: {self.message}"


class SchemaLoadError(SchemaValidatorError):
    """A schema or document file could not be read or parsed."""

    def __init__(self, message: str, *, path: str | Path | None = None):
        self.path = str(path) if path is not None else None
        super().__init__(message)


class ConfigurationError(SchemaValidatorError):
    """Invalid SCHEMAVALIDATOR_* settings, raised by get_settings()."""

    pass
