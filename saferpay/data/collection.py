# ============================================================================
# SCOPE: GLOBAL
# Description: Contenedor de campos con esquema fijo para requests/responses.
# ============================================================================
"""
Parameter Collections.

Every Saferpay request and response is a flat set of upper-case fields
(``ACCOUNTID``, ``AMOUNT``, ...). A ParameterCollection subclass declares the
fields of one message type as pydantic fields named exactly like the wire
names, each carrying its Saferpay condition as metadata.

Extension collections (e.g. Billpay) attach to a base collection: fields set
on the base that belong to an extension are routed to it, and serialization
merges every extension into the base payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from ..condition_converter import matches_condition
from ..exceptions import FieldValidationError, SchemaViolationError

FieldValue = str | int


def condition_field(condition: str | None = None, description: str | None = None) -> Any:
    """
    Declare an optional collection field.

    Args:
        condition: Saferpay condition (e.g. ``ans[..50]``), None for response fields
        description: Human readable field description
    """
    return Field(
        None,
        description=description,
        json_schema_extra={"condition": condition} if condition else None,
    )


class ParameterCollection(BaseModel):
    """
    Named field container with a fixed schema.

    Subclasses set ``NAME`` and ``REQUEST_URL`` and declare their fields with
    ``condition_field``.

    Example:
        >>> params = PayInitParameter().set("AMOUNT", 1000).set("CURRENCY", "CHF")
        >>> params.serialize()
        {'AMOUNT': 1000, 'CURRENCY': 'CHF'}
    """

    NAME: ClassVar[str] = ""
    REQUEST_URL: ClassVar[str] = ""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    _extensions: list[Any] = PrivateAttr(default_factory=list)

    @classmethod
    def get_field_names(cls) -> list[str]:
        """Declared field names, in declaration order."""
        return list(cls.model_fields)

    @classmethod
    def get_request_url(cls) -> str:
        return cls.REQUEST_URL

    @classmethod
    def get_name(cls) -> str:
        return cls.NAME

    @classmethod
    def get_condition(cls, field_name: str) -> str | None:
        """Return the Saferpay condition of a field, or None."""
        field_info = cls.model_fields.get(field_name)
        if field_info is None or not isinstance(field_info.json_schema_extra, dict):
            return None
        return field_info.json_schema_extra.get("condition")

    @classmethod
    def has_field(cls, field_name: str) -> bool:
        return field_name in cls.model_fields

    @property
    def extensions(self) -> list[ParameterCollection]:
        return list(self._extensions)

    def add_extension(self, extension: ParameterCollection) -> ParameterCollection:
        """
        Attach an extension collection.

        Args:
            extension: Collection whose fields are merged into this payload

        Returns:
            self, for chaining
        """
        if extension is self:
            raise ValueError("A collection cannot extend itself")
        self._extensions.append(extension)
        return self

    def set(self, field_name: str, value: FieldValue | None) -> ParameterCollection:
        """
        Store a field value. ``None`` clears the field.

        Fields unknown to this schema are routed to the first extension
        declaring them.

        Raises:
            SchemaViolationError: Unknown field name or non-scalar value
        """
        self._check_assignable(field_name, value)

        if self.has_field(field_name):
            try:
                setattr(self, field_name, value)
            except ValidationError as e:
                raise SchemaViolationError(field_name, f"{self.get_name()}: invalid value for {field_name}") from e
            return self

        self._find_extension(field_name).set(field_name, value)
        return self

    def get(self, field_name: str, default: Any = None) -> Any:
        """Return a field value, or ``default`` when unset or unknown. Never raises."""
        if self.has_field(field_name):
            value = getattr(self, field_name)
            return default if value is None else value

        extension = self._find_extension(field_name)
        if extension is None:
            return default
        return extension.get(field_name, default)

    def update(self, values: Mapping[str, FieldValue | None]) -> ParameterCollection:
        """
        Set every item of a mapping.

        All names and values are checked first; on error nothing is stored.

        Raises:
            SchemaViolationError: Unknown field name or non-scalar value
        """
        for field_name, value in values.items():
            self._check_assignable(field_name, value)

        for field_name, value in values.items():
            self.set(field_name, value)
        return self

    def serialize(self) -> dict[str, FieldValue]:
        """
        Flat payload of every field holding a value, extensions included.

        Returns:
            Mapping of wire field name to value
        """
        data: dict[str, FieldValue] = {}
        for field_name in self.get_field_names():
            value = getattr(self, field_name)
            if value is not None:
                data[field_name] = value

        for extension in self._extensions:
            data.update(extension.serialize())

        return data

    def validate_conditions(self) -> ParameterCollection:
        """
        Check every set value against its condition, extensions included.

        Raises:
            FieldValidationError: Listing every offending field
        """
        errors = self._collect_condition_errors()
        if errors:
            raise FieldValidationError(errors)
        return self

    def _collect_condition_errors(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        for field_name in self.get_field_names():
            value = getattr(self, field_name)
            condition = self.get_condition(field_name)
            if value is None or condition is None:
                continue
            if not matches_condition(value, condition):
                errors[field_name] = condition

        for extension in self._extensions:
            errors.update(extension._collect_condition_errors())

        return errors

    def _check_assignable(self, field_name: str, value: Any) -> None:
        if value is not None and (isinstance(value, bool) or not isinstance(value, (str, int))):
            raise SchemaViolationError(
                field_name,
                f"{self.get_name()}: value for {field_name} must be str or int, got {type(value).__name__}",
            )

        if not self.has_field(field_name) and self._find_extension(field_name) is None:
            raise SchemaViolationError(field_name, f"{self.get_name()}: unknown field {field_name}")

    def _find_extension(self, field_name: str) -> ParameterCollection | None:
        for extension in self._extensions:
            if extension.has_field(field_name) or extension._find_extension(field_name) is not None:
                return extension
        return None
