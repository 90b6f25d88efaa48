# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Abstract interface for record validation.

A record is a flat mapping of field name to value (one wizard step's
fields). Strategies return a mapping of field name to a human-readable
message; an empty mapping means the record is valid.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from services.translation_manager import tr
from services.validation.rules import is_blank, is_valid_email, is_valid_phone


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.
    """

    @abstractmethod
    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        """
        Validate a record and return error messages keyed by field.

        Args:
            record: Dictionary containing record data to validate

        Returns:
            Field name to error message (empty dict if valid)
        """
        pass

    def is_valid(self, record: Dict[str, Any]) -> bool:
        """Check if record passes all validations."""
        return len(self.validate(record)) == 0


class RequiredFieldsValidator(ValidationStrategy):
    """
    Checks that required fields are present and not blank.
    """

    def __init__(self, required_fields: List[str]):
        """
        Args:
            required_fields: Field names that must be present and non-empty.
                Error labels come from the "field.<name>" translation keys.
        """
        self.required_fields = list(required_fields)

    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        errors = {}
        for field in self.required_fields:
            if is_blank(record.get(field)):
                errors[field] = tr("validation.required", label=tr(f"field.{field}"))
        return errors

    def add_required_field(self, field_name: str):
        if field_name not in self.required_fields:
            self.required_fields.append(field_name)

    def remove_required_field(self, field_name: str):
        if field_name in self.required_fields:
            self.required_fields.remove(field_name)


class EmailFieldValidator(ValidationStrategy):
    """Format check for an email field. Blank values are left to RequiredFieldsValidator."""

    def __init__(self, field: str = "email"):
        self.field = field

    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        value = record.get(self.field)
        if is_blank(value) or is_valid_email(value):
            return {}
        return {self.field: tr("validation.email_invalid")}


class PhoneFieldValidator(ValidationStrategy):
    """Format check for a phone field."""

    def __init__(self, field: str = "phone"):
        self.field = field

    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        value = record.get(self.field)
        if is_blank(value) or is_valid_phone(value):
            return {}
        return {self.field: tr("validation.phone_invalid")}


class CompositeValidator(ValidationStrategy):
    """
    Runs several strategies in order; the first message for a field wins.
    """

    def __init__(self, validators: Optional[List[ValidationStrategy]] = None):
        self.validators = list(validators or [])

    def add(self, validator: ValidationStrategy) -> "CompositeValidator":
        self.validators.append(validator)
        return self

    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        for validator in self.validators:
            for field, message in validator.validate(record).items():
                errors.setdefault(field, message)
        return errors
