# -*- coding: utf-8 -*-
"""
Validation Factory - Creates validators for each group of quote fields.

Provides a central point for creating and managing validation strategies.
"""

from typing import Dict, List, Optional

from .validation_strategy import (
    CompositeValidator,
    EmailFieldValidator,
    PhoneFieldValidator,
    RequiredFieldsValidator,
    ValidationStrategy,
)


class ValidationFactory:
    """
    Registry of validation strategies keyed by record type.

    Built-in record types:
        contact  - name, email, phone (company optional)
        address  - street, city, state, zipCode (country always defaulted)
        project  - description (enumerated fields always defaulted)
    """

    def __init__(self):
        self._validators: Dict[str, ValidationStrategy] = {}
        self._register_default_validators()

    def _register_default_validators(self):
        self.register_validator(
            'contact',
            CompositeValidator([
                RequiredFieldsValidator(['name', 'email', 'phone']),
                EmailFieldValidator('email'),
                PhoneFieldValidator('phone'),
            ])
        )

        self.register_validator(
            'address',
            RequiredFieldsValidator(['street', 'city', 'state', 'zipCode'])
        )

        self.register_validator(
            'project',
            RequiredFieldsValidator(['description'])
        )

    def register_validator(self, record_type: str, validator: ValidationStrategy):
        """
        Register a validation strategy for a specific record type.

        Args:
            record_type: Type identifier (e.g., 'contact', 'address')
            validator: ValidationStrategy instance
        """
        self._validators[record_type.lower()] = validator

    def get_validator(self, record_type: str) -> Optional[ValidationStrategy]:
        return self._validators.get(record_type.lower())

    def has_validator(self, record_type: str) -> bool:
        return record_type.lower() in self._validators

    def get_registered_types(self) -> List[str]:
        return list(self._validators.keys())

    def validate_record(self, record_type: str, record: Dict) -> Dict[str, str]:
        """
        Validate a record using the registered validator.

        Unregistered record types have no rules and always pass.
        """
        validator = self.get_validator(record_type)
        if validator is None:
            return {}
        return validator.validate(record)


_factory_instance: Optional[ValidationFactory] = None


def get_validation_factory() -> ValidationFactory:
    """Get the shared ValidationFactory instance."""
    global _factory_instance
    if _factory_instance is None:
        _factory_instance = ValidationFactory()
    return _factory_instance
