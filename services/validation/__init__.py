# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    CompositeValidator,
    EmailFieldValidator,
    PhoneFieldValidator,
    RequiredFieldsValidator,
    ValidationStrategy,
)
from .validation_factory import ValidationFactory, get_validation_factory

__all__ = [
    'ValidationStrategy',
    'RequiredFieldsValidator',
    'EmailFieldValidator',
    'PhoneFieldValidator',
    'CompositeValidator',
    'ValidationFactory',
    'get_validation_factory',
]
