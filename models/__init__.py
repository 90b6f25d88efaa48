# -*- coding: utf-8 -*-
"""
Storefront Data Models
"""

from .product import Category, Dimensions, Product, ProductQuery
from .quote import (
    Address,
    Budget,
    ContactInfo,
    ContactMethod,
    ContactPreferences,
    ProjectDetails,
    ProjectType,
    QuoteDraft,
    QuoteItem,
    Timeline,
    normalize_phone,
)

__all__ = [
    "Category",
    "Dimensions",
    "Product",
    "ProductQuery",
    "Address",
    "Budget",
    "ContactInfo",
    "ContactMethod",
    "ContactPreferences",
    "ProjectDetails",
    "ProjectType",
    "QuoteDraft",
    "QuoteItem",
    "Timeline",
    "normalize_phone",
]
