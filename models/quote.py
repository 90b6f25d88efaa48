# -*- coding: utf-8 -*-
"""
Quote request draft model.

The draft is fully initialised at creation: text fields default to empty
strings and enumerated fields to their first-offered choice, so no read
site has to deal with missing sections.

Wire shape (POST /quotes/request):
    {
        "customerInfo": {
            "name", "email", "phone", "company"?,
            "address": {"street", "city", "state", "zipCode", "country"}
        },
        "items": [{"productId", "productName", "quantity",
                   "selectedColor"?, "customizations"?}],
        "projectDetails": {"projectType", "timeline", "budget",
                           "description", "specialRequirements"?},
        "preferredContactMethod",
        "preferredContactTime"?
    }
"""

import copy
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from app.config import Config


class ProjectType(Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    HOSPITALITY = "hospitality"


class Timeline(Enum):
    IMMEDIATE = "immediate"
    ONE_TO_THREE_MONTHS = "1-3 months"
    THREE_TO_SIX_MONTHS = "3-6 months"
    SIX_PLUS_MONTHS = "6+ months"


class Budget(Enum):
    UNDER_10K = "under-10k"
    FROM_10K_TO_25K = "10k-25k"
    FROM_25K_TO_50K = "25k-50k"
    FROM_50K_TO_100K = "50k-100k"
    OVER_100K = "100k+"


class ContactMethod(Enum):
    EMAIL = "email"
    PHONE = "phone"
    BOTH = "both"


def normalize_phone(raw, prefix: str = None) -> str:
    """
    Re-apply the fixed country-code prefix to a phone value.

    Everything except digits typed after the prefix is discarded:
        "9876543210"       -> "+91 9876543210"
        "+91 98765-43210"  -> "+91 9876543210"
    """
    prefix = prefix or Config.PHONE_PREFIX
    value = str(raw or "").strip()
    if value.startswith(prefix):
        value = value[len(prefix):]
    return f"{prefix} {re.sub(r'[^0-9]', '', value)}"


class _Section:
    """Mixin for draft sections addressed by wire field name."""

    # wire name -> attribute name
    FIELDS: ClassVar[Dict[str, str]] = {}

    @classmethod
    def attribute_for(cls, field_name: str) -> str:
        if field_name in cls.FIELDS:
            return cls.FIELDS[field_name]
        if field_name in cls.FIELDS.values():
            return field_name
        raise ValueError(f"Unknown field '{field_name}' for {cls.__name__}")

    @classmethod
    def wire_name(cls, field_name: str) -> str:
        """Wire (and error-map) name of a field given either spelling."""
        attribute = cls.attribute_for(field_name)
        for wire, attr in cls.FIELDS.items():
            if attr == attribute:
                return wire
        return field_name


@dataclass
class ContactInfo(_Section):
    name: str = ""
    email: str = ""
    phone: str = field(default_factory=lambda: f"{Config.PHONE_PREFIX} ")
    company: str = ""

    FIELDS: ClassVar[Dict[str, str]] = {
        "name": "name",
        "email": "email",
        "phone": "phone",
        "company": "company",
    }


@dataclass
class Address(_Section):
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = field(default_factory=lambda: Config.DEFAULT_COUNTRY)

    FIELDS: ClassVar[Dict[str, str]] = {
        "street": "street",
        "city": "city",
        "state": "state",
        "zipCode": "zip_code",
        "country": "country",
    }

    def to_dict(self) -> Dict[str, str]:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "zipCode": self.zip_code,
            "country": self.country,
        }


@dataclass
class QuoteItem:
    """A product line on the quote; seeded from the product selection."""
    product_id: str
    product_name: str
    quantity: int = 1
    selected_color: str = ""
    customizations: str = ""

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError(f"Quantity must be a positive integer, got {self.quantity!r}")

    @classmethod
    def from_product(cls, product, quantity: int = 1,
                     selected_color: str = "", customizations: str = "") -> "QuoteItem":
        """Create an item from a catalog Product."""
        return cls(
            product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            selected_color=selected_color,
            customizations=customizations,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "productId": self.product_id,
            "productName": self.product_name,
            "quantity": self.quantity,
        }
        if self.selected_color:
            data["selectedColor"] = self.selected_color
        if self.customizations:
            data["customizations"] = self.customizations
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuoteItem":
        return cls(
            product_id=str(data.get("productId", "")),
            product_name=data.get("productName", ""),
            quantity=int(data.get("quantity", 1)),
            selected_color=data.get("selectedColor") or "",
            customizations=data.get("customizations") or "",
        )


@dataclass
class ProjectDetails(_Section):
    project_type: ProjectType = ProjectType.RESIDENTIAL
    timeline: Timeline = Timeline.ONE_TO_THREE_MONTHS
    budget: Budget = Budget.FROM_25K_TO_50K
    description: str = ""
    special_requirements: str = ""

    FIELDS: ClassVar[Dict[str, str]] = {
        "projectType": "project_type",
        "timeline": "timeline",
        "budget": "budget",
        "description": "description",
        "specialRequirements": "special_requirements",
    }

    # Enumerated attributes and the Enum each one is coerced to
    ENUMS: ClassVar[Dict[str, type]] = {
        "project_type": ProjectType,
        "timeline": Timeline,
        "budget": Budget,
    }

    def to_dict(self) -> Dict[str, str]:
        data = {
            "projectType": self.project_type.value,
            "timeline": self.timeline.value,
            "budget": self.budget.value,
            "description": self.description,
        }
        if self.special_requirements:
            data["specialRequirements"] = self.special_requirements
        return data


@dataclass
class ContactPreferences(_Section):
    preferred_contact_method: ContactMethod = ContactMethod.EMAIL
    preferred_contact_time: str = ""

    FIELDS: ClassVar[Dict[str, str]] = {
        "preferredContactMethod": "preferred_contact_method",
        "preferredContactTime": "preferred_contact_time",
    }

    ENUMS: ClassVar[Dict[str, type]] = {
        "preferred_contact_method": ContactMethod,
    }


@dataclass
class QuoteDraft:
    """The in-progress answer set of a quote request."""
    contact: ContactInfo = field(default_factory=ContactInfo)
    address: Address = field(default_factory=Address)
    items: List[QuoteItem] = field(default_factory=list)
    project_details: ProjectDetails = field(default_factory=ProjectDetails)
    preferences: ContactPreferences = field(default_factory=ContactPreferences)

    # Section names accepted by QuoteWizardController.update_field()
    SECTIONS: ClassVar[tuple] = ("contact", "address", "project_details", "preferences")

    @classmethod
    def seeded(cls, items: Optional[List[QuoteItem]] = None) -> "QuoteDraft":
        """Create a fresh draft with the given seed items."""
        return cls(items=list(items or []))

    def section(self, name: str) -> _Section:
        if name not in self.SECTIONS:
            raise ValueError(f"Unknown draft section '{name}'")
        return getattr(self, name)

    def get_value(self, section: str, field_name: str) -> Any:
        target = self.section(section)
        return getattr(target, target.attribute_for(field_name))

    def set_value(self, section: str, field_name: str, value: Any):
        """Write a value, coercing strings to the section's Enum types."""
        target = self.section(section)
        attribute = target.attribute_for(field_name)
        enum_type = getattr(target, "ENUMS", {}).get(attribute)
        if enum_type is not None and not isinstance(value, enum_type):
            value = enum_type(value)
        elif enum_type is None:
            value = "" if value is None else str(value)
        setattr(target, attribute, value)

    def copy(self) -> "QuoteDraft":
        return copy.deepcopy(self)

    def to_request(self) -> Dict[str, Any]:
        """Serialize to the quote submission request body."""
        customer_info = {
            "name": self.contact.name.strip(),
            "email": self.contact.email.strip(),
            "phone": self.contact.phone.strip(),
            "address": self.address.to_dict(),
        }
        if self.contact.company.strip():
            customer_info["company"] = self.contact.company.strip()

        body = {
            "customerInfo": customer_info,
            "items": [item.to_dict() for item in self.items],
            "projectDetails": self.project_details.to_dict(),
            "preferredContactMethod": self.preferences.preferred_contact_method.value,
        }
        if self.preferences.preferred_contact_time.strip():
            body["preferredContactTime"] = self.preferences.preferred_contact_time.strip()
        return body

    @classmethod
    def from_request(cls, data: Dict[str, Any]) -> "QuoteDraft":
        """Rebuild a draft from a request body (or a stored quote record)."""
        customer = data.get("customerInfo") or {}
        address = customer.get("address") or {}
        project = data.get("projectDetails") or {}

        draft = cls(items=[QuoteItem.from_dict(item) for item in data.get("items") or []])
        for wire_name in ContactInfo.FIELDS:
            if wire_name in customer:
                draft.set_value("contact", wire_name, customer[wire_name])
        for wire_name in Address.FIELDS:
            if wire_name in address:
                draft.set_value("address", wire_name, address[wire_name])
        for wire_name in ProjectDetails.FIELDS:
            if wire_name in project:
                draft.set_value("project_details", wire_name, project[wire_name])
        for wire_name in ContactPreferences.FIELDS:
            if data.get(wire_name) is not None:
                draft.set_value("preferences", wire_name, data[wire_name])
        return draft
