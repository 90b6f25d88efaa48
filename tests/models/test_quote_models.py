# -*- coding: utf-8 -*-
"""
Tests for the quote draft model.

Tests cover:
- Defaults of a fresh draft
- Phone prefix normalization
- Field access by wire or attribute name
- Request body serialization
"""

import pytest

from models.quote import (
    Budget, ContactMethod, ProjectType, QuoteDraft, QuoteItem, Timeline,
    normalize_phone,
)
from models.product import Product, ProductQuery


class TestDraftDefaults:
    """Test a freshly created draft."""

    def test_text_fields_start_empty(self):
        """Test text fields default to empty strings."""
        draft = QuoteDraft()
        assert draft.contact.name == ""
        assert draft.address.street == ""
        assert draft.project_details.description == ""

    def test_enumerated_defaults(self):
        """Test enumerated fields default to their first-offered choices."""
        draft = QuoteDraft()
        assert draft.project_details.project_type == ProjectType.RESIDENTIAL
        assert draft.project_details.timeline == Timeline.ONE_TO_THREE_MONTHS
        assert draft.project_details.budget == Budget.FROM_25K_TO_50K
        assert draft.preferences.preferred_contact_method == ContactMethod.EMAIL

    def test_phone_and_country_defaults(self):
        """Test phone starts with the country prefix and country is India."""
        draft = QuoteDraft()
        assert draft.contact.phone == "+91 "
        assert draft.address.country == "India"

    def test_seeded_items_are_copied(self, sofa_item):
        """Test seeding does not share the caller's list."""
        items = [sofa_item]
        draft = QuoteDraft.seeded(items)
        items.append(QuoteItem("prod-2", "Brio Coffee Table"))
        assert len(draft.items) == 1


class TestNormalizePhone:
    """Test the fixed country-code prefix."""

    def test_bare_digits_get_prefix(self):
        assert normalize_phone("9876543210") == "+91 9876543210"

    def test_existing_prefix_not_doubled(self):
        assert normalize_phone("+91 98765-43210") == "+91 9876543210"

    def test_prefix_restored_when_deleted(self):
        """Test clearing the field still leaves the prefix."""
        assert normalize_phone("") == "+91 "
        assert normalize_phone(None) == "+91 "

    def test_letters_dropped(self):
        assert normalize_phone("98abc765") == "+91 98765"

    def test_number_value(self):
        assert normalize_phone(9876543210) == "+91 9876543210"


class TestFieldAccess:
    """Test reading and writing draft fields."""

    def test_wire_and_attribute_names(self):
        """Test zipCode and zip_code address the same field."""
        draft = QuoteDraft()
        draft.set_value("address", "zipCode", "560001")
        assert draft.get_value("address", "zip_code") == "560001"

    def test_enum_coercion_from_code(self):
        """Test string codes are coerced to the section's enum."""
        draft = QuoteDraft()
        draft.set_value("project_details", "timeline", "6+ months")
        assert draft.project_details.timeline == Timeline.SIX_PLUS_MONTHS

    def test_invalid_enum_code_rejected(self):
        draft = QuoteDraft()
        with pytest.raises(ValueError):
            draft.set_value("project_details", "budget", "a lot")

    def test_unknown_section_rejected(self):
        with pytest.raises(ValueError):
            QuoteDraft().set_value("billing", "name", "x")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError):
            QuoteDraft().set_value("contact", "fax", "x")

    def test_copy_is_independent(self):
        """Test a copy does not see later edits."""
        draft = QuoteDraft()
        snapshot = draft.copy()
        draft.set_value("contact", "name", "Asha")
        assert snapshot.contact.name == ""


class TestQuoteItem:
    """Test quote line items."""

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValueError):
            QuoteItem("prod-1", "Sofa", quantity=0)

    def test_from_product(self):
        product = Product(id="prod-3", name="Cove Dining Table", slug="cove-dining-table")
        item = QuoteItem.from_product(product, quantity=3, selected_color="walnut")
        assert item.to_dict() == {
            "productId": "prod-3",
            "productName": "Cove Dining Table",
            "quantity": 3,
            "selectedColor": "walnut",
        }


class TestToRequest:
    """Test the submission request body."""

    def _filled(self, sofa_item):
        draft = QuoteDraft.seeded([sofa_item])
        draft.set_value("contact", "name", "  Asha Rao ")
        draft.set_value("contact", "email", "asha@example.com")
        draft.set_value("contact", "phone", "+91 9876543210")
        draft.set_value("address", "street", "12 MG Road")
        draft.set_value("address", "city", "Bengaluru")
        draft.set_value("address", "state", "Karnataka")
        draft.set_value("address", "zipCode", "560001")
        draft.set_value("project_details", "description", "Living room")
        return draft

    def test_body_shape(self, sofa_item):
        """Test the camelCase request layout."""
        body = self._filled(sofa_item).to_request()

        assert body["customerInfo"]["name"] == "Asha Rao"
        assert body["customerInfo"]["address"] == {
            "street": "12 MG Road",
            "city": "Bengaluru",
            "state": "Karnataka",
            "zipCode": "560001",
            "country": "India",
        }
        assert body["items"] == [
            {"productId": "prod-1", "productName": "Aria Three-Seater Sofa", "quantity": 2}
        ]
        assert body["projectDetails"] == {
            "projectType": "residential",
            "timeline": "1-3 months",
            "budget": "25k-50k",
            "description": "Living room",
        }
        assert body["preferredContactMethod"] == "email"

    def test_optional_fields_omitted_when_empty(self, sofa_item):
        body = self._filled(sofa_item).to_request()
        assert "company" not in body["customerInfo"]
        assert "preferredContactTime" not in body
        assert "specialRequirements" not in body["projectDetails"]

    def test_optional_fields_included_when_set(self, sofa_item):
        draft = self._filled(sofa_item)
        draft.set_value("contact", "company", "Rao Interiors")
        draft.set_value("preferences", "preferredContactTime", "Evenings")
        draft.set_value("project_details", "specialRequirements", "Pet friendly fabric")
        body = draft.to_request()
        assert body["customerInfo"]["company"] == "Rao Interiors"
        assert body["preferredContactTime"] == "Evenings"
        assert body["projectDetails"]["specialRequirements"] == "Pet friendly fabric"

    def test_from_request_restores_draft(self, sofa_item):
        draft = self._filled(sofa_item)
        restored = QuoteDraft.from_request(draft.to_request())
        assert restored.to_request() == draft.to_request()


class TestProductQuery:
    """Test catalog query parameters."""

    def test_unset_values_omitted(self):
        assert ProductQuery(page=2, sort="price_asc").to_params() == {
            "page": "2", "sort": "price_asc",
        }

    def test_unsupported_sort_rejected(self):
        with pytest.raises(ValueError):
            ProductQuery(sort="random")

    def test_product_from_api_maps_mongo_id(self):
        product = Product.from_api({"_id": "abc", "name": "Lamp", "slug": "lamp",
                                    "price": 10, "originalPrice": 12, "__v": 0})
        assert product.id == "abc"
        assert product.is_discounted is True
