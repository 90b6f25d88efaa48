# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Buttons
    "button.back": "Back",
    "button.next": "Next",
    "button.submit": "Submit Quote Request",
    "button.close": "Close",
    "button.retry": "Retry",

    # Quote wizard steps
    "wizard.step.contact": "Contact Info",
    "wizard.step.address": "Address",
    "wizard.step.project": "Project Details",
    "wizard.step.preferences": "Preferences",
    "wizard.step.review": "Review",
    "wizard.progress": "Step {current} of {total}",

    # Field labels
    "field.name": "Name",
    "field.email": "Email",
    "field.phone": "Phone number",
    "field.street": "Street address",
    "field.city": "City",
    "field.state": "State",
    "field.zipCode": "ZIP code",
    "field.description": "Project description",

    # Validation
    "validation.required": "{label} is required",
    "validation.email_invalid": "Please enter a valid email address",
    "validation.phone_invalid": "Please enter a valid phone number",

    # Review step
    "review.title": "Review Your Information",
    "review.section.contact": "Contact Information",
    "review.section.address": "Address",
    "review.section.project": "Project Details",
    "review.section.preferences": "Contact Preferences",
    "review.company": "Company",
    "review.country": "Country",
    "review.project_type": "Type",
    "review.timeline": "Timeline",
    "review.budget": "Budget",
    "review.special_requirements": "Special Requirements",
    "review.contact_method": "Method",
    "review.contact_time": "Preferred Time",
    "review.not_provided": "N/A",
    "review.any_time": "Any time",

    # Quote submission
    "quote.submitted": "Quote request submitted! Quote ID: {quote_id}",
    "error.quote.rejected": "Your quote request could not be submitted. Please try again.",
    "error.quote.not_final_step": "Please review your request before submitting.",
    "error.quote.in_progress": "Your quote request is already being submitted.",
    "error.quote.already_submitted": "This quote request has already been submitted.",
    "error.validation.failed": "Please correct the highlighted fields.",

    # Catalog
    "error.catalog.load_failed": "Failed to load products. Please try again.",
    "error.catalog.not_found": "The requested item could not be found.",

    # API errors
    "error.api.connection": "Connection error. Please check your internet connection.",
    "error.api.timeout": "Connection timeout. Please try again.",
    "error.api.not_found": "Resource not found.",
    "error.api.server": "Server error. Please contact support.",
    "error.api.unknown": "An unexpected error occurred. Please try again.",
}
