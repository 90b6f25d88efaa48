# -*- coding: utf-8 -*-
"""Hindi translations."""

HI_TRANSLATIONS = {
    # Buttons
    "button.back": "पीछे",
    "button.next": "आगे",
    "button.submit": "कोटेशन अनुरोध भेजें",
    "button.close": "बंद करें",
    "button.retry": "फिर से प्रयास करें",

    # Quote wizard steps
    "wizard.step.contact": "संपर्क जानकारी",
    "wizard.step.address": "पता",
    "wizard.step.project": "परियोजना विवरण",
    "wizard.step.preferences": "प्राथमिकताएँ",
    "wizard.step.review": "समीक्षा",
    "wizard.progress": "चरण {current} / {total}",

    # Field labels
    "field.name": "नाम",
    "field.email": "ईमेल",
    "field.phone": "फ़ोन नंबर",
    "field.street": "सड़क का पता",
    "field.city": "शहर",
    "field.state": "राज्य",
    "field.zipCode": "पिन कोड",
    "field.description": "परियोजना का विवरण",

    # Validation
    "validation.required": "{label} आवश्यक है",
    "validation.email_invalid": "कृपया मान्य ईमेल पता दर्ज करें",
    "validation.phone_invalid": "कृपया मान्य फ़ोन नंबर दर्ज करें",

    # Review step
    "review.title": "अपनी जानकारी की समीक्षा करें",
    "review.section.contact": "संपर्क जानकारी",
    "review.section.address": "पता",
    "review.section.project": "परियोजना विवरण",
    "review.section.preferences": "संपर्क प्राथमिकताएँ",
    "review.company": "कंपनी",
    "review.country": "देश",
    "review.project_type": "प्रकार",
    "review.timeline": "समय-सीमा",
    "review.budget": "बजट",
    "review.special_requirements": "विशेष आवश्यकताएँ",
    "review.contact_method": "माध्यम",
    "review.contact_time": "पसंदीदा समय",
    "review.not_provided": "उपलब्ध नहीं",
    "review.any_time": "किसी भी समय",

    # Quote submission
    "quote.submitted": "कोटेशन अनुरोध भेज दिया गया! कोटेशन आईडी: {quote_id}",
    "error.quote.rejected": "आपका कोटेशन अनुरोध नहीं भेजा जा सका। कृपया फिर से प्रयास करें।",
    "error.quote.not_final_step": "भेजने से पहले कृपया अपने अनुरोध की समीक्षा करें।",
    "error.quote.in_progress": "आपका कोटेशन अनुरोध भेजा जा रहा है।",
    "error.quote.already_submitted": "यह कोटेशन अनुरोध पहले ही भेजा जा चुका है।",
    "error.validation.failed": "कृपया चिह्नित फ़ील्ड ठीक करें।",

    # Catalog
    "error.catalog.load_failed": "उत्पाद लोड नहीं हो सके। कृपया फिर से प्रयास करें।",
    "error.catalog.not_found": "अनुरोधित वस्तु नहीं मिली।",

    # API errors
    "error.api.connection": "कनेक्शन त्रुटि। कृपया अपना इंटरनेट कनेक्शन जाँचें।",
    "error.api.timeout": "कनेक्शन का समय समाप्त हो गया। कृपया फिर से प्रयास करें।",
    "error.api.not_found": "संसाधन नहीं मिला।",
    "error.api.server": "सर्वर त्रुटि। कृपया सहायता से संपर्क करें।",
    "error.api.unknown": "एक अनपेक्षित त्रुटि हुई। कृपया फिर से प्रयास करें।",
}
