# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
from dotenv import load_dotenv

load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3005/v1/api")
_API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))
_QUOTE_SUBMIT_TIMEOUT = float(os.getenv("QUOTE_SUBMIT_TIMEOUT", "15"))

# Catalog source: "http" (remote API) or "mock" (in-memory sample data)
_CATALOG_PROVIDER = os.getenv("CATALOG_PROVIDER", "http").lower()

# Locale
_LANGUAGE = os.getenv("STOREFRONT_LANGUAGE", "en")
_DEFAULT_COUNTRY = os.getenv("DEFAULT_COUNTRY", "India")
_PHONE_PREFIX = os.getenv("PHONE_PREFIX", "+91")

# Logging
_LOG_DIR = os.getenv("STOREFRONT_LOG_DIR")
_LOG_LEVEL = os.getenv("STOREFRONT_LOG_LEVEL", "INFO").upper()


@dataclass
class Config:
    """Application configuration."""

    # HTTP API Backend Settings
    # Reads from .env (API_BASE_URL, API_TIMEOUT, QUOTE_SUBMIT_TIMEOUT)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: float = _API_TIMEOUT  # catalog fetches
    QUOTE_SUBMIT_TIMEOUT: float = _QUOTE_SUBMIT_TIMEOUT
    QUOTE_SUBMIT_ENDPOINT: str = "/quotes/request"

    CATALOG_PROVIDER: str = _CATALOG_PROVIDER

    # Quote wizard
    QUOTE_REFERENCE_PREFIX: str = "QTE"
    DEFAULT_COUNTRY: str = _DEFAULT_COUNTRY
    PHONE_PREFIX: str = _PHONE_PREFIX
    LANGUAGE: str = _LANGUAGE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOG_DIR) if _LOG_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "storefront.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL  # console; the file always gets DEBUG

    # Date/Time Formats
    DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"


# Controlled vocabularies
class Vocabularies:
    # Value (wire), Name (English), Name (Hindi)
    PROJECT_TYPES = [
        ("residential", "Residential", "आवासीय"),
        ("commercial", "Commercial", "वाणिज्यिक"),
        ("hospitality", "Hospitality", "आतिथ्य"),
    ]

    TIMELINES = [
        ("immediate", "Immediate (ASAP)", "तुरंत"),
        ("1-3 months", "1-3 Months", "1-3 महीने"),
        ("3-6 months", "3-6 Months", "3-6 महीने"),
        ("6+ months", "6+ Months", "6+ महीने"),
    ]

    BUDGETS = [
        ("under-10k", "Under ₹10k", "₹10k से कम"),
        ("10k-25k", "₹10k-25k", "₹10k-25k"),
        ("25k-50k", "₹25k-50k", "₹25k-50k"),
        ("50k-100k", "₹50k-100k", "₹50k-100k"),
        ("100k+", "₹100k+", "₹100k+"),
    ]

    CONTACT_METHODS = [
        ("email", "Email", "ईमेल"),
        ("phone", "Phone", "फ़ोन"),
        ("both", "Both", "दोनों"),
    ]

    QUOTE_STATUS = [
        ("pending", "Pending", "लंबित"),
        ("reviewed", "Reviewed", "समीक्षित"),
        ("accepted", "Accepted", "स्वीकृत"),
        ("rejected", "Rejected", "अस्वीकृत"),
        ("completed", "Completed", "पूर्ण"),
    ]

    PRODUCT_SORTS = [
        ("price_asc", "Price: Low to High", "कीमत: कम से अधिक"),
        ("price_desc", "Price: High to Low", "कीमत: अधिक से कम"),
        ("name_asc", "Name: A-Z", "नाम: A-Z"),
        ("name_desc", "Name: Z-A", "नाम: Z-A"),
        ("rating_desc", "Top Rated", "सर्वोच्च रेटिंग"),
    ]

    @staticmethod
    def get_label(vocabulary: list, value: str, hindi: bool = False) -> str:
        """Return the display label for a vocabulary value."""
        for code, name_en, name_hi in vocabulary:
            if code == value:
                return name_hi if hindi else name_en
        return value

    @staticmethod
    def codes(vocabulary: list) -> tuple:
        return tuple(code for code, _, _ in vocabulary)
