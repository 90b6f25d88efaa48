# -*- coding: utf-8 -*-
"""
API Configuration
=================

Connection settings for the storefront backend. Values that are not
passed explicitly are loaded from Config (which reads the .env file).

Example .env:
    API_BASE_URL=http://192.168.1.13:3005/v1/api
    API_TIMEOUT=10
    QUOTE_SUBMIT_TIMEOUT=15
"""

from dataclasses import dataclass
from typing import Optional

from app.config import Config


@dataclass
class ApiConfig:
    """Connection settings for the storefront API."""
    base_url: Optional[str] = None
    timeout: Optional[float] = None  # catalog reads
    submit_timeout: Optional[float] = None  # quote submission

    def __post_init__(self):
        """Load from Config if not provided."""
        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.submit_timeout is None:
            self.submit_timeout = Config.QUOTE_SUBMIT_TIMEOUT

        self.base_url = self.base_url.rstrip('/')
        if self.timeout <= 0 or self.submit_timeout <= 0:
            raise ValueError("API timeouts must be positive")
