# -*- coding: utf-8 -*-
"""
Storefront Application Core Module
"""

from .config import Config, Vocabularies
from .api_config import ApiConfig

__all__ = ["Config", "Vocabularies", "ApiConfig"]
