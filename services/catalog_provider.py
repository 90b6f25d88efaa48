# -*- coding: utf-8 -*-
"""
Catalog Provider Abstraction Layer.

Read-only access to categories and products, with interchangeable sources:
- MockCatalogProvider: in-memory sample catalog for development and tests
- HttpCatalogProvider: the storefront REST API

Lookups by slug return None when the record does not exist so that views
can render a not-found state; every other failure raises CatalogException.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from models.product import Category, Product, ProductQuery
from utils.logger import get_logger

logger = get_logger(__name__)


class CatalogProviderType(Enum):
    """Supported catalog sources."""
    MOCK = "mock"
    HTTP_API = "http"


class CatalogProvider(ABC):
    """
    Abstract base class for catalog sources.
    """

    @property
    @abstractmethod
    def provider_type(self) -> CatalogProviderType:
        """Return the type of this provider."""
        pass

    # ==================== Categories ====================

    @abstractmethod
    def fetch_categories(self) -> List[Category]:
        """Get all categories."""
        pass

    def fetch_category_by_slug(self, slug: str) -> Optional[Category]:
        """Get a category by slug, or None if no category has that slug."""
        for category in self.fetch_categories():
            if category.slug == slug:
                return category
        logger.info(f"Category not found: {slug}")
        return None

    # ==================== Products ====================

    @abstractmethod
    def fetch_products(self, query: Optional[ProductQuery] = None) -> List[Product]:
        """Get products matching the query (all products when None)."""
        pass

    @abstractmethod
    def fetch_products_by_category(self, category: str, limit: Optional[int] = None,
                                   page: Optional[int] = None) -> List[Product]:
        """Get one page of a category's products."""
        pass

    @abstractmethod
    def fetch_products_by_subcategory(self, subcategory: str, limit: Optional[int] = None,
                                      page: Optional[int] = None) -> List[Product]:
        """Get one page of a subcategory's products."""
        pass

    @abstractmethod
    def fetch_product_by_slug(self, slug: str) -> Optional[Product]:
        """Get a product by slug, or None if it does not exist."""
        pass
