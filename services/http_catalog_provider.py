# -*- coding: utf-8 -*-
"""
HTTP Catalog Provider for the storefront REST API.

Every response is wrapped in an envelope:
    {"status": 200, "message": "...", "source": "...", "data": ...}
"""

from typing import Any, Dict, List, Optional

from app.api_config import ApiConfig
from models.product import Category, Product, ProductQuery
from services.catalog_provider import CatalogProvider, CatalogProviderType
from services.exceptions import ApiException, CatalogException, NetworkException
from services.http_transport import BoundedHttpCall
from utils.logger import get_logger

logger = get_logger(__name__)

OK_STATUS = 200


class HttpCatalogProvider(CatalogProvider):
    """
    Catalog reads over HTTP.

    Features:
    - Timeout-bounded requests (no retries)
    - Envelope status checking
    - MongoDB record mapping (_id -> id)
    """

    def __init__(self, http_call: BoundedHttpCall):
        self.http_call = http_call

    @classmethod
    def from_config(cls, config: Optional[ApiConfig] = None) -> "HttpCatalogProvider":
        config = config or ApiConfig()
        return cls(BoundedHttpCall(config.base_url, timeout=config.timeout))

    @property
    def provider_type(self) -> CatalogProviderType:
        return CatalogProviderType.HTTP_API

    def _get_data(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> Any:
        """GET an endpoint and unwrap the envelope's data."""
        envelope = self.http_call.request("GET", endpoint, params=params or None)
        if not isinstance(envelope, dict):
            raise ApiException("Unexpected response body")
        if envelope.get("status") != OK_STATUS:
            raise ApiException(
                f"API error: {envelope.get('message', 'unexpected status')}",
                response_data=envelope,
            )
        return envelope.get("data")

    @staticmethod
    def _page_params(limit: Optional[int], page: Optional[int]) -> Dict[str, str]:
        params = {}
        if limit:
            params["limit"] = str(limit)
        if page:
            params["page"] = str(page)
        return params

    # ==================== Categories ====================

    def fetch_categories(self) -> List[Category]:
        try:
            data = self._get_data("/categories/list") or []
        except (ApiException, NetworkException) as e:
            raise CatalogException("fetch categories", e) from e
        return [Category.from_api(item) for item in data]

    # ==================== Products ====================

    def fetch_products(self, query: Optional[ProductQuery] = None) -> List[Product]:
        params = (query or ProductQuery()).to_params()
        try:
            data = self._get_data("/products/list", params) or {}
        except (ApiException, NetworkException) as e:
            raise CatalogException("fetch products", e) from e
        return [Product.from_api(item) for item in data.get("products", [])]

    def fetch_products_by_category(self, category: str, limit: Optional[int] = None,
                                   page: Optional[int] = None) -> List[Product]:
        try:
            data = self._get_data(f"/products/category/{category}",
                                  self._page_params(limit, page)) or {}
        except (ApiException, NetworkException) as e:
            raise CatalogException("fetch products by category", e) from e
        return [Product.from_api(item) for item in data.get("products", [])]

    def fetch_products_by_subcategory(self, subcategory: str, limit: Optional[int] = None,
                                      page: Optional[int] = None) -> List[Product]:
        # This endpoint returns a bare list rather than a paginated object
        try:
            data = self._get_data(f"/products/subcategory/{subcategory}",
                                  self._page_params(limit, page)) or []
        except (ApiException, NetworkException) as e:
            raise CatalogException("fetch products by subcategory", e) from e
        return [Product.from_api(item) for item in data]

    def fetch_product_by_slug(self, slug: str) -> Optional[Product]:
        try:
            data = self._get_data(f"/products/slug/{slug}")
        except ApiException as e:
            if e.status_code == 404:
                logger.info(f"Product not found: {slug}")
                return None
            raise CatalogException("fetch product by slug", e) from e
        except NetworkException as e:
            raise CatalogException("fetch product by slug", e) from e
        if not data:
            return None
        return Product.from_api(data)
