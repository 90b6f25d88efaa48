# -*- coding: utf-8 -*-
"""
Mock Catalog Provider for Development.

Serves an in-memory sample catalog with the same query and not-found
semantics as the HTTP provider, so views can be built without a backend.
"""

from typing import Iterable, List, Optional

from models.product import Category, Dimensions, Product, ProductQuery
from services.catalog_provider import CatalogProvider, CatalogProviderType
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 12

_SORT_KEYS = {
    "price_asc": (lambda p: p.price, False),
    "price_desc": (lambda p: p.price, True),
    "name_asc": (lambda p: p.name.lower(), False),
    "name_desc": (lambda p: p.name.lower(), True),
    "rating_desc": (lambda p: p.rating, True),
}


class MockCatalogProvider(CatalogProvider):
    """
    In-memory catalog.

    Args:
        categories: Categories to serve (sample data when None)
        products: Products to serve (sample data when None)
    """

    def __init__(self, categories: Optional[Iterable[Category]] = None,
                 products: Optional[Iterable[Product]] = None):
        self._categories: List[Category] = (
            list(categories) if categories is not None else _sample_categories()
        )
        self._products: List[Product] = (
            list(products) if products is not None else _sample_products()
        )
        logger.info(
            f"Mock catalog ready: {len(self._categories)} categories, "
            f"{len(self._products)} products"
        )

    @property
    def provider_type(self) -> CatalogProviderType:
        return CatalogProviderType.MOCK

    def fetch_categories(self) -> List[Category]:
        return list(self._categories)

    def fetch_products(self, query: Optional[ProductQuery] = None) -> List[Product]:
        query = query or ProductQuery()
        products = list(self._products)

        if query.category:
            products = [p for p in products if p.category == query.category]
        if query.search:
            needle = query.search.lower()
            products = [
                p for p in products
                if needle in p.name.lower() or needle in p.description.lower()
            ]
        if query.min_price is not None:
            products = [p for p in products if p.price >= query.min_price]
        if query.max_price is not None:
            products = [p for p in products if p.price <= query.max_price]
        if query.sort:
            key, reverse = _SORT_KEYS[query.sort]
            products.sort(key=key, reverse=reverse)

        return self._paginate(products, query.limit, query.page)

    def fetch_products_by_category(self, category: str, limit: Optional[int] = None,
                                   page: Optional[int] = None) -> List[Product]:
        products = [p for p in self._products if p.category == category]
        return self._paginate(products, limit, page)

    def fetch_products_by_subcategory(self, subcategory: str, limit: Optional[int] = None,
                                      page: Optional[int] = None) -> List[Product]:
        products = [p for p in self._products if p.subcategory == subcategory]
        return self._paginate(products, limit, page)

    def fetch_product_by_slug(self, slug: str) -> Optional[Product]:
        for product in self._products:
            if product.slug == slug:
                return product
        logger.info(f"Product not found: {slug}")
        return None

    @staticmethod
    def _paginate(products: List[Product], limit: Optional[int],
                  page: Optional[int]) -> List[Product]:
        if not limit and not page:
            return products
        limit = limit or DEFAULT_PAGE_SIZE
        page = max(page or 1, 1)
        start = (page - 1) * limit
        return products[start:start + limit]


# ==================== Sample Data ====================

def _sample_categories() -> List[Category]:
    return [
        Category(id="cat-1", name="Living Room", slug="living-room",
                 description="Sofas, armchairs and coffee tables", product_count=2,
                 subcategories=["sofas", "tables"]),
        Category(id="cat-2", name="Dining", slug="dining",
                 description="Dining tables and chairs", product_count=1,
                 subcategories=["dining-tables"]),
        Category(id="cat-3", name="Lighting", slug="lighting",
                 description="Pendant, floor and wall lights", product_count=1,
                 subcategories=["pendants"]),
    ]


def _sample_products() -> List[Product]:
    return [
        Product(id="prod-1", name="Aria Three-Seater Sofa", slug="aria-sofa",
                description="Deep-seated sofa in performance linen.",
                price=54000, original_price=62000, category="living-room",
                subcategory="sofas", dimensions=Dimensions(220, 85, 95, "cm"),
                materials=["linen", "oak"], colors=["sand", "charcoal"],
                is_featured=True, rating=4.7, review_count=38),
        Product(id="prod-2", name="Brio Coffee Table", slug="brio-coffee-table",
                description="Round coffee table with a travertine top.",
                price=18500, category="living-room", subcategory="tables",
                dimensions=Dimensions(90, 40, 90, "cm"),
                materials=["travertine", "steel"], colors=["ivory"],
                is_new=True, rating=4.4, review_count=12),
        Product(id="prod-3", name="Cove Dining Table", slug="cove-dining-table",
                description="Six-seater solid wood dining table.",
                price=42000, category="dining", subcategory="dining-tables",
                dimensions=Dimensions(180, 75, 90, "cm"),
                materials=["teak"], colors=["natural", "walnut"],
                rating=4.8, review_count=21),
        Product(id="prod-4", name="Halo Pendant Light", slug="halo-pendant",
                description="Hand-blown glass pendant.",
                price=7600, category="lighting", subcategory="pendants",
                dimensions=Dimensions(35, 40, 35, "cm"),
                materials=["glass", "brass"], colors=["amber", "clear"],
                in_stock=False, rating=4.1, review_count=7),
    ]
