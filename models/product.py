# -*- coding: utf-8 -*-
"""
Catalog entity models (categories and products).

The API returns MongoDB-style records (`_id`, `__v`); these models expose
`id` and drop the version field.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from app.config import Vocabularies


@dataclass
class Category:
    """Product category."""
    id: str
    name: str
    slug: str
    description: str = ""
    image: str = ""
    product_count: int = 0
    subcategories: List[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Category":
        return cls(
            id=str(data.get("_id") or data.get("id", "")),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            description=data.get("description", ""),
            image=data.get("image", ""),
            product_count=int(data.get("productCount", 0) or 0),
            subcategories=list(data.get("subcategories") or []),
        )


@dataclass
class Dimensions:
    width: float = 0
    height: float = 0
    depth: float = 0
    unit: str = "cm"

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> "Dimensions":
        data = data or {}
        return cls(
            width=data.get("width", 0),
            height=data.get("height", 0),
            depth=data.get("depth", 0),
            unit=data.get("unit", "cm"),
        )


@dataclass
class Product:
    """Catalog product as shown on listing and detail pages."""
    id: str
    name: str
    slug: str
    description: str = ""
    price: float = 0.0
    original_price: Optional[float] = None
    category: str = ""
    subcategory: Optional[str] = None
    images: List[str] = field(default_factory=list)
    features: List[str] = field(default_factory=list)
    dimensions: Dimensions = field(default_factory=Dimensions)
    materials: List[str] = field(default_factory=list)
    colors: List[str] = field(default_factory=list)
    in_stock: bool = True
    is_new: bool = False
    is_featured: bool = False
    rating: float = 0.0
    review_count: int = 0

    @property
    def is_discounted(self) -> bool:
        return self.original_price is not None and self.original_price > self.price

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            id=str(data.get("_id") or data.get("id", "")),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            description=data.get("description", ""),
            price=data.get("price", 0.0),
            original_price=data.get("originalPrice"),
            category=data.get("category", ""),
            subcategory=data.get("subcategory"),
            images=list(data.get("images") or []),
            features=list(data.get("features") or []),
            dimensions=Dimensions.from_api(data.get("dimensions")),
            materials=list(data.get("materials") or []),
            colors=list(data.get("colors") or []),
            in_stock=bool(data.get("inStock", True)),
            is_new=bool(data.get("isNew", False)),
            is_featured=bool(data.get("isFeatured", False)),
            rating=data.get("rating", 0.0),
            review_count=int(data.get("reviewCount", 0) or 0),
        )


# Accepted values for ProductQuery.sort
PRODUCT_SORTS = Vocabularies.codes(Vocabularies.PRODUCT_SORTS)


@dataclass
class ProductQuery:
    """Query parameters for product listing."""
    page: Optional[int] = None
    limit: Optional[int] = None
    category: Optional[str] = None
    search: Optional[str] = None
    sort: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None

    def __post_init__(self):
        if self.sort is not None and self.sort not in PRODUCT_SORTS:
            raise ValueError(f"Unsupported sort '{self.sort}'")

    def to_params(self) -> Dict[str, str]:
        """Query-string parameters; unset values are omitted."""
        params = {
            "page": self.page,
            "limit": self.limit,
            "category": self.category,
            "search": self.search,
            "sort": self.sort,
            "min_price": self.min_price,
            "max_price": self.max_price,
        }
        return {k: str(v) for k, v in params.items() if v is not None}
