# -*- coding: utf-8 -*-
"""
Storefront Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "BoundedHttpCall",
    "CatalogProviderFactory",
    "QuoteSubmissionGateway",
    "QuoteStatusService",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "BoundedHttpCall":
        from .http_transport import BoundedHttpCall
        return BoundedHttpCall
    elif name == "CatalogProviderFactory":
        from .catalog_provider_factory import CatalogProviderFactory
        return CatalogProviderFactory
    elif name == "QuoteSubmissionGateway":
        from .quote_gateway import QuoteSubmissionGateway
        return QuoteSubmissionGateway
    elif name == "QuoteStatusService":
        from .quote_status_service import QuoteStatusService
        return QuoteStatusService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
