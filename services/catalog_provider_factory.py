# -*- coding: utf-8 -*-
"""
Catalog Provider Factory.

Centralizes creation of the catalog source (mock or HTTP) from Config.
"""

from typing import Optional

from app.api_config import ApiConfig
from app.config import Config
from .catalog_provider import CatalogProvider, CatalogProviderType
from .http_catalog_provider import HttpCatalogProvider
from .mock_catalog_provider import MockCatalogProvider
from utils.logger import get_logger

logger = get_logger(__name__)


class CatalogProviderFactory:
    """
    Factory for creating and sharing the catalog provider.

    Singleton pattern - ensures only one provider instance exists.
    """

    _instance: Optional[CatalogProvider] = None

    @classmethod
    def create(cls, provider_type: Optional[CatalogProviderType] = None,
               api_config: Optional[ApiConfig] = None) -> CatalogProvider:
        """
        Create or return the existing catalog provider.

        Args:
            provider_type: Source to use. If None, read from Config.CATALOG_PROVIDER.
            api_config: Connection settings for the HTTP provider.
        """
        if provider_type is None:
            provider_type = cls._type_from_config()

        if cls._instance is not None and cls._instance.provider_type == provider_type:
            return cls._instance

        logger.info(f"Creating catalog provider: {provider_type.value}")

        if provider_type == CatalogProviderType.MOCK:
            provider = MockCatalogProvider()
        elif provider_type == CatalogProviderType.HTTP_API:
            provider = HttpCatalogProvider.from_config(api_config)
        else:
            raise ValueError(f"Unknown provider type: {provider_type}")

        cls._instance = provider
        return provider

    @staticmethod
    def _type_from_config() -> CatalogProviderType:
        value = Config.CATALOG_PROVIDER
        if value in ("http", "http_api", "api"):
            return CatalogProviderType.HTTP_API
        if value == "mock":
            return CatalogProviderType.MOCK
        logger.warning(f"Unknown CATALOG_PROVIDER '{value}', using http")
        return CatalogProviderType.HTTP_API

    @classmethod
    def get_instance(cls) -> CatalogProvider:
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def is_mock(cls) -> bool:
        return cls._instance is not None and cls._instance.provider_type == CatalogProviderType.MOCK

    @classmethod
    def reset(cls) -> None:
        cls._instance = None
