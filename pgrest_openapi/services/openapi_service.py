"""OpenAPI document service with caching."""

import logging
from datetime import datetime, timedelta
from typing import Optional

from pgrest_openapi.config import Settings
from pgrest_openapi.models.openapi import OpenAPIDocument
from pgrest_openapi.services.document import postgrest_spec
from pgrest_openapi.services.introspection import DbStructure

logger = logging.getLogger("openapi-service")


class OpenAPIService:
    """Builds the OpenAPI document of a database structure and caches it."""

    def __init__(
        self,
        settings: Settings,
        structure: DbStructure,
        cache_ttl: Optional[int] = None
    ):
        """Initialize the OpenAPI service.

        Args:
            settings: Application settings.
            structure: The introspected database structure.
            cache_ttl: Cache time-to-live in seconds; defaults to the
                configured ``openapi_cache_ttl``.
        """
        self.settings = settings
        self.structure = structure
        self.cache_ttl = settings.openapi_cache_ttl if cache_ttl is None else cache_ttl
        self._cache: Optional[OpenAPIDocument] = None
        self._cache_time: Optional[datetime] = None

    def get_document(self, force_refresh: bool = False) -> OpenAPIDocument:
        """Get the OpenAPI document.

        Args:
            force_refresh: Rebuild the document even if the cache is valid.

        Returns:
            The OpenAPI document.
        """
        if not force_refresh and self._is_cache_valid() and self._cache is not None:
            return self._cache

        document = postgrest_spec(
            self.structure.procs,
            self.structure.table_entries(),
            self.settings.get_server_location(),
            self.settings.api_description,
            self.structure.primary_keys,
        )
        logger.info("Built OpenAPI document with %d paths", len(document.paths))

        self._cache = document
        self._cache_time = datetime.now()
        return document

    def encode(self, force_refresh: bool = False) -> bytes:
        """Get the OpenAPI document encoded as JSON."""
        return self.get_document(force_refresh=force_refresh).to_json()

    def update_structure(self, structure: DbStructure) -> None:
        """Replace the database structure after a schema change."""
        self.structure = structure
        self.clear_cache()

    def is_cached(self) -> bool:
        return self._cache is not None and self._is_cache_valid()

    def _is_cache_valid(self) -> bool:
        """Check if the cache is still valid.

        Returns:
            True if the cache is valid.
        """
        if self._cache_time is None:
            return False
        return datetime.now() - self._cache_time < timedelta(
            seconds=self.cache_ttl
        )

    def clear_cache(self) -> None:
        """Clear the document cache."""
        self._cache = None
        self._cache_time = None
