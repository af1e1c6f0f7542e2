"""Sources of product data."""

from __future__ import annotations

from typing import Protocol

import requests

from .config import PRODUCT_PAGE_URL, HttpSettings
from .models import ProductData

_MAX_PRODUCT_ID = 2**32 - 1


class RepositoryError(Exception):
    """Product data could not be fetched or decoded."""


class CatalogRepository(Protocol):
    """Anything that can look up product data by id."""

    def get_product_data(self, product_id: int) -> ProductData:
        ...


class IherbApiRepository:
    """Fetches product data from the catalog HTTP API."""

    def __init__(
        self,
        session: requests.Session | None = None,
        settings: HttpSettings | None = None,
        base_url: str = PRODUCT_PAGE_URL,
        timeout: float = 10.0,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.settings = settings if settings is not None else HttpSettings()
        self.base_url = base_url
        self.timeout = timeout

    def product_url(self, product_id: int) -> str:
        """Return the API address of a product."""
        if isinstance(product_id, bool) or not isinstance(product_id, int):
            raise ValueError(f"product id must be an integer, got {product_id!r}")
        if not 0 <= product_id <= _MAX_PRODUCT_ID:
            raise ValueError(f"product id out of range: {product_id}")
        return f"{self.base_url}{product_id}"

    def get_product_data(self, product_id: int) -> ProductData:
        """Fetch and decode the data of one product."""
        url = self.product_url(product_id)
        try:
            response = self.session.get(
                url, headers=self.settings.headers(), timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RepositoryError(f"request to {url} failed: {exc}") from exc
        try:
            return ProductData.from_json(response.content)
        except ValueError as exc:
            raise RepositoryError(f"cannot decode product data: {exc}") from exc