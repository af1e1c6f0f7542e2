"""Application logic for catalog lookups."""

from __future__ import annotations

from .models import ProductData
from .repository import CatalogRepository


class CatalogUsecase:
    """Looks up products through a catalog repository."""

    def __init__(self, catalog_repo: CatalogRepository | None) -> None:
        self.catalog_repo = catalog_repo

    def get_product_data(self, product_id: int) -> ProductData:
        """Return the data of one product from the repository."""
        if self.catalog_repo is None:
            raise RuntimeError("repository not specified")
        return self.catalog_repo.get_product_data(product_id)