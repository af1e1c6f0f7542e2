"""Client for the iHerb catalog API: header settings, product data, lookups and short responses."""

__version__ = "0.1.0"
__all__ = ["config", "models", "repository", "usecase", "handler"]