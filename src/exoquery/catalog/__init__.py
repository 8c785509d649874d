from .client import CatalogClient, fetch_bodies

__all__ = ["CatalogClient", "fetch_bodies"]
