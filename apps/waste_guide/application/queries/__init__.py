"""Application Queries."""

from waste_guide.application.queries.search_catalog import SearchCatalogQuery

__all__ = ["SearchCatalogQuery"]
