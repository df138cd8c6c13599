"""
Product catalog: immutable product list with keyword matching.
"""

from salesbot.core.catalog.index import CatalogIndex
from salesbot.core.catalog.models import Product

__all__ = [
    "CatalogIndex",
    "Product",
]
