"""
Module 'cms': lecture des contenus Prismic (produits).
"""
from .client import PrismicClient, get_cms_client, close_cms_client
from .models import Product, product_from_document
from .richtext import as_text

__all__ = [
    "PrismicClient",
    "get_cms_client",
    "close_cms_client",
    "Product",
    "product_from_document",
    "as_text",
]
