"""
Modèle Product (propriété du CMS, lecture seule côté boutique).
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel

from .richtext import as_text


class Product(BaseModel):
    uid: str
    name: Optional[str] = None
    price: Optional[float] = None
    image_url: Optional[str] = None
    description: Optional[str] = None


def _price_from_field(value: Any) -> Optional[float]:
    # Prismic "number": float|int; tolère une chaîne numérique
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def product_from_document(document: Dict[str, Any]) -> Product:
    """
    Construit un Product à partir d'un document Prismic de type "product".
    - data.name: key text; data.price: number (unités majeures)
    - data.image.url: optionnel; data.description: rich text optionnel
    Les champs absents restent None: la validation est faite par le service.
    """
    data = document.get("data") or {}
    name = data.get("name")
    if isinstance(name, list):
        name = as_text(name)
    image = data.get("image") or {}
    return Product(
        uid=str(document.get("uid") or ""),
        name=(name or None) if isinstance(name, str) else None,
        price=_price_from_field(data.get("price")),
        image_url=(image.get("url") or None) if isinstance(image, dict) else None,
        description=as_text(data.get("description")),
    )
