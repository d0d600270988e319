"""
Construction pure des paramètres de session Stripe (pas de Stripe, pas de CMS).
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from storefront.cms.models import Product
from .errors import ValidationError

# module storefront.checkout.line_items
def to_minor_units(price: float) -> int:
    """
    Convertit un prix en unités majeures (ex: 49.99) en unités mineures (4999).
    - Passe par Decimal(str(price)) pour éviter les artefacts binaires (49.99 * 100).
    - Arrondi au plus proche, demi vers le haut.
    """
    cents = (Decimal(str(price)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)


def validate_product(product: Product) -> None:
    """
    Vérifie la présence des champs requis pour une session (name, price).
    Un prix nul ou négatif est traité comme absent.
    """
    if not product.name or product.price is None or product.price <= 0:
        raise ValidationError("Invalid product data")


def to_line_item(product: Product, currency: str) -> Dict[str, Any]:
    """
    Dérive l'unique ligne Stripe d'un Product.
    - product_data ne contient description/images que si renseignés
    """
    validate_product(product)
    product_data: Dict[str, Any] = {"name": product.name}
    if product.description:
        product_data["description"] = product.description
    if product.image_url:
        product_data["images"] = [product.image_url]
    return {
        "price_data": {
            "currency": currency,
            "product_data": product_data,
            "unit_amount": to_minor_units(product.price),
        },
        "quantity": 1,
    }


def build_session_params(
    product: Product,
    *,
    origin: str,
    currency: str,
    success_path: str,
    cancel_path: str,
) -> Dict[str, Any]:
    """
    Construit les paramètres de stripe.checkout.Session.create:
    une ligne, paiement immédiat, URLs de retour dérivées de l'origine de la requête.
    Le placeholder {CHECKOUT_SESSION_ID} est remplacé par Stripe à la redirection.
    """
    base = origin.rstrip("/")
    sep = "&" if "?" in success_path else "?"
    line_items: List[Dict[str, Any]] = [to_line_item(product, currency)]
    return {
        "line_items": line_items,
        "mode": "payment",
        "success_url": f"{base}{success_path}{sep}session_id={{CHECKOUT_SESSION_ID}}",
        "cancel_url": f"{base}{cancel_path}",
    }
