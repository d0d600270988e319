"""
Cas d'usage 'checkout': résout le produit, valide, construit et délègue à Stripe.
"""
import logging
from typing import Optional

from storefront import config
from storefront.cms import client as cms_client
from storefront.cms.models import product_from_document
from . import line_items
from . import stripe_client
from .errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def create_checkout_url(
    product_uid: Optional[str],
    origin: str,
    idempotency_key: Optional[str] = None,
) -> str:
    """
    Crée une session Checkout pour un produit du CMS et renvoie son URL.
    1) uid absent -> ValidationError (ni CMS ni Stripe appelés)
    2) produit introuvable -> NotFoundError
    3) name/price absents -> ValidationError
    4) session Stripe créée avec une seule ligne
    """
    uid = product_uid or ""
    if not uid.strip():
        raise ValidationError("Missing Product UID")

    document = cms_client.get_cms_client().get_by_uid(config.PRODUCT_DOCUMENT_TYPE, uid)
    if not document:
        raise NotFoundError("Product not found")

    product = product_from_document(document)
    params = line_items.build_session_params(
        product,
        origin=origin,
        currency=config.CHECKOUT_CURRENCY,
        success_path=config.CHECKOUT_SUCCESS_PATH,
        cancel_path=config.CHECKOUT_CANCEL_PATH,
    )
    session = stripe_client.create_session(params, idempotency_key=idempotency_key)
    logger.info("checkout.session created uid=%s session_id=%s", uid, session.get("id"))
    return session["url"]
