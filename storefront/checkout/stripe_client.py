"""
Adaptateur Stripe: centralise la configuration et la création de sessions Checkout.
"""
import logging
from typing import Any, Dict, Optional

import stripe

from storefront import config
from .errors import UpstreamError

logger = logging.getLogger(__name__)

# module storefront.checkout.stripe_client
def require_stripe():
    """
    Prépare et retourne le module stripe prêt à l'emploi.
    - Configure stripe.api_key via STRIPE_SECRET_KEY (ConfigurationError si absente).
    - Épingle stripe.api_version si STRIPE_API_VERSION est défini.
    """
    stripe.api_key = config.require_stripe_secret()
    if config.STRIPE_API_VERSION:
        stripe.api_version = config.STRIPE_API_VERSION
    return stripe


def _field(obj: Any, name: str) -> Any:
    # StripeObject (attributs) ou dict (tests)
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def create_session(params: Dict[str, Any], idempotency_key: Optional[str] = None) -> Dict[str, Any]:
    """
    Crée une session Stripe Checkout.
    - params: line_items, mode, success_url, cancel_url (cf. line_items.build_session_params)
    - idempotency_key: transmis à Stripe si fourni (rejoue la même session sur double envoi)
    Retour: {"id": "cs_test_...", "url": "https://checkout.stripe.com/..."}
    """
    require_stripe()
    options: Dict[str, Any] = {}
    if idempotency_key:
        options["idempotency_key"] = idempotency_key
    try:
        session = stripe.checkout.Session.create(**params, **options)
    except stripe.StripeError as e:
        raise UpstreamError(f"Stripe: {e}") from e
    url = _field(session, "url")
    if not url:
        raise UpstreamError("Session Stripe sans url")
    return {"id": _field(session, "id"), "url": url}
