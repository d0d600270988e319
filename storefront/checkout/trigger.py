"""
Déclencheur d'achat côté client.
- POST /api/checkout/{product_id} puis navigation vers l'URL Stripe renvoyée.
- Aucune relance: toute erreur est journalisée puis relancée à l'appelant.
- Une clé d'idempotence (UUID4) est générée par tentative et envoyée en en-tête.
"""
import logging
import webbrowser
from typing import Callable, Optional
from uuid import uuid4

import httpx

from storefront import config
from .errors import FormatError, ProtocolError, RequestError

logger = logging.getLogger(__name__)

Navigator = Callable[[str], object]


def checkout(
    product_id: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    client: Optional[httpx.Client] = None,
    navigate: Navigator = webbrowser.open,
    idempotency_key: Optional[str] = None,
) -> str:
    """
    Lance le checkout d'un produit et navigue vers la page de paiement.
    - product_id: uid Prismic (DEFAULT_PRODUCT_UID si omis)
    - base_url: adresse de la boutique (STOREFRONT_BASE_URL si omis)
    - client: client httpx (base_url ignoré si fourni)
    - navigate: callable recevant l'URL (webbrowser.open par défaut)
    Retour: l'URL de la session. Erreurs: RequestError, FormatError, ProtocolError,
    ou toute exception du navigateur (journalisée puis relancée).
    """
    product_id = product_id or config.DEFAULT_PRODUCT_UID
    headers = {
        "Content-Type": "application/json",
        "Idempotency-Key": idempotency_key or str(uuid4()),
    }
    owns_client = client is None
    http = client or httpx.Client(base_url=base_url or config.STOREFRONT_BASE_URL)
    try:
        try:
            res = http.post(f"/api/checkout/{product_id}", headers=headers)
        except httpx.HTTPError as e:
            raise RequestError(f"Request failed: {e}") from e

        if not res.is_success:
            raise RequestError(f"HTTP error! status: {res.status_code}", status_code=res.status_code)

        content_type = res.headers.get("content-type") or ""
        if "application/json" not in content_type:
            raise FormatError("Response was not JSON")
        try:
            data = res.json()
        except ValueError as e:
            raise FormatError("Response was not JSON") from e

        url = data.get("url") if isinstance(data, dict) else None
        if not url:
            raise ProtocolError("No checkout URL received")

        navigate(url)
        return url
    except Exception as e:
        logger.error("Purchase failed: %s", e)
        raise
    finally:
        if owns_client:
            http.close()
