import logging
from typing import Optional

from fastapi import APIRouter, Header, Request
from fastapi.responses import JSONResponse

from storefront.checkout import service as checkout_service
from storefront.checkout.errors import CheckoutError, GENERIC_ERROR_MESSAGE

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/checkout", tags=["Checkout API"])


def _request_origin(request: Request) -> str:
    # En-tête Origin du navigateur, sinon l'URL de base de la requête
    return request.headers.get("origin") or str(request.base_url).rstrip("/")

# module storefront.checkout.views
@router.post("/{product_uid:path}")
def create_checkout_session(
    product_uid: str,
    request: Request,
    idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key"),
):
    """
    Crée une session Checkout Stripe pour un produit Prismic et renvoie {"url": ...}.
    - 400: uid absent ou produit sans name/price
    - 404: produit introuvable dans le CMS
    - 500: toute autre erreur (CMS, Stripe), journalisée, message générique
    """
    try:
        url = checkout_service.create_checkout_url(
            product_uid,
            origin=_request_origin(request),
            idempotency_key=idempotency_key,
        )
        return JSONResponse({"url": url})
    except CheckoutError as e:
        if e.status_code >= 500:
            logger.exception("Stripe session creation error uid=%s", product_uid)
        return JSONResponse({"error": e.public_message}, status_code=e.status_code)
    except Exception:
        logger.exception("Stripe session creation error uid=%s", product_uid)
        return JSONResponse({"error": GENERIC_ERROR_MESSAGE}, status_code=500)


@router.post("", include_in_schema=False)
def create_checkout_session_without_uid(request: Request):
    """Route sans identifiant: même réponse 400 que pour un uid vide."""
    return create_checkout_session("", request, idempotency_key=None)
