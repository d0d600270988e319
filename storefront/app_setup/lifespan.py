"""
Lifespan FastAPI: initialisation/arrêt des ressources partagées.
- Démarrage: configure Stripe; STRIPE_SECRET_KEY absente => ConfigurationError (démarrage refusé).
- Arrêt: ferme le client HTTP Prismic.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from storefront.checkout import stripe_client
from storefront.cms.client import close_cms_client

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("uvicorn.error")
    stripe_client.require_stripe()
    logger.info("Stripe configured")
    try:
        yield
    finally:
        close_cms_client()
