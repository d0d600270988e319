"""
Factory d'application pour les entrypoints (ex: storefront.asgi).
Ordonne les étapes d'initialisation de manière lisible et testable.
"""
from fastapi import FastAPI
from .lifespan import lifespan
from .middlewares import register_basic_middlewares, register_security_middleware
from .routers import register_routers

def create_app() -> FastAPI:
    """
    Construit l'app FastAPI avec le lifespan et enregistre:
      - middlewares de base et de sécurité
      - les routers (checkout, health)
    Retour:
      FastAPI prêt à être utilisé par le serveur ASGI.
    """
    app = FastAPI(title="Perfume Storefront", lifespan=lifespan)
    register_basic_middlewares(app)
    register_security_middleware(app)
    register_routers(app)
    return app
