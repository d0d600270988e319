# storefront.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

"""
Configuration centrale de la boutique.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env) sans écraser l'environnement du process
- Normalise et expose les secrets/URLs (Stripe, Prismic), sécurité cookies, CORS/hosts
- Fournit les chemins de redirection du checkout et l'identifiant produit par défaut
"""

class ConfigurationError(RuntimeError):
    """Configuration obligatoire absente ou invalide (fatal au démarrage)."""


def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

# Stripe: clé secrète (obligatoire) et version d'API (optionnelle)
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")
STRIPE_API_VERSION = _clean_env(os.getenv("STRIPE_API_VERSION") or "")

# Checkout: devise, pages de succès/annulation, produit par défaut du déclencheur
CHECKOUT_CURRENCY = _clean_env(os.getenv("CHECKOUT_CURRENCY") or "usd").lower()
CHECKOUT_SUCCESS_PATH = os.getenv("CHECKOUT_SUCCESS_PATH", "/success")
CHECKOUT_CANCEL_PATH = os.getenv("CHECKOUT_CANCEL_PATH", "/")
DEFAULT_PRODUCT_UID = _clean_env(os.getenv("DEFAULT_PRODUCT_UID") or "vapor75")
# Adresse de la boutique utilisée par le déclencheur côté client
STOREFRONT_BASE_URL = _clean_env(os.getenv("STOREFRONT_BASE_URL") or "http://localhost:8000").rstrip("/")

# Prismic (CMS headless)
# - PRISMIC_API_ENDPOINT prioritaire; sinon dérivé du nom de repository
PRISMIC_REPOSITORY = _clean_env(os.getenv("PRISMIC_REPOSITORY") or os.getenv("NEXT_PUBLIC_PRISMIC_ENVIRONMENT") or "")
PRISMIC_API_ENDPOINT = _clean_env(os.getenv("PRISMIC_API_ENDPOINT") or "")
if not PRISMIC_API_ENDPOINT and PRISMIC_REPOSITORY:
    PRISMIC_API_ENDPOINT = f"https://{PRISMIC_REPOSITORY}.cdn.prismic.io/api/v2"
PRISMIC_API_ENDPOINT = PRISMIC_API_ENDPOINT.rstrip("/")
PRISMIC_ACCESS_TOKEN = _clean_env(os.getenv("PRISMIC_ACCESS_TOKEN") or "")
PRISMIC_TIMEOUT = float(os.getenv("PRISMIC_TIMEOUT", "10"))
PRODUCT_DOCUMENT_TYPE = _clean_env(os.getenv("PRODUCT_DOCUMENT_TYPE") or "product")

# HSTS: à activer uniquement derrière HTTPS
FORCE_HSTS = (os.getenv("FORCE_HSTS", "false").lower() == "true")

# CORS (dev)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()]


def require_stripe_secret() -> str:
    """
    Retourne STRIPE_SECRET_KEY ou lève ConfigurationError.
    Appelé par le lifespan: l'application refuse de démarrer sans clé.
    """
    if not STRIPE_SECRET_KEY:
        raise ConfigurationError("Missing STRIPE_SECRET_KEY environment variable")
    return STRIPE_SECRET_KEY
