"""
Middlewares transverses de l'application.
- register_basic_middlewares: CORS et TrustedHost.
- register_security_middleware: en-têtes de sécurité et CSP (redirection vers Stripe autorisée).
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from storefront.config import FORCE_HSTS, CORS_ORIGINS, ALLOWED_HOSTS, PRISMIC_API_ENDPOINT

def register_basic_middlewares(app: FastAPI) -> None:
    """
    - CORSMiddleware: autorise les origines définies (dev/prod).
    - TrustedHostMiddleware: limite les hôtes acceptés (défense host header).
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=ALLOWED_HOSTS + ["*"] if "*" in CORS_ORIGINS else ALLOWED_HOSTS,
    )

def register_security_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)

        # En-têtes de sécurité
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
        if FORCE_HSTS:
            response.headers.setdefault("Strict-Transport-Security", "max-age=63072000; includeSubDomains; preload")

        # CSP
        csp_connect = ["'self'"]
        if PRISMIC_API_ENDPOINT:
            csp_connect.append(PRISMIC_API_ENDPOINT)
        stripe_origins = ["https://checkout.stripe.com", "https://js.stripe.com"]
        image_sources = ["https://images.prismic.io"]

        csp = (
            "default-src 'self'; "
            "base-uri 'self'; object-src 'none'; frame-ancestors 'none'; "
            f"img-src 'self' data: blob: {' '.join(image_sources)}; "
            f"form-action 'self' {' '.join(stripe_origins)}; "
            f"connect-src {' '.join(csp_connect)}"
        )
        response.headers["Content-Security-Policy"] = csp

        return response
