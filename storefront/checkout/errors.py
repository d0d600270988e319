"""
Taxonomie des erreurs du checkout.
- Côté serveur: CheckoutError et sous-classes, traduites en {"error": ...} par la vue.
- Côté client (déclencheur): TriggerError et sous-classes, journalisées puis relancées.
"""

GENERIC_ERROR_MESSAGE = "Failed to create Stripe Session"


class CheckoutError(Exception):
    status_code = 500
    public_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)
        if message and self.status_code < 500:
            self.public_message = message


class ValidationError(CheckoutError):
    """Entrée absente ou invalide (400)."""
    status_code = 400
    public_message = "Invalid product data"


class NotFoundError(CheckoutError):
    """Produit inconnu du CMS (404)."""
    status_code = 404
    public_message = "Product not found"


class UpstreamError(CheckoutError):
    """Échec du CMS ou de l'API de paiement (500, message générique)."""
    status_code = 500


class TriggerError(Exception):
    pass


class RequestError(TriggerError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FormatError(TriggerError):
    pass


class ProtocolError(TriggerError):
    pass
