"""
Module 'checkout' (feature-first): point d'entrée public.
Réunit construction des lignes, client Stripe, service et déclencheur côté client.
"""

from .errors import (
    CheckoutError,
    ValidationError,
    NotFoundError,
    UpstreamError,
    TriggerError,
    RequestError,
    FormatError,
    ProtocolError,
)
from .line_items import to_minor_units, validate_product, to_line_item, build_session_params

__all__ = [
    # errors
    "CheckoutError",
    "ValidationError",
    "NotFoundError",
    "UpstreamError",
    "TriggerError",
    "RequestError",
    "FormatError",
    "ProtocolError",
    # line items
    "to_minor_units",
    "validate_product",
    "to_line_item",
    "build_session_params",
]
