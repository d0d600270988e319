"""Boutique parfum: API de checkout Stripe adossée au CMS Prismic."""
