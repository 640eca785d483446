"""Pricing configuration — tax rate, promo codes and shipping methods.

Defaults mirror the storefront's launch configuration. Each can be
overridden through the environment:

    ATELIER_TAX_RATE           e.g. "0.08"
    ATELIER_PROMO_CODES        JSON object, e.g. '{"SPRING20": 20}'
    ATELIER_SHIPPING_METHODS   JSON list of {id, name, description, fee, free_shipping_threshold}
"""

import json
import os

from ordering.pricing.promotions import PromoCodeTable
from ordering.pricing.shipping import ShippingMethod

DEFAULT_TAX_RATE = 0.10

DEFAULT_PROMO_CODES = {"DISCOUNT10": 10}

DEFAULT_SHIPPING_METHODS = [
    {
        "id": "standard",
        "name": "Standard Shipping",
        "description": "3-5 business days",
        "fee": 5.99,
        "free_shipping_threshold": 50.0,
    },
    {
        "id": "express",
        "name": "Express Shipping",
        "description": "1-2 business days",
        "fee": 14.99,
        "free_shipping_threshold": 150.0,
    },
]

DEFAULT_SHIPPING_METHOD_ID = "standard"


class PricingSettings:
    """Pricing inputs handed to the pricing engine."""

    def __init__(self, tax_rate=DEFAULT_TAX_RATE, promo_codes=None, shipping_methods=None):
        self.tax_rate = float(tax_rate)
        self.promo_codes = PromoCodeTable(DEFAULT_PROMO_CODES if promo_codes is None else promo_codes)
        methods = DEFAULT_SHIPPING_METHODS if shipping_methods is None else shipping_methods
        self.shipping_methods = {}
        for method in methods:
            shipping_method = ShippingMethod(
                method_id=method["id"],
                name=method["name"],
                description=method.get("description"),
                fee=method["fee"],
                free_shipping_threshold=method["free_shipping_threshold"],
            )
            self.shipping_methods[shipping_method.method_id] = shipping_method

    def shipping_method(self, method_id):
        """Return the shipping method with ``method_id``, or None if unknown."""
        return self.shipping_methods.get(method_id)

    @property
    def default_shipping_method(self):
        return self.shipping_methods.get(DEFAULT_SHIPPING_METHOD_ID) or next(iter(self.shipping_methods.values()), None)

    @classmethod
    def from_env(cls):
        tax_rate = os.environ.get("ATELIER_TAX_RATE")
        promo_codes = os.environ.get("ATELIER_PROMO_CODES")
        shipping_methods = os.environ.get("ATELIER_SHIPPING_METHODS")
        try:
            return cls(
                tax_rate=float(tax_rate) if tax_rate else DEFAULT_TAX_RATE,
                promo_codes=json.loads(promo_codes) if promo_codes else None,
                shipping_methods=json.loads(shipping_methods) if shipping_methods else None,
            )
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid pricing configuration: {exc}") from exc


_settings_instance = None


def get_pricing_settings():
    """Return the configured pricing settings (singleton)."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = PricingSettings.from_env()
    return _settings_instance


def reset_pricing_settings():
    """Reset the settings singleton (useful for testing)."""
    global _settings_instance
    _settings_instance = None
