"""Promo code evaluation.

A promo code either unlocks a fixed percentage off the subtotal or it does
not. Rejection is reported as a status on the outcome rather than raised,
so callers can show "no code" and "invalid code" differently.
"""

from enum import Enum

from protean.fields import Float, String

from ordering.domain import ordering

# Longest code a shopper can enter; anything longer cannot match a table entry
MAX_PROMO_CODE_LENGTH = 100


class PromoStatus(Enum):
    NONE = "None"
    APPLIED = "Applied"
    INVALID = "Invalid"


@ordering.value_object
class PromoOutcome:
    code = String(max_length=MAX_PROMO_CODE_LENGTH)
    status = String(choices=PromoStatus, default=PromoStatus.NONE.value)
    percent_off = Float(default=0.0)
    reason = String(max_length=255)

    @property
    def applied(self):
        return self.status == PromoStatus.APPLIED.value

    def discount_on(self, subtotal):
        return subtotal * self.percent_off / 100.0 if self.applied else 0.0


class PromoCodeTable:
    """Lookup of promo code to percentage discount; codes match ignoring case."""

    def __init__(self, codes=None):
        self._codes = {str(code).strip().upper(): float(percent) for code, percent in (codes or {}).items()}

    def __contains__(self, code):
        return self.percent_for(code) is not None

    def __len__(self):
        return len(self._codes)

    def percent_for(self, code):
        return self._codes.get((code or "").strip().upper())


def evaluate_promo(code, table):
    """Evaluate ``code`` against ``table``; always returns a ``PromoOutcome``."""
    entered = (code or "").strip()
    if not entered:
        return PromoOutcome(status=PromoStatus.NONE.value, reason="No promo code entered")

    percent = table.percent_for(entered) if len(entered) <= MAX_PROMO_CODE_LENGTH else None
    if percent is None:
        entered = entered[:MAX_PROMO_CODE_LENGTH]
        return PromoOutcome(
            code=entered,
            status=PromoStatus.INVALID.value,
            reason=f"Promo code '{entered}' is not valid",
        )

    return PromoOutcome(
        code=entered,
        status=PromoStatus.APPLIED.value,
        percent_off=percent,
        reason=f"{percent:g}% off your subtotal",
    )
