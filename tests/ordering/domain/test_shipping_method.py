import pytest
from ordering.pricing.shipping import ShippingMethod
from protean.exceptions import ValidationError


@pytest.fixture()
def standard():
    return ShippingMethod(
        method_id="standard",
        name="Standard Shipping",
        description="3-5 business days",
        fee=5.99,
        free_shipping_threshold=50.0,
    )


class TestShippingMethod:
    def test_fee_below_threshold(self, standard):
        assert standard.cost_for(49.99) == 5.99

    def test_free_at_threshold(self, standard):
        assert standard.cost_for(50.0) == 0.0

    def test_free_above_threshold(self, standard):
        assert standard.cost_for(120.0) == 0.0

    def test_negative_fee_rejected(self):
        with pytest.raises(ValidationError):
            ShippingMethod(method_id="x", name="X", fee=-1.0, free_shipping_threshold=10.0)

    def test_blank_id_rejected(self):
        with pytest.raises(ValidationError):
            ShippingMethod(method_id="  ", name="X", fee=1.0, free_shipping_threshold=10.0)
