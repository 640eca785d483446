"""Tests for the Product aggregate."""

import pytest
from catalogue.product.events import ProductAdded
from catalogue.product.product import Product
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields


def _make_product(**overrides):
    defaults = {
        "name": "Linen Wrap Dress",
        "price": 89.99,
        "category": "Women",
        "colors": ["Sand", "Olive"],
        "sizes": ["S", "M", "L"],
    }
    defaults.update(overrides)
    return Product.create(**defaults)


class TestProductStructure:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Product.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Product)
        for name in ("name", "price", "category", "colors", "sizes", "featured", "trending", "new_arrival"):
            assert name in fields


class TestProductCreation:
    def test_create_sets_fields(self):
        product = _make_product(subcategory="Dresses", featured=True)
        assert product.name == "Linen Wrap Dress"
        assert product.price == 89.99
        assert product.category == "Women"
        assert product.subcategory == "Dresses"
        assert product.colors == ["Sand", "Olive"]
        assert product.sizes == ["S", "M", "L"]
        assert product.featured is True
        assert product.trending is False
        assert product.in_stock is True
        assert product.created_at is not None

    def test_create_raises_product_added(self):
        product = _make_product()
        assert len(product._events) == 1
        event = product._events[0]
        assert isinstance(event, ProductAdded)
        assert event.product_id == product.id
        assert event.category == "Women"
        assert event.price == 89.99

    def test_primary_image_seeds_image_list(self):
        product = _make_product(image_url="https://cdn.example.com/dress.jpg")
        assert product.image_urls == ["https://cdn.example.com/dress.jpg"]

    def test_zero_price_is_valid(self):
        product = _make_product(price=0.0)
        assert product.price == 0.0


class TestProductInvariants:
    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(price=-1.0)

    def test_missing_category_rejected(self):
        with pytest.raises(ValidationError):
            Product(name="Scarf", price=19.0)

    def test_blank_color_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _make_product(colors=["Red", " "])
        assert "colors" in str(exc.value)

    def test_rating_above_five_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(rating=5.5)


class TestProductPricing:
    def test_not_on_sale_without_compare_at_price(self):
        product = _make_product()
        assert product.is_on_sale is False
        assert product.savings == 0.0

    def test_on_sale_when_compare_at_price_is_higher(self):
        product = _make_product(price=80.0, compare_at_price=100.0)
        assert product.is_on_sale is True
        assert product.savings == pytest.approx(20.0)

    def test_compare_at_price_below_price_is_not_a_sale(self):
        product = _make_product(price=80.0, compare_at_price=60.0)
        assert product.is_on_sale is False
        assert product.savings == 0.0

    def test_variant_selection_needed_when_colors_or_sizes_exist(self):
        assert _make_product().requires_variant_selection is True
        assert _make_product(colors=[], sizes=[]).requires_variant_selection is False
