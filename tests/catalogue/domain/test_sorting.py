from datetime import datetime

import pytest
from catalogue.browsing.engine import filter_and_sort, sort_products
from catalogue.browsing.facets import FacetSelection, SortKey
from catalogue.product.product import Product


def _product(name, price, rating=0.0, created_at=None):
    return Product(
        name=name,
        price=price,
        category="Women",
        rating=rating,
        created_at=created_at or datetime(2024, 1, 1),
    )


def _names(products):
    return [p.name for p in products]


@pytest.fixture()
def distinct_prices():
    return [
        _product("Blazer", 150.0),
        _product("Tee", 20.0),
        _product("Chinos", 65.0),
        _product("Sneakers", 95.0),
    ]


@pytest.fixture()
def tied_prices():
    return [
        _product("A", 40.0),
        _product("B", 25.0),
        _product("C", 40.0),
        _product("D", 25.0),
        _product("E", 60.0),
    ]


class TestPriceSort:
    def test_low_to_high(self, distinct_prices):
        result = sort_products(distinct_prices, SortKey.PRICE_LOW_HIGH)
        assert [p.price for p in result] == [20.0, 65.0, 95.0, 150.0]

    def test_high_to_low(self, distinct_prices):
        result = sort_products(distinct_prices, SortKey.PRICE_HIGH_LOW)
        assert [p.price for p in result] == [150.0, 95.0, 65.0, 20.0]

    def test_directions_are_reverses_for_distinct_prices(self, distinct_prices):
        ascending = sort_products(distinct_prices, SortKey.PRICE_LOW_HIGH)
        descending = sort_products(distinct_prices, SortKey.PRICE_HIGH_LOW)
        assert _names(descending) == list(reversed(_names(ascending)))

    def test_ties_keep_input_order_ascending(self, tied_prices):
        result = sort_products(tied_prices, SortKey.PRICE_LOW_HIGH)
        assert _names(result) == ["B", "D", "A", "C", "E"]

    def test_ties_keep_input_order_descending(self, tied_prices):
        result = sort_products(tied_prices, SortKey.PRICE_HIGH_LOW)
        assert _names(result) == ["E", "A", "C", "B", "D"]


class TestOtherSorts:
    def test_rating_highest_first(self):
        products = [
            _product("Low", 10.0, rating=3.1),
            _product("High", 10.0, rating=4.9),
            _product("Mid", 10.0, rating=4.2),
        ]
        assert _names(sort_products(products, SortKey.RATING)) == ["High", "Mid", "Low"]

    def test_rating_ties_are_stable(self):
        products = [_product("First", 10.0, rating=4.5), _product("Second", 12.0, rating=4.5)]
        assert _names(sort_products(products, SortKey.RATING)) == ["First", "Second"]

    def test_newest_first(self):
        products = [
            _product("Old", 10.0, created_at=datetime(2023, 5, 1)),
            _product("Newest", 10.0, created_at=datetime(2024, 9, 1)),
            _product("Recent", 10.0, created_at=datetime(2024, 2, 1)),
        ]
        assert _names(sort_products(products, SortKey.NEWEST)) == ["Newest", "Recent", "Old"]

    def test_newest_ties_are_stable(self):
        same_day = datetime(2024, 6, 1)
        products = [
            _product("First", 10.0, created_at=same_day),
            _product("Older", 10.0, created_at=datetime(2024, 1, 1)),
            _product("Second", 30.0, created_at=same_day),
            _product("Third", 20.0, created_at=same_day),
        ]
        assert _names(sort_products(products, SortKey.NEWEST)) == ["First", "Second", "Third", "Older"]

    def test_relevance_keeps_catalog_order(self, distinct_prices):
        assert _names(sort_products(distinct_prices, SortKey.RELEVANCE)) == _names(distinct_prices)

    @pytest.mark.parametrize("wire_value", ["featured", "", None, "cheapest"])
    def test_unknown_sort_values_fall_back_to_catalog_order(self, distinct_prices, wire_value):
        assert _names(sort_products(distinct_prices, wire_value)) == _names(distinct_prices)

    def test_wire_value_is_accepted(self, distinct_prices):
        result = sort_products(distinct_prices, "price-low-high")
        assert _names(result) == ["Tee", "Chinos", "Sneakers", "Blazer"]

    def test_filter_then_sort(self, distinct_prices):
        result = filter_and_sort(distinct_prices, FacetSelection(price_min=50.0), SortKey.PRICE_HIGH_LOW)
        assert _names(result) == ["Blazer", "Sneakers", "Chinos"]

