"""Shared BDD fixtures and step definitions for catalog browsing."""

import pytest
from catalogue.product.product import Product
from pytest_bdd import given, parsers, then


def _split(cell):
    return [value.strip() for value in (cell or "").split(",") if value.strip()]


@pytest.fixture()
def results():
    """Container for the latest browse results."""
    return {"products": []}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the catalog contains:", target_fixture="catalog")
def catalog_contains(datatable):
    header, *rows = datatable
    products = []
    for row in rows:
        record = dict(zip(header, row))
        products.append(
            Product.create(
                name=record["name"],
                price=float(record["price"]),
                category=record["category"],
                colors=_split(record.get("colors")),
                sizes=_split(record.get("sizes")),
                featured=record.get("featured") == "yes",
            )
        )
    return products


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the results are "{names}"'))
def results_are(results, names):
    assert [p.name for p in results["products"]] == _split(names)


@then("there are no results")
def no_results(results):
    assert results["products"] == []
