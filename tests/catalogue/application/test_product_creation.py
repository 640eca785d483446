"""Application tests for the AddProduct command handler."""

from catalogue.product.creation import AddProduct
from catalogue.product.product import Product
from protean.utils.globals import current_domain


def _add_product(**overrides):
    defaults = {
        "name": "Pleated Midi Skirt",
        "price": 74.0,
        "category": "Women",
    }
    defaults.update(overrides)
    return current_domain.process(AddProduct(**defaults), asynchronous=False)


class TestAddProductHandler:
    def test_add_product_minimal(self):
        product_id = _add_product()
        assert product_id is not None

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Pleated Midi Skirt"
        assert product.price == 74.0
        assert product.colors == []
        assert product.in_stock is True

    def test_add_product_with_variants_and_flags(self):
        product_id = _add_product(
            name="Merino Crewneck",
            price=98.0,
            compare_at_price=120.0,
            category="Men",
            subcategory="Knitwear",
            colors=["Navy", "Oatmeal"],
            sizes=["S", "M", "L"],
            rating=4.6,
            review_count=31,
            featured=True,
            trending=True,
        )
        product = current_domain.repository_for(Product).get(product_id)
        assert product.subcategory == "Knitwear"
        assert product.colors == ["Navy", "Oatmeal"]
        assert product.sizes == ["S", "M", "L"]
        assert product.featured is True
        assert product.trending is True
        assert product.new_arrival is False
        assert product.is_on_sale

    def test_image_url_seeds_the_gallery(self):
        product_id = _add_product(image_url="https://cdn.example.com/skirt.jpg")
        product = current_domain.repository_for(Product).get(product_id)
        assert product.image_urls == ["https://cdn.example.com/skirt.jpg"]

    def test_add_product_writes_to_event_store(self):
        product_id = _add_product(name="Event Test")

        messages = current_domain.event_store.store.read("catalogue::product")
        added = [
            m
            for m in messages
            if m.metadata.headers.type == "Catalogue.ProductAdded.v1" and m.data.get("product_id") == product_id
        ]
        assert len(added) == 1
