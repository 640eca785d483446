"""Product aggregate — the catalog record the storefront browses and prices from."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Float,
    Integer,
    List,
    String,
    Text,
)

from catalogue.domain import catalogue


@catalogue.aggregate
class Product:
    """Product aggregate root.

    Colors and sizes are the variant axes a shopper picks from when adding
    the product to a cart.
    """

    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    compare_at_price: Float(min_value=0.0)
    image_url: String(max_length=500)
    image_urls: List(content_type=String, default=list)
    category: String(required=True, max_length=100)
    subcategory: String(max_length=100)
    colors: List(content_type=String, default=list)
    sizes: List(content_type=String, default=list)
    rating: Float(default=0.0, min_value=0.0, max_value=5.0)
    review_count: Integer(default=0, min_value=0)
    featured: Boolean(default=False)
    trending: Boolean(default=False)
    new_arrival: Boolean(default=False)
    in_stock: Boolean(default=True)
    created_at: DateTime(default=datetime.now)

    @invariant.post
    def colors_and_sizes_must_not_contain_blanks(self):
        for axis in ("colors", "sizes"):
            values = getattr(self, axis) or []
            if any(value is None or not str(value).strip() for value in values):
                raise ValidationError({axis: [f"{axis.capitalize()} cannot contain blank values"]})

    @classmethod
    def create(
        cls,
        name,
        price,
        category,
        description=None,
        compare_at_price=None,
        image_url=None,
        image_urls=None,
        subcategory=None,
        colors=None,
        sizes=None,
        rating=0.0,
        review_count=0,
        featured=False,
        trending=False,
        new_arrival=False,
        in_stock=True,
    ):
        from catalogue.product.events import ProductAdded

        now = datetime.now()
        product = cls(
            name=name,
            description=description,
            price=price,
            compare_at_price=compare_at_price,
            image_url=image_url,
            image_urls=list(image_urls or ([image_url] if image_url else [])),
            category=category,
            subcategory=subcategory,
            colors=list(colors or []),
            sizes=list(sizes or []),
            rating=rating,
            review_count=review_count,
            featured=featured,
            trending=trending,
            new_arrival=new_arrival,
            in_stock=in_stock,
            created_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                category=category,
                price=price,
                created_at=now,
            )
        )
        return product

    @property
    def is_on_sale(self):
        return self.compare_at_price is not None and self.compare_at_price > self.price

    @property
    def savings(self):
        """Amount saved against the compare-at price, zero when not on sale."""
        if not self.is_on_sale:
            return 0.0
        return self.compare_at_price - self.price

    @property
    def requires_variant_selection(self):
        return bool(self.colors) or bool(self.sizes)
