"""Product creation — command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Integer, List, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue, logger
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    compare_at_price: Float(min_value=0.0)
    image_url: String(max_length=500)
    image_urls: List(content_type=String)
    category: String(required=True, max_length=100)
    subcategory: String(max_length=100)
    colors: List(content_type=String)
    sizes: List(content_type=String)
    rating: Float(default=0.0)
    review_count: Integer(default=0)
    featured: Boolean(default=False)
    trending: Boolean(default=False)
    new_arrival: Boolean(default=False)
    in_stock: Boolean(default=True)


@catalogue.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            compare_at_price=command.compare_at_price,
            image_url=command.image_url,
            image_urls=command.image_urls,
            category=command.category,
            subcategory=command.subcategory,
            colors=command.colors,
            sizes=command.sizes,
            rating=command.rating or 0.0,
            review_count=command.review_count or 0,
            featured=bool(command.featured),
            trending=bool(command.trending),
            new_arrival=bool(command.new_arrival),
            in_stock=command.in_stock if command.in_stock is not None else True,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("product_added", product_id=str(product.id), category=product.category)
        return str(product.id)
