"""Product creation: command and handler."""

import structlog
from protean import handle
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    image_url: String(required=True, max_length=500)
    image_urls: Text()  # JSON array
    category: String(required=True, max_length=100)
    collection: String(required=True, max_length=100)
    colors: Text()  # JSON array
    sizes: Text()  # JSON array
    is_featured: Boolean(default=False)
    badge: String(max_length=20)
    dino_facts: Text()
    stock: Integer(default=10, min_value=0)


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            image_url=command.image_url,
            image_urls=command.image_urls,
            category=command.category,
            collection=command.collection,
            colors=command.colors,
            sizes=command.sizes,
            is_featured=command.is_featured,
            badge=command.badge,
            dino_facts=command.dino_facts,
            stock=command.stock,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("product_created", product_id=str(product.id), name=product.name)
        return str(product.id)
