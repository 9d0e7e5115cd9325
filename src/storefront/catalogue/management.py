"""Product price, stock and removal: commands and handler."""

import structlog
from protean import handle
from protean.fields import Float, Identifier, Integer
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class UpdateProductPrice:
    product_id: Identifier(required=True)
    new_price: Float(required=True, min_value=0.0)


@storefront.command(part_of="Product")
class AdjustStock:
    product_id: Identifier(required=True)
    delta: Integer(required=True)


@storefront.command(part_of="Product")
class DeleteProduct:
    """Take a product out of the catalogue.

    Placed orders keep their snapshots. Carts that still hold the product
    report it as missing until the line is removed.
    """

    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProductPrice)
    def update_price(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.change_price(command.new_price)
        repo.add(product)

    @handle(AdjustStock)
    def adjust_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.adjust_stock(command.delta)
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("product_deleted", product_id=str(product.id), name=product.name)
