"""Catalogue read queries."""

from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.repository(part_of=Product)
class ProductRepository:
    """Read-side queries over the product catalogue.

    Collection and category matches are case-insensitive but exact: "running"
    matches "Running" and never "Trail Running".
    """

    def all_products(self) -> list[Product]:
        return self._dao.query.order_by("name").all().items

    def featured(self) -> list[Product]:
        return self._dao.query.filter(is_featured=True).order_by("name").all().items

    def in_collection(self, collection: str) -> list[Product]:
        return self._dao.query.filter(collection__iexact=collection).order_by("name").all().items

    def in_category(self, category: str) -> list[Product]:
        return self._dao.query.filter(category__iexact=category).order_by("name").all().items

    def find_many(self, product_ids) -> dict[str, Product]:
        """Fetch several products in one query, keyed by id. Unknown ids are absent."""
        ids = list({str(pid) for pid in product_ids})
        if not ids:
            return {}
        products = self._dao.query.filter(id__in=ids).all().items
        return {str(p.id): p for p in products}
