"""Product aggregate: the sellable shoe and its catalogue presentation."""

import json
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Integer, String, Text

from storefront.catalogue.events import ProductCreated, ProductPriceChanged, ProductStockAdjusted
from storefront.domain import storefront


class ProductBadge(Enum):
    HOT = "HOT!"
    NEW = "NEW"
    LIMITED = "LIMITED"
    LIGHT = "LIGHT"


def _as_json_list(value):
    if value is None:
        return json.dumps([])
    if isinstance(value, str):
        return value
    return json.dumps(list(value))


@storefront.aggregate(schema_name="products")
class Product:
    """A dinosaur-themed shoe.

    List-valued attributes (gallery images, colours, sizes) are kept as JSON
    arrays so that their order is preserved exactly as entered.
    """

    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    image_url: String(required=True, max_length=500)
    image_urls: Text()
    category: String(required=True, max_length=100)
    collection: String(required=True, max_length=100)
    colors: Text()
    sizes: Text()
    is_featured: Boolean(default=False)
    badge: String(max_length=20)
    dino_facts: Text()
    stock: Integer(default=10, min_value=0)

    @invariant.post
    def badge_must_be_known(self):
        if self.badge and self.badge not in {b.value for b in ProductBadge}:
            raise ValidationError({"badge": [f"Unknown badge '{self.badge}'"]})

    @classmethod
    def create(
        cls,
        name,
        description,
        price,
        image_url,
        category,
        collection,
        image_urls=None,
        colors=None,
        sizes=None,
        is_featured=False,
        badge=None,
        dino_facts=None,
        stock=10,
    ):
        product = cls(
            name=name,
            description=description,
            price=price,
            image_url=image_url,
            image_urls=_as_json_list(image_urls),
            category=category,
            collection=collection,
            colors=_as_json_list(colors),
            sizes=_as_json_list(sizes),
            is_featured=is_featured,
            badge=badge,
            dino_facts=dino_facts,
            stock=stock,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                price=price,
                category=category,
                collection=collection,
            )
        )
        return product

    @property
    def image_url_list(self):
        return json.loads(self.image_urls) if self.image_urls else []

    @property
    def color_list(self):
        return json.loads(self.colors) if self.colors else []

    @property
    def size_list(self):
        return json.loads(self.sizes) if self.sizes else []

    def change_price(self, new_price):
        if new_price is None or new_price < 0:
            raise ValidationError({"price": ["Price must be zero or greater"]})

        previous_price = self.price
        self.price = new_price

        self.raise_(
            ProductPriceChanged(
                product_id=self.id,
                previous_price=previous_price,
                new_price=new_price,
            )
        )

    def adjust_stock(self, delta):
        new_stock = self.stock + delta
        if new_stock < 0:
            raise ValidationError({"stock": ["Stock cannot go below zero"]})

        previous_stock = self.stock
        self.stock = new_stock

        self.raise_(
            ProductStockAdjusted(
                product_id=self.id,
                previous_stock=previous_stock,
                new_stock=new_stock,
            )
        )
