"""Cart pricing: enrichment with live product data and totals.

Money is computed in ``Decimal`` from the stored float prices, so totals are
exact and linear in item quantities. Rounding to cents happens only when a
figure leaves the system (an order total or an API response).
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.exceptions import ProductMissing

TAX_RATE = Decimal("0.08")
SHIPPING = Decimal("0")
CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class CartLine:
    """A cart item joined with the product it refers to."""

    item: object
    product: Product

    @property
    def unit_price(self) -> Decimal:
        return to_decimal(self.product.price)

    @property
    def quantity(self) -> int:
        return self.item.quantity


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal

    def rounded(self) -> "CartTotals":
        return CartTotals(
            subtotal=round_money(self.subtotal),
            shipping=round_money(self.shipping),
            tax=round_money(self.tax),
            total=round_money(self.total),
        )


def compute_totals(lines) -> CartTotals:
    """Subtotal, flat zero shipping, 8% tax and grand total for priced lines."""
    subtotal = sum((to_decimal(line.unit_price) * line.quantity for line in lines), Decimal("0"))
    tax = subtotal * TAX_RATE
    return CartTotals(subtotal=subtotal, shipping=SHIPPING, tax=tax, total=subtotal + SHIPPING + tax)


def enrich_items(items) -> list[CartLine]:
    """Join cart items to their products with a single catalogue lookup.

    Raises ProductMissing when any referenced product no longer exists.
    """
    items = list(items)
    products = current_domain.repository_for(Product).find_many(item.product_id for item in items)

    missing = sorted({str(item.product_id) for item in items if str(item.product_id) not in products})
    if missing:
        raise ProductMissing({"product_id": [f"Product {pid} is no longer available" for pid in missing]})

    return [CartLine(item=item, product=products[str(item.product_id)]) for item in items]
