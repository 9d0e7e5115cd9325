"""Storefront bounded context: catalogue, cart, checkout and style quiz.

A single domain hosts every aggregate so that a cart can be priced against the
live catalogue and converted into an order inside one unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging

configure_logging(log_dir="logs", log_file_prefix="storefront")


storefront = Domain(name="storefront")
