from protean.domain import Domain
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from storefront.exceptions import StoreError

_RDBMS_PROVIDERS = ("sqlite", "postgresql")


def _register_models(domain: Domain, provider) -> None:
    # Accessing a repository's _dao forces its SQLAlchemy model to be built and
    # registered on the provider's metadata.
    for _, aggregate_record in domain.registry.aggregates.items():
        if aggregate_record.cls.meta_.provider == provider.name:
            domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

    for _, entity_record in domain.registry.entities.items():
        if entity_record.cls.meta_.provider == provider.name:
            domain.repository_for(entity_record.cls)._dao  # noqa: B018


def _relational_providers(domain: Domain):
    return [p for _, p in domain.providers.items() if p.conn_info["provider"] in _RDBMS_PROVIDERS]


def setup_db(domain: Domain):
    """Create the storefront tables (products, carts, cart_items, orders, ...)."""
    with domain.domain_context():
        for provider in _relational_providers(domain):
            _register_models(domain, provider)
            try:
                provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))
            except SQLAlchemyError as exc:
                raise StoreError(f"Could not create storefront schema: {exc}") from exc


def drop_db(domain: Domain):
    """Drop the storefront tables."""
    with domain.domain_context():
        for provider in _relational_providers(domain):
            _register_models(domain, provider)
            try:
                provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
            except SQLAlchemyError as exc:
                raise StoreError(f"Could not drop storefront schema: {exc}") from exc
