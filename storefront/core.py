from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from storefront.application.catalog.services.product_service import ProductService
from storefront.application.identity.services.user_service import UserService
from storefront.application.ordering.services.order_service import OrderService
from storefront.infrastructure.catalog.repositories.product_repository import ProductRepository
from storefront.infrastructure.identity.repositories.user_repository import UserRepository
from storefront.infrastructure.ordering.repositories.order_repository import OrderRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided per request
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    product_repository = providers.Factory(ProductRepository, db=db)
    order_repository = providers.Factory(OrderRepository, db=db)

    # Identity services
    user_service = providers.Factory(
        UserService,
        user_repository=user_repository,
    )

    # Catalog services
    product_service = providers.Factory(
        ProductService,
        product_repository=product_repository,
    )

    # Ordering services
    order_service = providers.Factory(
        OrderService,
        order_repository=order_repository,
        user_repository=user_repository,
    )
