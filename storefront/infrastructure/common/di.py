from collections.abc import Callable
from typing import Any

from dependency_injector import providers

from storefront.core import Container
from storefront.database import DatabaseSession


def inject_service(provider_name: str) -> Callable[[DatabaseSession], Any]:
    """
    Create a FastAPI dependency for a container provider.

    Each request gets its own container bound to its own database session,
    so concurrent requests never see each other's session.
    """

    def dependency(db: DatabaseSession) -> Any:  # noqa: ANN401
        container = Container(db=providers.Object(db))
        return getattr(container, provider_name)()

    return dependency
