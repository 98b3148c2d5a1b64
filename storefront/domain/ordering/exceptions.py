"""Ordering domain exceptions."""

from storefront.domain.common.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.common.value_objects.ids import OrderId, UserId


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order cannot be found."""

    def __init__(self, order_id: OrderId) -> None:
        super().__init__("Order", order_id)


class OrderUserNotFoundError(ValidationError):
    """
    Raised when an order references a user that does not exist.

    This is a caller input problem, not a lookup failure: the order itself
    was never found or missing, the reference in the request is wrong.
    """

    def __init__(self, user_id: UserId) -> None:
        super().__init__(
            f"User with id {user_id} does not exist", field="user_id", value=str(user_id)
        )
        self.user_id = user_id
