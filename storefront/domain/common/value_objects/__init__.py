from .ids import OrderId, ProductId, UserId

__all__ = [
    "OrderId",
    "ProductId",
    "UserId",
]
