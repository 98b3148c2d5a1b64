import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from storefront.application.ordering import NewOrder, OrderChanges, OrderService
from storefront.domain.common.exceptions import DomainError
from storefront.domain.common.value_objects.ids import OrderId, UserId
from storefront.domain.ordering.entities.order import Order
from storefront.infrastructure.common.di import inject_service
from storefront.infrastructure.common.schemas import SuccessResponse
from storefront.infrastructure.ordering.schemas import (
    OrderCreateRequest,
    OrderResponse,
    OrdersListResponse,
    OrderUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])

OrderServiceDep = Annotated[OrderService, Depends(inject_service("order_service"))]


def _to_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id.value,
        user_id=order.user_id.value,
        status=order.status.value,
        total_cents=order.total_cents,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(request: OrderCreateRequest, service: OrderServiceDep) -> OrderResponse:
    """
    Create an order for an existing user.

    Args:
        request: Owning user, status and total of the new order
        service: OrderService injected via dependency container

    Returns:
        The created order

    Raises:
        HTTPException: 400 on an unknown status, a negative total or a missing user
    """
    try:
        order = service.create(
            NewOrder(
                user_id=UserId(request.user_id),
                status=request.status,
                total_cents=request.total_cents,
            )
        )
        return _to_response(order)
    except DomainError:
        # Re-raise domain errors - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to create order for user {request.user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("", response_model=OrdersListResponse, status_code=status.HTTP_200_OK)
def list_orders(service: OrderServiceDep) -> OrdersListResponse:
    """List all orders, oldest first."""
    try:
        orders = service.list_all()
        return OrdersListResponse(orders=[_to_response(order) for order in orders])
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to list orders: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{order_id}", response_model=OrderResponse, status_code=status.HTTP_200_OK)
def get_order(order_id: UUID, service: OrderServiceDep) -> OrderResponse:
    """Get an order by id."""
    try:
        return _to_response(service.get_by_id(OrderId(order_id)))
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to get order {order_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{order_id}", response_model=OrderResponse, status_code=status.HTTP_200_OK)
def update_order(
    order_id: UUID, request: OrderUpdateRequest, service: OrderServiceDep
) -> OrderResponse:
    """
    Update an order's status and/or total.

    The owning user is fixed at creation and cannot be changed here.
    """
    try:
        order = service.update(
            OrderId(order_id),
            OrderChanges(status=request.status, total_cents=request.total_cents),
        )
        return _to_response(order)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to update order {order_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{order_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def delete_order(order_id: UUID, service: OrderServiceDep) -> SuccessResponse:
    """Delete an order."""
    try:
        service.delete(OrderId(order_id))
        return SuccessResponse(success=True, message=f"Order {order_id} deleted")
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete order {order_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
