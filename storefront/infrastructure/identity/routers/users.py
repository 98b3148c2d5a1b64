import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from storefront.application.identity import NewUser, UserChanges, UserService
from storefront.domain.common.exceptions import DomainError
from storefront.domain.common.value_objects.ids import UserId
from storefront.domain.identity.entities.user import User
from storefront.infrastructure.common.di import inject_service
from storefront.infrastructure.common.schemas import SuccessResponse
from storefront.infrastructure.identity.schemas import (
    UserCreateRequest,
    UserResponse,
    UsersListResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

UserServiceDep = Annotated[UserService, Depends(inject_service("user_service"))]


def _to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id.value,
        email=user.email,
        name=user.name,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(request: UserCreateRequest, service: UserServiceDep) -> UserResponse:
    """
    Create a user.

    Args:
        request: Email and name of the new user
        service: UserService injected via dependency container

    Returns:
        The created user

    Raises:
        HTTPException: 400 on invalid fields, 409 if the email is taken
    """
    try:
        user = service.create(NewUser(email=request.email, name=request.name))
        return _to_response(user)
    except DomainError:
        # Re-raise domain errors - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to create user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("", response_model=UsersListResponse, status_code=status.HTTP_200_OK)
def list_users(service: UserServiceDep) -> UsersListResponse:
    """List all users, oldest first."""
    try:
        users = service.list_all()
        return UsersListResponse(users=[_to_response(user) for user in users])
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to list users: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{user_id}", response_model=UserResponse, status_code=status.HTTP_200_OK)
def get_user(user_id: UUID, service: UserServiceDep) -> UserResponse:
    """
    Get a user by id.

    Raises:
        HTTPException: 404 if the user does not exist
    """
    try:
        return _to_response(service.get_by_id(UserId(user_id)))
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to get user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{user_id}", response_model=UserResponse, status_code=status.HTTP_200_OK)
def update_user(
    user_id: UUID, request: UserUpdateRequest, service: UserServiceDep
) -> UserResponse:
    """
    Update a user's email and/or name.

    Fields left out of the body keep their current value.

    Raises:
        HTTPException: 400 on invalid fields, 404 if missing, 409 if the email is taken
    """
    try:
        user = service.update(
            UserId(user_id), UserChanges(email=request.email, name=request.name)
        )
        return _to_response(user)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to update user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{user_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def delete_user(user_id: UUID, service: UserServiceDep) -> SuccessResponse:
    """
    Delete a user.

    A user that still has orders cannot be deleted; their orders are never
    removed implicitly.

    Raises:
        HTTPException: 404 if the user does not exist, 409 if it has orders
    """
    try:
        service.delete(UserId(user_id))
        return SuccessResponse(success=True, message=f"User {user_id} deleted")
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
