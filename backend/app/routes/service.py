"""
Roster API - Services and DI Lesson (api8)
==========================================

What:  The same user operations as lesson 6, but the store is a service
       resolved through FastAPI's dependency injection.
How:   `get_user_service` hands every route the application's shared
       service repository; lesson 10 pages over the same store.

Route Inventory:
    GET  /api8/users          → 200 list
    GET  /api8/users/{id}     → 200 user | 404
    POST /api8/users          → 201 user + Location | 400
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import UserIdPath, get_user_service
from app.schemas.user import ApiResponse, CreateUserRequest, UserResponse
from app.services.user_repository import UserRepository

logger = logging.getLogger(__name__)

PREFIX = "/api8"

router = APIRouter(prefix=PREFIX, tags=["#8: DI and Services"])


@router.get("/users", response_model=List[UserResponse], summary="List all users (service)")
async def list_users(
    service: UserRepository = Depends(get_user_service),
) -> List[UserResponse]:
    users = service.list_all()
    logger.debug("Service returned %d users", len(users))
    return [UserResponse.model_validate(user) for user in users]


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={404: {"description": "User not found"}},
    summary="Get a user by id (service)",
)
async def get_user(
    user_id: UserIdPath,
    service: UserRepository = Depends(get_user_service),
) -> UserResponse:
    return UserResponse.model_validate(service.get_by_id(user_id))


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    responses={400: {"description": "Name is blank", "model": ApiResponse[str]}},
    summary="Create a user (service)",
)
async def create_user(
    body: CreateUserRequest,
    response: Response,
    service: UserRepository = Depends(get_user_service),
) -> UserResponse:
    """
    Create a user through the service.

    An omitted name falls back to "noname"; an explicit blank or null
    name is rejected with 400.
    """
    user = service.create(body.name)
    response.headers["Location"] = f"{PREFIX}/users/{user.id}"
    return UserResponse.model_validate(user)
