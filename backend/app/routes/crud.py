"""
Roster API - In-Memory CRUD Lesson (api6)
=========================================

What:  Full create/read/update/delete cycle over an in-memory user list.
How:   Routes stay thin: they bind the body, call the lesson's
       UserRepository and choose the status code. Missing users and blank
       names surface as NotFoundError / ValidationError, which the global
       handlers render as 404 (empty) and 400 (envelope).

Route Inventory:
    GET    /api6/users          → 200 list
    GET    /api6/users/{id}     → 200 user | 404
    POST   /api6/users          → 201 user + Location | 400
    PUT    /api6/users/{id}     → 204 | 404 | 400
    DELETE /api6/users/{id}     → 204 | 404
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import UserIdPath, get_crud_repository
from app.schemas.user import ApiResponse, UserRequest, UserResponse
from app.services.user_repository import UserRepository

logger = logging.getLogger(__name__)

PREFIX = "/api6"

router = APIRouter(prefix=PREFIX, tags=["#6: CRUD - In-Memory"])


@router.get("/users", response_model=List[UserResponse], summary="List all users")
async def list_users(
    repo: UserRepository = Depends(get_crud_repository),
) -> List[UserResponse]:
    return [UserResponse.model_validate(user) for user in repo.list_all()]


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={404: {"description": "User not found"}},
    summary="Get a user by id",
)
async def get_user(
    user_id: UserIdPath,
    repo: UserRepository = Depends(get_crud_repository),
) -> UserResponse:
    return UserResponse.model_validate(repo.get_by_id(user_id))


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    responses={400: {"description": "Name is blank", "model": ApiResponse[str]}},
    summary="Create a user",
)
async def create_user(
    body: UserRequest,
    response: Response,
    repo: UserRepository = Depends(get_crud_repository),
) -> UserResponse:
    """
    Create a user from the posted name.

    Any id in the body is ignored; the repository assigns max id + 1.
    The Location header points at the new resource.
    """
    user = repo.create(body.name)
    response.headers["Location"] = f"{PREFIX}/users/{user.id}"
    return UserResponse.model_validate(user)


@router.put(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Name is blank", "model": ApiResponse[str]},
        404: {"description": "User not found"},
    },
    summary="Rename a user",
)
async def update_user(
    user_id: UserIdPath,
    body: UserRequest,
    repo: UserRepository = Depends(get_crud_repository),
) -> Response:
    repo.update(user_id, body.name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "User not found"}},
    summary="Delete a user",
)
async def delete_user(
    user_id: UserIdPath,
    repo: UserRepository = Depends(get_crud_repository),
) -> Response:
    repo.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
